"""Tests for frozen Pydantic domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mediascout.shared.enums import MediaKind, TagCategory
from mediascout.shared.models import DiscoveryItem, TaggedTorrent, TagSet, TorrentResult


class TestTorrentResult:
    def test_frozen_raises_on_mutation(self, sample_torrent: TorrentResult) -> None:
        with pytest.raises(ValidationError):
            sample_torrent.title = "changed"  # type: ignore[misc]

    def test_negative_counts_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TorrentResult(title="X", human_readable_size="0 Bytes", seeder_count=-1)

    def test_defaults(self) -> None:
        result = TorrentResult(title="X", human_readable_size="0 Bytes")
        assert result.magnet_link == ""
        assert result.size_bytes == 0
        assert result.tracker_name == ""


class TestDiscoveryItem:
    def test_media_kind_defaults_to_movie(self) -> None:
        item = DiscoveryItem(id=1)
        assert item.media_kind == MediaKind.MOVIE
        assert item.poster_url == ""

    def test_serialises_media_kind_as_string(self, sample_discovery_item: DiscoveryItem) -> None:
        assert sample_discovery_item.model_dump(mode="json")["media_kind"] == "movie"


class TestTagSet:
    def test_empty_has_all_categories(self) -> None:
        tags = TagSet()
        assert tags.as_dict() == {"Resolution": [], "Source": [], "Codec": [], "Audio": [], "Other": []}
        assert tags.is_empty

    def test_labels_by_category(self) -> None:
        tags = TagSet(audio=("5.1", "DTS"))
        assert tags.labels(TagCategory.AUDIO) == ("5.1", "DTS")
        assert tags.labels(TagCategory.CODEC) == ()
        assert not tags.is_empty


class TestTaggedTorrent:
    def test_extends_torrent_result(self, sample_torrent: TorrentResult) -> None:
        tagged = TaggedTorrent(**sample_torrent.model_dump(), tags={"Resolution": ["1080p"]})
        assert tagged.title == sample_torrent.title
        assert tagged.tags["Resolution"] == ["1080p"]
