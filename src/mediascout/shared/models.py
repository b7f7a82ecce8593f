"""Frozen Pydantic domain models shared by all modules."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mediascout.shared.enums import MediaKind, TagCategory


class TorrentResult(BaseModel):
    """A single release returned by the indexer aggregator."""

    model_config = {"frozen": True}

    title: str
    magnet_link: str = ""
    seeder_count: int = Field(default=0, ge=0)
    peer_count: int = Field(default=0, ge=0)
    human_readable_size: str
    size_bytes: int = Field(default=0, ge=0)
    display_date: str = ""
    publish_date: str = ""
    tracker_name: str = ""


class DiscoveryItem(BaseModel):
    """A popular movie or TV show listed by the metadata service."""

    model_config = {"frozen": True}

    id: int
    title: str = ""
    poster_url: str = ""
    release_date: str = ""
    overview: str = ""
    media_kind: MediaKind = MediaKind.MOVIE


class TagSet(BaseModel):
    """Labels extracted from a release title, grouped by category.

    Every category is a sorted tuple of unique labels and is always
    present, even when empty.
    """

    model_config = {"frozen": True}

    resolution: tuple[str, ...] = ()
    source: tuple[str, ...] = ()
    codec: tuple[str, ...] = ()
    audio: tuple[str, ...] = ()
    other: tuple[str, ...] = ()

    def labels(self, category: TagCategory) -> tuple[str, ...]:
        """Return the labels recorded for one category."""
        return getattr(self, category.name.lower())

    def as_dict(self) -> dict[str, list[str]]:
        """Return ``{"Resolution": [...], ...}`` with all five categories."""
        return {category.value: list(self.labels(category)) for category in TagCategory}

    @property
    def is_empty(self) -> bool:
        return not any(self.labels(category) for category in TagCategory)


class TaggedTorrent(TorrentResult):
    """A torrent result enriched with the tags parsed from its title."""

    tags: dict[str, list[str]] = Field(default_factory=dict)
