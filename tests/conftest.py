"""Shared pytest fixtures for the mediascout test suite."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from mediascout.config import Settings
from mediascout.shared.enums import MediaKind
from mediascout.shared.models import DiscoveryItem, TorrentResult


@pytest.fixture()
def settings() -> Settings:
    """Return a Settings instance with test defaults."""
    return Settings(
        jackett_url="http://jackett:9117",
        jackett_api_key="jackett-key",
        tmdb_api_key="tmdb-key",
        tmdb_base_url="https://tmdb.test/3",
        http_timeout_seconds=5,
    )


@pytest.fixture()
def sample_torrent() -> TorrentResult:
    return TorrentResult(
        title="Movie.2024.1080p.BluRay.x264.DTS.5.1",
        magnet_link="magnet:?xt=urn:btih:abc123",
        seeder_count=42,
        peer_count=7,
        human_readable_size="1.45 GB",
        size_bytes=1556925645,
        display_date="01/15/24",
        publish_date="2024-01-15T10:30:00",
        tracker_name="1337x",
    )


@pytest.fixture()
def sample_discovery_item() -> DiscoveryItem:
    return DiscoveryItem(
        id=603,
        title="The Matrix",
        poster_url="https://image.tmdb.org/t/p/w500/matrix.jpg",
        release_date="1999-03-31",
        overview="A hacker learns the truth.",
        media_kind=MediaKind.MOVIE,
    )


@pytest.fixture()
def mock_searcher(sample_torrent: TorrentResult) -> AsyncMock:
    """Mock torrent searcher returning one result."""
    mock = AsyncMock()
    mock.search = AsyncMock(return_value=[sample_torrent])
    return mock


@pytest.fixture()
def mock_discoverer(sample_discovery_item: DiscoveryItem) -> AsyncMock:
    """Mock discovery provider returning one item."""
    mock = AsyncMock()
    mock.discover = AsyncMock(return_value=[sample_discovery_item])
    return mock
