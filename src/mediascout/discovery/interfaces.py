"""Interfaces for the discovery module."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from mediascout.shared.enums import MediaKind
from mediascout.shared.models import DiscoveryItem


@runtime_checkable
class DiscoveryProvider(Protocol):
    """Protocol for listing popular titles from a metadata service."""

    async def discover(self, page: int = 1, media_kind: MediaKind = MediaKind.MOVIE) -> list[DiscoveryItem]:
        """Return one page of popular titles.

        Failures are logged and reported as an empty list.

        Args:
            page: 1-based page number passed through to the service.
            media_kind: Whether to list movies or TV shows.

        Returns:
            List of ``DiscoveryItem`` records.
        """
        ...
