"""Interfaces for the torrent search module."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from mediascout.shared.models import TorrentResult


@runtime_checkable
class TorrentSearcher(Protocol):
    """Protocol for searching torrent indexers."""

    async def search(self, query: str) -> list[TorrentResult]:
        """Search every configured indexer and return normalised results.

        Args:
            query: Free-text search query. Empty queries return ``[]``.

        Returns:
            List of ``TorrentResult`` records, adult categories excluded.

        Raises:
            RemoteServiceError: If the indexer answers with a non-2xx status.
            SearchFailedError: On network or payload failures.
        """
        ...
