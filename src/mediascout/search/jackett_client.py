"""Jackett API client for torrent indexer search."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from mediascout.search.formatting import format_display_date, format_size
from mediascout.shared.exceptions import RemoteServiceError, SearchFailedError
from mediascout.shared.models import TorrentResult

logger = logging.getLogger(__name__)

RESULT_LIMIT = 1000
_BLOCKED_CATEGORY = "xxx"


class JackettClient:
    """Search torrent indexers via the Jackett API.

    Implements the ``TorrentSearcher`` protocol.
    """

    def __init__(self, base_url: str, api_key: str, *, timeout: float = 30.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout

    async def search(self, query: str) -> list[TorrentResult]:
        """Query Jackett's unified endpoint and return normalised results.

        Args:
            query: Search query string. An empty query short-circuits to ``[]``
                without contacting Jackett.

        Returns:
            List of ``TorrentResult`` with adult categories removed.

        Raises:
            RemoteServiceError: If Jackett answers with a non-2xx status.
            SearchFailedError: If the request or the payload is unusable.
        """
        if not query or not query.strip():
            return []

        url = f"{self._base_url}/api/v2.0/indexers/all/results"
        params: dict[str, Any] = {
            "query": query,
            "apikey": self._api_key,
            "limit": RESULT_LIMIT,
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.get(url, params=params)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error("jackett API error for query=%r: %d %s", query, status, exc.response.reason_phrase)
            raise RemoteServiceError("jackett", status, exc.response.text[:200]) from exc
        except httpx.HTTPError as exc:
            logger.error("jackett request failed for query=%r: %s", query, exc)
            raise SearchFailedError("Failed to fetch results") from exc
        except ValueError as exc:
            logger.error("jackett returned invalid JSON for query=%r: %s", query, exc)
            raise SearchFailedError("Failed to fetch results") from exc

        try:
            results = self._parse_results(data)
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            logger.error("jackett returned a malformed payload for query=%r: %s", query, exc)
            raise SearchFailedError("Failed to fetch results") from exc

        logger.info("jackett returned %d results for query=%r", len(results), query)
        return results

    def _parse_results(self, data: Any) -> list[TorrentResult]:
        results: list[TorrentResult] = []
        for item in data["Results"]:
            category = item.get("CategoryDesc") or ""
            if _BLOCKED_CATEGORY in category.lower():
                continue
            results.append(_to_result(item))
        return results


def _non_negative(item: dict[str, Any], key: str) -> int:
    value = int(item.get(key) or 0)
    if value < 0:
        logger.warning("clamping negative %s=%d for %r", key, value, item.get("Title"))
        return 0
    return value


def _to_result(item: dict[str, Any]) -> TorrentResult:
    size_bytes = _non_negative(item, "Size")
    publish_date = item.get("PublishDate") or ""
    return TorrentResult(
        title=item.get("Title") or "",
        magnet_link=item.get("MagnetUri") or "",
        seeder_count=_non_negative(item, "Seeders"),
        peer_count=_non_negative(item, "Peers"),
        human_readable_size=format_size(size_bytes),
        size_bytes=size_bytes,
        display_date=format_display_date(publish_date),
        publish_date=publish_date,
        tracker_name=item.get("Tracker") or "",
    )
