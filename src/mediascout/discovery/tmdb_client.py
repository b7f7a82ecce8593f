"""TMDB discover API client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from mediascout.shared.enums import MediaKind
from mediascout.shared.exceptions import ConfigurationError, RemoteServiceError
from mediascout.shared.models import DiscoveryItem

logger = logging.getLogger(__name__)

TMDB_BASE_URL = "https://api.themoviedb.org/3"
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"

# Fixed discover filters: most popular first, titles streamable in the US.
_DISCOVER_PARAMS: dict[str, str] = {
    "sort_by": "popularity.desc",
    "watch_region": "US",
    "with_watch_monetization_types": "flatrate|rent|buy",
    "include_adult": "false",
    "language": "en-US",
}


class TmdbDiscoveryClient:
    """List popular movies and TV shows via TMDB's discover endpoint.

    Implements the ``DiscoveryProvider`` protocol. Unlike the torrent
    search client, failures never propagate: they are logged and the
    caller receives an empty page.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = TMDB_BASE_URL,
        image_base_url: str = TMDB_IMAGE_BASE_URL,
        timeout: float = 15.0,
    ) -> None:
        if not api_key:
            raise ConfigurationError("TMDB_API_KEY is not set")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._image_base_url = image_base_url.rstrip("/")
        self._timeout = timeout

    async def discover(self, page: int = 1, media_kind: MediaKind = MediaKind.MOVIE) -> list[DiscoveryItem]:
        """Fetch one page of popular titles.

        Args:
            page: 1-based page number.
            media_kind: ``MediaKind.MOVIE`` or ``MediaKind.TV``.

        Returns:
            Parsed items, or ``[]`` if TMDB could not be reached or answered
            with something unusable.
        """
        try:
            media_kind = MediaKind(media_kind)
        except ValueError:
            logger.error("discovery skipped: unsupported media kind %r", media_kind)
            return []

        try:
            data = await self._fetch(page, media_kind)
            items = [self._to_item(entry, media_kind) for entry in data["results"]]
        except RemoteServiceError as exc:
            logger.error("discovery error (page=%d, kind=%s): %s", page, media_kind.value, exc)
            return []
        except httpx.HTTPError as exc:
            logger.error("discovery request failed (page=%d, kind=%s): %s", page, media_kind.value, exc)
            return []
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            logger.error("discovery payload unusable (page=%d, kind=%s): %s", page, media_kind.value, exc)
            return []

        logger.info("tmdb returned %d %s titles for page=%d", len(items), media_kind.value, page)
        return items

    async def _fetch(self, page: int, media_kind: MediaKind) -> Any:
        url = f"{self._base_url}/discover/{media_kind.value}"
        params: dict[str, Any] = {"api_key": self._api_key, **_DISCOVER_PARAMS, "page": str(page)}

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            resp = await client.get(url, params=params)

        if not resp.is_success:
            raise RemoteServiceError("tmdb", resp.status_code, resp.text[:200])
        return resp.json()

    def _to_item(self, entry: dict[str, Any], media_kind: MediaKind) -> DiscoveryItem:
        # Movies carry "title"/"release_date", TV shows "name"/"first_air_date".
        poster_path = entry.get("poster_path")
        return DiscoveryItem(
            id=entry["id"],
            title=entry.get("title") or entry.get("name") or "",
            poster_url=f"{self._image_base_url}{poster_path}" if poster_path else "",
            release_date=entry.get("release_date") or entry.get("first_air_date") or "",
            overview=entry.get("overview") or "",
            media_kind=media_kind,
        )
