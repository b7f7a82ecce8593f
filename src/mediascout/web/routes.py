"""API routes for mediascout."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request

from mediascout.shared.enums import MediaKind
from mediascout.shared.exceptions import RemoteServiceError, SearchFailedError
from mediascout.shared.models import TaggedTorrent, TorrentResult
from mediascout.tagging.extractor import extract_tags
from mediascout.tagging.rules import known_labels

router = APIRouter()

# TMDB refuses pages beyond 500.
MAX_DISCOVER_PAGE = 500


def _state(request: Request, key: str) -> Any:
    return getattr(request.app.state, key, None)


def _get_searcher(request: Request) -> Any:
    searcher = _state(request, "searcher")
    if searcher is None or not hasattr(searcher, "search"):
        raise HTTPException(status_code=503, detail="torrent search unavailable")
    return searcher


def _get_discoverer(request: Request) -> Any:
    discoverer = _state(request, "discoverer")
    if discoverer is None or not hasattr(discoverer, "discover"):
        raise HTTPException(status_code=503, detail="discovery unavailable")
    return discoverer


def _tag(result: TorrentResult) -> TaggedTorrent:
    return TaggedTorrent(**result.model_dump(), tags=extract_tags(result.title).as_dict())


@router.get("/api/search")
async def search_torrents(request: Request, q: str = Query(default="", max_length=500)) -> dict[str, Any]:
    """Search torrents and attach the tags parsed from each title."""
    searcher = _get_searcher(request)
    try:
        results = await searcher.search(q)
    except RemoteServiceError as exc:
        raise HTTPException(status_code=502, detail=f"indexer responded with {exc.status_code}") from exc
    except SearchFailedError as exc:
        raise HTTPException(status_code=502, detail="Failed to fetch results") from exc

    tagged = [_tag(result).model_dump(mode="json") for result in results]
    return {"query": q, "count": len(tagged), "results": tagged}


@router.get("/api/discover")
async def discover(
    request: Request,
    page: int = Query(default=1, ge=1, le=MAX_DISCOVER_PAGE),
    media_kind: MediaKind = Query(default=MediaKind.MOVIE),
) -> dict[str, Any]:
    """List popular titles; upstream failures yield an empty list."""
    discoverer = _get_discoverer(request)
    items = await discoverer.discover(page=page, media_kind=media_kind)
    return {
        "page": page,
        "media_kind": media_kind.value,
        "results": [item.model_dump(mode="json") for item in items],
    }


@router.get("/api/tags")
async def tags_for_title(title: str = Query(default="", max_length=1000)) -> dict[str, list[str]]:
    """Tag an arbitrary release title."""
    return extract_tags(title).as_dict()


@router.get("/api/tags/labels")
async def tag_labels() -> dict[str, list[str]]:
    """Every label the tagger can emit, keyed by category."""
    return {category.value: list(labels) for category, labels in known_labels().items()}


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Status dictionary
    """
    return {"status": "ok"}
