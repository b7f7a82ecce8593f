"""Hierarchical exception types for mediascout."""

from __future__ import annotations


class MediascoutError(Exception):
    """Base exception for all mediascout errors."""


# ── Configuration ───────────────────────────────────────────────


class ConfigurationError(MediascoutError):
    """A required setting or credential is missing."""


# ── Upstream services ───────────────────────────────────────────


class RemoteServiceError(MediascoutError):
    """An upstream API answered with a non-success HTTP status."""

    def __init__(self, service: str, status_code: int, message: str = "") -> None:
        self.service = service
        self.status_code = status_code
        detail = f"{service} responded with {status_code}"
        if message:
            detail = f"{detail}: {message}"
        super().__init__(detail)


# ── Search ──────────────────────────────────────────────────────


class SearchFailedError(MediascoutError):
    """Torrent search failed below the HTTP status level (network, parse)."""
