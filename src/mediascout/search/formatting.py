"""Display helpers for torrent sizes and publish dates."""

from __future__ import annotations

import logging
from datetime import datetime

logger = logging.getLogger(__name__)

SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
_K = 1024


def format_size(size_bytes: int, decimals: int = 2) -> str:
    """Render a byte count with binary units, e.g. ``1572864`` → ``"1.5 MB"``.

    Trailing zeros are dropped, so exact multiples render as ``"1 KB"``.
    """
    if size_bytes <= 0:
        return "0 Bytes"

    index = 0
    while index < len(SIZE_UNITS) - 1 and size_bytes >= _K ** (index + 1):
        index += 1
    value = round(size_bytes / _K**index, max(decimals, 0))
    text = f"{value:.{max(decimals, 0)}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[index]}"


def format_display_date(publish_date: str) -> str:
    """Render an ISO 8601 timestamp in the host locale's short date format.

    Timezone-aware timestamps are converted to local time first. Returns an
    empty string when the timestamp cannot be parsed.
    """
    if not publish_date:
        return ""
    try:
        parsed = datetime.fromisoformat(publish_date)
    except ValueError:
        logger.debug("unparseable publish date %r", publish_date)
        return ""

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.strftime("%x")
