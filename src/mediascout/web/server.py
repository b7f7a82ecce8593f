"""Console entry point that serves the mediascout API with uvicorn."""

from __future__ import annotations

import logging

import uvicorn

from mediascout.config import get_settings
from mediascout.shared.exceptions import ConfigurationError
from mediascout.web.app import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    """Entry point for ``mediascout`` / ``python -m mediascout.web.server``."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app = create_app(settings)
    except ConfigurationError as exc:
        logger.error("cannot start: %s", exc)
        raise SystemExit(1) from exc

    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
