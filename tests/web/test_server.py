"""Tests for the uvicorn entry point."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from mediascout.config import Settings
from mediascout.web import server


def test_main_runs_uvicorn(settings: Settings) -> None:
    with (
        patch("mediascout.web.server.get_settings", return_value=settings),
        patch("mediascout.web.server.uvicorn.run") as mock_run,
    ):
        server.main()

    mock_run.assert_called_once()
    _args, kwargs = mock_run.call_args
    assert kwargs["host"] == settings.server_host
    assert kwargs["port"] == settings.server_port
    assert kwargs["log_level"] == "info"


def test_main_exits_on_missing_credentials() -> None:
    with (
        patch("mediascout.web.server.get_settings", return_value=Settings(jackett_api_key="", tmdb_api_key="")),
        patch("mediascout.web.server.uvicorn.run", new_callable=MagicMock) as mock_run,
        pytest.raises(SystemExit) as exc_info,
    ):
        server.main()

    assert exc_info.value.code == 1
    mock_run.assert_not_called()
