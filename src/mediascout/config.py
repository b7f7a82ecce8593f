"""Centralised configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from mediascout.shared.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application-wide configuration loaded from environment variables."""

    model_config = {"env_prefix": "", "frozen": True}

    # Jackett
    jackett_url: str = "http://localhost:9117"
    jackett_api_key: str = ""

    # TMDB
    tmdb_api_key: str = ""
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_image_base_url: str = "https://image.tmdb.org/t/p/w500"

    # Outbound HTTP
    http_timeout_seconds: float = 15.0

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = 8000
    log_level: str = "INFO"
    # Comma-separated list; "*" allows any origin.
    cors_origins: str = "*"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def validate_required(self) -> None:
        """Fail fast when a credential the proxies need is missing.

        Raises:
            ConfigurationError: Naming every missing variable at once.
        """
        missing = [
            name.upper()
            for name in ("jackett_url", "jackett_api_key", "tmdb_api_key")
            if not getattr(self, name).strip()
        ]
        if missing:
            raise ConfigurationError(f"missing required settings: {', '.join(missing)}")


def get_settings() -> Settings:
    """Factory — allows overriding in tests."""
    return Settings()
