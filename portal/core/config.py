"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Every field has a default, so the service starts
without any environment set.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "intranet-portal"
    app_version: str = "1.0.0"
    debug: bool = False
    api_prefix: str = "/api/v1"

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    # Entity store: path to a JSON seed file; None = packaged seed data.
    seed_data_path: str | None = None

    # Pagination
    default_page_limit: int = 10
    max_page_limit: int = 100

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_pagination_bounds(self) -> "Settings":
        """Default limit must itself be a valid limit."""
        if self.max_page_limit < 1:
            raise ValueError("MAX_PAGE_LIMIT must be at least 1")
        if not 1 <= self.default_page_limit <= self.max_page_limit:
            raise ValueError(
                f"DEFAULT_PAGE_LIMIT must be between 1 and {self.max_page_limit}, "
                f"got: {self.default_page_limit}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
