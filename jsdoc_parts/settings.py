"""Settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration with sensible defaults.

    ``strict_parts`` follows ``__debug__`` unless set explicitly, so running
    under ``python -O`` drops the part precondition checks the same way a
    release build would.
    """

    strict_parts: bool = Field(default=__debug__, alias="JSDOC_STRICT_PARTS")
    log_level: str = Field(default="info", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
