"""Application configuration powered by Pydantic settings."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Final

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS: Final[frozenset[str]] = frozenset(
    {"critical", "error", "warning", "info", "debug", "notset"}
)


class Settings(BaseSettings):
    """Centralized configuration object with environment fallbacks."""

    model_config = SettingsConfigDict(env_prefix="ECS_", env_file=".env", extra="allow")

    # App
    app_name: str = "ECS"
    debug: bool = False
    log_level: str = Field(default="info")

    # Regulation band (inclusive on both ends)
    lower_threshold: int = Field(default=5)
    upper_threshold: int = Field(default=25)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        level = str(v).strip().lower()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return level

    @model_validator(mode="after")
    def _check_threshold_order(self) -> Settings:
        if self.lower_threshold > self.upper_threshold:
            raise ValueError(
                f"lower_threshold ({self.lower_threshold}) must not exceed "
                f"upper_threshold ({self.upper_threshold})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging the same way for every entry point."""

    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
