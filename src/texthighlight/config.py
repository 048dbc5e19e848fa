"""Centralised configuration using pydantic-settings.

All environment variables are read through the Settings class.
Consumers call ``get_settings()`` to obtain a cached, validated instance.
Tests construct ``Settings(_env_file=None, ...)`` directly for isolation.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from texthighlight.markup.marker_constants import (
    DEFAULT_CLOSE_MARKER,
    DEFAULT_OPEN_MARKER,
    DEFAULT_TOUCH_POLICY,
    TouchPolicy,
)

logger = logging.getLogger(__name__)

# src/texthighlight/config.py  ->  parent x3  ->  project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------
class MarkerConfig(BaseModel):
    """Marker strings and touch-point rendering."""

    open_marker: str = DEFAULT_OPEN_MARKER
    close_marker: str = DEFAULT_CLOSE_MARKER
    touching: TouchPolicy = DEFAULT_TOUCH_POLICY

    @model_validator(mode="after")
    def markers_must_be_distinct(self) -> MarkerConfig:
        if not self.open_marker or not self.close_marker:
            msg = "MARKERS__OPEN_MARKER and MARKERS__CLOSE_MARKER must be non-empty"
            raise ValueError(msg)
        if self.open_marker == self.close_marker:
            msg = "MARKERS__OPEN_MARKER and MARKERS__CLOSE_MARKER must differ"
            raise ValueError(msg)
        return self


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Settings with automatic .env loading and type validation.

    Environment variables use double-underscore delimiter for nesting:
    ``MARKERS__OPEN_MARKER``, ``MARKERS__CLOSE_MARKER``, ``MARKERS__TOUCHING``.
    """

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    markers: MarkerConfig = MarkerConfig()


# ---------------------------------------------------------------------------
# Singleton access
# ---------------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    settings = Settings()

    env_file = settings.model_config.get("env_file")
    if env_file is not None and Path(str(env_file)).is_file():
        logger.info("Settings loaded .env from: %s", env_file)
    else:
        logger.info("Settings: no .env file found, using env vars and defaults")

    return settings
