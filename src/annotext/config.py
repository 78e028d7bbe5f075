"""Centralised configuration using pydantic-settings.

All environment variables are read through the Settings class.
Consumers call ``get_settings()`` to obtain a cached, validated instance.
Tests construct ``Settings(_env_file=None, ...)`` directly for isolation.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from annotext.colors import decode_color

logger = logging.getLogger(__name__)

# src/annotext/config.py  ->  parent x3  ->  project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


# ---------------------------------------------------------------------------
# Sub-models (one per configuration domain)
# ---------------------------------------------------------------------------
class RenderConfig(BaseModel):
    """Base text style and highlight presentation.

    Colour fields hold ``#RRGGBB`` / ``#AARRGGBB`` tokens.
    """

    font_family: str = "Arial"
    font_size: float = 16.0
    line_height: float = 1.5
    text_color: str = "#000000"
    link_color: str = "#2196F3"
    search_color: str = "#ffff00"
    note_underline_color: str = "#000000"
    note_underline_thickness: float = 2.0
    reanchor_window: int = 10

    @field_validator(
        "text_color", "link_color", "search_color", "note_underline_color"
    )
    @classmethod
    def _must_decode(cls, value: str) -> str:
        if decode_color(value) is None:
            msg = f"{value!r} is not a #RRGGBB or #AARRGGBB colour"
            raise ValueError(msg)
        return value

    @field_validator("reanchor_window")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            msg = "reanchor_window must be >= 0"
            raise ValueError(msg)
        return value


class AppConfig(BaseModel):
    """Command-line runtime configuration."""

    log_dir: Path = Path("logs")
    log_level: str = "INFO"


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Settings with automatic .env loading and type validation.

    Environment variables use double-underscore delimiter for nesting:
    ``RENDER__FONT_SIZE``, ``RENDER__SEARCH_COLOR``, ``APP__LOG_DIR``, etc.
    """

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    render: RenderConfig = RenderConfig()
    app: AppConfig = AppConfig()


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
