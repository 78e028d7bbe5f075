"""Shared pytest fixtures for annotext tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from annotext.config import RenderConfig, get_settings


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None, None, None]:
    """Settings are cached process-wide; never leak them between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def render_config() -> RenderConfig:
    """Default render configuration, independent of env and .env files."""
    return RenderConfig()
