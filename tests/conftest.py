"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from coreext.config import runtime
from coreext.config.settings import (
    DEPRECATION_WARNINGS_ENV,
    EXTENSIONS_ENV,
    LOG_LEVEL_ENV,
    PRESENCE_CONVENTION_ENV,
    get_settings,
)

_SETTINGS_ENV = (PRESENCE_CONVENTION_ENV, EXTENSIONS_ENV, DEPRECATION_WARNINGS_ENV, LOG_LEVEL_ENV)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run each test against default settings with no .env files consulted."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DEFAULT_VALUES", {})
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def presence_convention(monkeypatch):
    """Enable the blank/present convention for the duration of a test."""
    monkeypatch.setenv(PRESENCE_CONVENTION_ENV, "true")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
