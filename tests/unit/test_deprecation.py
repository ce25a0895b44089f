"""Tests for coreext.deprecation."""

from __future__ import annotations

import warnings

import pytest

from coreext.config import get_settings
from coreext.config.settings import DEPRECATION_WARNINGS_ENV
from coreext.deprecation import deprecated_alias, warn_deprecated


def _double(value):
    return value * 2


def test_alias_warns_and_delegates():
    old = deprecated_alias(_double, "twice")
    assert old.__name__ == "twice"
    with pytest.warns(DeprecationWarning, match="twice is deprecated"):
        assert old(4) == 8


def test_warnings_can_be_disabled(monkeypatch):
    monkeypatch.setenv(DEPRECATION_WARNINGS_ENV, "false")
    get_settings.cache_clear()
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        warn_deprecated("ignored")
        assert deprecated_alias(_double, "twice")(1) == 2
