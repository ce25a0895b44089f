from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration."""


import os
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".env")

_DEFAULT_VALUES: dict[str, str] | None = None


def _load_default_values() -> dict[str, str]:
    """Load configuration values from .env-style files."""
    from .runtime_helpers import DotenvLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is not None:
        return _DEFAULT_VALUES

    defaults: dict[str, str] = {}
    for path in _DOTENV_CANDIDATES:
        for key, value in DotenvLoader.load_from_file(path).items():
            defaults.setdefault(key, value)

    _DEFAULT_VALUES = defaults
    return defaults


def _default_value(name: str) -> Optional[str]:
    return _load_default_values().get(name)


def env_str(name: str) -> str | None:
    """Fetch a stripped, non-empty environment variable, falling back to .env defaults."""

    value = (os.getenv(name) or "").strip()
    if not value:
        value = (_default_value(name) or "").strip()
    return value or None


def env_bool(name: str, or_value: bool | None = None) -> bool | None:
    """Fetch an environment variable and coerce it to ``bool``."""

    raw = env_str(name)
    if raw is None:
        return or_value

    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError.invalid_format(name, raw, "a boolean such as true/false/1/0")


def env_list(name: str) -> tuple[str, ...] | None:
    """Fetch a comma-separated list from the environment.

    A variable that is set but empty yields an empty tuple, which is distinct
    from ``None`` (variable absent). Items are stripped and deduplicated.
    """
    from .runtime_helpers import ListNormalizer

    raw = os.getenv(name)
    if raw is None:
        raw = _default_value(name)
    if raw is None:
        return None

    normalized = ListNormalizer.split_and_normalize(raw, ",", True)
    return ListNormalizer.deduplicate_preserving_order(normalized)


__all__ = ["env_bool", "env_list", "env_str"]
