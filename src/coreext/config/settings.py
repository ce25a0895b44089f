from __future__ import annotations

"""Settings that change how the extension helpers behave."""


from dataclasses import dataclass
from functools import lru_cache

from .runtime import env_bool, env_list, env_str

PRESENCE_CONVENTION_ENV = "COREEXT_PRESENCE_CONVENTION"
EXTENSIONS_ENV = "COREEXT_EXTENSIONS"
DEPRECATION_WARNINGS_ENV = "COREEXT_DEPRECATION_WARNINGS"
LOG_LEVEL_ENV = "COREEXT_LOG_LEVEL"


@dataclass(frozen=True)
class ExtensionSettings:
    presence_convention: bool
    extensions: tuple[str, ...] | None
    deprecation_warnings: bool
    log_level: str | None


@lru_cache(maxsize=1)
def get_settings() -> ExtensionSettings:
    """Read settings from the environment once and cache them.

    ``extensions`` is ``None`` when no group list is configured, meaning every
    group is loaded.
    """
    return ExtensionSettings(
        presence_convention=bool(env_bool(PRESENCE_CONVENTION_ENV, or_value=False)),
        extensions=env_list(EXTENSIONS_ENV),
        deprecation_warnings=bool(env_bool(DEPRECATION_WARNINGS_ENV, or_value=True)),
        log_level=env_str(LOG_LEVEL_ENV),
    )


def presence_convention_enabled() -> bool:
    return get_settings().presence_convention


__all__ = [
    "DEPRECATION_WARNINGS_ENV",
    "EXTENSIONS_ENV",
    "ExtensionSettings",
    "LOG_LEVEL_ENV",
    "PRESENCE_CONVENTION_ENV",
    "get_settings",
    "presence_convention_enabled",
]
