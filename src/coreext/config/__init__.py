"""Configuration helpers and the cached extension settings."""

from .errors import ConfigurationError
from .runtime import env_bool, env_list, env_str
from .settings import ExtensionSettings, get_settings, presence_convention_enabled

__all__ = [
    "ConfigurationError",
    "ExtensionSettings",
    "env_bool",
    "env_list",
    "env_str",
    "get_settings",
    "presence_convention_enabled",
]
