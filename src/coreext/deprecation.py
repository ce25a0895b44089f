"""Deprecation warnings for renamed helpers."""

from __future__ import annotations

import functools
import logging
import warnings
from typing import Any, Callable, TypeVar

from coreext.config import get_settings

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def warn_deprecated(message: str, *, stacklevel: int = 3) -> None:
    """Emit a DeprecationWarning unless deprecation warnings are switched off."""
    if not get_settings().deprecation_warnings:
        return
    logger.warning("DEPRECATION WARNING: %s", message)
    warnings.warn(message, DeprecationWarning, stacklevel=stacklevel)


def deprecated_alias(replacement: F, old_name: str) -> F:
    """Wrap ``replacement`` under its former name, warning on every call."""

    @functools.wraps(replacement)
    def alias(*args: Any, **kwargs: Any) -> Any:
        warn_deprecated(f"{old_name} is deprecated and will be removed; use {replacement.__name__} instead")
        return replacement(*args, **kwargs)

    alias.__name__ = old_name
    alias.__qualname__ = old_name
    return alias  # type: ignore[return-value]


__all__ = ["deprecated_alias", "warn_deprecated"]
