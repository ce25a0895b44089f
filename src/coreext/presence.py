"""Blank/present convention for arbitrary values.

``None``, ``False``, whitespace-only strings and empty containers are blank.
Numbers and ``True`` are never blank. Objects can take part by defining an
``is_blank()`` method.
"""

from __future__ import annotations

from collections.abc import Sized
from numbers import Number
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")


def is_blank(value: object) -> bool:
    if value is None or value is False:
        return True
    if value is True or isinstance(value, Number):
        return False
    if isinstance(value, str):
        return not value.strip()

    custom = getattr(value, "is_blank", None)
    if callable(custom):
        return bool(custom())
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_present(value: object) -> bool:
    return not is_blank(value)


def presence(value: T) -> T | None:
    """Return the value when present, else None."""
    if is_present(value):
        return value
    return None


def pick_present(value: T, alternate: U) -> T | U:
    if is_present(value):
        return value
    return alternate


__all__ = ["is_blank", "is_present", "pick_present", "presence"]
