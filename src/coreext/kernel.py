"""Pipeline helper for chaining a value through a function."""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def morph(value: T, func: Callable[[T], R]) -> R:
    """
    Pass a value to a function and return the result.

    Example:
        >>> morph({"id": 1}, lambda record: f"id:{record['id']}")
        'id:1'
    """
    return func(value)


__all__ = ["morph"]
