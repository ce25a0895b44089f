"""Wrap a value's textual form in double quotes.

Two mixins are provided. ``InspectQuotable`` quotes the debug form
(``repr``) and ``StringQuotable`` quotes the display form (``str``). The free
functions pick the right form for builtin values: strings and date/time values
use their display form, everything else its debug form. Embedded quotes are
never escaped.
"""

from __future__ import annotations

from datetime import date, time


def _wrap(text: str) -> str:
    return f'"{text}"'


class InspectQuotable:
    """Mixin quoting ``repr(self)``."""

    def in_quotes(self) -> str:
        return _wrap(repr(self))

    def with_quotes(self) -> str:
        return self.in_quotes()


class StringQuotable:
    """Mixin quoting ``str(self)``."""

    def in_quotes(self) -> str:
        return _wrap(str(self))

    def with_quotes(self) -> str:
        return self.in_quotes()


def in_quotes(value: object) -> str:
    """
    Quote any value.

    Example:
        >>> in_quotes("hi")
        '"hi"'
        >>> in_quotes(None)
        '"None"'
        >>> in_quotes(range(1, 5))
        '"range(1, 5)"'
    """
    if isinstance(value, (InspectQuotable, StringQuotable)):
        return value.in_quotes()
    # datetime is a date subclass, so this covers all three
    if isinstance(value, (str, date, time)):
        return _wrap(str(value))
    return _wrap(repr(value))


with_quotes = in_quotes


__all__ = ["InspectQuotable", "StringQuotable", "in_quotes", "with_quotes"]
