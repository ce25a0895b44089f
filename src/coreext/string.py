"""
Helpers for strings: JSON decoding, record conversion, casing and quoting.

Decoding helpers never raise on bad input; they return None instead.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from coreext import deep, mapping_convert
from coreext.json_parsing import JsonText, parse_json
from coreext.ostruct import OpenRecord
from coreext.records import FrozenRecord, Record

_WORD_BREAKS = re.compile(r"[-_]")
_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9\s]")
_CAMELCASE_MODES = ("upper", "lower")


def to_h(text: JsonText) -> Optional[Any]:
    """
    Decode JSON text.

    Example:
        >>> to_h('{"name": "Alice"}')
        {'name': 'Alice'}
        >>> to_h("not json") is None
        True
    """
    return parse_json(text)


to_a = to_h


def to_deep_h(text: JsonText) -> Optional[Any]:
    """Decode JSON text, then decode any nested JSON strings holding objects or arrays."""
    decoded = parse_json(text)
    if decoded is None:
        return None
    return deep.deep_convert(decoded)


def _decoded_object(text: JsonText) -> Optional[dict]:
    decoded = parse_json(text)
    if isinstance(decoded, dict):
        return decoded
    return None


def to_struct(text: JsonText) -> Optional[Record]:
    decoded = _decoded_object(text)
    if decoded is None:
        return None
    return mapping_convert.to_struct(decoded)


def to_istruct(text: JsonText) -> Optional[FrozenRecord]:
    decoded = _decoded_object(text)
    if decoded is None:
        return None
    return mapping_convert.to_istruct(decoded)


def to_ostruct(text: JsonText) -> Optional[OpenRecord]:
    decoded = _decoded_object(text)
    if decoded is None:
        return None
    return mapping_convert.to_ostruct(decoded)


def to_camelcase(text: str, first_letter: str = "upper") -> str:
    """
    Convert free text into CamelCase.

    Hyphens and underscores separate words and any other character that is
    not an ASCII letter, digit or whitespace is dropped.

    Args:
        text: Text to convert
        first_letter: "upper" for PascalCase, "lower" for camelCase

    Example:
        >>> to_camelcase("dialed-up AOL_MAIL")
        'DialedUpAolMail'
        >>> to_camelcase("dialed-up AOL_MAIL", "lower")
        'dialedUpAolMail'
    """
    if first_letter not in _CAMELCASE_MODES:
        raise ValueError(f"first_letter must be one of {_CAMELCASE_MODES} (got {first_letter!r})")

    cleaned = _NON_ALPHANUMERIC.sub("", _WORD_BREAKS.sub(" ", text))
    words = [word.capitalize() for word in cleaned.split()]
    if words and first_letter == "lower":
        words[0] = words[0].lower()
    return "".join(words)


def with_quotes(text: str) -> str:
    return f'"{text}"'


in_quotes = with_quotes


__all__ = [
    "in_quotes",
    "to_a",
    "to_camelcase",
    "to_deep_h",
    "to_h",
    "to_istruct",
    "to_ostruct",
    "to_struct",
    "with_quotes",
]
