"""
Helpers for lists and other sequences.

Covers filtered joining, key extraction from lists of mappings, trimming of
leading/trailing empty values, sentence joining and deep conversion.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from itertools import dropwhile
from typing import Any, Callable, Iterable, List, Optional

from coreext import deep
from coreext.exceptions import KeyAccessError
from coreext.presence import is_blank
from coreext.records import is_record, record_to_mapping


def _is_kept(result: Any) -> bool:
    return result is not None and result is not False


def render(value: Any, join_with: str) -> str:
    """Text form of a join_map result; nested lists are joined with the same separator."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return join_with.join(render(item, join_with) for item in value)
    return str(value)


def filter_map(items: Iterable[Any], func: Callable[..., Any], *, with_index: bool = False) -> List[Any]:
    """Map each item and drop results that are None or False."""
    if with_index:
        results = (func(item, index) for index, item in enumerate(items))
    else:
        results = (func(item) for item in items)
    return [result for result in results if _is_kept(result)]


def join_map(
    items: Iterable[Any],
    join_with: str = "",
    func: Optional[Callable[..., Any]] = None,
    *,
    with_index: bool = False,
) -> str:
    """
    Map, drop None/False results and join the rest.

    Args:
        items: Values to map
        join_with: Separator placed between results
        func: Called as func(item) or func(item, index); identity when omitted
        with_index: Pass the item's position as a second argument

    Example:
        >>> join_map([1, 2, None, 3], " ", lambda n: n if n and n % 2 else None)
        '1 3'
        >>> join_map(["a", "b"], ", ", lambda c, i: f"{i}:{c}", with_index=True)
        '0:a, 1:b'
    """
    if func is None:
        func = (lambda item, _index=None: item)
    return join_with.join(render(result, join_with) for result in filter_map(items, func, with_index=with_index))


def _is_index(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def dig(value: Any, *keys: Any) -> Any:
    """
    Follow a path of keys and indexes through nested mappings, sequences and records.

    Sequences are indexed by integer. Records (open records, dataclasses,
    namedtuples and anything with ``to_h()``) are looked up by field name.
    Returns None as soon as a step is missing or lands on None.

    Raises:
        KeyAccessError: If a value on the path does not support lookup
    """
    current = value
    for position, key in enumerate(keys):
        if current is None and position > 0:
            return None
        if isinstance(current, Mapping):
            current = current.get(key)
            continue
        if isinstance(current, Sequence) and not isinstance(current, (str, bytes)) and _is_index(key):
            current = current[key] if -len(current) <= key < len(current) else None
            continue

        fields = record_to_mapping(current)
        if fields is None:
            raise KeyAccessError.unsupported(current, keys)
        current = fields.get(key)
    return current


def supports_dig(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple)) or is_record(value)


def key_map(items: Iterable[Any], key: Any) -> List[Any]:
    """
    Extract one key from each element.

    Example:
        >>> key_map([{"name": "Alice"}, {"name": "Bob"}], "name")
        ['Alice', 'Bob']
    """
    return [dig(item, key) for item in items]


def dig_map(items: Iterable[Any], *keys: Any) -> List[Any]:
    """Extract a nested path from each element."""
    return [dig(item, *keys) for item in items]


def compact_prefix(items: Iterable[Any]) -> List[Any]:
    return list(dropwhile(lambda item: item is None, items))


def compact_suffix(items: Iterable[Any]) -> List[Any]:
    return list(reversed(compact_prefix(reversed(list(items)))))


def trim_nils(items: Iterable[Any]) -> List[Any]:
    """Drop leading and trailing None values, keeping interior ones."""
    return compact_suffix(compact_prefix(items))


def compact_blank_prefix(items: Iterable[Any]) -> List[Any]:
    return list(dropwhile(is_blank, items))


def compact_blank_suffix(items: Iterable[Any]) -> List[Any]:
    return list(reversed(compact_blank_prefix(reversed(list(items)))))


def trim_blanks(items: Iterable[Any]) -> List[Any]:
    """Drop leading and trailing blank values, keeping interior ones."""
    return compact_blank_suffix(compact_blank_prefix(items))


def to_sentence(
    items: Iterable[Any],
    *,
    words_connector: str = ", ",
    two_words_connector: str = " and ",
    last_word_connector: str = ", and ",
) -> str:
    """
    Join values as an English list.

    Example:
        >>> to_sentence(["red", "blue", "green"])
        'red, blue, and green'
    """
    words = [str(item) for item in items]
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f"{words[0]}{two_words_connector}{words[1]}"
    return f"{words_connector.join(words[:-1])}{last_word_connector}{words[-1]}"


def to_or_sentence(items: Iterable[Any], **options: str) -> str:
    """Like to_sentence, but joins the last word with "or"."""
    options.setdefault("two_words_connector", " or ")
    options.setdefault("last_word_connector", ", or ")
    return to_sentence(items, **options)


def to_deep_h(items: Iterable[Any]) -> List[Any]:
    """Deep-convert every element; JSON strings holding objects or arrays are decoded."""
    return deep.convert_sequence(items)


def deep_freeze(items: Iterable[Any]) -> tuple:
    return tuple(deep.deep_freeze(item) for item in items)


__all__ = [
    "compact_blank_prefix",
    "compact_blank_suffix",
    "compact_prefix",
    "compact_suffix",
    "deep_freeze",
    "dig",
    "dig_map",
    "filter_map",
    "join_map",
    "key_map",
    "render",
    "supports_dig",
    "to_deep_h",
    "to_or_sentence",
    "to_sentence",
    "trim_blanks",
    "trim_nils",
]
