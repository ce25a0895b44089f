"""Recursive conversion and freezing of nested values.

Values are treated as one of a closed set of shapes: mapping, sequence
(list or tuple), string, record, or anything else. Conversion never mutates
its input.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Set
from types import MappingProxyType
from typing import Any, Dict, List

from coreext.json_parsing import parse_json_container
from coreext.records import record_to_mapping

logger = logging.getLogger(__name__)


def deep_convert(value: Any) -> Any:
    """
    Convert a value into plain nested dicts and lists.

    Mappings keep their keys and have their values converted. Lists and tuples
    become lists. Strings holding a JSON object or array are decoded and
    converted; other strings are kept. Records become mappings. Anything else
    is returned unchanged.
    """
    match value:
        case Mapping():
            return convert_mapping(value)
        case list() | tuple() if not hasattr(value, "_asdict"):
            return convert_sequence(value)
        case str():
            return convert_string(value)
        case _:
            mapping = record_to_mapping(value)
            if mapping is None:
                return value
            return convert_mapping(mapping)


def convert_mapping(mapping: Mapping) -> Dict[Any, Any]:
    return {key: deep_convert(item) for key, item in mapping.items()}


def convert_sequence(items: Any) -> List[Any]:
    return [deep_convert(item) for item in items]


def convert_string(text: str) -> Any:
    decoded = parse_json_container(text)
    if decoded is None:
        return text
    return deep_convert(decoded)


def deep_freeze(value: Any) -> Any:
    """
    Return an immutable deep copy of a value.

    Mappings become read-only mapping proxies, lists and tuples become tuples
    and sets become frozensets, each with frozen contents. Objects defining
    ``deep_freeze()`` are delegated to. Other values are returned as they are.
    Freezing an already frozen value gives an equal value.
    """
    match value:
        case str() | bytes() | int() | float() | complex() | None:
            return value
        case Mapping():
            return MappingProxyType({key: deep_freeze(item) for key, item in value.items()})
        case list() | tuple() if not hasattr(value, "_asdict"):
            return tuple(deep_freeze(item) for item in value)
        case Set():
            return frozenset(deep_freeze(item) for item in value)
        case _:
            freezer = getattr(value, "deep_freeze", None)
            if callable(freezer) and not isinstance(value, type):
                return freezer()
            logger.debug("Leaving %s unfrozen; it has no immutable counterpart", type(value).__name__)
            return value


__all__ = ["convert_mapping", "convert_sequence", "convert_string", "deep_convert", "deep_freeze"]
