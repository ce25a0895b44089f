"""Conversions from mappings into records and canonical nested dicts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict

from coreext import deep
from coreext.ostruct import OpenRecord
from coreext.records import FrozenRecord, Record, build_record


def _recurse(value: Any, convert: Callable[[Mapping], Any]) -> Any:
    if isinstance(value, Mapping):
        return convert(value)
    if isinstance(value, list):
        return [_recurse(item, convert) for item in value]
    return value


def to_struct(mapping: Mapping) -> Record:
    """
    Convert a mapping into a mutable record, recursing into nested mappings and lists.

    Raises:
        RecordFieldError: If a key is not a valid identifier
    """
    fields = {key: _recurse(value, to_struct) for key, value in mapping.items()}
    return build_record(fields)


def to_istruct(mapping: Mapping) -> FrozenRecord:
    """Like to_struct, but every record is immutable."""
    fields = {key: _recurse(value, to_istruct) for key, value in mapping.items()}
    return build_record(fields, frozen=True)


def to_ostruct(mapping: Mapping) -> OpenRecord:
    """Convert a mapping into an OpenRecord, recursing into nested mappings and lists."""
    fields: Dict[str, Any] = {str(key): _recurse(value, to_ostruct) for key, value in mapping.items()}
    return OpenRecord(**fields)


def to_deep_h(mapping: Mapping) -> Dict[Any, Any]:
    """
    Deep-convert every value of a mapping.

    Example:
        >>> to_deep_h({"profile": '{"level": "expert"}'})
        {'profile': {'level': 'expert'}}
    """
    return deep.convert_mapping(mapping)


def deep_freeze(mapping: Mapping) -> Mapping:
    return deep.deep_freeze(mapping)


__all__ = ["deep_freeze", "to_deep_h", "to_istruct", "to_ostruct", "to_struct"]
