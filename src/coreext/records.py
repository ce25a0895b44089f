"""Fixed-field record types and the record side of deep conversion.

Records stand in for mapping values that should be read by attribute. Two
flavours are generated from a list of field names: ``Record`` subclasses are
mutable dataclasses and ``FrozenRecord`` subclasses are frozen dataclasses.
Classes are cached per field list, so two records built from mappings with the
same keys share a class and compare equal when their values do.
"""

from __future__ import annotations

import dataclasses
import keyword
from functools import lru_cache
from types import SimpleNamespace
from typing import Any, Dict, Iterable, Optional, Protocol, runtime_checkable

from coreext.exceptions import RecordFieldError
from coreext.quotable import InspectQuotable

_RECORD_CLASS_CACHE_SIZE = 256


@runtime_checkable
class Convertible(Protocol):
    """Anything that can describe itself as a mapping."""

    def to_h(self) -> Dict[Any, Any]: ...


class _RecordMixin(InspectQuotable):
    def to_h(self) -> Dict[str, Any]:
        """Shallow mapping of field name to value."""
        return {field.name: getattr(self, field.name) for field in dataclasses.fields(self)}

    def to_deep_h(self) -> Dict[Any, Any]:
        from coreext.deep import deep_convert

        return deep_convert(self.to_h())

    def deep_freeze(self) -> "FrozenRecord":
        """Immutable copy with the same fields, each value frozen in turn."""
        from coreext.deep import deep_freeze

        fields = {name: deep_freeze(value) for name, value in self.to_h().items()}
        return build_record(fields, frozen=True)


class Record(_RecordMixin):
    """Base class of generated mutable records."""


class FrozenRecord(_RecordMixin):
    """Base class of generated immutable records."""


def _validate_field_name(name: Any) -> str:
    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        raise RecordFieldError.invalid_name(name)
    if hasattr(_RecordMixin, name):
        raise RecordFieldError(f"Record field name {name!r} would shadow a record method", key=name)
    return name


@lru_cache(maxsize=_RECORD_CLASS_CACHE_SIZE)
def _record_class(field_names: tuple[str, ...], frozen: bool) -> type:
    base = FrozenRecord if frozen else Record
    return dataclasses.make_dataclass(
        base.__name__,
        [(name, Any) for name in field_names],
        bases=(base,),
        frozen=frozen,
    )


def make_record_class(field_names: Iterable[Any], *, frozen: bool = False) -> type:
    """
    Return the record class for the given field names.

    Args:
        field_names: Field names in declaration order
        frozen: Build an immutable record class

    Raises:
        RecordFieldError: If a name is not a usable identifier
    """
    names = tuple(_validate_field_name(name) for name in field_names)
    return _record_class(names, frozen)


def build_record(fields: Dict[Any, Any], *, frozen: bool = False) -> _RecordMixin:
    record_class = make_record_class(fields.keys(), frozen=frozen)
    return record_class(**fields)


def is_record(value: object) -> bool:
    if isinstance(value, type):
        return False
    if dataclasses.is_dataclass(value) or isinstance(value, SimpleNamespace):
        return True
    if isinstance(value, tuple) and hasattr(value, "_asdict"):
        return True
    return isinstance(value, Convertible)


def record_to_mapping(value: object) -> Optional[Dict[Any, Any]]:
    """Shallow mapping form of a record, or None when the value is not one."""
    if isinstance(value, type):
        return None
    # Namespace fields may shadow a to_h method, so they are read directly.
    if isinstance(value, SimpleNamespace):
        return dict(vars(value))
    if isinstance(value, _RecordMixin):
        return value.to_h()
    if dataclasses.is_dataclass(value):
        return {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
    if isinstance(value, tuple) and hasattr(value, "_asdict"):
        return dict(value._asdict())
    if isinstance(value, Convertible):
        return dict(value.to_h())
    return None


def record_to_deep_h(value: object) -> Dict[Any, Any]:
    """
    Deep mapping form of a record.

    Raises:
        TypeError: If the value is not a record
    """
    from coreext.deep import deep_convert

    mapping = record_to_mapping(value)
    if mapping is None:
        raise TypeError(f"{type(value).__name__} is not a record")
    return deep_convert(mapping)


__all__ = [
    "Convertible",
    "FrozenRecord",
    "Record",
    "build_record",
    "is_record",
    "make_record_class",
    "record_to_deep_h",
    "record_to_mapping",
]
