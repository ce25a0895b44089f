"""Open records: attribute bags that also behave like a small mapping."""

from __future__ import annotations

from types import MappingProxyType, SimpleNamespace
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from coreext import sequence
from coreext.deep import deep_convert, deep_freeze
from coreext.presence import is_blank
from coreext.quotable import InspectQuotable

# Fields with these names stay reachable through record["name"] only.
_RESERVED_NAMES = frozenset(
    (
        "deep_freeze",
        "each",
        "filter_map",
        "in_quotes",
        "is_blank",
        "is_present",
        "join_map",
        "map",
        "to_deep_h",
        "to_h",
        "to_ostruct",
        "with_quotes",
    )
)


def _compact_pair(name: str, value: Any) -> List[Any]:
    return [item for item in (name, value) if item is not None]


class OpenRecord(SimpleNamespace, InspectQuotable):
    """
    A SimpleNamespace whose fields can be enumerated.

    Reading a public attribute that was never set returns None. A field named
    like one of the record's methods does not hide that method; read it with
    ``record["name"]`` instead.
    """

    def __getattribute__(self, name: str) -> Any:
        if name in _RESERVED_NAMES:
            return getattr(type(self), name).__get__(self, type(self))
        return super().__getattribute__(name)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return None

    def __getitem__(self, name: str) -> Any:
        return vars(self).get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        setattr(self, name, value)

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        return iter(list(vars(self).items()))

    def __len__(self) -> int:
        return len(vars(self))

    def each(self) -> Iterator[Tuple[str, Any]]:
        """Yield (name, value) pairs in definition order."""
        return iter(self)

    def map(self, func: Callable[[str, Any], Any]) -> List[Any]:
        return [func(name, value) for name, value in self]

    def filter_map(self, func: Callable[[str, Any], Any]) -> List[Any]:
        """Map each (name, value) pair and drop None results. False is kept."""
        return [result for result in self.map(func) if result is not None]

    def join_map(self, join_with: str = "", func: Optional[Callable[[str, Any], Any]] = None) -> str:
        """
        Filter-map the fields and join the results.

        Without ``func`` each pair contributes its name and its value, leaving
        out a None value.
        """
        results = self.filter_map(func or _compact_pair)
        return join_with.join(sequence.render(result, join_with) for result in results)

    def is_blank(self) -> bool:
        return is_blank(vars(self))

    def is_present(self) -> bool:
        return not self.is_blank()

    def to_h(self) -> Dict[str, Any]:
        return dict(vars(self))

    def to_ostruct(self) -> "OpenRecord":
        return self

    def to_deep_h(self) -> Dict[str, Any]:
        return deep_convert(self.to_h())

    def deep_freeze(self) -> MappingProxyType:
        """Read-only mapping of the fields, with frozen values."""
        return deep_freeze(self.to_h())


__all__ = ["OpenRecord"]
