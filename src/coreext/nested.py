"""Auto-vivifying nested dicts."""

from __future__ import annotations

from typing import Any, Dict, Optional


class NestedDict(dict):
    """
    A dict that creates a nested level when a missing key is read.

    ``depth`` bounds how many levels may still be created below this one.
    ``None`` means unbounded; at depth 0 reading a missing key returns None
    and stores nothing.

    Example:
        >>> users = NestedDict()
        >>> users["john"]["role"] = "admin"
        >>> users.to_dict()
        {'john': {'role': 'admin'}}
    """

    __slots__ = ("depth",)

    def __init__(self, *args: Any, depth: Optional[int] = None, **kwargs: Any) -> None:
        if depth is not None and depth < 0:
            raise ValueError(f"depth must be non-negative (got {depth})")
        super().__init__(*args, **kwargs)
        self.depth = depth

    def __missing__(self, key: Any) -> Any:
        if self.depth == 0:
            return None
        child_depth = None if self.depth is None else self.depth - 1
        child = NestedDict(depth=child_depth)
        self[key] = child
        return child

    def to_dict(self) -> Dict[Any, Any]:
        """Plain-dict copy, converting nested levels as well."""
        return {key: value.to_dict() if isinstance(value, NestedDict) else value for key, value in self.items()}

    def __repr__(self) -> str:
        return f"NestedDict({dict.__repr__(self)}, depth={self.depth!r})"


def new_nested_hash(depth: Optional[int] = None) -> NestedDict:
    return NestedDict(depth=depth)


__all__ = ["NestedDict", "new_nested_hash"]
