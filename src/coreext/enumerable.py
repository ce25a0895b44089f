"""Helpers for any iterable: generators, ranges, sets and so on."""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional

from coreext import sequence


def join_map(
    iterable: Iterable[Any],
    join_with: str = "",
    func: Optional[Callable[..., Any]] = None,
    *,
    with_index: bool = False,
) -> str:
    """
    Map, drop None/False results and join the rest, for any iterable.

    Example:
        >>> join_map(range(1, 11), " | ", lambda n: f"num{n}" if n % 2 == 0 else None)
        'num2 | num4 | num6 | num8 | num10'
    """
    return sequence.join_map(iterable, join_with, func, with_index=with_index)


def group_by_key(
    iterable: Iterable[Any],
    *keys: Any,
    func: Optional[Callable[[Any], Hashable]] = None,
) -> Dict[Hashable, List[Any]]:
    """
    Group elements by the value found at a key path.

    Elements that are not mappings or sequences are grouped under None
    instead of raising. Groups appear in order of first occurrence.

    Args:
        iterable: Elements to group
        *keys: Path passed to dig for each element
        func: Optional transform applied to the looked-up value

    Example:
        >>> users = [{"role": "admin"}, {"role": "user"}, {"role": "admin"}]
        >>> list(group_by_key(users, "role"))
        ['admin', 'user']
    """
    groups: Dict[Hashable, List[Any]] = {}
    for element in iterable:
        group_key = sequence.dig(element, *keys) if sequence.supports_dig(element) else None
        if func is not None:
            group_key = func(group_key)
        groups.setdefault(group_key, []).append(element)
    return groups


__all__ = ["group_by_key", "join_map"]
