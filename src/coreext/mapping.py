"""
Helpers for dicts and other mappings.

Functions ending in ``_in_place`` mutate the mapping they receive and return
it. Every other function leaves its input untouched and returns a new dict.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from coreext import sequence
from coreext.deprecation import deprecated_alias
from coreext.presence import is_present

ValueFunc = Callable[..., Any]
Predicate = Callable[..., Any]


def _compact_pair(key: Any, value: Any) -> List[Any]:
    return [part for part in (key, value) if part is not None]


def join_map(
    mapping: Mapping,
    join_with: str = "",
    func: Optional[Callable[..., Any]] = None,
    *,
    with_index: bool = False,
) -> str:
    """
    Map each entry, drop None/False results and join the rest.

    ``func`` is called as func(key, value), or as func((key, value), index)
    when with_index is set. The index counts every entry, including the ones
    whose result is dropped. Without ``func`` each entry renders as its key
    and value, skipping whichever side is None.

    Example:
        >>> join_map({"a": 1, "b": None, "c": 2}, " ")
        'a 1 b c 2'
        >>> join_map({"a": 1, "b": None}, ", ", lambda k, v: f"{k}-{v}" if v else None)
        'a-1'
    """
    pairs = list(mapping.items())
    if with_index:
        if func is None:
            results = [_compact_pair(*pair) for pair in pairs]
        else:
            results = [func(pair, index) for index, pair in enumerate(pairs)]
    else:
        call = _compact_pair if func is None else func
        results = [call(key, value) for key, value in pairs]

    kept = [result for result in results if result is not None and result is not False]
    return join_with.join(sequence.render(result, join_with) for result in kept)


def _apply(func: ValueFunc, value: Any, key: Any, with_key: bool) -> Any:
    if with_key:
        return func(value, key)
    return func(value)


def _transform_flat(mapping: Any, func: ValueFunc, with_key: bool, in_place: bool) -> Any:
    if in_place:
        for key in list(mapping):
            mapping[key] = _apply(func, mapping[key], key, with_key)
        return mapping
    return {key: _apply(func, value, key, with_key) for key, value in mapping.items()}


def _transform_deep(node: Any, key: Any, func: ValueFunc, with_key: bool, in_place: bool) -> Any:
    if isinstance(node, Mapping):
        if in_place and isinstance(node, MutableMapping):
            for child_key in list(node):
                node[child_key] = _transform_deep(node[child_key], child_key, func, with_key, in_place)
            return node
        return {child_key: _transform_deep(child, child_key, func, with_key, in_place) for child_key, child in node.items()}
    if isinstance(node, list):
        transformed = [_transform_deep(child, None, func, with_key, in_place) for child in node]
        if in_place:
            node[:] = transformed
            return node
        return transformed
    if isinstance(node, tuple) and not hasattr(node, "_asdict"):
        return tuple(_transform_deep(child, None, func, with_key, in_place) for child in node)
    return _apply(func, node, key, with_key)


def _leaves(node: Any, key: Any) -> Iterator[Tuple[Any, Any]]:
    if isinstance(node, Mapping):
        for child_key, child in node.items():
            yield from _leaves(child, child_key)
    elif isinstance(node, (list, tuple)) and not hasattr(node, "_asdict"):
        for child in node:
            yield from _leaves(child, None)
    else:
        yield node, key


class ValueTransformer:
    """
    A value transform that has not run yet.

    Returned by the transform_values family when no function is given.
    Iterating yields ``(value, key)`` pairs (every leaf, for deep transforms).
    ``with_key(func)`` runs the transform with func(value, key) and calling
    the transformer runs it with func(value).
    """

    def __init__(self, mapping: Mapping, *, in_place: bool = False, deep: bool = False) -> None:
        self._mapping = mapping
        self._in_place = in_place
        self._deep = deep

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        if self._deep:
            return _leaves(self._mapping, None)
        return ((value, key) for key, value in self._mapping.items())

    def __call__(self, func: ValueFunc) -> Any:
        return self._run(func, with_key=False)

    def with_key(self, func: ValueFunc) -> Any:
        return self._run(func, with_key=True)

    def _run(self, func: ValueFunc, *, with_key: bool) -> Any:
        if self._deep:
            return _transform_deep(self._mapping, None, func, with_key, self._in_place)
        return _transform_flat(self._mapping, func, with_key, self._in_place)

    def __repr__(self) -> str:
        kind = "deep" if self._deep else "flat"
        mode = "in place" if self._in_place else "copy"
        return f"<ValueTransformer {kind} {mode} over {len(self._mapping)} entries>"


def transform_values(mapping: Mapping, func: Optional[ValueFunc] = None, *, with_key: bool = False) -> Any:
    """
    Return a new dict with every value passed through func.

    With ``with_key`` func also receives the key: func(value, key). Without
    func a ValueTransformer is returned instead.

    Example:
        >>> transform_values({"a": 1}, lambda v, k: f"{k}{v}", with_key=True)
        {'a': 'a1'}
        >>> transform_values({"a": 1}).with_key(lambda v, k: f"{k}{v}")
        {'a': 'a1'}
    """
    transformer = ValueTransformer(mapping)
    if func is None:
        return transformer
    return transformer._run(func, with_key=with_key)


def transform_values_in_place(mapping: MutableMapping, func: Optional[ValueFunc] = None, *, with_key: bool = False) -> Any:
    transformer = ValueTransformer(mapping, in_place=True)
    if func is None:
        return transformer
    return transformer._run(func, with_key=with_key)


def deep_transform_values(mapping: Mapping, func: Optional[ValueFunc] = None, *, with_key: bool = False) -> Any:
    """
    Like transform_values, but recursing into nested mappings and lists.

    Values found directly inside a list are passed key None.
    """
    transformer = ValueTransformer(mapping, deep=True)
    if func is None:
        return transformer
    return transformer._run(func, with_key=with_key)


def deep_transform_values_in_place(mapping: MutableMapping, func: Optional[ValueFunc] = None, *, with_key: bool = False) -> Any:
    transformer = ValueTransformer(mapping, in_place=True, deep=True)
    if func is None:
        return transformer
    return transformer._run(func, with_key=with_key)


def transform(mapping: Mapping, func: Callable[[Any, Any], Tuple[Any, Any]]) -> Dict[Any, Any]:
    """Rebuild a mapping from the (key, value) pairs returned by func(key, value)."""
    return dict(func(key, value) for key, value in mapping.items())


def transform_in_place(mapping: MutableMapping, func: Callable[[Any, Any], Tuple[Any, Any]]) -> MutableMapping:
    return _replace_contents(mapping, transform(mapping, func))


def _replace_contents(mapping: MutableMapping, contents: Mapping) -> MutableMapping:
    mapping.clear()
    mapping.update(contents)
    return mapping


def value_where(mapping: Mapping, predicate: Predicate) -> Any:
    """First value whose predicate(key, value) holds, or None."""
    for key, value in mapping.items():
        if predicate(key, value):
            return value
    return None


def values_where(mapping: Mapping, predicate: Predicate) -> List[Any]:
    return [value for key, value in mapping.items() if predicate(key, value)]


def _merge_renames(renames: Optional[Mapping], extra: Mapping) -> Dict[Any, Any]:
    merged: Dict[Any, Any] = dict(renames or {})
    merged.update(extra)
    return merged


def rename_keys(mapping: Mapping, renames: Optional[Mapping] = None, /, **kwargs: Any) -> Dict[Any, Any]:
    """
    Rename keys, keeping every entry in its original position.

    Keys missing from the mapping are ignored.

    Example:
        >>> list(rename_keys({"a": 1, "b": 2, "c": 3}, {"b": "middle"}))
        ['a', 'middle', 'c']
    """
    table = _merge_renames(renames, kwargs)
    return {(table[key] if key in table else key): value for key, value in mapping.items()}


def rename_keys_in_place(mapping: MutableMapping, renames: Optional[Mapping] = None, /, **kwargs: Any) -> MutableMapping:
    return _replace_contents(mapping, rename_keys(mapping, renames, **kwargs))


def rename_key(mapping: Mapping, old_key: Any, new_key: Any) -> Dict[Any, Any]:
    return rename_keys(mapping, {old_key: new_key})


def rename_key_in_place(mapping: MutableMapping, old_key: Any, new_key: Any) -> MutableMapping:
    return rename_keys_in_place(mapping, {old_key: new_key})


def rename_key_unordered(mapping: Mapping, old_key: Any, new_key: Any) -> Dict[Any, Any]:
    """Rename one key by removing it and adding the new key at the end."""
    if old_key not in mapping:
        return dict(mapping)
    renamed = {key: value for key, value in mapping.items() if key != old_key}
    renamed[new_key] = mapping[old_key]
    return renamed


def rename_key_unordered_in_place(mapping: MutableMapping, old_key: Any, new_key: Any) -> MutableMapping:
    if old_key in mapping:
        mapping[new_key] = mapping.pop(old_key)
    return mapping


replace_key = deprecated_alias(rename_key, "replace_key")
replace_key_in_place = deprecated_alias(rename_key_in_place, "replace_key_in_place")
replace_keys = deprecated_alias(rename_keys, "replace_keys")
replace_keys_in_place = deprecated_alias(rename_keys_in_place, "replace_keys_in_place")


def _incoming(other: Optional[Mapping], kwargs: Mapping) -> Dict[Any, Any]:
    entries: Dict[Any, Any] = dict(other or {})
    entries.update(kwargs)
    return entries


def _merge_where(target: MutableMapping, entries: Mapping, keep: Predicate) -> MutableMapping:
    for key, value in entries.items():
        if keep(key, value):
            target[key] = value
    return target


def _require(predicate: Optional[Predicate], name: str) -> Predicate:
    if predicate is None:
        raise TypeError(f"{name}() requires a predicate")
    return predicate


def merge_compact(mapping: Mapping, other: Optional[Mapping] = None, /, **kwargs: Any) -> Dict[Any, Any]:
    """Merge only the incoming entries whose value is not None."""
    return _merge_where(dict(mapping), _incoming(other, kwargs), lambda _key, value: value is not None)


def merge_compact_in_place(mapping: MutableMapping, other: Optional[Mapping] = None, /, **kwargs: Any) -> MutableMapping:
    return _merge_where(mapping, _incoming(other, kwargs), lambda _key, value: value is not None)


def merge_if(mapping: Mapping, other: Optional[Mapping] = None, predicate: Optional[Predicate] = None, /, **kwargs: Any) -> Dict[Any, Any]:
    """Merge only the incoming entries for which predicate(key, value) holds."""
    return _merge_where(dict(mapping), _incoming(other, kwargs), _require(predicate, "merge_if"))


def merge_if_in_place(
    mapping: MutableMapping, other: Optional[Mapping] = None, predicate: Optional[Predicate] = None, /, **kwargs: Any
) -> MutableMapping:
    return _merge_where(mapping, _incoming(other, kwargs), _require(predicate, "merge_if_in_place"))


def merge_if_values(mapping: Mapping, other: Optional[Mapping] = None, predicate: Optional[Predicate] = None, /, **kwargs: Any) -> Dict[Any, Any]:
    """Merge only the incoming entries for which predicate(value) holds."""
    check = _require(predicate, "merge_if_values")
    return _merge_where(dict(mapping), _incoming(other, kwargs), lambda _key, value: check(value))


def merge_if_values_in_place(
    mapping: MutableMapping, other: Optional[Mapping] = None, predicate: Optional[Predicate] = None, /, **kwargs: Any
) -> MutableMapping:
    check = _require(predicate, "merge_if_values_in_place")
    return _merge_where(mapping, _incoming(other, kwargs), lambda _key, value: check(value))


def compact_blank_merge(mapping: Mapping, other: Optional[Mapping] = None, /, **kwargs: Any) -> Dict[Any, Any]:
    """Merge only the incoming entries whose value is present (not blank)."""
    return _merge_where(dict(mapping), _incoming(other, kwargs), lambda _key, value: is_present(value))


def compact_blank_merge_in_place(mapping: MutableMapping, other: Optional[Mapping] = None, /, **kwargs: Any) -> MutableMapping:
    return _merge_where(mapping, _incoming(other, kwargs), lambda _key, value: is_present(value))


def select_values(mapping: Mapping, predicate: Predicate) -> Dict[Any, Any]:
    """Keep the entries whose value satisfies predicate(value)."""
    return {key: value for key, value in mapping.items() if predicate(value)}


def select_values_in_place(mapping: MutableMapping, predicate: Predicate) -> MutableMapping:
    for key in [key for key, value in mapping.items() if not predicate(value)]:
        del mapping[key]
    return mapping


def reject_values(mapping: Mapping, predicate: Predicate) -> Dict[Any, Any]:
    """Drop the entries whose value satisfies predicate(value)."""
    return {key: value for key, value in mapping.items() if not predicate(value)}


def reject_values_in_place(mapping: MutableMapping, predicate: Predicate) -> MutableMapping:
    for key in [key for key, value in mapping.items() if predicate(value)]:
        del mapping[key]
    return mapping


filter_values = select_values
filter_values_in_place = select_values_in_place


__all__ = [
    "ValueTransformer",
    "compact_blank_merge",
    "compact_blank_merge_in_place",
    "deep_transform_values",
    "deep_transform_values_in_place",
    "filter_values",
    "filter_values_in_place",
    "join_map",
    "merge_compact",
    "merge_compact_in_place",
    "merge_if",
    "merge_if_in_place",
    "merge_if_values",
    "merge_if_values_in_place",
    "reject_values",
    "reject_values_in_place",
    "rename_key",
    "rename_key_in_place",
    "rename_key_unordered",
    "rename_key_unordered_in_place",
    "rename_keys",
    "rename_keys_in_place",
    "replace_key",
    "replace_key_in_place",
    "replace_keys",
    "replace_keys_in_place",
    "select_values",
    "select_values_in_place",
    "transform",
    "transform_in_place",
    "transform_values",
    "transform_values_in_place",
    "value_where",
    "values_where",
]
