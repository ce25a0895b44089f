"""
Selective loading of extension groups.

Each group bundles the helpers for one kind of receiver. Applications that
only want some of them can list group names, either explicitly or through the
COREEXT_EXTENSIONS setting, and get back a namespace holding just those
groups plus the prelude.
"""

from __future__ import annotations

import importlib
import logging
from types import SimpleNamespace
from typing import Dict, Iterable, Optional, Tuple

from coreext.config import ConfigurationError, get_settings

logger = logging.getLogger(__name__)

EXTENSION_GROUPS: Dict[str, Tuple[str, ...]] = {
    "array": ("coreext.sequence",),
    "enumerable": ("coreext.enumerable",),
    "hash": ("coreext.mapping", "coreext.mapping_convert", "coreext.nested"),
    "string": ("coreext.string",),
    "struct": ("coreext.records",),
    "ostruct": ("coreext.ostruct",),
    "module": ("coreext.predicates",),
    "quotable": ("coreext.quotable",),
    "kernel": ("coreext.kernel",),
}

PRELUDE: Dict[str, Tuple[str, ...]] = {
    "presence": ("coreext.presence",),
    "json": ("coreext.json_parsing",),
    "deprecation": ("coreext.deprecation",),
}


class ExtensionNamespace(SimpleNamespace):
    """Loaded groups, each exposed as an attribute holding that group's helpers."""

    def loaded_groups(self) -> Tuple[str, ...]:
        return tuple(name for name in vars(self) if name in EXTENSION_GROUPS)


def _load_group(module_paths: Iterable[str]) -> SimpleNamespace:
    exports: Dict[str, object] = {}
    for module_path in module_paths:
        module = importlib.import_module(module_path)
        for name in getattr(module, "__all__", ()):
            exports[name] = getattr(module, name)
    return SimpleNamespace(**exports)


def resolve_groups(groups: Optional[Iterable[str]] = None) -> Tuple[str, ...]:
    """
    Decide which groups to load.

    Args:
        groups: Explicit group names; falls back to the configured list, then to every group

    Raises:
        ConfigurationError: If a group name is unknown
    """
    if groups is None:
        groups = get_settings().extensions
    if groups is None:
        return tuple(EXTENSION_GROUPS)

    selected: list[str] = []
    for name in groups:
        normalized = name.strip().lower()
        if normalized not in EXTENSION_GROUPS:
            raise ConfigurationError.unknown_extension(name, tuple(EXTENSION_GROUPS))
        if normalized not in selected:
            selected.append(normalized)
    return tuple(selected)


def load_extensions(groups: Optional[Iterable[str]] = None) -> ExtensionNamespace:
    """
    Import the selected extension groups along with the prelude.

    Example:
        >>> ns = load_extensions(["hash"])
        >>> ns.hash.rename_key({"a": 1}, "a", "b")
        {'b': 1}
        >>> hasattr(ns, "string")
        False
    """
    selected = resolve_groups(groups)
    loaded: Dict[str, SimpleNamespace] = {name: _load_group(paths) for name, paths in PRELUDE.items()}
    for name in selected:
        loaded[name] = _load_group(EXTENSION_GROUPS[name])

    logger.debug("Loaded extension groups: %s", ", ".join(selected) or "<prelude only>")
    return ExtensionNamespace(**loaded)


__all__ = ["EXTENSION_GROUPS", "ExtensionNamespace", "PRELUDE", "load_extensions", "resolve_groups"]
