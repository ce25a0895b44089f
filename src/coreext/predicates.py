"""Generated boolean accessors.

``attr_predicate("active")`` adds an ``is_active()`` method to a class. The
method reads the instance attribute ``active`` (or, failing that, the class
attribute, property or zero-argument method of that name) and reports it as a
strict bool. When the presence convention is enabled in the settings, blank
values such as empty strings and empty containers also report False.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, TypeVar

from coreext.config import presence_convention_enabled
from coreext.exceptions import PredicateCollisionError
from coreext.presence import is_present

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=type)

PREDICATE_PREFIX = "is_"


def predicate_name(attribute: str) -> str:
    return f"{PREDICATE_PREFIX}{attribute}"


def _read_attribute(instance: Any, attribute: str) -> Any:
    instance_fields = getattr(instance, "__dict__", None)
    if instance_fields is not None and attribute in instance_fields:
        return instance_fields[attribute]

    value = getattr(instance, attribute, None)
    if inspect.ismethod(value):
        return value()
    return value


def make_predicate(attribute: str) -> Callable[[Any], bool]:
    """Build the predicate function for one attribute without attaching it to a class."""

    def predicate(self: Any) -> bool:
        value = _read_attribute(self, attribute)
        if value is None:
            return False
        if presence_convention_enabled():
            return is_present(value)
        return bool(value)

    predicate.__name__ = predicate_name(attribute)
    predicate.__qualname__ = predicate.__name__
    predicate.__doc__ = f"Return whether {attribute} is set to a truthy value."
    return predicate


def define_predicates(cls: type, *attributes: str) -> None:
    """
    Attach an ``is_<attribute>()`` method to ``cls`` for each attribute.

    Raises:
        PredicateCollisionError: If ``cls`` already has an attribute with a predicate's name
    """
    for attribute in attributes:
        method_name = predicate_name(attribute)
        if hasattr(cls, method_name):
            raise PredicateCollisionError.already_defined(cls, method_name)

        predicate = make_predicate(attribute)
        predicate.__qualname__ = f"{cls.__qualname__}.{method_name}"
        setattr(cls, method_name, predicate)
        logger.debug("Defined %s.%s", cls.__name__, method_name)


def attr_predicate(*attributes: str) -> Callable[[C], C]:
    """
    Class decorator form of define_predicates.

    Example:
        >>> @attr_predicate("active")
        ... class Account:
        ...     def __init__(self, active):
        ...         self.active = active
        >>> Account(1).is_active()
        True
    """

    def decorate(cls: C) -> C:
        define_predicates(cls, *attributes)
        return cls

    return decorate


__all__ = ["attr_predicate", "define_predicates", "make_predicate", "predicate_name"]
