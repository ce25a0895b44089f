"""Exception classes raised by the extension helpers.

Every helper raises subclasses of ``ExtensionError`` so callers can catch the
whole family at once. Each subclass also derives from the builtin exception a
caller would naturally expect (``TypeError`` for bad receivers, ``ValueError``
for bad arguments).

Exception classes support two patterns:
1. No-argument raise: raise KeyAccessError()
2. Contextual attributes: err = KeyAccessError(receiver=value, keys=("a",)); raise err
"""

from typing import Any


class ExtensionError(Exception):
    """Base exception for all extension errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Extension error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class KeyAccessError(ExtensionError, TypeError):
    """Receiver does not support key or index lookup."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Receiver does not support key or index lookup"
        super().__init__(message, **kwargs)

    @classmethod
    def unsupported(cls, receiver: Any, keys: tuple) -> "KeyAccessError":
        """Create error for a receiver that cannot be dug into."""
        return cls(
            f"{type(receiver).__name__} does not support lookup by {keys!r}",
            receiver=receiver,
            keys=keys,
        )


class PredicateCollisionError(ExtensionError, ValueError):
    """Predicate method name is already defined."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Predicate method name is already defined"
        super().__init__(message, **kwargs)

    @classmethod
    def already_defined(cls, owner: type, method_name: str) -> "PredicateCollisionError":
        """Create error for a predicate that would shadow an existing attribute."""
        return cls(
            f"Cannot create predicate method on {owner.__name__} - {method_name} is already defined. "
            "Please choose a different name or remove the existing method.",
            owner=owner,
            method_name=method_name,
        )


class RecordFieldError(ExtensionError, ValueError):
    """Mapping key cannot be used as a record field name."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Mapping key cannot be used as a record field name"
        super().__init__(message, **kwargs)

    @classmethod
    def invalid_name(cls, key: Any) -> "RecordFieldError":
        """Create error for a key that is not a valid identifier."""
        return cls(f"Record field name must be a valid identifier (got {key!r})", key=key)


__all__ = [
    "ExtensionError",
    "KeyAccessError",
    "PredicateCollisionError",
    "RecordFieldError",
]
