"""Tests for coreext.exceptions."""

from __future__ import annotations

import pytest

from coreext.exceptions import ExtensionError, KeyAccessError, PredicateCollisionError, RecordFieldError


class TestExtensionError:
    def test_default_message_comes_from_docstring(self) -> None:
        assert str(ExtensionError()).startswith("Base exception for all extension errors.")

    def test_kwargs_become_attributes(self) -> None:
        err = KeyAccessError(receiver=42, keys=("a",))
        assert err.receiver == 42
        assert err.keys == ("a",)
        assert str(err) == "Receiver does not support key or index lookup"


@pytest.mark.parametrize(
    ("error", "builtin"),
    [
        (KeyAccessError.unsupported(1, ("a",)), TypeError),
        (PredicateCollisionError.already_defined(object, "is_x"), ValueError),
        (RecordFieldError.invalid_name("a b"), ValueError),
    ],
)
def test_factories_build_catchable_errors(error, builtin) -> None:
    assert isinstance(error, ExtensionError)
    assert isinstance(error, builtin)


def test_factory_messages() -> None:
    assert str(KeyAccessError.unsupported(1, ("a",))) == "int does not support lookup by ('a',)"
    assert "is_x is already defined" in str(PredicateCollisionError.already_defined(object, "is_x"))
    assert RecordFieldError.invalid_name("a b").key == "a b"
