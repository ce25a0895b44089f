"""Tests for coreext.string."""

from __future__ import annotations

import orjson
import pytest

from coreext.ostruct import OpenRecord
from coreext.records import FrozenRecord, Record
from coreext.string import (
    in_quotes,
    to_a,
    to_camelcase,
    to_deep_h,
    to_h,
    to_istruct,
    to_ostruct,
    to_struct,
    with_quotes,
)


@pytest.fixture
def layered_json() -> str:
    inner = orjson.dumps({"d": 2}).decode()
    return orjson.dumps({"a": {"b": [{"c": 1}, inner]}}).decode()


class TestToH:
    """Tests for to_h and to_a."""

    def test_parses_object(self) -> None:
        assert to_h('{"name": "Alice", "tags": [1, 2]}') == {"name": "Alice", "tags": [1, 2]}

    def test_parses_array(self) -> None:
        assert to_a("[1, 2, 3]") == [1, 2, 3]

    def test_accepts_bytes(self) -> None:
        assert to_h(b'{"a": null}') == {"a": None}

    @pytest.mark.parametrize("payload", ["not json", "{", "", "{'single': 1}"])
    def test_returns_none_on_invalid_json(self, payload) -> None:
        assert to_h(payload) is None


class TestToDeepH:
    """Tests for to_deep_h on strings."""

    def test_unwraps_nested_json(self, layered_json) -> None:
        assert to_deep_h(layered_json) == {"a": {"b": [{"c": 1}, {"d": 2}]}}

    def test_unwraps_double_encoded_values(self) -> None:
        assert to_deep_h('{"profile":"{\\"level\\":\\"expert\\"}"}') == {"profile": {"level": "expert"}}

    def test_keeps_plain_strings(self) -> None:
        assert to_deep_h('{"name": "Alice", "age": "30"}') == {"name": "Alice", "age": "30"}

    def test_returns_none_on_invalid_json(self) -> None:
        assert to_deep_h("nope") is None


class TestRecordConversion:
    """Tests for to_struct, to_istruct and to_ostruct on strings."""

    def test_to_struct_parses_shallow(self, layered_json) -> None:
        record = to_struct(layered_json)
        assert isinstance(record, Record)
        assert isinstance(record.a.b[0], Record)
        assert record.a.b[0].c == 1
        assert isinstance(record.a.b[1], str)

    def test_to_istruct(self, layered_json) -> None:
        record = to_istruct(layered_json)
        assert isinstance(record, FrozenRecord)
        assert record.a.b[0].c == 1

    def test_to_ostruct(self, layered_json) -> None:
        record = to_ostruct(layered_json)
        assert isinstance(record, OpenRecord)
        assert record.a.b[0].c == 1

    @pytest.mark.parametrize("convert", [to_struct, to_istruct, to_ostruct])
    def test_returns_none_on_invalid_json(self, convert) -> None:
        assert convert("invalid_json") is None

    @pytest.mark.parametrize("convert", [to_struct, to_istruct, to_ostruct])
    def test_returns_none_for_non_object_json(self, convert) -> None:
        assert convert("[1, 2]") is None


class TestToCamelcase:
    """Tests for to_camelcase."""

    SAMPLE = "Please WAIT while your AOL_MAIL are being dialed-up. LOADING... 56k▓▓▓▒▒▒░░░"

    def test_upper(self) -> None:
        assert to_camelcase(self.SAMPLE) == "PleaseWaitWhileYourAolMailAreBeingDialedUpLoading56k"

    def test_lower(self) -> None:
        assert to_camelcase(self.SAMPLE, "lower") == "pleaseWaitWhileYourAolMailAreBeingDialedUpLoading56k"

    def test_empty(self) -> None:
        assert to_camelcase("") == ""
        assert to_camelcase("--", "lower") == ""

    def test_rejects_unknown_mode(self) -> None:
        with pytest.raises(ValueError):
            to_camelcase("abc", "title")


def test_with_quotes_does_not_escape():
    assert with_quotes("foo") == '"foo"'
    assert in_quotes('say "hi"') == '"say "hi""'
