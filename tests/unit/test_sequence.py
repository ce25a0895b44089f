"""Tests for coreext.sequence."""

from __future__ import annotations

from collections import namedtuple
from dataclasses import FrozenInstanceError, dataclass
from types import MappingProxyType

import pytest

from coreext.exceptions import KeyAccessError
from coreext.mapping_convert import to_istruct, to_struct
from coreext.ostruct import OpenRecord
from coreext.sequence import (
    compact_blank_prefix,
    compact_blank_suffix,
    compact_prefix,
    compact_suffix,
    deep_freeze,
    dig,
    dig_map,
    join_map,
    key_map,
    to_deep_h,
    to_or_sentence,
    to_sentence,
    trim_blanks,
    trim_nils,
)


class TestJoinMap:
    """Tests for join_map."""

    def test_drops_none_without_func(self) -> None:
        """Identity join drops None values."""
        assert join_map(["foo", None, "bar", None, "baz"], " ") == "foo bar baz"

    def test_default_separator_is_empty(self) -> None:
        assert join_map([1, 2, None, 3]) == "123"

    def test_filters_with_func(self) -> None:
        """Results that are None are dropped."""
        result = join_map([1, 2, None, 3], " ", lambda n: str(n) if n is not None and n % 2 else None)
        assert result == "1 3"

    def test_drops_false_but_keeps_falsy_values(self) -> None:
        """Only None and False are dropped; 0 and empty strings survive."""
        assert join_map([0, False, "", "x"], ",") == "0,,x"

    def test_passes_index(self) -> None:
        result = join_map(["a", "b", "c"], ", ", lambda char, i: f"{i}:{char}", with_index=True)
        assert result == "0:a, 1:b, 2:c"

    def test_flattens_nested_results(self) -> None:
        assert join_map([["a", 1], ["b", None]], " ") == "a 1 b "


class TestKeyAndDigMap:
    """Tests for key_map, dig_map and dig."""

    def test_key_map_extracts_key(self) -> None:
        users = [{"name": "Alice", "age": 30}, {"name": "Bob", "age": 25}]
        assert key_map(users, "name") == ["Alice", "Bob"]

    def test_key_map_missing_key_yields_none(self) -> None:
        assert key_map([{"name": "Alice"}, {}], "name") == ["Alice", None]

    def test_dig_map_extracts_nested_values(self) -> None:
        data = [
            {"user": {"profile": {"name": "Alice"}}},
            {"user": {"profile": {"name": "Bob"}}},
        ]
        assert dig_map(data, "user", "profile", "name") == ["Alice", "Bob"]

    def test_dig_map_missing_path_yields_none(self) -> None:
        assert dig_map([{"user": None}, {"user": {}}], "user", "profile", "name") == [None, None]

    def test_dig_map_rejects_non_lookup_elements(self) -> None:
        with pytest.raises(KeyAccessError):
            dig_map([{"a": 1}, 42], "a")

    def test_key_access_error_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            key_map(["text"], "name")

    def test_dig_follows_list_indexes(self) -> None:
        assert dig({"items": [{"id": 1}, {"id": 2}]}, "items", 1, "id") == 2
        assert dig({"items": []}, "items", 3) is None


class TestCompaction:
    """Tests for trimming None and blank values from the ends."""

    def test_compact_prefix(self) -> None:
        assert compact_prefix([None, None, 1, 2, None, 3]) == [1, 2, None, 3]

    def test_compact_suffix(self) -> None:
        assert compact_suffix([1, 2, None, 3, None, None]) == [1, 2, None, 3]

    def test_trim_nils_keeps_interior_values(self) -> None:
        assert trim_nils([None, None, "", None, 1, None, None, None]) == ["", None, 1]

    @pytest.mark.parametrize(
        "values",
        [[], [None], [None, 1, None], [1, None, 2], [None, None, 0, None]],
    )
    def test_trim_nils_matches_prefix_then_suffix(self, values) -> None:
        assert trim_nils(values) == compact_suffix(compact_prefix(values))

    def test_compact_blank_prefix(self) -> None:
        assert compact_blank_prefix([None, "", 1, 2, "", 3]) == [1, 2, "", 3]

    def test_compact_blank_suffix(self) -> None:
        assert compact_blank_suffix([1, 2, "", 3, None, ""]) == [1, 2, "", 3]

    def test_trim_blanks(self) -> None:
        assert trim_blanks([None, "", 1, 2, "", 3, None, "  ", []]) == [1, 2, "", 3]


class TestSentences:
    """Tests for to_sentence and to_or_sentence."""

    def test_to_sentence(self) -> None:
        assert to_sentence([]) == ""
        assert to_sentence(["red"]) == "red"
        assert to_sentence(["red", "blue"]) == "red and blue"
        assert to_sentence(["red", "blue", "green"]) == "red, blue, and green"

    def test_to_or_sentence(self) -> None:
        assert to_or_sentence(["yes", "no"]) == "yes or no"
        assert to_or_sentence(["red", "blue", "green"]) == "red, blue, or green"

    def test_to_or_sentence_accepts_overrides(self) -> None:
        assert to_or_sentence(["a", "b", "c"], last_word_connector=" or ") == "a, b or c"


Point = namedtuple("Point", ["x", "y"])


@dataclass
class Person:
    name: str


class TestToDeepH:
    """Tests for to_deep_h on sequences."""

    def test_handles_mixed_types(self) -> None:
        result = to_deep_h(
            [
                {"name": "Alice", "roles": ["admin"]},
                OpenRecord(name="Bob", active=True),
                Person(name="Carol"),
            ]
        )
        assert result == [
            {"name": "Alice", "roles": ["admin"]},
            {"name": "Bob", "active": True},
            {"name": "Carol"},
        ]

    def test_converts_nested_json(self) -> None:
        result = to_deep_h(
            [
                {"profile": '{"level":"expert"}'},
                [OpenRecord(id=1), OpenRecord(id=2)],
                [1, True, [2.0]],
            ]
        )
        assert result == [
            {"profile": {"level": "expert"}},
            [{"id": 1}, {"id": 2}],
            [1, True, [2.0]],
        ]

    def test_keeps_strings_that_are_not_json_containers(self) -> None:
        assert to_deep_h(["plain", "123", "true"]) == ["plain", "123", "true"]

    def test_does_not_mutate_input(self) -> None:
        original = [{"a": '{"b": 1}'}]
        to_deep_h(original)
        assert original == [{"a": '{"b": 1}'}]


class TestDeepFreeze:
    """Tests for deep_freeze on sequences."""

    def test_freezes_nested_values(self) -> None:
        frozen = deep_freeze(["hello", {"name": "Alice"}, [1, 2, 3]])
        assert frozen == ("hello", MappingProxyType({"name": "Alice"}), (1, 2, 3))
        assert isinstance(frozen[1], MappingProxyType)
        with pytest.raises(TypeError):
            frozen[1]["name"] = "Bob"

    def test_is_idempotent(self) -> None:
        once = deep_freeze([{"a": [1, {"b": 2}]}])
        twice = deep_freeze(once)
        assert twice == once


class TestDigIntoRecords:
    """Lookups step into open records, generated records and dataclasses."""

    def test_key_map_over_open_records(self) -> None:
        assert key_map([OpenRecord(name="Alice"), OpenRecord(name="Bob")], "name") == ["Alice", "Bob"]

    def test_key_map_over_generated_records(self) -> None:
        people = [to_struct({"name": "Alice"}), to_istruct({"name": "Bob"})]
        assert key_map(people, "name") == ["Alice", "Bob"]

    def test_dig_map_through_mixed_levels(self) -> None:
        data = [
            {"user": OpenRecord(profile=Person(name="Alice"))},
            {"user": to_struct({"profile": {"name": "Bob"}})},
        ]
        assert dig_map(data, "user", "profile", "name") == ["Alice", "Bob"]

    def test_missing_field_yields_none(self) -> None:
        assert dig(to_struct({"a": 1}), "b") is None

    def test_namedtuple_by_name_and_index(self) -> None:
        point = Point(3, 4)
        assert dig(point, "y") == 4
        assert dig(point, 0) == 3

    def test_list_with_field_name_still_rejected(self) -> None:
        with pytest.raises(KeyAccessError):
            dig([1, 2], "name")


def test_deep_freeze_freezes_generated_records() -> None:
    frozen = deep_freeze([to_struct({"a": 1, "tags": ["x"]})])
    with pytest.raises(FrozenInstanceError):
        frozen[0].a = 2
    assert frozen[0].tags == ("x",)
