"""Tests for maybe.core.capabilities module."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Sequence
from decimal import Decimal
from fractions import Fraction

from maybe.core.capabilities import (
    first_element,
    is_absent,
    is_keyed,
    is_record,
    is_scalar,
    lookup_field,
    lookup_key,
    lookup_operation,
)


class Thing:
    size = 3

    def grow(self) -> int:
        return self.size + 1


class Unfolding(Sequence[object]):
    """Sequence whose first element is a fresh object on every access."""

    def __init__(self, depth: int, leaf: object) -> None:
        self._depth = depth
        self._leaf = leaf

    def __len__(self) -> int:
        return 1

    def __getitem__(self, index: int) -> object:  # type: ignore[override]
        if index != 0:
            raise IndexError(index)
        if self._depth == 0:
            return self._leaf
        return Unfolding(self._depth - 1, self._leaf)


class TestClassification:
    def test_absent(self) -> None:
        assert is_absent(None)
        assert not is_absent(0)
        assert not is_absent("")

    def test_scalars(self) -> None:
        for value in ("s", b"b", bytearray(b"b"), 1, 1.5, True, 2j, Decimal("1"), Fraction(1, 2)):
            assert is_scalar(value), value
            assert not is_keyed(value), value
            assert not is_record(value), value

    def test_keyed(self) -> None:
        for value in ([], (), {}, range(3), OrderedDict()):
            assert is_keyed(value), value
            assert not is_record(value), value

    def test_records(self) -> None:
        for value in (Thing(), Thing, {1, 2}, frozenset(), object()):
            assert is_record(value), value

    def test_none_is_not_a_record(self) -> None:
        assert not is_record(None)


class TestLookupKey:
    def test_mapping(self) -> None:
        assert lookup_key({"a": 1}, "a") == 1
        assert lookup_key({"a": 1}, "b") is None

    def test_unhashable_key(self) -> None:
        assert lookup_key({"a": 1}, {}) is None

    def test_tuple_holding_unhashable_item(self) -> None:
        assert lookup_key({"a": 1}, ("a", [1])) is None

    def test_sequence(self) -> None:
        assert lookup_key([5, 6], 1) == 6
        assert lookup_key([5, 6], 2) is None
        assert lookup_key([5, 6], -1) is None
        assert lookup_key([5, 6], False) is None
        assert lookup_key(range(10), 4) == 4

    def test_not_keyed(self) -> None:
        assert lookup_key("abc", 0) is None
        assert lookup_key(None, "a") is None
        assert lookup_key(Thing(), "size") is None


class TestLookupField:
    def test_class_attribute(self) -> None:
        assert lookup_field(Thing(), "size") == 3

    def test_method_is_not_field(self) -> None:
        assert lookup_field(Thing(), "grow") is None

    def test_missing(self) -> None:
        assert lookup_field(Thing(), "nope") is None

    def test_non_record(self) -> None:
        assert lookup_field({"size": 3}, "size") is None
        assert lookup_field(None, "size") is None


class TestLookupOperation:
    def test_bound_method(self) -> None:
        operation = lookup_operation(Thing(), "grow")
        assert operation is not None
        assert operation() == 4

    def test_field_is_not_operation(self) -> None:
        assert lookup_operation(Thing(), "size") is None

    def test_scalar_methods_are_hidden(self) -> None:
        assert lookup_operation("abc", "upper") is None

    def test_keyed_methods_are_hidden(self) -> None:
        assert lookup_operation([], "append") is None


class TestFirstElement:
    def test_sequence(self) -> None:
        assert first_element([1, 2]) == 1

    def test_mapping_first_value(self) -> None:
        assert first_element({"b": 2, "a": 1}) == 2

    def test_nested(self) -> None:
        assert first_element([{"k": [7]}]) == 7

    def test_empty(self) -> None:
        assert first_element([]) is None
        assert first_element({}) is None
        assert first_element([[], 1]) is None

    def test_non_keyed_passes_through(self) -> None:
        thing = Thing()
        assert first_element(thing) is thing
        assert first_element("abc") == "abc"
        assert first_element(None) is None

    def test_elements_built_on_access(self) -> None:
        leaf = Thing()
        assert first_element(Unfolding(50, leaf)) is leaf

    def test_cycle(self) -> None:
        outer: list[object] = []
        inner: list[object] = [outer]
        outer.append(inner)
        assert first_element(outer) is None
