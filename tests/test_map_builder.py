"""Tests for MapBuilder staging and resolution order."""

import pytest

from crafter import IncompleteBuilderError, MapBuilder, ValueBuilder
from crafter.map_builder import Entry


class RecordingBuilder(ValueBuilder):
    def __init__(self, value, log):
        super().__init__(value)
        self.log = log

    def get(self):
        value = super().get()
        self.log.append(value)
        return value


def test_put_returns_self() -> None:
    uut = MapBuilder()
    res = uut.put(1, "andromeda")
    assert res is uut
    assert res.get() == {1: "andromeda"}


def test_empty_builder_builds_empty_dict() -> None:
    assert MapBuilder().get() == {}


def test_put_builder_resolved_at_get_time() -> None:
    inner = ValueBuilder("Saphron")
    uut = MapBuilder().put(1, "andromeda").put(2, inner)
    assert uut.get() == {1: "andromeda", 2: "Saphron"}

    inner.set("Thyme")
    assert uut.get() == {1: "andromeda", 2: "Thyme"}


def test_last_write_wins_and_every_value_is_resolved_once() -> None:
    log = []
    uut = MapBuilder().put(1, RecordingBuilder("a", log)).put(1, RecordingBuilder("b", log))
    assert uut.get() == {1: "b"}
    assert log == ["a", "b"]


def test_key_order_is_first_occurrence() -> None:
    uut = MapBuilder().put("x", 1).put("y", 2).put("x", 3).put("z", 4)
    built = uut.get()
    assert list(built) == ["x", "y", "z"]
    assert built == {"x": 3, "y": 2, "z": 4}


def test_none_key_and_value_are_allowed() -> None:
    assert MapBuilder().put(None, None).get() == {None: None}


def test_put_all_and_constructor() -> None:
    uut = MapBuilder({"a": 1, "b": 2}).put_all([("c", 3), ("a", 4)])
    assert uut.get() == {"a": 4, "b": 2, "c": 3}


@pytest.mark.parametrize(
    "value, condition, expected",
    [
        ("Saphron", True, {1: "andromeda", 2: "Saphron", 3: "---"}),
        (ValueBuilder("Saphron"), True, {1: "andromeda", 2: "Saphron", 3: "---"}),
        ("Saphron", False, {1: "andromeda", 3: "---"}),
        (ValueBuilder("Saphron"), False, {1: "andromeda", 3: "---"}),
    ],
)
def test_maybe_put(value, condition, expected) -> None:
    uut = MapBuilder()
    res = uut.put(1, "andromeda").maybe_put(2, value, condition).put(3, "---")
    assert res is uut
    assert uut.get() == expected


def test_apply() -> None:
    uut = MapBuilder().put(1, "one").put(2, "Deux")
    res = uut.apply(lambda b: b.put(32, "three tens and two"))
    assert res is uut
    assert uut.get() == {1: "one", 2: "Deux", 32: "three tens and two"}


def test_get_returns_independent_dicts() -> None:
    uut = MapBuilder().put(1, "one")
    first = uut.get()
    first[2] = "two"
    second = uut.get()
    assert second == {1: "one"}
    assert first is not second


def test_maybe_false_put_is_discarded() -> None:
    orig = MapBuilder().put(4, "four").put(5, "not six")
    uut = orig.maybe(False)
    res = uut.put(7, "sept").maybe_put(8, "huit", True).put_all({9: "neuf"})
    assert res is uut
    assert orig.get() == {4: "four", 5: "not six"}
    assert uut.get() == {4: "four", 5: "not six"}


def test_maybe_false_then_true_stays_discarded() -> None:
    orig = MapBuilder().put(4, "four")
    orig.maybe(False).maybe(True).put(7, "sept")
    assert orig.get() == {4: "four"}


def test_maybe_false_always_returns_root() -> None:
    orig = MapBuilder().put(4, "four")
    assert orig.maybe(False).maybe(True).maybe(False).always() is orig
    assert orig.maybe(False).end_maybe() is orig


def test_child_error_stops_the_build() -> None:
    log = []
    uut = (
        MapBuilder()
        .put("a", RecordingBuilder("a", log))
        .put("b", ValueBuilder())
        .put("c", RecordingBuilder("c", log))
    )
    with pytest.raises(IncompleteBuilderError):
        uut.get()
    assert log == ["a"]


def test_build_map_receives_staged_entries() -> None:
    class SortedMapBuilder(MapBuilder):
        def _build_map(self, entries):
            assert all(isinstance(entry, Entry) for entry in entries)
            return dict(sorted(super()._build_map(entries).items()))

    uut = SortedMapBuilder().put("b", 2).put("a", 1)
    assert list(uut.get()) == ["a", "b"]


def test_failed_put_all_stages_nothing() -> None:
    uut = MapBuilder().put("a", 1)
    with pytest.raises((TypeError, ValueError)):
        uut.put_all([("b", 2), "not-a-pair"])
    assert uut.get() == {"a": 1}
