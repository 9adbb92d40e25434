"""Tests for merge()."""

import logging

import pytest

from sortedlinkmap import OrderedMap, merge


def test_merge_disjoint_and_agreeing_keys() -> None:
    """Test that agreeing keys appear once."""
    map_a = OrderedMap({"x": 1.0, "y": 2.0})
    map_b = OrderedMap({"y": 2.0, "z": 3.0})
    result = OrderedMap()

    assert merge(map_a, map_b, result)
    assert list(result.items()) == [("x", 1.0), ("y", 2.0), ("z", 3.0)]


def test_merge_conflict_omits_key_by_default() -> None:
    """Test the default policy drops a conflicting key and reports it."""
    map_a = OrderedMap({"x": 1.0, "y": 2.0})
    map_b = OrderedMap({"y": 9.0, "z": 3.0})
    result = OrderedMap()

    assert not merge(map_a, map_b, result)
    assert list(result.items()) == [("x", 1.0), ("z", 3.0)]


def test_merge_conflict_prefer_first() -> None:
    """Test the 'first' policy keeps map_a's value."""
    map_a = OrderedMap({"x": 1.0, "y": 2.0})
    map_b = OrderedMap({"y": 9.0, "z": 3.0})
    result = OrderedMap()

    assert not merge(map_a, map_b, result, policy="first")
    assert list(result.items()) == [("x", 1.0), ("y", 2.0), ("z", 3.0)]


def test_merge_conflict_prefer_second() -> None:
    """Test the 'second' policy keeps map_b's value."""
    map_a = OrderedMap({"x": 1.0, "y": 2.0})
    map_b = OrderedMap({"y": 9.0, "z": 3.0})
    result = OrderedMap()

    assert not merge(map_a, map_b, result, policy="second")
    assert list(result.items()) == [("x", 1.0), ("y", 9.0), ("z", 3.0)]


def test_merge_overwrites_result() -> None:
    """Test that prior content of result is discarded."""
    result = OrderedMap({"old": 0.0, "x": 42.0})
    assert merge(OrderedMap({"x": 1.0}), OrderedMap(), result)
    assert list(result.items()) == [("x", 1.0)]


def test_merge_does_not_mutate_inputs() -> None:
    """Test that both inputs are left as they were."""
    map_a = OrderedMap({"a": 1.0, "c": 3.0})
    map_b = OrderedMap({"b": 2.0, "c": 4.0})
    a_before, b_before = map_a.copy(), map_b.copy()

    merge(map_a, map_b, OrderedMap())

    assert map_a == a_before
    assert map_b == b_before


def test_merge_both_empty() -> None:
    """Test merging two empty maps."""
    result = OrderedMap({"a": 1.0})
    assert merge(OrderedMap(), OrderedMap(), result)
    assert result.empty()


def test_merge_interleaved_keys_sorted() -> None:
    """Test that the result is sorted when inputs interleave."""
    map_a = OrderedMap({"a": 1.0, "c": 3.0, "e": 5.0, "g": 7.0})
    map_b = OrderedMap({"b": 2.0, "d": 4.0, "f": 6.0})
    result = OrderedMap()

    assert merge(map_a, map_b, result)
    assert list(result.keys()) == list("abcdefg")


def test_merge_into_first_input() -> None:
    """Test that result may be map_a."""
    map_a = OrderedMap({"a": 1.0, "b": 2.0})
    map_b = OrderedMap({"b": 5.0, "c": 3.0})

    assert not merge(map_a, map_b, map_a)
    assert list(map_a.items()) == [("a", 1.0), ("c", 3.0)]


def test_merge_into_second_input() -> None:
    """Test that result may be map_b."""
    map_a = OrderedMap({"a": 1.0})
    map_b = OrderedMap({"b": 2.0})

    assert merge(map_a, map_b, map_b)
    assert list(map_b.items()) == [("a", 1.0), ("b", 2.0)]


def test_merge_map_with_itself() -> None:
    """Test merging a map with itself into itself."""
    m = OrderedMap({"a": 1.0, "b": 2.0})
    assert merge(m, m, m)
    assert list(m.items()) == [("a", 1.0), ("b", 2.0)]


def test_merge_respects_result_capacity() -> None:
    """Test that pairs beyond result's max_size are dropped."""
    result = OrderedMap(max_size=2)
    assert not merge(OrderedMap({"a": 1.0, "b": 2.0}), OrderedMap({"c": 3.0}), result)
    assert list(result.keys()) == ["a", "b"]
    assert result.max_size == 2


def test_merge_unknown_policy() -> None:
    """Test that an unknown policy is an error."""
    with pytest.raises(ValueError):
        merge(OrderedMap(), OrderedMap(), OrderedMap(), policy="newest")  # type: ignore[arg-type]


def test_merge_conflict_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Test that conflicts are logged at debug level."""
    with caplog.at_level(logging.DEBUG, logger="sortedlinkmap"):
        merge(OrderedMap({"k": 1.0}), OrderedMap({"k": 2.0}), OrderedMap())
    assert "Merge conflict on 'k'" in caplog.text


def test_merge_map_with_itself_with_infinity() -> None:
    """Test that special float values agree with themselves."""
    m = OrderedMap({"a": float("inf"), "b": float("-inf")})
    result = OrderedMap()
    assert merge(m, m, result)
    assert result == m


def test_merge_keeps_result_capacity() -> None:
    """Test that result keeps its own max_size after a merge."""
    result = OrderedMap(max_size=3)
    merge(OrderedMap({"a": 1.0}), OrderedMap({"b": 2.0}), result)
    assert result.max_size == 3
