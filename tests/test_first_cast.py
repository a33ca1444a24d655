"""Tests for the type-filtered first element lookups."""

import collext as cx


class _Animal:
    pass


class _Dog(_Animal):
    pass


def test_first_matching_int() -> None:
    """Test the reference example."""
    assert cx.first_cast_or_default([1, "a", 2.0, 3], int) == 1


def test_first_matching_other_types() -> None:
    """Test lookups for types placed after other elements."""
    data = [1, "a", 2.0, 3]
    assert cx.first_cast_or_default(data, str) == "a"
    assert cx.first_cast_or_default(data, float) == 2.0


def test_no_match_returns_zero_value() -> None:
    """Test the zero values of builtin value types."""
    data = [object()]
    assert cx.first_cast_or_default(["a", "b"], int) == 0
    assert cx.first_cast_or_default(data, float) == 0.0
    assert cx.first_cast_or_default(data, str) == ""
    assert cx.first_cast_or_default(data, bytes) == b""
    assert cx.first_cast_or_default(data, bool) is False


def test_no_match_returns_none_for_other_types() -> None:
    """Test that non value types default to `None`."""
    assert cx.first_cast_or_default([1, 2], list) is None
    assert cx.first_cast_or_default([], _Animal) is None


def test_explicit_default() -> None:
    """Test a caller provided default."""
    assert cx.first_cast_or_default(["a"], int, default=-1) == -1
    assert cx.first_cast_or_default(["a"], int, default=None) is None


def test_subclass_instances_match() -> None:
    """Test that instances of subclasses are returned."""
    dog = _Dog()
    assert cx.first_cast_or_default(["a", dog], _Animal) is dog
    assert cx.first_cast_or_default(["a", True, 2], int) is True


def test_stops_at_first_match() -> None:
    """Test that enumeration stops as soon as an element matches."""
    pulled: list[object] = []

    def _gen():
        for x in ("a", 1, "b", 2):
            pulled.append(x)
            yield x

    assert cx.first_cast_or_default(_gen(), int) == 1
    assert pulled == ["a", 1]


def test_first_cast_option() -> None:
    """Test that `first_cast` tells a matching zero value from no match."""
    assert cx.first_cast([0, "a"], int) == cx.Some(0)
    assert cx.first_cast(["a"], int).is_none()
    assert cx.first_cast([], int) is cx.NONE


def test_wrapper_methods() -> None:
    """Test the `Seq` and `Iter` methods."""
    assert cx.Seq(("a", 2)).first_cast_or_default(int) == 2
    assert cx.Iter.from_(["a"]).first_cast_or_default(int, default=7) == 7
    assert cx.Iter.from_([1.5]).first_cast(float).unwrap() == 1.5
