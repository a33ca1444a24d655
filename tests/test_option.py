"""Tests for the `Option` type."""

import pytest

import collext as cx


def test_some_accessors() -> None:
    """Test accessors on `Some`."""
    opt = cx.Some(3)
    assert opt.is_some()
    assert not opt.is_none()
    assert opt.unwrap() == 3
    assert opt.expect("unused") == 3
    assert opt.unwrap_or(0) == 3
    assert opt.map(lambda x: x + 1) == cx.Some(4)


def test_none_accessors() -> None:
    """Test accessors on `NONE`."""
    assert cx.NONE.is_none()
    assert not cx.NONE.is_some()
    assert cx.NONE.unwrap_or(0) == 0
    assert cx.NONE.map(lambda x: x + 1) is cx.NONE
    assert repr(cx.NONE) == "NONE"


def test_none_unwrap_raises() -> None:
    """Test that unwrapping `NONE` raises."""
    with pytest.raises(cx.OptionUnwrapError, match="unwrap"):
        cx.NONE.unwrap()
    with pytest.raises(cx.OptionUnwrapError, match="missing value"):
        cx.NONE.expect("missing value")


def test_from_value() -> None:
    """Test building an `Option` from a possibly `None` value."""
    assert cx.Option.from_(0) == cx.Some(0)
    assert cx.Option.from_(None) is cx.NONE


def test_iter_next() -> None:
    """Test that `Iter.next` tells a stored `None` from exhaustion."""
    it = cx.Iter.from_([None])
    assert it.next() == cx.Some(None)
    assert it.next().is_none()


def test_lookup_results_expose_option_accessors() -> None:
    """Test the `Option` accessors on values produced by lookups."""
    assert cx.first_cast([1, "abc"], str).map(len) == cx.Some(3)
    assert cx.first_cast(["a"], float).unwrap_or(0.5) == 0.5
    with pytest.raises(cx.OptionUnwrapError, match="no int in payload"):
        cx.first_cast([], int).expect("no int in payload")
