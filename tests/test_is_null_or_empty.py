"""Tests for null and emptiness checks."""

import collext as cx


def test_none_is_null_or_empty() -> None:
    """Test that `None` is reported as empty."""
    assert cx.is_null_or_empty(None) is True


def test_empty_collections() -> None:
    """Test empty builtin collections."""
    assert cx.is_null_or_empty([]) is True
    assert cx.is_null_or_empty(()) is True
    assert cx.is_null_or_empty(set()) is True
    assert cx.is_null_or_empty({}) is True
    assert cx.is_null_or_empty("") is True


def test_non_empty_collections() -> None:
    """Test collections with at least one element."""
    assert cx.is_null_or_empty([0]) is False
    assert cx.is_null_or_empty((None,)) is False
    assert cx.is_null_or_empty({"a": 1}) is False


def test_lazy_iterables() -> None:
    """Test that non sized iterables are probed for a first element."""
    assert cx.is_null_or_empty(x for x in ()) is True
    assert cx.is_null_or_empty(x for x in range(3)) is False


def test_probe_stops_after_first_element() -> None:
    """Test that at most one element is pulled from a lazy iterable."""
    pulled: list[int] = []

    def _gen():
        for x in range(5):
            pulled.append(x)
            yield x

    assert cx.is_null_or_empty(_gen()) is False
    assert pulled == [0]


def test_seq_is_empty() -> None:
    """Test the `Seq` method."""
    assert cx.Seq(()).is_empty() is True
    assert cx.Seq.from_([1, 2]).is_empty() is False


def test_iter_is_empty_keeps_elements() -> None:
    """Test that `Iter.is_empty` does not lose the peeked element."""
    it = cx.Iter.from_([1, 2, 3])
    assert it.is_empty() is False
    assert it.collect().inner() == (1, 2, 3)
    assert it.is_empty() is True
