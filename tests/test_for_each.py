"""Tests for forward iteration with a callback."""

import pytest

import collext as cx


def test_calls_in_order() -> None:
    """Test that the callback sees every element, in order."""
    seen: list[int] = []
    cx.for_each([1, 2, 3], seen.append)
    assert seen == [1, 2, 3]


def test_returns_same_reference() -> None:
    """Test that the input itself is returned for chaining."""
    data = [1, 2, 3]
    assert cx.for_each(data, lambda _: None) is data


def test_none_callback_is_skipped() -> None:
    """Test that a missing callback performs no call and returns the input."""
    data = (1, 2, 3)
    assert cx.for_each(data, None) is data


def test_extra_arguments_are_forwarded() -> None:
    """Test forwarding of positional and keyword arguments."""
    seen: list[tuple[int, int, int]] = []
    cx.for_each([1, 2], lambda x, y, *, z: seen.append((x, y, z)), 10, z=20)
    assert seen == [(1, 10, 20), (2, 10, 20)]


def test_none_source_fails_on_enumeration() -> None:
    """Test that enumerating `None` raises a `TypeError`."""
    with pytest.raises(TypeError):
        cx.for_each(None, print)  # type: ignore[arg-type]


def test_print_example(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the printing example end to end."""
    result = cx.for_each([1, 2, 3], print)
    assert capsys.readouterr().out == "1\n2\n3\n"
    assert result == [1, 2, 3]


def test_seq_for_each_chains() -> None:
    """Test that `Seq.for_each` returns the same instance."""
    seen: list[str] = []
    seq = cx.Seq(("a", "b"))
    assert seq.for_each(seen.append) is seq
    assert seen == ["a", "b"]


def test_seq_for_each_none_callback() -> None:
    """Test that `Seq.for_each` tolerates a missing callback."""
    seq = cx.Seq((1, 2))
    assert seq.for_each(None) is seq


def test_iter_for_each_consumes() -> None:
    """Test that `Iter.for_each` is terminal and consumes the iterator."""
    seen: list[int] = []
    it = cx.Iter.from_(range(3))
    assert it.for_each(seen.append) is None
    assert seen == [0, 1, 2]
    assert it.is_empty()
