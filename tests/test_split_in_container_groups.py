"""Tests for fixed-size chunking."""

import pytest

import collext as cx


def test_groups_of_two() -> None:
    """Test the reference example, with a shorter last group."""
    groups = list(cx.split_in_container_groups([1, 2, 3, 4, 5], 2))
    assert groups == [(1, 2), (3, 4), (5,)]


def test_exact_division() -> None:
    """Test a size dividing the length exactly."""
    groups = list(cx.split_in_container_groups(range(6), 3))
    assert groups == [(0, 1, 2), (3, 4, 5)]


def test_size_larger_than_input() -> None:
    """Test a single group when the size exceeds the length."""
    assert list(cx.split_in_container_groups("ab", 10)) == [("a", "b")]


def test_empty_input() -> None:
    """Test that an empty collection yields no group."""
    assert list(cx.split_in_container_groups([], 3)) == []


def test_position_rule() -> None:
    """Test that the element at position p lands in group p // size."""
    size = 3
    data = list(range(11))
    groups = list(cx.split_in_container_groups(data, size))
    for idx, group in enumerate(groups):
        assert list(group) == [p for p in data if p // size == idx]


@pytest.mark.parametrize("group_count", [0, -1])
def test_non_positive_size_raises(group_count: int) -> None:
    """Test that a non positive size is rejected at call time."""
    with pytest.raises(ValueError, match="group_count"):
        cx.split_in_container_groups([1, 2, 3], group_count)


def test_lazy_on_infinite_iterator() -> None:
    """Test that groups are produced on demand."""
    groups = cx.split_in_container_groups(cx.Iter.from_count(), 2)
    assert next(groups) == (0, 1)
    assert next(groups) == (2, 3)


def test_seq_method() -> None:
    """Test that the `Seq` method returns a `Seq` of `Seq`."""
    groups = cx.Seq((1, 2, 3)).split_in_container_groups(2)
    assert isinstance(groups, cx.Seq)
    assert [g.inner() for g in groups] == [(1, 2), (3,)]


def test_iter_method() -> None:
    """Test that the `Iter` method is lazy and validates eagerly."""
    groups = cx.Iter.from_("abc").split_in_container_groups(2)
    assert isinstance(groups, cx.Iter)
    assert [g.inner() for g in groups] == [("a", "b"), ("c",)]
    with pytest.raises(ValueError):
        cx.Iter.from_("abc").split_in_container_groups(0)
