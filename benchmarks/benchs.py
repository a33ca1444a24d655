"""Benchmarks for collext package - benchs.py."""

import asyncio

import collext as cx

from ._registery import bench

# Helper functions
# ------------------------------------------------------------


def _noop(_x: object) -> None:
    return None


def _noop_indexed(_idx: int, _x: object) -> None:
    return None


def _add_fn(x: int, y: int) -> int:
    return x + y


async def _async_identity(x: int) -> int:
    return x


def _as_mixed(size: cx.Iter[int]) -> cx.Seq[object]:
    """Strings everywhere, a single int at the end."""
    return cx.Seq((*(str(x) for x in size), 42))


# Benchmark classes
# ------------------------------------------------------------


class ForEach:
    """Benchmark `for_each` through the free function and the `Seq` method."""

    @bench()
    @staticmethod
    def free_function(data: cx.Seq[int]) -> object:
        """Benchmark the free function on the underlying tuple."""
        return cx.for_each(data.inner(), _noop)

    @bench()
    @staticmethod
    def seq_method(data: cx.Seq[int]) -> object:
        """Benchmark the chaining method."""
        return data.for_each(_noop)

    @bench()
    @staticmethod
    def with_args(data: cx.Seq[int]) -> object:
        """Benchmark forwarding of extra positional arguments."""
        return data.for_each(_add_fn, 20)


class RevForEach:
    """Benchmark `rev_for_each` on indexable and non indexable collections."""

    @bench()
    @staticmethod
    def sequence(data: cx.Seq[int]) -> object:
        """Positional lookup is O(1) on a tuple."""
        return cx.rev_for_each(data.inner(), _noop_indexed)

    @bench(gen=lambda size: size.into(frozenset))
    @staticmethod
    def non_indexable(data: frozenset[int]) -> object:
        """Positional lookup re-enumerates the set for each index."""
        return cx.rev_for_each(data, _noop_indexed)

    @bench(gen=lambda size: size.collect())
    @staticmethod
    def one_shot_iterator(data: cx.Seq[int]) -> object:
        """An iterator is materialized once before the lookups."""
        return cx.rev_for_each(iter(data.inner()), _noop_indexed)


class SplitInContainerGroups:
    """Benchmark `split_in_container_groups` with small and large groups."""

    @bench()
    @staticmethod
    def groups_of_4(data: cx.Seq[int]) -> object:
        """Many small groups."""
        return data.split_in_container_groups(4)

    @bench()
    @staticmethod
    def groups_of_128(data: cx.Seq[int]) -> object:
        """Few large groups."""
        return data.split_in_container_groups(128)


class FirstCast:
    """Benchmark the type-filtered lookups, with the match at the end."""

    @bench(gen=_as_mixed)
    @staticmethod
    def or_default(data: cx.Seq[object]) -> object:
        """Benchmark `first_cast_or_default`."""
        return data.first_cast_or_default(int)

    @bench(gen=_as_mixed)
    @staticmethod
    def option(data: cx.Seq[object]) -> object:
        """Benchmark `first_cast`."""
        return data.first_cast(int)


class ForEachAsync:
    """Benchmark the fan-out/fan-in join, event loop creation included."""

    @bench()
    @staticmethod
    def free_function(data: cx.Seq[int]) -> object:
        """Benchmark the free function."""
        return asyncio.run(cx.for_each_async(data.inner(), _async_identity))

    @bench()
    @staticmethod
    def seq_method(data: cx.Seq[int]) -> object:
        """Benchmark the `Seq` method."""
        return asyncio.run(data.for_each_async(_async_identity))
