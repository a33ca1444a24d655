from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, Concatenate, overload, override

import more_itertools as mit

from .._results import NONE, Option, Some
from .._tools import _MISSING, for_each, split_in_container_groups
from ._common import CommonMethods, convert_data

if TYPE_CHECKING:
    from ._eager import Seq


class Iter[T](CommonMethods[T]):
    """A wrapper around Python's `Iterators`/`Generators` types.

    - An `Iterator` is an object representing a stream of data; returned by calling `iter()` on an `Iterable`.
    - Once an `Iterator` is exhausted, it cannot be reused or reset.

    `Iter` instances are single-use: every terminal method (`for_each`, `length`, `collect`...) consumes them.

    If you need to reuse the data, collect it into a `Seq` first with `.collect()`.

    - To instantiate from a lazy `Iterator`/`Generator`, simply pass it to the standard constructor.
    - To instantiate from any `Iterable` (like a list or set), or unpacked values, use the `from_` static method.

    Args:
        data (Iterator[T]): An iterator or generator to wrap.
    """

    __slots__ = ()

    def __init__(self, data: Iterator[T]) -> None:
        self._inner = data

    @override
    def inner(self) -> Iterator[T]:
        return self._inner  # type: ignore[return-value]

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an iterator from any Iterable, or from unpacked values.

        Args:
            data (Iterable[U] | U): Iterable to convert into an iterator, or a single value.
            *more_data (U): Additional values to include if 'data' is not an Iterable.

        Returns:
            Iter[U]: A new Iter instance containing the provided data.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.Iter.from_((1, 2, 3)).collect()
        Seq(1, 2, 3)
        >>> cx.Iter.from_(1, 2, 3).collect()
        Seq(1, 2, 3)

        ```
        """
        return Iter(iter(convert_data(data, *more_data)))

    def next(self) -> Option[T]:
        """Advance the iterator and return the next element.

        Returns:
            Option[T]: `Some(element)`, or `NONE` once the iterator is exhausted.

        Example:
        ```python
        >>> import collext as cx
        >>> it = cx.Iter.from_([1])
        >>> it.next()
        Some(value=1)
        >>> it.next()
        NONE

        ```
        """
        value = next(self._inner, _MISSING)  # type: ignore[call-overload]
        return NONE if value is _MISSING else Some(value)

    def collect(self, factory: Callable[[Iterable[T]], tuple[T, ...]] = tuple) -> Seq[T]:
        """Collect the elements into a `Seq`.

        Args:
            factory (Callable[[Iterable[T]], tuple[T, ...]]): Callable building the underlying sequence. Defaults to `tuple`.

        Returns:
            Seq[T]: A `Seq` containing the collected elements.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.Iter(iter(range(3))).collect()
        Seq(0, 1, 2)

        ```
        """
        return self._eager(factory)

    def is_empty(self) -> bool:
        """Check if the iterator has no remaining element.

        The first element is peeked and kept, so the iterator can still be fully consumed afterwards.

        Returns:
            bool: `True` if the iterator is exhausted.

        Example:
        ```python
        >>> import collext as cx
        >>> it = cx.Iter.from_([1, 2])
        >>> it.is_empty()
        False
        >>> it.collect()
        Seq(1, 2)
        >>> it.is_empty()
        True

        ```
        """
        head, self._inner = mit.spy(self._inner)
        return not head

    def for_each[**P](
        self,
        func: Callable[Concatenate[T, P], Any] | None,
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        """Consume the Iterator by applying a function to each element.

        Is a terminal operation, useful for functions that have side effects.

        If **func** is `None`, the iterator is still consumed but nothing is called.

        Args:
            func (Callable[Concatenate[T, P], Any] | None): Function to apply to each element.
            *args (P.args): Positional arguments for the function.
            **kwargs (P.kwargs): Keyword arguments for the function.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.Iter.from_([1, 2, 3]).for_each(lambda x: print(x + 1))
        2
        3
        4

        ```
        """
        self.into(for_each, func, *args, **kwargs)

    def split_in_container_groups(self, group_count: int) -> Iter[Seq[T]]:
        """Lazily split the iterator into consecutive groups of **group_count** elements.

        The last group is shorter if there are not enough elements.

        Args:
            group_count (int): Number of elements in each group.

        Returns:
            Iter[Seq[T]]: An iterator of `Seq`, one per group.

        Raises:
            ValueError: If **group_count** is not strictly positive.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.Iter.from_count().split_in_container_groups(3).next()
        Some(value=Seq(0, 1, 2))
        >>> cx.Iter.from_("abcde").split_in_container_groups(2).collect()
        Seq(Seq('a', 'b'), Seq('c', 'd'), Seq('e'))

        ```
        """
        from ._eager import Seq

        def _groups(data: Iterable[T]) -> Iterator[Seq[T]]:
            return map(Seq, split_in_container_groups(data, group_count))

        return self._lazy(_groups)

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite `Iterator` of evenly spaced values.

        **Warning** ⚠️
            This creates an infinite iterator.

        Args:
            start (int): Starting value of the sequence. Defaults to 0.
            step (int): Difference between consecutive values. Defaults to 1.

        Returns:
            Iter[int]: An iterator generating the sequence.

        Example:
        ```python
        >>> import collext as cx
        >>> it = cx.Iter.from_count(10, 2)
        >>> it.next(), it.next()
        (Some(value=10), Some(value=12))

        ```
        """
        return Iter(itertools.count(start, step))
