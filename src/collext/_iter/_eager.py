from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING, Any, Concatenate, Self, overload, override

from .._tools import for_each, is_null_or_empty, split_in_container_groups
from ._common import CommonMethods, convert_data

if TYPE_CHECKING:
    from ._main import Iter


class Seq[T](CommonMethods[T], Sequence[T]):
    """`Seq` represent an in memory Sequence.

    Implements the `Sequence` Protocol from `collections.abc`, so it can be used as a standard immutable sequence.

    Contrary to `Iter`, a `Seq` can be iterated over as many times as needed, and supports positional access.

    If you already have a tuple or a list, simply pass it to the constructor, without runtime checks.

    Otherwise, use the `from_` static method to create a `Seq` from any `Iterable` or unpacked values.

    Args:
        data (Sequence[T]): The data to initialize the Seq with.
    """

    _inner: Sequence[T]

    __slots__ = ()

    def __init__(self, data: Sequence[T]) -> None:
        self._inner = data

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        return self._inner.__getitem__(index)

    def __len__(self) -> int:
        return len(self._inner)

    @override
    def inner(self) -> Sequence[T]:
        return self._inner

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        Prefer using the standard constructor, as this method involves extra checks and conversions steps.

        Args:
            data (Iterable[U] | U): Iterable to convert into a sequence, or a single value.
            *more_data (U): Unpacked items to include in the sequence, if 'data' is not an Iterable.

        Returns:
            Seq[U]: A new Seq instance containing the provided data.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)
        >>> cx.Seq.from_({"a": 1}.keys())
        Seq('a')

        ```
        """
        converted = convert_data(data, *more_data)
        return Seq(converted if isinstance(converted, Sequence) else tuple(converted))

    def iter(self) -> Iter[T]:
        """Get an iterator over the sequence.

        Call this to switch to lazy evaluation.

        Returns:
            Iter[T]: An `Iter` instance wrapping an iterator over the sequence.
        """
        return self._lazy(iter)

    def is_empty(self) -> bool:
        """Check if the sequence contains no elements.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.Seq(()).is_empty()
        True
        >>> cx.Seq([0]).is_empty()
        False

        ```
        """
        return self.into(is_null_or_empty)

    def for_each[**P](
        self,
        func: Callable[Concatenate[T, P], Any] | None,
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Iterate over the elements and apply a function to each.

        Contrary to `Iter.for_each`, this method returns the same instance for chaining.

        If **func** is `None`, nothing is called.

        Args:
            func (Callable[Concatenate[T, P], Any] | None): Function to apply to each element.
            *args (P.args): Positional arguments for the function.
            **kwargs (P.kwargs): Keyword arguments for the function.

        Returns:
            Self: The same instance for chaining.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.Seq([1, 2]).for_each(print).length()
        1
        2
        2

        ```
        """
        self.into(for_each, func, *args, **kwargs)
        return self

    def split_in_container_groups(self, group_count: int) -> Seq[Seq[T]]:
        """Split the sequence into consecutive groups of **group_count** elements.

        The last group is shorter if there are not enough elements.

        Args:
            group_count (int): Number of elements in each group.

        Returns:
            Seq[Seq[T]]: A `Seq` of groups.

        Raises:
            ValueError: If **group_count** is not strictly positive.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.Seq([1, 2, 3, 4, 5]).split_in_container_groups(2)
        Seq(Seq(1, 2), Seq(3, 4), Seq(5))

        ```
        """

        def _groups(data: Iterable[T]) -> tuple[Seq[T], ...]:
            return tuple(map(Seq, split_in_container_groups(data, group_count)))

        return self._eager(_groups)
