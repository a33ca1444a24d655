from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Iterable, Iterator
from typing import TYPE_CHECKING, Any, Concatenate

import cytoolz as cz

from .._core import CommonBase, get_config
from .._tools import (
    _MISSING,
    _check_callable,
    first_cast,
    first_cast_or_default,
    for_each_async,
    rev_for_each,
    select_async,
)

if TYPE_CHECKING:
    from .._results import Option
    from ._eager import Seq
    from ._main import Iter


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


class CommonMethods[T](CommonBase[Iterable[T]]):
    _inner: Iterable[T]

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def _eager[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], tuple[U, ...]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Seq[U]:
        from ._eager import Seq

        return Seq(factory(self._inner, *args, **kwargs))

    def _lazy[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], Iterator[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[U]:
        from ._main import Iter

        return Iter(factory(self._inner, *args, **kwargs))

    def into[**P, R](
        self,
        func: Callable[Concatenate[Iterable[T], P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert the underlying data into another type using a provided function.

        Args:
            func (Callable[Concatenate[Iterable[T], P], R]): Function receiving the underlying data.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The result of applying the function to the underlying data.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.Iter.from_([1, 2, 3]).into(sum)
        6

        ```
        """
        return func(self._inner, *args, **kwargs)

    def length(self) -> int:
        """Return the number of elements.

        Like the builtin `len()` function, but works on lazy `Iterators` (and consumes them).

        Returns:
            int: The count of elements.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.Seq([1, 2]).length()
        2
        >>> cx.Iter(iter(range(5))).length()
        5

        ```
        """
        return cz.itertoolz.count(self._inner)

    def rev_for_each[**P](
        self,
        func: Callable[Concatenate[int, T, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        """Call **func** with each index and element, from the last element to the first.

        See `collext.rev_for_each` for the lookup cost on non indexable data.

        Args:
            func (Callable[Concatenate[int, T, P], object]): Function called with the index and the element.
            *args (P.args): Positional arguments for the function.
            **kwargs (P.kwargs): Keyword arguments for the function.

        Raises:
            TypeError: If **func** is not callable.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.Seq(("a", "b")).rev_for_each(lambda i, x: print(f"{i}={x}"))
        1=b
        0=a

        ```
        """
        return self.into(rev_for_each, func, *args, **kwargs)

    def select_async[R](self, func: Callable[[T], Awaitable[R]]) -> Iter[Awaitable[R]]:
        """Lazily map each element to a pending awaitable.

        **func** is only called when the resulting `Iter` is advanced.

        Args:
            func (Callable[[T], Awaitable[R]]): Function returning an awaitable for each element.

        Returns:
            Iter[Awaitable[R]]: An iterator of awaitables, in input order.

        Raises:
            TypeError: If **func** is not callable.

        Example:
        ```python
        >>> import asyncio
        >>> import collext as cx
        >>> async def inc(x: int) -> int:
        ...     return x + 1
        >>> async def main() -> list[int]:
        ...     return [await aw for aw in cx.Seq([1, 2]).select_async(inc)]
        >>> asyncio.run(main())
        [2, 3]

        ```
        """
        return self._lazy(select_async, func)

    def for_each_async[R](
        self, func: Callable[[T], Awaitable[R]]
    ) -> Coroutine[Any, Any, Seq[R]]:
        """Run **func** concurrently on every element and wait for all of them.

        See `collext.for_each_async` for the failure policy.

        Args:
            func (Callable[[T], Awaitable[R]]): Function returning an awaitable for each element.

        Returns:
            Coroutine[Any, Any, Seq[R]]: Resolves to a `Seq` of the results, in input order.

        Raises:
            TypeError: If **func** is not callable. Raised immediately, before awaiting.

        Example:
        ```python
        >>> import asyncio
        >>> import collext as cx
        >>> async def square(x: int) -> int:
        ...     return x * x
        >>> asyncio.run(cx.Seq([1, 2, 3]).for_each_async(square))
        Seq(1, 4, 9)

        ```
        """
        from ._eager import Seq

        _check_callable(func)

        async def _collect() -> Seq[R]:
            return Seq(tuple(await for_each_async(self._inner, func)))

        return _collect()

    def first_cast[R](self, target: type[R]) -> Option[R]:
        """Return the first element that is an instance of **target**, wrapped in an `Option`.

        Args:
            target (type[R]): The type to match with `isinstance`.

        Returns:
            Option[R]: `Some(element)` for the first match, `NONE` otherwise.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.Seq([1, "a", 2.0]).first_cast(float)
        Some(value=2.0)

        ```
        """
        return self.into(first_cast, target)

    def first_cast_or_default[R](
        self, target: type[R], default: Any = _MISSING
    ) -> R | None:
        """Return the first element that is an instance of **target**, or a default value.

        See `collext.first_cast_or_default` for the zero value used when no **default** is given.

        Args:
            target (type[R]): The type to match with `isinstance`.
            default (Any): Value returned when nothing matches.

        Returns:
            R | None: The first matching element, or the default value.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.Seq([1, "a", 2.0, 3]).first_cast_or_default(str)
        'a'
        >>> cx.Seq(["a", "b"]).first_cast_or_default(float)
        0.0

        ```
        """
        return self.into(first_cast_or_default, target, default)
