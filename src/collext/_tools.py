"""Free functions over plain iterables.

These are the building blocks of every `Iter` and `Seq` method, and can be used directly
on any Python iterable (lists, tuples, sets, generators, dict views...).
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Coroutine, Iterable, Iterator, Sized
from typing import Any, Concatenate, Final

import cytoolz as cz
import more_itertools as mit

from ._results import NONE, Option, Some

_MISSING: Final = object()
_VALUE_TYPES: Final = (bool, int, float, complex, str, bytes)


def _check_callable(func: object, name: str = "func") -> None:
    if not callable(func):
        msg = f"`{name}` must be a callable, got {func!r}"
        raise TypeError(msg)


def is_null_or_empty(data: Iterable[Any] | None) -> bool:
    """Check if **data** is `None` or contains no elements.

    `None` is never enumerated.
    `Sized` collections are checked with `len()`, other iterables are probed for their first element.

    Note:
        Probing a single-pass `Iterator` consumes its first element.
        Use `Iter.is_empty()` to check a lazy iterator without losing data.

    Args:
        data (Iterable[Any] | None): The collection to check.

    Returns:
        bool: `True` if **data** is `None` or empty, `False` otherwise.

    Example:
    ```python
    >>> import collext as cx
    >>> cx.is_null_or_empty(None)
    True
    >>> cx.is_null_or_empty([])
    True
    >>> cx.is_null_or_empty(x for x in range(3))
    False

    ```
    """
    match data:
        case None:
            return True
        case Sized():
            return len(data) == 0
        case _:
            return mit.first(data, _MISSING) is _MISSING


def for_each[T, **P](
    data: Iterable[T],
    func: Callable[Concatenate[T, P], object] | None,
    *args: P.args,
    **kwargs: P.kwargs,
) -> Iterable[T]:
    """Apply **func** to each element of **data**, in order, for its side effects.

    If **func** is `None`, **data** is still enumerated but nothing is called.

    Args:
        data (Iterable[T]): The collection to iterate over.
        func (Callable[Concatenate[T, P], object] | None): Function to call with each element.
        *args (P.args): Positional arguments passed to **func** after the element.
        **kwargs (P.kwargs): Keyword arguments passed to **func**.

    Returns:
        Iterable[T]: **data** itself, for chaining.

    Example:
    ```python
    >>> import collext as cx
    >>> cx.for_each([1, 2, 3], print)
    1
    2
    3
    [1, 2, 3]
    >>> cx.for_each((1, 2), print, "item")
    1 item
    2 item
    (1, 2)

    ```
    """
    for item in data:
        if func is not None:
            func(item, *args, **kwargs)
    return data


def rev_for_each[T, **P](
    data: Iterable[T],
    func: Callable[Concatenate[int, T, P], object],
    *args: P.args,
    **kwargs: P.kwargs,
) -> None:
    """Call **func** with each index and element of **data**, from the last to the first.

    The elements are counted first, then fetched by position for each index from `count - 1` down to `0`.

    A single-pass `Iterator` is materialized into a tuple beforehand.

    **Warning** ⚠️
        Positional lookup is O(1) on a `Sequence` (list, tuple, range...),
        but other collections (sets, dict views...) are re-enumerated for every index,
        which makes the whole call quadratic.

    Args:
        data (Iterable[T]): The collection to iterate over.
        func (Callable[Concatenate[int, T, P], object]): Function called with the index and the element.
        *args (P.args): Positional arguments passed to **func** after the element.
        **kwargs (P.kwargs): Keyword arguments passed to **func**.

    Raises:
        TypeError: If **func** is not callable.

    Example:
    ```python
    >>> import collext as cx
    >>> cx.rev_for_each([1, 2, 3], lambda i, x: print((i, x)))
    (2, 3)
    (1, 2)
    (0, 1)

    ```
    """
    _check_callable(func)
    source = tuple(data) if isinstance(data, Iterator) else data
    count: int = cz.itertoolz.count(source)
    for idx in range(count - 1, -1, -1):
        func(idx, cz.itertoolz.nth(idx, source), *args, **kwargs)


def select_async[T, R](
    data: Iterable[T], func: Callable[[T], Awaitable[R]]
) -> Iterator[Awaitable[R]]:
    """Lazily map each element of **data** to a pending awaitable.

    **func** is only called when the returned iterator is advanced, one element at a time.

    Nothing is awaited nor scheduled here: the caller decides how to run the awaitables.

    Args:
        data (Iterable[T]): The collection to map over.
        func (Callable[[T], Awaitable[R]]): Function returning an awaitable for each element.

    Returns:
        Iterator[Awaitable[R]]: A single-pass iterator of awaitables, in input order.

    Raises:
        TypeError: If **func** is not callable.

    Example:
    ```python
    >>> import asyncio
    >>> import collext as cx
    >>> async def double(x: int) -> int:
    ...     return x * 2
    >>> async def main() -> list[int]:
    ...     return [await aw for aw in cx.select_async([1, 2, 3], double)]
    >>> asyncio.run(main())
    [2, 4, 6]

    ```
    """
    _check_callable(func)
    return (func(item) for item in data)


def for_each_async[T, R](
    data: Iterable[T], func: Callable[[T], Awaitable[R]]
) -> Coroutine[Any, Any, list[R]]:
    """Run **func** concurrently on every element of **data** and wait for all of them.

    Every awaitable produced by `select_async` is scheduled as an `asyncio.Task` on the running loop.

    Once all tasks have settled, the results are returned in input order, regardless of completion order.

    If any task failed, the exception of the first failed task **in input order** is raised instead.

    If **func** itself raises while the tasks are being created, the tasks already created
    are awaited first, then that exception is raised.

    The returned awaitable must be awaited inside a running event loop.

    Args:
        data (Iterable[T]): The collection to map over.
        func (Callable[[T], Awaitable[R]]): Function returning an awaitable for each element.

    Returns:
        Coroutine[Any, Any, list[R]]: Resolves to the results, in input order.

    Raises:
        TypeError: If **func** is not callable. Raised immediately, before awaiting.

    Example:
    ```python
    >>> import asyncio
    >>> import collext as cx
    >>> async def slow_square(x: int) -> int:
    ...     await asyncio.sleep(0.01 * (3 - x))
    ...     return x * x
    >>> asyncio.run(cx.for_each_async([1, 2, 3], slow_square))
    [1, 4, 9]

    ```
    """
    return _join(select_async(data, func))


async def _join[R](pending: Iterator[Awaitable[R]]) -> list[R]:
    tasks: list[asyncio.Future[R]] = []
    try:
        for aw in pending:
            tasks.append(asyncio.ensure_future(aw))
    except BaseException:
        # already scheduled work still settles before the failure propagates
        if tasks:
            await _settle(tasks)
        raise
    if not tasks:
        return []
    for error in await _settle(tasks):
        if error is not None:
            raise error
    return [task.result() for task in tasks]


async def _settle[R](tasks: list[asyncio.Future[R]]) -> list[BaseException | None]:
    await asyncio.wait(tasks)
    # retrieving every exception marks it as handled on all tasks
    return [task.exception() for task in tasks if not task.cancelled()]


def split_in_container_groups[T](
    data: Iterable[T], group_count: int
) -> Iterator[tuple[T, ...]]:
    """Split **data** into consecutive groups of **group_count** elements.

    The element at position `p` lands in group `p // group_count`, order is preserved.

    The last group is shorter if there are not enough elements.

    Args:
        data (Iterable[T]): The collection to split.
        group_count (int): Number of elements in each group.

    Returns:
        Iterator[tuple[T, ...]]: A lazy iterator of groups.

    Raises:
        ValueError: If **group_count** is not strictly positive.

    Example:
    ```python
    >>> import collext as cx
    >>> list(cx.split_in_container_groups([1, 2, 3, 4, 5], 2))
    [(1, 2), (3, 4), (5,)]
    >>> list(cx.split_in_container_groups([], 2))
    []

    ```
    """
    if group_count <= 0:
        msg = f"`group_count` must be strictly positive, got {group_count}"
        raise ValueError(msg)
    return iter(cz.itertoolz.partition_all(group_count, data))


def first_cast[R](data: Iterable[object], target: type[R]) -> Option[R]:
    """Return the first element of **data** that is an instance of **target**.

    Enumeration stops at the first match.

    Args:
        data (Iterable[object]): The collection to search.
        target (type[R]): The type to match with `isinstance`.

    Returns:
        Option[R]: `Some(element)` for the first match, `NONE` if nothing matches.

    Example:
    ```python
    >>> import collext as cx
    >>> cx.first_cast(["a", 0, 2.5], int)
    Some(value=0)
    >>> cx.first_cast(["a", "b"], int)
    NONE

    ```
    """
    for element in data:
        if isinstance(element, target):
            return Some(element)
    return NONE


def first_cast_or_default[R](
    data: Iterable[object], target: type[R], default: Any = _MISSING
) -> R | None:
    """Return the first element of **data** that is an instance of **target**, or a default value.

    When nothing matches and no **default** is given, the zero value of **target** is returned:

    - `target()` for `bool`, `int`, `float`, `complex`, `str` and `bytes`.
    - `None` for any other type.

    Subclass instances match, so `True` is returned when looking for an `int`.

    Args:
        data (Iterable[object]): The collection to search.
        target (type[R]): The type to match with `isinstance`.
        default (Any): Value returned when nothing matches. Defaults to the zero value of **target**.

    Returns:
        R | None: The first matching element, or the default value.

    Example:
    ```python
    >>> import collext as cx
    >>> cx.first_cast_or_default([1, "a", 2.0, 3], int)
    1
    >>> cx.first_cast_or_default(["a", "b"], int)
    0
    >>> cx.first_cast_or_default([1, 2], list) is None
    True
    >>> cx.first_cast_or_default([1, 2], str, default="none")
    'none'

    ```
    """
    fallback = _zero_value(target) if default is _MISSING else default
    return first_cast(data, target).unwrap_or(fallback)


def _zero_value[R](target: type[R]) -> R | None:
    return target() if target in _VALUE_TYPES else None
