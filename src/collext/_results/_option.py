from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """An optional value: either `Some(value)` or `NONE`.

    Returned by lookups that may legitimately find nothing, so that a missing value
    is never confused with a stored `None`.
    """

    __slots__ = ()

    @staticmethod
    def from_[V](value: V | None) -> Option[V]:
        """Create an `Option` from a value that may be `None`.

        Args:
            value (V | None): The value to wrap.

        Returns:
            Option[V]: `Some(value)` if **value** is not `None`, `NONE` otherwise.

        Example:
        ```python
        >>> from collext import Option
        >>> Option.from_(2)
        Some(value=2)
        >>> Option.from_(None)
        NONE

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> bool:
        """Whether a value was found.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.first_cast([1, "a"], str).is_some()
        True

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> bool:
        """Whether the lookup came back empty."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Get the found value.

        Raises:
            OptionUnwrapError: On `NONE`.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.Iter.from_(["x"]).next().unwrap()
        'x'
        >>> cx.first_cast([1, 2], str).unwrap()
        Traceback (most recent call last):
            ...
        collext._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Like `unwrap`, but **msg** is prepended to the error raised on `NONE`.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.first_cast([], int).expect("no int in payload")
        Traceback (most recent call last):
            ...
        collext._results._option.OptionUnwrapError: no int in payload (called `expect` on a `None`)

        ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Get the found value, or **default** on `NONE`.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.first_cast(["a", "b"], float).unwrap_or(0.5)
        0.5

        ```
        """
        return self.unwrap() if self.is_some() else default

    def map[U](self, func: Callable[[T], U]) -> Option[U]:
        """Apply **func** to the found value, keeping `NONE` as is.

        Example:
        ```python
        >>> import collext as cx
        >>> cx.first_cast([1, "abc"], str).map(len)
        Some(value=3)

        ```
        """
        return Some(func(self.unwrap())) if self.is_some() else NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    value: T

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, repr=False)
class NoneOption(Option[Any]):
    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
