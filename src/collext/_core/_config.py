from collections.abc import Iterable, Iterator, Sized
from dataclasses import dataclass
from typing import Any

import cytoolz as cz


@dataclass(slots=True)
class Config:
    """Display settings shared by all wrappers.

    Args:
        max_items (int): Number of elements shown in a wrapper repr before truncating with `...`.
    """

    max_items: int = 20

    def iter_repr(self, data: Iterable[Any]) -> str:
        """Render the elements of an in memory collection, separated by commas.

        Lazy iterators are never consumed, their own repr is returned instead.

        Example:
        ```python
        >>> from collext._core import Config
        >>> Config(max_items=3).iter_repr(range(10))
        '0, 1, 2, ...'
        >>> Config().iter_repr(["a", "b"])
        "'a', 'b'"

        ```
        """
        match data:
            case Iterator():
                return repr(data)
            case Sized() if len(data) > self.max_items:
                suffix = ", ..."
            case _:
                suffix = ""
        return ", ".join(map(repr, cz.itertoolz.take(self.max_items, data))) + suffix


_CONFIG = Config()


def get_config() -> Config:
    """Return the global display configuration.

    The returned object is mutable, so settings can be changed in place.

    Example:
    ```python
    >>> import collext as cx
    >>> cx.get_config().max_items
    20

    ```
    """
    return _CONFIG
