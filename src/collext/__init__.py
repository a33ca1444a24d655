from ._core import Config, get_config
from ._iter import Iter, Seq
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._tools import (
    first_cast,
    first_cast_or_default,
    for_each,
    for_each_async,
    is_null_or_empty,
    rev_for_each,
    select_async,
    split_in_container_groups,
)

__all__ = [
    "NONE",
    "Config",
    "Iter",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Seq",
    "Some",
    "first_cast",
    "first_cast_or_default",
    "for_each",
    "for_each_async",
    "get_config",
    "is_null_or_empty",
    "rev_for_each",
    "select_async",
    "split_in_container_groups",
]
