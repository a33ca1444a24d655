from ._eager import Seq
from ._main import Iter

__all__ = ["Iter", "Seq"]
