"""A mapping from half-open float ranges ``[low, high)`` to arbitrary objects."""

from __future__ import annotations

import math
from typing import Any

from rangestab.interval_tree import IntervalTree


def _to_float(obj: Any) -> float:
    cls = type(obj)
    if not (hasattr(cls, "__float__") or hasattr(cls, "__index__")):
        raise TypeError(f"expected a real number, got {cls.__name__}")
    return float(obj)


class RangeDict:
    """Store objects under ranges; look up every object whose range holds a point.

    ``rd[low, high] = value`` stores a range, ``rd[x]`` returns a list of
    every value whose range contains ``x``.
    """

    def __init__(self) -> None:
        self._tree: IntervalTree[Any] = IntervalTree()

    def __len__(self) -> int:
        return len(self._tree)

    def __setitem__(self, key: tuple, value: Any) -> None:
        if not isinstance(key, tuple):
            raise TypeError(f"range key must be a tuple, got {type(key).__name__}")
        try:
            low, high = (_to_float(part) for part in key)
        except (TypeError, ValueError):
            raise IndexError("Invalid Range: must be a (low, high) tuple") from None
        if not low < high:
            raise IndexError("Invalid Range.")
        self._tree.insert(low, high, value)

    def __getitem__(self, key: Any) -> list:
        point = _to_float(key)
        if math.isnan(point):
            raise FloatingPointError("Invalid key value.")
        found = self._tree.find_point(point)
        if not found:
            raise IndexError("Not found.")
        return found