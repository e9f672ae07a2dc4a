"""A self-balancing (AVL) interval tree answering point-stabbing queries.

Intervals are half-open: ``[start, end)``. Endpoints may be of any
mutually ordered type (ints, floats, ...).
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, Optional, TypeVar

V = TypeVar("V")


def _height(node: Optional["Node"]) -> int:
    return node.height if node is not None else 0


class Node(Generic[V]):
    """One interval ``[start, end)`` with its value and subtree bookkeeping.

    ``max`` is the largest ``end`` found in this node's subtree.
    """

    __slots__ = ("start", "end", "max", "height", "value", "left", "right")

    def __init__(self, start: Any, end: Any, value: V) -> None:
        self.start = start
        self.end = end
        self.max = end
        self.height = 1
        self.value = value
        self.left: Optional[Node[V]] = None
        self.right: Optional[Node[V]] = None

    def __repr__(self) -> str:
        return f"Node([{self.start!r}, {self.end!r}) -> {self.value!r})"

    def _update(self) -> None:
        self.height = 1 + max(_height(self.left), _height(self.right))
        highest = self.end
        for child in (self.left, self.right):
            if child is not None and child.max > highest:
                highest = child.max
        self.max = highest

    def _balance_factor(self) -> int:
        return _height(self.left) - _height(self.right)

    def _rotate_right(self) -> "Node[V]":
        pivot = self.left
        if pivot is None:
            raise ValueError("right rotation requires a left child")
        self.left = pivot.right
        pivot.right = self
        self._update()
        pivot._update()
        return pivot

    def _rotate_left(self) -> "Node[V]":
        pivot = self.right
        if pivot is None:
            raise ValueError("left rotation requires a right child")
        self.right = pivot.left
        pivot.left = self
        self._update()
        pivot._update()
        return pivot

    def _rebalance(self) -> "Node[V]":
        self._update()
        balance = self._balance_factor()
        if balance > 1:
            if self.left._balance_factor() < 0:
                self.left = self.left._rotate_left()
            return self._rotate_right()
        if balance < -1:
            if self.right._balance_factor() > 0:
                self.right = self.right._rotate_right()
            return self._rotate_left()
        return self

    def insert(self, start: Any, end: Any, value: V) -> "Node[V]":
        """Insert an interval into this subtree and return the new subtree root."""
        if start <= self.start:
            if self.left is None:
                self.left = Node(start, end, value)
            else:
                self.left = self.left.insert(start, end, value)
        else:
            if self.right is None:
                self.right = Node(start, end, value)
            else:
                self.right = self.right.insert(start, end, value)
        return self._rebalance()


class IntervalTree(Generic[V]):
    """Interval tree with O(log N) insertion and O(log N + K) point queries."""

    def __init__(self) -> None:
        self.root: Optional[Node[V]] = None
        self._size = 0

    def insert(self, start: Any, end: Any, value: V) -> None:
        """Store ``value`` under the half-open interval ``[start, end)``."""
        if self.root is None:
            self.root = Node(start, end, value)
        else:
            self.root = self.root.insert(start, end, value)
        self._size += 1

    def find_point(self, point: Any) -> list[V]:
        """Return the values of all intervals containing ``point``."""
        return list(self._stab(self.root, point))

    def _stab(self, node: Optional[Node[V]], point: Any) -> Iterator[V]:
        if node is None:
            return
        if node.left is not None and node.left.max > point:
            yield from self._stab(node.left, point)
        if node.start <= point:
            if point < node.end:
                yield node.value
            yield from self._stab(node.right, point)

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self.root)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[tuple[Any, Any, V]]:
        """Yield ``(start, end, value)`` triples in order of start."""

        def walk(node: Optional[Node[V]]) -> Iterator[tuple[Any, Any, V]]:
            if node is None:
                return
            yield from walk(node.left)
            yield (node.start, node.end, node.value)
            yield from walk(node.right)

        return walk(self.root)