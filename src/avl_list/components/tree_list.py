"""Positional list backed by an AVL tree.

Validates positions and delegates to the tree's rank operations.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..core.tree import AVLTree
from ..core.types import Item, Key, Outcome, Value

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.config import AVLConfig

logger = logging.getLogger(__name__)


class TreeList:
    """List of items with O(log n) retrieve, insert and delete by position.

    Args:
        config: Optional configuration passed to the underlying tree

    Invariants:
        - In-order traversal of the tree is the list order
        - Keys are payload only; they do not affect positions
    """

    def __init__(self, config: AVLConfig | None = None):
        self._tree = AVLTree(config)

    def __len__(self) -> int:
        return self._tree.size()

    def __iter__(self) -> Iterator[Item]:
        for key, value in self._tree.items():
            yield Item(key, value)

    def __repr__(self) -> str:
        return f"TreeList({[item.key for item in self]})"

    @property
    def tree(self) -> AVLTree:
        """The backing tree (read-only use)."""
        return self._tree

    def retrieve(self, i: int) -> Item | None:
        """Return the item at position i, or None if out of range."""
        if not 0 <= i < self._tree.size():
            return None
        node = self._tree.rank_select(i + 1)
        return Item(node.key, node.value)

    def insert(self, i: int, key: Key, value: Value) -> Outcome:
        """Insert an item at position i (0 <= i <= len)."""
        if not 0 <= i <= self._tree.size():
            logger.debug(f"Rejected insert at {i}, list has {self._tree.size()} items")
            return Outcome.RANGE_ERROR
        self._tree.insert_at_rank(i, key, value)
        return Outcome.OK

    def delete(self, i: int) -> Outcome:
        """Delete the item at position i (0 <= i < len)."""
        if not 0 <= i < self._tree.size():
            logger.debug(f"Rejected delete at {i}, list has {self._tree.size()} items")
            return Outcome.RANGE_ERROR
        self._tree.delete_by_rank(i)
        return Outcome.OK

    def first(self) -> Item | None:
        node = self._tree.min_node()
        return None if node is None else Item(node.key, node.value)

    def last(self) -> Item | None:
        node = self._tree.max_node()
        return None if node is None else Item(node.key, node.value)
