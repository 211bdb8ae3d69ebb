"""AVL tree with subtree sizes and cached extremes.

The tree is used in one of two modes:
    - key mode: insert/delete/search by key, in-order = ascending keys
    - rank mode: insert_at_rank/delete_by_rank, in-order = list positions

Both modes share the same rotations and rebalancing walks. Mixing them on
one instance voids key ordering.

Time Complexity:
empty/size/min/max: O(1)
search/insert/delete/rank_select/insert_at_rank/delete_by_rank: O(log n)
keys_in_order/values_in_order: O(n)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .config import AVLConfig
from .invariants import check_invariants
from .types import Key, Outcome, Value

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


class AVLNode:
    """A tree node holding a key, its payload and subtree bookkeeping.

    height is 0 for a leaf (an absent child counts as -1) and size counts
    the nodes of the subtree rooted here.
    """

    __slots__ = ("key", "value", "height", "size", "left", "right", "parent")

    def __init__(self, key: Key, value: Value) -> None:
        self.key: Key = key
        self.value: Value = value
        self.height: int = 0
        self.size: int = 1
        self.left: Optional[AVLNode] = None
        self.right: Optional[AVLNode] = None
        self.parent: Optional[AVLNode] = None

    def __repr__(self) -> str:
        return f"AVLNode({self.key!r}, h={self.height}, n={self.size})"

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _height(node: Optional[AVLNode]) -> int:
    return -1 if node is None else node.height


def _size(node: Optional[AVLNode]) -> int:
    return 0 if node is None else node.size


def _balance(node: AVLNode) -> int:
    """Balance factor: height(left) - height(right)."""
    return _height(node.left) - _height(node.right)


def _update_height(node: AVLNode) -> int:
    node.height = 1 + max(_height(node.left), _height(node.right))
    return node.height


def _subtree_min(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _subtree_max(node: AVLNode) -> AVLNode:
    while node.right is not None:
        node = node.right
    return node


class AVLTree:
    """Balanced ordered tree supporting key and rank operations.

    Args:
        config: Optional configuration; check_invariants validates the
            whole tree after every mutation.

    Public API:
        - insert(key, value) / delete(key) / search(key)
        - insert_at_rank(rank, key, value) / delete_by_rank(rank)
        - rank_select(rank), successor(node), predecessor(node)
        - min(), max(), size(), empty()
        - keys_in_order(), values_in_order(), items()

    Mutations return the number of elementary rotations performed, or a
    negative Outcome code when nothing was changed.

    Invariants:
        - |height(left) - height(right)| <= 1 for every node
        - size(n) = 1 + size(left) + size(right)
        - min/max are the first/last nodes in order, None iff empty
    """

    def __init__(self, config: AVLConfig | None = None) -> None:
        self.config = config if config is not None else AVLConfig()
        self._root: Optional[AVLNode] = None
        self._min: Optional[AVLNode] = None
        self._max: Optional[AVLNode] = None
        self._rank_mode = False

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Key) -> bool:
        return self.find_node(key) is not None

    def __iter__(self) -> Iterator[Key]:
        for node in self._iter_nodes():
            yield node.key

    def __repr__(self) -> str:
        return f"AVLTree(size={self.size()}, height={self.height()})"

    # -------------------------------
    # Queries
    # -------------------------------
    def empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        return _size(self._root)

    def height(self) -> int:
        """Height of the root, or -1 for an empty tree."""
        return _height(self._root)

    def get_root(self) -> Optional[AVLNode]:
        return self._root

    def min(self) -> Optional[Value]:
        return None if self._min is None else self._min.value

    def max(self) -> Optional[Value]:
        return None if self._max is None else self._max.value

    def min_node(self) -> Optional[AVLNode]:
        return self._min

    def max_node(self) -> Optional[AVLNode]:
        return self._max

    def find_node(self, key: Key) -> Optional[AVLNode]:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def search(self, key: Key) -> Optional[Value]:
        """Return the value stored under key, or None if absent."""
        node = self.find_node(key)
        return None if node is None else node.value

    def _iter_nodes(self) -> Iterator[AVLNode]:
        stack: list[AVLNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def keys_in_order(self) -> list[Key]:
        return [node.key for node in self._iter_nodes()]

    def values_in_order(self) -> list[Value]:
        return [node.value for node in self._iter_nodes()]

    def items(self) -> Iterator[tuple[Key, Value]]:
        """Iterate (key, value) pairs in order."""
        for node in self._iter_nodes():
            yield (node.key, node.value)

    def rank_select(self, rank: int) -> AVLNode:
        """Return the node at 1-indexed in-order position rank.

        Raises:
            IndexError: if rank is outside [1, size]
        """
        if not 1 <= rank <= self.size():
            raise IndexError(f"rank {rank} out of range for tree of size {self.size()}")

        node = self._root
        while node is not None:
            left_count = _size(node.left) + 1
            if rank == left_count:
                return node
            if rank < left_count:
                node = node.left
            else:
                rank -= left_count
                node = node.right
        # Unreachable while sizes are consistent
        raise IndexError(f"rank {rank} not found")

    def successor(self, node: AVLNode) -> Optional[AVLNode]:
        if node.right is not None:
            return _subtree_min(node.right)
        current = node
        parent = current.parent
        while parent is not None and current is parent.right:
            current = parent
            parent = current.parent
        return parent

    def predecessor(self, node: AVLNode) -> Optional[AVLNode]:
        if node.left is not None:
            return _subtree_max(node.left)
        current = node
        parent = current.parent
        while parent is not None and current is parent.left:
            current = parent
            parent = current.parent
        return parent

    # -------------------------------
    # Insert
    # -------------------------------
    def insert(self, key: Key, value: Value) -> int:
        """Insert key with value, ordered by key.

        Returns the number of rotations performed, or
        Outcome.DUPLICATE_KEY if key is already present.
        """
        parent: Optional[AVLNode] = None
        node = self._root
        while node is not None:
            parent = node
            if key == node.key:
                return Outcome.DUPLICATE_KEY
            node = node.left if key < node.key else node.right

        new_node = AVLNode(key, value)
        new_node.parent = parent
        if parent is None:
            self._root = new_node
            self._min = new_node
            self._max = new_node
        else:
            if key < parent.key:
                parent.left = new_node
            else:
                parent.right = new_node
            if key < self._min.key:
                self._min = new_node
            if key > self._max.key:
                self._max = new_node

        self._add_size_on_path(parent, 1)
        rotations = self._rebalance_after_insert(parent)
        self._after_mutation()
        return rotations

    def insert_at_rank(self, rank: int, key: Key, value: Value) -> int:
        """Insert a node so that it lands at 0-indexed position rank.

        rank 0 prepends and rank == size appends. Returns the number of
        rotations performed, or Outcome.RANGE_ERROR if rank is outside
        [0, size].
        """
        size = self.size()
        if not 0 <= rank <= size:
            return Outcome.RANGE_ERROR

        self._rank_mode = True
        new_node = AVLNode(key, value)
        if self._root is None:
            self._root = new_node
            self._min = new_node
            self._max = new_node
        elif rank == size:
            self._attach(new_node, self._max, left=False)
            self._max = new_node
        elif rank == 0:
            self._attach(new_node, self._min, left=True)
            self._min = new_node
        else:
            target = self.rank_select(rank + 1)
            if target.left is None:
                self._attach(new_node, target, left=True)
            else:
                self._attach(new_node, _subtree_max(target.left), left=False)

        self._add_size_on_path(new_node.parent, 1)
        rotations = self._rebalance_after_insert(new_node.parent)
        self._after_mutation()
        return rotations

    @staticmethod
    def _attach(node: AVLNode, parent: AVLNode, left: bool) -> None:
        if left:
            parent.left = node
        else:
            parent.right = node
        node.parent = parent

    # -------------------------------
    # Delete
    # -------------------------------
    def delete(self, key: Key) -> int:
        """Delete the node with key.

        Returns the number of rotations performed, or Outcome.NOT_FOUND
        if key is absent.
        """
        node = self.find_node(key)
        if node is None:
            return Outcome.NOT_FOUND
        return self._delete_node(node)

    def delete_by_rank(self, rank: int) -> int:
        """Delete the node at 0-indexed position rank.

        Returns the number of rotations performed, or Outcome.RANGE_ERROR
        if rank is outside [0, size - 1].
        """
        if not 0 <= rank < self.size():
            return Outcome.RANGE_ERROR
        return self._delete_node(self.rank_select(rank + 1))

    def _delete_node(self, node: AVLNode) -> int:
        # Extremes move to neighbours before the node is unlinked
        if node is self._min:
            self._min = self.successor(node)
        if node is self._max:
            self._max = self.predecessor(node)

        if node.left is not None and node.right is not None:
            start = self._unlink_with_two_children(node)
        else:
            start = self._unlink(node)

        self._add_size_on_path(start, -1)
        rotations = self._rebalance_after_delete(start)
        self._after_mutation()
        return rotations

    def _unlink(self, node: AVLNode) -> Optional[AVLNode]:
        """Remove a node with at most one child; return its former parent."""
        child = node.left if node.left is not None else node.right
        parent = node.parent
        self._replace_child(parent, node, child)
        if child is not None:
            child.parent = parent
        node.parent = None
        node.left = None
        node.right = None
        return parent

    def _unlink_with_two_children(self, node: AVLNode) -> AVLNode:
        """Splice the in-order successor into node's place.

        Returns the node the rebalance walk starts from.
        """
        # The successor of a node with a right child has no left child
        successor = _subtree_min(node.right)
        start = self._unlink(successor)
        if start is node:
            start = successor

        successor.parent = node.parent
        successor.left = node.left
        successor.right = node.right
        successor.height = node.height
        successor.size = node.size
        if node.left is not None:
            node.left.parent = successor
        if node.right is not None:
            node.right.parent = successor
        self._replace_child(node.parent, node, successor)

        node.parent = None
        node.left = None
        node.right = None
        return start

    def _replace_child(
        self, parent: Optional[AVLNode], old: AVLNode, new: Optional[AVLNode]
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    # -------------------------------
    # Rebalancing
    # -------------------------------
    @staticmethod
    def _add_size_on_path(node: Optional[AVLNode], delta: int) -> None:
        while node is not None:
            node.size += delta
            node = node.parent

    def _rebalance_after_insert(self, node: Optional[AVLNode]) -> int:
        """Walk up from node; a single fix restores balance after an insert."""
        while node is not None:
            prev_height = node.height
            new_height = _update_height(node)
            bf = _balance(node)
            if abs(bf) == 2:
                return self._fix_criminal(node, bf)
            if new_height == prev_height:
                break
            node = node.parent
        return 0

    def _rebalance_after_delete(self, node: Optional[AVLNode]) -> int:
        """Walk up from node, fixing every unbalanced ancestor on the way."""
        rotations = 0
        while node is not None:
            parent = node.parent
            prev_height = node.height
            new_height = _update_height(node)
            bf = _balance(node)
            if abs(bf) == 2:
                rotations += self._fix_criminal(node, bf)
            elif new_height == prev_height:
                break
            node = parent
        return rotations

    def _fix_criminal(self, node: AVLNode, bf: int) -> int:
        """Rotate an unbalanced node back into shape; return rotation count."""
        if bf == 2:
            if _balance(node.left) >= 0:
                logger.debug(f"Right rotation at key {node.key}")
                self._rotate_right(node)
                return 1
            logger.debug(f"Left-right rotation at key {node.key}")
            self._rotate_left(node.left)
            self._rotate_right(node)
            return 2

        if _balance(node.right) <= 0:
            logger.debug(f"Left rotation at key {node.key}")
            self._rotate_left(node)
            return 1
        logger.debug(f"Right-left rotation at key {node.key}")
        self._rotate_right(node.right)
        self._rotate_left(node)
        return 2

    def _rotate_right(self, x: AVLNode) -> None:
        """
             x               y
            / \\             / \\
           y   T3   -->    T1   x
          / \\                  / \\
         T1  T2               T2  T3
        """
        y = x.left
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        y.parent = x.parent
        self._replace_child(x.parent, x, y)
        y.right = x
        x.parent = y

        x.size = _size(x.left) + _size(x.right) + 1
        y.size = x.size + _size(y.left) + 1
        _update_height(x)
        _update_height(y)

    def _rotate_left(self, x: AVLNode) -> None:
        """
           x                   y
          / \\                 / \\
         T1  y      -->      x   T3
            / \\             / \\
           T2  T3          T1  T2
        """
        y = x.right
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        y.parent = x.parent
        self._replace_child(x.parent, x, y)
        y.left = x
        x.parent = y

        x.size = _size(x.left) + _size(x.right) + 1
        y.size = x.size + _size(y.right) + 1
        _update_height(x)
        _update_height(y)

    def _after_mutation(self) -> None:
        if self.config.check_invariants:
            check_invariants(self, ordered=not self._rank_mode)
