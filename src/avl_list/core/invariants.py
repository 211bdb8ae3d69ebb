"""Structural validation for AVL trees.

Walks the whole tree and raises InvariantViolationError on the first
broken invariant. O(n); meant for tests and the check_invariants debug mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .errors import InvariantViolationError

if TYPE_CHECKING:
    from .tree import AVLNode, AVLTree


def check_invariants(tree: AVLTree, ordered: bool = True) -> None:
    """Validate links, heights, sizes, balance, extremes and key order.

    Args:
        tree: Tree to validate
        ordered: Also require strictly ascending keys in order (key mode)

    Raises:
        InvariantViolationError: describing the first violation found
    """
    root = tree.get_root()
    if root is None:
        if tree.min_node() is not None or tree.max_node() is not None:
            raise InvariantViolationError("empty tree has a cached min or max")
        return

    if root.parent is not None:
        raise InvariantViolationError(f"root {root.key!r} has a parent")

    _check_subtree(root)

    first = root
    while first.left is not None:
        first = first.left
    last = root
    while last.right is not None:
        last = last.right
    if tree.min_node() is not first:
        raise InvariantViolationError(
            f"cached min {tree.min_node()!r} is not the first node {first!r}"
        )
    if tree.max_node() is not last:
        raise InvariantViolationError(
            f"cached max {tree.max_node()!r} is not the last node {last!r}"
        )

    if ordered:
        keys = tree.keys_in_order()
        for prev, curr in zip(keys, keys[1:]):
            if not prev < curr:
                raise InvariantViolationError(
                    f"keys out of order: {prev!r} before {curr!r}"
                )


def _check_subtree(node: Optional[AVLNode]) -> tuple[int, int]:
    """Return (height, size) of a subtree after validating it."""
    if node is None:
        return -1, 0

    for child in (node.left, node.right):
        if child is not None and child.parent is not node:
            raise InvariantViolationError(
                f"{child!r} does not point back to its parent {node!r}"
            )

    left_height, left_size = _check_subtree(node.left)
    right_height, right_size = _check_subtree(node.right)

    height = 1 + max(left_height, right_height)
    size = 1 + left_size + right_size
    if node.height != height:
        raise InvariantViolationError(f"{node!r} has height {node.height}, expected {height}")
    if node.size != size:
        raise InvariantViolationError(f"{node!r} has size {node.size}, expected {size}")
    if abs(left_height - right_height) > 1:
        raise InvariantViolationError(
            f"{node!r} is unbalanced ({left_height} vs {right_height})"
        )
    return height, size
