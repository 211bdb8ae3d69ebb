"""avl_list core package."""

from .invariants import check_invariants
from .tree import AVLNode, AVLTree

__all__ = ["AVLTree", "AVLNode", "check_invariants"]
