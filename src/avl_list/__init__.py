"""avl_list - order-statistics AVL tree and positional lists in Python."""

from .components.circular_list import CircularList
from .components.tree_list import TreeList
from .core.config import AVLConfig, load_config
from .core.errors import AVLListError, ConfigError, InvariantViolationError
from .core.invariants import check_invariants
from .core.tree import AVLNode, AVLTree
from .core.types import Item, Key, Outcome, Value

__all__ = [
    "AVLConfig",
    "load_config",
    "AVLListError",
    "ConfigError",
    "InvariantViolationError",
    "AVLTree",
    "AVLNode",
    "check_invariants",
    "TreeList",
    "CircularList",
    "Item",
    "Key",
    "Value",
    "Outcome",
]
