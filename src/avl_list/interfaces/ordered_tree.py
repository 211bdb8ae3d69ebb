"""Protocol definition for a key-ordered tree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..core.types import Key, Value


@runtime_checkable
class OrderedTree(Protocol):
    """Key-ordered map with cached extremes and rotation-counting mutations."""

    def empty(self) -> bool:
        """Return True iff the tree holds no nodes."""
        ...

    def size(self) -> int:
        """Return the number of nodes."""
        ...

    def search(self, key: Key) -> Value | None:
        """Return the value under key, or None if absent."""
        ...

    def insert(self, key: Key, value: Value) -> int:
        """Insert key; return rotations performed or a negative Outcome."""
        ...

    def delete(self, key: Key) -> int:
        """Delete key; return rotations performed or a negative Outcome."""
        ...

    def min(self) -> Value | None:
        """Return the value of the smallest key, or None if empty."""
        ...

    def max(self) -> Value | None:
        """Return the value of the largest key, or None if empty."""
        ...

    def keys_in_order(self) -> list[Key]:
        """Return all keys in ascending order."""
        ...

    def values_in_order(self) -> list[Value]:
        """Return all values ordered by their keys."""
        ...
