"""Protocol definition for positional lists."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..core.types import Item, Key, Outcome, Value


@runtime_checkable
class PositionalList(Protocol):
    """List of items addressed by 0-indexed position."""

    def retrieve(self, i: int) -> Item | None:
        """Return the item at position i, or None if out of range."""
        ...

    def insert(self, i: int, key: Key, value: Value) -> Outcome:
        """Insert an item so it lands at position i.

        Returns Outcome.OK, or a failure code if i is outside [0, len]
        or the list cannot grow.
        """
        ...

    def delete(self, i: int) -> Outcome:
        """Delete the item at position i.

        Returns Outcome.OK, or Outcome.RANGE_ERROR if i is outside
        [0, len - 1].
        """
        ...

    def __len__(self) -> int:
        """Return the number of items."""
        ...
