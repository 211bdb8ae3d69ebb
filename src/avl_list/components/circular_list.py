"""Fixed-capacity circular list.

Wraparound array storage; inserts and deletes shift whichever side of
the list is shorter.

Time Complexity:
retrieve: O(1)
insert/delete at position i: O(min(i, n - i))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ..core.config import AVLConfig
from ..core.errors import ConfigError
from ..core.types import Item, Key, Outcome, Value

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


class CircularList:
    """Positional list stored in a ring buffer.

    Args:
        max_len: Capacity; defaults to config.circular_capacity
        config: Optional configuration

    Invariants:
        - Position i lives in slot (start + i) % capacity
        - Slots outside the live window hold None
        - Length never exceeds capacity
    """

    def __init__(self, max_len: int | None = None, config: AVLConfig | None = None):
        config = config if config is not None else AVLConfig()
        capacity = config.circular_capacity if max_len is None else max_len
        if capacity < 1:
            raise ConfigError(f"CircularList capacity must be positive, got {capacity}")
        self._capacity: int = capacity
        self._array: list[Optional[Item]] = [None] * capacity
        self._start: int = 0
        self._length: int = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Item]:
        for i in range(self._length):
            yield self._array[self._slot(i)]

    def __repr__(self) -> str:
        return f"CircularList({[item.key for item in self]}, capacity={self._capacity})"

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_full(self) -> bool:
        return self._length == self._capacity

    def _slot(self, i: int) -> int:
        return (self._start + i) % self._capacity

    def retrieve(self, i: int) -> Item | None:
        """Return the item at position i, or None if out of range."""
        if not 0 <= i < self._length:
            return None
        return self._array[self._slot(i)]

    def insert(self, i: int, key: Key, value: Value) -> Outcome:
        """Insert an item at position i (0 <= i <= len).

        Returns Outcome.RANGE_ERROR for a bad position and
        Outcome.CAPACITY_ERROR when the list is full.
        """
        if not 0 <= i <= self._length:
            logger.debug(f"Rejected insert at {i}, list has {self._length} items")
            return Outcome.RANGE_ERROR
        if self.is_full():
            logger.warning(f"CircularList full at capacity {self._capacity}")
            return Outcome.CAPACITY_ERROR

        if i >= self._length - i:
            # Tail is shorter: move positions i..n-1 one slot right
            for j in range(self._length - 1, i - 1, -1):
                self._array[self._slot(j + 1)] = self._array[self._slot(j)]
        else:
            # Head is shorter: grow backwards and move positions 0..i-1 left
            self._start = (self._start - 1) % self._capacity
            for j in range(i):
                self._array[self._slot(j)] = self._array[self._slot(j + 1)]

        self._array[self._slot(i)] = Item(key, value)
        self._length += 1
        return Outcome.OK

    def delete(self, i: int) -> Outcome:
        """Delete the item at position i (0 <= i < len)."""
        if not 0 <= i < self._length:
            logger.debug(f"Rejected delete at {i}, list has {self._length} items")
            return Outcome.RANGE_ERROR

        if i >= self._length - 1 - i:
            # Tail is shorter: close the gap from the right
            for j in range(i, self._length - 1):
                self._array[self._slot(j)] = self._array[self._slot(j + 1)]
            self._array[self._slot(self._length - 1)] = None
        else:
            # Head is shorter: close the gap from the left and advance start
            for j in range(i, 0, -1):
                self._array[self._slot(j)] = self._array[self._slot(j - 1)]
            self._array[self._slot(0)] = None
            self._start = (self._start + 1) % self._capacity

        self._length -= 1
        return Outcome.OK
