"""Common type definitions for the AVL tree list.

Defines fundamental types and result codes used across all components.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

# Core primitive types
Key = int
Value = str | bytes


class Outcome(IntEnum):
    """Status codes returned by mutating operations.

    Failures are negative, so a rotation count (>= 0) and a failure code
    can share one return value.
    """

    OK = 0
    DUPLICATE_KEY = -1
    NOT_FOUND = -2
    RANGE_ERROR = -3
    CAPACITY_ERROR = -4


@dataclass(frozen=True)
class Item:
    """A key and its payload, as returned by positional lookups."""

    key: Key
    value: Value
