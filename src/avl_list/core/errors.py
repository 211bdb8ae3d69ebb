"""Exception hierarchy for avl_list.

Expected failures (duplicate keys, missing keys, bad ranks) are reported
through Outcome codes. Exceptions here signal broken structure or bad
configuration.
"""

from __future__ import annotations


class AVLListError(Exception):
    """Base exception for all avl_list errors."""
    pass


class InvariantViolationError(AVLListError):
    """Raised when a tree fails structural validation."""
    pass


class ConfigError(AVLListError):
    """Raised when configuration values or files are invalid."""
    pass
