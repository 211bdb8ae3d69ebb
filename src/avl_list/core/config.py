"""Configuration for avl_list.

Defines tunable parameters and loads them from TOML.
"""

from __future__ import annotations

import tomllib  # Python 3.11+
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from .errors import ConfigError

CONFIG_TABLE = "avl_list"


@dataclass
class AVLConfig:
    """Configuration parameters for trees and lists.

    Attributes:
        check_invariants: Validate the whole tree after every mutation (O(n))
        circular_capacity: Default capacity for CircularList instances
    """

    check_invariants: bool = False
    circular_capacity: int = 1024

    def __post_init__(self) -> None:
        if not isinstance(self.check_invariants, bool):
            raise ConfigError(
                f"check_invariants must be a bool, got {self.check_invariants!r}"
            )
        if (
            not isinstance(self.circular_capacity, int)
            or isinstance(self.circular_capacity, bool)
            or self.circular_capacity < 1
        ):
            raise ConfigError(
                f"circular_capacity must be a positive int, got {self.circular_capacity!r}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AVLConfig:
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)


def load_config(path: str | Path) -> AVLConfig:
    """Load an AVLConfig from the [avl_list] table of a TOML file.

    A file without the table yields the defaults.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    raw = path.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    table = data.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{CONFIG_TABLE}] in {path} must be a table")
    return AVLConfig.from_dict(table)
