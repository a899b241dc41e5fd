"""Logical key events produced by the input decoder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Key(Enum):
    """The closed set of keys the menu understands."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    CONFIRM = auto()
    UNRECOGNIZED = auto()


NAVIGATION_KEYS = frozenset({Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT})


@dataclass(frozen=True)
class KeyEvent:
    """Represents a decoded keyboard input event."""
    key: Key
    raw: bytes = b""  # Bytes consumed to produce this event

    @property
    def is_navigation(self) -> bool:
        return self.key in NAVIGATION_KEYS
