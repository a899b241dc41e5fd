"""Menu configuration and per-session state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from grid_menu.core.color import Color
from grid_menu.core.constants import ESCAPE_TIMEOUT, POLL_TIMEOUT
from grid_menu.errors import NoOptionsError

DEFAULT_COLUMNS = 2
DEFAULT_CELL_WIDTH = 20
DEFAULT_COLUMN_SPACING = 4
DEFAULT_PROMPT = "Select an option:"
DEFAULT_HEADER_SEPARATOR = "\n"


@dataclass(frozen=True)
class MenuConfig:
    """
    Display and timing settings for one menu invocation.

    Attributes:
        columns: Number of grid columns
        cell_width: Width reserved for each label; longer labels are truncated
        prompt: Text shown above the grid
        foreground: Highlight text color, or None to leave it unchanged
        background: Highlight background color, or None to leave it unchanged
        header_separator: Printed between the prompt and the grid
        column_spacing: Blank columns after each cell
        poll_timeout: Longest wait for a key before redrawing (seconds)
        escape_timeout: Longest wait for each byte of an escape sequence
    """
    columns: int = DEFAULT_COLUMNS
    cell_width: int = DEFAULT_CELL_WIDTH
    prompt: str = DEFAULT_PROMPT
    foreground: Optional[Color] = Color.WHITE
    background: Optional[Color] = Color.MEDIUM_BLUE
    header_separator: str = DEFAULT_HEADER_SEPARATOR
    column_spacing: int = DEFAULT_COLUMN_SPACING
    poll_timeout: float = POLL_TIMEOUT
    escape_timeout: float = ESCAPE_TIMEOUT

    def __post_init__(self) -> None:
        if self.columns < 1:
            raise ValueError(f"columns must be >= 1, got {self.columns}")
        if self.cell_width < 1:
            raise ValueError(f"cell_width must be >= 1, got {self.cell_width}")
        if self.column_spacing < 0:
            raise ValueError(f"column_spacing must be >= 0, got {self.column_spacing}")
        if self.poll_timeout <= 0 or self.escape_timeout <= 0:
            raise ValueError("timeouts must be positive")


class Outcome(Enum):
    """How a menu session ended."""
    NONE = "none"
    CONFIRMED = "confirmed"


@dataclass
class MenuState:
    """Mutable state of a running menu."""
    options: tuple[str, ...]
    selected: int = 0
    closed: bool = False
    outcome: Outcome = Outcome.NONE

    def __post_init__(self) -> None:
        self.options = tuple(self.options)
        if not self.options:
            raise NoOptionsError()
        if not 0 <= self.selected < len(self.options):
            raise ValueError(
                f"selected index {self.selected} out of range for {len(self.options)} options"
            )

    @classmethod
    def start(cls, options: Sequence[str]) -> MenuState:
        return cls(options=tuple(options))

    @property
    def count(self) -> int:
        return len(self.options)

    @property
    def current(self) -> str:
        """Label of the selected option."""
        return self.options[self.selected]

    @property
    def confirmed(self) -> bool:
        return self.outcome == Outcome.CONFIRMED

    def close(self, outcome: Outcome = Outcome.NONE) -> None:
        self.closed = True
        self.outcome = outcome
