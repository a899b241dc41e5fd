"""Core data structures: colors, keys, grid arithmetic, menu state."""

from grid_menu.core.color import Color
from grid_menu.core.grid import GridLayout, calculate_grid, grid_rows
from grid_menu.core.highlight import (
    Highlighter,
    PlainHighlighter,
    TrueColorHighlighter,
    select_highlighter,
)
from grid_menu.core.keys import Key, KeyEvent
from grid_menu.core.state import MenuConfig, MenuState, Outcome

__all__ = [
    "Color",
    "GridLayout",
    "calculate_grid",
    "grid_rows",
    "Highlighter",
    "PlainHighlighter",
    "TrueColorHighlighter",
    "select_highlighter",
    "Key",
    "KeyEvent",
    "MenuConfig",
    "MenuState",
    "Outcome",
]
