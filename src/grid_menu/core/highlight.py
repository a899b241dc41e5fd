"""Highlight capability for the selected menu cell.

A Highlighter turns colors into escape sequences. The renderer only ever
talks to this interface; when color output is unavailable the
PlainHighlighter is chosen once at startup and the selected cell is marked
by the ``>``/``<`` brackets alone.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional, Protocol, runtime_checkable

from grid_menu.core.color import Color
from grid_menu.core.constants import CSI, RESET


@runtime_checkable
class Highlighter(Protocol):
    """Protocol for highlight escape-sequence providers."""

    def foreground(self, color: Color) -> str:
        """Sequence that activates a foreground color."""
        ...

    def background(self, color: Color) -> str:
        """Sequence that activates a background color."""
        ...

    def reset(self) -> str:
        """Sequence that clears all attributes."""
        ...


class TrueColorHighlighter:
    """24-bit SGR sequences (``ESC[38;2;r;g;bm`` / ``ESC[48;2;r;g;bm``)."""

    def foreground(self, color: Color) -> str:
        return f"{CSI}{color.to_sgr_fg()}m"

    def background(self, color: Color) -> str:
        return f"{CSI}{color.to_sgr_bg()}m"

    def reset(self) -> str:
        return RESET


class PlainHighlighter:
    """Emits nothing; selection is shown by bracket markers only."""

    def foreground(self, color: Color) -> str:
        return ""

    def background(self, color: Color) -> str:
        return ""

    def reset(self) -> str:
        return ""


def color_disabled(env: Optional[Mapping[str, str]] = None) -> bool:
    """Check the NO_COLOR convention (any non-empty value disables color)."""
    env = os.environ if env is None else env
    return bool(env.get("NO_COLOR"))


def select_highlighter(
    use_color: bool = True,
    env: Optional[Mapping[str, str]] = None,
) -> Highlighter:
    """Pick the highlighter for this session."""
    if not use_color or color_disabled(env):
        return PlainHighlighter()
    return TrueColorHighlighter()
