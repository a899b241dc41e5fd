"""Full-frame renderer for the option grid."""

from __future__ import annotations

from typing import Optional, TextIO

from grid_menu.cli.core.ansi_text import pad_to_width, truncate_label
from grid_menu.cli.core.terminal import Terminal
from grid_menu.core.constants import (
    CLEAR_SCREEN,
    CURSOR_HOME,
    PLAIN_PREFIX,
    PLAIN_SUFFIX,
    SELECTED_PREFIX,
    SELECTED_SUFFIX,
)
from grid_menu.core.grid import GridLayout, calculate_grid
from grid_menu.core.highlight import Highlighter, PlainHighlighter
from grid_menu.core.state import MenuConfig, MenuState


class OptionGridRenderer:
    """
    Draws the prompt and the option grid.

    Each frame clears the screen and redraws everything from the top-left.
    Cells are laid out column-major. The selected cell is wrapped in
    ``> ... <`` markers and the highlighter's colors; all other cells get a
    blank indent of the same width so columns line up.
    """

    def __init__(
        self,
        config: MenuConfig,
        highlighter: Optional[Highlighter] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.config = config
        self.highlighter = highlighter or PlainHighlighter()
        self.stream = stream

    @property
    def cell_total_width(self) -> int:
        """Columns taken by one cell including markers and spacing."""
        return (
            self.config.cell_width
            + len(SELECTED_PREFIX)
            + len(SELECTED_SUFFIX)
            + self.config.column_spacing
        )

    def render_cell(self, label: str, selected: bool) -> str:
        text = pad_to_width(truncate_label(label, self.config.cell_width), self.config.cell_width)
        spacing = ' ' * self.config.column_spacing
        if not selected:
            return f"{PLAIN_PREFIX}{text}{PLAIN_SUFFIX}{spacing}"

        hl = self.highlighter
        activate = ""
        if self.config.foreground is not None:
            activate += hl.foreground(self.config.foreground)
        if self.config.background is not None:
            activate += hl.background(self.config.background)
        return f"{activate}{SELECTED_PREFIX}{text}{SELECTED_SUFFIX}{hl.reset()}{spacing}"

    def render_lines(self, state: MenuState, layout: Optional[GridLayout] = None) -> list[str]:
        """Render grid rows (without the header) as a list of lines."""
        layout = layout or calculate_grid(state.count, self.config.columns)
        lines: list[str] = []
        for row in range(layout.rows):
            parts: list[str] = []
            for col in range(layout.columns):
                index = layout.index_at(row, col)
                if index is None:
                    parts.append(' ' * self.cell_total_width)
                else:
                    parts.append(self.render_cell(state.options[index], index == state.selected))
            lines.append(''.join(parts))
        return lines

    def render_frame(self, state: MenuState, layout: Optional[GridLayout] = None) -> str:
        """Render one complete frame, including screen clear and prompt."""
        header = f"{self.config.prompt} {self.config.header_separator}"
        body = ''.join(line + '\n' for line in self.render_lines(state, layout))
        return f"{CLEAR_SCREEN}{CURSOR_HOME}{header}{body}"

    def draw(self, state: MenuState, layout: Optional[GridLayout] = None) -> None:
        """Write one frame to the diagnostic stream."""
        Terminal.write(self.render_frame(state, layout), self.stream)
