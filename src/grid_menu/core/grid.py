"""Grid arithmetic for laying a 1-D option list out in columns.

Options are placed column-major: the first ``rows`` options fill the
first column, the next ``rows`` the second, and so on::

    index = row + col * rows

Navigation wraps over the whole option list:

- Up/Down move by one option.
- Left/Right move by one column's worth of options (``rows`` steps).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from grid_menu.core.keys import Key


def grid_rows(count: int, columns: int) -> int:
    """Number of rows needed to show ``count`` options in ``columns`` columns."""
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    if columns < 1:
        raise ValueError(f"columns must be >= 1, got {columns}")
    return (count + columns - 1) // columns


def move_down(selected: int, count: int) -> int:
    return (selected + 1) % count


def move_up(selected: int, count: int) -> int:
    return (selected - 1 + count) % count


def move_right(selected: int, count: int, rows: int) -> int:
    return (selected + rows) % count


def move_left(selected: int, count: int, rows: int) -> int:
    return (selected - rows + count) % count


@dataclass(frozen=True)
class GridLayout:
    """Computed grid dimensions for a fixed option count."""
    count: int
    columns: int
    rows: int

    def index_at(self, row: int, col: int) -> Optional[int]:
        """Option index shown at (row, col), or None for an empty cell."""
        index = row + col * self.rows
        return index if index < self.count else None

    def navigate(self, selected: int, key: Key) -> int:
        """
        Compute the selected index after a key press.

        Non-navigation keys return ``selected`` unchanged.
        """
        self._check_index(selected)
        if key == Key.DOWN:
            return move_down(selected, self.count)
        if key == Key.UP:
            return move_up(selected, self.count)
        if key == Key.RIGHT:
            return move_right(selected, self.count, self.rows)
        if key == Key.LEFT:
            return move_left(selected, self.count, self.rows)
        return selected

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.count:
            raise ValueError(f"index {index} out of range for {self.count} options")


def calculate_grid(count: int, columns: int) -> GridLayout:
    """Calculate the grid layout for ``count`` options in ``columns`` columns."""
    return GridLayout(count=count, columns=columns, rows=grid_rows(count, columns))
