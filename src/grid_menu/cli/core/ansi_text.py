"""Cell text utilities - truncating and padding labels."""

from __future__ import annotations

from grid_menu.core.constants import ELLIPSIS


def truncate_label(text: str, width: int) -> str:
    """
    Fit a label into ``width`` columns.

    Labels longer than ``width`` keep their first ``width - 3`` characters
    followed by ``"..."``. For widths under 3 nothing of the label is kept
    and only the ellipsis remains.
    """
    if len(text) <= width:
        return text
    return text[:max(width - len(ELLIPSIS), 0)] + ELLIPSIS


def pad_to_width(text: str, width: int) -> str:
    """Right-pad plain text with spaces; never shortens it."""
    return text + ' ' * max(width - len(text), 0)
