"""Terminal infrastructure - input mode, key decoding, cell text."""

from grid_menu.cli.core.terminal import Terminal, TerminalModeManager
from grid_menu.cli.core.input import DecoderState, InputDecoder
from grid_menu.cli.core.ansi_text import pad_to_width, truncate_label

__all__ = [
    "Terminal",
    "TerminalModeManager",
    "DecoderState",
    "InputDecoder",
    "pad_to_width",
    "truncate_label",
]
