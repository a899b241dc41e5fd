"""
grid-menu: interactive terminal grid menu

Show a list of options as a keyboard-driven grid and print the one the
user picks. The menu is drawn on stderr, so stdout carries only the
selection and can be captured or piped.

Quick Start:
    $ choice=$(grid-menu -c 3 "Apple" "Banana" "Orange")

    >>> import grid_menu
    >>> grid_menu.select(["Linux", "macOS", "Windows"], columns=1)
    'macOS'

Keys:
    - Up/Down move through all options, wrapping at either end
    - Left/Right jump one column, wrapping over the whole list
    - Enter or Space confirms
"""

__version__ = "0.1.0"

import io
from typing import Optional, Sequence

from grid_menu.core.color import Color
from grid_menu.core.state import MenuConfig, MenuState, Outcome
from grid_menu.core.keys import Key, KeyEvent
from grid_menu.errors import MenuError, NoOptionsError, TerminalModeError
from grid_menu.cli.menu import MenuController, run_menu


def select(options: Sequence[str], **config) -> Optional[str]:
    """
    Show a menu and return the chosen label, or None if nothing was chosen.

    Keyword arguments are passed to MenuConfig.
    """
    label, ok = run_menu(MenuConfig(**config), options, output=io.StringIO())
    return label if ok else None


__all__ = [
    "__version__",
    "Color",
    "MenuConfig",
    "MenuState",
    "Outcome",
    "Key",
    "KeyEvent",
    "MenuError",
    "NoOptionsError",
    "TerminalModeError",
    "MenuController",
    "run_menu",
    "select",
]
