"""Interactive menu controller: the render / poll / update loop."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence, TextIO

from grid_menu.cli.core.input import InputDecoder
from grid_menu.cli.core.terminal import Terminal, TerminalModeManager
from grid_menu.cli.widgets.option_grid import OptionGridRenderer
from grid_menu.core.grid import calculate_grid
from grid_menu.core.highlight import Highlighter, select_highlighter
from grid_menu.core.keys import Key
from grid_menu.core.state import MenuConfig, MenuState, Outcome
from grid_menu.errors import NoOptionsError

logger = logging.getLogger(__name__)


class MenuController:
    """
    Runs one menu session.

    Simple design:
    - Arrow keys move the selection (wrapping over the whole list)
    - Enter/Space confirms and prints the label to the primary stream
    - Everything interactive is drawn on the diagnostic stream
    - Ctrl-C or end of input closes the menu without a selection
    """

    def __init__(
        self,
        config: Optional[MenuConfig] = None,
        *,
        highlighter: Optional[Highlighter] = None,
        input_fd: Optional[int] = None,
        diagnostic: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.config = config or MenuConfig()
        self.highlighter = highlighter or select_highlighter()
        self.input_fd = input_fd
        self.diagnostic = diagnostic
        self.output = output
        self.state: Optional[MenuState] = None

    def run(self, options: Sequence[str]) -> tuple[Optional[str], bool]:
        """
        Show the menu and wait for a selection.

        Returns ``(label, True)`` on confirmation, ``(None, False)`` when
        the menu closed without one. Raises NoOptionsError before touching
        the terminal if ``options`` is empty.
        """
        if not options:
            raise NoOptionsError()

        fd = sys.stdin.fileno() if self.input_fd is None else self.input_fd
        state = MenuState.start(options)
        layout = calculate_grid(state.count, self.config.columns)
        renderer = OptionGridRenderer(self.config, self.highlighter, self.diagnostic)
        decoder = InputDecoder(fd, escape_timeout=self.config.escape_timeout)
        self.state = state

        with TerminalModeManager(fd):
            try:
                while not state.closed:
                    renderer.draw(state, layout)
                    event = decoder.poll(self.config.poll_timeout)
                    if event is None:
                        continue
                    if event.key is Key.CONFIRM:
                        state.close(Outcome.CONFIRMED)
                    elif event.is_navigation:
                        state.selected = layout.navigate(state.selected, event.key)
            except KeyboardInterrupt:
                logger.debug("Menu interrupted")
                state.close(Outcome.NONE)
            except EOFError:
                logger.debug("Input closed before a selection was made")
                state.close(Outcome.NONE)

        Terminal.write('\n', self.diagnostic)

        if not state.confirmed:
            return None, False

        label = state.current
        out = self.output or sys.stdout
        out.write(label + '\n')
        out.flush()
        return label, True


def run_menu(
    config: MenuConfig,
    options: Sequence[str],
    **kwargs,
) -> tuple[Optional[str], bool]:
    """Run a menu with ``config`` over ``options``."""
    return MenuController(config, **kwargs).run(options)
