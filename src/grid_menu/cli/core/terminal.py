"""Low-level terminal operations: screen output and input-mode ownership."""

from __future__ import annotations

import logging
import os
import sys
import termios
import tty
from typing import ClassVar, Optional, TextIO

from grid_menu.errors import TerminalModeError

logger = logging.getLogger(__name__)


class Terminal:
    """Screen output helpers. Everything goes to the diagnostic stream."""

    @staticmethod
    def write(text: str, stream: Optional[TextIO] = None) -> None:
        """Write text and flush."""
        stream = stream or sys.stderr
        stream.write(text)
        stream.flush()


class TerminalModeManager:
    """
    Exclusive owner of the terminal input mode for one menu invocation.

    ``acquire()`` saves the current attributes of the input descriptor and
    turns off canonical (line-buffered) input and echo. ``release()`` puts
    the saved attributes back. Use it as a context manager so the release
    happens on every exit path:

        with TerminalModeManager(fd):
            ...

    Signal generation is left on, so Ctrl-C still raises KeyboardInterrupt.
    When the descriptor is not a terminal (piped input) no mode change is
    made and release has nothing to restore.

    Only one manager may hold the terminal per process.
    """

    _owner: ClassVar[Optional["TerminalModeManager"]] = None

    def __init__(self, fd: Optional[int] = None) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._snapshot: Optional[list] = None
        self._acquired = False
        self._released = False

    @property
    def active(self) -> bool:
        """True between a successful acquire and its release."""
        return self._acquired and not self._released

    @property
    def changed_mode(self) -> bool:
        """True if acquire actually switched terminal attributes."""
        return self._snapshot is not None

    @classmethod
    def current_owner(cls) -> Optional["TerminalModeManager"]:
        return cls._owner

    def acquire(self) -> None:
        if self._acquired:
            raise TerminalModeError("Terminal mode already acquired by this manager")
        if TerminalModeManager._owner is not None:
            raise TerminalModeError("Another menu already owns the terminal")

        if os.isatty(self._fd):
            try:
                snapshot = termios.tcgetattr(self._fd)
                mode = termios.tcgetattr(self._fd)
                mode[tty.LFLAG] &= ~(termios.ICANON | termios.ECHO)
                mode[tty.CC][termios.VMIN] = 1
                mode[tty.CC][termios.VTIME] = 0
                termios.tcsetattr(self._fd, termios.TCSADRAIN, mode)
            except termios.error as e:
                raise TerminalModeError(f"Cannot switch terminal to raw mode: {e}") from e
            self._snapshot = snapshot
            logger.debug("Raw input mode enabled on fd %d", self._fd)
        else:
            logger.debug("fd %d is not a terminal, input mode left unchanged", self._fd)

        self._acquired = True
        TerminalModeManager._owner = self

    def release(self) -> None:
        """Restore the saved mode. Safe to call more than once."""
        if not self.active:
            return
        self._released = True
        if TerminalModeManager._owner is self:
            TerminalModeManager._owner = None

        if self._snapshot is None:
            return
        try:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._snapshot)
            logger.debug("Terminal mode restored on fd %d", self._fd)
        except (termios.error, OSError) as e:
            logger.warning("Failed to restore terminal mode: %s", e)
        finally:
            self._snapshot = None

    def __enter__(self) -> TerminalModeManager:
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
