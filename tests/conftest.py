"""Pytest configuration: pipe-backed input and in-memory output streams."""

import io
import os
from typing import Iterator

import pytest

from grid_menu.cli.core.terminal import TerminalModeManager
from grid_menu.core.state import MenuConfig


class PipeInput:
    """
    A pipe standing in for the keyboard.

    Bytes written with ``send()`` are read by the decoder exactly as if
    they had been typed. ``close()`` simulates end of input.
    """

    def __init__(self) -> None:
        self.fd, self._write_fd = os.pipe()
        self._closed = False

    def send(self, data: bytes) -> None:
        os.write(self._write_fd, data)

    def close(self) -> None:
        if not self._closed:
            os.close(self._write_fd)
            self._closed = True

    def fileno(self) -> int:
        return self.fd

    def dispose(self) -> None:
        self.close()
        os.close(self.fd)


@pytest.fixture
def keyboard() -> Iterator[PipeInput]:
    """Pipe-backed input descriptor."""
    pipe = PipeInput()
    yield pipe
    pipe.dispose()


@pytest.fixture
def pty_fds() -> Iterator[tuple[int, int]]:
    """A real pseudo-terminal as (master, slave) descriptors."""
    master, slave = os.openpty()
    yield master, slave
    for fd in (master, slave):
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.fixture
def diagnostic() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def fast_config() -> MenuConfig:
    """Config with short timeouts so loops in tests finish quickly."""
    return MenuConfig(poll_timeout=0.01, escape_timeout=0.05)


@pytest.fixture(autouse=True)
def release_terminal_owner() -> Iterator[None]:
    """Never let one test's terminal ownership leak into the next."""
    yield
    owner = TerminalModeManager.current_owner()
    if owner is not None:
        owner.release()
