"""Keyboard input decoding.

Bytes are read one at a time straight from the input descriptor with
``os.read`` so Python's buffering never holds back the tail of an escape
sequence. Escape sequences are recognized by a small state machine:

    IDLE --ESC--> SAW_ESCAPE --'['/'O'--> SAW_ESCAPE_BRACKET --A/B/C/D--> arrow
                       |
                       +--other--> SAW_ESCAPE_OTHER --any--> UNRECOGNIZED

Every transition out of an escape state waits at most ``escape_timeout``
for its byte. A timeout there means the user pressed a bare Escape (or the
sequence was cut short) and yields UNRECOGNIZED instead of blocking.
"""

from __future__ import annotations

import logging
import os
import select
import sys
from enum import Enum, auto
from typing import Optional

from grid_menu.core.constants import (
    CONFIRM_BYTES,
    CSI_INTRODUCER,
    ESC_BYTE,
    ESCAPE_TIMEOUT,
    POLL_TIMEOUT,
    SS3_INTRODUCER,
)
from grid_menu.core.keys import Key, KeyEvent

logger = logging.getLogger(__name__)


class DecoderState(Enum):
    """Position inside a (possible) escape sequence."""
    IDLE = auto()
    SAW_ESCAPE = auto()
    SAW_ESCAPE_BRACKET = auto()
    SAW_ESCAPE_OTHER = auto()


class InputDecoder:
    """
    Turns raw input bytes into KeyEvents.

    ``feed()`` drives the state machine one byte at a time and is free of
    any I/O; ``poll()`` adds the bounded reads on top of it.
    """

    # Final byte of "ESC [ x" / "ESC O x" arrow sequences
    ARROWS: dict[int, Key] = {
        ord('A'): Key.UP,
        ord('B'): Key.DOWN,
        ord('C'): Key.RIGHT,
        ord('D'): Key.LEFT,
    }

    def __init__(self, fd: Optional[int] = None, escape_timeout: float = ESCAPE_TIMEOUT) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self.escape_timeout = escape_timeout
        self._state = DecoderState.IDLE
        self._raw = bytearray()

    @property
    def state(self) -> DecoderState:
        return self._state

    def reset(self) -> None:
        self._state = DecoderState.IDLE
        self._raw.clear()

    def feed(self, byte: int) -> Optional[KeyEvent]:
        """
        Advance the state machine by one byte.

        Returns the completed event, or None while inside an escape sequence.
        """
        self._raw.append(byte)
        state = self._state

        if state is DecoderState.IDLE:
            if byte == ESC_BYTE:
                self._state = DecoderState.SAW_ESCAPE
                return None
            if byte in CONFIRM_BYTES:
                return self._emit(Key.CONFIRM)
            return self._emit(Key.UNRECOGNIZED)

        if state is DecoderState.SAW_ESCAPE:
            if byte in (CSI_INTRODUCER, SS3_INTRODUCER):
                self._state = DecoderState.SAW_ESCAPE_BRACKET
            else:
                self._state = DecoderState.SAW_ESCAPE_OTHER
            return None

        if state is DecoderState.SAW_ESCAPE_BRACKET:
            return self._emit(self.ARROWS.get(byte, Key.UNRECOGNIZED))

        # SAW_ESCAPE_OTHER: second byte after ESC consumed, sequence is junk
        return self._emit(Key.UNRECOGNIZED)

    def timeout(self) -> Optional[KeyEvent]:
        """
        Handle a read timeout.

        Inside an escape sequence this ends it as UNRECOGNIZED; when idle
        there is nothing to report.
        """
        if self._state is DecoderState.IDLE:
            return None
        return self._emit(Key.UNRECOGNIZED)

    def poll(self, timeout: float = POLL_TIMEOUT) -> Optional[KeyEvent]:
        """
        Read one key event.

        Waits at most ``timeout`` for the first byte and returns None if
        nothing arrives. Raises EOFError when the input is closed.
        """
        self.reset()
        wait = timeout
        while True:
            byte = self._read_byte(wait)
            if byte is None:
                return self.timeout()
            event = self.feed(byte)
            if event is not None:
                return event
            wait = self.escape_timeout

    def _emit(self, key: Key) -> KeyEvent:
        event = KeyEvent(key=key, raw=bytes(self._raw))
        if key is Key.UNRECOGNIZED:
            logger.debug("Ignoring input %r", event.raw)
        self.reset()
        return event

    def _read_byte(self, timeout: float) -> Optional[int]:
        if not self._has_input(timeout):
            return None
        data = os.read(self._fd, 1)
        if not data:
            raise EOFError("Input closed")
        return data[0]

    def _has_input(self, timeout: float) -> bool:
        """
        Check if input is available within timeout.

        A descriptor that cannot be waited on (closed, or out of select's
        range) is reported as end of input.
        """
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
        except (ValueError, OSError) as e:
            raise EOFError(f"Cannot read input: {e}") from e
        return bool(ready)
