"""Shared constants for terminal output and input decoding."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"
CLEAR_SCREEN = f"{CSI}2J"
CURSOR_HOME = f"{CSI}H"

# Selection markers around the highlighted cell
SELECTED_PREFIX = "> "
SELECTED_SUFFIX = " <"
PLAIN_PREFIX = "  "
PLAIN_SUFFIX = "  "

ELLIPSIS = "..."

# Input bytes
ESC_BYTE = 0x1b
CSI_INTRODUCER = ord("[")
SS3_INTRODUCER = ord("O")
CONFIRM_BYTES = frozenset({ord("\n"), ord("\r"), ord(" ")})

# Timings (seconds)
POLL_TIMEOUT = 0.2
ESCAPE_TIMEOUT = 0.1
