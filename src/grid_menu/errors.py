"""Exception types raised by grid-menu."""


class MenuError(Exception):
    """Base class for all menu errors."""


class NoOptionsError(MenuError, ValueError):
    """Raised when a menu is started without any options."""

    def __init__(self, message: str = "No menu options provided.") -> None:
        super().__init__(message)


class TerminalModeError(MenuError):
    """Raised when terminal mode cannot be acquired."""
