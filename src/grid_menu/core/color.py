"""RGB color values used for highlighting the selected cell."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Color:
    """
    A 24-bit true color.

    Parsed from the ``"R G B"`` strings accepted on the command line.
    """
    r: int
    g: int
    b: int

    WHITE: ClassVar["Color"]
    MEDIUM_BLUE: ClassVar["Color"]

    def __post_init__(self) -> None:
        if not all(0 <= c <= 255 for c in (self.r, self.g, self.b)):
            raise ValueError(f"RGB values must be 0-255, got ({self.r}, {self.g}, {self.b})")

    @classmethod
    def parse(cls, text: str) -> "Color":
        """
        Parse a color from three whitespace-separated components.

        >>> Color.parse("255 165 0")
        Color(r=255, g=165, b=0)
        """
        parts = text.split()
        if len(parts) != 3:
            raise ValueError(f"Expected three values 'R G B', got {text!r}")
        try:
            r, g, b = (int(p) for p in parts)
        except ValueError:
            raise ValueError(f"RGB values must be integers, got {text!r}") from None
        return cls(r, g, b)

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for foreground color."""
        return f"38;2;{self.r};{self.g};{self.b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for background color."""
        return f"48;2;{self.r};{self.g};{self.b}"

    def __str__(self) -> str:
        return f"{self.r} {self.g} {self.b}"


Color.WHITE = Color(255, 255, 255)
Color.MEDIUM_BLUE = Color(0, 100, 200)
