"""Rendered figure representation.

This module defines the figure domain model: the block of text rows a
message turns into once every character has been replaced by its glyph.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Figure:
    """A message rendered as rows of FIGlet text.

    Attributes:
        message: The message the figure was rendered from
        font_name: Name of the font used for rendering
        lines: Rendered rows, top to bottom, without line terminators
    """

    message: str
    font_name: str
    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, message: str, font_name: str, text: str) -> "Figure":
        """Build a figure from raw rendered text.

        Args:
            message: The message that was rendered
            font_name: Name of the font used for rendering
            text: Rendered text, rows separated by newlines

        Returns:
            Figure instance
        """
        return cls(message=message, font_name=font_name, lines=tuple(text.splitlines()))

    @property
    def height(self) -> int:
        """Number of rows in the figure."""
        return len(self.lines)

    @property
    def width(self) -> int:
        """Width of the widest row."""
        return max((len(line) for line in self.lines), default=0)

    def is_blank(self) -> bool:
        """Check whether the figure contains no visible characters.

        Returns:
            True if every row is whitespace only
        """
        return all(not line.strip() for line in self.lines)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the figure
        """
        return {
            "message": self.message,
            "font": self.font_name,
            "lines": list(self.lines),
        }

    def __str__(self) -> str:
        return "\n".join(self.lines)
