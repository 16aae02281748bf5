"""
Shared layout types: font styles, drawable fragments and the measuring protocol.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Protocol, Tuple

# RGB components in the 0..1 range
Color = Tuple[float, float, float]


class FontStyle(str, Enum):
    """Font weight used for measuring and drawing a run of text."""

    NORMAL = "normal"
    BOLD = "bold"


class TextMeasurer(Protocol):
    """Anything that can report the advance width of a text run."""

    def measure_width(self, text: str, style: FontStyle, size: float) -> float: ...


@dataclass(frozen=True)
class Fragment:
    """A run of text drawn in a single style."""

    text: str
    bold: bool = False

    @property
    def style(self) -> FontStyle:
        return FontStyle.BOLD if self.bold else FontStyle.NORMAL


@dataclass(frozen=True)
class WrappedLine:
    """One output line: fragments drawn left to right starting at x_offset."""

    fragments: Tuple[Fragment, ...]
    x_offset: float = 0.0

    @property
    def text(self) -> str:
        return "".join(fragment.text for fragment in self.fragments)


@dataclass(frozen=True)
class IndentedLines:
    """
    Result of indent-aware wrapping.

    Attributes:
        lines: Wrapped lines; only the first carries the prefix
        prefix: Detected bullet marker plus one space, or ""
        indent_width: Measured width of prefix; continuation lines start here
    """

    lines: List[str]
    prefix: str
    indent_width: float

    def wrapped_lines(self) -> List[WrappedLine]:
        """Lines with their x-offsets: 0 for the first, indent_width after it."""
        return [
            WrappedLine((Fragment(line),), 0.0 if index == 0 else self.indent_width)
            for index, line in enumerate(self.lines)
        ]
