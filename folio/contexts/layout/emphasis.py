"""
Inline **bold** emphasis.

Text between a pair of double asterisks is drawn bold with the asterisks
removed. Unpaired asterisks are left as literal text.

draw_fragments() and draw_emphasized() only need a backend with draw_text()
and measure_width(), so any MetricsProvider will do.
"""

import re
from typing import TYPE_CHECKING, List, Sequence

from folio.contexts.layout.types import Color, Fragment

if TYPE_CHECKING:
    from folio.contexts.rendering.backend import MetricsProvider, Page

EMPHASIS_PATTERN = re.compile(r"\*\*([^*]+)\*\*")


def split_emphasis(text: str) -> List[Fragment]:
    """
    Split text into normal and bold fragments.

    Args:
        text: Text possibly containing **bold** runs

    Returns:
        Fragments in reading order; empty normal runs are dropped

    Examples:
        >>> split_emphasis("a **b** c")
        [Fragment(text='a ', bold=False), Fragment(text='b', bold=True), Fragment(text=' c', bold=False)]
        >>> split_emphasis("unterminated **bold")
        [Fragment(text='unterminated **bold', bold=False)]
    """
    fragments: List[Fragment] = []
    position = 0

    for match in EMPHASIS_PATTERN.finditer(text):
        if match.start() > position:
            fragments.append(Fragment(text[position : match.start()]))
        fragments.append(Fragment(match.group(1), bold=True))
        position = match.end()

    if position < len(text):
        fragments.append(Fragment(text[position:]))

    return fragments


def render_emphasis(fragments: List[Fragment]) -> str:
    """Inverse of split_emphasis(): bold fragments are wrapped in ** markers."""
    return "".join(f"**{f.text}**" if f.bold else f.text for f in fragments)


def strip_emphasis(text: str) -> str:
    """Text with emphasis markers removed."""
    return "".join(fragment.text for fragment in split_emphasis(text))


def draw_fragments(
    backend: "MetricsProvider",
    page: "Page",
    fragments: Sequence[Fragment],
    x: float,
    y: float,
    size: float,
    color: Color,
) -> float:
    """
    Draw fragments left to right on one baseline.

    Each fragment is measured in its own style and x advances by that width.

    Returns:
        x after the last fragment
    """
    for fragment in fragments:
        backend.draw_text(page, fragment.text, x, y, fragment.style, size, color)
        x += backend.measure_width(fragment.text, fragment.style, size)
    return x


def draw_emphasized(
    backend: "MetricsProvider",
    page: "Page",
    text: str,
    x: float,
    y: float,
    size: float,
    color: Color,
) -> float:
    """Draw text with its **bold** runs in bold; see draw_fragments()."""
    return draw_fragments(backend, page, split_emphasis(text), x, y, size, color)
