"""
Greedy word wrapping against measured glyph widths.

wrap_text() fills lines word by word; wrap_indented() does the same for bullet
lines, keeping a hanging indent so continuation lines align with the bullet
text rather than the bullet glyph. Both sit on wrap_fragments(), which wraps
mixed normal/bold runs and measures each run in its own style, so a **bold**
phrase that crosses a line break stays bold on both lines.
"""

import re
from typing import List, Sequence, Tuple

from folio.contexts.layout.emphasis import render_emphasis, split_emphasis
from folio.contexts.layout.types import Fragment, FontStyle, IndentedLines, TextMeasurer

BULLET = "•"

# "- item" is drawn as "• item"
HYPHEN_BULLET_PATTERN = re.compile(r"^-\s+")
BULLET_PREFIX_PATTERN = re.compile(r"^([\-·•])\s+")


def merge_fragments(fragments: Sequence[Fragment]) -> List[Fragment]:
    """Join neighbouring fragments of the same style and drop empty ones."""
    merged: List[Fragment] = []
    for fragment in fragments:
        if not fragment.text:
            continue
        if merged and merged[-1].bold == fragment.bold:
            merged[-1] = Fragment(merged[-1].text + fragment.text, fragment.bold)
        else:
            merged.append(fragment)
    return merged


def fragments_width(fragments: Sequence[Fragment], size: float, metrics: TextMeasurer) -> float:
    """Advance width of fragments drawn one after another."""
    return sum(
        metrics.measure_width(fragment.text, fragment.style, size)
        for fragment in merge_fragments(fragments)
    )


def _text(fragments: Sequence[Fragment]) -> str:
    return "".join(fragment.text for fragment in fragments)


def _split_words(fragments: Sequence[Fragment]) -> List[Tuple[List[Fragment], bool]]:
    """
    Split fragments at single spaces.

    Returns:
        (word fragments, bold) per word, where bold is the style of the space
        in front of the word. Double spaces produce empty words, which keeps
        them intact when the words are joined again.
    """
    words: List[Tuple[List[Fragment], bool]] = []
    current: List[Fragment] = []
    space_bold = False

    for fragment in fragments:
        for index, part in enumerate(fragment.text.split(" ")):
            if index > 0:
                words.append((current, space_bold))
                current = []
                space_bold = fragment.bold
            if part:
                current.append(Fragment(part, fragment.bold))

    words.append((current, space_bold))
    return words


def wrap_fragments(
    fragments: Sequence[Fragment],
    size: float,
    max_width: float,
    metrics: TextMeasurer,
) -> List[List[Fragment]]:
    """
    Greedy wrap of mixed-style text.

    A word is added to the current line while the line still fits in
    max_width. A word that doesn't fit on its own is placed alone on its line.

    Returns:
        Lines as merged fragment lists; no lines for empty text
    """
    lines: List[List[Fragment]] = []
    current: List[Fragment] = []

    for word, space_bold in _split_words(fragments):
        if not _text(current):
            current = list(word)
            continue

        candidate = current + [Fragment(" ", space_bold)] + word
        if fragments_width(candidate, size, metrics) > max_width:
            lines.append(merge_fragments(current))
            current = list(word)
        else:
            current = candidate

    if _text(current):
        lines.append(merge_fragments(current))
    return lines


def wrap_text(
    text: str,
    style: FontStyle,
    size: float,
    max_width: float,
    metrics: TextMeasurer,
) -> List[str]:
    """
    Wrap text to max_width, breaking only at single spaces.

    A word wider than max_width on its own is placed alone on a line rather
    than split or truncated.

    Args:
        text: Text run to wrap
        style: Font style used for measuring
        size: Font size in points
        max_width: Maximum line width in points
        metrics: Width provider (see TextMeasurer)

    Returns:
        Wrapped lines; empty list for empty text

    Example:
        >>> wrap_text("aaa bbb ccc", FontStyle.NORMAL, 10, 35, metrics)  # 5pt per char
        ['aaa bbb', 'ccc']
    """
    run = Fragment(text, bold=style == FontStyle.BOLD)
    return [_text(line) for line in wrap_fragments([run], size, max_width, metrics)]


def wrap_emphasized(
    text: str, size: float, max_width: float, metrics: TextMeasurer
) -> List[List[Fragment]]:
    """Wrap text containing **bold** runs; see split_emphasis()."""
    return wrap_fragments(split_emphasis(text), size, max_width, metrics)


def normalize_bullet(text: str) -> str:
    """Turn a leading "- " into "• "."""
    return HYPHEN_BULLET_PATTERN.sub(f"{BULLET} ", text, count=1)


def split_bullet_prefix(text: str) -> Tuple[str, str]:
    """
    Split a leading bullet marker off text.

    Returns:
        (prefix, content) where prefix is the marker plus one space, or "" when
        text doesn't start with a bullet
    """
    match = BULLET_PREFIX_PATTERN.match(text)
    if not match:
        return "", text
    return f"{match.group(1)} ", text[match.end() :]


def wrap_indented(
    text: str,
    style: FontStyle,
    size: float,
    max_width: float,
    metrics: TextMeasurer,
    emphasis: bool = False,
) -> IndentedLines:
    """
    Wrap a bullet line with a hanging indent.

    A leading "- " becomes "• ". The prefix appears on the first line only;
    every continuation line should be drawn at left + indent_width.

    Args:
        text: Line text, optionally starting with a bullet marker
        style: Font style used for measuring
        size: Font size in points
        max_width: Maximum width of the whole line including the prefix
        metrics: Width provider
        emphasis: Treat **bold** runs as bold while measuring; each output line
            is re-marked so its bold runs are closed on that line

    Returns:
        IndentedLines(lines, prefix, indent_width)
    """
    prefix, content = split_bullet_prefix(normalize_bullet(text))
    indent_width = metrics.measure_width(prefix, style, size) if prefix else 0.0

    if emphasis:
        fragments = [
            fragment if fragment.bold else Fragment(fragment.text, style == FontStyle.BOLD)
            for fragment in split_emphasis(content)
        ]
        wrapped = [
            render_emphasis(line)
            for line in wrap_fragments(fragments, size, max_width - indent_width, metrics)
        ]
    else:
        wrapped = wrap_text(content, style, size, max_width - indent_width, metrics)

    if wrapped:
        wrapped[0] = prefix + wrapped[0]

    return IndentedLines(lines=wrapped, prefix=prefix, indent_width=indent_width)
