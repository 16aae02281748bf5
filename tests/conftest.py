"""Shared fixtures: a recording backend with fixed glyph widths."""

import pytest

from folio.contexts.layout.metrics import LayoutMetrics
from folio.contexts.layout.types import FontStyle
from folio.contexts.rendering.backend import PageRecorder

# Advance per character in tenths of the font size: 5pt normal, 6pt bold at size 10
NORMAL_WIDTH = 5
BOLD_WIDTH = 6


class FixedWidthBackend(PageRecorder):
    """PageRecorder whose text widths depend only on character count and style."""

    def measure_width(self, text, style, size):
        per_char = BOLD_WIDTH if style == FontStyle.BOLD else NORMAL_WIDTH
        return len(text) * per_char * size / 10


class RecordingHook:
    """Decoration hook that remembers every page it was called for."""

    def __init__(self):
        self.calls = []

    def __call__(self, page, width, height):
        self.calls.append((page.number, width, height))


@pytest.fixture
def backend():
    return FixedWidthBackend()


@pytest.fixture
def hook():
    return RecordingHook()


@pytest.fixture
def layout():
    """
    Default margins (40/40/50, content top 72) with round body metrics.

    Body text at size 10 is 5pt per character, body lines advance 15pt and
    heading lines 18pt. Body text starts at x=60 and may be 495pt wide.
    """
    return LayoutMetrics(
        body_size=10.0,
        title_size=11.0,
        body_line_height=15.0,
        section_line_height=18.0,
    )


@pytest.fixture
def make_backend():
    """Factory for independent backends within one test."""
    return FixedWidthBackend
