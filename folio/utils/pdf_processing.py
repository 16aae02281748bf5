"""
PDF processing utilities for reading back rendered resumes.

Helper functions:
    page_count: Quick page count without full extraction.
    char_baseline: Baseline y of an extracted character in PDF coordinates.
    cluster_by_baseline: Group characters into text lines.

Main class:
    RenderedPDF: Parsed PDF with per-page text lines and their baselines.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

import pdfplumber
from PyPDF2 import PdfReader


def page_count(pdf_path: Path) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        reader = PdfReader(str(pdf_path))
        return len(reader.pages)
    except Exception:
        return None


def char_baseline(char: Dict) -> float:
    """
    Baseline y of a pdfplumber character, origin at the bottom-left.

    The text matrix translation is the baseline for unrotated text. Older
    pdfplumber releases don't expose the matrix, so fall back to the bottom of
    the glyph box (lower than the baseline by the font descent).
    """
    matrix = char.get("matrix")
    if matrix:
        return float(matrix[5])
    return float(char["y0"])


def cluster_by_baseline(chars: List[Dict], tolerance: float = 1.0) -> List[List[Dict]]:
    """
    Group characters into lines by baseline proximity, top of page first.

    Bold and regular runs share a baseline, so they land on the same line.
    """
    if not chars:
        return []

    sorted_chars = sorted(chars, key=lambda c: (-char_baseline(c), c["x0"]))

    lines = []
    current_line = [sorted_chars[0]]
    current_y = char_baseline(sorted_chars[0])

    for char in sorted_chars[1:]:
        y = char_baseline(char)
        if abs(y - current_y) <= tolerance:
            current_line.append(char)
        else:
            lines.append(current_line)
            current_line = [char]
            current_y = y

    if current_line:
        lines.append(current_line)

    return lines


@dataclass
class TextLine:
    """One extracted line of text."""

    text: str
    baseline: float
    x0: float


class RenderedPDF:
    """
    Parsed PDF with per-page text lines.

    Page data is lazily loaded and cached on first access.

    Args:
        pdf_path: Path to PDF file
    """

    def __init__(self, pdf_path: Path):
        self.pdf_path = Path(pdf_path)
        self._pages: Optional[List[List[TextLine]]] = None
        self._heights: List[float] = []

    def _load(self) -> List[List[TextLine]]:
        if self._pages is None:
            pages = []
            with pdfplumber.open(str(self.pdf_path)) as pdf:
                for page in pdf.pages:
                    self._heights.append(float(page.height))
                    lines = []
                    for chars in cluster_by_baseline(page.chars):
                        chars = sorted(chars, key=lambda c: c["x0"])
                        lines.append(
                            TextLine(
                                text="".join(c["text"] for c in chars),
                                baseline=min(char_baseline(c) for c in chars),
                                x0=chars[0]["x0"],
                            )
                        )
                    pages.append(lines)
            self._pages = pages
        return self._pages

    @property
    def num_pages(self) -> int:
        return len(self._load())

    def page_height(self, page_index: int) -> float:
        self._load()
        return self._heights[page_index]

    def lines(self, page_index: int) -> List[TextLine]:
        """Text lines on a page (0-indexed), top to bottom."""
        return self._load()[page_index]

    def text(self) -> str:
        """Full document text, one extracted line per row."""
        return "\n".join(line.text for page in self._load() for line in page)
