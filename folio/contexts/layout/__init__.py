"""
Layout Context

Responsibilities:
- Classifies body lines into section headers, job entries, skills, bullets and prose
- Wraps text to a width using measured glyph widths
- Splits inline **bold** emphasis into drawable fragments
- Formats job periods

Owns: Line classification, wrapping, inline emphasis
Never: Creates pages or decides where on a page text goes
"""

from folio.contexts.layout.classifier import (
    ClassifierConfig,
    SkillsPolicy,
    classify_body,
    classify_line,
    iter_tokens,
)
from folio.contexts.layout.dates import format_date
from folio.contexts.layout.emphasis import split_emphasis
from folio.contexts.layout.types import Fragment, FontStyle, IndentedLines, WrappedLine
from folio.contexts.layout.wrapping import wrap_emphasized, wrap_indented, wrap_text

__all__ = [
    # Classification
    "ClassifierConfig",
    "SkillsPolicy",
    "classify_body",
    "classify_line",
    "iter_tokens",
    # Wrapping and emphasis
    "wrap_text",
    "wrap_indented",
    "wrap_emphasized",
    "split_emphasis",
    "format_date",
    # Types
    "Fragment",
    "FontStyle",
    "IndentedLines",
    "WrappedLine",
]
