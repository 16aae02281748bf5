"""
Rendering Context

Responsibilities:
- Paginates classified body lines onto fixed-size pages
- Draws the first-page identity header and per-skin page decoration
- Serializes recorded pages to PDF and manages output files
- Validates rendered PDFs against their layout limits

Owns: Skins, pagination, PDF output
Never: Changes how lines are classified
"""

from folio.contexts.rendering.backend import A4_SIZE, Page, PageRecorder, ReportLabBackend
from folio.contexts.rendering.exceptions import (
    MetricsProviderError,
    SkinConfigError,
    UnknownSkinError,
)
from folio.contexts.rendering.paginator import BodyPaginator, PaginationResult
from folio.contexts.rendering.renderer import RenderResult, render, render_preview, render_resume
from folio.contexts.rendering.skins import DEFAULT_SKIN, Skin, get_skin, list_skins, make_decoration_hook
from folio.contexts.rendering.validator import ValidationResult, validate_pdf

__all__ = [
    "A4_SIZE",
    "BodyPaginator",
    "DEFAULT_SKIN",
    "MetricsProviderError",
    "Page",
    "PageRecorder",
    "PaginationResult",
    "RenderResult",
    "ReportLabBackend",
    "Skin",
    "SkinConfigError",
    "UnknownSkinError",
    "ValidationResult",
    "get_skin",
    "list_skins",
    "make_decoration_hook",
    "render",
    "render_preview",
    "render_resume",
    "validate_pdf",
]
