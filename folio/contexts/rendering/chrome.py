"""
First-page identity header and section heading decorations.

The header is drawn once, on the first page only: an optional background
band, then name, headline and contact line aligned per the skin. Headings get
their decoration (underline, band, marker) every time they are drawn.
"""

from typing import List

from folio.contexts.intake.header_fields import IdentityFields
from folio.contexts.layout.metrics import LayoutMetrics
from folio.contexts.layout.types import Color, FontStyle
from folio.contexts.layout.wrapping import wrap_text
from folio.contexts.rendering.backend import Line, MetricsProvider, Page, Rect
from folio.contexts.rendering.skins import Skin

CONTACT_SEPARATOR = "  •  "

# Baseline advance per header line, as a multiple of its font size
NAME_LINE_FACTOR = 1.2
HEADLINE_LINE_FACTOR = 1.5
CONTACT_LINE_FACTOR = 1.4

UNDERLINE_OFFSET = 4.0
DOUBLE_UNDERLINE_SPACING = 2.5
HEADING_BAND_PADDING = 4.0
HEADING_BAND_TINT = 0.85
MARKER_SIZE = 5.0
MARKER_GAP = 5.0


def tint(color: Color, amount: float) -> Color:
    """Blend color toward white; amount 0 keeps it, 1 gives white."""
    r, g, b = (component + (1.0 - component) * amount for component in color)
    return (r, g, b)


def aligned_x(align: str, text_width: float, left: float, right: float, page_width: float) -> float:
    if align == "center":
        return (page_width - text_width) / 2
    if align == "right":
        return right - text_width
    return left


def draw_header_band(backend: MetricsProvider, page: Page, skin: Skin, page_width: float, page_height: float) -> None:
    """Fill the first-page header band, if the skin has one."""
    band_height = skin.header.band_height
    if band_height > 0:
        backend.draw_shape(
            page, Rect(0, page_height - band_height, page_width, band_height), skin.header.band_color
        )


def _draw_aligned_lines(
    backend: MetricsProvider,
    page: Page,
    lines: List[str],
    y: float,
    style: FontStyle,
    size: float,
    color: Color,
    line_factor: float,
    skin: Skin,
    page_width: float,
) -> float:
    left = skin.margins.left
    right = page_width - skin.margins.right
    for line in lines:
        width = backend.measure_width(line, style, size)
        x = aligned_x(skin.header.align, width, left, right, page_width)
        backend.draw_text(page, line, x, y, style, size, color)
        y -= size * line_factor
    return y


def draw_identity_header(
    backend: MetricsProvider,
    page: Page,
    fields: IdentityFields,
    skin: Skin,
    page_width: float,
    page_height: float,
) -> float:
    """
    Draw name, headline and contact line at the top of the first page.

    Missing fields are skipped without leaving a gap. The contact parts are
    joined with a spaced bullet and wrapped like any other text.

    Args:
        backend: Page backend
        page: First page
        fields: Extracted identity header
        skin: Visual skin
        page_width: Page width in points
        page_height: Page height in points

    Returns:
        Baseline where the body should start
    """
    typography, header = skin.typography, skin.header
    width = skin.content_width(page_width)
    y = page_height - header.top

    if fields.name:
        name_lines = wrap_text(fields.name, FontStyle.BOLD, typography.name_size, width, backend)
        y = _draw_aligned_lines(
            backend, page, name_lines, y, FontStyle.BOLD, typography.name_size,
            header.name_color, NAME_LINE_FACTOR, skin, page_width,
        )

    if header.show_headline and fields.headline:
        headline_lines = wrap_text(
            fields.headline, FontStyle.NORMAL, typography.headline_size, width, backend
        )
        y = _draw_aligned_lines(
            backend, page, headline_lines, y, FontStyle.NORMAL, typography.headline_size,
            skin.palette.accent, HEADLINE_LINE_FACTOR, skin, page_width,
        )

    contact_parts = fields.contact_line_parts()
    if contact_parts:
        contact_lines = wrap_text(
            CONTACT_SEPARATOR.join(contact_parts), FontStyle.NORMAL, typography.contact_size, width, backend
        )
        y = _draw_aligned_lines(
            backend, page, contact_lines, y, FontStyle.NORMAL, typography.contact_size,
            header.contact_color, CONTACT_LINE_FACTOR, skin, page_width,
        )

    if header.divider != "none":
        rule_y = y + typography.contact_size * 0.5
        left, right = skin.margins.left, page_width - skin.margins.right
        backend.draw_shape(page, Line((left, rule_y), (right, rule_y), thickness=1.0), skin.palette.accent)
        if header.divider == "double":
            rule_y -= DOUBLE_UNDERLINE_SPACING
            backend.draw_shape(page, Line((left, rule_y), (right, rule_y), thickness=0.5), skin.palette.accent)

    if header.body_top is not None:
        return page_height - header.body_top
    return y - header.after_gap


def draw_heading_line(
    backend: MetricsProvider,
    page: Page,
    text: str,
    x: float,
    y: float,
    width: float,
    layout: LayoutMetrics,
) -> None:
    """
    Draw one line of a section heading with the layout's heading decoration.

    Args:
        text: Heading line
        x: Left edge of the heading
        y: Baseline
        width: Width of the decoration (usually the content width)
        layout: Heading size, colors and style
    """
    size, accent = layout.section_size, layout.accent_color
    style = layout.heading_style

    if style == "band":
        band = Rect(
            x - HEADING_BAND_PADDING,
            y - HEADING_BAND_PADDING,
            width + 2 * HEADING_BAND_PADDING,
            size + HEADING_BAND_PADDING,
        )
        backend.draw_shape(page, band, tint(accent, HEADING_BAND_TINT))
    elif style == "marker":
        backend.draw_shape(page, Rect(x - MARKER_SIZE - MARKER_GAP, y, MARKER_SIZE, MARKER_SIZE), accent)

    backend.draw_text(page, text, x, y, FontStyle.BOLD, size, layout.heading_color)

    if style in ("underline", "double_underline"):
        rule_y = y - UNDERLINE_OFFSET
        backend.draw_shape(page, Line((x, rule_y), (x + width, rule_y), thickness=1.0), accent)
        if style == "double_underline":
            rule_y -= DOUBLE_UNDERLINE_SPACING
            backend.draw_shape(page, Line((x, rule_y), (x + width, rule_y), thickness=0.5), accent)
