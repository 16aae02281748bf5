"""
Page backends: text measurement, page creation and drawing.

The layout engine only talks to the MetricsProvider protocol. PageRecorder
keeps every created page and its drawing operations in memory;
ReportLabBackend adds real font metrics and turns the recorded pages into a
PDF once a render has finished, so a failed render never leaves a half-written
file behind.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Tuple, Union

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen.canvas import Canvas

from folio.contexts.layout.types import Color, FontStyle, TextMeasurer
from folio.contexts.rendering.exceptions import MetricsProviderError

DEFAULT_FONTS = {
    FontStyle.NORMAL: "Helvetica",
    FontStyle.BOLD: "Helvetica-Bold",
}

# A4 in points
A4_SIZE = (595.0, 842.0)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; filled, or outlined when fill is False."""

    x: float
    y: float
    width: float
    height: float
    fill: bool = True
    thickness: float = 1.0


@dataclass(frozen=True)
class Line:
    """Straight line segment."""

    start: Tuple[float, float]
    end: Tuple[float, float]
    thickness: float = 1.0


Shape = Union[Rect, Line]


@dataclass(frozen=True)
class TextOp:
    """A recorded draw_text() call."""

    text: str
    x: float
    y: float
    style: FontStyle
    size: float
    color: Color


@dataclass(frozen=True)
class ShapeOp:
    """A recorded draw_shape() call."""

    shape: Shape
    color: Color


@dataclass
class Page:
    """
    Page handle: size plus the drawing operations applied to it, in order.

    Attributes:
        number: 1-based position in the page sequence
        width: Page width in points
        height: Page height in points
        ops: Recorded TextOp / ShapeOp entries
    """

    number: int
    width: float
    height: float
    ops: List[Union[TextOp, ShapeOp]] = field(default_factory=list)

    @property
    def text_ops(self) -> List[TextOp]:
        return [op for op in self.ops if isinstance(op, TextOp)]

    @property
    def shape_ops(self) -> List[ShapeOp]:
        return [op for op in self.ops if isinstance(op, ShapeOp)]


class MetricsProvider(TextMeasurer, Protocol):
    """What the layout engine needs from a typesetting backend."""

    def create_page(self, width: float, height: float) -> Page: ...

    def draw_text(
        self,
        page: Page,
        text: str,
        x: float,
        y: float,
        style: FontStyle,
        size: float,
        color: Color,
    ) -> None: ...

    def draw_shape(self, page: Page, shape: Shape, color: Color) -> None: ...


class PageRecorder(ABC):
    """
    In-memory page sequence with recorded drawing.

    Base class only: subclasses supply measure_width(). Pages are only ever
    appended.
    """

    def __init__(self):
        self.pages: List[Page] = []

    @abstractmethod
    def measure_width(self, text: str, style: FontStyle, size: float) -> float:
        raise NotImplementedError

    def create_page(self, width: float, height: float) -> Page:
        page = Page(number=len(self.pages) + 1, width=width, height=height)
        self.pages.append(page)
        return page

    def draw_text(
        self,
        page: Page,
        text: str,
        x: float,
        y: float,
        style: FontStyle,
        size: float,
        color: Color,
    ) -> None:
        if text:
            page.ops.append(TextOp(text, x, y, style, size, color))

    def draw_shape(self, page: Page, shape: Shape, color: Color) -> None:
        page.ops.append(ShapeOp(shape, color))


class ReportLabBackend(PageRecorder):
    """
    PageRecorder measuring with reportlab font metrics and writing PDFs with its canvas.

    Args:
        fonts: Backend font name per style (default: built-in Helvetica family)

    Raises:
        MetricsProviderError: If a font isn't known to reportlab
    """

    def __init__(self, fonts: Optional[Dict[FontStyle, str]] = None):
        super().__init__()
        self.fonts = {**DEFAULT_FONTS, **(fonts or {})}
        for font_name in self.fonts.values():
            try:
                pdfmetrics.getFont(font_name)
            except Exception as e:
                raise MetricsProviderError(
                    "Font not available to reportlab", font_name=font_name, original_error=e
                ) from e

    def font_name(self, style: FontStyle) -> str:
        return self.fonts[style]

    def measure_width(self, text: str, style: FontStyle, size: float) -> float:
        font_name = self.font_name(style)
        try:
            return pdfmetrics.stringWidth(text, font_name, size)
        except Exception as e:
            raise MetricsProviderError(
                "Could not measure text", font_name=font_name, text_sample=text, original_error=e
            ) from e

    def _replay(self, canvas: Canvas, page: Page) -> None:
        canvas.setPageSize((page.width, page.height))
        for op in page.ops:
            if isinstance(op, TextOp):
                canvas.setFillColorRGB(*op.color)
                canvas.setFont(self.font_name(op.style), op.size)
                canvas.drawString(op.x, op.y, op.text)
            elif isinstance(op.shape, Rect):
                rect = op.shape
                if rect.fill:
                    canvas.setFillColorRGB(*op.color)
                else:
                    canvas.setStrokeColorRGB(*op.color)
                    canvas.setLineWidth(rect.thickness)
                canvas.rect(
                    rect.x, rect.y, rect.width, rect.height, stroke=int(not rect.fill), fill=int(rect.fill)
                )
            else:
                line = op.shape
                canvas.setStrokeColorRGB(*op.color)
                canvas.setLineWidth(line.thickness)
                canvas.line(line.start[0], line.start[1], line.end[0], line.end[1])
        canvas.showPage()

    def to_bytes(self, title: str = "") -> bytes:
        """
        Serialize all recorded pages to PDF bytes.

        Raises:
            ValueError: If no page was created
        """
        if not self.pages:
            raise ValueError("Nothing to write: no pages were created")

        buffer = BytesIO()
        first = self.pages[0]
        canvas = Canvas(buffer, pagesize=(first.width, first.height))
        if title:
            canvas.setTitle(title)
        for page in self.pages:
            self._replay(canvas, page)
        canvas.save()
        return buffer.getvalue()

    def save(self, output_path: Path, title: str = "") -> Path:
        """Write the recorded pages to output_path as a PDF."""
        output_path = Path(output_path)
        data = self.to_bytes(title=title)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
        return output_path
