"""
Body pagination.

BodyPaginator walks the classified body tokens, wraps each one against the
backend's font metrics and draws it at the cursor, moving down the page. Before
every drawn sub-line (and after every non-blank logical line) it checks the cursor
against the bottom margin; on overflow it asks the backend for a new page,
replays the decoration hook on it and restarts at the content top.

Examples:
    >>> paginator = BodyPaginator(backend, skin.layout_metrics(), 595, 842, hook)
    >>> result = paginator.run(fields.body, first_page, y=700)
    >>> len(result.pages)
    2
"""

from dataclasses import dataclass, field
from typing import List

from folio.contexts.layout.classifier import iter_tokens
from folio.contexts.layout.dates import format_date
from folio.contexts.layout.emphasis import draw_emphasized, draw_fragments, strip_emphasis
from folio.contexts.layout.metrics import LayoutMetrics
from folio.contexts.layout.tokens import (
    Blank,
    BulletItem,
    JobEntry,
    PlainText,
    SectionHeader,
    SkillsCategory,
    Token,
)
from folio.contexts.layout.types import FontStyle
from folio.contexts.layout.wrapping import (
    BULLET,
    BULLET_PREFIX_PATTERN,
    wrap_emphasized,
    wrap_indented,
    wrap_text,
)
from folio.contexts.rendering.backend import MetricsProvider, Page
from folio.contexts.rendering.chrome import draw_heading_line
from folio.contexts.rendering.logger import _log_debug, log_page_break
from folio.contexts.rendering.skins import DecorationHook

ENTRY_SEPARATOR = "  •  "


@dataclass
class LayoutCursor:
    """
    Current drawing position. Owned by one paginator run.

    Attributes:
        page: Page being drawn on
        y: Baseline of the next line
        left: Left edge of the content area
        content_width: Width between the margins
        bottom_margin: Lowest allowed baseline
        content_top: Distance from the top edge where continuation pages start
    """

    page: Page
    y: float
    left: float
    content_width: float
    bottom_margin: float
    content_top: float


@dataclass
class PaginationResult:
    """Final baseline and every page the run drew on, in order."""

    y: float
    pages: List[Page] = field(default_factory=list)


class BodyPaginator:
    """
    Lays out a resume body across as many pages as it needs.

    Args:
        backend: Measures text, creates pages and draws
        layout: Sizes, gaps, colors and classifier settings
        page_width: Width of every page created
        page_height: Height of every page created
        decoration_hook: Called with (page, width, height) for each new page
    """

    def __init__(
        self,
        backend: MetricsProvider,
        layout: LayoutMetrics,
        page_width: float,
        page_height: float,
        decoration_hook: DecorationHook,
    ):
        self.backend = backend
        self.layout = layout
        self.page_width = page_width
        self.page_height = page_height
        self.decoration_hook = decoration_hook

    def run(self, body: str, page: Page, y: float) -> PaginationResult:
        """
        Lay out body starting at baseline y on page.

        Args:
            body: Body text, one logical line per row
            page: Page to start on (already decorated)
            y: Starting baseline

        Returns:
            PaginationResult with the final baseline and the pages used
        """
        layout = self.layout
        self._cursor = LayoutCursor(
            page=page,
            y=y,
            left=layout.left_margin,
            content_width=layout.content_width(self.page_width),
            bottom_margin=layout.bottom_margin,
            content_top=layout.content_top,
        )
        self._pages = [page]
        self._first_job = True

        for token in iter_tokens(body, layout.classifier):
            self._draw_token(token)
            # Blank gaps may run past the margin; the next drawn line breaks the page
            if not isinstance(token, Blank):
                self._ensure_room()

        return PaginationResult(y=self._cursor.y, pages=self._pages)

    # Cursor

    def _ensure_room(self, next_line: str = "") -> None:
        """Start a new page if the cursor has passed the bottom margin."""
        cursor = self._cursor
        if cursor.y >= cursor.bottom_margin:
            return

        page = self.backend.create_page(self.page_width, self.page_height)
        self.decoration_hook(page, self.page_width, self.page_height)
        cursor.page = page
        cursor.y = self.page_height - cursor.content_top
        self._pages.append(page)
        log_page_break(page.number, next_line)

    def _draw_token(self, token: Token) -> None:
        if isinstance(token, Blank):
            self._cursor.y -= self.layout.blank_gap
        elif isinstance(token, SectionHeader):
            self._draw_section_header(token)
        elif isinstance(token, JobEntry):
            self._draw_job_entry(token)
        elif isinstance(token, PlainText):
            self._draw_prose(token)
        elif isinstance(token, SkillsCategory):
            self._draw_skills_category(token)
        else:
            self._draw_bullet(token)

    # Token drawing

    def _draw_section_header(self, token: SectionHeader) -> None:
        layout, cursor = self.layout, self._cursor
        cursor.y -= layout.section_gap

        width = cursor.content_width - layout.heading_inset
        for line in wrap_text(token.title, FontStyle.BOLD, layout.section_size, width, self.backend):
            self._ensure_room(line)
            draw_heading_line(
                self.backend, cursor.page, line, cursor.left, cursor.y, cursor.content_width, layout
            )
            cursor.y -= layout.section_line_height + layout.heading_gap

    def _draw_job_entry(self, token: JobEntry) -> None:
        layout, cursor = self.layout, self._cursor
        if not self._first_job:
            cursor.y -= layout.job_gap
        self._first_job = False

        x = layout.text_left
        width = cursor.content_width - layout.text_indent

        title = strip_emphasis(token.title)
        for line in wrap_text(title, FontStyle.BOLD, layout.title_size, width, self.backend):
            self._ensure_room(line)
            self.backend.draw_text(
                cursor.page, line, x, cursor.y, FontStyle.BOLD, layout.title_size, layout.text_color
            )
            cursor.y -= layout.body_line_height + layout.title_gap

        parts = [token.organization]
        if token.sub_location:
            parts.append(token.sub_location)
        parts.append(format_date(token.period))

        for fragments in wrap_emphasized(ENTRY_SEPARATOR.join(parts), layout.body_size, width, self.backend):
            self._ensure_room(fragments[0].text)
            draw_fragments(
                self.backend, cursor.page, fragments, x, cursor.y, layout.body_size, layout.muted_color
            )
            cursor.y -= layout.body_line_height + layout.title_gap

        cursor.y -= layout.entry_gap

    def _draw_prose(self, token: PlainText) -> None:
        layout, cursor = self.layout, self._cursor
        width = cursor.content_width - layout.text_indent

        for fragments in wrap_emphasized(token.text, layout.body_size, width, self.backend):
            self._ensure_room(fragments[0].text)
            draw_fragments(
                self.backend, cursor.page, fragments, layout.text_left, cursor.y,
                layout.body_size, layout.text_color,
            )
            cursor.y -= layout.body_line_height

    def _draw_skills_category(self, token: SkillsCategory) -> None:
        """Bullet, bold "label:", then the items flowing after the label."""
        layout, cursor, backend = self.layout, self._cursor, self.backend
        size, color = layout.body_size, layout.text_color

        label = f"{token.label}:"
        bullet_width = backend.measure_width(layout.bullet, FontStyle.NORMAL, size)
        label_width = backend.measure_width(label, FontStyle.BOLD, size)
        space_width = backend.measure_width(" ", FontStyle.NORMAL, size)
        items_width = cursor.content_width - layout.text_indent - bullet_width - label_width - space_width

        wrapped = wrap_emphasized(token.items, size, items_width, backend)

        self._ensure_room(label)
        x = layout.text_left
        backend.draw_text(cursor.page, layout.bullet.strip(), x, cursor.y, FontStyle.NORMAL, size, color)
        x += bullet_width
        backend.draw_text(cursor.page, label, x, cursor.y, FontStyle.BOLD, size, color)

        if wrapped:
            draw_fragments(backend, cursor.page, wrapped[0], x + label_width + space_width, cursor.y, size, color)
            for fragments in wrapped[1:]:
                cursor.y -= layout.body_line_height
                self._ensure_room(fragments[0].text)
                draw_fragments(
                    backend, cursor.page, fragments, layout.text_left + bullet_width, cursor.y, size, color
                )

        cursor.y -= layout.body_line_height + layout.skills_gap

    def _draw_bullet(self, token: BulletItem) -> None:
        layout, cursor, backend = self.layout, self._cursor, self.backend
        size, color = layout.body_size, layout.text_color

        text = token.text
        if " at " in text and ":" in text:
            _log_debug(f"Job-like line drawn as bullet: {text!r}")
        if not BULLET_PREFIX_PATTERN.match(text):
            text = f"{BULLET} {text}"

        wrapped = wrap_indented(
            text, FontStyle.NORMAL, size, cursor.content_width - layout.text_indent, backend, emphasis=True
        )
        for index, line in enumerate(wrapped.lines):
            self._ensure_room(line)
            x = layout.text_left
            if index == 0 and wrapped.prefix:
                marker = wrapped.prefix.strip()
                backend.draw_text(cursor.page, marker, x, cursor.y, FontStyle.NORMAL, size, color)
                x += wrapped.indent_width
                line = line[len(wrapped.prefix) :]
            elif index > 0:
                x += wrapped.indent_width
            draw_emphasized(backend, cursor.page, line, x, cursor.y, size, color)
            cursor.y -= layout.body_line_height
