"""
Immutable layout parameters for one body layout run.
"""

from dataclasses import dataclass, field

from folio.contexts.layout.classifier import ClassifierConfig
from folio.contexts.layout.types import Color


@dataclass(frozen=True)
class LayoutMetrics:
    """
    Everything the paginator needs to place body lines.

    Sizes and gaps are in points. Colors are RGB triples in 0..1.

    Attributes:
        left_margin: Left edge of the content area
        right_margin: Space kept free on the right
        bottom_margin: Lowest allowed text baseline
        content_top: Body restarts this far below the top edge on new pages
        body_size: Body font size
        title_size: Job title font size
        section_size: Section heading font size
        body_line_height: Advance per body line
        section_line_height: Advance per heading line
        blank_gap: Advance for a blank line
        section_gap: Space above a section heading
        heading_gap: Extra space under each heading line
        job_gap: Space between consecutive job entries (not before the first)
        title_gap: Extra space under each job title line
        entry_gap: Space under a job entry's organization line
        skills_gap: Extra space under a skills category
        text_indent: Body text offset from left_margin
        heading_inset: Width kept free to the right of headings when wrapping
        bullet: Bullet prefix prepended to unmarked bullet lines
        text_color: Body text
        muted_color: Organization lines
        heading_color: Section headings
        accent_color: Heading decorations
        heading_style: Heading decoration (see skins.yaml)
        classifier: Section vocabulary and skills policy
    """

    left_margin: float = 40.0
    right_margin: float = 40.0
    bottom_margin: float = 50.0
    content_top: float = 72.0
    body_size: float = 9.5
    title_size: float = 10.5
    section_size: float = 13.0
    body_line_height: float = 14.25
    section_line_height: float = 18.2
    blank_gap: float = 6.0
    section_gap: float = 20.0
    heading_gap: float = 8.0
    job_gap: float = 16.0
    title_gap: float = 2.0
    entry_gap: float = 10.0
    skills_gap: float = 2.0
    text_indent: float = 20.0
    heading_inset: float = 50.0
    bullet: str = "• "
    text_color: Color = (0.0, 0.0, 0.0)
    muted_color: Color = (0.4, 0.4, 0.4)
    heading_color: Color = (0.0, 0.0, 0.0)
    accent_color: Color = (0.0, 0.0, 0.0)
    heading_style: str = "plain"
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)

    def content_width(self, page_width: float) -> float:
        return page_width - self.left_margin - self.right_margin

    @property
    def text_left(self) -> float:
        return self.left_margin + self.text_indent
