"""
Integration tests for body pagination.
Tests: body text → tokens → wrapped lines → positioned text on recorded pages.
"""

from dataclasses import replace

import pytest

from folio.contexts.layout.types import FontStyle
from folio.contexts.rendering.backend import Line
from folio.contexts.rendering.paginator import BodyPaginator
from folio.contexts.rendering.samples import SAMPLE_RESUME_TEXT
from folio.contexts.intake.header_fields import extract_fields

PAGE_WIDTH, PAGE_HEIGHT = 595, 842


def paginate(backend, layout, hook, body, y=700):
    page = backend.create_page(PAGE_WIDTH, PAGE_HEIGHT)
    paginator = BodyPaginator(backend, layout, PAGE_WIDTH, PAGE_HEIGHT, hook)
    return paginator.run(body, page, y)


def op_for(pages, text):
    """First recorded TextOp with exactly this text."""
    for page in pages:
        for op in page.text_ops:
            if op.text == text:
                return op
    raise AssertionError(f"{text!r} was not drawn")


class TestPlacement:
    """Where each kind of line lands on the page."""

    @pytest.mark.integration
    def test_section_heading(self, backend, layout, hook):
        result = paginate(backend, layout, hook, "Experience:")

        op = op_for(result.pages, "Experience")
        assert (op.x, op.y) == (40, 680)
        assert op.style == FontStyle.BOLD
        assert op.size == layout.section_size
        assert result.y == pytest.approx(680 - 18 - 8)

    @pytest.mark.integration
    def test_first_job_has_no_leading_gap(self, backend, layout, hook):
        result = paginate(backend, layout, hook, "Experience:\nA at B: 2020\nC at D: 2021")

        first, second = op_for(result.pages, "A"), op_for(result.pages, "C")
        assert first.y == pytest.approx(654)
        assert first.style == FontStyle.BOLD
        assert first.size == layout.title_size
        # two lines of 15 + 2, entry gap 10, job gap 16
        assert first.y - second.y == pytest.approx(60)

    @pytest.mark.integration
    def test_organization_line(self, backend, layout, hook):
        result = paginate(backend, layout, hook, "Engineer at Acme, Berlin: 01/2020 - 03/2021")

        op = op_for(result.pages, "Acme  •  Berlin  •  Jan 2020 – Mar 2021")
        assert op.x == 60
        assert op.color == layout.muted_color

    @pytest.mark.integration
    def test_skills_category(self, backend, layout, hook):
        result = paginate(backend, layout, hook, "Skills:\n• Languages: Python, Go")

        bullet = op_for(result.pages, "•")
        label = op_for(result.pages, "Languages:")
        items = op_for(result.pages, "Python, Go")
        assert (bullet.x, label.x, items.x) == (60, 70, 135)
        assert label.style == FontStyle.BOLD
        assert items.style == FontStyle.NORMAL
        assert bullet.y == label.y == items.y == pytest.approx(654)

    @pytest.mark.integration
    def test_skills_continuation_aligns_under_label(self, backend, layout, hook):
        items = ", ".join(["Python"] * 20)
        result = paginate(backend, layout, hook, f"Skills:\n• Languages: {items}")

        label = op_for(result.pages, "Languages:")
        continuation = [
            op for op in result.pages[0].text_ops if op.x == 70 and op.style == FontStyle.NORMAL
        ]
        assert continuation
        assert continuation[0].y == pytest.approx(label.y - 15)

    @pytest.mark.integration
    def test_bullet_marker_drawn_separately(self, backend, layout, hook):
        result = paginate(backend, layout, hook, "Experience:\nShipped things\n- dash item")

        texts = [(op.text, op.x) for op in result.pages[0].text_ops[1:]]
        assert texts == [("•", 60), ("Shipped things", 70), ("•", 60), ("dash item", 70)]

    @pytest.mark.integration
    def test_prose_honors_emphasis(self, backend, layout, hook):
        result = paginate(backend, layout, hook, "Summary:\n**Led** teams")

        bold, normal = op_for(result.pages, "Led"), op_for(result.pages, " teams")
        assert bold.style == FontStyle.BOLD
        assert (bold.x, normal.x) == (60, 78)

    @pytest.mark.integration
    def test_blank_lines_advance(self, backend, layout, hook):
        result = paginate(backend, layout, hook, "Experience:\n\n\nShipped")
        assert op_for(result.pages, "Shipped").y == pytest.approx(654 - 2 * 6)

    @pytest.mark.integration
    def test_underlined_heading(self, backend, layout, hook):
        layout = replace(layout, heading_style="underline")
        result = paginate(backend, layout, hook, "Experience:")

        (op,) = result.pages[0].shape_ops
        assert op.shape == Line((40, 676), (555, 676), thickness=1.0)


class TestPagination:
    """Page overflow and decoration replay."""

    @pytest.mark.integration
    def test_overflow_checked_before_each_wrapped_line(self, backend, layout, hook):
        """A bullet that doesn't fit continues on a new page mid-item."""
        body = " ".join(["word"] * 60)  # four wrapped lines of 19, 19, 19, 3 words
        result = paginate(backend, layout, hook, body, y=60)

        assert len(result.pages) == 2
        assert hook.calls == [(2, PAGE_WIDTH, PAGE_HEIGHT)]
        assert [op.y for op in result.pages[0].text_ops] == [60, 60]
        assert [op.y for op in result.pages[1].text_ops] == [770, 755, 740]
        assert result.y == pytest.approx(725)

    @pytest.mark.integration
    def test_heading_moves_to_next_page(self, backend, layout, hook):
        """The section gap alone can push a heading off the page."""
        result = paginate(backend, layout, hook, "Experience:\nShipped", y=65)

        assert len(result.pages) == 2
        assert result.pages[0].text_ops == []
        heading = op_for(result.pages, "Experience")
        assert heading in result.pages[1].text_ops
        assert (heading.x, heading.y) == (40, 770)
        assert op_for(result.pages, "Shipped").y == pytest.approx(770 - 18 - 8)

    @pytest.mark.integration
    def test_job_entry_splits_between_title_and_organization(self, backend, layout, hook):
        # heading at 80, title at 54, organization line would land at 37
        result = paginate(backend, layout, hook, "Experience:\nEngineer at Acme: 2020", y=100)

        assert len(result.pages) == 2
        assert hook.calls == [(2, PAGE_WIDTH, PAGE_HEIGHT)]
        title = op_for(result.pages, "Engineer")
        assert title in result.pages[0].text_ops
        assert title.y == pytest.approx(54)
        organization = op_for(result.pages, "Acme  •  2020")
        assert organization in result.pages[1].text_ops
        assert (organization.x, organization.y) == (60, 770)

    @pytest.mark.integration
    def test_skills_continuation_resumes_on_next_page(self, backend, layout, hook):
        """Continuation lines keep their indent under the label on the new page."""
        items = ", ".join(["Python"] * 40)  # four lines of ten items
        result = paginate(backend, layout, hook, f"Skills:\n• Languages: {items}", y=120)

        assert len(result.pages) == 2
        label = op_for(result.pages, "Languages:")
        assert label in result.pages[0].text_ops
        assert label.y == pytest.approx(74)
        assert [(op.x, op.y) for op in result.pages[1].text_ops] == [(70, 770), (70, 755)]
        assert all(op.style == FontStyle.NORMAL for op in result.pages[1].text_ops)

    @pytest.mark.integration
    def test_trailing_blank_lines_add_no_page(self, backend, layout, hook):
        result = paginate(backend, layout, hook, "Experience:\nshipped\n\n\n", y=120)

        assert len(result.pages) == 1
        assert hook.calls == []
        assert result.y == pytest.approx(59 - 3 * 6)

    @pytest.mark.integration
    def test_blank_gap_past_margin_breaks_before_next_line(self, backend, layout, hook):
        result = paginate(backend, layout, hook, "Experience:\nshipped\n\n\nmore", y=120)

        assert len(result.pages) == 2
        assert [op.text for op in result.pages[1].text_ops] == ["•", "more"]
        assert op_for(result.pages, "more").y == 770

    @pytest.mark.integration
    def test_no_text_below_bottom_margin(self, backend, layout, hook):
        body = "\n".join([extract_fields(SAMPLE_RESUME_TEXT).body] * 3)
        result = paginate(backend, layout, hook, body)

        assert len(result.pages) > 1
        assert result.pages == backend.pages
        assert [number for number, _, _ in hook.calls] == list(range(2, len(result.pages) + 1))
        for page in result.pages:
            assert all(op.y >= layout.bottom_margin for op in page.text_ops)

    @pytest.mark.integration
    def test_new_pages_start_at_content_top(self, backend, layout, hook):
        body = "\n".join([extract_fields(SAMPLE_RESUME_TEXT).body] * 3)
        result = paginate(backend, layout, hook, body)

        for page in result.pages[1:]:
            assert all(op.y <= PAGE_HEIGHT - layout.content_top for op in page.text_ops)

    @pytest.mark.integration
    def test_same_input_same_output(self, make_backend, layout, hook):
        body = extract_fields(SAMPLE_RESUME_TEXT).body
        first = paginate(make_backend(), layout, hook, body)
        second = paginate(make_backend(), layout, hook, body)

        assert [page.ops for page in first.pages] == [page.ops for page in second.pages]
        assert first.y == second.y
