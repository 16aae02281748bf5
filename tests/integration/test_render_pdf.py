"""
Integration tests for full renders.
Tests: resume text → header + paginated body → recorded pages → PDF on disk → read back.
"""

import pytest

from folio.contexts.intake.header_fields import IdentityFields
from folio.contexts.layout.types import FontStyle
from folio.contexts.rendering import renderer
from folio.contexts.rendering.backend import PageRecorder, Rect, ReportLabBackend
from folio.contexts.rendering.exceptions import MetricsProviderError, UnknownSkinError
from folio.contexts.rendering.renderer import render, render_preview, render_resume
from folio.contexts.rendering.samples import SAMPLE_RESUME_TEXT
from folio.contexts.rendering.skins import get_skin, list_skins
from folio.contexts.rendering.validator import validate_pdf
from folio.utils.pdf_processing import RenderedPDF, page_count

PAGE_WIDTH, PAGE_HEIGHT = 595, 842


@pytest.fixture
def logs_in_tmp(tmp_path, monkeypatch):
    """Keep render logs out of the working tree."""
    monkeypatch.setattr(renderer, "LOGS_PATH", tmp_path / "logs")
    monkeypatch.setattr(renderer, "RESULTS_PATH", tmp_path / "results")
    return tmp_path


def texts(page):
    return [op.text for op in page.text_ops]


class TestRender:
    """render() with a recording backend."""

    @pytest.mark.integration
    def test_header_on_first_page_only(self, backend, hook):
        skin = get_skin("classic")
        pages = render(SAMPLE_RESUME_TEXT, None, PAGE_WIDTH, PAGE_HEIGHT, hook, backend, skin=skin)

        name_ops = [op for page in pages for op in page.text_ops if op.text == "John Doe"]
        assert len(name_ops) == 1
        assert name_ops[0] in pages[0].text_ops
        assert name_ops[0].style == FontStyle.BOLD
        assert name_ops[0].size == skin.typography.name_size
        assert name_ops[0].x == skin.margins.left  # left-aligned header
        assert name_ops[0].y == PAGE_HEIGHT - skin.header.top

    @pytest.mark.integration
    def test_contact_line(self, backend, hook):
        pages = render(SAMPLE_RESUME_TEXT, None, PAGE_WIDTH, PAGE_HEIGHT, hook, backend, skin=get_skin("classic"))
        assert "San Francisco, CA  •  +1 (555) 123-4567  •  john.doe@example.com" in texts(pages[0])

    @pytest.mark.integration
    def test_centered_name(self, backend, hook):
        pages = render(SAMPLE_RESUME_TEXT, None, PAGE_WIDTH, PAGE_HEIGHT, hook, backend, skin=get_skin("framed"))

        op = next(op for op in pages[0].text_ops if op.text == "John Doe")
        width = backend.measure_width("John Doe", FontStyle.BOLD, op.size)
        assert op.x == pytest.approx((PAGE_WIDTH - width) / 2)

    @pytest.mark.integration
    def test_headline_hidden_by_skin(self, backend, hook):
        skin = get_skin("banner")
        pages = render(SAMPLE_RESUME_TEXT, None, PAGE_WIDTH, PAGE_HEIGHT, hook, backend, skin=skin)

        headline_ops = [
            op for op in pages[0].text_ops
            if op.text == "Senior Software Engineer" and op.size == skin.typography.headline_size
        ]
        assert headline_ops == []

    @pytest.mark.integration
    def test_body_starts_at_fixed_top(self, backend, hook):
        skin = get_skin("banner")
        pages = render(SAMPLE_RESUME_TEXT, None, PAGE_WIDTH, PAGE_HEIGHT, hook, backend, skin=skin)

        summary = next(op for op in pages[0].text_ops if op.text == "Summary")
        assert summary.y == pytest.approx(PAGE_HEIGHT - skin.header.body_top - skin.spacing.section_gap)

    @pytest.mark.integration
    def test_band_drawn_first(self, backend, hook):
        skin = get_skin("banner")
        pages = render(SAMPLE_RESUME_TEXT, None, PAGE_WIDTH, PAGE_HEIGHT, hook, backend, skin=skin)

        first_op = pages[0].ops[0]
        assert first_op.shape == Rect(0, PAGE_HEIGHT - 120, PAGE_WIDTH, 120)

    @pytest.mark.integration
    def test_decoration_hook_runs_on_every_page(self, backend, hook):
        long_text = SAMPLE_RESUME_TEXT + "\n" + "\n".join(SAMPLE_RESUME_TEXT.split("\n")[6:] * 2)
        pages = render(long_text, None, PAGE_WIDTH, PAGE_HEIGHT, hook, backend, skin=get_skin("classic"))

        assert len(pages) > 1
        assert [number for number, _, _ in hook.calls] == [page.number for page in pages]

    @pytest.mark.integration
    def test_explicit_identity(self, backend, hook):
        identity = IdentityFields(name="Jane Roe", email="jane@roe.dev", body="Summary:\nHello")
        pages = render("ignored", identity, PAGE_WIDTH, PAGE_HEIGHT, hook, backend)

        assert "Jane Roe" in texts(pages[0])
        assert "Hello" in texts(pages[0])

    @pytest.mark.integration
    @pytest.mark.parametrize("skin_key", [key for key, _ in list_skins()])
    def test_every_skin_keeps_text_above_bottom_margin(self, make_backend, hook, skin_key):
        skin = get_skin(skin_key)
        pages = render(SAMPLE_RESUME_TEXT * 2, None, PAGE_WIDTH, PAGE_HEIGHT, hook, make_backend(), skin=skin)

        for page in pages:
            assert all(op.y >= skin.margins.bottom for op in page.text_ops)


class TestRenderResume:
    """render_resume() writing real PDFs with reportlab."""

    @pytest.mark.integration
    def test_writes_readable_pdf(self, logs_in_tmp):
        output = logs_in_tmp / "out" / "resume.pdf"
        result = render_resume(SAMPLE_RESUME_TEXT, "accent_bar", output_path=output, console=False)

        assert result.success
        assert result.pdf_path == output.resolve()
        assert output.exists()
        assert page_count(output) == result.page_count
        assert (result.log_dir / "render.log").exists()

        text = RenderedPDF(output).text().replace(" ", "")
        assert "JohnDoe" in text
        assert "TechCorp" in text
        assert "Jan2020" in text

    @pytest.mark.integration
    def test_rendered_pdf_validates(self, logs_in_tmp):
        output = logs_in_tmp / "resume.pdf"
        skin = get_skin("framed")
        result = render_resume(SAMPLE_RESUME_TEXT * 2, "framed", output_path=output, console=False)

        validation = validate_pdf(result.pdf_path, skin.margins.bottom, page_height=PAGE_HEIGHT)
        assert validation.is_valid, validation.issues
        assert validation.page_count == result.page_count

    @pytest.mark.integration
    def test_default_output_location(self, logs_in_tmp):
        result = render_resume(SAMPLE_RESUME_TEXT, "classic", console=False)

        assert result.pdf_path.name == "john_doe_classic.pdf"
        assert result.pdf_path.parent.parent == (logs_in_tmp / "results").resolve()

    @pytest.mark.integration
    def test_preview(self, logs_in_tmp):
        result = render_preview("geometric", console=False)

        assert result.success
        assert result.pdf_path.name == "preview_geometric.pdf"

    @pytest.mark.integration
    def test_unknown_skin(self, logs_in_tmp):
        with pytest.raises(UnknownSkinError):
            render_resume(SAMPLE_RESUME_TEXT, "template2", console=False)

    @pytest.mark.integration
    def test_metrics_failure_writes_nothing(self, logs_in_tmp, monkeypatch):
        def broken_measure(self, text, style, size):
            raise MetricsProviderError("Could not measure text", font_name="Helvetica", text_sample=text)

        monkeypatch.setattr(ReportLabBackend, "measure_width", broken_measure)
        output = logs_in_tmp / "broken.pdf"

        with pytest.raises(MetricsProviderError):
            render_resume(SAMPLE_RESUME_TEXT, "classic", output_path=output, console=False)

        assert not output.exists()


class TestBackendAndValidator:
    """ReportLabBackend and validate_pdf() edge cases."""

    @pytest.mark.integration
    def test_unknown_font(self):
        with pytest.raises(MetricsProviderError) as exc_info:
            ReportLabBackend(fonts={FontStyle.BOLD: "No-Such-Font"})

        assert exc_info.value.font_name == "No-Such-Font"

    @pytest.mark.integration
    def test_empty_backend_refuses_to_save(self, tmp_path):
        with pytest.raises(ValueError):
            ReportLabBackend().save(tmp_path / "empty.pdf")
        assert not (tmp_path / "empty.pdf").exists()

    @pytest.mark.integration
    def test_validator_flags_text_below_margin(self, tmp_path):
        backend = ReportLabBackend()
        page = backend.create_page(PAGE_WIDTH, PAGE_HEIGHT)
        backend.draw_text(page, "fine", 60, 400, FontStyle.NORMAL, 10, (0, 0, 0))
        backend.draw_text(page, "too low", 60, 20, FontStyle.NORMAL, 10, (0, 0, 0))
        pdf_path = backend.save(tmp_path / "low.pdf")

        result = validate_pdf(pdf_path, bottom_margin=50, page_height=PAGE_HEIGHT)

        assert not result.is_valid
        assert result.page_count == 1
        assert len(result.issues) == 1
        assert "below bottom margin" in result.issues[0]

    @pytest.mark.integration
    def test_validator_page_count(self, tmp_path):
        backend = ReportLabBackend()
        for _ in range(2):
            page = backend.create_page(PAGE_WIDTH, PAGE_HEIGHT)
            backend.draw_text(page, "text", 60, 400, FontStyle.NORMAL, 10, (0, 0, 0))
        pdf_path = backend.save(tmp_path / "two.pdf")

        assert validate_pdf(pdf_path, 50, expected_pages=2).is_valid
        assert not validate_pdf(pdf_path, 50, expected_pages=1).is_valid

    @pytest.mark.integration
    def test_validator_missing_file(self, tmp_path):
        result = validate_pdf(tmp_path / "nope.pdf", 50)
        assert not result.is_valid
        assert result.page_count == 0

    @pytest.mark.integration
    def test_page_recorder_needs_measure_width(self):
        with pytest.raises(TypeError):
            PageRecorder()
