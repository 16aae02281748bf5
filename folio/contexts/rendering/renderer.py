"""
Resume rendering entry points.

render() is the pure layout entry: it draws the identity header and the body
onto backend pages and returns them, without touching the filesystem.
render_resume() wraps it with skin lookup, logging and organized output.
"""

import os
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from folio.contexts.intake.header_fields import IdentityFields, extract_fields
from folio.contexts.layout.metrics import LayoutMetrics
from folio.contexts.rendering.backend import A4_SIZE, MetricsProvider, Page, ReportLabBackend
from folio.contexts.rendering.chrome import draw_header_band, draw_identity_header
from folio.contexts.rendering.exceptions import MetricsProviderError
from folio.contexts.rendering.logger import (
    _log_debug,
    _log_error,
    log_render_result,
    log_render_start,
    setup_rendering_logger,
)
from folio.contexts.rendering.paginator import BodyPaginator
from folio.contexts.rendering.samples import SAMPLE_RESUME_TEXT
from folio.contexts.rendering.skins import (
    DEFAULT_SKIN,
    DecorationHook,
    Skin,
    get_skin,
    make_decoration_hook,
)
from folio.utils.timestamp import now, today

load_dotenv()

LOGS_PATH = Path(os.getenv("FOLIO_LOGS_PATH", "outs/logs"))
RESULTS_PATH = Path(os.getenv("FOLIO_RESULTS_PATH", "outs/results"))


@dataclass
class RenderResult:
    """
    Result of rendering a resume to PDF.

    Attributes:
        success: Whether the PDF was written
        skin_key: Skin used
        pdf_path: Path to the written PDF (None if failed)
        page_count: Number of pages rendered
        fields: Identity header extracted from the input
        errors: Reasons for failure
        log_dir: Directory containing the render log
    """

    success: bool
    skin_key: str
    pdf_path: Optional[Path] = None
    page_count: int = 0
    fields: Optional[IdentityFields] = None
    errors: List[str] = field(default_factory=list)
    log_dir: Optional[Path] = None


def render(
    raw_text: str,
    identity: Optional[IdentityFields],
    page_width: float,
    page_height: float,
    decoration_hook: DecorationHook,
    backend: MetricsProvider,
    skin: Optional[Skin] = None,
    layout: Optional[LayoutMetrics] = None,
) -> List[Page]:
    """
    Lay out a resume onto backend pages.

    Creates the first page, decorates it, draws the identity header and then
    paginates the body. Nothing is serialized here.

    Args:
        raw_text: Full resume text
        identity: Pre-extracted identity header (default: extract_fields(raw_text))
        page_width: Width of every page in points
        page_height: Height of every page in points
        decoration_hook: Called once for every page created, including the first
        backend: Measures text and records pages
        skin: Visual skin for the header (default: DEFAULT_SKIN)
        layout: Body layout parameters (default: skin.layout_metrics())

    Returns:
        Pages created by this render, in order

    Raises:
        MetricsProviderError: If the backend can't measure text
    """
    skin = skin or get_skin(DEFAULT_SKIN)
    layout = layout or skin.layout_metrics()
    identity = identity if identity is not None else extract_fields(raw_text)

    page = backend.create_page(page_width, page_height)
    draw_header_band(backend, page, skin, page_width, page_height)
    decoration_hook(page, page_width, page_height)
    y = draw_identity_header(backend, page, identity, skin, page_width, page_height)

    paginator = BodyPaginator(backend, layout, page_width, page_height, decoration_hook)
    result = paginator.run(identity.body, page, y)
    return result.pages


def _output_stem(fields: IdentityFields) -> str:
    """File-name friendly version of the candidate's name."""
    stem = re.sub(r"[^A-Za-z0-9]+", "_", fields.name).strip("_").lower()
    return stem or "resume"


def render_resume(
    raw_text: str,
    skin_key: str = DEFAULT_SKIN,
    output_path: Optional[Path] = None,
    page_size: Tuple[float, float] = A4_SIZE,
    console: bool = True,
) -> RenderResult:
    """
    Render resume text to a PDF with logging and organized output.

    On success:
        - Writes the PDF to output_path, or outs/results/YYYY-MM-DD/<name>_<skin>.pdf
        - Leaves a render.log in a timestamped log directory

    Output is atomic: pages are recorded in memory and the file is written only
    after the whole layout succeeded.

    Args:
        raw_text: Full resume text
        skin_key: Skin to render with
        output_path: Target PDF path (default: dated results directory)
        page_size: (width, height) in points (default: A4)
        console: Echo INFO logs to stdout

    Returns:
        RenderResult with success status and output location

    Raises:
        UnknownSkinError: If skin_key isn't defined
        MetricsProviderError: If the backend can't measure text
    """
    skin = get_skin(skin_key)

    log_dir = LOGS_PATH / f"render_{now()}"
    log_dir.mkdir(parents=True, exist_ok=True)
    setup_rendering_logger(log_dir, skin_key, console=console)

    page_width, page_height = page_size
    fields = extract_fields(raw_text)
    log_render_start(skin_key, page_size, len(fields.body.split("\n")))

    start_time = time.time()
    backend = ReportLabBackend()
    try:
        pages = render(
            raw_text,
            fields,
            page_width,
            page_height,
            make_decoration_hook(skin, backend),
            backend,
            skin=skin,
        )
    except MetricsProviderError as e:
        _log_error(str(e))
        raise

    if output_path is None:
        output_path = RESULTS_PATH / today() / f"{_output_stem(fields)}_{skin_key}.pdf"

    title = f"{fields.name} - Resume" if fields.name else "Resume"
    try:
        pdf_path = backend.save(Path(output_path), title=title)
        result = RenderResult(
            success=True,
            skin_key=skin_key,
            pdf_path=pdf_path.resolve(),
            page_count=len(pages),
            fields=fields,
            log_dir=log_dir,
        )
    except OSError as e:
        result = RenderResult(
            success=False,
            skin_key=skin_key,
            page_count=len(pages),
            fields=fields,
            errors=[f"Could not write PDF: {e}"],
            log_dir=log_dir,
        )

    log_render_result(result, time.time() - start_time)
    _log_debug(f"Log directory: {log_dir}")
    return result


def render_preview(
    skin_key: str = DEFAULT_SKIN, output_path: Optional[Path] = None, console: bool = True
) -> RenderResult:
    """
    Render the bundled sample resume with a skin.

    Args:
        skin_key: Skin to preview
        output_path: Target PDF path (default: dated results directory, preview_<skin>.pdf)
        console: Echo INFO logs to stdout

    Returns:
        RenderResult, as render_resume()
    """
    if output_path is None:
        output_path = RESULTS_PATH / today() / f"preview_{skin_key}.pdf"
    return render_resume(SAMPLE_RESUME_TEXT, skin_key, output_path=output_path, console=console)
