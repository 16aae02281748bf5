"""
Post-render validation of written PDFs.

Re-reads a rendered resume and checks what the paginator promises: the file is
a readable PDF, every page has the expected height, and no text baseline sits
below the bottom margin.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from folio.contexts.rendering.logger import log_validation_result
from folio.utils.pdf_processing import RenderedPDF, page_count

# Baselines read back from a PDF are rounded by the writer
BASELINE_TOLERANCE = 0.5


@dataclass
class ValidationResult:
    """
    Result of validating a rendered PDF.

    Attributes:
        is_valid: Whether all checks passed
        pdf_path: Validated file
        page_count: Number of pages (0 if unreadable)
        issues: Human-readable problems found
    """

    is_valid: bool
    pdf_path: Path
    page_count: int = 0
    issues: List[str] = field(default_factory=list)


def _sample(text: str, limit: int = 40) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


def validate_pdf(
    pdf_path: Path,
    bottom_margin: float,
    page_height: Optional[float] = None,
    expected_pages: Optional[int] = None,
) -> ValidationResult:
    """
    Check a rendered PDF against its layout limits.

    Args:
        pdf_path: PDF to check
        bottom_margin: Lowest allowed text baseline in points
        page_height: Expected height of every page (None to skip the check)
        expected_pages: Expected page count (None to skip the check)

    Returns:
        ValidationResult listing every issue found
    """
    pdf_path = Path(pdf_path)
    if not pdf_path.exists():
        result = ValidationResult(is_valid=False, pdf_path=pdf_path, issues=[f"PDF not found: {pdf_path}"])
        log_validation_result(result)
        return result

    num_pages = page_count(pdf_path)
    if num_pages is None:
        result = ValidationResult(is_valid=False, pdf_path=pdf_path, issues=[f"Unreadable PDF: {pdf_path}"])
        log_validation_result(result)
        return result

    issues = []
    if expected_pages is not None and num_pages != expected_pages:
        issues.append(f"Expected {expected_pages} page(s), found {num_pages}")

    pdf = RenderedPDF(pdf_path)
    for index in range(pdf.num_pages):
        page_number = index + 1
        height = pdf.page_height(index)
        if page_height is not None and abs(height - page_height) > BASELINE_TOLERANCE:
            issues.append(f"Page {page_number}: height {height:g}pt, expected {page_height:g}pt")

        for line in pdf.lines(index):
            if line.baseline < bottom_margin - BASELINE_TOLERANCE:
                issues.append(
                    f"Page {page_number}: text below bottom margin at y={line.baseline:.1f}: "
                    f"{_sample(line.text)!r}"
                )

    result = ValidationResult(
        is_valid=not issues, pdf_path=pdf_path, page_count=num_pages, issues=issues
    )
    log_validation_result(result)
    return result
