"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, skin_key: str, console: bool = True) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and the skin being rendered.

    Args:
        log_dir: Directory for this rendering session
        skin_key: Skin used for the render
        console: Also echo INFO and above to stdout

    Returns:
        Path to log file

    Example:
        from folio.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir, "accent_bar")
        _log_info("Starting render...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Skin": skin_key},
        console=console,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(skin_key: str, page_size: tuple, num_body_lines: int) -> None:
    """Log start of a render with context."""
    _log_info(f"Starting render with skin '{skin_key}'")
    _log_debug(f"  Page size: {page_size[0]:g} x {page_size[1]:g} pt")
    _log_debug(f"  Body lines: {num_body_lines}")


def log_page_break(page_number: int, line: str) -> None:
    """Log a page overflow and the line that caused it."""
    sample = line[:50] + "..." if len(line) > 50 else line
    _log_debug(f"Page {page_number} started at: {sample!r}")


def log_render_result(result, elapsed_time: float) -> None:
    """
    Log render result.

    Args:
        result: RenderResult from render_resume()
        elapsed_time: Time taken to render
    """
    if result.success:
        _log_success(f"Render succeeded: {result.page_count} page(s) ({elapsed_time:.2f}s)")
        if result.pdf_path:
            _log_info(f"PDF saved to: {result.pdf_path}")
    else:
        _log_error(f"Render failed ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors, 1):
            _log_error(f"  Error {i}: {err}")


def log_validation_result(result) -> None:
    """
    Log validation result.

    Args:
        result: ValidationResult from validate_pdf()
    """
    if result.is_valid:
        _log_success(f"Validation passed: {result.page_count} page(s)")
    else:
        _log_warning(f"Validation failed with {len(result.issues)} issue(s)")
        for issue in result.issues:
            _log_warning(f"  {issue}")
