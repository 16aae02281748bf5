"""
Intake context logger.

Provides logging interface for the intake context with automatic [intake] prefix.
All intake modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_fields_extracted(fields) -> None:
    """
    Log which identity fields were found.

    Args:
        fields: IdentityFields from extract_fields()
    """
    found = [name for name, value in fields.contact_items() if value]
    missing = [name for name, value in fields.contact_items() if not value]
    _log_info(f"Extracted identity header for {fields.name or '<unnamed>'}")
    _log_debug(f"Headline: {fields.headline!r}, name: {fields.name!r}")
    _log_debug(f"  Found: {', '.join(found) or 'none'}")
    if missing:
        _log_debug(f"  Missing: {', '.join(missing)}")
    _log_debug(f"  Body starts at line {fields.body_start}")
