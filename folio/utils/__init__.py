"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logger setup
- Timestamps for log and result directories
- PDF inspection
"""

from folio.utils.timestamp import now, today

__all__ = ["now", "today"]
