"""
Intake Context

Responsibilities:
- Reads the identity header (headline, name, contact lines) off raw resume text
- Decides where free-form body content begins

Owns: Identity field extraction
Never: Measures, wraps or draws text
"""

from folio.contexts.intake.header_fields import IdentityFields, extract_fields

__all__ = ["IdentityFields", "extract_fields"]
