"""
FOLIO - Flowing Output Layout for Itemized Overviews

Turns a flat block of resume text into a paginated PDF layout.

Architecture:
- Intake Context: Identity header extraction from raw resume text
- Layout Context: Line classification, word wrapping and inline emphasis
- Rendering Context: Pagination, page decoration (skins) and PDF output
"""

__version__ = "0.1.0"
