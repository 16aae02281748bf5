"""
Identity header extraction from raw resume text.

The first non-blank line is the headline and the second is the name. The next
few lines are matched against independent validators (email, phone, LinkedIn,
location) until the first section header or bullet line, which is where the
body begins. Extraction is best-effort and never raises.
"""

from dataclasses import dataclass
from typing import List, Tuple

from folio.contexts.intake.logger import log_fields_extracted
from folio.contexts.intake.patterns import (
    LOOKAHEAD_LINES,
    is_body_boundary,
    is_valid_email,
    is_valid_linkedin,
    is_valid_location,
    is_valid_phone,
)

# Validator order decides ties: a line claimed by an earlier validator is never
# offered to a later one.
CONTACT_VALIDATORS = (
    ("email", is_valid_email),
    ("phone", is_valid_phone),
    ("linkedin", is_valid_linkedin),
    ("location", is_valid_location),
)


@dataclass(frozen=True)
class IdentityFields:
    """
    Identity header of a resume plus the body that follows it.

    Attributes:
        headline: First non-blank line (e.g., "Senior Software Engineer")
        name: Second non-blank line
        email: Email address line, or ""
        phone: Phone number line, or ""
        location: Location line, or ""
        linkedin: LinkedIn profile URL line, or ""
        body_start: Offset of the first body line in the raw document
        body: Body lines from body_start on, joined with newlines
    """

    headline: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    body_start: int = 0
    body: str = ""

    def contact_items(self) -> List[Tuple[str, str]]:
        """(field name, value) pairs for the contact fields, in validator order."""
        return [(name, getattr(self, name)) for name, _ in CONTACT_VALIDATORS]

    def contact_line_parts(self) -> List[str]:
        """Non-empty contact values in display order: location, phone, email, LinkedIn."""
        parts = [self.location, self.phone, self.email, self.linkedin]
        return [part for part in parts if part]


def _non_blank_lines(lines: List[str]) -> List[Tuple[int, str]]:
    """(original offset, stripped text) for each non-blank line."""
    return [(index, line.strip()) for index, line in enumerate(lines) if line.strip()]


def _find_body_start_anywhere(lines: List[str]) -> int:
    """First section header or bullet line in the whole document, else past the window."""
    for index, line in enumerate(lines):
        if is_body_boundary(line):
            return index
    return min(LOOKAHEAD_LINES + 2, len(lines))


def extract_fields(raw_text: str) -> IdentityFields:
    """
    Parse the identity header off raw resume text.

    Args:
        raw_text: Full resume text, one logical line per row

    Returns:
        IdentityFields with any missing field left empty

    Example:
        >>> fields = extract_fields("Senior Engineer\\nJohn Doe\\njohn@x.com\\nSummary:\\nBuilt things")
        >>> fields.name, fields.email, fields.body
        ('John Doe', 'john@x.com', 'Summary:\\nBuilt things')
    """
    lines = raw_text.split("\n")
    non_blank = _non_blank_lines(lines)

    headline = non_blank[0][1] if len(non_blank) > 0 else ""
    name = non_blank[1][1] if len(non_blank) > 1 else ""

    found = {}
    body_start = None

    for index, line in non_blank[2 : LOOKAHEAD_LINES + 2]:
        if is_body_boundary(line):
            body_start = index
            break

        for field_name, validator in CONTACT_VALIDATORS:
            if field_name not in found and validator(line):
                found[field_name] = line
                break

    if body_start is None:
        body_start = _find_body_start_anywhere(lines)

    while body_start < len(lines) and not lines[body_start].strip():
        body_start += 1

    fields = IdentityFields(
        headline=headline,
        name=name,
        body_start=body_start,
        body="\n".join(lines[body_start:]),
        **found,
    )
    log_fields_extracted(fields)
    return fields
