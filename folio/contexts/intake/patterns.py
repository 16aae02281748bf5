"""
Regex patterns and constants for identity header extraction.

Pattern classes follow the frozen-dataclass convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# Non-blank lines inspected for contact fields after headline and name
LOOKAHEAD_LINES = 15

# Markers that open a body bullet line
BULLET_MARKERS = ("•", "·", "-")

# Phone numbers need at least this many digits once separators are gone
MIN_PHONE_DIGITS = 10


@dataclass(frozen=True)
class ContactPatterns:
    """
    Regex patterns for contact lines in a resume header.

    Supports:
    - Plain email addresses (john@x.com)
    - Phone numbers in common formats (+1 415 555 0100, (415) 555-0100, 415.555.0100)
    - LinkedIn profile URLs with or without scheme / www
    - Free-form locations (San Francisco, CA / Berlin, Germany)
    """

    EMAIL: re.Pattern = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

    # Shape check only; digit count is checked separately
    PHONE: re.Pattern = re.compile(r"^\+?[\d\s\-().]{10,}$")
    PHONE_SEPARATORS: re.Pattern = re.compile(r"[\s\-().]")

    LINKEDIN: re.Pattern = re.compile(r"^(https?://)?(www\.)?linkedin\.com/.+", re.IGNORECASE)

    # Letters, whitespace, commas and hyphens only
    LOCATION: re.Pattern = re.compile(r"^[a-zA-Z\s,\-]+$")


def is_valid_email(text: str) -> bool:
    return bool(ContactPatterns.EMAIL.match(text.strip()))


def is_valid_phone(text: str) -> bool:
    """Phone-shaped line with at least MIN_PHONE_DIGITS digits."""
    text = text.strip()
    if not ContactPatterns.PHONE.match(text):
        return False
    cleaned = ContactPatterns.PHONE_SEPARATORS.sub("", text)
    return sum(c.isdigit() for c in cleaned) >= MIN_PHONE_DIGITS


def is_valid_linkedin(text: str) -> bool:
    return bool(ContactPatterns.LINKEDIN.match(text.strip()))


def is_valid_location(text: str) -> bool:
    """Location-looking line that is not an email, phone or LinkedIn URL."""
    if is_valid_email(text) or is_valid_phone(text) or is_valid_linkedin(text):
        return False
    text = text.strip()
    return bool(ContactPatterns.LOCATION.match(text)) and len(text) > 2


def is_body_boundary(line: str) -> bool:
    """Section header (trailing colon) or bullet line: body content starts here."""
    line = line.strip()
    return bool(line) and (line.endswith(":") or line.startswith(BULLET_MARKERS))
