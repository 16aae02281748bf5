"""
Token types produced by the body classifier, one per body line.

Each token is a frozen dataclass with a class-level `kind` tag so callers can
dispatch on either isinstance() or the tag.
"""

from dataclasses import dataclass
from typing import ClassVar, List, Optional, Union


@dataclass(frozen=True)
class SectionHeader:
    """Section heading, e.g. "Professional Experience:"."""

    title: str
    kind: ClassVar[str] = "section_header"


@dataclass(frozen=True)
class JobEntry:
    """
    One-line job entry: "<title> at <organization>[, <sub_location>]: <period>".

    Attributes:
        title: Role title
        organization: Company or institution name
        sub_location: Text after the last comma of the organization part, or None
        period: Raw period string (see format_date)
    """

    title: str
    organization: str
    sub_location: Optional[str]
    period: str
    kind: ClassVar[str] = "job_entry"


@dataclass(frozen=True)
class SkillsCategory:
    """Labeled skills list, e.g. "• Languages: Python, Go"."""

    label: str
    items: str
    kind: ClassVar[str] = "skills_category"

    @property
    def item_list(self) -> List[str]:
        """Items split on commas, blanks removed."""
        return [item.strip() for item in self.items.split(",") if item.strip()]


@dataclass(frozen=True)
class BulletItem:
    """Bullet point; text may or may not already start with a marker."""

    text: str
    kind: ClassVar[str] = "bullet_item"


@dataclass(frozen=True)
class PlainText:
    """Prose line (summary and education sections), drawn without a bullet."""

    text: str
    kind: ClassVar[str] = "plain_text"


@dataclass(frozen=True)
class Blank:
    """Empty line; only advances the cursor."""

    kind: ClassVar[str] = "blank"


Token = Union[SectionHeader, JobEntry, SkillsCategory, BulletItem, PlainText, Blank]
