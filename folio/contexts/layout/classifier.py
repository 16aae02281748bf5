"""
Body line classification.

Each trimmed body line maps to exactly one token. The only state carried from
line to line is the active section name, which decides whether a line is prose
(summary, education) or a skills category (skills sections).

Priority order:
    1. Blank line
    2. Section header (trailing colon, or a known section name on its own)
    3. Job entry ("<title> at <organization>: <period>")
    4. Prose, when inside a prose section
    5. Skills category, per the configured SkillsPolicy
    6. Bullet item (everything else)

Lines that look like one shape but fail its full pattern fall through to the
next rule, so classification never fails.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from folio.contexts.layout.tokens import (
    Blank,
    BulletItem,
    JobEntry,
    PlainText,
    SectionHeader,
    SkillsCategory,
    Token,
)

DEFAULT_SECTION_NAMES = (
    "summary",
    "education",
    "experience",
    "technical skills",
    "skills",
    "professional experience",
)
DEFAULT_PROSE_SECTIONS = ("summary", "education")
DEFAULT_SKILLS_SECTIONS = ("technical skills", "skills")

JOB_ENTRY_PATTERN = re.compile(r"^(.+?) at (.+?):\s*(.+)$")
LEADING_BULLET_PATTERN = re.compile(r"^[\-·•]\s*")
ROUND_BULLETS = ("•", "·")


class SkillsPolicy(str, Enum):
    """
    How skills-category lines are recognized.

    BULLETED: the line starts with a round bullet and has a colon early on
        (within bulleted_colon_limit characters) that isn't part of a
        "<title> at <organization>" phrase.
    SECTION: BULLETED, or the active section is a skills section and the line
        has a colon within section_colon_limit characters.
    """

    BULLETED = "bulleted"
    SECTION = "section"


@dataclass(frozen=True)
class ClassifierConfig:
    """
    Vocabulary and thresholds for body classification.

    Swap section_names (and the prose/skills subsets) to support other
    languages without touching the classifier.
    """

    section_names: Tuple[str, ...] = DEFAULT_SECTION_NAMES
    prose_sections: Tuple[str, ...] = DEFAULT_PROSE_SECTIONS
    skills_sections: Tuple[str, ...] = DEFAULT_SKILLS_SECTIONS
    skills_policy: SkillsPolicy = SkillsPolicy.SECTION
    bulleted_colon_limit: int = 30
    section_colon_limit: int = 50

    def is_section_name(self, line: str) -> bool:
        return line.strip().lower() in self.section_names


def is_section_header(line: str, config: ClassifierConfig) -> bool:
    return line.endswith(":") or config.is_section_name(line)


def section_title(line: str) -> str:
    """Heading text with any trailing colon removed."""
    return line[:-1].strip() if line.endswith(":") else line.strip()


def parse_job_entry(line: str) -> Optional[JobEntry]:
    """
    Parse "<title> at <organization>[, <sub_location>]: <period>".

    The organization part is split on its last comma into organization and
    sub-location.

    Returns:
        JobEntry, or None when the line doesn't match
    """
    match = JOB_ENTRY_PATTERN.match(line)
    if not match:
        return None

    title, organization_part, period = (group.strip() for group in match.groups())
    organization, comma, sub_location = organization_part.rpartition(",")
    if comma:
        organization, sub_location = organization.strip(), sub_location.strip()
    else:
        organization, sub_location = organization_part, ""

    return JobEntry(
        title=title,
        organization=organization,
        sub_location=sub_location or None,
        period=period,
    )


def parse_skills_category(
    line: str, current_section: str, config: ClassifierConfig
) -> Optional[SkillsCategory]:
    """
    Split a skills line at its first colon into a label and an items list.

    A leading bullet marker ("•", "·" or "-") is not part of the label.

    Returns:
        SkillsCategory, or None when the line isn't one under the configured policy
    """
    without_bullet = LEADING_BULLET_PATTERN.sub("", line, count=1)
    colon_index = without_bullet.find(":")
    if colon_index == -1:
        return None

    is_bulleted = (
        line.startswith(ROUND_BULLETS)
        and colon_index < config.bulleted_colon_limit
        and " at " not in without_bullet[:colon_index]
    )
    in_skills_section = (
        config.skills_policy == SkillsPolicy.SECTION
        and current_section in config.skills_sections
        and colon_index < config.section_colon_limit
    )
    if not (is_bulleted or in_skills_section):
        return None

    return SkillsCategory(
        label=without_bullet[:colon_index].strip(),
        items=without_bullet[colon_index + 1 :].strip(),
    )


def classify_line(line: str, current_section: str, config: ClassifierConfig) -> Token:
    """
    Classify one body line.

    Pure function of the line and the active (lowercased) section name.

    Args:
        line: Raw body line (surrounding whitespace is ignored)
        current_section: Lowercased title of the last section header, or ""
        config: Section vocabulary and skills policy

    Returns:
        The token for this line
    """
    line = line.strip()
    if not line:
        return Blank()

    if is_section_header(line, config):
        return SectionHeader(title=section_title(line))

    job_entry = parse_job_entry(line)
    if job_entry is not None:
        return job_entry

    if current_section in config.prose_sections:
        return PlainText(text=LEADING_BULLET_PATTERN.sub("", line, count=1).strip())

    skills = parse_skills_category(line, current_section, config)
    if skills is not None:
        return skills

    return BulletItem(text=line)


def iter_tokens(body: str, config: Optional[ClassifierConfig] = None) -> Iterator[Token]:
    """
    Classify every line of a body, carrying the active section across lines.

    Args:
        body: Body text (see IdentityFields.body)
        config: Classifier configuration (default: ClassifierConfig())

    Yields:
        One token per line, in order
    """
    config = config or ClassifierConfig()
    current_section = ""

    for line in body.split("\n"):
        token = classify_line(line, current_section, config)
        if isinstance(token, SectionHeader):
            current_section = token.title.lower()
        yield token


def classify_body(body: str, config: Optional[ClassifierConfig] = None) -> List[Token]:
    """List form of iter_tokens()."""
    return list(iter_tokens(body, config))
