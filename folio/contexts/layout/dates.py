"""Period formatting for job entries: "01/2020 – Present" -> "Jan 2020 – Present"."""

import re

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

MONTH_YEAR_PATTERN = re.compile(r"^(\d{2})/(\d{4})$")
RANGE_SEPARATOR_PATTERN = re.compile(r"[–—-]")
RANGE_JOINER = " – "


def _format_month_year(part: str) -> str:
    """Rewrite a single MM/YYYY token; anything else (or month 00/13+) is returned as-is."""
    match = MONTH_YEAR_PATTERN.match(part)
    if not match:
        return part
    month = int(match.group(1))
    if not 1 <= month <= 12:
        return part
    return f"{MONTH_ABBREVIATIONS[month - 1]} {match.group(2)}"


def format_date(period: str) -> str:
    """
    Rewrite MM/YYYY tokens in a period string using month abbreviations.

    Ranges may be split by an en dash, em dash or hyphen and are re-joined
    with an en dash. Non-matching parts such as "Present" pass through unchanged.

    Examples:
        >>> format_date("01/2020 – Present")
        'Jan 2020 – Present'
        >>> format_date("01/2020-12/2022")
        'Jan 2020 – Dec 2022'
        >>> format_date("2013 – 2017")
        '2013 – 2017'
    """
    if RANGE_SEPARATOR_PATTERN.search(period):
        parts = [part.strip() for part in RANGE_SEPARATOR_PATTERN.split(period)]
        return RANGE_JOINER.join(_format_month_year(part) for part in parts)
    return _format_month_year(period)
