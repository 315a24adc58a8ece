"""
Display formatting for dates and date ranges.

Registered as Jinja2 filters by the TemplateRegistry.
"""

from typing import Optional

from vitae.utils.timestamp import format_month_year, format_year

PRESENT = "Present"
RANGE_SEPARATOR = " – "


def format_date(value: Optional[str]) -> str:
    """
    Format a partial ISO date for display, "Present" when absent.

    Examples:
        >>> format_date("2020-03-01")
        'Mar 2020'
        >>> format_date(None)
        'Present'
    """
    if not value:
        return PRESENT
    return format_month_year(value)


def format_date_range(start: Optional[str], end: Optional[str]) -> str:
    """
    Format a start/end pair as "Mar 2020 – Present".

    An absent start renders nothing; an absent end renders "Present".

    Examples:
        >>> format_date_range("2020-03-01", None)
        'Mar 2020 – Present'
        >>> format_date_range(None, "2015-05")
        'May 2015'
    """
    parts = []
    if start:
        parts.append(format_month_year(start))
    parts.append(format_date(end))
    return RANGE_SEPARATOR.join(parts)


FILTERS = {
    "date": format_date,
    "date_range": format_date_range,
    "year": format_year,
}
