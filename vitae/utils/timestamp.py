"""Timestamp and calendar date formatting utilities."""

import re
from datetime import date, datetime
from typing import Optional, Union

# Fixed English abbreviations so output does not depend on the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# JSON Resume dates: "2020", "2020-03" or "2020-03-01"
PARTIAL_ISO_DATE = re.compile(r"^(?P<year>\d{4})(?:-(?P<month>\d{2})(?:-(?P<day>\d{2}))?)?$")


def now() -> str:
    """Current local time as a filesystem-friendly stamp (e.g. 20261018_142501)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def parse_partial_date(value: Union[str, date]) -> str:
    """
    Validate a partial ISO date and return it in canonical string form.

    Accepts YYYY, YYYY-MM and YYYY-MM-DD. Date objects (which some YAML
    loaders produce for unquoted dates) are converted to YYYY-MM-DD.

    Args:
        value: Date string or date object

    Returns:
        The validated date string

    Raises:
        ValueError: If the value is not a valid partial ISO date

    Examples:
        >>> parse_partial_date("2020-03-01")
        '2020-03-01'
        >>> parse_partial_date("2020-13")
        Traceback (most recent call last):
        ...
        ValueError: Invalid month in date: '2020-13'
    """
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, int) and not isinstance(value, bool):
        # Unquoted year in YAML
        value = str(value)
    if not isinstance(value, str):
        raise ValueError(f"Expected a date string, got {type(value).__name__}: {value!r}")

    text = value.strip()
    match = PARTIAL_ISO_DATE.match(text)
    if not match:
        raise ValueError(f"Not an ISO date (YYYY, YYYY-MM or YYYY-MM-DD): {value!r}")

    year = int(match.group("year"))
    month = match.group("month")
    day = match.group("day")

    if month is not None and not 1 <= int(month) <= 12:
        raise ValueError(f"Invalid month in date: {value!r}")
    if day is not None:
        # Let the calendar reject impossible days (e.g. 2021-02-30)
        date(year, int(month), int(day))

    return text


def format_month_year(value: str) -> str:
    """
    Format a partial ISO date as "{Mon} {YYYY}", or just "YYYY" when no month is given.

    Examples:
        >>> format_month_year("2020-03-01")
        'Mar 2020'
        >>> format_month_year("2019")
        '2019'
    """
    match = PARTIAL_ISO_DATE.match(value.strip())
    if not match:
        raise ValueError(f"Not an ISO date: {value!r}")
    year = match.group("year")
    month = match.group("month")
    if month is None:
        return year
    return f"{MONTH_ABBREVIATIONS[int(month) - 1]} {year}"


def format_year(value: Optional[str]) -> str:
    """Four-digit year of a partial ISO date, or an empty string when absent."""
    if not value:
        return ""
    return value.strip()[:4]
