"""Unit tests for partial ISO date validation and display formatting."""

from datetime import date

import pytest

from vitae.contexts.templating.formatting import format_date, format_date_range
from vitae.utils.timestamp import format_month_year, format_year, parse_partial_date


@pytest.mark.unit
@pytest.mark.parametrize("value", ["2020", "2020-03", "2020-03-01", "2024-02-29"])
def test_parse_partial_date_accepts(value):
    """Test that year, year-month and full dates are accepted unchanged."""
    assert parse_partial_date(value) == value


@pytest.mark.unit
def test_parse_partial_date_from_date_object():
    """Test conversion of date objects produced by some YAML loaders."""
    assert parse_partial_date(date(2020, 3, 1)) == "2020-03-01"


@pytest.mark.unit
def test_parse_partial_date_from_int_year():
    """Test that an unquoted YAML year is accepted."""
    assert parse_partial_date(2019) == "2019"


@pytest.mark.unit
@pytest.mark.parametrize("value", ["2020-00", "2020-13-01", "2023-02-29", "2020/03/01", "", True])
def test_parse_partial_date_rejects(value):
    """Test that malformed or impossible dates raise ValueError."""
    with pytest.raises(ValueError):
        parse_partial_date(value)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        ("2020-03-01", "Mar 2020"),
        ("2020-03", "Mar 2020"),
        ("1999-12-31", "Dec 1999"),
        ("2021-09-15", "Sep 2021"),
        ("2019", "2019"),
    ],
)
def test_format_month_year(value, expected):
    """Test abbreviated-month / four-digit-year formatting."""
    assert format_month_year(value) == expected


@pytest.mark.unit
def test_format_year():
    """Test year extraction used by publications and awards."""
    assert format_year("2022-09-15") == "2022"
    assert format_year(None) == ""


@pytest.mark.unit
def test_format_date_absent_is_present():
    """Test that an absent date renders as Present."""
    assert format_date(None) == "Present"
    assert format_date("") == "Present"


@pytest.mark.unit
def test_format_date_range():
    """Test start/end range formatting."""
    assert format_date_range("2020-03-01", "2022-03-31") == "Mar 2020 – Mar 2022"
    assert format_date_range("2020-03-01", None) == "Mar 2020 – Present"


@pytest.mark.unit
def test_format_date_range_without_start():
    """Test that an absent start renders nothing."""
    assert format_date_range(None, "2015-05") == "May 2015"
    assert format_date_range(None, None) == "Present"
