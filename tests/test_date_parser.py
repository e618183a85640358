"""Tests for date parsing and coercion."""

import pytest
from datetime import date, datetime

from pennypincher.utils.date_parser import coerce_date, parse_date


def test_parse_iso_date():
    """Test parsing ISO dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_dotted_date():
    """Dots are treated as dashes (YYYY.MM.DD)."""
    assert parse_date("2024.01.15") == date(2024, 1, 15)


def test_parse_iso_datetime():
    """A timestamp is reduced to its date."""
    assert parse_date("2024-01-15T10:30:00") == date(2024, 1, 15)


def test_parse_free_form_dates():
    """Formats outside ISO fall back to dateutil."""
    assert parse_date("01/15/2024") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_invalid_date():
    """Test parsing an invalid date string."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("garbage")


def test_parse_empty_date():
    """Empty strings are rejected."""
    with pytest.raises(ValueError):
        parse_date("   ")


def test_coerce_native_values():
    """Spreadsheet date cells are used directly."""
    assert coerce_date(date(2024, 3, 1)) == date(2024, 3, 1)
    assert coerce_date(datetime(2024, 3, 1, 8, 15)) == date(2024, 3, 1)


def test_coerce_string():
    """Strings go through parse_date."""
    assert coerce_date(" 2024-03-01 ") == date(2024, 3, 1)


def test_coerce_failure_returns_none():
    """Coercion never raises."""
    assert coerce_date(None) is None
    assert coerce_date("") is None
    assert coerce_date("garbage") is None
    assert coerce_date("2024-13-45") is None


def test_partial_dates_do_not_depend_on_today():
    """Missing day and month resolve to the first, not to today's date."""
    assert coerce_date("Feb 2024") == date(2024, 2, 1)
    assert parse_date("March 2023") == date(2023, 3, 1)
    assert coerce_date("5") == date(date.today().year, 1, 5)
