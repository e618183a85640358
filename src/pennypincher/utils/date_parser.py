"""Date parsing utilities."""

from datetime import date, datetime
from typing import Any, Optional

from dateutil import parser as date_parser


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports ISO dates ("2024-01-15"), dotted dates ("2024.01.15") and the
    free-form formats understood by dateutil ("January 15, 2024", "01/15/2024").

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    original = date_str.strip()
    if not original:
        raise ValueError("Empty date string")

    # Handle YYYY.MM.DD
    dashed = original.replace(".", "-")

    try:
        return date.fromisoformat(dashed)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(dashed).date()
    except ValueError:
        pass

    # Missing parts resolve to January 1st of the current year, never to today
    default = datetime(date.today().year, 1, 1)
    for candidate in (dashed, original):
        try:
            return date_parser.parse(candidate, default=default).date()
        except (ValueError, OverflowError, TypeError):
            continue

    raise ValueError(f"Could not parse date '{original}'")


def coerce_date(value: Any) -> Optional[date]:
    """Coerce a raw cell into a date.

    Native date values (spreadsheet cells) are used directly; anything else
    goes through parse_date. Returns None instead of raising, so that callers
    can report an invalid date as a row-level problem.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_date(str(value))
    except ValueError:
        return None
