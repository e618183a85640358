"""Utility functions for pennypincher."""

from pennypincher.utils.date_parser import parse_date, coerce_date
from pennypincher.utils.amount_parser import parse_amount, coerce_amount
from pennypincher.utils.text import normalize_for_match, to_display_case, coerce_boolean

__all__ = [
    "parse_date",
    "coerce_date",
    "parse_amount",
    "coerce_amount",
    "normalize_for_match",
    "to_display_case",
    "coerce_boolean",
]
