"""Tests for text normalization helpers."""

from datetime import date, datetime

from pennypincher.utils.text import (
    cell_text,
    coerce_boolean,
    is_blank,
    normalize_for_match,
    to_display_case,
)


def test_normalize_for_match():
    """Values are trimmed and lowercased."""
    assert normalize_for_match("  USD ") == "usd"
    assert normalize_for_match("Credit Card") == "credit card"


def test_normalize_for_match_none():
    """None normalizes to an empty string."""
    assert normalize_for_match(None) == ""


def test_to_display_case():
    """Every word starts upper-case, the rest is lower-case."""
    assert to_display_case("fast FOOD") == "Fast Food"
    assert to_display_case("  groceries ") == "Groceries"


def test_to_display_case_keeps_apostrophes_lowercase():
    """Unlike str.title, letters after apostrophes stay lower-case."""
    assert to_display_case("kid's toys") == "Kid's Toys"


def test_to_display_case_empty():
    """Blank input stays blank."""
    assert to_display_case("") == ""
    assert to_display_case(None) == ""


def test_cell_text_numbers_and_dates():
    """Spreadsheet values render as plain text."""
    assert cell_text(3.0) == "3"
    assert cell_text(3.5) == "3.5"
    assert cell_text(datetime(2024, 1, 5)) == "2024-01-05"
    assert cell_text(date(2024, 1, 5)) == "2024-01-05"


def test_is_blank():
    """None and whitespace are blank, zero is not."""
    assert is_blank(None)
    assert is_blank("   ")
    assert not is_blank(0)
    assert not is_blank("0")


def test_coerce_boolean_truthy_tokens():
    """Recognized truthy tokens, any casing."""
    for value in ("true", "Yes", " TRUE ", "1", 1, True):
        assert coerce_boolean(value) is True


def test_coerce_boolean_falsy_tokens():
    """Recognized falsy tokens, any casing."""
    for value in ("false", "No", "0", 0, False):
        assert coerce_boolean(value) is False


def test_coerce_boolean_unknown_is_none():
    """Unknown or absent values mean 'flag not given'."""
    for value in ("maybe", "", None, 2):
        assert coerce_boolean(value) is None
