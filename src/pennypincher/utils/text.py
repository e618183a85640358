"""Text normalization helpers for matching and displaying imported values."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

TRUE_TOKENS = frozenset({"true", "yes", "1"})
FALSE_TOKENS = frozenset({"false", "no", "0"})


def cell_text(value: Any) -> str:
    """Render a raw cell as trimmed text.

    Spreadsheet cells can be numbers or dates; integral floats are rendered
    without a trailing ``.0`` so that e.g. a numeric code ``1`` stays ``"1"``.
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat() if value.time() == datetime.min.time() else value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def is_blank(value: Any) -> bool:
    """Return True for cells that carry no data."""
    return cell_text(value) == ""


def normalize_for_match(value: Any) -> str:
    """Lowercase and trim a value for case-insensitive comparison."""
    return cell_text(value).lower()


def to_display_case(value: Any) -> str:
    """Title-case a name for storage ("fast FOOD" -> "Fast Food").

    Only the first letter of each space-separated word is upper-cased; unlike
    ``str.title`` this leaves letters after apostrophes and digits alone.
    """
    text = cell_text(value)
    if not text:
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in text.lower().split(" "))


def coerce_boolean(value: Any) -> Optional[bool]:
    """Coerce a yes/no style cell.

    Returns None when the value is absent or not recognized; callers treat
    that as "flag not given", which is different from False.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        if value == 1:
            return True
        if value == 0:
            return False
        return None
    token = normalize_for_match(value)
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    return None
