"""Amount parsing utilities."""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

NOT_A_NUMBER = Decimal("NaN")
CENTS = Decimal("0.01")

_CURRENCY_SYMBOLS = re.compile(r"[$€£¥₹]")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Accepts currency symbols, thousands separators, a leading minus sign and
    accounting-style parentheses: "1,234.56", "-$9.99", "(50.00)".

    Raises:
        ValueError: If the text is empty or not a finite number
    """
    text = (amount_str or "").strip()
    if not text:
        raise ValueError("Empty amount string")

    negative = text.startswith("(") and text.endswith(")")
    if negative:
        text = text[1:-1]

    digits = _CURRENCY_SYMBOLS.sub("", text).replace(",", "").strip()
    try:
        amount = Decimal(digits)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if negative else amount


def coerce_amount(value: Any, absolute: bool = True) -> Decimal:
    """Coerce a raw cell into a Decimal amount.

    Expense amounts are taken as absolute values since the sign in source
    files carries no meaning; pass ``absolute=False`` to keep it (income).

    Returns ``Decimal("NaN")`` when the value cannot be parsed. NaN is truthy
    and compares unordered, so callers must check ``amount.is_nan()``.
    """
    if isinstance(value, bool) or value is None:
        return NOT_A_NUMBER

    try:
        if isinstance(value, (int, float, Decimal)):
            amount = Decimal(str(value))
        else:
            amount = parse_amount(str(value))
    except (InvalidOperation, ValueError):
        return NOT_A_NUMBER

    if not amount.is_finite():
        return NOT_A_NUMBER
    try:
        round_to_cents(amount)
    except InvalidOperation:
        # Too many digits to store
        return NOT_A_NUMBER
    return abs(amount) if absolute else amount


def round_to_cents(amount: Decimal) -> Decimal:
    """Round half-up to two decimal places, the precision amounts are stored with."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
