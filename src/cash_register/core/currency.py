#!/usr/bin/env python3
"""
Currency Parsing and Rounding Utilities

Amounts are handled as ``Decimal`` values in the currency's base unit
(dollars for the default table). Anything that needs an exact integer
comparison goes through integer cents.

Key Principles:
- Never use floating-point arithmetic for currency amounts
- Round to two fractional digits with banker's rounding (half-even)
- Divisibility checks are done on integer cents, not on decimals
"""

from decimal import ROUND_FLOOR, ROUND_HALF_EVEN, Decimal, InvalidOperation

CENT = Decimal("0.01")
RESIDUAL_TOLERANCE = Decimal("0.001")


def parse_amount(raw: str) -> Decimal | None:
    """
    Parse a non-negative decimal amount.

    Args:
        raw: Amount text like "2.12" or " 3 "

    Returns:
        Decimal value, or None when the text is not a finite non-negative
        number that fits the decimal context once rounded to cents

    Examples:
        parse_amount("2.12") -> Decimal("2.12")
        parse_amount("abc") -> None
        parse_amount("-1.00") -> None
        parse_amount("1e30") -> None
    """
    clean = raw.strip()
    if not clean:
        return None

    try:
        value = Decimal(clean)
    except (InvalidOperation, ValueError):
        return None

    if not value.is_finite() or value < 0:
        return None

    # Every later step rounds to cents; reject amounts too large to round
    try:
        round_cents(value)
    except InvalidOperation:
        return None
    return value


def round_cents(amount: Decimal) -> Decimal:
    """Round an amount to two fractional digits."""
    return amount.quantize(CENT, rounding=ROUND_HALF_EVEN)


def to_cents(amount: Decimal) -> int:
    """
    Convert an amount to integer cents.

    Example:
        to_cents(Decimal("2.12")) -> 212
    """
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_EVEN))


def whole_units(amount: Decimal, unit: Decimal) -> int:
    """Number of whole ``unit`` values that fit in ``amount`` (floor division)."""
    return int((amount / unit).to_integral_value(rounding=ROUND_FLOOR))


def nearest_units(amount: Decimal, unit: Decimal) -> int:
    """Number of ``unit`` values closest to ``amount`` (half-even rounding)."""
    return int((amount / unit).to_integral_value(rounding=ROUND_HALF_EVEN))


def cents_to_str(cents: int) -> str:
    """
    Convert cents to a base-unit string using pure integer arithmetic.

    Example:
        cents_to_str(88) -> "0.88"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    whole = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{whole}.{remainder:02d}"
    return f"{whole}.{remainder:02d}"


def format_amount(amount: Decimal, symbol: str = "$") -> str:
    """Format an amount with its currency symbol, e.g. ``$0.88``."""
    return f"{symbol}{cents_to_str(to_cents(amount))}"

