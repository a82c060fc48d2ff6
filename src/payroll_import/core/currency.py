#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

All payroll amounts are carried as integer cents to avoid floating-point errors.

Currency Systems:
- CSV input uses plain dollar strings: "500", "500.00", "$1,250.50"
- Internal calculations use cents: 100 cents = $1.00
- The QuickBooks SDK takes amounts and rates as doubles: 500.0

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Convert to float only at the SDK boundary
- Reject malformed input loudly so the caller can skip the row
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation


def parse_dollars_to_cents(dollars_str: str) -> int:
    """
    Parse a dollar string to integer cents.

    Fractions of a cent are rounded half-up.

    Args:
        dollars_str: String like "500", "12.34", "$1,234.56" or "-5.00"

    Returns:
        Amount in cents

    Raises:
        ValueError: If the string is empty or not a number

    Examples:
        parse_dollars_to_cents("500") -> 50000
        parse_dollars_to_cents("$12.34") -> 1234
        parse_dollars_to_cents("12.345") -> 1235
    """
    clean = dollars_str.replace("$", "").replace(",", "").strip()
    if not clean:
        raise ValueError("Empty currency value")

    try:
        amount = Decimal(clean)
    except InvalidOperation as e:
        raise ValueError(f"Invalid currency value: {dollars_str!r}") from e

    if not amount.is_finite():
        raise ValueError(f"Invalid currency value: {dollars_str!r}")

    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def parse_decimal(value_str: str) -> Decimal:
    """
    Parse a plain decimal number such as an hour count.

    Raises:
        ValueError: If the string is empty or not a finite number
    """
    clean = value_str.replace(",", "").strip()
    if not clean:
        raise ValueError("Empty numeric value")

    try:
        value = Decimal(clean)
    except InvalidOperation as e:
        raise ValueError(f"Invalid numeric value: {value_str!r}") from e

    if not value.is_finite():
        raise ValueError(f"Invalid numeric value: {value_str!r}")
    return value


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Example:
        cents_to_dollars_str(4599) -> "45.99"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def cents_to_sdk_amount(cents: int) -> float:
    """Convert cents to the double the QuickBooks SDK expects."""
    return float(Decimal(cents) / 100)
