#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Keeps CSV amounts exact until they reach the QuickBooks SDK.
"""

from dataclasses import dataclass

from .currency import cents_to_dollars_str, cents_to_sdk_amount, parse_dollars_to_cents


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents (USD).

    Examples:
        >>> pay = Money.from_dollars("500")
        >>> str(pay)
        '$500.00'
        >>> pay.to_sdk_amount()
        500.0
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_dollars(cls, dollars: str) -> "Money":
        """
        Parse from a dollar string like '$123.45'.

        Raises:
            ValueError: If the string is not a valid amount
        """
        return cls(cents=parse_dollars_to_cents(dollars))

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_sdk_amount(self) -> float:
        """Get value as the double the QuickBooks SDK expects."""
        return cents_to_sdk_amount(self.cents)

    def __str__(self) -> str:
        """Format as dollar string."""
        return f"${cents_to_dollars_str(self.cents)}"
