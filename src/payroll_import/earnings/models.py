#!/usr/bin/env python3
"""
Earnings Record Models

Normalized representation of one row of an operator's earnings CSV. Two
layouts exist:

- amount: ``name,amount,category`` (one check per row)
- hourly: ``name,rate,hours`` (one time-tracking entry per row)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from ..core.currency import parse_decimal
from ..core.money import Money

# Minimum number of comma-separated fields in a data row
MIN_FIELDS = 3


class EarningsLayout(Enum):
    """Column layout of an earnings CSV."""

    AMOUNT = "amount"
    HOURLY = "hourly"


@dataclass(frozen=True)
class EarningsRecord(ABC):
    """
    One earnings row, regardless of layout.

    `employee_name` is free text exactly as the payroll operator typed it: it
    may be a first name only, a full name, or part of a name.
    """

    employee_name: str
    line_number: int

    @property
    @abstractmethod
    def earnings_type(self) -> str:
        """Category used to pick the payroll item."""

    @abstractmethod
    def describe(self) -> str:
        """One-line preview text."""


@dataclass(frozen=True)
class AmountEarnings(EarningsRecord):
    """Flat payout of a given category (commission, bonus, ...)."""

    amount: Money
    category: str

    @property
    def earnings_type(self) -> str:
        return self.category

    @classmethod
    def from_csv_fields(cls, fields: list[str], line_number: int) -> "AmountEarnings":
        """
        Create from trimmed CSV fields ``name, amount, category``.

        Raises:
            ValueError: If there are too few fields or the amount is not a number
        """
        if len(fields) < MIN_FIELDS:
            raise ValueError(f"expected at least {MIN_FIELDS} fields, got {len(fields)}")
        return cls(
            employee_name=fields[0],
            line_number=line_number,
            amount=Money.from_dollars(fields[1]),
            category=fields[2],
        )

    def describe(self) -> str:
        return f"Employee: '{self.employee_name}', Amount: {self.amount}, Type: {self.category}"


@dataclass(frozen=True)
class HourlyEarnings(EarningsRecord):
    """Hours worked at an hourly rate."""

    rate: Money
    hours: Decimal
    # Hourly rows carry no category column; they are regular wages
    category: str = "Regular"

    @property
    def earnings_type(self) -> str:
        return self.category

    @property
    def total(self) -> Money:
        """Rate times hours, rounded half-up to the cent."""
        cents = (Decimal(self.rate.to_cents()) * self.hours).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return Money.from_cents(int(cents))

    @classmethod
    def from_csv_fields(cls, fields: list[str], line_number: int) -> "HourlyEarnings":
        """
        Create from trimmed CSV fields ``name, rate, hours``.

        Raises:
            ValueError: If there are too few fields or a number is malformed
        """
        if len(fields) < MIN_FIELDS:
            raise ValueError(f"expected at least {MIN_FIELDS} fields, got {len(fields)}")
        return cls(
            employee_name=fields[0],
            line_number=line_number,
            rate=Money.from_dollars(fields[1]),
            hours=parse_decimal(fields[2]),
        )

    def describe(self) -> str:
        return (
            f"Employee: '{self.employee_name}', Rate: {self.rate}, Hours: {self.hours}, "
            f"Total: {self.total}"
        )


RECORD_TYPES: dict[EarningsLayout, type[AmountEarnings] | type[HourlyEarnings]] = {
    EarningsLayout.AMOUNT: AmountEarnings,
    EarningsLayout.HOURLY: HourlyEarnings,
}
