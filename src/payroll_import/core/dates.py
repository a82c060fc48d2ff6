#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable date wrapper with consistent formatting for payroll transactions.
"""

from dataclasses import dataclass
from datetime import date, datetime

# Format operators type at the console prompt
USER_DATE_FORMAT = "%m/%d/%Y"


@dataclass(frozen=True, order=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, date_format: str = "%Y-%m-%d") -> "FinancialDate":
        """
        Parse from string in specified format.

        Args:
            date_str: Date string to parse
            date_format: Date format (default: ISO format "%Y-%m-%d")

        Returns:
            FinancialDate object

        Raises:
            ValueError: If the string does not match the format
        """
        return cls(date=datetime.strptime(date_str.strip(), date_format).date())

    @classmethod
    def from_user_input(cls, text: str | None, date_format: str = USER_DATE_FORMAT) -> "FinancialDate":
        """
        Parse a date typed by an operator, defaulting to today when blank.

        Args:
            text: Raw input, e.g. "07/31/2024", "" or None
            date_format: Expected format (default: MM/DD/YYYY)

        Returns:
            Parsed date, or today for blank input

        Raises:
            ValueError: If non-blank input does not match the format. Callers
                are expected to fall back to today and tell the operator.
        """
        if text is None or not text.strip():
            return cls.today()
        return cls.from_string(text, date_format)

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def to_user_string(self) -> str:
        """Format as MM/DD/YYYY."""
        return self.date.strftime(USER_DATE_FORMAT)

    def __str__(self) -> str:
        return self.to_iso_string()

    def __repr__(self) -> str:
        return f"FinancialDate(date={self.date!r})"
