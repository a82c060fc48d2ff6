#!/usr/bin/env python3
"""
Unit tests for currency parsing and formatting.

Amounts typed into earnings CSVs must land on exact cents.
"""

from decimal import Decimal

import pytest

from payroll_import.core.currency import (
    cents_to_dollars_str,
    cents_to_sdk_amount,
    parse_decimal,
    parse_dollars_to_cents,
)


@pytest.mark.currency
class TestParseDollars:
    """Test dollar string parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("500", 50000),
            ("500.00", 50000),
            ("$12.34", 1234),
            ("1,234.56", 123456),
            (" 0.99 ", 99),
            ("-5.00", -500),
            ("12.345", 1235),
            ("12.344", 1234),
        ],
    )
    def test_valid_amounts(self, text, expected):
        assert parse_dollars_to_cents(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "$", "abc", "1.2.3", "NaN", "Infinity"])
    def test_invalid_amounts_raise(self, text):
        with pytest.raises(ValueError):
            parse_dollars_to_cents(text)


@pytest.mark.currency
class TestParseDecimal:
    """Test plain number parsing used for hours."""

    def test_parses_hours(self):
        assert parse_decimal("7.5") == Decimal("7.5")
        assert parse_decimal(" 40 ") == Decimal("40")

    @pytest.mark.parametrize("text", ["", "seven", "nan"])
    def test_invalid_numbers_raise(self, text):
        with pytest.raises(ValueError):
            parse_decimal(text)


@pytest.mark.currency
class TestFormatting:
    """Test cents formatting helpers."""

    def test_cents_to_dollars_str(self):
        assert cents_to_dollars_str(4599) == "45.99"
        assert cents_to_dollars_str(5) == "0.05"
        assert cents_to_dollars_str(-100) == "-1.00"

    def test_cents_to_sdk_amount(self):
        assert cents_to_sdk_amount(50000) == 500.0
        assert cents_to_sdk_amount(1) == 0.01
