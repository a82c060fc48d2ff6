#!/usr/bin/env python3
"""Unit tests for earnings record models."""

from decimal import Decimal

import pytest

from payroll_import.core.money import Money
from payroll_import.earnings.models import AmountEarnings, EarningsRecord, HourlyEarnings


@pytest.mark.unit
class TestAmountEarnings:
    """Test flat-amount records."""

    def test_from_csv_fields(self):
        record = AmountEarnings.from_csv_fields(["Jane Smith", "500", "Bonus"], line_number=2)

        assert record.amount.to_cents() == 50000
        assert record.earnings_type == "Bonus"

    def test_too_few_fields(self):
        with pytest.raises(ValueError):
            AmountEarnings.from_csv_fields(["Jane Smith", "500"], line_number=2)

    def test_describe(self):
        record = AmountEarnings(employee_name="Jane", line_number=2, amount=Money.from_cents(50000), category="Bonus")
        assert record.describe() == "Employee: 'Jane', Amount: $500.00, Type: Bonus"


@pytest.mark.unit
class TestHourlyEarnings:
    """Test hourly records."""

    def test_total_rounds_half_up(self):
        record = HourlyEarnings(
            employee_name="John", line_number=2, rate=Money.from_cents(1999), hours=Decimal("1.5")
        )
        # 1999 * 1.5 = 2998.5 cents
        assert record.total == Money.from_cents(2999)

    def test_describe_shows_total(self):
        record = HourlyEarnings.from_csv_fields(["John", "25", "7.5"], line_number=3)
        assert record.describe() == "Employee: 'John', Rate: $25.00, Hours: 7.5, Total: $187.50"


@pytest.mark.unit
def test_base_record_cannot_be_instantiated():
    with pytest.raises(TypeError):
        EarningsRecord(employee_name="Jane", line_number=2)
