#!/usr/bin/env python3
"""Unit tests for check and time-entry builders."""

from datetime import date
from decimal import Decimal

import pytest

from payroll_import.core.dates import FinancialDate
from payroll_import.core.money import Money
from payroll_import.earnings.models import AmountEarnings, EarningsLayout, HourlyEarnings
from payroll_import.importer.transactions import build_check, build_time_entry, builder_for, split_duration
from payroll_import.quickbooks.models import CheckTransaction, TimeTrackingTransaction

TXN_DATE = FinancialDate(date=date(2024, 7, 31))


@pytest.fixture
def bonus_record():
    return AmountEarnings(employee_name="jane", line_number=2, amount=Money.from_cents(50000), category="Bonus")


@pytest.fixture
def hourly_record():
    return HourlyEarnings(employee_name="John Doe", line_number=2, rate=Money.from_cents(2500), hours=Decimal("7.5"))


@pytest.mark.importer
class TestSplitDuration:
    """Test decimal hours to hours and minutes."""

    @pytest.mark.parametrize(
        "hours,expected",
        [
            ("8", (8, 0)),
            ("7.5", (7, 30)),
            ("0.25", (0, 15)),
            ("1.999", (2, 0)),
            # Half minutes round to even
            ("0.025", (0, 2)),
            ("0.125", (0, 8)),
            ("0.375", (0, 22)),
        ],
    )
    def test_split(self, hours, expected):
        assert split_duration(Decimal(hours)) == expected

    def test_negative_hours_rejected(self):
        with pytest.raises(ValueError):
            split_duration(Decimal("-1"))


@pytest.mark.importer
class TestBuildCheck:
    """Test check construction."""

    def test_check_fields(self, bonus_record):
        check = build_check(bonus_record, "E2", "P3", TXN_DATE)

        assert check == CheckTransaction(
            payee_list_id="E2",
            txn_date=TXN_DATE,
            expense_account_list_id="P3",
            amount=Money.from_cents(50000),
            memo="Earnings: Bonus",
            line_memo="Bonus for jane",
            is_to_be_printed=True,
        )

    def test_print_flag_can_be_disabled(self, bonus_record):
        assert not build_check(bonus_record, "E2", "P3", TXN_DATE, to_be_printed=False).is_to_be_printed

    def test_rejects_hourly_record(self, hourly_record):
        with pytest.raises(TypeError):
            build_check(hourly_record, "E1", "P1", TXN_DATE)


@pytest.mark.importer
class TestBuildTimeEntry:
    """Test time-entry construction."""

    def test_time_entry_fields(self, hourly_record):
        entry = build_time_entry(hourly_record, "E1", "P1", TXN_DATE)

        assert isinstance(entry, TimeTrackingTransaction)
        assert entry.entity_list_id == "E1"
        assert entry.service_item_list_id == "P1"
        assert (entry.duration_hours, entry.duration_minutes) == (7, 30)
        assert entry.rate == Money.from_cents(2500)
        assert entry.notes == "Imported Regular earnings for John Doe"
        assert entry.is_billable is False
        assert entry.to_dict()["duration"] == "7:30"

    def test_rejects_amount_record(self, bonus_record):
        with pytest.raises(TypeError):
            build_time_entry(bonus_record, "E1", "P1", TXN_DATE)


@pytest.mark.importer
def test_builder_for_layout(bonus_record, hourly_record):
    assert builder_for(EarningsLayout.AMOUNT)(bonus_record, "E2", "P3", TXN_DATE).kind == "check"
    assert not builder_for(EarningsLayout.AMOUNT, checks_to_be_printed=False)(
        bonus_record, "E2", "P3", TXN_DATE
    ).is_to_be_printed
    assert builder_for(EarningsLayout.HOURLY)(hourly_record, "E1", "P1", TXN_DATE).kind == "time_tracking"
