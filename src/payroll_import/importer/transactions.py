#!/usr/bin/env python3
"""
Transaction Builders

Turn a resolved earnings record into the QuickBooks transaction it becomes:
a check for flat amounts, a time-tracking entry for hourly rows.
"""

from collections.abc import Callable
from decimal import ROUND_HALF_EVEN, Decimal

from ..core.dates import FinancialDate
from ..earnings.models import AmountEarnings, EarningsLayout, EarningsRecord, HourlyEarnings
from ..quickbooks.models import CheckTransaction, TimeTrackingTransaction, Transaction

TransactionBuilder = Callable[[EarningsRecord, str, str, FinancialDate], Transaction]


def split_duration(hours: Decimal) -> tuple[int, int]:
    """
    Split decimal hours into whole hours and minutes.

    Minutes are rounded half-to-even; a rounded 60 carries into the hour.

    Example:
        split_duration(Decimal("7.5")) -> (7, 30)
        split_duration(Decimal("1.999")) -> (2, 0)
    """
    if hours < 0:
        raise ValueError(f"Hours must not be negative: {hours}")

    whole_hours = int(hours)
    minutes = int(((hours - whole_hours) * 60).quantize(Decimal("1"), rounding=ROUND_HALF_EVEN))
    if minutes == 60:
        whole_hours += 1
        minutes = 0
    return whole_hours, minutes


def build_check(
    record: EarningsRecord,
    employee_list_id: str,
    payroll_item_list_id: str,
    txn_date: FinancialDate,
    to_be_printed: bool = True,
) -> CheckTransaction:
    """Build a check paying one flat-amount earnings row."""
    if not isinstance(record, AmountEarnings):
        raise TypeError(f"Checks need an amount record, got {type(record).__name__}")

    return CheckTransaction(
        payee_list_id=employee_list_id,
        txn_date=txn_date,
        expense_account_list_id=payroll_item_list_id,
        amount=record.amount,
        memo=f"Earnings: {record.category}",
        line_memo=f"{record.category} for {record.employee_name}",
        is_to_be_printed=to_be_printed,
    )


def build_time_entry(
    record: EarningsRecord,
    employee_list_id: str,
    payroll_item_list_id: str,
    txn_date: FinancialDate,
) -> TimeTrackingTransaction:
    """Build a non-billable time entry for one hourly earnings row."""
    if not isinstance(record, HourlyEarnings):
        raise TypeError(f"Time entries need an hourly record, got {type(record).__name__}")

    hours, minutes = split_duration(record.hours)
    return TimeTrackingTransaction(
        entity_list_id=employee_list_id,
        txn_date=txn_date,
        service_item_list_id=payroll_item_list_id,
        duration_hours=hours,
        duration_minutes=minutes,
        rate=record.rate,
        notes=f"Imported {record.category} earnings for {record.employee_name}",
    )


def builder_for(layout: EarningsLayout, checks_to_be_printed: bool = True) -> TransactionBuilder:
    """Pick the transaction builder matching a CSV layout."""
    if layout is EarningsLayout.AMOUNT:

        def _check(record: EarningsRecord, employee_id: str, item_id: str, txn_date: FinancialDate) -> Transaction:
            return build_check(record, employee_id, item_id, txn_date, to_be_printed=checks_to_be_printed)

        return _check
    return build_time_entry
