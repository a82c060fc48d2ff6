#!/usr/bin/env python3
"""
QuickBooks Request and Response Models

Plain data shapes exchanged with an accounting session. The session wrapper
translates them to and from QBFC request objects; nothing else in the
package touches the SDK.
"""

from dataclasses import dataclass
from typing import Any

from ..core.dates import FinancialDate
from ..core.money import Money


@dataclass(frozen=True)
class CompanyInfo:
    """Company file identification."""

    company_name: str
    legal_company_name: str = ""
    first_month_fiscal_year: str = ""
    first_month_income_tax_year: str = ""


@dataclass(frozen=True)
class CheckTransaction:
    """
    Check paid to an employee.

    The expense line's account reference carries the payroll item ListID.
    """

    payee_list_id: str
    txn_date: FinancialDate
    expense_account_list_id: str
    amount: Money
    memo: str
    line_memo: str
    is_to_be_printed: bool = True

    @property
    def kind(self) -> str:
        return "check"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "payee_list_id": self.payee_list_id,
            "txn_date": self.txn_date.to_iso_string(),
            "expense_account_list_id": self.expense_account_list_id,
            "amount_cents": self.amount.to_cents(),
            "memo": self.memo,
            "line_memo": self.line_memo,
            "is_to_be_printed": self.is_to_be_printed,
        }


@dataclass(frozen=True)
class TimeTrackingTransaction:
    """Non-billable time entry for an employee."""

    entity_list_id: str
    txn_date: FinancialDate
    service_item_list_id: str
    duration_hours: int
    duration_minutes: int
    rate: Money
    notes: str
    is_billable: bool = False

    @property
    def kind(self) -> str:
        return "time_tracking"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "entity_list_id": self.entity_list_id,
            "txn_date": self.txn_date.to_iso_string(),
            "service_item_list_id": self.service_item_list_id,
            "duration": f"{self.duration_hours}:{self.duration_minutes:02d}",
            "rate_cents": self.rate.to_cents(),
            "notes": self.notes,
            "is_billable": self.is_billable,
        }


Transaction = CheckTransaction | TimeTrackingTransaction


@dataclass(frozen=True)
class SubmissionResult:
    """
    Status of one add request.

    A zero status code is success; anything else is a rejection carrying
    QuickBooks' message. `severity` is "Error", "Warn" or "Info".
    """

    status_code: int
    status_message: str = ""
    txn_id: str | None = None
    severity: str = "Info"

    @property
    def ok(self) -> bool:
        return self.status_code == 0

    @classmethod
    def success(cls, txn_id: str | None) -> "SubmissionResult":
        return cls(status_code=0, status_message="Status OK", txn_id=txn_id)
