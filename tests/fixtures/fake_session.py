#!/usr/bin/env python3
"""
In-Memory Accounting Session

Stands in for QuickBooks in tests. Holds a fixed directory, records every
transaction submitted, and answers with scripted status codes.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from payroll_import.core.exceptions import QueryError, SessionError
from payroll_import.directory.models import Employee, PayrollItem
from payroll_import.quickbooks.models import CompanyInfo, SubmissionResult, Transaction

# Rejection returned for payees listed in FakeSession.reject_payees
REJECTED = SubmissionResult(status_code=3120, status_message="Object not found", severity="Error")


class FakeSession:
    """AccountingSession double with scripted responses."""

    def __init__(
        self,
        employees: list[Employee] | None = None,
        payroll_items: list[PayrollItem] | None = None,
        company: CompanyInfo | None = None,
        reject_payees: set[str] | None = None,
        raise_for_payees: set[str] | None = None,
        fail_employee_query: bool = False,
        fail_item_query: bool = False,
    ):
        self.employees = employees or []
        self.payroll_items = payroll_items or []
        self.company = company or CompanyInfo(
            company_name="Synthetic Dispatch Co",
            legal_company_name="Synthetic Dispatch Company LLC",
            first_month_fiscal_year="January",
            first_month_income_tax_year="January",
        )
        self.reject_payees = reject_payees or set()
        self.raise_for_payees = raise_for_payees or set()
        self.fail_employee_query = fail_employee_query
        self.fail_item_query = fail_item_query

        self.submitted: list[Transaction] = []
        self.batches: list[list[Transaction]] = []
        self.closed = False
        self._next_txn = 1

    def company_info(self) -> CompanyInfo | None:
        return self.company

    def list_employees(self) -> list[Employee]:
        if self.fail_employee_query:
            raise QueryError("EmployeeQuery", 500, "Query failed")
        return list(self.employees)

    def list_payroll_items(self) -> list[PayrollItem]:
        if self.fail_item_query:
            raise QueryError("PayrollItemWageQuery", 500, "Query failed")
        return list(self.payroll_items)

    def submit(self, transaction: Transaction) -> SubmissionResult:
        payee = _payee(transaction)
        if payee in self.raise_for_payees:
            raise RuntimeError(f"COM error for {payee}")

        self.submitted.append(transaction)
        if payee in self.reject_payees:
            return REJECTED

        txn_id = f"TXN-{self._next_txn}"
        self._next_txn += 1
        return SubmissionResult.success(txn_id)

    def submit_batch(self, transactions: list[Transaction]) -> list[SubmissionResult]:
        self.batches.append(list(transactions))
        return [self.submit(transaction) for transaction in transactions]

    def close(self) -> None:
        self.closed = True


def _payee(transaction: Transaction) -> str:
    return getattr(transaction, "payee_list_id", None) or transaction.entity_list_id


def session_factory_for(session: FakeSession, fail_open: bool = False) -> Callable[[Any], Any]:
    """Build a session factory the CLI can use in place of open_session."""

    @contextmanager
    def factory(config: Any) -> Iterator[FakeSession]:
        if fail_open:
            raise SessionError("Could not start QuickBooks session: QuickBooks is not running")
        try:
            yield session
        finally:
            session.close()

    return factory
