#!/usr/bin/env python3
"""
QuickBooks Desktop Session

Thin wrapper around the QBFC COM SDK. A session is an explicitly owned
handle: open it with `open_session()` and it is released on every exit path,
including exceptions raised by the caller.

The COM layer only exists on Windows with QuickBooks Desktop and the QBFC
runtime installed. Everything above this module talks to the
`AccountingSession` protocol, so tests and dry runs can substitute an
in-memory session.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from datetime import datetime
from typing import Any, Protocol

from ..core.config import QuickBooksConfig
from ..core.exceptions import QueryError, SessionError
from ..directory.models import Employee, PayrollItem
from .models import (
    CheckTransaction,
    CompanyInfo,
    SubmissionResult,
    TimeTrackingTransaction,
    Transaction,
)

logger = logging.getLogger(__name__)

# QBFC enumeration values
CT_LOCAL_QBD = 1  # ENConnectionType.ctLocalQBD
OM_DONT_CARE = 2  # ENOpenMode.omDontCare
AS_ALL = 2  # ENActiveStatus.asAll
ROE_CONTINUE = 1  # ENRqOnError.roeContinue


class AccountingSession(Protocol):
    """What the importer needs from the accounting system."""

    def company_info(self) -> CompanyInfo | None: ...

    def list_employees(self) -> list[Employee]: ...

    def list_payroll_items(self) -> list[PayrollItem]: ...

    def submit(self, transaction: Transaction) -> SubmissionResult: ...

    def submit_batch(self, transactions: list[Transaction]) -> list[SubmissionResult]: ...

    def close(self) -> None: ...


SessionFactory = Callable[[QuickBooksConfig], AbstractContextManager[AccountingSession]]


def _value(field: Any, default: Any = "") -> Any:
    """Read a QBFC value field that may be absent."""
    if field is None:
        return default
    return field.GetValue()


class QBFCSession:
    """AccountingSession backed by QBFC's QBSessionManager."""

    def __init__(self, config: QuickBooksConfig):
        self.config = config
        self._manager: Any = None
        self._connection_open = False
        self._session_open = False

    def open(self) -> None:
        """
        Open the connection and begin a session with the company file.

        Raises:
            SessionError: If the SDK is unavailable or QuickBooks refuses the
                connection. Any half-opened state is released first.
        """
        try:
            import win32com.client
        except ImportError as e:
            raise SessionError("pywin32 is required to connect to QuickBooks Desktop (Windows only)") from e

        logger.info("Initializing QuickBooks connection...")
        try:
            self._manager = win32com.client.Dispatch(
                f"QBFC{self.config.sdk_major_version}.QBSessionManager"
            )
            self._manager.OpenConnection2(self.config.app_id, self.config.app_name, CT_LOCAL_QBD)
            self._connection_open = True
            logger.info("Connection opened successfully.")

            self._manager.BeginSession(self.config.company_file, OM_DONT_CARE)
            self._session_open = True
            logger.info("Session established successfully.")
        except Exception as e:
            self.close()
            raise SessionError(f"Error initializing QuickBooks connection: {e}") from e

    def close(self) -> None:
        """End the session and close the connection. Never raises."""
        if self._manager is None:
            return

        try:
            if self._session_open:
                logger.info("Ending QuickBooks session...")
                self._manager.EndSession()
                self._session_open = False
            if self._connection_open:
                logger.info("Closing QuickBooks connection...")
                self._manager.CloseConnection()
                self._connection_open = False
        except Exception as e:
            logger.error("Error closing QuickBooks connection: %s", e)

    def _new_request(self) -> Any:
        if not self._session_open:
            raise SessionError("QuickBooks session is not open")
        return self._manager.CreateMsgSetRequest(
            self.config.country,
            self.config.sdk_major_version,
            self.config.sdk_minor_version,
        )

    def _query(self, name: str, request: Any) -> Any:
        """Run a single-query request and return its detail object."""
        response_set = self._manager.DoRequests(request)
        if response_set is None or response_set.ResponseList is None or response_set.ResponseList.Count == 0:
            raise QueryError(name, -1, "empty response from QuickBooks")

        response = response_set.ResponseList.GetAt(0)
        logger.debug("%s status %s: %s", name, response.StatusCode, response.StatusMessage)
        if response.StatusCode != 0:
            raise QueryError(name, response.StatusCode, response.StatusMessage)
        return response.Detail

    def company_info(self) -> CompanyInfo | None:
        request = self._new_request()
        request.AppendCompanyQueryRq()
        detail = self._query("CompanyQuery", request)
        if detail is None:
            return None
        return CompanyInfo(
            company_name=str(_value(detail.CompanyName)),
            legal_company_name=str(_value(detail.LegalCompanyName)),
            first_month_fiscal_year=str(_value(detail.FirstMonthFiscalYear)),
            first_month_income_tax_year=str(_value(detail.FirstMonthIncomeTaxYear)),
        )

    def list_employees(self) -> list[Employee]:
        """
        Query every employee, active or not, in QuickBooks' order.

        Raises:
            QueryError: If QuickBooks rejects the query
        """
        logger.info("Querying QuickBooks for employees...")
        request = self._new_request()
        query = request.AppendEmployeeQueryRq()
        query.ORListQuery.ListFilter.ActiveStatus.SetValue(AS_ALL)

        detail = self._query("EmployeeQuery", request)
        employees: list[Employee] = []
        if detail is None:
            return employees

        for i in range(detail.Count):
            ret = detail.GetAt(i)
            employees.append(
                Employee(
                    list_id=str(_value(ret.ListID)),
                    name=str(_value(ret.Name)),
                    first_name=str(_value(ret.FirstName)),
                    last_name=str(_value(ret.LastName)),
                )
            )

        logger.info("Total employees found: %d", len(employees))
        return employees

    def list_payroll_items(self) -> list[PayrollItem]:
        """
        Query payroll wage items in QuickBooks' order.

        Raises:
            QueryError: If QuickBooks rejects the query
        """
        logger.info("Querying QuickBooks for payroll wage items...")
        request = self._new_request()
        request.AppendPayrollItemWageQueryRq()

        detail = self._query("PayrollItemWageQuery", request)
        items: list[PayrollItem] = []
        if detail is None:
            return items

        for i in range(detail.Count):
            ret = detail.GetAt(i)
            items.append(PayrollItem(list_id=str(_value(ret.ListID)), name=str(_value(ret.Name))))

        logger.info("Found %d payroll wage items in QuickBooks", len(items))
        return items

    def _append(self, request: Any, transaction: Transaction) -> None:
        txn_date = datetime.combine(transaction.txn_date.date, datetime.min.time())

        if isinstance(transaction, CheckTransaction):
            check = request.AppendCheckAddRq()
            check.PayeeEntityRef.ListID.SetValue(transaction.payee_list_id)
            check.TxnDate.SetValue(txn_date)
            check.IsToBePrinted.SetValue(transaction.is_to_be_printed)
            check.Memo.SetValue(transaction.memo)

            line = check.ExpenseLineAddList.Append()
            line.AccountRef.ListID.SetValue(transaction.expense_account_list_id)
            line.Amount.SetValue(transaction.amount.to_sdk_amount())
            line.Memo.SetValue(transaction.line_memo)
        elif isinstance(transaction, TimeTrackingTransaction):
            entry = request.AppendTimeTrackingAddRq()
            entry.TxnDate.SetValue(txn_date)
            entry.EntityRef.ListID.SetValue(transaction.entity_list_id)
            entry.IsBillable.SetValue(transaction.is_billable)
            entry.ItemServiceRef.ListID.SetValue(transaction.service_item_list_id)
            entry.Duration.SetValue(transaction.duration_hours, transaction.duration_minutes, 0, False)
            entry.Rate.SetValue(transaction.rate.to_sdk_amount())
            entry.Notes.SetValue(transaction.notes)
        else:
            raise TypeError(f"Unsupported transaction type: {type(transaction).__name__}")

    def _result(self, response: Any) -> SubmissionResult:
        if response.StatusCode != 0:
            return SubmissionResult(
                status_code=response.StatusCode,
                status_message=response.StatusMessage,
                severity=response.StatusSeverity,
            )

        txn_id = None
        if response.Detail is not None:
            txn_id = str(_value(response.Detail.TxnID))
        return SubmissionResult.success(txn_id)

    def submit(self, transaction: Transaction) -> SubmissionResult:
        request = self._new_request()
        self._append(request, transaction)

        response_set = self._manager.DoRequests(request)
        if response_set is None or response_set.ResponseList is None or response_set.ResponseList.Count == 0:
            return SubmissionResult(status_code=-1, status_message="empty response from QuickBooks", severity="Error")
        return self._result(response_set.ResponseList.GetAt(0))

    def submit_batch(self, transactions: list[Transaction]) -> list[SubmissionResult]:
        """Submit all transactions in one message set, continuing past errors."""
        if not transactions:
            return []

        request = self._new_request()
        request.Attributes.OnError = ROE_CONTINUE
        for transaction in transactions:
            self._append(request, transaction)

        response_set = self._manager.DoRequests(request)
        results: list[SubmissionResult] = []
        count = 0
        if response_set is not None and response_set.ResponseList is not None:
            count = response_set.ResponseList.Count
            results = [self._result(response_set.ResponseList.GetAt(i)) for i in range(count)]

        # Requests QuickBooks never answered
        missing = len(transactions) - len(results)
        results.extend(
            SubmissionResult(status_code=-1, status_message="no response for request", severity="Error")
            for _ in range(max(missing, 0))
        )
        return results[: len(transactions)]


@contextmanager
def open_session(config: QuickBooksConfig) -> Iterator[QBFCSession]:
    """
    Open a QuickBooks session for the duration of a `with` block.

    Example:
        >>> with open_session(get_config().quickbooks) as session:
        ...     employees = session.list_employees()

    Raises:
        SessionError: If the session cannot be opened
    """
    session = QBFCSession(config)
    session.open()
    try:
        yield session
    finally:
        session.close()
