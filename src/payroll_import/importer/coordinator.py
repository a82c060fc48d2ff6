#!/usr/bin/env python3
"""
Import Coordinator

Drives an earnings import: resolves each record's employee and payroll item
against the run's directory snapshot, builds one transaction per record,
submits it, and records what happened.

Failures stay local to their record. An unresolved name, a rejected
submission or an exception while building or sending a record marks that
record and moves on; the batch is never cut short. Nothing is retried.
"""

import logging
from collections.abc import Iterable
from datetime import datetime

from ..core.dates import FinancialDate
from ..directory.models import EntityDirectory
from ..directory.resolver import NameResolver
from ..earnings.models import EarningsRecord
from ..quickbooks.models import CompanyInfo, SubmissionResult
from ..quickbooks.session import AccountingSession
from .report import ImportReport, RecordOutcome, RecordState
from .transactions import TransactionBuilder

logger = logging.getLogger(__name__)


def fetch_company_info(session: AccountingSession) -> CompanyInfo | None:
    """Company details for the banner, or None if the query fails."""
    try:
        return session.company_info()
    except Exception as e:
        logger.error("Error retrieving company information: %s", e)
        return None


def fetch_directory(session: AccountingSession) -> EntityDirectory:
    """
    Snapshot employees and payroll items from the session.

    A failed query, whether rejected by QuickBooks or broken in the COM
    layer, leaves that half of the directory empty; every record then
    resolves as not found instead of the run aborting.
    """
    try:
        employees = session.list_employees()
    except Exception as e:
        logger.error("Error retrieving employees: %s", e)
        employees = []

    try:
        payroll_items = session.list_payroll_items()
    except Exception as e:
        logger.error("Error retrieving payroll items: %s", e)
        payroll_items = []

    return EntityDirectory(employees=employees, payroll_items=payroll_items)


class ImportCoordinator:
    """Imports earnings records into QuickBooks through one session."""

    def __init__(
        self,
        session: AccountingSession,
        directory: EntityDirectory,
        build_transaction: TransactionBuilder,
    ):
        """
        Initialize the coordinator.

        Args:
            session: Open accounting session, owned by the caller
            directory: Snapshot taken at the start of the run
            build_transaction: Turns a resolved record into a transaction
        """
        self.session = session
        self.directory = directory
        self.resolver = NameResolver(directory)
        self.build_transaction = build_transaction

    def run(
        self,
        records: Iterable[EarningsRecord],
        txn_date: FinancialDate | None = None,
        batch: bool = False,
        dry_run: bool = False,
    ) -> ImportReport:
        """
        Import records in input order.

        Args:
            records: Earnings records to import
            txn_date: Date for every transaction (default: today)
            batch: Send all transactions in one request instead of one each
            dry_run: Resolve and build only; submit nothing

        Returns:
            ImportReport with one outcome per record
        """
        txn_date = txn_date or FinancialDate.today()
        report = ImportReport(dry_run=dry_run, batch=batch, start_time=datetime.now())

        ready: list[RecordOutcome] = []
        for record in records:
            outcome = self._prepare(record, txn_date)
            report.outcomes.append(outcome)
            if outcome.state is not RecordState.SUBMITTED:
                continue

            if dry_run:
                outcome.state = RecordState.DRY_RUN
            elif batch:
                ready.append(outcome)
            else:
                self._submit_one(outcome)

        if batch and not dry_run:
            self._submit_batch(ready)

        report.end_time = datetime.now()
        logger.info("Import finished: %s", report.summary())
        return report

    def _prepare(self, record: EarningsRecord, txn_date: FinancialDate) -> RecordOutcome:
        """Resolve and build one record; leaves it SUBMITTED when ready to send."""
        outcome = RecordOutcome(record=record)

        try:
            outcome.employee = self.resolver.resolve_employee(record.employee_name)
            if not outcome.employee.found:
                outcome.state = RecordState.EMPLOYEE_UNRESOLVED
                outcome.message = outcome.employee.reason
                logger.warning("Employee not found: '%s'. Skipping record.", record.employee_name)
                return outcome

            outcome.payroll_item = self.resolver.resolve_payroll_item(record.earnings_type)
            if not outcome.payroll_item.found:
                outcome.state = RecordState.ITEM_UNRESOLVED
                outcome.message = outcome.payroll_item.reason
                logger.warning(
                    "Payroll item not found for type: '%s'. Skipping record.", record.earnings_type
                )
                return outcome
            if outcome.payroll_item.is_fallback:
                outcome.warnings.append(outcome.payroll_item.warning)

            outcome.transaction = self.build_transaction(
                record, outcome.employee.list_id, outcome.payroll_item.list_id, txn_date
            )
            outcome.state = RecordState.SUBMITTED
        except Exception as e:
            logger.error("Error processing record for %s: %s", record.employee_name, e)
            outcome.state = RecordState.FAILED
            outcome.message = str(e)

        return outcome

    def _submit_one(self, outcome: RecordOutcome) -> None:
        logger.info("Adding %s for %s", outcome.record.earnings_type, outcome.record.employee_name)
        try:
            result = self.session.submit(outcome.transaction)
        except Exception as e:
            logger.error("Error processing record for %s: %s", outcome.record.employee_name, e)
            outcome.state = RecordState.FAILED
            outcome.message = str(e)
            return

        self._apply_result(outcome, result)

    def _submit_batch(self, ready: list[RecordOutcome]) -> None:
        if not ready:
            return

        logger.info("Submitting %d transactions in one request", len(ready))
        try:
            results = self.session.submit_batch([outcome.transaction for outcome in ready])
        except Exception as e:
            logger.error("Error during batch import: %s", e)
            for outcome in ready:
                outcome.state = RecordState.FAILED
                outcome.message = str(e)
            return

        for index, outcome in enumerate(ready):
            if index < len(results):
                self._apply_result(outcome, results[index])
            else:
                outcome.state = RecordState.FAILED
                outcome.message = "no response for request"

    def _apply_result(self, outcome: RecordOutcome, result: SubmissionResult) -> None:
        outcome.status_code = result.status_code
        if result.ok:
            outcome.state = RecordState.SUCCEEDED
            outcome.txn_id = result.txn_id
            logger.info("Success: created transaction with TxnID: %s", result.txn_id)
            return

        outcome.state = RecordState.FAILED
        outcome.message = result.status_message
        if result.severity == "Error":
            logger.error("Error: %s - %s", result.status_code, result.status_message)
        else:
            logger.warning("Warning: %s - %s", result.status_code, result.status_message)
