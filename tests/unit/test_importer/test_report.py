#!/usr/bin/env python3
"""Unit tests for import outcomes and the run report."""

import json
from datetime import date, datetime

import pandas as pd
import pytest

from payroll_import.core.dates import FinancialDate
from payroll_import.core.money import Money
from payroll_import.directory.resolver import MatchStrategy, Resolution
from payroll_import.earnings.models import AmountEarnings
from payroll_import.importer.report import OUTCOME_COLUMNS, ImportReport, RecordOutcome, RecordState
from payroll_import.quickbooks.models import CheckTransaction


def outcome(state: RecordState, name: str = "Jane", line_number: int = 2, **kwargs) -> RecordOutcome:
    record = AmountEarnings(employee_name=name, line_number=line_number, amount=Money.from_cents(100), category="Bonus")
    return RecordOutcome(record=record, state=state, **kwargs)


@pytest.fixture
def mixed_report() -> ImportReport:
    return ImportReport(
        outcomes=[
            outcome(
                RecordState.SUCCEEDED,
                "Jane",
                2,
                employee=Resolution(query="Jane", list_id="E2", strategy=MatchStrategy.FIRST_NAME),
                txn_id="TXN-1",
                status_code=0,
            ),
            outcome(RecordState.EMPLOYEE_UNRESOLVED, "Ghost", 3, message="employee not found"),
            outcome(RecordState.FAILED, "John", 4, status_code=3120, message="Object not found"),
            outcome(RecordState.SUCCEEDED, "Bob", 5, txn_id="TXN-2", warnings=["first", "second"]),
        ],
        start_time=datetime(2024, 7, 31, 9, 0, 0),
        end_time=datetime(2024, 7, 31, 9, 0, 2),
    )


@pytest.mark.importer
class TestImportReportCounts:
    """Test aggregate counts."""

    def test_counts(self, mixed_report):
        assert mixed_report.attempted == 4
        assert mixed_report.succeeded == 2
        assert mixed_report.skipped == 1
        assert mixed_report.failed == 1
        assert mixed_report.success_rate == 50.0
        assert mixed_report.summary() == "2 of 4 succeeded"

    def test_processing_time(self, mixed_report):
        assert mixed_report.processing_time == 2.0
        assert ImportReport().processing_time is None


@pytest.mark.importer
class TestImportReportExport:
    """Test outcome log export."""

    def test_dataframe_has_one_row_per_outcome(self, mixed_report):
        df = mixed_report.to_dataframe()

        assert list(df.columns) == OUTCOME_COLUMNS
        assert len(df) == 4
        assert df.loc[0, "employee_match"] == "first_name"
        assert df.loc[3, "warnings"] == "first; second"

    def test_empty_report_dataframe_keeps_columns(self):
        df = ImportReport().to_dataframe()
        assert list(df.columns) == OUTCOME_COLUMNS
        assert df.empty

    def test_write_csv(self, mixed_report, tmp_path):
        path = mixed_report.write(tmp_path / "out" / "outcomes.csv")

        df = pd.read_csv(path)
        assert list(df["state"]) == ["succeeded", "employee_unresolved", "failed", "succeeded"]
        assert list(df["line_number"]) == [2, 3, 4, 5]

    def test_write_json(self, mixed_report, tmp_path):
        path = mixed_report.write(tmp_path / "outcomes.json")

        data = json.loads(path.read_text())

        assert data["summary"]["succeeded"] == 2
        assert data["metadata"]["start_time"] == "2024-07-31T09:00:00"
        assert data["metadata"]["processing_time"] == 2.0
        assert data["outcomes"][0]["transaction"] is None
        assert data["outcomes"][1]["message"] == "employee not found"

    def test_write_json_includes_built_transaction(self, tmp_path):
        check = CheckTransaction(
            payee_list_id="E2",
            txn_date=FinancialDate(date=date(2024, 7, 31)),
            expense_account_list_id="P3",
            amount=Money.from_cents(50000),
            memo="Bonus",
            line_memo="Bonus",
        )
        report = ImportReport(outcomes=[outcome(RecordState.DRY_RUN, transaction=check)], dry_run=True)

        data = json.loads(report.write(tmp_path / "dry_run.json").read_text())

        assert data["metadata"]["dry_run"] is True
        assert data["metadata"]["processing_time"] is None
        assert data["outcomes"][0]["transaction"]["payee_list_id"] == "E2"
        assert data["outcomes"][0]["transaction"]["txn_date"] == "2024-07-31"
        assert data["outcomes"][0]["transaction"]["amount_cents"] == 50000
