#!/usr/bin/env python3
"""
Import Outcome Models

Per-record outcome log and the aggregate report an import run produces.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

import pandas as pd

from ..core.json_utils import write_json
from ..directory.resolver import Resolution
from ..earnings.models import EarningsRecord
from ..quickbooks.models import Transaction


class RecordState(Enum):
    """
    Lifecycle of one record within a run.

    PENDING → EMPLOYEE_UNRESOLVED | ITEM_UNRESOLVED | SUBMITTED
    SUBMITTED → SUCCEEDED | FAILED

    DRY_RUN marks a record that was resolved and built but deliberately not
    sent. Every state except PENDING and SUBMITTED is final.
    """

    PENDING = "pending"
    EMPLOYEE_UNRESOLVED = "employee_unresolved"
    ITEM_UNRESOLVED = "item_unresolved"
    SUBMITTED = "submitted"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    DRY_RUN = "dry_run"


SKIPPED_STATES = frozenset({RecordState.EMPLOYEE_UNRESOLVED, RecordState.ITEM_UNRESOLVED})


@dataclass
class RecordOutcome:
    """What happened to one earnings record."""

    record: EarningsRecord
    state: RecordState = RecordState.PENDING
    employee: Resolution | None = None
    payroll_item: Resolution | None = None
    transaction: Transaction | None = None
    txn_id: str | None = None
    status_code: int | None = None
    message: str | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.state is RecordState.SUCCEEDED

    def to_dict(self) -> dict[str, Any]:
        """Flat row for the outcome log."""
        return {
            "line_number": self.record.line_number,
            "employee_name": self.record.employee_name,
            "earnings_type": self.record.earnings_type,
            "state": self.state.value,
            "employee_list_id": self.employee.list_id if self.employee else None,
            "employee_match": self.employee.strategy.value if self.employee else None,
            "payroll_item_list_id": self.payroll_item.list_id if self.payroll_item else None,
            "payroll_item_match": self.payroll_item.strategy.value if self.payroll_item else None,
            "txn_id": self.txn_id,
            "status_code": self.status_code,
            "message": self.message,
            "warnings": "; ".join(self.warnings),
        }


@dataclass
class ImportReport:
    """
    Result of one import run.

    Outcomes appear in input order, one per record.
    """

    outcomes: list[RecordOutcome] = field(default_factory=list)
    dry_run: bool = False
    batch: bool = False
    start_time: datetime | None = None
    end_time: datetime | None = None

    @property
    def attempted(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.state is RecordState.SUCCEEDED)

    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.state is RecordState.FAILED)

    @property
    def skipped(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.state in SKIPPED_STATES)

    @property
    def success_rate(self) -> float:
        """Success rate as a percentage."""
        if self.attempted == 0:
            return 0.0
        return (self.succeeded / self.attempted) * 100

    @property
    def processing_time(self) -> float | None:
        if self.start_time is None or self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    def summary(self) -> str:
        """Human-readable tally, e.g. '7 of 10 succeeded'."""
        return f"{self.succeeded} of {self.attempted} succeeded"

    def to_dataframe(self) -> pd.DataFrame:
        """Outcome log as a DataFrame, one row per record."""
        return pd.DataFrame([outcome.to_dict() for outcome in self.outcomes], columns=OUTCOME_COLUMNS)

    def to_dict(self) -> dict[str, Any]:
        return {
            "metadata": {
                "dry_run": self.dry_run,
                "batch": self.batch,
                "start_time": self.start_time.isoformat() if self.start_time else None,
                "end_time": self.end_time.isoformat() if self.end_time else None,
                "processing_time": self.processing_time,
            },
            "summary": {
                "attempted": self.attempted,
                "succeeded": self.succeeded,
                "failed": self.failed,
                "skipped": self.skipped,
                "success_rate": self.success_rate,
            },
            "outcomes": [
                {
                    **outcome.to_dict(),
                    "transaction": outcome.transaction.to_dict() if outcome.transaction else None,
                }
                for outcome in self.outcomes
            ],
        }

    def write(self, output_file: str | Path) -> Path:
        """
        Write the outcome log.

        A ``.json`` suffix writes the full report; anything else writes the
        per-record CSV.
        """
        output_path = Path(output_file)
        if output_path.suffix.lower() == ".json":
            write_json(output_path, self.to_dict())
        else:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self.to_dataframe().to_csv(output_path, index=False)
        return output_path


OUTCOME_COLUMNS = [
    "line_number",
    "employee_name",
    "earnings_type",
    "state",
    "employee_list_id",
    "employee_match",
    "payroll_item_list_id",
    "payroll_item_match",
    "txn_id",
    "status_code",
    "message",
    "warnings",
]
