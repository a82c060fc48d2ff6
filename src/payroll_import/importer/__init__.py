"""
Importer Package

Continue-on-error import of earnings records into QuickBooks.

Key Components:
- coordinator: ImportCoordinator and directory snapshotting
- transactions: check and time-entry builders
- report: per-record outcomes and the run report
"""

from .coordinator import ImportCoordinator, fetch_company_info, fetch_directory
from .report import ImportReport, RecordOutcome, RecordState
from .transactions import (
    TransactionBuilder,
    build_check,
    build_time_entry,
    builder_for,
    split_duration,
)

__all__ = [
    "ImportCoordinator",
    "ImportReport",
    "RecordOutcome",
    "RecordState",
    "TransactionBuilder",
    "build_check",
    "build_time_entry",
    "builder_for",
    "fetch_company_info",
    "fetch_directory",
    "split_duration",
]
