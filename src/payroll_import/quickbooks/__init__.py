"""
QuickBooks Desktop Integration Package

The only package that talks to the QBFC SDK.

Key Components:
- models: transactions, submission results, company info
- session: AccountingSession protocol and the COM-backed implementation
"""

from .models import (
    CheckTransaction,
    CompanyInfo,
    SubmissionResult,
    TimeTrackingTransaction,
    Transaction,
)
from .session import AccountingSession, QBFCSession, SessionFactory, open_session

__all__ = [
    "AccountingSession",
    "CheckTransaction",
    "CompanyInfo",
    "QBFCSession",
    "SessionFactory",
    "SubmissionResult",
    "TimeTrackingTransaction",
    "Transaction",
    "open_session",
]
