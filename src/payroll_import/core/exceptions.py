#!/usr/bin/env python3
"""
Exception Hierarchy for Payroll Import

    PayrollImportError (base)
    |
    +-- SessionError      could not open or use the QuickBooks session
    |   +-- QueryError    a list query came back with a non-zero status

Resolution misses and rejected submissions are not exceptions; they are
reported through result objects so one bad record never stops a batch.
"""


class PayrollImportError(Exception):
    """Base class for all payroll import errors."""


class SessionError(PayrollImportError):
    """The accounting-system session could not be opened or used."""


class QueryError(SessionError):
    """A directory query returned a non-zero status code."""

    def __init__(self, query: str, status_code: int, status_message: str):
        self.query = query
        self.status_code = status_code
        self.status_message = status_message
        super().__init__(f"{query} failed with status {status_code}: {status_message}")
