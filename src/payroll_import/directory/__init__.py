"""
Entity Directory Package

Authoritative snapshot of QuickBooks employees and payroll wage items, and the
name resolution that maps CSV text onto it.

Key Components:
- models: Employee, PayrollItem and the read-only EntityDirectory
- resolver: employee and payroll item matching cascades
"""

from .models import Employee, EntityDirectory, PayrollItem
from .resolver import (
    EARNINGS_TYPE_SYNONYMS,
    MatchStrategy,
    NameResolver,
    Resolution,
    candidate_item_names,
    resolve_employee,
    resolve_payroll_item,
)

__all__ = [
    # Directory models
    "Employee",
    "EntityDirectory",
    "PayrollItem",
    # Resolution
    "EARNINGS_TYPE_SYNONYMS",
    "MatchStrategy",
    "NameResolver",
    "Resolution",
    "candidate_item_names",
    "resolve_employee",
    "resolve_payroll_item",
]
