"""
Payroll Import - QuickBooks Desktop Earnings Tools

Imports employee earnings from CSV files into QuickBooks Desktop as checks or
time-tracking entries, resolving loosely written employee names and earnings
types against the company's employee and payroll item lists.

Key Features:
- Cascading employee name matching (exact, first name, partial, first+last)
- Earnings type synonyms with default and first-item payroll fallbacks
- Continue-on-error imports with a per-record outcome log
- Batch submission and dry-run modes

Domain Packages:
- core: Money, dates, configuration, errors
- directory: Employee/payroll item snapshot and name resolution
- earnings: CSV earnings records and loading
- quickbooks: QBFC session and transaction models
- importer: Import coordination and reporting
- cli: The payroll-import command

Example Usage:
    from payroll_import.directory import EntityDirectory, resolve_employee
    from payroll_import.earnings import EarningsLayout, load_earnings
    from payroll_import.importer import ImportCoordinator, builder_for
"""

__version__ = "0.1.0"
__author__ = "Unity Dispatch"

from .core.config import Environment, get_config
from .core.money import Money
from .directory.models import Employee, EntityDirectory, PayrollItem
from .directory.resolver import resolve_employee, resolve_payroll_item
from .earnings.models import AmountEarnings, EarningsLayout, HourlyEarnings
from .importer.report import ImportReport

__all__ = [
    # Configuration
    "Environment",
    "get_config",
    # Primitives
    "Money",
    # Directory and resolution
    "Employee",
    "EntityDirectory",
    "PayrollItem",
    "resolve_employee",
    "resolve_payroll_item",
    # Earnings
    "AmountEarnings",
    "EarningsLayout",
    "HourlyEarnings",
    # Reporting
    "ImportReport",
]
