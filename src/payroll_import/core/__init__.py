"""
Core Utilities Package

Shared primitives used by the directory, earnings and importer packages.

This package provides:
- Currency handling with integer arithmetic for precision
- Date handling for operator-entered check dates
- Configuration management for environment-specific settings
- The exception hierarchy
"""

from .config import (
    Config,
    Environment,
    get_config,
    reload_config,
)
from .currency import (
    cents_to_dollars_str,
    parse_decimal,
    parse_dollars_to_cents,
)
from .dates import USER_DATE_FORMAT, FinancialDate
from .exceptions import PayrollImportError, QueryError, SessionError
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "get_config",
    "reload_config",
    # Currency utilities
    "cents_to_dollars_str",
    "parse_decimal",
    "parse_dollars_to_cents",
    # Primitives
    "FinancialDate",
    "Money",
    "USER_DATE_FORMAT",
    # Errors
    "PayrollImportError",
    "QueryError",
    "SessionError",
]
