"""
Earnings Package

CSV earnings rows as typed domain models.

Key Components:
- models: AmountEarnings and HourlyEarnings records, EarningsLayout
- loader: fail-soft CSV parsing
"""

from .loader import load_earnings, parse_earnings_lines
from .models import (
    AmountEarnings,
    EarningsLayout,
    EarningsRecord,
    HourlyEarnings,
)

__all__ = [
    "AmountEarnings",
    "EarningsLayout",
    "EarningsRecord",
    "HourlyEarnings",
    "load_earnings",
    "parse_earnings_lines",
]
