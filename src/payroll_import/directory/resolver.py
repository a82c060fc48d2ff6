#!/usr/bin/env python3
"""
Name Resolution Module

Maps free-text employee names and earnings categories from an operator's CSV
onto QuickBooks ListIDs. Each resolver runs an ordered cascade of strategies
and stops at the first hit.

All comparisons are case-insensitive on plain lower-cased text; no locale
folding or accent stripping is applied.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .models import Employee, EntityDirectory, PayrollItem

logger = logging.getLogger(__name__)


class MatchStrategy(Enum):
    """Strategy that produced a resolution."""

    EXACT_NAME = "exact_name"
    FIRST_NAME = "first_name"
    PARTIAL_NAME = "partial_name"
    FIRST_LAST_NAME = "first_last_name"
    EXACT_ITEM = "exact_item"
    PARTIAL_ITEM = "partial_item"
    DEFAULT_ITEM = "default_item"
    FIRST_ITEM = "first_item"
    NO_MATCH = "no_match"


# Strategies that guessed rather than matched
FALLBACK_STRATEGIES = frozenset({MatchStrategy.DEFAULT_ITEM, MatchStrategy.FIRST_ITEM})

# Earnings category → QuickBooks payroll item names worth trying, in order.
# Keys are lower-cased so lookups ignore case.
EARNINGS_TYPE_SYNONYMS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "commission": ("Commission", "Sales Commission", "Commissions"),
        "bonus": ("Bonus", "Bonuses", "Employee Bonus"),
        "salary": ("Salary", "Regular Salary", "Base Salary"),
        "regular": ("Regular Pay", "Hourly Rate", "Regular Wages"),
        "overtime": ("Overtime", "OT", "Overtime Pay"),
    }
)

# Payroll item names containing one of these are used when nothing matches
DEFAULT_ITEM_KEYWORDS = ("regular", "salary")


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of resolving one name against the directory.

    `list_id` is None when nothing matched; `reason` then says why.
    `warning` is set when the match is a best-effort guess the operator
    should double-check.
    """

    query: str
    list_id: str | None
    strategy: MatchStrategy
    matched_name: str | None = None
    reason: str | None = None
    warning: str | None = None

    @property
    def found(self) -> bool:
        return self.list_id is not None

    @property
    def is_fallback(self) -> bool:
        return self.strategy in FALLBACK_STRATEGIES

    @classmethod
    def not_found(cls, query: str, reason: str) -> "Resolution":
        return cls(query=query, list_id=None, strategy=MatchStrategy.NO_MATCH, reason=reason)


def candidate_item_names(earnings_type: str) -> list[str]:
    """
    Payroll item names to try for an earnings category.

    Synonyms come first in table order; the category itself is always the
    last candidate, even when it already appears among the synonyms.
    """
    candidates = list(EARNINGS_TYPE_SYNONYMS.get(earnings_type.strip().lower(), ()))
    candidates.append(earnings_type.strip())
    return candidates


class NameResolver:
    """Resolves CSV names against one EntityDirectory snapshot."""

    def __init__(self, directory: EntityDirectory):
        """
        Initialize the resolver.

        Args:
            directory: Snapshot to resolve against. It is only read.
        """
        self.directory = directory

    def resolve_employee(self, employee_name: str) -> Resolution:
        """
        Resolve a free-text employee name to an employee ListID.

        Strategies, first hit wins:
        1. Display name or "First Last" equals the input
        2. First name alone equals the input
        3. Input is contained in the full name or display name
        4. First token equals first name and last token equals last name

        Args:
            employee_name: Name as typed in the CSV

        Returns:
            Resolution; never raises for a missing employee
        """
        query = employee_name.strip()
        if not query:
            return Resolution.not_found(employee_name, "blank employee name")

        employees = list(self.directory.iter_employees())
        if not employees:
            return Resolution.not_found(query, "employee directory is empty")

        needle = query.lower()

        match = self._find_exact_name(needle, employees)
        if match:
            return self._employee_hit(query, match, MatchStrategy.EXACT_NAME)

        match = self._find_first_name(needle, employees)
        if match:
            return self._employee_hit(query, match, MatchStrategy.FIRST_NAME)

        match = self._find_partial_name(needle, employees)
        if match:
            return self._employee_hit(query, match, MatchStrategy.PARTIAL_NAME)

        match = self._find_first_last_name(needle, employees)
        if match:
            return self._employee_hit(query, match, MatchStrategy.FIRST_LAST_NAME)

        logger.debug("No employee matches %r", query)
        return Resolution.not_found(query, "employee not found")

    def resolve_payroll_item(self, earnings_type: str) -> Resolution:
        """
        Resolve an earnings category to a payroll wage item ListID.

        Tries every candidate name for an exact match, then every candidate
        as a substring. If both passes miss, falls back to the first item
        whose name mentions Regular or Salary, and finally to the first item
        of all. Fallback resolutions carry a warning.

        Args:
            earnings_type: Category tag from the CSV, e.g. "Bonus"

        Returns:
            Resolution; not found only when the directory has no items
        """
        query = earnings_type.strip()
        items = list(self.directory.iter_payroll_items())
        if not items:
            logger.error("No payroll items available for %r", query)
            return Resolution.not_found(query, "payroll item directory is empty")

        candidates = candidate_item_names(query)

        for candidate in candidates:
            wanted = candidate.lower()
            for item in items:
                if item.name.lower() == wanted:
                    return self._item_hit(query, item, MatchStrategy.EXACT_ITEM)

        for candidate in candidates:
            wanted = candidate.lower()
            # A blank category would be contained in every name
            if not wanted:
                continue
            for item in items:
                if wanted in item.name.lower():
                    return self._item_hit(query, item, MatchStrategy.PARTIAL_ITEM)

        for item in items:
            item_name = item.name.lower()
            if any(keyword in item_name for keyword in DEFAULT_ITEM_KEYWORDS):
                warning = f"Using default payroll item '{item.name}' for '{query}'"
                logger.warning(warning)
                return self._item_hit(query, item, MatchStrategy.DEFAULT_ITEM, warning)

        first = items[0]
        warning = f"No matching payroll item for '{query}'. Using first available item: {first.name}"
        logger.warning(warning)
        return self._item_hit(query, first, MatchStrategy.FIRST_ITEM, warning)

    def _find_exact_name(self, needle: str, employees: list[Employee]) -> Employee | None:
        for employee in employees:
            if employee.name.lower() == needle or employee.full_name.lower() == needle:
                return employee
        return None

    def _find_first_name(self, needle: str, employees: list[Employee]) -> Employee | None:
        for employee in employees:
            if employee.first_name and employee.first_name.lower() == needle:
                return employee
        return None

    def _find_partial_name(self, needle: str, employees: list[Employee]) -> Employee | None:
        # First hit in directory order wins; several entries may contain the needle
        for employee in employees:
            if needle in employee.full_name.lower() or needle in employee.name.lower():
                return employee
        return None

    def _find_first_last_name(self, needle: str, employees: list[Employee]) -> Employee | None:
        tokens = needle.split()
        if len(tokens) < 2:
            return None

        first, last = tokens[0], tokens[-1]
        for employee in employees:
            if not employee.first_name or not employee.last_name:
                continue
            if employee.first_name.lower() == first and employee.last_name.lower() == last:
                return employee
        return None

    def _employee_hit(self, query: str, employee: Employee, strategy: MatchStrategy) -> Resolution:
        logger.info("Found %s match for '%s': %s", strategy.value, query, employee.full_name)
        return Resolution(
            query=query,
            list_id=employee.list_id,
            strategy=strategy,
            matched_name=employee.full_name,
        )

    def _item_hit(
        self,
        query: str,
        item: PayrollItem,
        strategy: MatchStrategy,
        warning: str | None = None,
    ) -> Resolution:
        if warning is None:
            logger.info("Found %s payroll item for '%s': %s", strategy.value, query, item.name)
        return Resolution(
            query=query,
            list_id=item.list_id,
            strategy=strategy,
            matched_name=item.name,
            warning=warning,
        )


def resolve_employee(employee_name: str, directory: EntityDirectory) -> Resolution:
    """Resolve an employee name against a directory."""
    return NameResolver(directory).resolve_employee(employee_name)


def resolve_payroll_item(earnings_type: str, directory: EntityDirectory) -> Resolution:
    """Resolve an earnings category against a directory."""
    return NameResolver(directory).resolve_payroll_item(earnings_type)
