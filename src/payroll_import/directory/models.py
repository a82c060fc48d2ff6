#!/usr/bin/env python3
"""
Entity Directory Models

Read-only snapshot of the employees and payroll wage items held in QuickBooks.
The snapshot is taken once at the start of a run and never refreshed while
records are being imported.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Employee:
    """
    Employee list entry.

    `name` is the QuickBooks display name ("Doe, John", "John D." or anything
    else the bookkeeper typed). First and last name are optional.
    """

    list_id: str
    name: str
    first_name: str = ""
    last_name: str = ""

    @property
    def full_name(self) -> str:
        """'First Last' when both parts are present, otherwise the display name."""
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.name


@dataclass(frozen=True)
class PayrollItem:
    """Payroll wage item list entry."""

    list_id: str
    name: str


def _index_by_list_id(entries: Iterable[Any], kind: str) -> Mapping[str, Any]:
    """Build a read-only list_id mapping that keeps query order."""
    index: dict[str, Any] = {}
    for entry in entries:
        if entry.list_id in index:
            logger.warning("Duplicate %s ListID %s ignored (%s)", kind, entry.list_id, entry.name)
            continue
        index[entry.list_id] = entry
    return MappingProxyType(index)


class EntityDirectory:
    """
    Immutable snapshot of employees and payroll wage items.

    Iteration order is the order the QuickBooks query returned the entries.
    Substring matching picks the first hit in that order, so reordering the
    source list can change which entry a partial name resolves to.
    """

    def __init__(
        self,
        employees: Iterable[Employee] = (),
        payroll_items: Iterable[PayrollItem] = (),
    ):
        self._employees = _index_by_list_id(employees, "employee")
        self._payroll_items = _index_by_list_id(payroll_items, "payroll item")

    @property
    def employees(self) -> Mapping[str, Employee]:
        """Read-only ListID → Employee mapping."""
        return self._employees

    @property
    def payroll_items(self) -> Mapping[str, PayrollItem]:
        """Read-only ListID → PayrollItem mapping."""
        return self._payroll_items

    def iter_employees(self) -> Iterator[Employee]:
        return iter(self._employees.values())

    def iter_payroll_items(self) -> Iterator[PayrollItem]:
        return iter(self._payroll_items.values())

    def __repr__(self) -> str:
        return (
            f"EntityDirectory(employees={len(self._employees)}, "
            f"payroll_items={len(self._payroll_items)})"
        )
