"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import pytest

from payroll_import.core.config import reload_config
from payroll_import.directory.models import Employee, EntityDirectory, PayrollItem
from tests.fixtures.fake_session import FakeSession


@pytest.fixture
def sample_employees() -> list[Employee]:
    """Synthetic employee list in QuickBooks query order."""
    return [
        Employee(list_id="E1", name="Doe, John", first_name="John", last_name="Doe"),
        Employee(list_id="E2", name="Jane Smith", first_name="Jane", last_name="Smith"),
        Employee(list_id="E3", name="Bob Wilson", first_name="Robert", last_name="Wilson"),
        Employee(list_id="E4", name="Maria Garcia Lopez", first_name="Maria", last_name="Lopez"),
    ]


@pytest.fixture
def sample_payroll_items() -> list[PayrollItem]:
    """Synthetic payroll wage items in QuickBooks query order."""
    return [
        PayrollItem(list_id="P1", name="Regular Pay"),
        PayrollItem(list_id="P2", name="Sales Commission"),
        PayrollItem(list_id="P3", name="Employee Bonus"),
    ]


@pytest.fixture
def directory(sample_employees, sample_payroll_items) -> EntityDirectory:
    """Directory snapshot built from the sample lists."""
    return EntityDirectory(employees=sample_employees, payroll_items=sample_payroll_items)


@pytest.fixture
def fake_session(sample_employees, sample_payroll_items) -> FakeSession:
    """In-memory session serving the sample lists."""
    return FakeSession(employees=sample_employees, payroll_items=sample_payroll_items)


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temporary file and return its path."""

    def _write(content: str, name: str = "earnings.csv"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables."""
    # Ensure tests never write outside the temporary directory
    monkeypatch.setenv("PAYROLL_IMPORT_ENV", "test")
    monkeypatch.setenv("PAYROLL_IMPORT_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("IMPORT_PREVIEW_ROWS", raising=False)
    monkeypatch.delenv("IMPORT_CHECKS_TO_BE_PRINTED", raising=False)
    reload_config()


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for currency handling and precision"
    )
    config.addinivalue_line(
        "markers", "resolver: Tests for employee and payroll item name resolution"
    )
    config.addinivalue_line(
        "markers", "importer: Tests for import coordination and reporting"
    )
    config.addinivalue_line(
        "markers", "cli: Tests for the payroll-import command line"
    )
