"""
Test Fixtures and Utilities

Shared test doubles for the payroll import suite.

This module provides:
- FakeSession, an in-memory AccountingSession with scripted responses
- session_factory_for, which plugs a FakeSession into the CLI

All names and identifiers are synthetic.
"""
