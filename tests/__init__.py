"""
Test Suite for Payroll Import

Test Structure:
- fixtures/: Shared test doubles
- unit/: Unit tests mirroring src/ package structure
- integration/: Configuration and CLI workflow tests

Test Categories:
- Core utilities (currency, dates, config)
- Employee and payroll item resolution
- Earnings CSV loading
- Import coordination and reporting
- QuickBooks session wrapper

Test Data:
All employees, items and amounts are synthetic. No test talks to a real
QuickBooks company file.
"""
