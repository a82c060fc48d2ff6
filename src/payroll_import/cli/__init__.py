"""
Command Line Interface Package

The `payroll-import` command.

Command Structure:
- payroll-import version / config: utility commands
- payroll-import company-info: company details, employees and payroll items
- payroll-import checks: flat earnings CSV imported as checks
- payroll-import time: hourly earnings CSV imported as time-tracking entries

Import commands prompt for the CSV path and transaction date when they are not
given as options, preview the parsed rows, and finish with a per-record
summary. Pass --report-file to keep the outcome log.
"""
