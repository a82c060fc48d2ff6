#!/usr/bin/env python3
"""Console rendering shared by the CLI commands."""

import click

from ..directory.models import EntityDirectory
from ..earnings.models import EarningsRecord
from ..importer.report import ImportReport, RecordState
from ..quickbooks.models import CompanyInfo


def echo_company_info(info: CompanyInfo | None) -> None:
    click.echo("\nCompany Information:")
    click.echo("-" * 19)
    if info is None:
        click.echo("Company information unavailable.")
    else:
        click.echo(f"Company Name: {info.company_name}")
        click.echo(f"Legal Company Name: {info.legal_company_name}")
        click.echo(f"First Month of Fiscal Year: {info.first_month_fiscal_year}")
        click.echo(f"First Month of Income Tax Year: {info.first_month_income_tax_year}")
    click.echo("-" * 19)


def echo_employees(directory: EntityDirectory) -> None:
    click.echo("\nAvailable employees in QuickBooks:")
    click.echo("-" * 34)
    for employee in directory.iter_employees():
        click.echo(f"ID: {employee.list_id}, Name: {employee.name}, Full Name: {employee.full_name}")
    click.echo(f"Total employees: {len(directory.employees)}")
    click.echo("-" * 34)


def echo_payroll_items(directory: EntityDirectory) -> None:
    click.echo("\nAvailable payroll wage items:")
    click.echo("-" * 29)
    for item in directory.iter_payroll_items():
        click.echo(f"ID: {item.list_id}, Name: {item.name}")
    click.echo(f"Total payroll items: {len(directory.payroll_items)}")
    click.echo("-" * 29)


def echo_preview(records: list[EarningsRecord], rows: int) -> None:
    """Show the first few parsed records."""
    if rows <= 0 or not records:
        return

    click.echo("\nCSV Data Preview:")
    click.echo("-" * 16)
    for record in records[:rows]:
        click.echo(record.describe())
    click.echo("-" * 16)


def echo_report(report: ImportReport, verbose: bool = False) -> None:
    """Per-record problems (all outcomes when verbose) and the final tally."""
    for outcome in report.outcomes:
        label = f"line {outcome.record.line_number} '{outcome.record.employee_name}'"
        if outcome.state is RecordState.SUCCEEDED:
            if verbose:
                click.echo(f"✅ {label}: TxnID {outcome.txn_id}")
        elif outcome.state is RecordState.DRY_RUN:
            click.echo(f"🔎 {label}: ready ({outcome.transaction.kind})")
        elif outcome.state is RecordState.FAILED:
            click.echo(f"❌ {label}: {outcome.message}")
        else:
            click.echo(f"⚠️  {label}: skipped, {outcome.message}")

        for warning in outcome.warnings:
            click.echo(f"   WARNING: {warning}")

    click.echo()
    if report.dry_run:
        ready = sum(1 for outcome in report.outcomes if outcome.state is RecordState.DRY_RUN)
        click.echo(f"Dry run: {ready} of {report.attempted} earnings records ready to import.")
    else:
        click.echo(f"Import complete: {report.summary()}.")
        click.echo(f"   Skipped: {report.skipped}")
        click.echo(f"   Failed: {report.failed}")
