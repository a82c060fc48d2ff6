#!/usr/bin/env python3
"""
Import CLI - Earnings to Checks or Time Entries

Both commands follow the same run:

1. Open the QuickBooks session (released on every exit path)
2. Snapshot employees and payroll wage items
3. Read and preview the CSV
4. Ask for the transaction date
5. Import, report, and optionally write the outcome log
"""

from pathlib import Path

import click

from ..core.dates import FinancialDate
from ..core.exceptions import SessionError
from ..earnings.loader import load_earnings
from ..earnings.models import EarningsLayout
from ..importer.coordinator import ImportCoordinator, fetch_company_info, fetch_directory
from ..importer.transactions import builder_for
from .output import echo_company_info, echo_employees, echo_payroll_items, echo_preview, echo_report


def _import_options(command):
    """Options shared by the import commands."""
    options = [
        click.option("--csv-file", type=click.Path(dir_okay=False), help="Earnings CSV (prompted if omitted)"),
        click.option("--date", "date_str", help="Transaction date MM/DD/YYYY (prompted if omitted)"),
        click.option("--batch", is_flag=True, help="Send all transactions in a single request"),
        click.option("--dry-run", is_flag=True, help="Resolve names and build transactions without submitting"),
        click.option(
            "--report-file",
            help="Write the per-record outcome log (.csv or .json); relative names go under the reports directory",
        ),
        click.option("--verbose", "-v", is_flag=True, help="Enable verbose output"),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def _resolve_date(date_str: str | None) -> FinancialDate:
    """Use --date, or prompt; blank or invalid input means today."""
    if date_str is None:
        date_str = click.prompt(
            "Enter transaction date (MM/DD/YYYY) [Default: Today]",
            default="",
            show_default=False,
            type=str,
        )

    try:
        return FinancialDate.from_user_input(date_str)
    except ValueError:
        click.echo("Invalid date format. Using today's date instead.")
        return FinancialDate.today()


def _report_path(report_file: str, reports_dir: Path) -> Path:
    """Relative report names land in the configured reports directory."""
    path = Path(report_file).expanduser()
    return path if path.is_absolute() else reports_dir / path


def run_import(
    ctx: click.Context,
    layout: EarningsLayout,
    csv_file: str | None,
    date_str: str | None,
    batch: bool,
    dry_run: bool,
    report_file: str | None,
    verbose: bool,
) -> None:
    config = ctx.obj["config"]
    session_factory = ctx.obj["session_factory"]
    verbose = verbose or ctx.obj.get("verbose", False)

    try:
        with session_factory(config.quickbooks) as session:
            echo_company_info(fetch_company_info(session))

            directory = fetch_directory(session)
            echo_employees(directory)
            if layout is EarningsLayout.AMOUNT or verbose:
                echo_payroll_items(directory)

            if csv_file is None:
                csv_file = click.prompt("Enter the path to your CSV file", type=str)
            csv_path = Path(csv_file.strip())
            if not csv_path.is_file():
                raise click.ClickException(f"File not found: {csv_path}")

            records = load_earnings(csv_path, layout)
            click.echo(f"Read {len(records)} records from CSV file.")
            echo_preview(records, config.importer.preview_rows)

            txn_date = _resolve_date(date_str)
            if verbose:
                click.echo(f"Transaction date: {txn_date.to_user_string()}")
                click.echo(f"Mode: {'Dry run' if dry_run else 'Batch' if batch else 'One request per record'}")

            coordinator = ImportCoordinator(
                session,
                directory,
                builder_for(layout, checks_to_be_printed=config.importer.checks_to_be_printed),
            )
            report = coordinator.run(records, txn_date, batch=batch, dry_run=dry_run)
    except SessionError as e:
        raise click.ClickException(
            f"Failed to connect to QuickBooks. Ensure QuickBooks is open and try again. ({e})"
        ) from e

    echo_report(report, verbose=verbose)

    if report_file:
        output_path = report.write(_report_path(report_file, config.importer.reports_dir))
        click.echo(f"   Outcome log: {output_path}")


@click.command()
@_import_options
@click.pass_context
def checks(
    ctx: click.Context,
    csv_file: str | None,
    date_str: str | None,
    batch: bool,
    dry_run: bool,
    report_file: str | None,
    verbose: bool,
) -> None:
    """
    Import flat earnings (name,amount,category) as checks.

    Examples:
      payroll-import checks --csv-file commissions.csv --date 07/31/2024
      payroll-import checks --csv-file bonuses.csv --dry-run
    """
    run_import(ctx, EarningsLayout.AMOUNT, csv_file, date_str, batch, dry_run, report_file, verbose)


@click.command()
@_import_options
@click.pass_context
def time(
    ctx: click.Context,
    csv_file: str | None,
    date_str: str | None,
    batch: bool,
    dry_run: bool,
    report_file: str | None,
    verbose: bool,
) -> None:
    """
    Import hourly earnings (name,rate,hours) as time-tracking entries.

    Examples:
      payroll-import time --csv-file timesheet.csv
      payroll-import time --csv-file timesheet.csv --batch
    """
    run_import(ctx, EarningsLayout.HOURLY, csv_file, date_str, batch, dry_run, report_file, verbose)
