#!/usr/bin/env python3
"""
Main CLI Entry Point for Payroll Import

Provides the `payroll-import` command group: earnings imports as checks or
time entries, plus a company diagnostics command.
"""

import logging
import os

import click

from ..core.config import get_config, reload_config
from ..core.exceptions import SessionError
from ..quickbooks.session import open_session


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Payroll Import - QuickBooks Desktop Earnings Tools

    Imports employee earnings from CSV files into QuickBooks as checks or
    time-tracking entries.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["PAYROLL_IMPORT_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("payroll_import").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    # Overrides above only take effect on a fresh load
    ctx.obj["config"] = reload_config() if config_env or debug else get_config()
    # Tests swap in an in-memory session here
    ctx.obj.setdefault("session_factory", open_session)

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Data directory: {ctx.obj['config'].data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from payroll_import import __author__, __version__

    click.echo(f"Payroll Import v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Reports Directory: {config_obj.importer.reports_dir}")
    click.echo(f"  QuickBooks App: {config_obj.quickbooks.app_name} ({config_obj.quickbooks.app_id})")
    click.echo(f"  Company File: {config_obj.quickbooks.company_file or '<currently open>'}")
    click.echo(
        f"  SDK Version: {config_obj.quickbooks.country} "
        f"{config_obj.quickbooks.sdk_major_version}.{config_obj.quickbooks.sdk_minor_version}"
    )
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


@main.command("company-info")
@click.pass_context
def company_info(ctx: click.Context) -> None:
    """
    Show company details, employees and payroll wage items.

    Useful for checking what names a CSV can refer to before importing.

    Example:
      payroll-import company-info
    """
    from ..importer.coordinator import fetch_company_info, fetch_directory
    from .output import echo_company_info, echo_employees, echo_payroll_items

    config_obj = ctx.obj["config"]
    session_factory = ctx.obj["session_factory"]

    try:
        with session_factory(config_obj.quickbooks) as session:
            echo_company_info(fetch_company_info(session))
            directory = fetch_directory(session)
            echo_employees(directory)
            echo_payroll_items(directory)
    except SessionError as e:
        raise click.ClickException(
            f"Failed to connect to QuickBooks. Ensure QuickBooks is open and try again. ({e})"
        ) from e


from .imports import checks, time  # noqa: E402

main.add_command(checks)
main.add_command(time)


if __name__ == "__main__":
    main()
