#!/usr/bin/env python3
"""
Main CLI Entry Point for Actual Export

Provides the command-line interface for exporting ledger transactions.
"""

import logging
import os
from pathlib import Path

import click

from ..actual.client import ActualApiError, ActualClient
from ..core.config import get_config
from ..core.dates import ReportingPeriod
from ..export.csv_writer import CsvWriteError
from ..export.runner import export_period


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
    Actual Export - Monthly CSV reports from an Actual Budget ledger

    Resolves category, payee and account names and posts income categories
    with double-entry conventions.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["ACTUAL_EXPORT_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    try:
        config = get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("actual_export").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Output directory: {config.output_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from actual_export import __author__, __version__

    click.echo(f"Actual Export v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]
    settings = config_obj.to_dict()

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {settings['environment']}")
    click.echo(f"  API URL: {settings['actual']['base_url']}")
    click.echo(f"  API Key: {settings['actual']['api_key']}")
    click.echo(f"  Budget Sync ID: {settings['actual']['budget_sync_id']}")
    click.echo(f"  Timeout: {settings['actual']['timeout']}s")
    click.echo(f"  Output Directory: {settings['output_dir']}")
    click.echo(f"  Debug Mode: {settings['debug']}")
    click.echo(f"  Log Level: {settings['log_level']}")


def _parse_month(ctx: click.Context, param: click.Parameter, value: str | None) -> ReportingPeriod:
    if value is None:
        return ReportingPeriod.current()
    try:
        return ReportingPeriod.from_string(value)
    except ValueError as e:
        raise click.BadParameter(f"expected YYYY-MM, got {value!r}") from e


@main.command()
@click.option(
    "--month",
    "period",
    callback=_parse_month,
    help="Month to export as YYYY-MM (default: current month)",
)
@click.option("--output-dir", help="Override output directory")
@click.pass_context
def export(ctx: click.Context, period: ReportingPeriod, output_dir: str | None) -> None:
    """
    Export one month of transactions to CSV.

    Examples:
      actual-export export
      actual-export export --month 2024-03 --output-dir ~/reports
    """
    config_obj = ctx.obj["config"]
    output_path = Path(output_dir).expanduser() if output_dir else config_obj.output_dir

    if ctx.obj.get("verbose", False):
        click.echo("Transaction Export")
        click.echo(f"Period: {period.start_date} to {period.end_date}")
        click.echo(f"Output: {output_path / period.filename}")
        click.echo()

    client = ActualClient.from_config(config_obj.actual)

    try:
        summary = export_period(client, period, output_path)
    except ActualApiError as e:
        raise click.ClickException(f"Failed to fetch ledger data: {e}") from e
    except (CsvWriteError, OSError) as e:
        raise click.ClickException(f"Failed to write CSV: {e}") from e

    click.echo(f"✅ Exported {summary.transactions_written} transactions to: {summary.output_file}")
    click.echo(f"  Accounts exported: {len(summary.accounts_exported)}")
    if summary.accounts_skipped:
        click.echo(f"  Closed accounts skipped: {', '.join(summary.accounts_skipped)}")
    if summary.has_failures:
        click.echo(f"⚠️  Accounts that failed to fetch: {', '.join(summary.accounts_failed)}")


if __name__ == "__main__":
    main()
