#!/usr/bin/env python3
"""
Export Runner

Runs one export: fetch the listings, build the name lookups, then stream
every open account's transactions for the reporting period into
{output_dir}/{YYYY-MM}.csv.

A failed transaction fetch only skips that account. A write failure ends
the run; rows flushed for earlier accounts stay in the file.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..actual.client import ActualApiError, ActualClient
from ..actual.resolver import NameResolver
from ..core.dates import ReportingPeriod
from .csv_writer import TransactionCsvWriter

logger = logging.getLogger(__name__)


@dataclass
class ExportSummary:
    """Outcome of one export run."""

    period: ReportingPeriod
    output_file: Path
    accounts_exported: list[str] = field(default_factory=list)
    accounts_skipped: list[str] = field(default_factory=list)
    accounts_failed: list[str] = field(default_factory=list)
    transactions_written: int = 0

    @property
    def has_failures(self) -> bool:
        return len(self.accounts_failed) > 0


def export_period(client: ActualClient, period: ReportingPeriod, output_dir: Path) -> ExportSummary:
    """
    Export all open accounts' transactions for one reporting period.

    Args:
        client: Ledger API client
        period: Month to export
        output_dir: Directory receiving the CSV file (created if missing)

    Returns:
        ExportSummary describing what was written

    Raises:
        ActualApiError: If accounts, categories or payees cannot be fetched
        CsvWriteError: If the output file cannot be written
    """
    resolver = NameResolver.from_entities(client.fetch_categories(), client.fetch_payees())
    logger.info(
        "Loaded %d categories and %d payees",
        len(resolver.categories),
        len(resolver.payees),
    )

    accounts = client.fetch_accounts()
    logger.info("Found %d accounts", len(accounts))

    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / period.filename
    summary = ExportSummary(period=period, output_file=output_file)

    with open(output_file, "w", newline="", encoding="utf-8") as f:
        writer = TransactionCsvWriter(f, resolver)

        for account in accounts:
            if account.closed:
                logger.info("Skipping closed account: %s", account.name)
                summary.accounts_skipped.append(account.name)
                continue

            try:
                transactions = client.fetch_transactions(account.id, period.start_date, period.end_date)
            except ActualApiError as e:
                logger.warning("Failed to fetch transactions for account %s: %s", account.name, e)
                summary.accounts_failed.append(account.name)
                continue

            if not transactions:
                logger.info("No transactions for account: %s", account.name)
                continue

            written = writer.add(account, transactions)
            summary.accounts_exported.append(account.name)
            summary.transactions_written += written
            logger.info("Wrote %d transactions for account %s", written, account.name)

    if summary.transactions_written == 0:
        logger.info("No transactions found for any account in %s", period)
    else:
        logger.info(
            "Written %d total transactions to %s for month %s",
            summary.transactions_written,
            output_file,
            period,
        )

    return summary
