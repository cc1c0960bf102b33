#!/usr/bin/env python3
"""
Transaction CSV Writer

Turns ledger transactions into report rows and streams them to CSV.

Posting rules:
- Unknown or unnamed payee → placeholder
- Unknown or unnamed category → placeholder in both the account and category columns
- Income category → double-entry flip: the category becomes the source
  ("account" column), the account becomes the destination ("category"
  column) and the amount sign is inverted
- Ledger error annotations are prefixed with a reviewer marker
"""

import csv
import io
import logging
from collections.abc import Sequence
from dataclasses import astuple, dataclass
from typing import TextIO

from ..actual.models import ActualAccount, ActualTransaction
from ..actual.resolver import NameResolver

logger = logging.getLogger(__name__)

HEADERS = ("account", "date", "payee", "amount", "category", "notes", "error")

# Marks a name that could not be resolved, for a human to fix up
PLACEHOLDER = "FIXME"

ERROR_MARKER = "[FIXME] "


class CsvWriteError(Exception):
    """Raised when rows cannot be written to the output stream"""

    def __init__(self, message: str, account_name: str | None = None):
        super().__init__(message)
        self.account_name = account_name


@dataclass(frozen=True)
class ExportRow:
    """One CSV report row. Field order matches HEADERS."""

    account: str
    date: str
    payee: str
    amount: str
    category: str
    notes: str
    error: str

    def as_record(self) -> list[str]:
        """Get the row as a list of column values in header order."""
        return list(astuple(self))


def transaction_to_row(
    account: ActualAccount,
    transaction: ActualTransaction,
    resolver: NameResolver,
) -> ExportRow:
    """
    Render one transaction as a report row.

    Pure: the transaction is never modified, the income flip only affects
    the returned row.

    Args:
        account: Account owning the transaction
        transaction: Transaction to render
        resolver: Category and payee lookups

    Returns:
        ExportRow for the transaction
    """
    payee = resolver.payee_for(transaction.payee)
    payee_name = payee.name if payee is not None and payee.name else PLACEHOLDER

    amount = transaction.amount
    category = resolver.category_for(transaction.category)
    if category is None or not category.name:
        account_name = PLACEHOLDER
        category_name = PLACEHOLDER
    elif category.is_income:
        account_name = category.name
        category_name = account.name
        amount = -amount
    else:
        account_name = account.name
        category_name = category.name

    error = f"{ERROR_MARKER}{transaction.error}" if transaction.error else ""

    return ExportRow(
        account=account_name,
        date=transaction.date,
        payee=payee_name,
        amount=amount.to_decimal_str(),
        category=category_name,
        notes=transaction.notes or "",
        error=error,
    )


class TransactionCsvWriter:
    """
    Streams report rows for one output file.

    The header is written once, on construction. Each account's rows are
    then written as one batch and flushed immediately, so rows of earlier
    accounts survive a failure on a later one.

    Example:
        >>> with open("2024-03.csv", "w", newline="", encoding="utf-8") as f:
        ...     writer = TransactionCsvWriter(f, resolver)
        ...     writer.add(checking, transactions)
    """

    def __init__(self, destination: TextIO, resolver: NameResolver):
        self.destination = destination
        self.resolver = resolver
        self.rows_written = 0

        try:
            self._write_records([HEADERS])
        except (OSError, ValueError) as e:
            raise CsvWriteError(f"Failed to write CSV header: {e}") from e

    def add(self, account: ActualAccount, transactions: Sequence[ActualTransaction]) -> int:
        """
        Write all of an account's transactions as one batch.

        Args:
            account: Account owning the transactions
            transactions: Transactions in the order they should appear

        Returns:
            Number of rows written (0 for an empty batch, which writes nothing)

        Raises:
            CsvWriteError: If the stream rejects the write or flush
        """
        if not transactions:
            return 0

        records = [transaction_to_row(account, tx, self.resolver).as_record() for tx in transactions]

        try:
            self._write_records(records)
        except (OSError, ValueError) as e:
            raise CsvWriteError(
                f"Failed to write {len(records)} rows for account {account.name}: {e}",
                account_name=account.name,
            ) from e

        self.rows_written += len(records)
        logger.debug("Wrote %d rows for account %s", len(records), account.name)
        return len(records)

    def _write_records(self, records: Sequence[Sequence[str]]) -> None:
        """Render records in memory, then hand them to the destination in one write and flush."""
        buffer = io.StringIO()
        csv.writer(buffer).writerows(records)
        self.destination.write(buffer.getvalue())
        self.destination.flush()
