"""
Export Package

Converts ledger transactions into the monthly CSV report.

Key Components:
- csv_writer: row rendering (placeholder and income-flip rules) and batched CSV output
- runner: fetch → resolve → write orchestration for one reporting period
"""

from .csv_writer import (
    ERROR_MARKER,
    HEADERS,
    PLACEHOLDER,
    CsvWriteError,
    ExportRow,
    TransactionCsvWriter,
    transaction_to_row,
)
from .runner import ExportSummary, export_period

__all__ = [
    "ERROR_MARKER",
    "HEADERS",
    "PLACEHOLDER",
    "CsvWriteError",
    "ExportRow",
    "ExportSummary",
    "TransactionCsvWriter",
    "export_period",
    "transaction_to_row",
]
