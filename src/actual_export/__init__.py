"""
Actual Export - Monthly CSV reports from an Actual Budget ledger

Fetches accounts, categories, payees and transactions from the Actual HTTP
API and writes one CSV row per transaction, grouped by account.

Domain Packages:
- core: Currency handling, money and reporting-period types, configuration
- actual: Actual HTTP API client, domain models and name resolution
- export: Row rendering rules and CSV output
- cli: Command-line interface

Example Usage:
    from actual_export.actual import ActualClient
    from actual_export.core import ReportingPeriod
    from actual_export.export import export_period

    client = ActualClient(base_url, api_key, budget_sync_id)
    export_period(client, ReportingPeriod.from_string("2024-03"), Path("transactions"))
"""

__version__ = "0.1.0"
__author__ = "Karl Davis"

from .core.config import Environment, get_config
from .core.money import Money
from .export.csv_writer import ExportRow, TransactionCsvWriter, transaction_to_row
from .export.runner import export_period

__all__ = [
    # Configuration
    "Environment",
    "get_config",
    # Core types
    "Money",
    # Export
    "ExportRow",
    "TransactionCsvWriter",
    "export_period",
    "transaction_to_row",
]
