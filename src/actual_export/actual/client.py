#!/usr/bin/env python3
"""
Actual Budget HTTP Client

Thin read-only client for the Actual HTTP API. Every endpoint answers with
a {"data": [...]} envelope which is converted into domain models here.
No retries are attempted; a failed request raises ActualApiError.
"""

import logging
from typing import Any

import requests

from ..core.config import ActualConfig
from .models import ActualAccount, ActualCategory, ActualPayee, ActualTransaction

logger = logging.getLogger(__name__)


class ActualApiError(Exception):
    """Raised when the Actual API cannot be reached or answers unexpectedly"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ActualClient:
    """
    Client for one budget on an Actual HTTP API server.

    Args:
        base_url: Server root, e.g. "http://localhost:5007/v1"
        api_key: Value sent in the x-api-key header
        budget_sync_id: Sync id of the budget to read
        timeout: Per-request timeout in seconds
        session: Optional pre-configured requests session
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        budget_sync_id: str,
        timeout: int = 30,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.budget_sync_id = budget_sync_id
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"x-api-key": api_key})

    @classmethod
    def from_config(cls, config: ActualConfig) -> "ActualClient":
        """Create a client from validated configuration."""
        if not (config.base_url and config.api_key and config.budget_sync_id):
            raise ValueError("Actual API URL, key and budget sync id are all required")
        return cls(
            base_url=config.base_url,
            api_key=config.api_key,
            budget_sync_id=config.budget_sync_id,
            timeout=config.timeout,
        )

    @property
    def budget_url(self) -> str:
        return f"{self.base_url}/budgets/{self.budget_sync_id}"

    def fetch_accounts(self) -> list[ActualAccount]:
        """Fetch every account in the budget, in server order."""
        data = self._get_data(f"{self.budget_url}/accounts")
        return [ActualAccount.from_dict(item) for item in data]

    def fetch_categories(self) -> list[ActualCategory]:
        """Fetch every category in the budget."""
        data = self._get_data(f"{self.budget_url}/categories")
        return [ActualCategory.from_dict(item) for item in data]

    def fetch_payees(self) -> list[ActualPayee]:
        """Fetch every payee in the budget."""
        data = self._get_data(f"{self.budget_url}/payees")
        return [ActualPayee.from_dict(item) for item in data]

    def fetch_transactions(self, account_id: str, start_date: str, end_date: str) -> list[ActualTransaction]:
        """
        Fetch one account's transactions within a date range.

        Args:
            account_id: Account to read
            start_date: First day included (YYYY-MM-DD)
            end_date: Last day included (YYYY-MM-DD)

        Returns:
            Transactions in server order
        """
        data = self._get_data(
            f"{self.budget_url}/accounts/{account_id}/transactions",
            params={"since_date": start_date, "until_date": end_date},
        )
        return [ActualTransaction.from_dict(item) for item in data]

    def _get_data(self, url: str, params: dict[str, str] | None = None) -> list[dict[str, Any]]:
        """GET a URL and unwrap the "data" list of its JSON body."""
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise ActualApiError(f"Request to {url} failed: {e}") from e

        if response.status_code != 200:
            raise ActualApiError(
                f"Unexpected status code {response.status_code} from {url}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ActualApiError(f"Could not decode response from {url}: {e}") from e

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, list):
            raise ActualApiError(f"Response from {url} has no data list")
        return data
