"""
Fake Actual API for tests.

Serves canned {"data": [...]} payloads through a stand-in requests session,
so the real ActualClient code path (URL building, envelope parsing, model
conversion) is exercised without a network.
"""

from typing import Any
from unittest.mock import MagicMock

BASE_URL = "http://actual.test/v1"
BUDGET = "test-budget"


def api_response(payload: Any, status_code: int = 200) -> MagicMock:
    """Build a stand-in requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


class FakeActualSession:
    """Minimal requests.Session replacement routing GETs by URL."""

    def __init__(
        self,
        accounts: list[dict[str, Any]],
        categories: list[dict[str, Any]],
        payees: list[dict[str, Any]],
        transactions: dict[str, list[dict[str, Any]]],
        failing_accounts: set[str] | None = None,
    ):
        self.headers: dict[str, str] = {}
        self.calls: list[tuple[str, dict[str, str] | None]] = []
        self.routes = {
            f"{BASE_URL}/budgets/{BUDGET}/accounts": accounts,
            f"{BASE_URL}/budgets/{BUDGET}/categories": categories,
            f"{BASE_URL}/budgets/{BUDGET}/payees": payees,
        }
        for account_id, txns in transactions.items():
            self.routes[f"{BASE_URL}/budgets/{BUDGET}/accounts/{account_id}/transactions"] = txns
        self.failing_urls = {
            f"{BASE_URL}/budgets/{BUDGET}/accounts/{account_id}/transactions"
            for account_id in failing_accounts or set()
        }

    def get(self, url: str, params: dict[str, str] | None = None, timeout: int | None = None) -> MagicMock:
        self.calls.append((url, params))
        if url in self.failing_urls:
            return api_response({"error": "boom"}, status_code=500)
        if url not in self.routes:
            return api_response({"error": "not found"}, status_code=404)
        return api_response({"data": self.routes[url]})


def sample_ledger() -> dict[str, Any]:
    """Ledger with an open checking account, a closed account and a savings account."""
    return {
        "accounts": [
            {"id": "a1", "name": "Checking", "closed": False, "offbudget": False},
            {"id": "a2", "name": "Old Card", "closed": True, "offbudget": False},
            {"id": "a3", "name": "Savings", "closed": False, "offbudget": False},
        ],
        "categories": [
            {"id": "c1", "name": "Salary", "is_income": True, "group_id": "g-income"},
            {"id": "c2", "name": "Groceries", "is_income": False, "group_id": "g-food"},
        ],
        "payees": [
            {"id": "p1", "name": "Employer"},
            {"id": "p2", "name": "Corner Market, Inc."},
        ],
        "transactions": {
            "a1": [
                {
                    "id": "t1",
                    "account": "a1",
                    "category": "c1",
                    "payee": "p1",
                    "amount": 500000,
                    "notes": None,
                    "date": "2024-03-15",
                },
                {
                    "id": "t2",
                    "account": "a1",
                    "category": "c2",
                    "payee": "p2",
                    "amount": -4599,
                    "notes": 'Weekly "big" shop',
                    "date": "2024-03-16",
                },
            ],
            "a2": [
                {"id": "t9", "account": "a2", "amount": -100, "date": "2024-03-01"},
            ],
            "a3": [
                {
                    "id": "t3",
                    "account": "a3",
                    "category": None,
                    "payee": None,
                    "amount": -4200,
                    "notes": "",
                    "date": "2024-03-20",
                    "error": "Transfer mismatch",
                },
            ],
        },
    }
