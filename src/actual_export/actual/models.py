#!/usr/bin/env python3
"""
Actual Budget Domain Models

Type-safe models representing Actual HTTP API data structures.
These models stay true to the API payloads; amounts are integer cents.
"""

import json
from dataclasses import dataclass
from typing import Any

from ..core.money import Money


@dataclass
class ActualAccount:
    """
    Actual account from API.

    Represents a financial account in the budget.
    """

    id: str
    name: str
    closed: bool = False
    offbudget: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ActualAccount":
        """
        Create ActualAccount from API dict.

        Args:
            data: Dictionary from the /accounts endpoint

        Returns:
            ActualAccount instance
        """
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            closed=bool(data.get("closed", False)),
            offbudget=bool(data.get("offbudget", False)),
        )


@dataclass
class ActualCategory:
    """
    Actual category from API.

    Income categories are posted with the double-entry flip when exported.
    """

    id: str
    name: str
    is_income: bool = False
    group_id: str | None = None
    hidden: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ActualCategory":
        """
        Create ActualCategory from API dict.

        Args:
            data: Dictionary from the /categories endpoint

        Returns:
            ActualCategory instance
        """
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            is_income=bool(data.get("is_income", False)),
            group_id=data.get("group_id"),
            hidden=bool(data.get("hidden", False)),
        )


@dataclass
class ActualPayee:
    """Actual payee from API."""

    id: str
    name: str
    transfer_acct: str | None = None  # Set when the payee stands for another account

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ActualPayee":
        """
        Create ActualPayee from API dict.

        Args:
            data: Dictionary from the /payees endpoint

        Returns:
            ActualPayee instance
        """
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            transfer_acct=data.get("transfer_acct"),
        )


@dataclass
class ActualTransaction:
    """
    Actual transaction from API.

    `category` and `payee` are opaque ids that may not resolve to any entity.
    `date` is kept as the YYYY-MM-DD string the API returns.
    """

    id: str
    account: str
    amount: Money
    date: str
    category: str | None = None
    payee: str | None = None
    notes: str = ""
    error: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ActualTransaction":
        """
        Create ActualTransaction from API dict.

        Args:
            data: Dictionary from the /accounts/{id}/transactions endpoint

        Returns:
            ActualTransaction instance
        """
        error = data.get("error")
        if error is not None and not isinstance(error, str):
            # Structured ledger errors are kept as compact JSON
            error = json.dumps(error, sort_keys=True)

        return cls(
            id=data["id"],
            account=data.get("account") or "",
            amount=Money.from_cents(int(data.get("amount") or 0)),
            date=data.get("date") or "",
            category=data.get("category") or None,
            payee=data.get("payee") or None,
            notes=data.get("notes") or "",
            error=error or None,
        )
