"""
Actual Budget Integration Package

Read-only access to an Actual Budget server through its HTTP API.

This package provides:
- Domain models for accounts, categories, payees and transactions
- An HTTP client that fetches those entities for one budget
- A name resolver turning category and payee ids into entities

Key Components:
- models: API payload dataclasses (amounts kept as integer cents)
- client: requests-based API client
- resolver: id → entity lookup tables with optional results
"""

from .client import ActualApiError, ActualClient
from .models import ActualAccount, ActualCategory, ActualPayee, ActualTransaction
from .resolver import NameResolver, build_category_map, build_payee_map

__all__ = [
    # Domain models
    "ActualAccount",
    "ActualCategory",
    "ActualPayee",
    "ActualTransaction",
    # API client
    "ActualApiError",
    "ActualClient",
    # Name resolution
    "NameResolver",
    "build_category_map",
    "build_payee_map",
]
