"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

from actual_export.actual.models import ActualAccount, ActualCategory, ActualPayee
from actual_export.actual.resolver import NameResolver
from actual_export.core import config as config_module


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def checking_account() -> ActualAccount:
    """Open checking account used by most row tests."""
    return ActualAccount(id="a1", name="Checking")


@pytest.fixture
def resolver() -> NameResolver:
    """Resolver with one income category, one expense category and two payees."""
    return NameResolver.from_entities(
        [
            ActualCategory(id="c1", name="Salary", is_income=True),
            ActualCategory(id="c2", name="Groceries"),
        ],
        [
            ActualPayee(id="p1", name="Employer"),
            ActualPayee(id="p2", name="Corner Market, Inc."),
        ],
    )


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables."""
    monkeypatch.setenv("ACTUAL_EXPORT_ENV", "test")
    monkeypatch.setenv("ACTUAL_API_URL", "http://actual.test/v1")
    monkeypatch.setenv("ACTUAL_API_KEY", "test-key")
    monkeypatch.setenv("BUDGET_SYNC_ID", "test-budget")
    monkeypatch.setenv("TRANSACTION_OUTPUT_DIR", str(tmp_path / "transactions"))
    monkeypatch.delenv("ACTUAL_TIMEOUT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    # Each test starts without a cached configuration
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "actual: Tests for Actual Budget integration")
    config.addinivalue_line("markers", "export: Tests for CSV export")
