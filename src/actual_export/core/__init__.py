"""
Core Utilities Package

Shared primitives used across the exporter.

This package provides:
- Currency handling with integer arithmetic for precision
- Money and reporting-period value types
- Configuration management for environment-specific settings
"""

from .config import (
    ActualConfig,
    Config,
    Environment,
    get_config,
    reload_config,
)
from .currency import cents_to_dollars_str
from .dates import ReportingPeriod
from .money import Money

__all__ = [
    # Configuration
    "ActualConfig",
    "Config",
    "Environment",
    "Money",
    "ReportingPeriod",
    # Currency utilities
    "cents_to_dollars_str",
    "get_config",
    "reload_config",
]
