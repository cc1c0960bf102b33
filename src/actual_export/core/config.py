#!/usr/bin/env python3
"""
Configuration Management for Actual Export

Handles environment-based configuration with secure defaults and validation.
Values come from environment variables, optionally seeded from a local .env file.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class ActualConfig:
    """Actual Budget HTTP API configuration."""

    base_url: str | None = None
    api_key: str | None = None
    budget_sync_id: str | None = None
    timeout: int = 30


@dataclass
class Config:
    """
    Main configuration class for the exporter.

    Loads configuration from environment variables with defaults
    and validation.
    """

    environment: Environment
    output_dir: Path
    actual: ActualConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("ACTUAL_EXPORT_ENV", "development"))

        output_dir = Path(os.getenv("TRANSACTION_OUTPUT_DIR") or "./transactions").expanduser()

        actual = ActualConfig(
            base_url=(os.getenv("ACTUAL_API_URL") or "").rstrip("/") or None,
            api_key=os.getenv("ACTUAL_API_KEY") or None,
            budget_sync_id=os.getenv("BUDGET_SYNC_ID") or None,
            timeout=int(os.getenv("ACTUAL_TIMEOUT", "30")),
        )

        return cls(
            environment=env,
            output_dir=output_dir,
            actual=actual,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        for env_name, value in [
            ("ACTUAL_API_URL", self.actual.base_url),
            ("ACTUAL_API_KEY", self.actual.api_key),
            ("BUDGET_SYNC_ID", self.actual.budget_sync_id),
        ]:
            if not value:
                errors.append(f"{env_name} is required")

        if self.actual.timeout <= 0:
            errors.append("ACTUAL_TIMEOUT must be positive")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # Reduce noise from the HTTP stack outside of debugging
        if not self.debug:
            logging.getLogger("urllib3").setLevel(logging.WARNING)
            logging.getLogger("requests").setLevel(logging.WARNING)

    def get_sensitive_fields(self) -> list:
        """Get list of field names that contain sensitive data."""
        return ["actual.api_key"]

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Convert configuration to dictionary, optionally excluding sensitive data."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, (Path, Enum)):
                nested_dict: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    full_field_name = f"{field_name}.{nested_name}"

                    if not include_sensitive and full_field_name in self.get_sensitive_fields():
                        nested_dict[nested_name] = "***REDACTED***"
                    else:
                        nested_dict[nested_name] = nested_value

                result[field_name] = nested_dict
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        errors = config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
