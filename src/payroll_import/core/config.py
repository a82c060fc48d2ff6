#!/usr/bin/env python3
"""
Configuration Management for Payroll Import

Handles environment-based configuration with secure defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
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
class QuickBooksConfig:
    """QuickBooks Desktop SDK connection settings."""

    app_id: str = "UnityDispatch.PayrollImport"
    app_name: str = "Payroll Import"
    # Empty path means "the company file currently open in QuickBooks"
    company_file: str = ""
    country: str = "US"
    sdk_major_version: int = 16
    sdk_minor_version: int = 0


@dataclass
class ImportConfig:
    """Earnings import behaviour."""

    reports_dir: Path
    preview_rows: int = 5
    checks_to_be_printed: bool = True


@dataclass
class Config:
    """
    Main configuration class for the payroll import tools.

    Loads configuration from environment variables with defaults suited to a
    single-operator desktop install.
    """

    environment: Environment

    data_dir: Path

    quickbooks: QuickBooksConfig
    importer: ImportConfig

    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("PAYROLL_IMPORT_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_payroll_import"
            data_dir = Path(os.getenv("PAYROLL_IMPORT_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("PAYROLL_IMPORT_DATA_DIR", "./data")).expanduser().resolve()

        reports_dir = data_dir / "reports"
        for directory in [data_dir, reports_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        quickbooks = QuickBooksConfig(
            app_id=os.getenv("QB_APP_ID", "UnityDispatch.PayrollImport"),
            app_name=os.getenv("QB_APP_NAME", "Payroll Import"),
            company_file=os.getenv("QB_COMPANY_FILE", ""),
            country=os.getenv("QB_COUNTRY", "US"),
            sdk_major_version=int(os.getenv("QB_SDK_MAJOR", "16")),
            sdk_minor_version=int(os.getenv("QB_SDK_MINOR", "0")),
        )

        importer = ImportConfig(
            reports_dir=reports_dir,
            preview_rows=int(os.getenv("IMPORT_PREVIEW_ROWS", "5")),
            checks_to_be_printed=os.getenv("IMPORT_CHECKS_TO_BE_PRINTED", "true").lower() == "true",
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            quickbooks=quickbooks,
            importer=importer,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.data_dir.exists():
            errors.append(f"data_dir does not exist: {self.data_dir}")

        if not self.quickbooks.app_id:
            errors.append("QB_APP_ID must not be empty")
        if not self.quickbooks.app_name:
            errors.append("QB_APP_NAME must not be empty")
        if self.quickbooks.sdk_major_version <= 0:
            errors.append("QB_SDK_MAJOR must be positive")
        if self.quickbooks.sdk_minor_version < 0:
            errors.append("QB_SDK_MINOR must be non-negative")
        if self.importer.preview_rows < 0:
            errors.append("IMPORT_PREVIEW_ROWS must be non-negative")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, (Path, Enum)):
                result[field_name] = {
                    nested_name: str(nested_value) if isinstance(nested_value, Path) else nested_value
                    for nested_name, nested_value in field_value.__dict__.items()
                }
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
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
