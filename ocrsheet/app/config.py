"""Configuration utilities for ocrsheet.

Provides helper functions for loading and parsing configuration from JSON files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when a configuration file is unreadable or invalid."""


def load_config(path: str | Path) -> Dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        A dictionary of configuration values.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


class AppConfig(BaseModel):
    """Settings shared by the CLI and the spreadsheet service."""

    model_config = ConfigDict(extra="forbid")

    export_filename: str = "spreadsheet.csv"
    log_level: str = "INFO"
    encoding: str = "utf-8"

    @field_validator("export_filename")
    @classmethod
    def _plain_filename(cls, value: str) -> str:
        if not value or Path(value).name != value:
            raise ValueError("export_filename must be a bare file name")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_file(cls, path: str | Path) -> "AppConfig":
        """Read settings from a JSON file.

        Raises:
            ConfigError: If the file cannot be read or holds invalid settings.
        """
        try:
            data = load_config(path)
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid config file {path}: {exc}") from exc

    @classmethod
    def load(cls, path: str | Path | None = None) -> "AppConfig":
        """Return settings from ``path``, or the defaults when it is None."""
        if path is None:
            return cls()
        return cls.from_file(path)


__all__ = ["AppConfig", "ConfigError", "LOG_LEVELS", "load_config"]
