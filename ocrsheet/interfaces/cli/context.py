"""Shared helpers for composing CLI command contexts.

This module centralises common CLI wiring such as resolving the
configuration file and building the spreadsheet service with it.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator

import click

from ocrsheet.app.config import AppConfig, ConfigError
from ocrsheet.domain import InvalidColumn
from ocrsheet.infrastructure.observability import configure_logging, get_logger, log_exception
from ocrsheet.infrastructure.persistence import RecognitionLoadError
from ocrsheet.services import SpreadsheetService

logger = get_logger(__name__)

# Errors that are reported to the user instead of producing a traceback.
USER_ERRORS = (ConfigError, InvalidColumn, RecognitionLoadError)


@dataclass(frozen=True)
class CLIContext:
    """Container for CLI dependencies and configuration."""

    config: AppConfig
    config_path: Path | None
    service_factory: Callable[[AppConfig], SpreadsheetService] = SpreadsheetService

    def service(self) -> SpreadsheetService:
        return self.service_factory(self.config)


def _log_level_from_cli() -> bool:
    """Return True when the enclosing group was given -v or --log-level."""
    ctx = click.get_current_context(silent=True)
    options = ctx.find_object(dict) if ctx is not None else None
    return bool(options and options.get("log_level_from_cli"))


def build_cli_context(config_path: str | Path | None = None) -> CLIContext:
    """Build a CLI context from an optional JSON configuration file.

    Raises:
        click.ClickException: If the configuration file is invalid.
    """
    path = Path(config_path) if config_path is not None else None
    with reported_errors():
        config = AppConfig.load(path)
    if path is not None and not _log_level_from_cli():
        configure_logging(config.log_level)
    return CLIContext(config=config, config_path=path)


@contextmanager
def reported_errors(**context: object) -> Iterator[None]:
    """Turn known user-facing errors into ``click.ClickException``."""
    try:
        yield
    except USER_ERRORS as exc:
        log_exception(logger, "Command failed", exc, **context)
        raise click.ClickException(str(exc)) from exc


config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a JSON configuration file.",
)


__all__ = [
    "CLIContext",
    "USER_ERRORS",
    "build_cli_context",
    "config_option",
    "reported_errors",
]
