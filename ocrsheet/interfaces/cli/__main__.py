"""Entry point for running the ocrsheet CLI.

This module defines a top-level Click group that aggregates all subcommands
defined in the ``ocrsheet.interfaces.cli`` package. Executing
``python -m ocrsheet.interfaces.cli`` will invoke this group and present the
available commands.
"""

import logging

import click
from click.core import ParameterSource

from ocrsheet.infrastructure.observability import configure_logging

from .classify import classify
from .convert import convert
from .details import details
from .show import show


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    show_default=True,
    help="Log level for application loggers; overrides a config file's log_level.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_level: str) -> None:
    """ocrsheet command-line interface."""
    ctx.ensure_object(dict)
    # A level chosen on the command line wins over the one in --config.
    ctx.obj["log_level_from_cli"] = (
        verbose or ctx.get_parameter_source("log_level") is not ParameterSource.DEFAULT
    )
    configure_logging(logging.DEBUG if verbose else log_level)


cli.add_command(convert)
cli.add_command(show)
cli.add_command(details)
cli.add_command(classify)


if __name__ == "__main__":
    cli()
