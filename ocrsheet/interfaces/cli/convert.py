"""Convert a recognition result into a CSV export."""

from __future__ import annotations

import click
from rich.console import Console

from ocrsheet.interfaces.cli.context import (
    build_cli_context,
    config_option,
    reported_errors,
)

console = Console()


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    "output",
    type=click.Path(),
    default=".",
    show_default=True,
    help="CSV file to write, or a directory to write spreadsheet.csv into.",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the CSV instead of writing a file.")
@config_option
def convert(source: str, output: str, to_stdout: bool, config_path: str | None) -> None:
    """Convert the recognition result in SOURCE (JSON) to CSV."""

    cli_context = build_cli_context(config_path)
    service = cli_context.service()
    with reported_errors(source=source):
        grid = service.import_file(source)
        if to_stdout:
            click.echo(service.to_csv(grid), nl=False)
            return
        written = service.export_csv(grid, output)

    console.print(
        f"[green]Wrote {grid.row_count} row(s) x {grid.column_count} column(s) to "
        f"[bold]{written}[/bold][/green]"
    )
