"""Text viewer for the grid derived from a recognition result."""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ocrsheet.domain.addressing import MAX_COLUMNS, column_letter
from ocrsheet.domain.models import Grid
from ocrsheet.interfaces.cli.context import (
    build_cli_context,
    config_option,
    reported_errors,
)
from ocrsheet.services import GridView

console = Console()


def _render_grid(grid: Grid) -> Table:
    table = Table()
    table.add_column("", style="dim", justify="right")
    for col in range(min(grid.column_count, MAX_COLUMNS)):
        table.add_column(column_letter(col))
    for index, row in enumerate(grid.to_rows(), start=1):
        table.add_row(str(index), *(escape(value) for value in row))
    return table


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("--json-output", is_flag=True, help="Output the grid as JSON.")
@config_option
def show(source: str, json_output: bool, config_path: str | None) -> None:
    """Show the spreadsheet grid built from SOURCE."""

    cli_context = build_cli_context(config_path)
    with reported_errors(source=source):
        grid = cli_context.service().import_file(source)

    if json_output:
        payload = GridView.from_grid(grid).model_dump(mode="json")
        click.echo(json.dumps(payload, indent=2))
        return

    if grid.row_count == 0:
        console.print("[yellow]No rows recognized.[/yellow]")
        return

    console.print(f"Grid with {grid.row_count} row(s) x {grid.column_count} column(s):")
    console.print(_render_grid(grid))
