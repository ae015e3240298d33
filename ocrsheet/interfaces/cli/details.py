"""Detailed viewer for a recognition result.

Shows the overall confidence, detected tables, text areas and the
page -> block -> paragraph hierarchy with per-node confidence.
"""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable

from ocrsheet.domain.models import ConfidenceLevel, RecognitionResult, Table, format_confidence
from ocrsheet.interfaces.cli.context import (
    build_cli_context,
    config_option,
    reported_errors,
)
from ocrsheet.services import RecognitionSummary

console = Console()

LEVEL_STYLES = {
    ConfidenceLevel.HIGH: "green",
    ConfidenceLevel.MEDIUM: "yellow",
    ConfidenceLevel.LOW: "red",
}


def _confidence_markup(score: float) -> str:
    style = LEVEL_STYLES[ConfidenceLevel.from_score(score)]
    return f"[{style}]{format_confidence(score)}[/{style}]"


def _render_table(table: Table) -> RichTable:
    rendered = RichTable(show_header=False, show_lines=True)
    for _ in range(table.column_count):
        rendered.add_column()
    for row in range(table.row_count):
        rendered.add_row(*(escape(table.value_at(row, col)) for col in range(table.column_count)))
    return rendered


def _print_result(result: RecognitionResult) -> None:
    console.print(f"Confidence: {_confidence_markup(result.confidence)}")

    for index, table in enumerate(result.tables, start=1):
        console.print(
            f"Table {index}: {table.row_count} rows x {table.column_count} columns"
        )
        console.print(_render_table(table))

    if result.areas:
        console.print("Text areas:")
        for index, area in enumerate(result.areas, start=1):
            box = area.bounding_box
            console.print(
                f"  Area {index}: {escape(area.text)} "
                f"(x={box.x:g}, y={box.y:g}, width={box.width:g}, height={box.height:g})"
            )
    else:
        console.print("[dim]No text areas detected[/dim]")

    for page_index, page in enumerate(result.pages, start=1):
        console.print(f"Page {page_index} ({page.width:g}x{page.height:g})")
        for block_index, block in enumerate(page.blocks, start=1):
            console.print(
                f"  Block {block_index} {_confidence_markup(block.confidence)}: {escape(block.text)}"
            )
            for paragraph in block.paragraphs:
                console.print(
                    f"    Paragraph {_confidence_markup(paragraph.confidence)}: "
                    f"{escape(paragraph.text)} ({len(paragraph.words)} words)"
                )


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("--json-output", is_flag=True, help="Output a summary as JSON.")
@config_option
def details(source: str, json_output: bool, config_path: str | None) -> None:
    """Show the structure and confidence of the recognition result in SOURCE."""

    cli_context = build_cli_context(config_path)
    with reported_errors(source=source):
        result = cli_context.service().load_recognition(source)

    if json_output:
        summary = RecognitionSummary.from_result(result)
        click.echo(json.dumps(summary.model_dump(mode="json"), indent=2))
        return

    _print_result(result)
