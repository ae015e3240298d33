"""Report how an uploaded file would be categorised and recognized."""

from __future__ import annotations

import click

from ocrsheet.services import accepted_types, classify_file, select_ocr_mode


@click.command()
@click.argument("name", required=False)
@click.option("--mime-type", default="", help="MIME type reported for the file.")
@click.option("--list-types", is_flag=True, help="List every accepted file extension.")
def classify(name: str | None, mime_type: str, list_types: bool) -> None:
    """Show the file category and OCR mode for the file NAME."""

    if list_types:
        click.echo(accepted_types())
        return
    if not name:
        raise click.UsageError("Missing argument 'NAME'.")

    click.echo(f"category={classify_file(name).value}")
    click.echo(f"ocr_mode={select_ocr_mode(name, mime_type).value}")
