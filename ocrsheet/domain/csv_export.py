"""Serialization of grids to CSV text.

The output starts with a header row of column letters, followed by one line
per grid row. Commas inside values are removed rather than quoted, so a
value such as ``"x,y"`` is written as ``xy``. Quotes and embedded newlines
are written through unchanged.
"""

from __future__ import annotations

from ocrsheet.domain.addressing import cell_id, column_letter
from ocrsheet.domain.models.grid import Grid

CSV_FILENAME = "spreadsheet.csv"
CSV_MIME_TYPE = "text/csv;charset=utf-8;"


def _sanitize(value: str) -> str:
    return value.replace(",", "")


def grid_to_csv(grid: Grid) -> str:
    """Serialize ``grid`` to CSV text with a trailing newline on every row.

    Raises:
        InvalidColumn: If the grid is wider than the 26 addressable columns.
    """
    columns = range(grid.column_count)
    lines = [",".join(column_letter(col) for col in columns)]
    for row in range(grid.row_count):
        lines.append(
            ",".join(_sanitize(grid.value_at(cell_id(row, col))) for col in columns)
        )
    return "".join(f"{line}\n" for line in lines)


__all__ = ["CSV_FILENAME", "CSV_MIME_TYPE", "grid_to_csv"]
