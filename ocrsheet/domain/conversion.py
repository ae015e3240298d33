"""Conversion of recognition results into spreadsheet grids.

Table data wins when the recognizer found any: the first table's cells are
copied to their positions and every other table is ignored. Without tables
the free text is split into rows (one per non-blank line) and columns, with
the column delimiter guessed from the first line alone.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Pattern

from ocrsheet.domain.addressing import MAX_COLUMNS, cell_id
from ocrsheet.domain.models.grid import Grid
from ocrsheet.domain.models.recognition import RecognitionResult, Table

logger = logging.getLogger(__name__)

# Order matters: ties go to the earliest candidate.
CANDIDATE_DELIMITERS: tuple[str, ...] = (",", "\t", ";", "|")

WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class DelimiterChoice:
    """Delimiter picked for a line and the number of parts it yields."""

    delimiter: str | Pattern[str]
    column_count: int

    @property
    def is_whitespace(self) -> bool:
        return not isinstance(self.delimiter, str)

    def split(self, line: str) -> list[str]:
        if isinstance(self.delimiter, str):
            return line.split(self.delimiter)
        return self.delimiter.split(line)


def infer_delimiter(line: str) -> DelimiterChoice:
    """Guess the column delimiter of ``line``.

    Each candidate delimiter is tried in order and the one producing the most
    parts wins. When no candidate splits the line at all, runs of whitespace
    are used instead.
    """
    best, best_count = CANDIDATE_DELIMITERS[0], 0
    for candidate in CANDIDATE_DELIMITERS:
        count = len(line.split(candidate))
        if count > best_count:
            best, best_count = candidate, count

    if best_count <= 1:
        return DelimiterChoice(WHITESPACE, len(WHITESPACE.split(line)))
    return DelimiterChoice(best, best_count)


def _table_to_grid(table: Table) -> Grid:
    grid = Grid(row_count=table.row_count, column_count=table.column_count)
    skipped = 0
    for cell in table.cells:
        if cell.column_index >= MAX_COLUMNS:
            skipped += 1
            continue
        grid.set_value_at(cell_id(cell.row_index, cell.column_index), cell.text)
    if skipped:
        logger.warning(
            "Skipped %d table cell(s) beyond column %d", skipped, MAX_COLUMNS
        )
    return grid


def _text_to_grid(text: str) -> Grid:
    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        return Grid()

    choice = infer_delimiter(lines[0])
    logger.debug(
        "Inferred delimiter %r with %d column(s)",
        "whitespace" if choice.is_whitespace else choice.delimiter,
        choice.column_count,
    )

    grid = Grid(row_count=len(lines), column_count=choice.column_count)
    skipped = 0
    for row, line in enumerate(lines):
        for col, part in enumerate(choice.split(line)[: choice.column_count]):
            if col >= MAX_COLUMNS:
                skipped += 1
                continue
            grid.set_value_at(cell_id(row, col), part.strip())
    if skipped:
        logger.warning(
            "Skipped %d text cell(s) beyond column %d", skipped, MAX_COLUMNS
        )
    return grid


def recognition_to_grid(result: RecognitionResult) -> Grid:
    """Build a fresh grid from a recognition result.

    Never raises: an empty result yields an empty 0 x 0 grid.
    """
    if result.tables:
        if len(result.tables) > 1:
            logger.debug(
                "Using the first of %d tables; the rest are ignored",
                len(result.tables),
            )
        return _table_to_grid(result.tables[0])
    return _text_to_grid(result.text)


__all__ = [
    "CANDIDATE_DELIMITERS",
    "DelimiterChoice",
    "infer_delimiter",
    "recognition_to_grid",
]
