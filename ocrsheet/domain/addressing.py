"""Spreadsheet cell addressing.

Cells are addressed by a single column letter followed by a 1-based row
number, e.g. column 0 / row 0 is ``"A1"`` and column 2 / row 9 is ``"C10"``.
Only the 26 columns ``A`` to ``Z`` are addressable.
"""

from __future__ import annotations

import re
import string

ALPHABET = string.ascii_uppercase
MAX_COLUMNS = len(ALPHABET)

_CELL_ID_PATTERN = re.compile(r"^([A-Za-z]+)([0-9]+)$")


class InvalidColumn(ValueError):
    """Raised when a column cannot be expressed as a single letter."""

    def __init__(self, column: object) -> None:
        self.column = column
        super().__init__(
            f"Column {column!r} is outside the addressable range A-Z "
            f"(0-{MAX_COLUMNS - 1})"
        )


class InvalidCellId(ValueError):
    """Raised when a string is not a well-formed cell identifier."""


def column_letter(col: int) -> str:
    """Return the column letter for a 0-based column index."""
    if not 0 <= col < MAX_COLUMNS:
        raise InvalidColumn(col)
    return ALPHABET[col]


def cell_id(row: int, col: int) -> str:
    """Return the identifier of the cell at ``(row, col)``.

    Args:
        row: 0-based row index.
        col: 0-based column index in ``[0, 25]``.

    Raises:
        InvalidColumn: If ``col`` is outside ``[0, 25]``.
        ValueError: If ``row`` is negative.
    """
    if row < 0:
        raise ValueError(f"Row index must be non-negative, got {row}")
    return f"{column_letter(col)}{row + 1}"


def parse_cell_id(value: str) -> tuple[int, int]:
    """Parse a cell identifier back into a 0-based ``(row, col)`` pair.

    Letters are matched case-insensitively. Multi-letter column codes such as
    ``"AA"`` are well-formed but not addressable and raise ``InvalidColumn``.
    """
    match = _CELL_ID_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise InvalidCellId(f"Not a cell identifier: {value!r}")
    letters, digits = match.groups()
    if len(letters) != 1:
        raise InvalidColumn(letters.upper())
    row_number = int(digits)
    if row_number < 1:
        raise InvalidCellId(f"Row number must be at least 1: {value!r}")
    return row_number - 1, ALPHABET.index(letters.upper())


__all__ = [
    "ALPHABET",
    "MAX_COLUMNS",
    "InvalidCellId",
    "InvalidColumn",
    "cell_id",
    "column_letter",
    "parse_cell_id",
]
