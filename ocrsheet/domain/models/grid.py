"""Grid domain model: a rectangular sheet of text cells."""

from __future__ import annotations

from dataclasses import dataclass, field

from ocrsheet.domain.addressing import MAX_COLUMNS, cell_id

# Size of a freshly opened sheet in the editor.
DEFAULT_ROWS = 10
DEFAULT_COLUMNS = 8


@dataclass
class CellData:
    """Contents of a single cell."""

    value: str = ""
    formula: str | None = None


@dataclass
class Grid:
    """Sheet of text cells keyed by cell identifier (``"A1"``, ``"B3"``...).

    Lookups of unset cells read as the empty string. Mutation does not check
    that a cell lies within ``row_count`` x ``column_count``; callers that
    want a rectangular sheet keep their writes in range.
    """

    row_count: int = 0
    column_count: int = 0
    cells: dict[str, CellData] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.row_count < 0 or self.column_count < 0:
            raise ValueError(
                f"Grid dimensions must be non-negative, got "
                f"{self.row_count}x{self.column_count}"
            )

    @classmethod
    def blank(cls, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS) -> "Grid":
        """Return an empty sheet with the editor's default dimensions."""
        return cls(row_count=rows, column_count=min(columns, MAX_COLUMNS))

    def value_at(self, key: str) -> str:
        cell = self.cells.get(key)
        return cell.value if cell is not None else ""

    def set_value_at(self, key: str, value: str) -> None:
        self.cells[key] = CellData(value=value)

    def add_row(self) -> None:
        self.row_count += 1

    def add_column(self) -> bool:
        """Append a column unless the sheet already spans ``A`` to ``Z``.

        Returns:
            True if a column was added.
        """
        if self.column_count >= MAX_COLUMNS:
            return False
        self.column_count += 1
        return True

    def to_rows(self) -> list[list[str]]:
        """Return cell values row by row, limited to addressable columns."""
        columns = min(self.column_count, MAX_COLUMNS)
        return [
            [self.value_at(cell_id(row, col)) for col in range(columns)]
            for row in range(self.row_count)
        ]


__all__ = ["CellData", "DEFAULT_COLUMNS", "DEFAULT_ROWS", "Grid"]
