"""Recognition result models produced by an OCR collaborator.

A result carries the full recognized text and an overall confidence, plus
optional structure: detected tables, bounding-box text areas and the
page -> block -> paragraph -> word -> symbol hierarchy. Results are
immutable once validated.

Both camelCase wire names (``rowCount``, ``columnIndex``, ``boundingBox``)
and snake_case field names are accepted on input.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TableCell(_Frozen):
    text: str = ""
    row_index: int = Field(
        ge=0, validation_alias=AliasChoices("rowIndex", "row_index")
    )
    column_index: int = Field(
        ge=0, validation_alias=AliasChoices("columnIndex", "column_index")
    )


class Table(_Frozen):
    """A detected table with sparse, 0-based cell positions."""

    row_count: int = Field(
        ge=0, validation_alias=AliasChoices("rowCount", "rows", "row_count")
    )
    column_count: int = Field(
        ge=0,
        validation_alias=AliasChoices("columnCount", "columns", "column_count"),
    )
    cells: tuple[TableCell, ...] = ()

    @model_validator(mode="after")
    def _cells_within_bounds(self) -> "Table":
        for cell in self.cells:
            if cell.row_index >= self.row_count or cell.column_index >= self.column_count:
                raise ValueError(
                    f"Table cell ({cell.row_index}, {cell.column_index}) lies outside "
                    f"a {self.row_count}x{self.column_count} table"
                )
        return self

    def value_at(self, row: int, col: int) -> str:
        """Return the text at ``(row, col)``, or ``""`` for an absent cell."""
        for cell in self.cells:
            if cell.row_index == row and cell.column_index == col:
                return cell.text
        return ""


class BoundingBox(_Frozen):
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0


class TextArea(_Frozen):
    text: str = ""
    bounding_box: BoundingBox = Field(
        default_factory=BoundingBox,
        validation_alias=AliasChoices("boundingBox", "bounding_box"),
    )


class Symbol(_Frozen):
    text: str = ""
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class Word(_Frozen):
    text: str = ""
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    symbols: tuple[Symbol, ...] = ()


class Paragraph(_Frozen):
    text: str = ""
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    words: tuple[Word, ...] = ()


class Block(_Frozen):
    text: str = ""
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    paragraphs: tuple[Paragraph, ...] = ()


class Page(_Frozen):
    width: float = 0
    height: float = 0
    blocks: tuple[Block, ...] = ()


class RecognitionResult(_Frozen):
    """Output of one OCR invocation."""

    text: str = ""
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    tables: tuple[Table, ...] = ()
    areas: tuple[TextArea, ...] = ()
    pages: tuple[Page, ...] = ()

    @property
    def has_tables(self) -> bool:
        return bool(self.tables)

    def word_count(self) -> int:
        """Count words across the page hierarchy."""
        return sum(
            len(paragraph.words)
            for page in self.pages
            for block in page.blocks
            for paragraph in block.paragraphs
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RecognitionResult":
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, payload: str | bytes) -> "RecognitionResult":
        return cls.model_validate_json(payload)


__all__ = [
    "Block",
    "BoundingBox",
    "Page",
    "Paragraph",
    "RecognitionResult",
    "Symbol",
    "Table",
    "TableCell",
    "TextArea",
    "Word",
]
