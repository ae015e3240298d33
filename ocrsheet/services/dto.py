"""
Centralized DTOs and output models for ocrsheet services.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ocrsheet.domain.models import Grid, RecognitionResult


class GridView(BaseModel):
    """Grid rendered as rows of strings, suitable for JSON output."""

    model_config = ConfigDict(extra="forbid")

    row_count: int
    column_count: int
    rows: list[list[str]]

    @classmethod
    def from_grid(cls, grid: Grid) -> "GridView":
        return cls(
            row_count=grid.row_count,
            column_count=grid.column_count,
            rows=grid.to_rows(),
        )


class RecognitionSummary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    confidence: float
    line_count: int
    table_count: int
    area_count: int
    page_count: int
    word_count: int

    @classmethod
    def from_result(cls, result: RecognitionResult) -> "RecognitionSummary":
        return cls(
            confidence=result.confidence,
            line_count=sum(1 for line in result.text.split("\n") if line.strip()),
            table_count=len(result.tables),
            area_count=len(result.areas),
            page_count=len(result.pages),
            word_count=result.word_count(),
        )


__all__ = ["GridView", "RecognitionSummary"]
