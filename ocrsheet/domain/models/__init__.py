"""Domain models package.

This package contains the grid and recognition-result models for ocrsheet.
"""

from .confidence import ConfidenceLevel, format_confidence
from .grid import CellData, Grid
from .recognition import (
    Block,
    BoundingBox,
    Page,
    Paragraph,
    RecognitionResult,
    Symbol,
    Table,
    TableCell,
    TextArea,
    Word,
)

__all__ = [
    "Block",
    "BoundingBox",
    "CellData",
    "ConfidenceLevel",
    "Grid",
    "Page",
    "Paragraph",
    "RecognitionResult",
    "Symbol",
    "Table",
    "TableCell",
    "TextArea",
    "Word",
    "format_confidence",
]
