"""Domain layer facade for ocrsheet.

This package groups the pure transformation logic and shared models that do
not concern infrastructure or interface details: cell addressing, the grid
and recognition-result models, recognition-to-grid conversion and CSV
serialization.
"""

from . import models
from .addressing import InvalidCellId, InvalidColumn, cell_id, column_letter, parse_cell_id
from .conversion import DelimiterChoice, infer_delimiter, recognition_to_grid
from .csv_export import CSV_FILENAME, CSV_MIME_TYPE, grid_to_csv

__all__ = [
    "CSV_FILENAME",
    "CSV_MIME_TYPE",
    "DelimiterChoice",
    "InvalidCellId",
    "InvalidColumn",
    "cell_id",
    "column_letter",
    "grid_to_csv",
    "infer_delimiter",
    "models",
    "parse_cell_id",
    "recognition_to_grid",
]
