"""Service layer modules for ocrsheet."""

from .dto import GridView, RecognitionSummary  # noqa: F401
from .file_types import (  # noqa: F401
    FileCategory,
    OcrMode,
    accepted_types,
    classify_file,
    select_ocr_mode,
)
from .spreadsheet import SpreadsheetService  # noqa: F401

__all__ = [
    "FileCategory",
    "GridView",
    "OcrMode",
    "RecognitionSummary",
    "SpreadsheetService",
    "accepted_types",
    "classify_file",
    "select_ocr_mode",
]
