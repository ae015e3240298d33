"""Classification of uploaded files and selection of the OCR mode.

Files are grouped by extension into images, documents and spreadsheets. The
OCR mode decides how a recognizer should treat a file: PDFs go through the
batch file path, TIFF scans and office documents through dense document text
detection, and everything else through plain image text detection.
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath


class FileCategory(str, Enum):
    IMAGE = "image"
    DOCUMENT = "document"
    SPREADSHEET = "spreadsheet"
    OTHER = "other"


class OcrMode(str, Enum):
    IMAGE = "image"
    DOCUMENT = "document"
    PDF = "pdf"


SUPPORTED_FILE_TYPES: dict[FileCategory, tuple[str, ...]] = {
    FileCategory.IMAGE: (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".tif"),
    FileCategory.DOCUMENT: (".pdf", ".doc", ".docx", ".txt", ".rtf"),
    FileCategory.SPREADSHEET: (".xlsx", ".xls", ".csv"),
}


def _extension(name: str) -> str:
    return PurePath(name).suffix.lower()


def classify_file(name: str) -> FileCategory:
    """Return the category of ``name`` based on its extension."""
    extension = _extension(name)
    for category, extensions in SUPPORTED_FILE_TYPES.items():
        if extension in extensions:
            return category
    return FileCategory.OTHER


def select_ocr_mode(name: str, mime_type: str = "") -> OcrMode:
    """Pick the OCR mode for a file from its MIME type and name."""
    mime = mime_type.lower()
    extension = _extension(name)

    if mime == "application/pdf" or extension == ".pdf":
        return OcrMode.PDF

    if mime.startswith("image/"):
        if mime == "image/tiff" or extension in (".tiff", ".tif"):
            return OcrMode.DOCUMENT
        return OcrMode.IMAGE

    if "document" in mime or extension in (".doc", ".docx"):
        return OcrMode.DOCUMENT

    return OcrMode.IMAGE


def accepted_types() -> str:
    """Return every supported extension as a comma-separated accept list."""
    return ",".join(
        extension
        for extensions in SUPPORTED_FILE_TYPES.values()
        for extension in extensions
    )


__all__ = [
    "FileCategory",
    "OcrMode",
    "SUPPORTED_FILE_TYPES",
    "accepted_types",
    "classify_file",
    "select_ocr_mode",
]
