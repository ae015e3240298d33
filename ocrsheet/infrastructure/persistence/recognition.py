"""File storage for recognition results and CSV exports.

Recognition results are read from JSON documents as produced by an OCR
collaborator (or saved as fixtures). CSV exports are written as UTF-8 text.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from ocrsheet.domain.models import RecognitionResult
from ocrsheet.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)


class RecognitionLoadError(Exception):
    """Raised when a recognition result cannot be read or validated."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot load recognition result from {self.path}: {reason}")


def load_recognition_result(path: str | Path, encoding: str = "utf-8") -> RecognitionResult:
    """Read and validate a recognition result from a JSON file.

    Args:
        path: Path to the JSON document.
        encoding: Text encoding of the file.

    Returns:
        The validated RecognitionResult.

    Raises:
        RecognitionLoadError: If the file is missing, is not JSON, or does not
            describe a valid recognition result.
    """
    source = Path(path)
    try:
        payload = source.read_text(encoding=encoding)
    except OSError as exc:
        raise RecognitionLoadError(source, exc.strerror or str(exc)) from exc

    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise RecognitionLoadError(source, f"invalid JSON ({exc.msg})") from exc

    if not isinstance(data, dict):
        raise RecognitionLoadError(source, "expected a JSON object")

    try:
        result = RecognitionResult.from_dict(data)
    except ValidationError as exc:
        raise RecognitionLoadError(
            source, f"{exc.error_count()} validation error(s)\n{exc}"
        ) from exc

    logger.debug(
        "Loaded recognition result from %s (%d table(s), %d page(s))",
        source,
        len(result.tables),
        len(result.pages),
    )
    return result


def write_text_file(path: str | Path, content: str, encoding: str = "utf-8") -> Path:
    """Write ``content`` to ``path``, creating parent directories as needed."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps "\n" row terminators on every platform
    with open(target, "w", encoding=encoding, newline="") as f:
        f.write(content)
    logger.debug("Wrote %d characters to %s", len(content), target)
    return target


__all__ = ["RecognitionLoadError", "load_recognition_result", "write_text_file"]
