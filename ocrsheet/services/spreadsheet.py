"""Spreadsheet service: recognition results in, grids and CSV exports out.

Follows the ocrsheet layering: services may import infrastructure and domain.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

from ocrsheet.app.config import AppConfig
from ocrsheet.domain import grid_to_csv, recognition_to_grid
from ocrsheet.domain.models import Grid, RecognitionResult
from ocrsheet.infrastructure.observability import get_logger, log_context
from ocrsheet.infrastructure.persistence import load_recognition_result, write_text_file

RecognitionLoader = Callable[[Path], RecognitionResult]


class SpreadsheetService:
    """Load recognition results, convert them to grids and export CSV.

    The loader is injectable so tests (or a real OCR backend) can supply
    fully materialized results without touching the filesystem.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        loader: RecognitionLoader | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self._loader = loader or self._load_from_file
        self._logger = get_logger(self.__class__.__module__)

    def _load_from_file(self, path: Path) -> RecognitionResult:
        return load_recognition_result(path, encoding=self.config.encoding)

    def load_recognition(self, path: str | Path) -> RecognitionResult:
        source = Path(path)
        with log_context(source=source.name):
            result = self._loader(source)
            self._logger.debug(
                "Loaded recognition result (confidence %.2f)", result.confidence
            )
        return result

    def convert(self, result: RecognitionResult) -> Grid:
        with log_context(table_count=len(result.tables)):
            grid = recognition_to_grid(result)
            self._logger.debug(
                "Converted recognition result to a %dx%d grid",
                grid.row_count,
                grid.column_count,
            )
        return grid

    def import_file(self, path: str | Path) -> Grid:
        """Load the recognition result at ``path`` and convert it."""
        return self.convert(self.load_recognition(path))

    def to_csv(self, grid: Grid) -> str:
        return grid_to_csv(grid)

    def export_csv(self, grid: Grid, destination: str | Path) -> Path:
        """Write ``grid`` as CSV and return the written path.

        Args:
            grid: Grid to serialize.
            destination: A file path, or a directory in which the configured
                export filename is used. A path ending in a separator is a
                directory even when it does not exist yet.
        """
        target = Path(destination)
        if target.is_dir() or str(destination).endswith(("/", os.sep)):
            target = target / self.config.export_filename
        content = self.to_csv(grid)
        written = write_text_file(target, content, encoding=self.config.encoding)
        self._logger.info("Exported %d row(s) to %s", grid.row_count, written)
        return written


__all__ = ["RecognitionLoader", "SpreadsheetService"]
