import logging
from pathlib import Path

from ocrsheet.app.config import AppConfig
from ocrsheet.domain.models import RecognitionResult
from ocrsheet.services import SpreadsheetService

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"


class _StubLoader:
    def __init__(self, result: RecognitionResult) -> None:
        self._result = result
        self.calls: list[Path] = []

    def __call__(self, path: Path) -> RecognitionResult:
        self.calls.append(path)
        return self._result


def test_import_file_uses_injected_loader():
    loader = _StubLoader(RecognitionResult(text="a,b\nc,d", confidence=0.9))
    service = SpreadsheetService(loader=loader)

    grid = service.import_file("scan.json")

    assert loader.calls == [Path("scan.json")]
    assert (grid.row_count, grid.column_count) == (2, 2)
    assert grid.value_at("B2") == "d"


def test_import_table_fixture():
    grid = SpreadsheetService().import_file(FIXTURES / "invoice_table.json")

    assert (grid.row_count, grid.column_count) == (3, 3)
    assert grid.value_at("A1") == "Item"
    assert grid.value_at("C2") == "9,50"
    assert grid.value_at("B3") == ""


def test_import_text_fixture():
    grid = SpreadsheetService().import_file(FIXTURES / "receipt_text.json")

    assert (grid.row_count, grid.column_count) == (3, 3)
    assert grid.value_at("B1") == "Quarter 1"
    assert grid.value_at("C3") == "920"


def test_export_csv_into_directory_uses_default_filename(tmp_path):
    service = SpreadsheetService()
    grid = service.import_file(FIXTURES / "invoice_table.json")

    written = service.export_csv(grid, tmp_path)

    assert written == tmp_path / "spreadsheet.csv"
    assert written.read_text(encoding="utf-8") == (
        "A,B,C\nItem,Qty,Price\nWidget,2,950\nGadget,,\n"
    )


def test_export_csv_honours_configured_filename(tmp_path):
    service = SpreadsheetService(config=AppConfig(export_filename="out.csv"))
    grid = service.convert(RecognitionResult(text="x y"))

    written = service.export_csv(grid, tmp_path)

    assert written.name == "out.csv"
    assert written.read_text(encoding="utf-8") == "A,B\nx,y\n"


def test_export_csv_to_explicit_file_creates_parents(tmp_path):
    service = SpreadsheetService()
    target = tmp_path / "nested" / "sheet.csv"

    written = service.export_csv(service.convert(RecognitionResult(text="a")), target)

    assert written == target
    assert target.read_text(encoding="utf-8") == "A\na\n"


def test_export_logs_destination(tmp_path, caplog):
    service = SpreadsheetService()
    grid = service.convert(RecognitionResult(text="a,b"))

    with caplog.at_level(logging.INFO, logger="ocrsheet.services.spreadsheet"):
        service.export_csv(grid, tmp_path)

    assert "Exported 1 row(s)" in caplog.text


def test_export_csv_to_missing_directory_with_trailing_slash(tmp_path):
    service = SpreadsheetService()
    grid = service.convert(RecognitionResult(text="a,b"))

    written = service.export_csv(grid, f"{tmp_path / 'exports'}/")

    assert written == tmp_path / "exports" / "spreadsheet.csv"
    assert written.read_text(encoding="utf-8") == "A,B\na,b\n"
