from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from ocrsheet.interfaces.cli.show import show

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"


def test_show_text_output() -> None:
    result = CliRunner().invoke(show, [str(FIXTURES / "invoice_table.json")])

    assert result.exit_code == 0
    assert "Grid with 3 row(s) x 3 column(s):" in result.output
    assert "Widget" in result.output
    assert "Price" in result.output


def test_show_json_output() -> None:
    result = CliRunner().invoke(
        show, [str(FIXTURES / "receipt_text.json"), "--json-output"]
    )

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["row_count"] == 3
    assert payload["column_count"] == 3
    assert payload["rows"][0] == ["Product", "Quarter 1", "Quarter 2"]
    assert payload["rows"][2] == ["Gadgets", "850", "920"]


def test_show_empty_result(tmp_path: Path) -> None:
    source = tmp_path / "empty.json"
    source.write_text(json.dumps({"text": "", "confidence": 0.0}), encoding="utf-8")

    result = CliRunner().invoke(show, [str(source)])

    assert result.exit_code == 0
    assert "No rows recognized." in result.output


def test_show_missing_file(tmp_path: Path) -> None:
    result = CliRunner().invoke(show, [str(tmp_path / "absent.json")])

    assert result.exit_code == 2
