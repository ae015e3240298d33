"""Tests for loading recognition results and writing exports."""

from pathlib import Path

import pytest

from ocrsheet.infrastructure.persistence import (
    RecognitionLoadError,
    load_recognition_result,
    write_text_file,
)

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"


def test_load_fixture_with_pages():
    result = load_recognition_result(FIXTURES / "receipt_text.json")
    assert result.confidence == pytest.approx(0.82)
    assert len(result.pages) == 1
    assert result.pages[0].blocks[1].confidence == pytest.approx(0.61)
    assert result.word_count() == 3


def test_missing_file(tmp_path):
    with pytest.raises(RecognitionLoadError) as excinfo:
        load_recognition_result(tmp_path / "absent.json")
    assert excinfo.value.path == tmp_path / "absent.json"


def test_invalid_json(tmp_path):
    source = tmp_path / "broken.json"
    source.write_text("{not json", encoding="utf-8")
    with pytest.raises(RecognitionLoadError, match="invalid JSON"):
        load_recognition_result(source)


def test_non_object_payload(tmp_path):
    source = tmp_path / "list.json"
    source.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(RecognitionLoadError, match="expected a JSON object"):
        load_recognition_result(source)


def test_validation_errors_are_wrapped(tmp_path):
    source = tmp_path / "bad.json"
    source.write_text('{"text": "x", "confidence": 3}', encoding="utf-8")
    with pytest.raises(RecognitionLoadError, match="validation error") as excinfo:
        load_recognition_result(source)
    assert excinfo.value.__cause__ is not None


def test_write_text_file_keeps_unix_newlines(tmp_path):
    target = write_text_file(tmp_path / "out" / "a.csv", "A\nb\n")
    assert target.read_bytes() == b"A\nb\n"
