"""Tests for the recognition result models."""

import pytest
from pydantic import ValidationError

from ocrsheet.domain.models import (
    ConfidenceLevel,
    RecognitionResult,
    Table,
    TableCell,
    format_confidence,
)


def test_camel_case_payload_is_accepted():
    result = RecognitionResult.from_dict(
        {
            "text": "x",
            "confidence": 0.9,
            "tables": [
                {
                    "rowCount": 1,
                    "columnCount": 2,
                    "cells": [{"text": "a", "rowIndex": 0, "columnIndex": 1}],
                }
            ],
            "areas": [
                {"text": "x", "boundingBox": {"x": 1, "y": 2, "width": 3, "height": 4}}
            ],
        }
    )
    table = result.tables[0]
    assert (table.row_count, table.column_count) == (1, 2)
    assert table.cells[0].column_index == 1
    assert result.areas[0].bounding_box.height == 4


def test_legacy_rows_columns_keys_are_accepted():
    table = Table.model_validate({"rows": 2, "columns": 3, "cells": []})
    assert (table.row_count, table.column_count) == (2, 3)


def test_snake_case_construction():
    table = Table(
        row_count=1,
        column_count=1,
        cells=[TableCell(text="only", row_index=0, column_index=0)],
    )
    assert table.value_at(0, 0) == "only"


def test_from_json():
    result = RecognitionResult.from_json('{"text": "a b", "confidence": 0.5}')
    assert result.text == "a b"
    assert result.tables == ()


def test_defaults():
    result = RecognitionResult()
    assert result.text == ""
    assert result.confidence == 0.0
    assert not result.has_tables


@pytest.mark.parametrize("confidence", [-0.1, 1.5])
def test_confidence_must_be_within_unit_interval(confidence):
    with pytest.raises(ValidationError):
        RecognitionResult(text="", confidence=confidence)


@pytest.mark.parametrize(
    "cell",
    [
        {"text": "x", "rowIndex": 2, "columnIndex": 0},
        {"text": "x", "rowIndex": 0, "columnIndex": 2},
    ],
)
def test_table_cells_must_lie_inside_the_table(cell):
    with pytest.raises(ValidationError):
        Table.model_validate({"rowCount": 2, "columnCount": 2, "cells": [cell]})


def test_negative_indices_are_rejected():
    with pytest.raises(ValidationError):
        TableCell.model_validate({"text": "x", "rowIndex": -1, "columnIndex": 0})


def test_table_value_at_defaults_to_empty_string():
    table = Table.model_validate(
        {"rowCount": 2, "columnCount": 2, "cells": [{"text": "a", "rowIndex": 0, "columnIndex": 0}]}
    )
    assert table.value_at(0, 0) == "a"
    assert table.value_at(1, 1) == ""


def test_results_are_immutable():
    result = RecognitionResult(text="a")
    with pytest.raises(ValidationError):
        result.text = "b"


def test_word_count_walks_the_page_hierarchy():
    result = RecognitionResult.from_dict(
        {
            "pages": [
                {
                    "width": 10,
                    "height": 10,
                    "blocks": [
                        {
                            "text": "a b",
                            "confidence": 0.9,
                            "paragraphs": [
                                {"text": "a b", "confidence": 0.9, "words": [{"text": "a"}, {"text": "b"}]},
                                {"text": "c", "confidence": 0.9, "words": [{"text": "c"}]},
                            ],
                        }
                    ],
                }
            ]
        }
    )
    assert result.word_count() == 3


class TestConfidenceLevel:
    @pytest.mark.parametrize(
        "score,expected",
        [
            (1.0, ConfidenceLevel.HIGH),
            (0.9, ConfidenceLevel.HIGH),
            (0.89, ConfidenceLevel.MEDIUM),
            (0.7, ConfidenceLevel.MEDIUM),
            (0.69, ConfidenceLevel.LOW),
            (0.0, ConfidenceLevel.LOW),
            (None, ConfidenceLevel.LOW),
        ],
    )
    def test_from_score(self, score, expected):
        assert ConfidenceLevel.from_score(score) == expected

    def test_format_confidence(self):
        assert format_confidence(0.953) == "95%"
        assert format_confidence(1.0) == "100%"
        assert format_confidence(0.0) == "0%"

    @pytest.mark.parametrize(
        "score, expected",
        [(0.125, "13%"), (0.005, "1%"), (0.375, "38%"), (0.994, "99%")],
    )
    def test_format_confidence_rounds_halves_up(self, score, expected):
        assert format_confidence(score) == expected
