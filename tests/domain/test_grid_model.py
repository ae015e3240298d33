"""Tests for the Grid domain model."""

import pytest

from ocrsheet.domain.models import CellData, Grid


class TestGrid:
    def test_unset_cell_reads_as_empty_string(self):
        grid = Grid(row_count=2, column_count=2)
        assert grid.value_at("A1") == ""
        assert grid.value_at("Z99") == ""

    def test_set_value_inserts_and_overwrites(self):
        grid = Grid(row_count=1, column_count=1)
        grid.set_value_at("A1", "first")
        grid.set_value_at("A1", "second")
        assert grid.value_at("A1") == "second"
        assert grid.cells == {"A1": CellData(value="second")}

    def test_set_value_replaces_formula(self):
        grid = Grid(row_count=1, column_count=1, cells={"A1": CellData("3", "=1+2")})
        grid.set_value_at("A1", "4")
        assert grid.cells["A1"].formula is None

    def test_mutation_is_not_bounds_checked(self):
        grid = Grid(row_count=1, column_count=1)
        grid.set_value_at("C5", "outside")
        assert grid.value_at("C5") == "outside"
        assert (grid.row_count, grid.column_count) == (1, 1)

    def test_negative_dimensions_are_rejected(self):
        with pytest.raises(ValueError):
            Grid(row_count=-1, column_count=0)

    def test_blank_uses_editor_defaults(self):
        grid = Grid.blank()
        assert (grid.row_count, grid.column_count) == (10, 8)
        assert grid.cells == {}

    def test_blank_caps_columns_at_z(self):
        assert Grid.blank(rows=1, columns=40).column_count == 26

    def test_add_row(self):
        grid = Grid.blank()
        grid.add_row()
        assert grid.row_count == 11

    def test_add_column_stops_at_z(self):
        grid = Grid(row_count=1, column_count=25)
        assert grid.add_column() is True
        assert grid.column_count == 26
        assert grid.add_column() is False
        assert grid.column_count == 26

    def test_to_rows(self):
        grid = Grid(row_count=2, column_count=2)
        grid.set_value_at("A1", "a")
        grid.set_value_at("B2", "d")
        assert grid.to_rows() == [["a", ""], ["", "d"]]
