"""
Tabellen-Layout
"""

import pytest

from fastpdf.items import TableColumn, TableItem
from fastpdf.table_layout import draw_table


def _table(columns, data, height=20, left=0, top=0):
    return TableItem(left=left, top=top, height=height, columns=tuple(columns), data=tuple(data))


class TestDrawTable:
    """Zellgrenzen und Beschriftung"""

    def test_worked_example(self, surface):
        item = _table(
            [TableColumn(50, "A", "a"), TableColumn(50, "B", "b")],
            [{"a": "1", "b": "2"}],
        )
        bands = draw_table(surface, item)

        assert bands == 2
        assert surface.calls == [
            # Titelzeile
            ("line", 0, 0, 0, 20),
            ("line", 0, 0, 50, 0),
            ("line", 0, 20, 50, 20),
            ("line", 50, 0, 50, 20),
            ("text", 2, 2, 16, "A"),
            ("line", 50, 0, 100, 0),
            ("line", 50, 20, 100, 20),
            ("line", 100, 0, 100, 20),
            ("text", 52, 2, 16, "B"),
            # Datenzeile
            ("line", 0, 20, 0, 40),
            ("line", 0, 40, 50, 40),
            ("line", 50, 20, 50, 40),
            ("text", 2, 22, 16, "1"),
            ("line", 50, 40, 100, 40),
            ("line", 100, 20, 100, 40),
            ("text", 52, 22, 16, "2"),
        ]

    @pytest.mark.parametrize("n_cols,n_rows", [(1, 0), (2, 1), (3, 4), (5, 2)])
    def test_vertical_borders_per_band(self, surface, n_cols, n_rows):
        columns = [TableColumn(30, f"T{i}", f"k{i}") for i in range(n_cols)]
        rows = [{f"k{i}": f"{r}-{i}" for i in range(n_cols)} for r in range(n_rows)]

        bands = draw_table(surface, _table(columns, rows))

        assert bands == n_rows + 1
        assert len(surface.vertical_lines) == (n_cols + 1) * (n_rows + 1)
        assert len(surface.texts) == n_cols * (n_rows + 1)

    def test_rows_stack_without_gaps(self, surface):
        columns = [TableColumn(40, "X", "x")]
        draw_table(surface, _table(columns, [{"x": "a"}, {"x": "b"}], height=10, top=100))

        left_borders = [ln for ln in surface.vertical_lines if ln[0] == 0]
        assert [(ln[1], ln[3]) for ln in left_borders] == [(100, 110), (110, 120), (120, 130)]

    def test_missing_key_renders_empty(self, surface):
        columns = [TableColumn(40, "X", "x"), TableColumn(40, "Y", "y")]
        draw_table(surface, _table(columns, [{"x": "only-x"}]))

        data_texts = [t[3] for t in surface.texts[2:]]
        assert data_texts == ["only-x", ""]

    def test_no_columns_draws_nothing(self, surface):
        assert draw_table(surface, _table([], [{"a": "1"}])) == 0
        assert surface.calls == []

    def test_font_size_follows_row_height(self, surface):
        draw_table(surface, _table([TableColumn(40, "X", "x")], [], height=25), title_scale=0.8)
        assert surface.texts[0][2] == 20

    def test_offset_and_padding(self, surface):
        draw_table(surface, _table([TableColumn(40, "X", "x")], [], left=30, top=70), padding=4)
        assert surface.texts[0][:2] == (34, 74)

    def test_columns_advance_by_width(self, surface):
        columns = [TableColumn(10, "a", "a"), TableColumn(25, "b", "b"), TableColumn(5, "c", "c")]
        draw_table(surface, _table(columns, []))

        right_borders = sorted({ln[0] for ln in surface.vertical_lines})
        assert right_borders == [0, 10, 35, 40]
