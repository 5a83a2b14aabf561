import pytest

from heapview.histogrammodel import (
    CountedAllocation,
    HistogramColumn,
    HistogramModel,
    HistogramRow,
    build_size_histogram,
    color_for_column,
)
from heapview.location import Symbol

A = Symbol("alpha", "liba.so", "/lib/liba.so")
B = Symbol("beta", "libb.so", "/lib/libb.so")
C = Symbol("gamma", "app", "/bin/app")


def test_empty_input_gives_no_rows():
    assert build_size_histogram([]) == []


def test_single_small_allocation():
    rows = build_size_histogram([CountedAllocation(4, 7, A)])
    assert len(rows) == 1
    assert rows[0].size_label == "0B to 8B"
    assert rows[0].size == 8
    assert rows[0].columns[0].allocations == 7
    assert rows[0].columns[1] == HistogramColumn(7, A)
    assert all(column.allocations == 0 for column in rows[0].columns[2:])


def test_buckets_advance_one_at_a_time():
    rows = build_size_histogram(
        [CountedAllocation(2000, 1, C), CountedAllocation(4, 2, A), CountedAllocation(12, 3, B)]
    )
    assert [row.size_label for row in rows] == ["0B to 8B", "9B to 16B", "17B to 32B"]
    assert [row.columns[0].allocations for row in rows] == [2, 3, 1]
    assert [row.columns[1].symbol for row in rows] == [A, B, C]


def test_large_first_allocation_leaves_empty_first_bucket():
    rows = build_size_histogram([CountedAllocation(100, 5, A)])
    assert len(rows) == 2
    assert rows[0].columns[0].allocations == 0
    assert rows[1].size_label == "9B to 16B"
    assert rows[1].columns[1] == HistogramColumn(5, A)


def test_same_symbol_is_merged():
    rows = build_size_histogram([CountedAllocation(1, 2, A), CountedAllocation(3, 4, A)])
    assert rows[0].columns[1] == HistogramColumn(6, A)
    assert rows[0].columns[0].allocations == 6


def test_only_top_ten_symbols_are_kept():
    infos = [CountedAllocation(1, count, Symbol(f"f{count}")) for count in range(1, 13)]
    rows = build_size_histogram(infos)
    assert len(rows) == 1
    columns = rows[0].columns
    assert len(columns) == HistogramRow.NUM_COLUMNS
    assert columns[0].allocations == sum(range(1, 13))
    assert [column.allocations for column in columns[1:]] == list(range(12, 2, -1))
    assert columns[1].symbol == Symbol("f12")


def test_color_for_first_column_is_red():
    assert color_for_column(0, 11) == (255, 0, 0)


@pytest.mark.parametrize("column", range(11))
def test_colors_are_fully_saturated(column):
    color = color_for_column(column, 11)
    assert max(color) == 255
    assert min(color) == 0


def _model():
    model = HistogramModel()
    model.reset_data(build_size_histogram([CountedAllocation(4, 5, A), CountedAllocation(20, 3, B)]))
    return model


def test_model_counts():
    model = _model()
    assert model.row_count() == 2
    assert model.column_count() == HistogramRow.NUM_COLUMNS


def test_model_display_and_header():
    model = _model()
    assert model.data(0, 0) == 5
    assert model.data(1, 1) == 3
    assert model.header_data(0) == "0B to 8B"
    assert model.header_data(0, vertical=False) is None
    assert model.header_data(5) is None


def test_model_tooltips():
    model = _model()
    assert model.data(0, 0, "tooltip") == "5 allocations in total"
    assert model.data(0, 1, "tooltip") == "5 allocations from alpha in liba.so (/lib/liba.so)"


def test_model_brush_and_pen():
    model = _model()
    assert model.data(0, 3, "brush") == color_for_column(3, model.column_count())
    assert model.data(0, 3, "pen") == (0, 0, 0)
    assert model.data(0, 3, "unknown") is None


def test_model_out_of_range_and_clear():
    model = _model()
    assert model.data(2, 0) is None
    assert model.data(0, 11) is None
    model.clear_data()
    assert model.row_count() == 0
    assert model.data(0, 0) is None