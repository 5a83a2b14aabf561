# heapview

heapview holds data models and helpers for browsing a heap allocation profile. It covers cost trees, top-N lists, stack views, size histograms and code navigation. It uses only the standard library and has no GUI toolkit.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

- `heapview.allocationdata.AllocationData` is a cost record. It has four integer fields: `allocations`, `temporary`, `leaked` and `peak`. It supports `+`, `-`, `+=` and `-=`. `clear_cost()` sets every field to zero.
- `heapview.location` defines three things:
  - `Symbol` holds a function, a binary and a path. Symbols are ordered by those fields in that order. `is_valid()` is true if any field is set.
  - `FileLine` is a file and a line. Its `str()` is `file:line`, or `??` when there is no file.
  - `unresolved_function_name()` returns the label used for frames that have no name.
- `heapview.util` has these formatting helpers:
  - `basename` gives the part of a path after the last `/`.
  - `format_string` returns the text, or `??` when it is empty.
  - `format_time` gives minutes above one minute and seconds otherwise, to three significant digits.
  - `format_bytes` uses decimal units: B, kB, MB and so on.
  - `format_cost_relative` gives a percentage, or an empty string when the total is zero.
  - `format_symbol_tooltip`, `format_symbol_costs_tooltip` and `format_location_tooltip` build HTML tooltips.
- `heapview.treemodel` holds the cost tree:
  - `TreeModel` holds a tree of `RowData` nodes, each with a cost, a symbol, a parent and children.
  - Queries are keyed by the `Column` and `Role` enums. For byte columns, `data()` returns formatted sizes. The sort and max-cost roles return absolute values.
  - `tooltip()` describes a row's costs and its backtrace.
  - `set_summary()` sets the totals that relative figures are computed against.
- `heapview.topdown.to_top_down_data` turns a bottom-up tree into a top-down tree. The bottom-up tree must have its parent links set, and `set_parents` does that.
- `heapview.topproxy.TopProxy` lists the top-level rows for one `TopProxyType`: peak, leaked, allocations or temporary.
  - Rows are sorted by cost, highest first.
  - Rows with zero cost are hidden.
  - Rows below 1% of the summary's maximum cost are hidden.
- `heapview.treeproxy.TreeProxy` filters rows by the function and module columns, using a case-insensitive substring match. A row stays visible if it matches or if any of its descendants matches.
- `heapview.stacksmodel.StacksModel` collects one root-to-leaf stack for every leaf under a row. It shows one stack at a time, chosen with a one-based `set_stack_index`.
- `heapview.histogrammodel` handles allocation sizes:
  - `build_size_histogram` groups `CountedAllocation` records into size buckets, from "0B to 8B" up to "more than 1KB".
  - Each bucket keeps the total in column 0 and the ten busiest symbols after it.
  - `HistogramModel` serves the resulting rows. It supports the `display`, `tooltip`, `brush` and `pen` roles.
- `heapview.navigation` opens a source location in an editor:
  - `IDE_SETTINGS` lists KDevelop, Kate, KWrite, gedit, gvim and Qt Creator.
  - `build_navigation_command` fills in a command for an editor index, or for a custom command when the index is -1. In a command, `%f`, `%l` and `%c` stand for the file, line and column.
  - `navigate_to_code` starts that command in the background. When no command applies, it opens the file with the desktop's default handler.
- `heapview.session` has these helpers:
  - `validate_input_file` raises `InputError` for a path that is missing, unreadable or not a regular file.
  - `window_title` builds a window title.
  - `insert_word_wrap_markers` puts zero-width spaces into long words.
  - `selection_to_text` turns selected cells into tab-separated text.

## Example

```python
from heapview.allocationdata import AllocationData
from heapview.location import Symbol
from heapview.treemodel import Column, RowData, TreeModel
from heapview.topdown import to_top_down_data

leaf = RowData(cost=AllocationData(allocations=3, peak=128), symbol=Symbol("malloc_wrapper", "app", "/usr/bin/app"))
model = TreeModel()
model.reset_data(to_top_down_data([leaf]))
print(model.row_count(None))                            # 1
print(model.data(model.rows[0], Column.ALLOCATIONS))    # 3
```

## What it does not do

heapview does not read profile data files and does not record allocations. You build the `RowData` trees and the `CountedAllocation` records from your own data. It has no caller/callee view, no charts over time, no window and no command-line program. It provides the models and helpers that such a front end would use.