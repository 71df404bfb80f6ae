"""
Row-wise statistics module.

Summarizes each row of a numeric matrix (NaN = missing), matching R's
base statistics applied row by row.

Public API:
    summarize_matrix(x)    - Eight-column summary table, one row per input row
    reduce_rows(x, fn)     - Any scalar reduction applied to each row
    row_medians(x)         - Median of each row
    is_negative(x)         - Elementwise x < 0
    in_open_interval(x, a, b) - Elementwise a < x < b
    strip_missing(x)       - Drop NaN from a sequence
"""

from pyrowstats.rowwise.design import MatrixDesign
from pyrowstats.rowwise.solution import (
    RowSummaryParams,
    RowSummarySolution,
    SUMMARY_COLUMNS,
)
from pyrowstats.rowwise.solvers import (
    summarize_matrix,
    reduce_rows,
    row_medians,
)
from pyrowstats.rowwise._predicates import is_negative, in_open_interval
from pyrowstats.rowwise._missing import strip_missing

__all__ = [
    "summarize_matrix",
    "reduce_rows",
    "row_medians",
    "is_negative",
    "in_open_interval",
    "strip_missing",
    "MatrixDesign",
    "RowSummaryParams",
    "RowSummarySolution",
    "SUMMARY_COLUMNS",
]
