"""
PyRowStats: row-wise descriptive statistics for numeric matrices.

Summarizes every row of a matrix that may contain missing values (NaN)
into a fixed eight-column table, matching R's mean(), sd(), median(),
min() and max() semantics for na.rm=TRUE / na.rm=FALSE.

Submodules:
    core: Result envelope, exceptions, validation, timing
    rowwise: Predicates, missing-value filtering, row reducers, summarizer
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pyrowstats import rowwise
from pyrowstats.rowwise import (
    summarize_matrix,
    reduce_rows,
    row_medians,
    is_negative,
    in_open_interval,
    strip_missing,
)

__all__ = [
    "__version__",
    "rowwise",
    "summarize_matrix",
    "reduce_rows",
    "row_medians",
    "is_negative",
    "in_open_interval",
    "strip_missing",
]
