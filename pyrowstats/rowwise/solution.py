"""
Row summary solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pyrowstats.core.result import Result

if TYPE_CHECKING:
    from pyrowstats.rowwise.design import MatrixDesign


# Fixed column order of the summary table
SUMMARY_COLUMNS = (
    'mean', 'stdev', 'median', 'min', 'max',
    'num_lt_0', 'num_btw_1_and_5', 'num_na',
)

FLOAT_COLUMNS = SUMMARY_COLUMNS[:5]
COUNT_COLUMNS = SUMMARY_COLUMNS[5:]


@dataclass(frozen=True)
class RowSummaryParams:
    """
    Parameter payload for the row summary table.

    Every field has shape (n_rows,). Statistics are float64 with NaN for
    undefined values; counts are int64.
    """
    mean: NDArray[np.floating[Any]]
    stdev: NDArray[np.floating[Any]]
    median: NDArray[np.floating[Any]]
    min: NDArray[np.floating[Any]]
    max: NDArray[np.floating[Any]]
    num_lt_0: NDArray[np.integer[Any]]
    num_btw_1_and_5: NDArray[np.integer[Any]]
    num_na: NDArray[np.integer[Any]]


@dataclass
class RowSummarySolution:
    """
    User-facing row summary table.

    Wraps Result[RowSummaryParams]. One summary row per input row, in input
    order, with columns in SUMMARY_COLUMNS order.
    """
    _result: Result[RowSummaryParams]
    _design: 'MatrixDesign'

    # --- Columns ---

    @property
    def mean(self) -> NDArray[np.floating[Any]]:
        """Per-row arithmetic mean."""
        return self._result.params.mean

    @property
    def stdev(self) -> NDArray[np.floating[Any]]:
        """Per-row sample standard deviation (n-1), NaN for fewer than 2 values."""
        return self._result.params.stdev

    @property
    def median(self) -> NDArray[np.floating[Any]]:
        """Per-row median."""
        return self._result.params.median

    @property
    def min(self) -> NDArray[np.floating[Any]]:
        """Per-row minimum."""
        return self._result.params.min

    @property
    def max(self) -> NDArray[np.floating[Any]]:
        """Per-row maximum."""
        return self._result.params.max

    @property
    def num_lt_0(self) -> NDArray[np.integer[Any]]:
        """Per-row count of values below zero (raw row)."""
        return self._result.params.num_lt_0

    @property
    def num_btw_1_and_5(self) -> NDArray[np.integer[Any]]:
        """Per-row count of values in the open interval (1, 5) (raw row)."""
        return self._result.params.num_btw_1_and_5

    @property
    def num_na(self) -> NDArray[np.integer[Any]]:
        """Per-row count of missing values (raw row)."""
        return self._result.params.num_na

    @property
    def columns(self) -> tuple[str, ...]:
        return SUMMARY_COLUMNS

    def column(self, name: str) -> NDArray:
        """Look up a column by name."""
        if name not in SUMMARY_COLUMNS:
            raise KeyError(
                f"Unknown summary column {name!r}. "
                f"Available: {', '.join(SUMMARY_COLUMNS)}"
            )
        return getattr(self._result.params, name)

    # --- Rows ---

    def __len__(self) -> int:
        return self._design.n_rows

    def row(self, i: int) -> dict[str, float | int]:
        """Summary row i as a dict in column order."""
        n = len(self)
        if not -n <= i < n:
            raise IndexError(f"row index {i} out of range for {n} rows")
        out: dict[str, float | int] = {}
        for name in FLOAT_COLUMNS:
            out[name] = float(self.column(name)[i])
        for name in COUNT_COLUMNS:
            out[name] = int(self.column(name)[i])
        return out

    def records(self) -> list[dict[str, float | int]]:
        """All summary rows as dicts, in input row order."""
        return [self.row(i) for i in range(len(self))]

    def to_array(self) -> NDArray[np.float64]:
        """Table as a (n_rows, 8) float64 array in column order."""
        if len(self) == 0:
            return np.empty((0, len(SUMMARY_COLUMNS)), dtype=np.float64)
        return np.column_stack(
            [self.column(name).astype(np.float64) for name in SUMMARY_COLUMNS]
        )

    def to_dataframe(self):
        """
        Table as a pandas DataFrame.

        Columns are in SUMMARY_COLUMNS order, counts keep an integer dtype,
        and the index carries the row names of a DataFrame input.
        """
        import pandas as pd

        index = list(self.row_names) if self.row_names is not None else None
        return pd.DataFrame(
            {name: self.column(name) for name in SUMMARY_COLUMNS},
            index=index,
            columns=list(SUMMARY_COLUMNS),
        )

    # --- Metadata ---

    @property
    def row_names(self) -> tuple[str, ...] | None:
        """Row names from the design."""
        return self._design.row_names

    @property
    def handle_missing(self) -> bool:
        return self._result.info['handle_missing']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, Any]:
        return self._result.provenance

    def summary(self) -> str:
        """R data.frame style text rendering of the table."""
        n = len(self)
        labels = self.row_names or tuple(str(i + 1) for i in range(n))

        def fmt(name: str, i: int) -> str:
            value = self.column(name)[i]
            if name in COUNT_COLUMNS:
                return str(int(value))
            if np.isnan(value):
                return "NA"
            return f"{value:.6g}"

        cells = [[fmt(name, i) for name in SUMMARY_COLUMNS] for i in range(n)]
        col_widths = [
            max([len(name)] + [len(row[j]) for row in cells])
            for j, name in enumerate(SUMMARY_COLUMNS)
        ]
        label_width = max([0] + [len(lbl) for lbl in labels])

        lines = [
            " " * label_width + " "
            + " ".join(c.rjust(w) for c, w in zip(SUMMARY_COLUMNS, col_widths))
        ]
        for label, row in zip(labels, cells):
            lines.append(
                label.ljust(label_width) + " "
                + " ".join(v.rjust(w) for v, w in zip(row, col_widths))
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RowSummarySolution(n_rows={len(self)}, "
            f"handle_missing={self.handle_missing})"
        )
