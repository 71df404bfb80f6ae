"""
CPU reference backend for row-wise summary statistics.

Matches R's mean(), sd(), median(), min() and max() applied to each row,
with na.rm=TRUE or na.rm=FALSE.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pyrowstats.core.result import Result
from pyrowstats.core.compute.timing import Timer
from pyrowstats.rowwise.design import MatrixDesign
from pyrowstats.rowwise.solution import RowSummaryParams
from pyrowstats.rowwise._missing import strip_missing, count_missing, row_has_missing
from pyrowstats.rowwise._median import median_of_row
from pyrowstats.rowwise._predicates import is_negative, in_open_interval


# num_btw_1_and_5 counts INTERVAL[0] < x < INTERVAL[1]
INTERVAL = (1.0, 5.0)


class CPURowSummaryBackend:
    """CPU reference backend for the row summary table."""

    @property
    def name(self) -> str:
        return 'cpu_rowwise'

    def solve(
        self,
        design: MatrixDesign,
        *,
        handle_missing: bool = False,
    ) -> Result[RowSummaryParams]:
        """
        Summarize every row of the design.

        Parameters
        ----------
        design : MatrixDesign
        handle_missing : bool
            If True, NaN is stripped from each row before the five
            continuous statistics are computed. If False, a row containing
            NaN gets NaN for all five. Counts always use the raw row.
        """
        timer = Timer()
        timer.start()

        data = design.data
        n = design.n_rows
        warnings_list: list[str] = []

        # Pre-sized output, one slot per row
        mean = np.full(n, np.nan, dtype=np.float64)
        stdev = np.full(n, np.nan, dtype=np.float64)
        median = np.full(n, np.nan, dtype=np.float64)
        row_min = np.full(n, np.nan, dtype=np.float64)
        row_max = np.full(n, np.nan, dtype=np.float64)

        with timer.section('missing_data'):
            num_na = count_missing(data)
            has_missing = row_has_missing(data)

        with timer.section('counts'):
            num_lt_0 = self._count_rows(is_negative(data))
            num_btw = self._count_rows(in_open_interval(data, *INTERVAL))

        n_empty = 0
        with timer.section('statistics'):
            for i in range(n):
                raw = data[i, :]
                if handle_missing:
                    working = strip_missing(raw)
                elif has_missing[i]:
                    # NaN propagates into every continuous statistic
                    continue
                else:
                    working = raw

                if len(working) == 0:
                    n_empty += 1
                    continue

                (mean[i], stdev[i], median[i],
                 row_min[i], row_max[i]) = self._row_statistics(working)

        n_with_missing = int(np.sum(has_missing))
        if n_with_missing and not handle_missing:
            warnings_list.append(
                f"{n_with_missing} row(s) contain missing values; "
                f"statistics propagated as NaN (use handle_missing=True to strip them)"
            )
        if n_empty:
            warnings_list.append(
                f"{n_empty} row(s) have no non-missing values; statistics are NaN"
            )

        timer.stop()

        params = RowSummaryParams(
            mean=mean,
            stdev=stdev,
            median=median,
            min=row_min,
            max=row_max,
            num_lt_0=num_lt_0,
            num_btw_1_and_5=num_btw,
            num_na=num_na,
        )

        return Result(
            params=params,
            info={
                'handle_missing': bool(handle_missing),
                'n_rows_with_missing': n_with_missing,
                'interval': INTERVAL,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    @staticmethod
    def _count_rows(mask: NDArray[np.bool_]) -> NDArray[np.int64]:
        """Number of True entries in each row of a boolean matrix."""
        return mask.sum(axis=1).astype(np.int64)

    @staticmethod
    def _row_statistics(working: NDArray) -> tuple[float, float, float, float, float]:
        """
        mean, stdev, median, min, max of a non-empty row without NaN.

        stdev uses the Bessel correction (n-1) and is NaN for a single
        value, matching R sd().
        """
        k = len(working)
        # Infinite values give NaN or inf, as in R
        with np.errstate(invalid='ignore', over='ignore'):
            mean = float(np.mean(working))
            stdev = float(np.std(working, ddof=1)) if k >= 2 else np.nan
            median = median_of_row(working)
        return mean, stdev, median, float(np.min(working)), float(np.max(working))
