"""
Row medians via full ordering of each row.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def median_of_row(row: NDArray) -> float:
    """
    Median of one row. Matches R median() with na.rm=FALSE.

    The row is sorted ascending and the middle value taken (mean of the
    two central values for an even length). NaN is not filtered: a row
    containing NaN has median NaN, as does an empty row.
    """
    n = len(row)
    if n == 0 or np.any(np.isnan(row)):
        return np.nan

    row_sorted = np.sort(row)
    mid = n // 2
    if n % 2 == 1:
        return float(row_sorted[mid])
    return float((row_sorted[mid - 1] + row_sorted[mid]) / 2.0)


def compute_row_medians(data: NDArray) -> NDArray[np.float64]:
    """Median of every row of a 2D array, shape (n_rows,)."""
    n = data.shape[0]
    medians = np.empty(n, dtype=np.float64)
    for i in range(n):
        medians[i] = median_of_row(data[i, :])
    return medians
