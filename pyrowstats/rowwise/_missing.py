"""
Missing data handling for row-wise statistics.

The missing marker is NaN. Stripping is done per row; counting always
looks at the raw data.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


def strip_missing(x: ArrayLike) -> NDArray[np.float64]:
    """
    Remove NaN values from a sequence, keeping the order of the rest.

    Parameters
    ----------
    x : array-like
        1D sequence, may contain NaN (None is read as NaN).

    Returns
    -------
    NDArray
        New 1D float64 array with NaN removed. Empty input gives an
        empty array. The input is never modified.

    Examples
    --------
    >>> strip_missing([1, 2, np.nan, 3])
    array([1., 2., 3.])
    """
    arr = np.asarray(x, dtype=np.float64).ravel()
    return arr[~np.isnan(arr)]


def count_missing(data: NDArray) -> NDArray[np.int64]:
    """Number of NaN values in each row of a 2D array."""
    return np.isnan(data).sum(axis=1).astype(np.int64)


def row_has_missing(data: NDArray) -> NDArray[np.bool_]:
    """Boolean mask, True for rows containing at least one NaN."""
    return np.isnan(data).any(axis=1)
