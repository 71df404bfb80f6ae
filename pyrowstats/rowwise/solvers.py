"""
Solver dispatch for row-wise statistics.

Provides summarize_matrix() as the comprehensive entry point, plus the
building blocks reduce_rows() and row_medians().
"""

from __future__ import annotations

import warnings
from typing import Callable, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyrowstats.core.exceptions import ValidationError, RowFunctionError
from pyrowstats.core.validation import check_bool, check_choice
from pyrowstats.rowwise.design import MatrixDesign
from pyrowstats.rowwise.solution import RowSummarySolution
from pyrowstats.rowwise.backends.cpu import CPURowSummaryBackend
from pyrowstats.rowwise._missing import strip_missing
from pyrowstats.rowwise._median import compute_row_medians


BackendChoice = Literal['auto', 'cpu']
ErrorMode = Literal['raise', 'nan']

RowFunction = Callable[[NDArray[np.float64]], float]


def _ensure_design(data: ArrayLike | MatrixDesign) -> MatrixDesign:
    """Convert raw array to MatrixDesign if needed."""
    if isinstance(data, MatrixDesign):
        return data
    return MatrixDesign.from_array(data)


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPURowSummaryBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def summarize_matrix(
    x: ArrayLike | MatrixDesign,
    *,
    handle_missing: bool = False,
    backend: BackendChoice = 'auto',
) -> RowSummarySolution:
    """
    Summarize every row of a matrix into an eight-column table.

    Columns, in order: mean, stdev, median, min, max, num_lt_0,
    num_btw_1_and_5, num_na.

    Parameters
    ----------
    x : array-like or MatrixDesign
        2D data matrix, NaN (or None) marks a missing value. 1D input is a
        single row.
    handle_missing : bool
        If True, missing values are stripped from each row before mean,
        stdev, median, min and max are computed (R na.rm=TRUE). If False
        (default), any missing value makes those five statistics NaN.
        num_lt_0, num_btw_1_and_5 and num_na always describe the raw row.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    RowSummarySolution with one summary row per input row.

    Examples
    --------
    >>> m = np.arange(1, 10).reshape(3, 3)
    >>> summarize_matrix(m).mean
    array([2., 5., 8.])
    """
    check_bool(handle_missing, "handle_missing")
    design = _ensure_design(x)
    be = _get_backend(backend)

    result = be.solve(design, handle_missing=handle_missing)

    return RowSummarySolution(_result=result, _design=design)


def reduce_rows(
    x: ArrayLike | MatrixDesign,
    fn: RowFunction,
    *,
    handle_missing: bool = True,
    errors: ErrorMode = 'raise',
) -> NDArray[np.float64]:
    """
    Apply a scalar-valued function to every row of a matrix.

    Parameters
    ----------
    x : array-like or MatrixDesign
        2D data matrix.
    fn : callable
        Maps a 1D float64 array to a single number, e.g. np.mean, np.max.
    handle_missing : bool
        If True (default), NaN is stripped from each row before fn is
        called. If False, fn sees the raw row and decides itself how NaN
        propagates.
    errors : str
        'raise' (default): a failure of fn raises RowFunctionError for the
        failing row. 'nan': the failing row gets NaN, the other rows are
        still reduced, and one RuntimeWarning lists the failed rows.

    Returns
    -------
    NDArray of shape (n_rows,), in row order.

    Examples
    --------
    >>> m = np.arange(1, 10).reshape(3, 3)
    >>> reduce_rows(m, np.min)
    array([1., 4., 7.])
    """
    if not callable(fn):
        raise ValidationError(f"fn: expected a callable, got {type(fn).__name__}")
    check_bool(handle_missing, "handle_missing")
    check_choice(errors, ('raise', 'nan'), "errors")

    design = _ensure_design(x)
    data = design.data
    n = design.n_rows
    fn_name = getattr(fn, '__name__', None)

    out = np.empty(n, dtype=np.float64)
    failed: list[int] = []

    for i in range(n):
        row = strip_missing(data[i, :]) if handle_missing else data[i, :]
        try:
            out[i] = _as_scalar(fn(row))
        except Exception as e:
            if errors == 'raise':
                raise RowFunctionError(
                    f"{fn_name or 'fn'} failed on row {i}: {e}",
                    row_index=i,
                    function_name=fn_name,
                ) from e
            out[i] = np.nan
            failed.append(i)

    if failed:
        warnings.warn(
            f"{fn_name or 'fn'} failed on {len(failed)} row(s) {failed}; "
            f"those rows are NaN",
            RuntimeWarning,
            stacklevel=2,
        )

    return out


def _as_scalar(value) -> float:
    """Coerce a reduction result to float, rejecting non-scalar output."""
    arr = np.asarray(value)
    if arr.size != 1:
        raise ValueError(
            f"reduction must return a single value, got shape {arr.shape}"
        )
    return float(arr.reshape(()))


def row_medians(x: ArrayLike | MatrixDesign) -> NDArray[np.float64]:
    """
    Median of each row of a matrix.

    Each row is sorted ascending and its middle value taken (mean of the
    two central values for an even number of columns). Missing values are
    not stripped: a row with any NaN has median NaN. Use
    reduce_rows(x, np.median, handle_missing=True) for NaN-aware medians.

    Examples
    --------
    >>> row_medians(np.arange(1, 10).reshape(3, 3))
    array([2., 5., 8.])
    """
    design = _ensure_design(x)
    return compute_row_medians(design.data)
