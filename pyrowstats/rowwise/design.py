"""
MatrixDesign: data wrapper for row-wise statistics.

Wraps a numeric matrix whose rows are the units of computation and
provides validation and metadata for the row summary pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyrowstats.core.validation import check_array, check_2d, check_min_columns


@dataclass(frozen=True)
class MatrixDesign:
    """
    Design for row-wise statistics.

    Wraps a data matrix (n_rows x n_cols) that may contain NaN values
    representing missing data. Immutable after construction; the caller's
    array is never written to.

    Construction:
        MatrixDesign.from_array(data)
    """
    _data: NDArray[np.floating[Any]]
    _n_rows: int
    _n_cols: int
    _row_names: tuple[str, ...] | None

    @classmethod
    def from_array(cls, data) -> MatrixDesign:
        """
        Build MatrixDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D or 2D data matrix. Can be a numpy array, nested lists (None
            entries are missing), or a pandas DataFrame, whose index becomes
            the row names. 1D input is one row and is reshaped to (1, n).
        """
        if hasattr(data, 'values') and hasattr(data, 'columns'):
            row_names = tuple(str(r) for r in data.index)
            data_array = check_array(data.values, "matrix")
        else:
            row_names = None
            data_array = check_array(data, "matrix")

        if data_array.ndim == 1:
            data_array = data_array.reshape(1, -1)

        return cls._build(data_array, row_names=row_names)

    @classmethod
    def _build(
        cls,
        data: NDArray,
        row_names: tuple[str, ...] | None = None,
    ) -> MatrixDesign:
        """Internal builder with validation."""
        check_2d(data, "matrix")
        check_min_columns(data, 1, "matrix")

        n_rows, n_cols = data.shape
        data = data.copy()
        data.setflags(write=False)
        return cls(_data=data, _n_rows=n_rows, _n_cols=n_cols, _row_names=row_names)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only data matrix (n_rows x n_cols), may contain NaN."""
        return self._data

    @property
    def n_rows(self) -> int:
        """Number of rows (units of computation)."""
        return self._n_rows

    @property
    def n_cols(self) -> int:
        """Number of columns per row."""
        return self._n_cols

    @property
    def row_names(self) -> tuple[str, ...] | None:
        """Row labels, or None if not available."""
        return self._row_names

    @property
    def n_missing(self) -> int:
        """Total number of missing values."""
        return int(np.sum(np.isnan(self._data)))

    @property
    def has_missing(self) -> bool:
        """Whether data has any missing values."""
        return bool(np.any(np.isnan(self._data)))

    def __repr__(self) -> str:
        missing = f", missing={self.n_missing}" if self.has_missing else ""
        return f"MatrixDesign(n_rows={self._n_rows}, n_cols={self._n_cols}{missing})"
