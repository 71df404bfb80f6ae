"""
Elementwise predicates over scalars, vectors and matrices.

Both predicates map a scalar comparison over every element and preserve
the input's shape: a scalar in gives a bool out, an array-like in gives a
boolean ndarray of the same shape.

Missing values follow IEEE comparison semantics: every comparison with
NaN is False, so NaN never satisfies either predicate.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


def _as_numeric(x: ArrayLike) -> NDArray | np.floating:
    """Scalars stay scalars (0-d), everything else becomes float64."""
    arr = np.asarray(x, dtype=np.float64)
    return arr[()] if arr.ndim == 0 else arr


def is_negative(x: ArrayLike) -> bool | NDArray[np.bool_]:
    """
    Test whether values are strictly less than zero.

    Examples
    --------
    >>> is_negative(-1)
    True
    >>> is_negative([-1, 0, 1, 2, 3, 4])
    array([ True, False, False, False, False, False])
    """
    result = _as_numeric(x) < 0
    return bool(result) if np.ndim(result) == 0 else result


def in_open_interval(x: ArrayLike, a: float, b: float) -> bool | NDArray[np.bool_]:
    """
    Test whether values lie in the open interval (a, b).

    Both endpoints are excluded. With a >= b the interval is empty and
    every element is False.

    Examples
    --------
    >>> in_open_interval(3, 1, 5)
    True
    >>> in_open_interval([1, 9, 5, 2], 1, 5)
    array([False, False, False,  True])
    """
    values = _as_numeric(x)
    result = (a < values) & (values < b)
    return bool(result) if np.ndim(result) == 0 else result
