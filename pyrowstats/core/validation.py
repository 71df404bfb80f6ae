"""
Input validation utilities for PyRowStats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes, and
      None -> NaN as the missing marker)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyrowstats.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    None entries (e.g. [[1, None], [3, 4]]) are read as missing and become
    NaN. Ragged nested sequences are rejected as non-rectangular.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        DimensionError: If nested sequences have inconsistent lengths
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except ValueError as e:
        raise DimensionError(
            f"{name}: cannot convert to a rectangular array: {e}"
        ) from e
    except TypeError as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        result = _object_to_float(result, name)

    if result.dtype == np.bool_:
        raise ValidationError(f"{name}: boolean dtype, expected numeric data")

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype} is not ordered")

    return result.astype(np.float64, copy=False)


def _object_to_float(result: NDArray, name: str) -> NDArray[np.float64]:
    """Convert an object array holding numbers and None to float64."""
    out = np.empty(result.shape, dtype=np.float64)
    flat = out.reshape(-1)
    for k, value in enumerate(result.reshape(-1)):
        if value is None:
            flat[k] = np.nan
        elif isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool):
            flat[k] = value
        else:
            raise ValidationError(
                f"{name}: non-numeric element {value!r} of type {type(value).__name__}"
            )
    return out


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_min_columns(array: NDArray[np.floating[Any]], min_columns: int, name: str) -> None:
    """
    Verify a 2D array has at least the minimum number of columns.

    Raises:
        ValidationError: If array has fewer than min_columns columns
    """
    p = array.shape[1]
    if p < min_columns:
        raise ValidationError(
            f"{name}: requires at least {min_columns} column(s), got {p}"
        )


def check_bool(value: Any, name: str) -> None:
    """
    Verify a flag is a real boolean (True/False or numpy bool).

    Raises:
        ValidationError: If value is not a boolean
    """
    if not isinstance(value, (bool, np.bool_)):
        raise ValidationError(
            f"{name}: expected True or False, got {value!r} of type {type(value).__name__}"
        )


def check_choice(value: Any, choices: tuple[str, ...], name: str) -> None:
    """
    Verify an option is one of the allowed string values.

    Raises:
        ValidationError: If value is not in choices
    """
    if value not in choices:
        allowed = ", ".join(repr(c) for c in choices)
        raise ValidationError(f"{name}: must be one of {allowed}, got {value!r}")
