"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, None -> NaN, ragged and non-numeric rejection
    - check_ndim / check_2d: dimensionality checks
    - check_min_columns: minimum column count
    - check_bool / check_choice: option validation
"""

import numpy as np
import pytest

from pyrowstats.core.exceptions import DimensionError, ValidationError
from pyrowstats.core.validation import (
    check_2d,
    check_array,
    check_bool,
    check_choice,
    check_min_columns,
    check_ndim,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "matrix")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "matrix")
        assert result.dtype == np.float64

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "matrix")
        assert result.shape == (2, 2)

    def test_none_becomes_nan(self):
        result = check_array([[1, None], [3, 4]], "matrix")
        assert result.dtype == np.float64
        assert np.isnan(result[0, 1])
        assert result[1, 0] == 3.0

    def test_nan_preserved(self):
        result = check_array([1.0, np.nan], "matrix")
        assert np.isnan(result[1])

    def test_ragged_raises_dimension_error(self):
        with pytest.raises(DimensionError, match="rectangular"):
            check_array([[1, 2, 3], [4, 5]], "matrix")

    def test_string_array_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "matrix")

    def test_mixed_object_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric element"):
            check_array(np.array([1, "a", None], dtype=object), "matrix")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="boolean"):
            check_array([True, False], "matrix")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "matrix")

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="my_param"):
            check_array(["x"], "my_param")

    def test_input_not_modified(self):
        original = [[1, None], [3, 4]]
        check_array(original, "matrix")
        assert original == [[1, None], [3, 4]]


# ═══════════════════════════════════════════════════════════════════════
# Dimensionality
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_correct_ndim_passes(self):
        check_ndim(np.zeros((2, 3)), 2, "matrix")

    def test_wrong_ndim_raises(self):
        with pytest.raises(DimensionError, match="expected 2D array, got 3D"):
            check_ndim(np.zeros((2, 3, 4)), 2, "matrix")

    def test_check_2d_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "matrix")


class TestCheckMinColumns:

    def test_enough_columns(self):
        check_min_columns(np.zeros((0, 3)), 1, "matrix")

    def test_zero_columns_raises(self):
        with pytest.raises(ValidationError, match="at least 1 column"):
            check_min_columns(np.zeros((3, 0)), 1, "matrix")


# ═══════════════════════════════════════════════════════════════════════
# Options
# ═══════════════════════════════════════════════════════════════════════


class TestCheckBool:

    @pytest.mark.parametrize("value", [True, False, np.True_, np.False_])
    def test_booleans_pass(self, value):
        check_bool(value, "handle_missing")

    @pytest.mark.parametrize("value", [1, 0, "yes", None])
    def test_non_booleans_rejected(self, value):
        with pytest.raises(ValidationError, match="handle_missing"):
            check_bool(value, "handle_missing")


class TestCheckChoice:

    def test_valid_choice(self):
        check_choice("nan", ("raise", "nan"), "errors")

    def test_invalid_choice(self):
        with pytest.raises(ValidationError, match="'raise', 'nan'"):
            check_choice("ignore", ("raise", "nan"), "errors")
