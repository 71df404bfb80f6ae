"""
Tests for the elementwise predicates.

Expected values from the R originals: x < 0 and a < x & x < b.
"""

import numpy as np
import pytest

from pyrowstats.rowwise import is_negative, in_open_interval


class TestIsNegative:

    def test_scalar_true(self):
        assert is_negative(-1) is True

    def test_scalar_false(self):
        assert is_negative(10) is False

    def test_zero_is_not_negative(self):
        assert is_negative(0) is False
        assert is_negative(-0.0) is False

    def test_vector(self):
        """R: less_than_zero(c(-1,0,1,2,3,4))."""
        result = is_negative([-1, 0, 1, 2, 3, 4])
        np.testing.assert_array_equal(
            result, [True, False, False, False, False, False]
        )

    def test_matrix_shape_preserved(self):
        m = np.array([[-1.0, 2.0], [3.0, -4.0]])
        result = is_negative(m)
        assert result.shape == (2, 2)
        assert result.dtype == np.bool_
        np.testing.assert_array_equal(result, [[True, False], [False, True]])

    def test_nan_is_false(self):
        np.testing.assert_array_equal(is_negative([np.nan, -1.0]), [False, True])

    def test_negative_infinity(self):
        assert is_negative(-np.inf) is True

    def test_input_not_modified(self):
        x = np.array([-1.0, 1.0])
        is_negative(x)
        np.testing.assert_array_equal(x, [-1.0, 1.0])


class TestInOpenInterval:

    def test_scalar_inside(self):
        assert in_open_interval(3, 1, 5) is True

    def test_scalar_boundaries_excluded(self):
        assert in_open_interval(1, 1, 5) is False
        assert in_open_interval(5, 1, 5) is False

    def test_vector(self):
        """R: is_between(c(1,9,5,2), 1, 5)."""
        result = in_open_interval([1, 9, 5, 2], 1, 5)
        np.testing.assert_array_equal(result, [False, False, False, True])

    def test_matrix(self):
        """R: is_between(matrix(1:9, nrow=3, byrow=TRUE), 1, 5)."""
        m = np.arange(1, 10).reshape(3, 3)
        result = in_open_interval(m, 1, 5)
        assert result.shape == (3, 3)
        np.testing.assert_array_equal(result, [
            [False, True, True],
            [True, False, False],
            [False, False, False],
        ])

    def test_nan_is_false(self):
        assert in_open_interval(np.nan, 1, 5) is False

    def test_empty_interval(self):
        """a >= b leaves nothing inside."""
        result = in_open_interval([1, 2, 3], 3, 1)
        assert not result.any()

    @pytest.mark.parametrize("x, expected", [
        (1.0000001, True),
        (4.9999999, True),
        (0.9999999, False),
        (5.0000001, False),
    ])
    def test_near_boundaries(self, x, expected):
        assert in_open_interval(x, 1, 5) is expected
