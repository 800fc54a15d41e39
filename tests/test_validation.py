"""
Tests for Coordinate Vector Validation
"""

import numpy as np
import pytest
from evobench import InvalidVectorError, EvobenchError, check_vector, check_matrix


class TestCheckVector:
    """Test single-vector validation."""

    def test_valid(self):
        arr = check_vector([1, 2, 3])
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [1.0, 2.0, 3.0])

    def test_empty(self):
        with pytest.raises(InvalidVectorError, match="at least one"):
            check_vector([])

    def test_not_1d(self):
        with pytest.raises(InvalidVectorError, match="1-D"):
            check_vector([[1.0, 2.0]])

    def test_scalar(self):
        with pytest.raises(InvalidVectorError):
            check_vector(3.0)

    def test_non_finite_positions(self):
        with pytest.raises(InvalidVectorError, match="\\[1, 2\\]"):
            check_vector([0.0, float('nan'), float('-inf')])

    def test_error_hierarchy(self):
        """Validation errors are both EvobenchError and ValueError."""
        with pytest.raises(EvobenchError):
            check_vector([])
        with pytest.raises(ValueError):
            check_vector([])


class TestCheckMatrix:
    """Test batch validation."""

    def test_valid(self):
        arr = check_matrix([[1.0, 2.0], [3.0, 4.0]])
        assert arr.shape == (2, 2)

    def test_not_2d(self):
        with pytest.raises(InvalidVectorError, match="2-D"):
            check_matrix([1.0, 2.0])

    def test_no_columns(self):
        with pytest.raises(InvalidVectorError, match="at least one"):
            check_matrix(np.zeros((3, 0)))

    def test_non_finite_rows(self):
        X = np.zeros((4, 2))
        X[2, 1] = np.inf
        with pytest.raises(InvalidVectorError, match="\\[2\\]"):
            check_matrix(X)
