"""
Tests for Batch Evaluation
"""

import math

import numpy as np
import pytest
from evobench import Problem, InvalidVectorError, fitness, fitness_batch, domain


class TestFitnessBatch:
    """Test vectorised evaluation of many points."""

    @pytest.mark.parametrize("problem", list(Problem))
    def test_matches_scalar(self, problem):
        """Each row agrees with fitness() on that row."""
        lo, hi = domain(problem)
        X = np.linspace(lo, hi, 7 * 5).reshape(7, 5)
        values = fitness_batch(problem, X)
        assert values.shape == (7,)
        for row, v in zip(X, values):
            assert v == pytest.approx(fitness(problem, row), rel=1e-12, abs=1e-12)

    @pytest.mark.parametrize("problem", list(Problem))
    def test_optimum_rows(self, problem):
        X = np.vstack([problem.optimum(3)] * 4)
        np.testing.assert_allclose(fitness_batch(problem, X), 0.0, atol=1e-4)

    def test_single_vector(self):
        """A 1-D input is evaluated as one point."""
        values = fitness_batch(Problem.GRIEWANGK, [0.0, 0.0])
        assert values.shape == (1,)
        assert values[0] == 0.0

    def test_empty_batch(self):
        values = fitness_batch(Problem.ACKLEY, np.zeros((0, 3)))
        assert values.shape == (0,)

    def test_rejects_3d(self):
        with pytest.raises(InvalidVectorError):
            fitness_batch(Problem.ACKLEY, np.zeros((2, 2, 2)))

    def test_nan_row_does_not_spread(self):
        """A NaN only poisons its own row."""
        X = np.array([[0.0, 0.0], [np.nan, 0.0]])
        values = fitness_batch(Problem.ACKLEY, X)
        assert abs(values[0]) < 1e-9
        assert math.isnan(values[1])

    def test_strict_rejects_nan_row(self):
        X = np.array([[0.0, 0.0], [np.nan, 0.0]])
        with pytest.raises(InvalidVectorError, match="rows \\[1\\]"):
            fitness_batch(Problem.ACKLEY, X, strict=True)

    def test_accepts_name(self):
        np.testing.assert_array_equal(
            fitness_batch("griewangk", [[0.0], [0.0]]), [0.0, 0.0]
        )
