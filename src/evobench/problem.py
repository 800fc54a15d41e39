"""
Benchmark Problems - Ackley, Griewangk, Schwefel

Fitness functions for the evolutionary computation benchmark problems,
evaluated on the hypercube of dimension p where f(x*) = 0:

- Ackley:    20 + e - 20*exp(-0.2*sqrt((1/p)*sum(x_i^2))) - exp((1/p)*sum(cos(2*pi*x_i)))
             x* = (0, ..., 0), domain [-30, 30]
- Griewangk: 1 + sum(x_i^2/4000) - prod(cos(x_i/sqrt(i)))
             x* = (0, ..., 0), domain [-600, 600]
- Schwefel:  418.9829*p - sum(x_i*sin(sqrt(|x_i|)))
             x* = (420.9687, ...), domain [-512.03, 511.97]

Each formula reduces over the last axis, so the same code evaluates a
single point (1-D) or a batch of points (2-D, one per row).
"""

from enum import Enum
from typing import Any, Dict, NamedTuple, Sequence, Union

import numpy as np

from .errors import InvalidVectorError, UnknownProblemError
from .validation import as_vector, check_matrix, check_vector


SCHWEFEL_CONSTANT = 418.9829
SCHWEFEL_OPTIMUM = 420.9687


class Domain(NamedTuple):
    """Closed interval [lo, hi] shared by every coordinate."""
    lo: float
    hi: float

    @property
    def width(self) -> float:
        return self.hi - self.lo

    @property
    def center(self) -> float:
        return (self.lo + self.hi) / 2.0

    def contains(self, x: Sequence[float]) -> bool:
        """Check that every coordinate of x lies inside the interval."""
        arr = as_vector(x)
        return bool(np.all((arr >= self.lo) & (arr <= self.hi)))

    def clip(self, x: Sequence[float]) -> np.ndarray:
        """Clamp every coordinate of x into the interval."""
        return np.clip(as_vector(x), self.lo, self.hi)


class Problem(Enum):
    """The benchmark problems."""
    ACKLEY = "ackley"
    GRIEWANGK = "griewangk"
    SCHWEFEL = "schwefel"

    @classmethod
    def from_name(cls, name: str) -> 'Problem':
        """
        Look up a problem by (case-insensitive) name.

        "griewank" is accepted as an alias of "griewangk".
        """
        key = name.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise UnknownProblemError(
                f"Unknown problem '{name}' (choose from: {choices})"
            ) from None

    def fitness(self, x: Sequence[float], strict: bool = False) -> float:
        return fitness(self, x, strict=strict)

    def domain(self) -> Domain:
        return domain(self)

    def optimum(self, p: int) -> np.ndarray:
        """Known global minimiser in dimension p."""
        if self is Problem.SCHWEFEL:
            return np.full(p, SCHWEFEL_OPTIMUM)
        return np.zeros(p)

    @property
    def optimum_value(self) -> float:
        return 0.0


_ALIASES = {
    "griewank": "griewangk",
}


def _coerce(problem: Union[Problem, str]) -> Problem:
    if isinstance(problem, Problem):
        return problem
    return Problem.from_name(problem)


def _ackley(x: np.ndarray) -> np.ndarray:
    inv_p = 1.0 / np.float64(x.shape[-1])
    sum_sq = np.sum(x ** 2, axis=-1)
    sum_cos = np.sum(np.cos(2.0 * np.pi * x), axis=-1)
    return (20.0 + np.e
            - 20.0 * np.exp(-0.2 * np.sqrt(inv_p * sum_sq))
            - np.exp(inv_p * sum_cos))


def _griewangk(x: np.ndarray) -> np.ndarray:
    # Divisor is the 1-based coordinate position, not its value
    idx = np.sqrt(np.arange(1, x.shape[-1] + 1, dtype=np.float64))
    return (1.0 + np.sum(x ** 2 / 4000.0, axis=-1)
            - np.prod(np.cos(x / idx), axis=-1))


def _schwefel(x: np.ndarray) -> np.ndarray:
    # Minus sign puts the minimum at x_i = +420.9687; the "+" form found in
    # some references moves it to -420.9687 instead.
    p = x.shape[-1]
    return SCHWEFEL_CONSTANT * p - np.sum(x * np.sin(np.sqrt(np.abs(x))), axis=-1)


def _evaluate(problem: Problem, x: np.ndarray) -> np.ndarray:
    # Degenerate input (p = 0, NaN, Inf) follows IEEE arithmetic silently
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if problem is Problem.ACKLEY:
            return _ackley(x)
        elif problem is Problem.GRIEWANGK:
            return _griewangk(x)
        elif problem is Problem.SCHWEFEL:
            return _schwefel(x)
    raise ValueError(f"Unhandled problem: {problem!r}")


def fitness(problem: Union[Problem, str], x: Sequence[float],
            strict: bool = False) -> float:
    """
    Evaluate a benchmark function at a single point.

    Args:
        problem: Benchmark problem (or its name)
        x: Coordinates of the point, length p >= 1
        strict: Reject empty or non-finite vectors instead of returning NaN/Inf

    Returns:
        Fitness value (lower is better, 0 at the known optimum)
    """
    problem = _coerce(problem)
    arr = check_vector(x) if strict else as_vector(x)
    if arr.ndim != 1:
        raise InvalidVectorError(
            f"Expected a 1-D vector, got array with shape {arr.shape}"
        )
    return float(_evaluate(problem, arr))


def fitness_batch(problem: Union[Problem, str], X: Sequence[Sequence[float]],
                  strict: bool = False) -> np.ndarray:
    """
    Evaluate a benchmark function at many points at once.

    Args:
        problem: Benchmark problem (or its name)
        X: Array of shape (n, p), one point per row; a 1-D input is one point
        strict: Reject rows that are empty or hold non-finite values

    Returns:
        Array of shape (n,) with the fitness of each row
    """
    problem = _coerce(problem)
    arr = as_vector(X)
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
    if arr.ndim != 2:
        raise InvalidVectorError(
            f"Expected a 2-D batch, got array with shape {arr.shape}"
        )
    if strict:
        arr = check_matrix(arr)
    return _evaluate(problem, arr)


def domain(problem: Union[Problem, str]) -> Domain:
    """Per-coordinate search interval for a problem."""
    problem = _coerce(problem)
    if problem is Problem.ACKLEY:
        return Domain(-30.0, 30.0)
    elif problem is Problem.GRIEWANGK:
        return Domain(-600.0, 600.0)
    elif problem is Problem.SCHWEFEL:
        return Domain(-512.03, 511.97)
    raise ValueError(f"Unhandled problem: {problem!r}")


PROBLEM_INFO: Dict[Problem, Dict[str, Any]] = {
    Problem.ACKLEY: {
        'name': 'Ackley',
        'description': 'Non-separable, multimodal with a nearly flat outer region',
        'formula': 'f(x) = 20 + e - 20*exp(-0.2*sqrt(mean(x_i^2))) - exp(mean(cos(2*pi*x_i)))',
        'optimum': 'x* = (0, ..., 0), f* = 0',
        'bounds': tuple(domain(Problem.ACKLEY)),
    },
    Problem.GRIEWANGK: {
        'name': 'Griewangk',
        'description': 'Non-separable, multimodal, local minima regularly spaced',
        'formula': 'f(x) = 1 + sum(x_i^2/4000) - prod(cos(x_i/sqrt(i)))',
        'optimum': 'x* = (0, ..., 0), f* = 0',
        'bounds': tuple(domain(Problem.GRIEWANGK)),
    },
    Problem.SCHWEFEL: {
        'name': 'Schwefel',
        'description': 'Separable, deceptive (second best minimum far from the best)',
        'formula': 'f(x) = 418.9829*n - sum(x_i*sin(sqrt(|x_i|)))',
        'optimum': 'x* = (420.9687, ..., 420.9687), f* = 0',
        'bounds': tuple(domain(Problem.SCHWEFEL)),
    },
}
