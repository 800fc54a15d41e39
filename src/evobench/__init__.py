"""
evobench - Benchmark Problem Evaluator

Fitness functions and search domains for the classic continuous
benchmark problems used to test genetic algorithms and evolution
strategies:

- Ackley     on [-30, 30]^p
- Griewangk  on [-600, 600]^p
- Schwefel   on [-512.03, 511.97]^p

All three have a global minimum of 0. Evaluation is pure and
deterministic; there is no optimizer here, only the objective.
"""

from .errors import (
    EvobenchError,
    UnknownProblemError,
    InvalidVectorError,
)
from .problem import (
    Problem,
    Domain,
    PROBLEM_INFO,
    SCHWEFEL_CONSTANT,
    SCHWEFEL_OPTIMUM,
    fitness,
    fitness_batch,
    domain,
)
from .validation import check_vector, check_matrix
from .records import EvaluationRecord, evaluate
from .core.canonical_json import canonical_dumps, canonical_hash

__version__ = "0.1.0"

__all__ = [
    # Errors
    "EvobenchError",
    "UnknownProblemError",
    "InvalidVectorError",
    # Problems
    "Problem",
    "Domain",
    "PROBLEM_INFO",
    "SCHWEFEL_CONSTANT",
    "SCHWEFEL_OPTIMUM",
    "fitness",
    "fitness_batch",
    "domain",
    # Validation
    "check_vector",
    "check_matrix",
    # Records
    "EvaluationRecord",
    "evaluate",
    "canonical_dumps",
    "canonical_hash",
]
