"""
Evaluation Records

An EvaluationRecord captures one call of fitness(): the problem, the
point and the value, hashed over canonical JSON. Because evaluation is
deterministic, a record can be re-checked later by evaluating again.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Union

from .core.canonical_json import canonical_hash
from .problem import Problem, fitness


@dataclass
class EvaluationRecord:
    """
    Result of evaluating one point.

    Attributes:
        problem: Benchmark problem
        x: Coordinates that were evaluated
        value: Fitness at x
        record_hash: SHA-256 of the canonical form (computed if empty)
    """
    problem: Problem
    x: List[float]
    value: float
    record_hash: str = ""

    def __post_init__(self):
        self.x = [float(v) for v in self.x]
        self.value = float(self.value)
        if not self.record_hash:
            self.record_hash = self._compute_hash()

    @property
    def dimension(self) -> int:
        return len(self.x)

    def _payload(self) -> Dict[str, Any]:
        return {
            "problem": self.problem.value,
            "x": self.x,
            "value": self.value,
        }

    def _compute_hash(self) -> str:
        return canonical_hash(self._payload())

    def verify(self) -> bool:
        """Re-evaluate the point and check both the value and the hash."""
        if self.record_hash != self._compute_hash():
            return False
        recomputed = fitness(self.problem, self.x)
        if math.isnan(self.value):
            return math.isnan(recomputed)
        return recomputed == self.value

    def to_canonical(self) -> Dict[str, Any]:
        data = self._payload()
        data["record_hash"] = self.record_hash
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EvaluationRecord':
        """Reconstruct from a dictionary produced by to_canonical()."""
        return cls(
            problem=Problem.from_name(data["problem"]),
            x=data["x"],
            value=data["value"],
            record_hash=data.get("record_hash", ""),
        )


def evaluate(problem: Union[Problem, str], x: Sequence[float],
             strict: bool = False) -> EvaluationRecord:
    """Evaluate x and wrap the result in an EvaluationRecord."""
    if not isinstance(problem, Problem):
        problem = Problem.from_name(problem)
    value = fitness(problem, x, strict=strict)
    return EvaluationRecord(problem=problem, x=list(x), value=value)
