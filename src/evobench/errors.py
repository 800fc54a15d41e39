"""
Exception Types

All errors raised by the evaluator derive from EvobenchError so callers
(and the CLI) can catch them in one place.
"""


class EvobenchError(Exception):
    """Base class for evaluator errors."""


class UnknownProblemError(EvobenchError, ValueError):
    """Raised when a problem name does not match any benchmark."""


class InvalidVectorError(EvobenchError, ValueError):
    """Raised when a coordinate vector fails validation."""
