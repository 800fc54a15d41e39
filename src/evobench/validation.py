"""
Coordinate Vector Validation

The formulas accept anything numpy can turn into a float array and never
check it. check_vector() is the opt-in guard for callers that want empty
or non-finite input rejected instead of propagated as NaN/Inf.
"""

from typing import Sequence

import numpy as np

from .errors import InvalidVectorError


def as_vector(x: Sequence[float]) -> np.ndarray:
    """Convert x to a float64 array without copying when possible."""
    return np.asarray(x, dtype=np.float64)


def check_vector(x: Sequence[float]) -> np.ndarray:
    """
    Validate a coordinate vector.

    Args:
        x: Coordinates of a single point

    Returns:
        x as a 1-D float64 array

    Raises:
        InvalidVectorError: if x is not 1-D, is empty, or holds NaN/Inf
    """
    arr = as_vector(x)
    if arr.ndim != 1:
        raise InvalidVectorError(
            f"Expected a 1-D vector, got array with shape {arr.shape}"
        )
    if arr.size == 0:
        raise InvalidVectorError("Vector must have at least one coordinate")
    if not np.all(np.isfinite(arr)):
        bad = np.flatnonzero(~np.isfinite(arr))
        raise InvalidVectorError(
            f"Vector has non-finite coordinates at positions {bad.tolist()}"
        )
    return arr


def check_matrix(X: Sequence[Sequence[float]]) -> np.ndarray:
    """
    Validate a batch of coordinate vectors (one point per row).

    Raises:
        InvalidVectorError: if X is not 2-D, has no columns, or holds NaN/Inf
    """
    arr = as_vector(X)
    if arr.ndim != 2:
        raise InvalidVectorError(
            f"Expected a 2-D batch, got array with shape {arr.shape}"
        )
    if arr.shape[1] == 0:
        raise InvalidVectorError("Batch rows must have at least one coordinate")
    if not np.all(np.isfinite(arr)):
        rows = np.flatnonzero(~np.all(np.isfinite(arr), axis=1))
        raise InvalidVectorError(
            f"Batch has non-finite coordinates in rows {rows.tolist()}"
        )
    return arr
