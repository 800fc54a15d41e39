"""
Canonical JSON Serialization

Deterministic JSON with sorted keys and SHA-256 hashing, used to
fingerprint evaluation records so repeated runs can be compared.
"""

import json
import hashlib
from enum import Enum
from typing import Any

import numpy as np


def _default(obj: Any) -> Any:
    """Fallback encoder for numpy scalars/arrays and enums."""
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, Enum):
        return obj.value
    return str(obj)


def canonical_dumps(obj: Any, indent: int = None) -> str:
    """
    Canonical JSON serialization with sorted keys.

    Identical objects produce identical strings. Floats are written with
    repr precision so a value survives a dump/load cycle bit-for-bit.

    Args:
        obj: Object to serialize
        indent: Indentation level (None for compact)

    Returns:
        Canonical JSON string
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(',', ':') if indent is None else None,
        indent=indent,
        default=_default
    )


def canonical_hash(obj: Any) -> str:
    """Hex SHA-256 digest of the canonical JSON form of obj."""
    return hashlib.sha256(canonical_dumps(obj).encode()).hexdigest()
