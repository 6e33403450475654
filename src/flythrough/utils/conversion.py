"""Type conversion utilities."""

from __future__ import annotations
import numpy as np


def to_numpy_array(x, dtype: np.dtype = np.float32) -> np.ndarray:
    """Convert a list or array to a NumPy array of ``dtype``."""
    return np.asarray(x, dtype=dtype)


def to_vector3(x, dtype: np.dtype = np.float32) -> np.ndarray:
    """
    Convert input to a fresh (3,) array.
    
    Nested input such as [[x, y, z]] is flattened first.
    
    Raises:
        ValueError: If input does not hold exactly 3 values
    """
    v = np.array(to_numpy_array(x, dtype=dtype), dtype=dtype).reshape(-1)
    if v.shape != (3,):
        raise ValueError(f"Expected 3 components, got shape {v.shape}")
    return v
