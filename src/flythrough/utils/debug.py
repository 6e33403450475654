"""Debug utilities."""

from __future__ import annotations
from typing import Tuple
import os
import numpy as np

DEBUG_ENV_VAR = "FLYTHROUGH_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def get_vector_stats(v) -> Tuple[float, float]:
    """
    Get length and largest absolute component of a vector.
    
    Args:
        v: (3,) array-like
    
    Returns:
        (length, max_abs) as floats
    """
    arr = np.asarray(v, dtype=np.float64)
    return float(np.linalg.norm(arr)), float(np.abs(arr).max())


def debug_vector_info(name: str, v):
    """Print debug information about a camera vector."""
    if is_debug_enabled():
        length, max_abs = get_vector_stats(v)
        print(f"[{name}] value={np.asarray(v).tolist()} "
              f"len={length:.7f} max_abs={max_abs:.4f}")
