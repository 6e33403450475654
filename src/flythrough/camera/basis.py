"""Orthonormal camera basis."""

from __future__ import annotations
from typing import Tuple
import numpy as np

from ..utils.validation import PreconditionError, DEGENERATE_LENGTH, validate_vector3


def normalize_vector(name: str, v: np.ndarray) -> np.ndarray:
    """
    Return v scaled to unit length.
    
    Raises:
        PreconditionError: If v has (near) zero length
    """
    length = float(np.linalg.norm(v))
    if length < DEGENERATE_LENGTH:
        raise PreconditionError(name, "has zero length (degenerate camera basis)")
    return v / length


def build_camera_basis(
    look: np.ndarray,
    up: np.ndarray
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Build the camera's local axes from a look direction and world up.
    
    Axes:
        across  = normalize(normalize(look) x normalize(up))   (camera right)
        forward = normalize(look)
        upward  = normalize(across x forward)                  (camera up)
    
    ``upward`` is rebuilt from ``across`` and ``forward`` rather than copied
    from ``up``, so the three axes stay mutually orthogonal whatever the
    current pitch.
    
    Args:
        look: (3,) Look direction (unit length expected)
        up: (3,) World 'up' direction, any nonzero length
    
    Returns:
        (across, forward, upward) as float64 (3,) arrays
    
    Raises:
        PreconditionError: If look and up are parallel or either is zero
    """
    look = validate_vector3("look", look)
    up = validate_vector3("up", up)
    
    forward = normalize_vector("look", look)
    up_norm = normalize_vector("up", up)
    
    across = normalize_vector("across", np.cross(forward, up_norm))
    upward = normalize_vector("upward", np.cross(across, forward))
    
    return across, forward, upward
