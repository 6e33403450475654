"""Axis-angle rotation and pitch limits."""

from __future__ import annotations
from typing import Tuple
import math
import numpy as np


def build_axis_rotation_matrix(axis: np.ndarray, degrees: float) -> np.ndarray:
    """
    Build a 3x3 rotation matrix about an axis (Rodrigues' formula).
    
    Positive angles rotate counter-clockwise when looking down the axis
    towards the origin.
    
    Args:
        axis: (3,) Rotation axis, normalized here
        degrees: Rotation angle in degrees
    
    Returns:
        (3, 3) float64 rotation matrix, applied as R @ v
    """
    axis = np.asarray(axis, dtype=np.float64)
    x, y, z = axis / np.linalg.norm(axis)
    
    radians = math.radians(degrees)
    c = math.cos(radians)
    s = math.sin(radians)
    k = 1.0 - c
    
    return np.array([
        [c + k * x * x,     k * x * y - s * z, k * x * z + s * y],
        [k * x * y + s * z, c + k * y * y,     k * y * z - s * x],
        [k * x * z - s * y, k * y * z + s * x, c + k * z * z],
    ], dtype=np.float64)


def compute_pitch_limits(
    look: np.ndarray,
    up: np.ndarray,
    max_pitch_rotation_degrees: float
) -> Tuple[float, float]:
    """
    Remaining pitch headroom before look gets too close to either pole.
    
    The look direction may never come within
    ``90 - max_pitch_rotation_degrees`` degrees of ``up`` or ``-up``. The
    headroom is measured from the current angle to each pole, so it
    corrects itself if the direction has drifted past the limit.
    
    Args:
        look: (3,) Unit look direction
        up: (3,) Unit world up
        max_pitch_rotation_degrees: Allowed pitch away from the horizon
    
    Returns:
        (up_headroom, down_headroom) in degrees, both >= 0
    """
    cos_to_up = float(np.clip(np.dot(look, up), -1.0, 1.0))
    
    degrees_to_up = math.degrees(math.acos(cos_to_up))
    degrees_to_down = math.degrees(math.acos(-cos_to_up))
    
    margin = 90.0 - max_pitch_rotation_degrees
    
    up_headroom = max(0.0, degrees_to_up - margin)
    down_headroom = max(0.0, degrees_to_down - margin)
    
    return up_headroom, down_headroom


def clamp_pitch_degrees(
    pitch_degrees: float,
    up_headroom: float,
    down_headroom: float
) -> float:
    """Clamp a requested pitch to [-down_headroom, +up_headroom]."""
    if pitch_degrees > 0.0 and pitch_degrees > up_headroom:
        return up_headroom
    if pitch_degrees < 0.0 and -pitch_degrees > down_headroom:
        return -down_headroom
    return pitch_degrees
