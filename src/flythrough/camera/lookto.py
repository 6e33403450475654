"""Look-to view transform."""

from __future__ import annotations
from typing import Optional
import numpy as np

from ..core.config import LEFT_HANDED_BIT
from ..utils.validation import (
    validate_vector3,
    validate_unit_vector,
    validate_view_buffer,
)
from .basis import build_camera_basis


def build_lookto_matrix(
    eye: np.ndarray,
    look: np.ndarray,
    up: np.ndarray,
    flags: int = 0
) -> np.ndarray:
    """
    Build a world-to-view matrix from a position and facing direction.
    
    Unlike a look-at matrix this takes the direction itself, not a target
    point. Rows of the rotation block are:
        s = normalize(f x up)   (right)
        u = normalize(s x f)    (up)
        f = normalize(look)     (negated for right-handed view space)
    
    In a right-handed view space the camera looks down -Z, so ``f`` is
    negated unless ``flags & LEFT_HANDED_BIT`` is set.
    
    Args:
        eye: (3,) Camera position
        look: (3,) Unit look direction
        up: (3,) Unit world up
        flags: View flag bits (LEFT_HANDED_BIT)
    
    Returns:
        (4, 4) float64 matrix, row-major (algebraic layout)
    
    Raises:
        PreconditionError: If look or up is not unit length
    """
    eye = validate_vector3("eye", eye)
    look = validate_unit_vector("look", look)
    up = validate_unit_vector("up", up)
    
    s, f, u = build_camera_basis(look, up)
    
    if not (flags & LEFT_HANDED_BIT):
        f = -f
    
    R = np.stack([s, u, f], axis=0)
    
    m = np.eye(4, dtype=np.float64)
    m[:3, :3] = R
    m[:3, 3] = -R @ eye
    
    return m


def flythrough_look_to(
    eye: np.ndarray,
    look: np.ndarray,
    up: np.ndarray,
    view: Optional[np.ndarray],
    flags: int = 0
) -> None:
    """
    Write a look-to view matrix into ``view`` without updating a camera.
    
    ``view`` is a caller-owned buffer of shape (16,) or (4, 4). It is fully
    overwritten in column-major order: flat element ``4*c + r`` holds row
    ``r``, column ``c``. A (4, 4) buffer therefore receives the transposed
    matrix. Passing ``None`` is a no-op.
    
    Args:
        eye: (3,) Camera position
        look: (3,) Unit look direction
        up: (3,) Unit world up
        view: Output buffer or None
        flags: View flag bits (LEFT_HANDED_BIT)
    """
    if view is None:
        return
    
    validate_view_buffer(view)
    m = build_lookto_matrix(eye, look, up, flags)
    
    np.copyto(view, m.T.reshape(view.shape))
