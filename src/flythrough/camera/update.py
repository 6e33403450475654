"""
Per-frame flythrough camera update.

Moves the eye with six held keys (forward/left/backward/right in the
camera's horizontal plane, jump/crouch along world up), turns the look
direction with the cursor (yaw about world up, pitch about the camera's
right axis), then optionally writes the look-to view matrix.

The camera is the caller's ``eye`` and ``look`` arrays; they are updated
in place and nothing is retained between calls.
"""

from __future__ import annotations
from typing import Optional
import numpy as np

from ..utils.validation import (
    validate_unit_vector,
    validate_vector_buffer,
)
from ..utils.debug import debug_print
from .basis import build_camera_basis, normalize_vector
from .rotation import (
    build_axis_rotation_matrix,
    compute_pitch_limits,
    clamp_pitch_degrees,
)
from .lookto import flythrough_look_to


def _axis_multiplier(positive_held, negative_held) -> float:
    """+1, -1 or 0 for an exclusive key pair; both held cancel out."""
    return (1.0 if positive_held else 0.0) - (1.0 if negative_held else 0.0)


def flythrough_update(
    eye: np.ndarray,
    look: np.ndarray,
    up: np.ndarray,
    view: Optional[np.ndarray],
    delta_time_seconds: float,
    eye_speed: float,
    degrees_per_cursor_move: float,
    max_pitch_rotation_degrees: float,
    delta_cursor_x: int,
    delta_cursor_y: int,
    forward_held: bool,
    left_held: bool,
    backward_held: bool,
    right_held: bool,
    jump_held: bool,
    crouch_held: bool,
    flags: int = 0
) -> None:
    """
    Advance a flythrough camera by one frame.
    
    Args:
        eye: (3,) Eye position, updated in place
        look: (3,) Unit look direction, updated in place
        up: (3,) Unit world up, likely (0, 1, 0) for the whole application
        view: Optional (16,) or (4, 4) buffer for the new view matrix
        delta_time_seconds: Seconds since the last update
        eye_speed: Eye movement in world units per second
        degrees_per_cursor_move: Degrees of rotation per cursor unit
        max_pitch_rotation_degrees: How far up or down the camera may look
        delta_cursor_x, delta_cursor_y: Cursor movement this frame (Y down)
        forward_held, left_held, backward_held, right_held: Planar movement keys
        jump_held, crouch_held: Vertical movement keys
        flags: View flag bits (LEFT_HANDED_BIT)
    
    Raises:
        PreconditionError: If look or up is not unit length within 1e-6,
            or eye/look are not writeable float (3,) arrays
    
    Notes:
        - Opposite keys held together cancel on their axis
        - Zero cursor delta leaves look untouched, bit for bit
        - look is renormalized after every rotation
    """
    position = validate_vector_buffer("eye", eye)
    validate_vector_buffer("look", look)
    direction = validate_unit_vector("look", look)
    up_dir = validate_unit_vector("up", up)
    
    # Cursor APIs report Y growing downwards
    delta_cursor_y = -delta_cursor_y
    
    across, forward, _ = build_camera_basis(direction, up_dir)
    up_norm = normalize_vector("up", up_dir)
    
    step = eye_speed * delta_time_seconds
    moved = False
    
    # Movement in the camera's horizontal plane
    x_multiplier = _axis_multiplier(right_held, left_held)
    z_multiplier = _axis_multiplier(forward_held, backward_held)
    if x_multiplier != 0.0 or z_multiplier != 0.0:
        planar = across * x_multiplier + forward * z_multiplier
        position = position + planar / np.linalg.norm(planar) * step
        moved = True
    
    # Movement along world up
    y_multiplier = _axis_multiplier(jump_held, crouch_held)
    if y_multiplier != 0.0:
        position = position + up_norm * y_multiplier * step
        moved = True
    
    if moved:
        eye[...] = position
    
    rotated = False
    
    # Yaw (left/right), counter-clockwise about up for positive angles
    if delta_cursor_x != 0:
        yaw_degrees = -delta_cursor_x * degrees_per_cursor_move
        rotation = build_axis_rotation_matrix(up_norm, yaw_degrees)
        direction = normalize_vector("look", rotation @ direction)
        rotated = True
    
    # Pitch (up/down), clamped away from both poles
    if delta_cursor_y != 0:
        up_headroom, down_headroom = compute_pitch_limits(
            direction, up_norm, max_pitch_rotation_degrees
        )
        requested = delta_cursor_y * degrees_per_cursor_move
        pitch_degrees = clamp_pitch_degrees(requested, up_headroom, down_headroom)
        
        if pitch_degrees != requested:
            debug_print(
                f"[Flythrough] Pitch clamped {requested:.4f} -> {pitch_degrees:.4f} deg "
                f"(headroom up={up_headroom:.4f}, down={down_headroom:.4f})"
            )
        
        rotation = build_axis_rotation_matrix(across, pitch_degrees)
        direction = normalize_vector("look", rotation @ direction)
        rotated = True
    
    if rotated:
        look[...] = direction
    
    flythrough_look_to(eye, look, up, view, flags)
