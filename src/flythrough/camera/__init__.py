"""Flythrough camera math."""

from .basis import build_camera_basis, normalize_vector
from .rotation import (
    build_axis_rotation_matrix,
    compute_pitch_limits,
    clamp_pitch_degrees,
)
from .lookto import build_lookto_matrix, flythrough_look_to
from .update import flythrough_update
from .step import step_camera
from .utils import view_matrix_to_4x4
from .config import make_camera_from_yaml, load_flythrough_config

__all__ = [
    "build_camera_basis",
    "normalize_vector",
    "build_axis_rotation_matrix",
    "compute_pitch_limits",
    "clamp_pitch_degrees",
    "build_lookto_matrix",
    "flythrough_look_to",
    "flythrough_update",
    "step_camera",
    "view_matrix_to_4x4",
    "make_camera_from_yaml",
    "load_flythrough_config",
]
