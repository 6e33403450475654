"""
flythrough - Free-flying 3D camera

Updates a caller-owned eye position and look direction from one frame of
input (elapsed time, cursor delta, held keys) and builds the matching
look-to view matrix.

Components:
    - Camera: Basis, yaw/pitch rotation, per-frame update, view matrix
    - Core: Configuration and state types
    - Utils: Validation, conversion and debug helpers

Example:
    >>> import numpy as np
    >>> from flythrough import flythrough_update
    >>> 
    >>> eye = np.zeros(3, dtype=np.float32)
    >>> look = np.array([0, 0, -1], dtype=np.float32)
    >>> up = np.array([0, 1, 0], dtype=np.float32)
    >>> view = np.empty(16, dtype=np.float32)
    >>> 
    >>> # One frame: W held, mouse moved 5 units right
    >>> flythrough_update(eye, look, up, view, 1 / 60, 10.0, 0.1, 80.0,
    ...                   5, 0, True, False, False, False, False, False)
"""

__version__ = "1.0.0"

# Core
from .core import (
    FlythroughConfig,
    LEFT_HANDED_BIT,
    CameraState,
    InputFrame,
)

# Camera
from .camera import (
    build_camera_basis,
    build_axis_rotation_matrix,
    compute_pitch_limits,
    build_lookto_matrix,
    flythrough_look_to,
    flythrough_update,
    step_camera,
    view_matrix_to_4x4,
    make_camera_from_yaml,
    load_flythrough_config,
)

# Utils
from .utils import (
    PreconditionError,
    to_numpy_array,
    debug_print,
    is_debug_enabled,
)

# Short names for the two entry points
update = flythrough_update
look_to = flythrough_look_to

__all__ = [
    "__version__",
    
    # Core
    "FlythroughConfig",
    "LEFT_HANDED_BIT",
    "CameraState",
    "InputFrame",
    
    # Camera
    "build_camera_basis",
    "build_axis_rotation_matrix",
    "compute_pitch_limits",
    "build_lookto_matrix",
    "flythrough_look_to",
    "flythrough_update",
    "update",
    "look_to",
    "step_camera",
    "view_matrix_to_4x4",
    "make_camera_from_yaml",
    "load_flythrough_config",
    
    # Utils
    "PreconditionError",
    "to_numpy_array",
    "debug_print",
    "is_debug_enabled",
]
