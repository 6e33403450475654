"""Frame stepping for dataclass-held cameras."""

from __future__ import annotations
from typing import Optional
import numpy as np

from ..core.config import FlythroughConfig
from ..core.state import CameraState, InputFrame
from ..utils.debug import debug_vector_info
from .update import flythrough_update


def step_camera(
    state: CameraState,
    frame: InputFrame,
    config: FlythroughConfig,
    view: Optional[np.ndarray] = None
) -> Optional[np.ndarray]:
    """
    Apply one frame of input to ``state`` via ``flythrough_update``.
    
    Returns:
        ``view`` (updated if given), for chaining
    """
    flythrough_update(
        state.eye,
        state.look,
        state.up,
        view,
        frame.delta_time_seconds,
        config.eye_speed,
        config.degrees_per_cursor_move,
        config.max_pitch_rotation_degrees,
        frame.delta_cursor_x,
        frame.delta_cursor_y,
        frame.forward_held,
        frame.left_held,
        frame.backward_held,
        frame.right_held,
        frame.jump_held,
        frame.crouch_held,
        config.flags,
    )
    debug_vector_info("Camera.eye", state.eye)
    debug_vector_info("Camera.look", state.look)
    return view
