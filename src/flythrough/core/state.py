"""
Camera state and per-frame input.

Both types are plain data. The camera functions in ``flythrough.camera``
mutate ``CameraState.eye`` and ``CameraState.look`` in place; nothing here
hides state or updates itself.
"""

from __future__ import annotations
from typing import Dict, Any
from dataclasses import dataclass
import numpy as np

from ..utils.conversion import to_vector3


DEFAULT_EYE = np.array([0.0, 0.0, 0.0], dtype=np.float32)
DEFAULT_LOOK = np.array([0.0, 0.0, -1.0], dtype=np.float32)
DEFAULT_UP = np.array([0.0, 1.0, 0.0], dtype=np.float32)


@dataclass
class CameraState:
    """
    Persistent camera vectors owned by the caller.
    
    Attributes:
        eye: (3,) Eye position in world space
        look: (3,) Unit look direction
        up: (3,) Unit world 'up' direction, usually constant
    """
    eye: np.ndarray = None
    look: np.ndarray = None
    up: np.ndarray = None
    
    def __post_init__(self):
        """Copy inputs into float32 (3,) buffers, filling defaults."""
        self.eye = to_vector3(DEFAULT_EYE if self.eye is None else self.eye)
        self.look = to_vector3(DEFAULT_LOOK if self.look is None else self.look)
        self.up = to_vector3(DEFAULT_UP if self.up is None else self.up)
    
    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> 'CameraState':
        """Create CameraState from dictionary of eye/look/up lists."""
        return cls(
            eye=cfg.get('eye', DEFAULT_EYE),
            look=cfg.get('look', DEFAULT_LOOK),
            up=cfg.get('up', DEFAULT_UP),
        )
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'eye': self.eye.tolist(),
            'look': self.look.tolist(),
            'up': self.up.tolist(),
        }


@dataclass
class InputFrame:
    """
    Input gathered by the host application for one frame.
    
    Cursor deltas are in screen units with Y pointing down, as reported
    by windowing APIs. Key flags follow a W/A/S/D + space/ctrl layout.
    """
    delta_time_seconds: float = 0.0
    delta_cursor_x: int = 0
    delta_cursor_y: int = 0
    forward_held: bool = False
    left_held: bool = False
    backward_held: bool = False
    right_held: bool = False
    jump_held: bool = False
    crouch_held: bool = False
