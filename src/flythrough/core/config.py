"""Flythrough camera configuration."""

from __future__ import annotations
from typing import Dict, Any
from dataclasses import dataclass


# Flag bit for the view matrix: set selects a left-handed view space.
LEFT_HANDED_BIT = 1

DEFAULT_EYE_SPEED = 10.0
DEFAULT_DEGREES_PER_CURSOR_MOVE = 0.1
DEFAULT_MAX_PITCH_ROTATION_DEGREES = 80.0


@dataclass
class FlythroughConfig:
    """
    Per-camera tuning for the flythrough update.
    
    Attributes:
        eye_speed: Eye movement in world units per second
        degrees_per_cursor_move: Rotation in degrees per cursor unit
        max_pitch_rotation_degrees: How far up or down the camera may look.
            0 locks the pitch entirely, 80 allows almost looking straight
            up. 90 lets the look direction reach the pole, where the basis
            is undefined on the next frame.
        left_handed: Produce a left-handed view matrix (default right-handed)
    """
    eye_speed: float = DEFAULT_EYE_SPEED
    degrees_per_cursor_move: float = DEFAULT_DEGREES_PER_CURSOR_MOVE
    max_pitch_rotation_degrees: float = DEFAULT_MAX_PITCH_ROTATION_DEGREES
    left_handed: bool = False
    
    @property
    def flags(self) -> int:
        """View matrix flag bits derived from this configuration."""
        return LEFT_HANDED_BIT if self.left_handed else 0
    
    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> 'FlythroughConfig':
        """Create FlythroughConfig from dictionary."""
        return cls(
            eye_speed=float(cfg.get('eye_speed', DEFAULT_EYE_SPEED)),
            degrees_per_cursor_move=float(
                cfg.get('degrees_per_cursor_move', DEFAULT_DEGREES_PER_CURSOR_MOVE)
            ),
            max_pitch_rotation_degrees=float(
                cfg.get('max_pitch_rotation_degrees', DEFAULT_MAX_PITCH_ROTATION_DEGREES)
            ),
            left_handed=bool(cfg.get('left_handed', False)),
        )
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'eye_speed': self.eye_speed,
            'degrees_per_cursor_move': self.degrees_per_cursor_move,
            'max_pitch_rotation_degrees': self.max_pitch_rotation_degrees,
            'left_handed': self.left_handed,
        }
