"""Camera configuration and state types."""

from .config import (
    FlythroughConfig,
    LEFT_HANDED_BIT,
)
from .state import CameraState, InputFrame

__all__ = [
    "FlythroughConfig",
    "LEFT_HANDED_BIT",
    "CameraState",
    "InputFrame",
]
