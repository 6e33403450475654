"""Camera configuration parser."""

from __future__ import annotations
from typing import Tuple, Dict, Any, Union
from pathlib import Path
import numpy as np
from omegaconf import OmegaConf

from ..core.config import FlythroughConfig
from ..core.state import CameraState, DEFAULT_EYE, DEFAULT_LOOK, DEFAULT_UP
from .basis import normalize_vector


def make_camera_from_yaml(
    camera_cfg: Dict[str, Any]
) -> Tuple[CameraState, FlythroughConfig]:
    """
    Build camera state and tuning from configuration dictionary.
    
    Args:
        camera_cfg: Camera configuration dictionary with keys:
            Optional:
                - eye: Camera position [x, y, z] (default: origin)
                - look: Look direction [x, y, z] (default: [0, 0, -1])
                - target: Point to face [x, y, z]
                    Note: If 'target' is provided, 'look' is ignored
                - up: World up direction [x, y, z] (default: [0, 1, 0])
                - eye_speed, degrees_per_cursor_move,
                  max_pitch_rotation_degrees, left_handed: see FlythroughConfig
    
    Returns:
        Tuple of:
            - state (CameraState): float32 eye/look/up, look and up unit length
            - config (FlythroughConfig): update tuning
    
    Example:
        >>> state, config = make_camera_from_yaml({
        ...     "eye": [0, 2, 5],
        ...     "target": [0, 0, 0],
        ...     "eye_speed": 4.0,
        ... })
    """
    eye = np.asarray(camera_cfg.get("eye", DEFAULT_EYE), dtype=np.float64)
    up = np.asarray(camera_cfg.get("up", DEFAULT_UP), dtype=np.float64)
    
    target = camera_cfg.get("target")
    if target is not None:
        look = np.asarray(target, dtype=np.float64) - eye
    else:
        look = np.asarray(camera_cfg.get("look", DEFAULT_LOOK), dtype=np.float64)
    
    state = CameraState(
        eye=eye,
        look=normalize_vector("look", look),
        up=normalize_vector("up", up),
    )
    config = FlythroughConfig.from_dict(camera_cfg)
    
    return state, config


def load_flythrough_config(
    config_path: Union[str, Path]
) -> Tuple[CameraState, FlythroughConfig]:
    """
    Load camera state and tuning from a YAML file.
    
    The file must contain a ``camera`` section understood by
    ``make_camera_from_yaml``.
    
    Args:
        config_path: Path to YAML config file
    
    Returns:
        (state, config) as returned by make_camera_from_yaml
    
    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the 'camera' section is missing
    """
    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    config = OmegaConf.load(config_path)
    
    if "camera" not in config:
        raise ValueError("Missing required config section: camera")
    
    camera_cfg = OmegaConf.to_container(config.camera, resolve=True)
    state, flythrough_cfg = make_camera_from_yaml(camera_cfg)
    
    print(f"[Config] Loaded camera from: {config_path}")
    print(f"  - Eye: {state.eye.tolist()}")
    print(f"  - Look: {state.look.tolist()}")
    print(f"  - Speed: {flythrough_cfg.eye_speed} units/s, "
          f"max pitch: {flythrough_cfg.max_pitch_rotation_degrees} deg")
    
    return state, flythrough_cfg
