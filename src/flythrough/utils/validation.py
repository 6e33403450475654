"""Input validation utilities.

The camera routines require ``look`` and ``up`` to be unit length. A
violation is a programming error, never a normal runtime condition: the
pitch clamp keeps a correctly driven camera away from every degenerate
configuration. Violations raise :class:`PreconditionError`.
"""

from __future__ import annotations
import numpy as np

UNIT_LENGTH_TOLERANCE = 1e-6
DEGENERATE_LENGTH = 1e-12


class PreconditionError(ValueError):
    """
    Raised when a camera input breaks its documented contract.
    
    Attributes:
        field: Name of the offending argument (e.g. 'look')
        reason: Human readable description of the violation
    """
    
    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


def validate_vector3(name: str, v) -> np.ndarray:
    """
    Validate a 3-vector and return it as float64.
    
    Raises:
        PreconditionError: If shape is not (3,) or values are not finite
    """
    arr = np.asarray(v, dtype=np.float64)
    
    if arr.shape != (3,):
        raise PreconditionError(name, f"must have shape (3,), got {arr.shape}")
    
    if not np.isfinite(arr).all():
        raise PreconditionError(name, "contains NaN or Inf")
    
    return arr


def validate_unit_vector(name: str, v) -> np.ndarray:
    """
    Validate that a 3-vector has unit length within 1e-6.
    
    Args:
        name: Argument name used in the error
        v: (3,) array-like
    
    Returns:
        The vector as a float64 array
    
    Raises:
        PreconditionError: If the vector is malformed or not unit length
    """
    arr = validate_vector3(name, v)
    length = float(np.linalg.norm(arr))
    
    if abs(length - 1.0) >= UNIT_LENGTH_TOLERANCE:
        raise PreconditionError(
            name, f"must be unit length (|len - 1| < {UNIT_LENGTH_TOLERANCE}), got {length!r}"
        )
    
    return arr


def validate_view_buffer(view) -> None:
    """
    Validate a caller-supplied view matrix buffer.
    
    Raises:
        PreconditionError: If the buffer is not a writable 16-element array
    """
    if not isinstance(view, np.ndarray):
        raise PreconditionError("view", f"must be a numpy array, got {type(view).__name__}")
    
    if view.size != 16 or view.shape not in ((16,), (4, 4)):
        raise PreconditionError("view", f"must have shape (16,) or (4, 4), got {view.shape}")
    
    if not view.flags.writeable:
        raise PreconditionError("view", "must be writeable")


def validate_vector_buffer(name: str, v) -> np.ndarray:
    """
    Validate an in-out camera vector (eye or look) that is updated in place.
    
    Returns:
        The current value as a float64 array
    
    Raises:
        PreconditionError: If the buffer is not a writeable float (3,) array
    """
    if not isinstance(v, np.ndarray):
        raise PreconditionError(name, f"must be a numpy array, got {type(v).__name__}")
    
    if not np.issubdtype(v.dtype, np.floating):
        raise PreconditionError(name, f"must have a floating dtype, got {v.dtype}")
    
    if not v.flags.writeable:
        raise PreconditionError(name, "must be writeable")
    
    return validate_vector3(name, v)
