"""Common utilities for the flythrough camera."""

from .conversion import (
    to_numpy_array,
    to_vector3,
)
from .validation import (
    PreconditionError,
    UNIT_LENGTH_TOLERANCE,
    validate_vector3,
    validate_unit_vector,
    validate_view_buffer,
    validate_vector_buffer,
)
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_vector_info,
    get_vector_stats,
)

__all__ = [
    # Conversion
    "to_numpy_array",
    "to_vector3",
    
    # Validation
    "PreconditionError",
    "UNIT_LENGTH_TOLERANCE",
    "validate_vector3",
    "validate_unit_vector",
    "validate_view_buffer",
    "validate_vector_buffer",
    
    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_vector_info",
    "get_vector_stats",
]
