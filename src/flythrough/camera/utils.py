"""View matrix utilities."""

from __future__ import annotations
import numpy as np


def view_matrix_to_4x4(view) -> np.ndarray:
    """
    Convert a column-major view buffer to an algebraic 4x4 matrix.
    
    Args:
        view: Flat length-16 column-major values, or the (4, 4) transposed
            buffer written by ``flythrough_look_to``
    
    Returns:
        (4, 4) float32 matrix with m[r, c] = row r, column c
    
    Raises:
        ValueError: If input cannot be reshaped to 4x4
    """
    M = np.asarray(view, dtype=np.float32)
    
    if M.shape == (16,):
        M = M.reshape(4, 4)
    
    if M.shape != (4, 4):
        raise ValueError(
            f"Expected 4x4 matrix or flat length-16 array, got shape {M.shape}"
        )
    
    return M.T.copy()
