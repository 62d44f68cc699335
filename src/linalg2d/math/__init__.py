"""
Math modules for linalg2d

Transform catalogue and tolerance-based comparisons built on the domain types.
"""

# Transforms
from linalg2d.math.transforms import (
    FLIP_X,
    FLIP_Y,
    IDENTITY,
    ROTATE_90,
    ROTATE_180,
    ROTATE_270,
    rotation,
)

# Tolerance
from linalg2d.math.tolerance import (
    DEFAULT_TOLERANCE,
    EPS_MATRIX_COMPARE_ABS,
    EPS_MATRIX_COMPARE_REL,
    ToleranceConfig,
    is_close,
    matrices_close,
    vectors_close,
)

__all__ = [
    # Transforms — Constants
    "IDENTITY",
    "ROTATE_90",
    "ROTATE_180",
    "ROTATE_270",
    "FLIP_X",
    "FLIP_Y",
    # Transforms — Functions
    "rotation",
    # Tolerance — Constants
    "EPS_MATRIX_COMPARE_REL",
    "EPS_MATRIX_COMPARE_ABS",
    "DEFAULT_TOLERANCE",
    # Tolerance — Types
    "ToleranceConfig",
    # Tolerance — Functions
    "is_close",
    "vectors_close",
    "matrices_close",
]
