"""
linalg2d — generic 2x2 matrices and 2D column vectors.

Small immutable value types over any numeric element type, plus a
catalogue of named 2D linear transforms.
"""

from linalg2d.domain import Matrix, Vector
from linalg2d.math import (
    DEFAULT_TOLERANCE,
    FLIP_X,
    FLIP_Y,
    IDENTITY,
    ROTATE_90,
    ROTATE_180,
    ROTATE_270,
    ToleranceConfig,
    is_close,
    matrices_close,
    rotation,
    vectors_close,
)

__all__ = [
    # Domain
    "Matrix",
    "Vector",
    # Transforms
    "IDENTITY",
    "ROTATE_90",
    "ROTATE_180",
    "ROTATE_270",
    "FLIP_X",
    "FLIP_Y",
    "rotation",
    # Tolerance
    "DEFAULT_TOLERANCE",
    "ToleranceConfig",
    "is_close",
    "vectors_close",
    "matrices_close",
]
