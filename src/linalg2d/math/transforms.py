"""
Transforms — catalogue of named 2D linear transforms

Integer matrices for the right-angle rotations and axis flips, plus the
general rotation constructor over floats.

All rotations are counter-clockwise, acting on column vectors:

    ROTATE_90 * Vector(1, 2) == Vector(-2, 1)
"""

import math
from typing import Final

from linalg2d.domain.matrix import Matrix

# =============================================================================
# CONSTANT TRANSFORMS
# =============================================================================

IDENTITY: Final[Matrix[int]] = Matrix[int](1, 0, 0, 1)

ROTATE_90: Final[Matrix[int]] = Matrix[int](0, -1, 1, 0)
ROTATE_180: Final[Matrix[int]] = Matrix[int](-1, 0, 0, -1)
ROTATE_270: Final[Matrix[int]] = Matrix[int](0, 1, -1, 0)

# Mirror across the y axis (negates x)
FLIP_X: Final[Matrix[int]] = Matrix[int](-1, 0, 0, 1)
# Mirror across the x axis (negates y)
FLIP_Y: Final[Matrix[int]] = Matrix[int](1, 0, 0, -1)


# =============================================================================
# PARAMETRIC TRANSFORMS
# =============================================================================


def rotation(radians: float) -> Matrix[float]:
    """
    Counter-clockwise rotation by an arbitrary angle.

    Args:
        radians: Rotation angle in radians

    Returns:
        Matrix(cos(radians), -sin(radians), sin(radians), cos(radians))
    """
    cos_r = math.cos(radians)
    sin_r = math.sin(radians)
    return Matrix[float](cos_r, -sin_r, sin_r, cos_r)
