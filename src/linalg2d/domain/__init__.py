"""
Domain value objects.

Immutable generic 2D Vector and 2x2 Matrix types.
"""

from linalg2d.domain.matrix import Matrix
from linalg2d.domain.vector import Vector

__all__ = [
    "Matrix",
    "Vector",
]
