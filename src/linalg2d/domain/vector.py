"""
Vector — 2-component column vector

Immutable generic Pydantic model representing the column vector

    [ x ]
    [ y ]

over any element type T that supports addition and multiplication.

KEY INVARIANTS:
1. Every operation returns a new instance (frozen=True)
2. Scalar products put the scalar on the left: factor * component
3. str() renders as "[x y]^t"
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


# =============================================================================
# VECTOR MODEL
# =============================================================================


class Vector(BaseModel, Generic[T]):
    """
    2D column vector.

    Vector(x, y) accepts components of any type. The parametrized form
    (Vector[int](x, y)) validates components against the element type.
    Results of arithmetic are built with the unparametrized form.
    """

    x: T = Field(..., description="Upper component")
    y: T = Field(..., description="Lower component")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def __init__(self, x: T, y: T) -> None:
        super().__init__(x=x, y=y)

    def scale(self, factor: T) -> "Vector[T]":
        """
        Scalar multiple of the vector.

        Args:
            factor: Scalar of the element type

        Returns:
            Vector(factor * x, factor * y)
        """
        return Vector(factor * self.x, factor * self.y)

    def components(self) -> tuple[T, T]:
        """Components as a plain (x, y) tuple."""
        return (self.x, self.y)

    # Operators

    def __add__(self, rhs: Any) -> "Vector[T]":
        if not isinstance(rhs, Vector):
            return NotImplemented
        return Vector(self.x + rhs.x, self.y + rhs.y)

    def __mul__(self, rhs: Any) -> "Vector[T]":
        # Models are never scalars: Vector * Vector and Vector * Matrix are undefined
        if isinstance(rhs, BaseModel):
            return NotImplemented
        return Vector(rhs * self.x, rhs * self.y)

    def __rmul__(self, lhs: Any) -> "Vector[T]":
        if isinstance(lhs, BaseModel):
            return NotImplemented
        return self.scale(lhs)

    def __str__(self) -> str:
        return f"[{self.x} {self.y}]^t"
