"""
Matrix — 2x2 matrix acting on column vectors

Immutable generic Pydantic model representing

    [ a  b ]
    [ c  d ]

The left column is (a, c), the right column is (b, d). A matrix can be
assembled from two column Vectors and split back into them exactly.

PRODUCTS:
    Matrix * scalar  -> (k*a, k*b, k*c, k*d)
    Matrix * Vector  -> (a*x + b*y, c*x + d*y)
    Matrix * Matrix  -> a = a1*a2 + b1*c2    b = a1*b2 + b1*d2
                        c = c1*a2 + d1*c2    d = c1*b2 + d1*d2

Products are evaluated left to right with the left operand's component on
the left of each multiplication, so non-commutative element types behave
predictably. Matrix * Matrix is associative but not commutative.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from linalg2d.domain.vector import Vector

T = TypeVar("T")


# =============================================================================
# MATRIX MODEL
# =============================================================================


class Matrix(BaseModel, Generic[T]):
    """
    2x2 matrix, components given in row-major order: Matrix(a, b, c, d).

    Matrix(...) accepts components of any type. The parametrized form
    (Matrix[float](...)) validates components against the element type.
    """

    a: T = Field(..., description="Row 1, column 1")
    b: T = Field(..., description="Row 1, column 2")
    c: T = Field(..., description="Row 2, column 1")
    d: T = Field(..., description="Row 2, column 2")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def __init__(self, a: T, b: T, c: T, d: T) -> None:
        super().__init__(a=a, b=b, c=c, d=d)

    @classmethod
    def from_vectors(cls, left: Vector[T], right: Vector[T]) -> "Matrix[T]":
        """
        Assemble a matrix from its two columns.

        Args:
            left: Left column (a, c)
            right: Right column (b, d)

        Returns:
            Matrix(left.x, right.x, left.y, right.y)
        """
        return cls(left.x, right.x, left.y, right.y)

    # =========================================================================
    # DECOMPOSITION
    # =========================================================================

    def left(self) -> Vector[T]:
        """Left column (a, c)."""
        return Vector(self.a, self.c)

    def right(self) -> Vector[T]:
        """Right column (b, d)."""
        return Vector(self.b, self.d)

    def rows(self) -> tuple[tuple[T, T], tuple[T, T]]:
        """Components as nested row tuples ((a, b), (c, d))."""
        return ((self.a, self.b), (self.c, self.d))

    # =========================================================================
    # TRANSFORMATIONS
    # =========================================================================

    def scale(self, factor: T) -> "Matrix[T]":
        """
        Scalar multiple of the matrix.

        Args:
            factor: Scalar of the element type

        Returns:
            Matrix(factor*a, factor*b, factor*c, factor*d)
        """
        return Matrix(
            factor * self.a,
            factor * self.b,
            factor * self.c,
            factor * self.d,
        )

    def transpose(self) -> "Matrix[T]":
        """Swap the off-diagonal components: (a, c, b, d)."""
        return Matrix(self.a, self.c, self.b, self.d)

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def _product(self, rhs: Any) -> Any:
        if isinstance(rhs, Matrix):
            return Matrix(
                self.a * rhs.a + self.b * rhs.c,
                self.a * rhs.b + self.b * rhs.d,
                self.c * rhs.a + self.d * rhs.c,
                self.c * rhs.b + self.d * rhs.d,
            )
        if isinstance(rhs, Vector):
            return Vector(
                self.a * rhs.x + self.b * rhs.y,
                self.c * rhs.x + self.d * rhs.y,
            )
        return NotImplemented

    def __add__(self, rhs: Any) -> "Matrix[T]":
        if not isinstance(rhs, Matrix):
            return NotImplemented
        return Matrix(
            self.a + rhs.a,
            self.b + rhs.b,
            self.c + rhs.c,
            self.d + rhs.d,
        )

    def __mul__(self, rhs: Any) -> Any:
        """Matrix * Matrix, Matrix * Vector, or Matrix * scalar."""
        if isinstance(rhs, (Matrix, Vector)):
            return self._product(rhs)
        if isinstance(rhs, BaseModel):
            return NotImplemented
        return Matrix(
            rhs * self.a,
            rhs * self.b,
            rhs * self.c,
            rhs * self.d,
        )

    def __rmul__(self, lhs: Any) -> "Matrix[T]":
        if isinstance(lhs, BaseModel):
            return NotImplemented
        return self.scale(lhs)

    def __matmul__(self, rhs: Any) -> Any:
        return self._product(rhs)

    def __str__(self) -> str:
        return f"[[{self.a} {self.b}], [{self.c} {self.d}]]"
