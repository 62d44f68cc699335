"""
Tolerance — approximate equality for vectors and matrices

Floating-point transforms (e.g. rotation(radians)) rarely reproduce exact
integer results, so comparisons go through math.isclose with configurable
tolerances:

    abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

Vectors and matrices are close when every pair of corresponding components
is close.
"""

import math
from dataclasses import dataclass
from typing import Any, Final

from linalg2d.domain.matrix import Matrix
from linalg2d.domain.vector import Vector

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# Relative tolerance for component comparisons
EPS_MATRIX_COMPARE_REL: Final[float] = 1e-9

# Absolute tolerance for component comparisons
# Needed near zero, where the relative tolerance collapses
# (e.g. cos(pi / 2) == 6.1e-17 instead of 0.0)
EPS_MATRIX_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ToleranceConfig:
    """Tolerances for approximate comparisons."""

    rel_tol: float = EPS_MATRIX_COMPARE_REL
    abs_tol: float = EPS_MATRIX_COMPARE_ABS

    def __post_init__(self) -> None:
        for name in ("rel_tol", "abs_tol"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be finite and positive, got {value}")


DEFAULT_TOLERANCE: Final[ToleranceConfig] = ToleranceConfig()


# =============================================================================
# COMPARISONS
# =============================================================================


def is_close(a: Any, b: Any, config: ToleranceConfig = DEFAULT_TOLERANCE) -> bool:
    """
    Scalar comparison with the configured tolerances.

    Args:
        a: First value (any type convertible to float)
        b: Second value
        config: Tolerances (default: DEFAULT_TOLERANCE)

    Returns:
        True if the values are within tolerance of each other

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(0.0, 1e-13)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=config.rel_tol, abs_tol=config.abs_tol)


def vectors_close(
    u: Vector[Any],
    v: Vector[Any],
    config: ToleranceConfig = DEFAULT_TOLERANCE,
) -> bool:
    """
    Componentwise approximate equality of two vectors.

    Args:
        u: First vector
        v: Second vector
        config: Tolerances (default: DEFAULT_TOLERANCE)

    Returns:
        True if x and y are both within tolerance
    """
    return all(
        is_close(p, q, config) for p, q in zip(u.components(), v.components())
    )


def matrices_close(
    m: Matrix[Any],
    n: Matrix[Any],
    config: ToleranceConfig = DEFAULT_TOLERANCE,
) -> bool:
    """
    Componentwise approximate equality of two matrices.

    Compares column by column, so this is equivalent to
    vectors_close(m.left(), n.left()) and vectors_close(m.right(), n.right()).

    Args:
        m: First matrix
        n: Second matrix
        config: Tolerances (default: DEFAULT_TOLERANCE)

    Returns:
        True if all four components are within tolerance
    """
    return vectors_close(m.left(), n.left(), config) and vectors_close(
        m.right(), n.right(), config
    )
