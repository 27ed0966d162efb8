from dataclasses import dataclass
from enum import Enum

from .linalg import (
    Matrix,
    MatrixLike,
    add,
    as_matrix,
    ensure_square,
    scalar_multiply,
    subtract,
    transpose,
)
from .log import log

DEFAULT_TOLERANCE = 1e-10


class TriangularType(Enum):
    NONE = "none"
    UPPER = "upper"
    LOWER = "lower"
    # upper and lower at once, i.e. diagonal
    BOTH = "both"

    @property
    def label(self) -> str:
        return {
            TriangularType.NONE: "not triangular",
            TriangularType.UPPER: "upper triangular",
            TriangularType.LOWER: "lower triangular",
            TriangularType.BOTH: "diagonal (both upper and lower triangular)",
        }[self]


@dataclass(frozen=True)
class MatrixDecompositionResult:
    symmetric: Matrix
    skew_symmetric: Matrix


def is_upper_triangular(matrix: MatrixLike, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Every entry strictly below the diagonal is within ``tolerance`` of 0."""
    m = as_matrix(matrix)
    if not m.is_square:
        return False
    return all(
        abs(m.items[i][j]) <= tolerance for i in range(m.rows) for j in range(i)
    )


def is_lower_triangular(matrix: MatrixLike, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Every entry strictly above the diagonal is within ``tolerance`` of 0."""
    m = as_matrix(matrix)
    if not m.is_square:
        return False
    return all(
        abs(m.items[i][j]) <= tolerance
        for i in range(m.rows)
        for j in range(i + 1, m.cols)
    )


def classify_triangular(
    matrix: MatrixLike, tolerance: float = DEFAULT_TOLERANCE
) -> TriangularType:
    m = as_matrix(matrix)
    upper = is_upper_triangular(m, tolerance)
    lower = is_lower_triangular(m, tolerance)
    if upper and lower:
        return TriangularType.BOTH
    if upper:
        return TriangularType.UPPER
    if lower:
        return TriangularType.LOWER
    return TriangularType.NONE


def decompose_into_symmetric_and_skew(
    matrix: MatrixLike, do_log: bool = False
) -> MatrixDecompositionResult:
    """
    Split a square matrix A into S = (A + A^T) / 2 and K = (A - A^T) / 2.

    S is symmetric, K is skew-symmetric and S + K = A.

    Raises:
        ShapeError: if the matrix is not square.
    """
    m = as_matrix(matrix)
    ensure_square(m, "Symmetric/skew decomposition")

    mt = transpose(m)
    symmetric = scalar_multiply(add(m, mt), 0.5)
    skew = scalar_multiply(subtract(m, mt), 0.5)
    if do_log:
        log(r"$$ A = %s, \quad A^T = %s $$", m, mt)
        log(r"$$ S = \frac{A + A^T}{2} = %s $$", symmetric)
        log(r"$$ K = \frac{A - A^T}{2} = %s $$", skew)
        log(r"$$ A = S + K = %s + %s $$", symmetric, skew)
    return MatrixDecompositionResult(symmetric=symmetric, skew_symmetric=skew)
