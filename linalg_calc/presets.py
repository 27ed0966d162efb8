"""Ready-made example matrices for each kind of computation."""

from dataclasses import dataclass
from typing import Sequence, Tuple, TypeVar

from .linalg import Matrix

Rows = Tuple[Tuple[float, ...], ...]


def _rows(items) -> Rows:
    return tuple(tuple(row) for row in items)


@dataclass(frozen=True)
class MatrixPreset:
    id: str
    label: str
    description: str
    matrix: Rows

    def to_matrix(self) -> Matrix:
        return Matrix(self.matrix)


@dataclass(frozen=True)
class TriangularPairPreset:
    id: str
    label: str
    description: str
    matrix_a: Rows
    matrix_b: Rows

    def to_matrices(self) -> Tuple[Matrix, Matrix]:
        return Matrix(self.matrix_a), Matrix(self.matrix_b)


RANK_INVERSE_PRESETS = (
    MatrixPreset(
        "3x3-easy",
        "Simple 3×3 matrix",
        "Easy example for checking the rank.",
        _rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]]),
    ),
    MatrixPreset(
        "3x3-invertible",
        "Invertible 3×3 matrix",
        "Non-zero determinant, good for testing the inverse.",
        _rows([[2, 1, 1], [1, 3, 2], [1, 0, 0]]),
    ),
    MatrixPreset(
        "2x2-invertible",
        "Invertible 2×2 matrix",
        "Small example that is surely invertible.",
        _rows([[4, 7], [2, 6]]),
    ),
    MatrixPreset(
        "2x2-singular",
        "Singular 2×2 matrix",
        "Zero determinant, so no inverse.",
        _rows([[1, 2], [2, 4]]),
    ),
    MatrixPreset(
        "4x3-rectangular",
        "Rectangular 4×3 matrix",
        "Good for testing the rank and the echelon form.",
        _rows([[1, 2, 0], [3, 6, 0], [1, 1, 1], [2, 3, 1]]),
    ),
)

DECOMPOSITION_PRESETS = (
    MatrixPreset(
        "2x2-simple",
        "Simple 2×2 matrix",
        "Small example, easy to check by hand.",
        _rows([[1, 2], [3, 4]]),
    ),
    MatrixPreset(
        "3x3-mixed",
        "Mixed 3×3 matrix",
        "Positive and negative values.",
        _rows([[2, -1, 0], [3, 5, 4], [0, -2, 1]]),
    ),
    MatrixPreset(
        "3x3-symmetric",
        "Symmetric 3×3 matrix",
        "Already symmetric, the skew-symmetric part is zero.",
        _rows([[2, 1, 3], [1, 4, 0], [3, 0, -1]]),
    ),
)

EIGENVALUE_PRESETS = (
    MatrixPreset(
        "diag-2x2",
        "Diagonal 2×2",
        "The eigenvalues are the diagonal entries.",
        _rows([[4, 0], [0, -2]]),
    ),
    MatrixPreset(
        "general-2x2",
        "General 2×2",
        "Two distinct real eigenvalues.",
        _rows([[2, 1], [1, 2]]),
    ),
    MatrixPreset(
        "rotation-2x2",
        "2D rotation matrix",
        "No real eigenvalues.",
        _rows([[0, -1], [1, 0]]),
    ),
    MatrixPreset(
        "upper-3x3",
        "Triangular 3×3",
        "The eigenvalues are the diagonal entries.",
        _rows([[3, 1, 2], [0, 4, 1], [0, 0, -1]]),
    ),
)

TRIANGULAR_PAIR_PRESETS = (
    TriangularPairPreset(
        "upper-3x3",
        "Two upper triangular 3×3 matrices",
        "The inverse and the product stay upper triangular.",
        _rows([[2, 1, -1], [0, 3, 4], [0, 0, 5]]),
        _rows([[1, -2, 0], [0, 4, 1], [0, 0, 2]]),
    ),
    TriangularPairPreset(
        "lower-3x3",
        "Two lower triangular 3×3 matrices",
        "The product and the inverse (if any) stay lower triangular.",
        _rows([[1, 0, 0], [2, 3, 0], [-1, 4, 2]]),
        _rows([[2, 0, 0], [1, 1, 0], [3, -2, 1]]),
    ),
    TriangularPairPreset(
        "non-triangular",
        "Matrix that is not triangular",
        "Matrix A is not triangular.",
        _rows([[1, 2, 0], [3, 4, 5], [0, 6, 7]]),
        _rows([[1, 0, 0], [0, 1, 0], [0, 0, 1]]),
    ),
)

P = TypeVar("P", MatrixPreset, TriangularPairPreset)


def get_preset(presets: Sequence[P], preset_id: str) -> P:
    for preset in presets:
        if preset.id == preset_id:
            return preset
    raise KeyError("Unknown preset: %s" % preset_id)
