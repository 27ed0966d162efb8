from .errors import ShapeError
from .linalg import (
    Matrix,
    as_matrix,
    is_square,
    transpose,
    add,
    subtract,
    scalar_multiply,
    multiply,
    trace,
)
from .elimination import (
    EliminationMode,
    RowEchelonResult,
    RankAndInverseResult,
    eliminate,
    to_row_echelon_form,
    rank,
    compute_inverse_gauss,
    compute_rank_and_inverse,
)
from .structure import (
    TriangularType,
    MatrixDecompositionResult,
    is_upper_triangular,
    is_lower_triangular,
    classify_triangular,
    decompose_into_symmetric_and_skew,
)
from .polynomial import Polynomial, format_polynomial
from .eigen import (
    RootFinder,
    CharacteristicPolynomialResult,
    compute_characteristic_polynomial_and_eigenvalues,
)
from .analysis import TriangularAnalysis, analyze_triangular_pair

from .fmt import (
    cformat,
    format_number,
    make_latex_matrix,
    make_latex_augmented_matrix,
)

from .log import log, nest_logger, nest_appending_logger, ignore_log, capture_logs

__all__ = [
    "ShapeError",
    "Matrix",
    "as_matrix",
    "is_square",
    "transpose",
    "add",
    "subtract",
    "scalar_multiply",
    "multiply",
    "trace",
    "EliminationMode",
    "RowEchelonResult",
    "RankAndInverseResult",
    "eliminate",
    "to_row_echelon_form",
    "rank",
    "compute_inverse_gauss",
    "compute_rank_and_inverse",
    "TriangularType",
    "MatrixDecompositionResult",
    "is_upper_triangular",
    "is_lower_triangular",
    "classify_triangular",
    "decompose_into_symmetric_and_skew",
    "Polynomial",
    "format_polynomial",
    "RootFinder",
    "CharacteristicPolynomialResult",
    "compute_characteristic_polynomial_and_eigenvalues",
    "TriangularAnalysis",
    "analyze_triangular_pair",
    "cformat",
    "format_number",
    "make_latex_matrix",
    "make_latex_augmented_matrix",
    "log",
    "nest_logger",
    "nest_appending_logger",
    "ignore_log",
    "capture_logs",
]
