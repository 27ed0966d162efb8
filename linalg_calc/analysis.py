from dataclasses import dataclass
from typing import Optional

from .elimination import compute_rank_and_inverse
from .errors import ShapeError
from .linalg import Matrix, MatrixLike, as_matrix, multiply
from .log import log
from .structure import DEFAULT_TOLERANCE, TriangularType, classify_triangular


@dataclass(frozen=True)
class TriangularAnalysis:
    size: int
    matrix_a_type: TriangularType
    matrix_b_type: TriangularType
    inverse_exists: bool
    inverse_a: Optional[Matrix]
    inverse_a_type: Optional[TriangularType]
    product: Optional[Matrix]
    product_type: Optional[TriangularType]


def analyze_triangular_pair(
    a: MatrixLike,
    b: MatrixLike,
    tolerance: float = DEFAULT_TOLERANCE,
    do_log: bool = False,
) -> TriangularAnalysis:
    """
    Classify A, B, the inverse of A and the product A·B by triangularity.

    Shows that inverses and products of upper (lower) triangular matrices
    stay upper (lower) triangular. The inverse fields are None when A has no
    inverse, the product fields are None when A·B is undefined.
    """
    a, b = as_matrix(a), as_matrix(b)
    type_a = classify_triangular(a, tolerance)
    type_b = classify_triangular(b, tolerance)

    inverse = compute_rank_and_inverse(a).inverse
    inverse_type = (
        classify_triangular(inverse, tolerance) if inverse is not None else None
    )

    try:
        product = multiply(a, b)
    except ShapeError:
        product = None
    product_type = classify_triangular(product, tolerance) if product is not None else None

    if do_log:
        log(r"$A = %s$ is %s.", a, type_a.label)
        log(r"$B = %s$ is %s.", b, type_b.label)
        if inverse is not None:
            log(r"$A^{-1} = %s$ is %s.", inverse, inverse_type.label)
        else:
            log(r"$A$ has no inverse.")
        if product is not None:
            log(r"$A B = %s$ is %s.", product, product_type.label)
        else:
            log(r"The product $A B$ is not defined.")

    return TriangularAnalysis(
        size=a.rows,
        matrix_a_type=type_a,
        matrix_b_type=type_b,
        inverse_exists=inverse is not None,
        inverse_a=inverse,
        inverse_a_type=inverse_type,
        product=product,
        product_type=product_type,
    )
