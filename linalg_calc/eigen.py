"""
Characteristic polynomial and real eigenvalues of 2x2 and 3x3 matrices.

The 2x2 case is solved in closed form. For 3x3 matrices the cubic is built
from the trace, the trace of A² and the determinant, and its real roots are
located numerically by ``RootFinder``: the Cauchy interval is sampled
uniformly, every sign change is refined by bisection and roots closer than
``merge_tolerance`` are merged.

Known limitation: a root of even multiplicity touches zero without a sign
change, so it is only found when a sample lands within ``zero_tolerance``
of it.
"""

import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .errors import ShapeError
from .fmt import make_latex_list
from .linalg import Matrix, MatrixLike, as_matrix, multiply, trace
from .log import log
from .polynomial import LATEX_LAMBDA, Polynomial, format_polynomial

SUPPORTED_SIZES = (2, 3)


class RootFinder:
    samples: int = 200
    bisection_iterations: int = 40
    zero_tolerance: float = 1e-6
    merge_tolerance: float = 1e-4

    @classmethod
    def new(cls, **kwargs) -> "RootFinder":
        finder = cls()
        for key, value in kwargs.items():
            if key not in cls.__annotations__:
                raise TypeError("Unknown RootFinder setting: %s" % key)
            setattr(finder, key, value)
        return finder

    def with_samples(self, samples: int) -> "RootFinder":
        self.samples = samples
        return self

    def with_bisection_iterations(self, iterations: int) -> "RootFinder":
        self.bisection_iterations = iterations
        return self

    def with_zero_tolerance(self, tolerance: float) -> "RootFinder":
        self.zero_tolerance = tolerance
        return self

    def with_merge_tolerance(self, tolerance: float) -> "RootFinder":
        self.merge_tolerance = tolerance
        return self

    def assert_requirements(self) -> None:
        assert self.samples > 0, "At least one sampling step is required."
        assert self.bisection_iterations >= 0, "Iteration count cannot be negative."
        assert self.zero_tolerance >= 0, "Zero tolerance cannot be negative."
        assert self.merge_tolerance >= 0, "Merge tolerance cannot be negative."

    @staticmethod
    def cauchy_radius(coefficients: Sequence[float]) -> float:
        """All real roots lie in ``[-radius, radius]``."""
        lead = coefficients[0]
        return 1 + max((abs(c / lead) for c in coefficients[1:]), default=0.0)

    def bisect(self, f: Callable[[float], float], lo: float, hi: float) -> float:
        f_lo = f(lo)
        mid = (lo + hi) / 2
        for _ in range(self.bisection_iterations):
            mid = (lo + hi) / 2
            f_mid = f(mid)
            if abs(f_mid) <= self.zero_tolerance:
                break
            if (f_lo < 0) == (f_mid < 0):
                lo, f_lo = mid, f_mid
            else:
                hi = mid
        return mid

    def merge(self, roots: Sequence[float]) -> List[float]:
        kept = []
        for root in roots:
            if all(abs(root - other) > self.merge_tolerance for other in kept):
                kept.append(root)
        return sorted(kept)

    def find_real_roots(self, coefficients: Sequence[float]) -> List[float]:
        """
        Real roots of the polynomial with the given coefficients.

        Args:
            coefficients: Highest degree first; the leading one must be
                non-zero.

        Returns:
            Ascending list of distinct roots (closer ones merged).
        """
        self.assert_requirements()
        coefficients = [float(c) for c in coefficients]
        if not coefficients or coefficients[0] == 0:
            raise ValueError("Leading coefficient must be non-zero")
        poly = Polynomial.from_coefficients(coefficients)

        radius = self.cauchy_radius(coefficients)
        step = 2 * radius / self.samples
        xs = [-radius + i * step for i in range(self.samples + 1)]
        values = [poly(x) for x in xs]

        found = []
        for i, (x, value) in enumerate(zip(xs, values)):
            if abs(value) <= self.zero_tolerance:
                found.append(x)
            if i < self.samples and value * values[i + 1] < 0:
                found.append(self.bisect(poly, x, xs[i + 1]))
        return self.merge(found)


@dataclass(frozen=True)
class CharacteristicPolynomialResult:
    size: int
    coefficients: Tuple[float, ...]
    polynomial: Polynomial
    formatted_polynomial: str
    eigenvalues: Tuple[float, ...]
    has_real_eigenvalues: bool


def determinant_2x2(m: Matrix) -> float:
    (a, b), (c, d) = m.items
    return a * d - b * c


def determinant_3x3(m: Matrix) -> float:
    """Cofactor expansion along the first row."""
    (a, b, c), (d, e, f), (g, h, i) = m.items
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def characteristic_coefficients(matrix: MatrixLike) -> List[float]:
    """
    Coefficients of det(λI - A), highest degree first.

    Raises:
        ShapeError: unless the matrix is 2x2 or 3x3.
    """
    m = _ensure_supported(as_matrix(matrix))
    t = trace(m)
    if m.rows == 2:
        return [1.0, -t, determinant_2x2(m)]
    trace_of_square = trace(multiply(m, m))
    return [1.0, -t, (t * t - trace_of_square) / 2, -determinant_3x3(m)]


def quadratic_eigenvalues(t: float, d: float) -> List[float]:
    """Real roots of λ² - tλ + d, ascending; empty when the discriminant is negative."""
    discriminant = t * t - 4 * d
    if discriminant < 0:
        return []
    root = math.sqrt(discriminant)
    return sorted([(t + root) / 2, (t - root) / 2])


def compute_characteristic_polynomial_and_eigenvalues(
    matrix: MatrixLike,
    do_log: bool = False,
    root_finder: Optional[RootFinder] = None,
) -> CharacteristicPolynomialResult:
    """
    Characteristic polynomial and real eigenvalues of a 2x2 or 3x3 matrix.

    Raises:
        ShapeError: unless the matrix is square of size 2 or 3.
    """
    m = _ensure_supported(as_matrix(matrix))
    coefficients = characteristic_coefficients(m)
    polynomial = Polynomial.from_coefficients(coefficients, LATEX_LAMBDA)

    if do_log:
        log(r"Input matrix: $$ A = %s $$", m)
        log(r"Trace: $\operatorname{tr}(A) = %s$", -coefficients[1])
        if m.rows == 3:
            log(r"Trace of the square: $\operatorname{tr}(A^2) = %s$", trace(multiply(m, m)))
        log(r"Determinant: $\det(A) = %s$", (-1) ** m.rows * coefficients[-1])
        log(r"The characteristic polynomial is: $$ p(\lambda) = %s $$", polynomial)

    if m.rows == 2:
        eigenvalues = quadratic_eigenvalues(-coefficients[1], coefficients[2])
        if do_log:
            log(
                r"Discriminant: $\Delta = %s$",
                coefficients[1] ** 2 - 4 * coefficients[2],
            )
    else:
        finder = root_finder if root_finder is not None else RootFinder()
        eigenvalues = finder.find_real_roots(coefficients)

    if do_log:
        if eigenvalues:
            log(r"Real eigenvalues: $%s$", make_latex_list(eigenvalues))
        else:
            log(r"The matrix has no real eigenvalues.")

    return CharacteristicPolynomialResult(
        size=m.rows,
        coefficients=tuple(coefficients),
        polynomial=polynomial,
        formatted_polynomial=format_polynomial(coefficients),
        eigenvalues=tuple(eigenvalues),
        has_real_eigenvalues=len(eigenvalues) > 0,
    )


def _ensure_supported(m: Matrix) -> Matrix:
    if not m.is_square or m.rows not in SUPPORTED_SIZES:
        raise ShapeError(
            "Characteristic polynomial is only supported for 2x2 and 3x3 matrices, "
            "got %dx%d" % (m.rows, m.cols)
        )
    return m
