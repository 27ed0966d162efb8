from typing import Iterator, List, Sequence, Tuple, Union

from .errors import ShapeError
from .fmt import make_latex_matrix, format_number


class Matrix:
    """
    Rectangular matrix of floats.

    Construction copies the given rows, so a Matrix never aliases the
    caller's lists. Ragged input is rejected with ShapeError. The empty
    matrix (no rows) is allowed and has zero columns.
    """

    items: List[List[float]]

    def __init__(self, items: Sequence[Sequence[float]]):
        if isinstance(items, Matrix):
            items = items.items
        rows = []
        for i, row in enumerate(items):
            if isinstance(row, (str, bytes)) or not hasattr(row, "__len__"):
                raise ShapeError("Matrix row %d is not a sequence of numbers" % i)
            rows.append([float(item) for item in row])
        if rows:
            row_len = len(rows[0])
            for i, row in enumerate(rows):
                if len(row) != row_len:
                    raise ShapeError(
                        "All matrix rows must have the same length; row %d has %d "
                        "entries, expected %d" % (i, len(row), row_len)
                    )
        self.items = rows

    def __str__(self) -> str:
        return "\n".join(
            [" ".join([format_number(item) for item in row]) for row in self.items]
        )

    def __repr__(self) -> str:
        return "Matrix(%r)" % self.items

    def cformat(self, _arg_of="") -> str:
        return make_latex_matrix(self.items)

    @property
    def rows(self) -> int:
        return len(self.items)

    @property
    def cols(self) -> int:
        if self.rows == 0:
            return 0
        return len(self.items[0])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def is_square(self) -> bool:
        return self.rows > 0 and self.rows == self.cols

    def get_col(self, j: int) -> List[float]:
        return [row[j] for row in self.items]

    def __getitem__(self, index: Tuple[int, int]) -> float:
        i, j = index
        return self.items[i][j]

    def inorder_slot_iter(self) -> Iterator[Tuple[int, int]]:
        for i in range(self.rows):
            for j in range(self.cols):
                yield (i, j)

    def copy(self) -> "Matrix":
        return Matrix(self.items)

    def to_list(self) -> List[List[float]]:
        return [list(row) for row in self.items]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.items == other.items

    __hash__ = None

    def allclose(self, other: "Matrix", tol: float = 1e-9) -> bool:
        other = as_matrix(other)
        if self.shape != other.shape:
            return False
        return all(
            abs(self.items[i][j] - other.items[i][j]) <= tol
            for i, j in self.inorder_slot_iter()
        )

    def transpose(self) -> "Matrix":
        return transpose(self)

    @property
    def T(self) -> "Matrix":
        return transpose(self)

    def __add__(self, other: "Matrix") -> "Matrix":
        return add(self, other)

    def __sub__(self, other: "Matrix") -> "Matrix":
        return subtract(self, other)

    def __neg__(self) -> "Matrix":
        return scalar_multiply(self, -1.0)

    def scalar_mul(self, scalar: float) -> "Matrix":
        return scalar_multiply(self, scalar)

    def __mul__(self, other) -> "Matrix":
        if not isinstance(other, Matrix):
            return scalar_multiply(self, other)
        return multiply(self, other)

    @classmethod
    def zero(cls, rows: int, cols: int) -> "Matrix":
        return cls([[0.0] * cols for _ in range(rows)])

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        return cls([[1.0 if i == j else 0.0 for j in range(size)] for i in range(size)])


MatrixLike = Union[Matrix, Sequence[Sequence[float]]]


def as_matrix(value: MatrixLike) -> Matrix:
    """Return a Matrix built from ``value``; always a fresh copy."""
    return Matrix(value)


def is_square(matrix: MatrixLike) -> bool:
    """Check whether a matrix is square. The empty matrix is not square."""
    try:
        return as_matrix(matrix).is_square
    except ShapeError:
        return False


def ensure_square(matrix: Matrix, what: str = "This operation"):
    if not matrix.is_square:
        raise ShapeError(
            "%s requires a non-empty square matrix, got %dx%d"
            % (what, matrix.rows, matrix.cols)
        )


def ensure_same_size(a: Matrix, b: Matrix):
    if a.rows != b.rows:
        raise ShapeError("Matrices must have the same number of rows.")
    if a.cols != b.cols:
        raise ShapeError("Matrices must have the same number of columns.")


def transpose(matrix: MatrixLike) -> Matrix:
    m = as_matrix(matrix)
    return Matrix([m.get_col(j) for j in range(m.cols)])


def add(a: MatrixLike, b: MatrixLike) -> Matrix:
    a, b = as_matrix(a), as_matrix(b)
    ensure_same_size(a, b)
    return Matrix(
        [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a.items, b.items)]
    )


def subtract(a: MatrixLike, b: MatrixLike) -> Matrix:
    a, b = as_matrix(a), as_matrix(b)
    ensure_same_size(a, b)
    return Matrix(
        [[x - y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a.items, b.items)]
    )


def scalar_multiply(matrix: MatrixLike, scalar: float) -> Matrix:
    m = as_matrix(matrix)
    return Matrix([[item * scalar for item in row] for row in m.items])


def multiply(a: MatrixLike, b: MatrixLike) -> Matrix:
    """
    Matrix product ``a · b``.

    Raises:
        ShapeError: if the number of columns of ``a`` differs from the number
            of rows of ``b``.
    """
    a, b = as_matrix(a), as_matrix(b)
    if a.cols != b.rows:
        raise ShapeError(
            "Cannot multiply a %dx%d matrix by a %dx%d matrix"
            % (a.rows, a.cols, b.rows, b.cols)
        )
    res = Matrix.zero(a.rows, b.cols)
    for i in range(a.rows):
        for j in range(b.cols):
            res.items[i][j] = sum(a.items[i][k] * b.items[k][j] for k in range(a.cols))
    return res


def trace(matrix: MatrixLike) -> float:
    m = as_matrix(matrix)
    ensure_square(m, "Trace")
    return sum(m.items[i][i] for i in range(m.rows))
