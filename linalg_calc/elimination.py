"""
Gaussian and Gauss-Jordan elimination.

Both the echelon form (rank) and the inverse are computed by the same
``eliminate`` routine; they only differ in which rows get cleared below
(or around) each pivot. Pivots are found with an exact zero test, scanning
downward in the current column, with no reordering by magnitude.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .fmt import make_latex_augmented_matrix, make_latex_matrix
from .linalg import Matrix, MatrixLike, as_matrix
from .log import log


class EliminationMode(Enum):
    # clear entries strictly below each pivot (row echelon form)
    BELOW = "below"
    # clear entries above and below each pivot (Gauss-Jordan)
    BOTH = "both"


@dataclass
class EliminationTrace:
    items: List[List[float]]
    pivots: List[Tuple[int, int]]
    intermediate_matrices: List[str] = field(default_factory=list)
    steps: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class RowEchelonResult:
    row_echelon_form: Matrix
    rank: int


@dataclass(frozen=True)
class RankAndInverseResult:
    row_echelon_form: Matrix
    rank: int
    is_square: bool
    has_inverse: bool
    inverse: Optional[Matrix] = None


def eliminate(
    items: List[List[float]],
    mode: EliminationMode = EliminationMode.BELOW,
    pivot_cols: int = None,
    bar_col: int = None,
    record_steps: bool = False,
) -> EliminationTrace:
    """
    Row reduce ``items`` in place.

    Args:
        items: Rows to reduce. The list is modified; pass a copy.
        mode: Which entries to clear around each pivot.
        pivot_cols: Only the first ``pivot_cols`` columns may hold pivots
            (defaults to all columns). Used for augmented blocks.
        bar_col: Column in front of which the augmentation bar is drawn when
            recording intermediate matrices.
        record_steps: Keep a LaTeX rendering of every intermediate matrix
            and a description of each step.

    Returns:
        The trace holding the reduced rows and the ``(row, col)`` pivots.
    """
    m = len(items)
    n = len(items[0]) if m else 0
    if pivot_cols is None:
        pivot_cols = n
    trace = EliminationTrace(items, [])

    def record(kind: str, description: str):
        if not record_steps:
            return
        trace.intermediate_matrices.append(_render(items, bar_col))
        trace.steps.append(
            r"\textbf{%s%s}: %s" % (kind, len(trace.steps), description)
        )

    if record_steps:
        trace.intermediate_matrices.append(_render(items, bar_col))

    pivot_i, pivot_j = 0, 0
    while pivot_i < m and pivot_j < pivot_cols:
        found = None
        for i in range(pivot_i, m):
            if items[i][pivot_j] != 0:
                found = i
                break
        if found is None:
            pivot_j += 1
            continue
        if found != pivot_i:
            items[pivot_i], items[found] = items[found], items[pivot_i]
            record("S", "Swap rows $R_{%d}$ and $R_{%d}$" % (pivot_i + 1, found + 1))

        factor = items[pivot_i][pivot_j]
        if factor != 1:
            items[pivot_i] = [value / factor for value in items[pivot_i]]
            record("N", "Normalize pivot row %d" % (pivot_i + 1))

        if mode is EliminationMode.BOTH:
            targets = [k for k in range(m) if k != pivot_i]
        else:
            targets = range(pivot_i + 1, m)
        eliminated = False
        for k in targets:
            factor = items[k][pivot_j]
            if factor == 0:
                continue
            pivot_row = items[pivot_i]
            items[k] = [value - factor * p for value, p in zip(items[k], pivot_row)]
            eliminated = True
        if eliminated:
            where = "around" if mode is EliminationMode.BOTH else "below"
            record("E", "Eliminate entries %s pivot in column %d" % (where, pivot_j + 1))

        trace.pivots.append((pivot_i, pivot_j))
        pivot_i += 1
        pivot_j += 1
    return trace


def _render(items: List[List[float]], bar_col: Optional[int]) -> str:
    if bar_col is None:
        return make_latex_matrix(items)
    return make_latex_augmented_matrix(items, bar_col=bar_col)


def _log_trace(trace: EliminationTrace, width: int):
    # Keep roughly ten columns of matrices per displayed line
    chunks = []
    last = []
    total_cols = 0
    for matrix in trace.intermediate_matrices:
        total_cols += width
        last.append(matrix)
        if total_cols > 10:
            chunks.append(last)
            last = [""]
            total_cols = 0
    if last and last != [""]:
        chunks.append(last)
    log(r"Intermediate matrices:")
    for chunk in chunks:
        log(r"$$ %s $$ \\", r" \sim ".join(chunk))
    for step in trace.steps:
        log(r"%s \\", step)


def count_nonzero_rows(items: List[List[float]]) -> int:
    return sum(1 for row in items if any(value != 0 for value in row))


def to_row_echelon_form(matrix: MatrixLike, do_log: bool = False) -> RowEchelonResult:
    """
    Bring a matrix of any shape to row echelon form.

    Every pivot row is normalized to a leading 1 and only the entries below
    a pivot are cleared, so the result is not the reduced form. The caller's
    matrix is left untouched.
    """
    m = as_matrix(matrix)
    if m.rows == 0:
        if do_log:
            log(r"The empty matrix has rank $0$.")
        return RowEchelonResult(Matrix([]), 0)

    trace = eliminate(m.to_list(), EliminationMode.BELOW, record_steps=do_log)
    form = Matrix(trace.items)
    rank_value = count_nonzero_rows(trace.items)
    if do_log:
        log(r"Row reduce $A = %s$ to echelon form.", m)
        _log_trace(trace, m.cols)
        log(r"\textbf{Rank:} $\operatorname{rank}(A) = %s$", rank_value)
    return RowEchelonResult(form, rank_value)


def rank(matrix: MatrixLike) -> int:
    return to_row_echelon_form(matrix).rank


def compute_inverse_gauss(matrix: MatrixLike, do_log: bool = False) -> Optional[Matrix]:
    """
    Invert a matrix by Gauss-Jordan elimination on ``[A | I]``.

    Returns None when the matrix is not square or is singular.
    """
    m = as_matrix(matrix)
    if not m.is_square:
        if do_log:
            log(r"Only non-empty square matrices can be inverted.")
        return None

    n = m.rows
    identity = Matrix.identity(n)
    augmented = [m.items[i] + identity.items[i] for i in range(n)]
    trace = eliminate(
        augmented,
        EliminationMode.BOTH,
        pivot_cols=n,
        bar_col=n,
        record_steps=do_log,
    )
    if do_log:
        log(r"Gauss-Jordan elimination on $[A \mid I]$:")
        _log_trace(trace, 2 * n)

    if len(trace.pivots) < n:
        if do_log:
            log(r"\[ \boxed{\text{The matrix is singular: no inverse.}} \]")
        return None

    inverse = Matrix([row[n:] for row in trace.items])
    if do_log:
        log(r"\textbf{Inverse matrix:} \[ %s \]", inverse)
    return inverse


def compute_rank_and_inverse(
    matrix: MatrixLike, do_log: bool = False
) -> RankAndInverseResult:
    m = as_matrix(matrix)
    echelon = to_row_echelon_form(m, do_log=do_log)
    inverse = compute_inverse_gauss(m, do_log=do_log) if m.is_square else None
    return RankAndInverseResult(
        row_echelon_form=echelon.row_echelon_form,
        rank=echelon.rank,
        is_square=m.is_square,
        has_inverse=inverse is not None,
        inverse=inverse,
    )
