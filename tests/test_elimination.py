import pytest

from linalg_calc import (
    EliminationMode,
    Matrix,
    classify_triangular,
    compute_inverse_gauss,
    compute_rank_and_inverse,
    eliminate,
    multiply,
    rank,
    to_row_echelon_form,
    TriangularType,
)
from linalg_calc.log import capture_logs, global_logger

INVERTIBLE = [
    [[2, 1, -1], [0, 3, 4], [0, 0, 5]],
    [[2, 1, 1], [1, 3, 2], [1, 0, 0]],
    [[4, 7], [2, 6]],
    [[0, 1], [1, 0]],
    [[1, 2, 0], [3, 4, 5], [0, 6, 7]],
    [[3]],
]

SINGULAR = [
    [[1, 2], [2, 4]],
    [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
    [[0, 0], [0, 0]],
    [[1, 0, 0], [0, 0, 0], [0, 0, 1]],
]


def zero_pattern(m):
    return [[v == 0 for v in row] for row in m.items]


class TestRowEchelon:
    def test_rank_full(self):
        assert rank([[2, 1, -1], [0, 3, 4], [0, 0, 5]]) == 3

    def test_rank_deficient_square(self):
        assert rank([[1, 2], [2, 4]]) == 1
        assert rank([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == 2

    def test_echelon_form_of_3x3(self):
        res = to_row_echelon_form([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert res.row_echelon_form == Matrix([[1, 2, 3], [0, 1, 2], [0, 0, 0]])
        assert res.rank == 2

    def test_rectangular(self):
        res = to_row_echelon_form([[1, 2, 0], [3, 6, 0], [1, 1, 1], [2, 3, 1]])
        assert res.rank == 2
        assert res.row_echelon_form == Matrix(
            [[1, 2, 0], [0, 1, -1], [0, 0, 0], [0, 0, 0]]
        )

    def test_swaps_zero_pivot(self):
        res = to_row_echelon_form([[0, 2], [3, 0]])
        assert res.row_echelon_form == Matrix([[1, 0], [0, 1]])
        assert res.rank == 2

    def test_skips_empty_column(self):
        res = to_row_echelon_form([[0, 1, 2], [0, 2, 5]])
        assert res.row_echelon_form == Matrix([[0, 1, 2], [0, 0, 1]])
        assert res.rank == 2

    def test_does_not_clear_above_pivot(self):
        res = to_row_echelon_form([[1, 1], [0, 1]])
        assert res.row_echelon_form == Matrix([[1, 1], [0, 1]])

    def test_empty_matrix(self):
        res = to_row_echelon_form([])
        assert res.rank == 0
        assert res.row_echelon_form.shape == (0, 0)

    def test_zero_matrix(self):
        assert rank([[0, 0, 0], [0, 0, 0]]) == 0

    def test_input_not_modified(self):
        rows = [[0, 2], [3, 4]]
        to_row_echelon_form(rows)
        m = Matrix(rows)
        to_row_echelon_form(m)
        assert rows == [[0, 2], [3, 4]]
        assert m == Matrix([[0, 2], [3, 4]])

    @pytest.mark.parametrize("rows", INVERTIBLE + SINGULAR)
    def test_idempotent(self, rows):
        first = to_row_echelon_form(rows)
        second = to_row_echelon_form(first.row_echelon_form)
        assert second.rank == first.rank
        assert zero_pattern(second.row_echelon_form) == zero_pattern(
            first.row_echelon_form
        )


class TestEliminate:
    def test_below_mode_records_pivots(self):
        trace = eliminate([[1.0, 2.0], [3.0, 4.0]], EliminationMode.BELOW)
        assert trace.pivots == [(0, 0), (1, 1)]
        assert trace.steps == []

    def test_both_mode_reduces_fully(self):
        trace = eliminate([[1.0, 1.0], [0.0, 1.0]], EliminationMode.BOTH)
        assert trace.items == [[1.0, 0.0], [0.0, 1.0]]

    def test_pivot_columns_limit(self):
        trace = eliminate([[0.0, 1.0], [0.0, 2.0]], EliminationMode.BOTH, pivot_cols=1)
        assert trace.pivots == []

    def test_record_steps(self):
        trace = eliminate([[0.0, 2.0], [3.0, 0.0]], record_steps=True)
        assert len(trace.intermediate_matrices) == len(trace.steps) + 1
        assert "Swap" in trace.steps[0]


class TestInverse:
    def test_upper_triangular_inverse_is_upper(self):
        a = [[2, 1, -1], [0, 3, 4], [0, 0, 5]]
        inv = compute_inverse_gauss(a)
        assert inv is not None
        assert classify_triangular(inv) == TriangularType.UPPER

    def test_known_inverse(self):
        inv = compute_inverse_gauss([[4, 7], [2, 6]])
        assert inv.allclose([[0.6, -0.7], [-0.2, 0.4]], 1e-12)

    @pytest.mark.parametrize("rows", INVERTIBLE)
    def test_round_trip(self, rows):
        a = Matrix(rows)
        inv = compute_inverse_gauss(a)
        identity = Matrix.identity(a.rows)
        assert multiply(a, inv).allclose(identity, 1e-9)
        assert multiply(inv, a).allclose(identity, 1e-9)

    @pytest.mark.parametrize("rows", SINGULAR)
    def test_singular_has_no_inverse(self, rows):
        assert compute_inverse_gauss(rows) is None

    def test_non_square_has_no_inverse(self):
        assert compute_inverse_gauss([[1, 2, 3], [4, 5, 6]]) is None
        assert compute_inverse_gauss([]) is None

    def test_input_not_modified(self):
        rows = [[0, 1], [1, 0]]
        compute_inverse_gauss(rows)
        assert rows == [[0, 1], [1, 0]]


class TestRankAndInverse:
    def test_invertible(self):
        res = compute_rank_and_inverse([[2, 1, -1], [0, 3, 4], [0, 0, 5]])
        assert res.rank == 3
        assert res.is_square
        assert res.has_inverse
        assert res.inverse is not None

    def test_singular(self):
        res = compute_rank_and_inverse([[1, 2], [2, 4]])
        assert res.rank == 1
        assert res.is_square
        assert not res.has_inverse
        assert res.inverse is None

    def test_rectangular(self):
        res = compute_rank_and_inverse([[1, 2, 0], [3, 6, 0], [1, 1, 1], [2, 3, 1]])
        assert res.rank == 2
        assert not res.is_square
        assert not res.has_inverse
        assert res.inverse is None

    @pytest.mark.parametrize("rows", INVERTIBLE + SINGULAR)
    def test_cross_consistency(self, rows):
        res = compute_rank_and_inverse(rows)
        assert res.has_inverse == (res.rank == len(rows))
        assert (res.inverse is not None) == res.has_inverse


class TestLogging:
    def test_logs_steps_when_asked(self):
        text = capture_logs(
            lambda: compute_rank_and_inverse([[0, 2], [3, 4]], do_log=True)
        )
        assert "Swap" in text
        assert "Rank" in text
        assert "Inverse matrix" in text

    def test_logs_singular_verdict(self):
        text = capture_logs(lambda: compute_inverse_gauss([[1, 2], [2, 4]], do_log=True))
        assert "singular" in text

    def test_silent_by_default(self):
        before = len(global_logger.accum)
        compute_rank_and_inverse([[1, 2], [3, 4]])
        assert len(global_logger.accum) == before
