import pytest

from linalg_calc import (
    Matrix,
    ShapeError,
    TriangularType,
    add,
    classify_triangular,
    decompose_into_symmetric_and_skew,
    is_lower_triangular,
    is_upper_triangular,
    transpose,
)
from linalg_calc.log import capture_logs


class TestTriangular:
    def test_upper(self):
        a = [[2, 1, -1], [0, 3, 4], [0, 0, 5]]
        assert is_upper_triangular(a)
        assert not is_lower_triangular(a)
        assert classify_triangular(a) == TriangularType.UPPER

    def test_lower(self):
        a = [[1, 0, 0], [2, 3, 0], [-1, 4, 2]]
        assert classify_triangular(a) == TriangularType.LOWER

    def test_diagonal_is_both(self):
        assert classify_triangular([[4, 0], [0, -2]]) == TriangularType.BOTH
        assert classify_triangular([[7]]) == TriangularType.BOTH
        assert classify_triangular(Matrix.identity(3)) == TriangularType.BOTH

    def test_general_is_none(self):
        assert classify_triangular([[1, 2, 0], [3, 4, 5], [0, 6, 7]]) == TriangularType.NONE

    @pytest.mark.parametrize(
        "rows",
        [[[1, 0, 0], [0, 1, 0]], [[1], [0]], [[0, 0, 0]], []],
    )
    def test_non_square_is_none(self, rows):
        assert not is_upper_triangular(rows)
        assert not is_lower_triangular(rows)
        assert classify_triangular(rows) == TriangularType.NONE

    def test_tolerance(self):
        a = [[1, 0], [1e-12, 1]]
        assert classify_triangular(a) == TriangularType.BOTH
        assert classify_triangular(a, tolerance=0) == TriangularType.LOWER

    def test_labels(self):
        assert TriangularType.UPPER.value == "upper"
        assert "diagonal" in TriangularType.BOTH.label


class TestDecomposition:
    def test_simple(self):
        res = decompose_into_symmetric_and_skew([[1, 2], [3, 4]])
        assert res.symmetric == Matrix([[1, 2.5], [2.5, 4]])
        assert res.skew_symmetric == Matrix([[0, -0.5], [0.5, 0]])

    @pytest.mark.parametrize(
        "rows",
        [
            [[1, 2], [3, 4]],
            [[2, -1, 0], [3, 5, 4], [0, -2, 1]],
            [[0.1, 0.7, -3.3], [2.2, 5.9, 4.1], [1e3, -2, 1]],
        ],
    )
    def test_properties(self, rows):
        res = decompose_into_symmetric_and_skew(rows)
        assert add(res.symmetric, res.skew_symmetric).allclose(rows, 1e-9)
        assert res.symmetric == transpose(res.symmetric)
        assert res.skew_symmetric == -transpose(res.skew_symmetric)

    def test_symmetric_input_has_zero_skew_part(self):
        res = decompose_into_symmetric_and_skew([[2, 1, 3], [1, 4, 0], [3, 0, -1]])
        assert res.skew_symmetric == Matrix.zero(3, 3)

    @pytest.mark.parametrize("rows", [[[1, 2, 3], [4, 5, 6]], []])
    def test_requires_square(self, rows):
        with pytest.raises(ShapeError):
            decompose_into_symmetric_and_skew(rows)

    def test_logging(self):
        text = capture_logs(
            lambda: decompose_into_symmetric_and_skew([[1, 2], [3, 4]], do_log=True)
        )
        assert r"\frac{A + A^T}{2}" in text
