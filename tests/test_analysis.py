from linalg_calc import Matrix, TriangularType, analyze_triangular_pair
from linalg_calc.log import capture_logs
from linalg_calc.presets import TRIANGULAR_PAIR_PRESETS, get_preset


class TestTriangularPair:
    def test_upper_pair(self):
        a, b = get_preset(TRIANGULAR_PAIR_PRESETS, "upper-3x3").to_matrices()
        res = analyze_triangular_pair(a, b)
        assert res.size == 3
        assert res.matrix_a_type == TriangularType.UPPER
        assert res.matrix_b_type == TriangularType.UPPER
        assert res.inverse_exists
        assert res.inverse_a_type == TriangularType.UPPER
        assert res.product_type == TriangularType.UPPER

    def test_lower_pair(self):
        a, b = get_preset(TRIANGULAR_PAIR_PRESETS, "lower-3x3").to_matrices()
        res = analyze_triangular_pair(a, b)
        assert res.matrix_a_type == TriangularType.LOWER
        assert res.inverse_a_type == TriangularType.LOWER
        assert res.product_type == TriangularType.LOWER

    def test_non_triangular(self):
        a, b = get_preset(TRIANGULAR_PAIR_PRESETS, "non-triangular").to_matrices()
        res = analyze_triangular_pair(a, b)
        assert res.matrix_a_type == TriangularType.NONE
        assert res.matrix_b_type == TriangularType.BOTH
        assert res.inverse_exists
        assert res.product == a

    def test_singular_a(self):
        res = analyze_triangular_pair([[1, 1], [0, 0]], Matrix.identity(2))
        assert res.matrix_a_type == TriangularType.UPPER
        assert not res.inverse_exists
        assert res.inverse_a is None
        assert res.inverse_a_type is None

    def test_product_undefined(self):
        res = analyze_triangular_pair([[1, 2, 3], [4, 5, 6]], [[1, 0], [0, 1]])
        assert res.matrix_a_type == TriangularType.NONE
        assert res.product is None
        assert res.product_type is None
        assert not res.inverse_exists

    def test_logging(self):
        text = capture_logs(
            lambda: analyze_triangular_pair([[1, 2, 3]], [[1, 0], [0, 1]], do_log=True)
        )
        assert "no inverse" in text
        assert "not defined" in text
