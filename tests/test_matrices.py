import pytest
import numpy as np
from numpy.testing import assert_array_equal
from hill_crt.matrices import (
    as_matrix3,
    as_vector3,
    identity3,
    determinant,
    adjugate,
    reduce_mod,
    scale_mod,
    mat_vec_mod,
    mat_mul_mod,
)


key = as_matrix3([[6, 24, 1], [13, 16, 10], [20, 17, 15]])


class TestShapes:
    @pytest.mark.parametrize(
        "values", [[1, 2, 3], [[1, 2], [3, 4]], np.zeros((3, 4))]
    )
    def test_matrix_rejects_other_shapes(self, values) -> None:
        with pytest.raises(ValueError):
            as_matrix3(values)

    def test_vector_rejects_other_shapes(self) -> None:
        with pytest.raises(ValueError):
            as_vector3([1, 2, 3, 4])

    def test_dtype(self) -> None:
        assert as_matrix3(np.ones((3, 3))).dtype == np.int64
        assert as_vector3([1.0, 2.0, 3.0]).dtype == np.int64


class TestDeterminant:
    def test_known_key(self) -> None:
        assert determinant(key) == 441

    def test_sign_is_kept(self) -> None:
        swapped = key[[1, 0, 2]]
        assert determinant(swapped) == -441

    def test_identity_and_singular(self) -> None:
        assert determinant(identity3()) == 1
        assert determinant([[1, 2, 3], [2, 4, 6], [0, 0, 1]]) == 0

    def test_agrees_with_numpy(self) -> None:
        np.random.seed(8734)
        for matrix in np.random.randint(-30, 30, size=(20, 3, 3)):
            assert determinant(matrix) == round(np.linalg.det(matrix))


class TestAdjugate:
    def test_known_key(self) -> None:
        assert_array_equal(
            adjugate(key),
            [[70, -343, 224], [5, 70, -47], [-99, 378, -216]],
        )

    def test_product_is_scaled_identity(self) -> None:
        np.random.seed(2384)
        for matrix in np.random.randint(0, 26, size=(20, 3, 3)):
            assert_array_equal(
                matrix @ adjugate(matrix), determinant(matrix) * identity3()
            )


class TestReduceMod:
    def test_negative_entries(self) -> None:
        reduced = reduce_mod(adjugate(key), 13)
        assert_array_equal(reduced, [[5, 8, 3], [5, 5, 5], [5, 1, 5]])
        assert reduced.min() >= 0

    def test_raises_for_bad_modulus(self) -> None:
        with pytest.raises(ValueError):
            reduce_mod(key, 0)


class TestScaleMod:
    def test_functionality(self) -> None:
        assert_array_equal(
            scale_mod(key, 3, 26),
            [[18, 20, 3], [13, 22, 4], [8, 25, 19]],
        )

    def test_negative_scalar(self) -> None:
        assert_array_equal(scale_mod(key, -1, 26), (-key) % 26)


class TestMatVecMod:
    def test_functionality(self) -> None:
        inverse = [[8, 5, 10], [21, 8, 21], [21, 12, 8]]
        assert_array_equal(mat_vec_mod(inverse, [15, 14, 7], 26), [0, 2, 19])

    def test_result_in_range(self) -> None:
        result = mat_vec_mod(-key, [1, 1, 1], 26)
        assert result.min() >= 0
        assert result.max() < 26


class TestMatMulMod:
    def test_identity(self) -> None:
        assert_array_equal(mat_mul_mod(key, identity3(), 26), key)

    def test_known_inverse(self) -> None:
        inverse = [[8, 5, 10], [21, 8, 21], [21, 12, 8]]
        assert_array_equal(mat_mul_mod(key, inverse, 26), identity3())
