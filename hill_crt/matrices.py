"""Integer algebra on fixed 3x3 matrices and 3-vectors.

Matrices are numpy int64 arrays of shape (3, 3), vectors of shape (3,).
Determinant and adjugate are exact integer results with no reduction; the
``*_mod`` functions always return entries in [0, m).
"""

import numpy as np
import numpy.typing as npt
from .utils import positive_mod

Matrix3 = npt.NDArray[np.int64]
Vector3 = npt.NDArray[np.int64]


def as_matrix3(values: npt.ArrayLike) -> Matrix3:
    matrix = np.array(values, dtype=np.int64)
    if matrix.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 matrix, got shape {matrix.shape}")
    return matrix


def as_vector3(values: npt.ArrayLike) -> Vector3:
    vector = np.array(values, dtype=np.int64)
    if vector.shape != (3,):
        raise ValueError(f"Expected a 3-vector, got shape {vector.shape}")
    return vector


def _check_modulus(modulus: int) -> None:
    if modulus <= 0:
        raise ValueError(f"Modulus must be positive: {modulus}")


def identity3() -> Matrix3:
    return np.eye(3, dtype=np.int64)


def determinant(matrix: Matrix3) -> int:
    """Cofactor expansion along the first row."""
    (a, b, c), (d, e, f), (g, h, i) = as_matrix3(matrix).tolist()
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def adjugate(matrix: Matrix3) -> Matrix3:
    """Transpose of the signed cofactor matrix."""
    (a, b, c), (d, e, f), (g, h, i) = as_matrix3(matrix).tolist()
    cofactors = [
        [e * i - f * h, -(d * i - f * g), d * h - e * g],
        [-(b * i - c * h), a * i - c * g, -(a * h - b * g)],
        [b * f - c * e, -(a * f - c * d), a * e - b * d],
    ]
    return as_matrix3(cofactors).T.copy()


def reduce_mod(matrix: Matrix3, modulus: int) -> Matrix3:
    _check_modulus(modulus)
    return np.mod(as_matrix3(matrix), modulus)


def scale_mod(matrix: Matrix3, scalar: int, modulus: int) -> Matrix3:
    factor = positive_mod(scalar, modulus)
    return np.mod(reduce_mod(matrix, modulus) * factor, modulus)


def mat_vec_mod(matrix: Matrix3, vector: Vector3, modulus: int) -> Vector3:
    _check_modulus(modulus)
    return np.mod(as_matrix3(matrix) @ as_vector3(vector), modulus)


def mat_mul_mod(left: Matrix3, right: Matrix3, modulus: int) -> Matrix3:
    _check_modulus(modulus)
    return np.mod(as_matrix3(left) @ as_matrix3(right), modulus)
