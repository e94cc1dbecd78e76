"""Inversion of Hill cipher key matrices modulo 26 through the Chinese
Remainder Theorem.

The key is inverted independently modulo each coprime factor of the alphabet
size (2 and 13), and the two inverses are recombined entry by entry.
"""

from functools import reduce
from typing import Optional, Sequence
import numpy as np
from .errors import ModularInverseAbsentError, NonInvertibleModulusError
from .matrices import (
    Matrix3,
    adjugate,
    as_matrix3,
    determinant,
    identity3,
    mat_mul_mod,
    reduce_mod,
    scale_mod,
)
from .utils import (
    CRT_MODULI,
    MODULUS,
    crt_basis,
    crt_combine,
    modinv,
    positive_mod,
)


def invert_mod_prime(
    matrix: Matrix3,
    p: int,
    det: Optional[int] = None,
    adj: Optional[Matrix3] = None,
) -> Matrix3:
    """Inverse of ``matrix`` modulo a single modulus ``p``, i.e.
    adj(M) * det(M)^-1 reduced mod p."""
    det = determinant(matrix) if det is None else det
    adj = adjugate(matrix) if adj is None else adj
    det_residue = positive_mod(det, p)
    if det_residue == 0:
        raise NonInvertibleModulusError(p, det, p)
    det_inverse = modinv(det_residue, p)
    if det_inverse is None:
        raise ModularInverseAbsentError(det_residue, p)
    return scale_mod(reduce_mod(adj, p), det_inverse, p)


def invert_key(key: Matrix3, moduli: Sequence[int] = CRT_MODULI) -> Matrix3:
    key = as_matrix3(key)
    full_modulus = reduce(lambda acc, m: acc * m, moduli, 1)

    # Determinant and adjugate are shared by every modulus
    det = determinant(key)
    adj = adjugate(key)

    # Check all moduli before doing any work, in the order given
    for m in moduli:
        if positive_mod(det, m) == 0:
            raise NonInvertibleModulusError(m, det, full_modulus)

    partial_inverses = [invert_mod_prime(key, m, det, adj) for m in moduli]
    basis = crt_basis(moduli)

    inverse = np.zeros((3, 3), dtype=np.int64)
    for row in range(3):
        for col in range(3):
            inverse[row, col] = crt_combine(
                [int(partial[row, col]) for partial in partial_inverses],
                moduli,
                basis,
            )
    return inverse


def is_inverse(
    key: Matrix3, inverse: Matrix3, modulus: int = MODULUS
) -> bool:
    return bool(
        np.array_equal(mat_mul_mod(key, inverse, modulus), identity3())
    )
