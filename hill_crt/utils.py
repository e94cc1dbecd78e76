"""Modular arithmetic utilities and cipher constants."""

from functools import reduce
from math import gcd
from itertools import combinations
import string
from typing import Optional, Sequence, Tuple

ALPHABET = string.ascii_uppercase
MODULUS = len(ALPHABET)  # 26
CRT_MODULI = (2, 13)  # 26 == 2 * 13
BLOCK_SIZE = 3
PADDING_LETTER = "X"


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """return (g, x, y) such that a*x + b*y = g = gcd(a, b)"""
    # Invariants: r_prev == a*s_prev + b*t_prev, r == a*s + b*t
    r_prev, s_prev, t_prev = a, 1, 0
    r, s, t = b, 0, 1
    while r != 0:
        quotient = r_prev // r
        r_prev, r = r, r_prev - quotient * r
        s_prev, s = s, s_prev - quotient * s
        t_prev, t = t, t_prev - quotient * t
    return r_prev, s_prev, t_prev


def positive_mod(value: int, modulus: int) -> int:
    """return the representative of value in [0, modulus)"""
    if modulus <= 0:
        raise ValueError(f"Modulus must be positive: {modulus}")
    return value % modulus


def modinv(a: int, m: int) -> Optional[int]:
    """return x such that (x * a) % m == 1, or None if gcd(a, m) != 1"""
    g, x, _ = xgcd(positive_mod(a, m), m)
    if g != 1:
        return None
    return x % m


def crt_basis(moduli: Sequence[int]) -> Tuple[int, ...]:
    """Basis coefficients e_i with e_i = 1 (mod m_i) and e_i = 0 modulo
    every other m_j, so that sum(r_i * e_i) solves the congruences."""
    if not moduli:
        raise ValueError("At least one modulus is required")
    for m in moduli:
        if m <= 0:
            raise ValueError(f"Moduli must be positive: {m}")
    for m_i, m_j in combinations(moduli, 2):
        if gcd(m_i, m_j) != 1:
            raise ValueError(f"Moduli aren't pairwise coprime: {m_i}, {m_j}")

    product = reduce(lambda acc, m: acc * m, moduli, 1)
    basis = []
    for m in moduli:
        cofactor = product // m
        inverse = modinv(cofactor, m)
        assert inverse is not None  # guaranteed by coprimality
        basis.append(cofactor * inverse % product)
    return tuple(basis)


def crt_combine(
    residues: Sequence[int],
    moduli: Sequence[int],
    basis: Optional[Sequence[int]] = None,
) -> int:
    """Unique x modulo prod(moduli) with x = residues[i] (mod moduli[i]).

    ``basis`` is ``crt_basis(moduli)``, computed here when not supplied.
    """
    basis = crt_basis(moduli) if basis is None else basis
    if len(residues) != len(moduli) or len(basis) != len(moduli):
        raise ValueError("Need exactly one residue per modulus")
    product = reduce(lambda acc, m: acc * m, moduli, 1)
    return (
        sum(
            positive_mod(r, m) * e
            for r, m, e in zip(residues, moduli, basis)
        )
        % product
    )
