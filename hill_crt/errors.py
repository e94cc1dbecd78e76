"""Exceptions raised while parsing keys and inverting key matrices."""


class HillCipherError(Exception):
    pass


class InvalidKeyError(HillCipherError):
    def __init__(self, length: int, expected: int = 9):
        super().__init__(
            f"Key must contain exactly {expected} alphabetic characters "
            f"(A-Z), got {length}."
        )
        self.length = length
        self.expected = expected


class InvertibilityError(HillCipherError):
    """Key matrix has no inverse modulo the alphabet size."""


class NonInvertibleModulusError(InvertibilityError):
    def __init__(self, modulus: int, determinant: int, full_modulus: int):
        super().__init__(
            f"Key matrix determinant is 0 modulo {modulus} -> "
            f"not invertible mod {full_modulus}."
        )
        self.modulus = modulus
        self.determinant = determinant


class ModularInverseAbsentError(InvertibilityError):
    """Raised when a residue already checked to be nonzero has no inverse,
    which points at a bug rather than at bad input."""

    def __init__(self, value: int, modulus: int):
        super().__init__(f"{value} has no inverse modulo {modulus}.")
        self.value = value
        self.modulus = modulus
