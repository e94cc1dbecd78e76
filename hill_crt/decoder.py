"""Hill cipher block decryption with a precomputed inverse key."""

from typing import List
from .matrices import Matrix3, Vector3, as_vector3, mat_vec_mod
from .parsing import clean_text, index_letter, is_letter, letter_index
from .utils import BLOCK_SIZE, MODULUS, PADDING_LETTER


def pad_letters(letters: str, padding: str = PADDING_LETTER) -> str:
    n_missing = -len(letters) % BLOCK_SIZE
    return letters + padding * n_missing


def split_blocks(letters: str) -> List[str]:
    if len(letters) % BLOCK_SIZE != 0:
        raise ValueError(
            f"Length {len(letters)} isn't a multiple of {BLOCK_SIZE}"
        )
    return [
        letters[i : i + BLOCK_SIZE]
        for i in range(0, len(letters), BLOCK_SIZE)
    ]


def letters_to_vector(block: str) -> Vector3:
    return as_vector3([letter_index(letter) for letter in block])


def vector_to_letters(vector: Vector3) -> str:
    return "".join(index_letter(int(value)) for value in vector)


def decrypt_block(block: str, inverse_key: Matrix3) -> str:
    return vector_to_letters(
        mat_vec_mod(inverse_key, letters_to_vector(block), MODULUS)
    )


def decrypt(
    ciphertext: str, inverse_key: Matrix3, padding: str = PADDING_LETTER
) -> str:
    """Decrypt ``ciphertext``, ignoring anything that isn't a letter.

    The letters are padded to whole blocks with ``padding`` and the padding
    is decrypted along with them, so the result's length is always a
    multiple of the block size.
    """
    if not is_letter(padding):
        raise ValueError(f"Padding must be a single letter: {padding!r}")
    letters = pad_letters(clean_text(ciphertext), padding.upper())
    return "".join(
        decrypt_block(block, inverse_key) for block in split_blocks(letters)
    )
