"""Sanitising user text and building key matrices from it."""

import string
from .errors import InvalidKeyError
from .matrices import Matrix3, as_matrix3
from .utils import ALPHABET

KEY_LENGTH = 9


def is_letter(ch: str) -> bool:
    """True only for a single ASCII letter, either case."""
    return len(ch) == 1 and ch in string.ascii_letters


def clean_text(text: str) -> str:
    """Keep only the letters A-Z (any case), uppercased."""
    # Filter before uppercasing: "ß".upper() == "SS"
    return "".join(ch.upper() for ch in text if is_letter(ch))


def letter_index(letter: str) -> int:
    if len(letter) != 1 or letter not in ALPHABET:
        raise ValueError(f"Not a letter A-Z: {letter!r}")
    return ALPHABET.index(letter)


def index_letter(index: int) -> str:
    return ALPHABET[index % len(ALPHABET)]


def parse_key(text: str) -> Matrix3:
    """Row-major 3x3 key matrix from the nine letters of ``text``."""
    letters = clean_text(text)
    if len(letters) != KEY_LENGTH:
        raise InvalidKeyError(len(letters), KEY_LENGTH)
    values = [letter_index(letter) for letter in letters]
    return as_matrix3([values[0:3], values[3:6], values[6:9]])
