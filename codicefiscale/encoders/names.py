"""Surname and name fragments (positions 1-6 of the code).

  - Surname: consonants in order, then vowels, padded with X to 3 letters
  - Name:    same as surname, except that a name with more than three
             consonants takes the 1st, 3rd and 4th consonant
"""

from __future__ import annotations

from codicefiscale.encoders.tables import VOWELS
from codicefiscale.errors import InvalidInputError

_FRAGMENT_LENGTH = 3
_PADDING = "X"
_LONG_NAME_CONSONANTS = (0, 2, 3)


def is_vowel(char: str) -> bool:
    """Check whether a character is a vowel (case-insensitive)."""
    return char.lower() in VOWELS


def is_consonant(char: str) -> bool:
    """Anything that is not a vowel counts as a consonant."""
    return not is_vowel(char)


def _split(text: str) -> tuple[list[str], list[str]]:
    if not any(char.isalpha() for char in text):
        msg = f"Cannot encode {text!r}: it contains no letters"
        raise InvalidInputError(msg)
    consonants = [char for char in text if is_consonant(char)]
    vowels = [char for char in text if is_vowel(char)]
    return consonants, vowels


def _fragment(consonants: list[str], vowels: list[str]) -> str:
    letters = "".join(consonants + vowels)[:_FRAGMENT_LENGTH]
    return letters.ljust(_FRAGMENT_LENGTH, _PADDING).upper()


def encode_surname(surname: str) -> str:
    """Encode a surname into its 3-letter fragment.

    Raises:
        InvalidInputError: If the surname has no letters.
    """
    consonants, vowels = _split(surname)
    return _fragment(consonants, vowels)


def encode_name(name: str) -> str:
    """Encode a given name into its 3-letter fragment.

    "ROBERTO" has consonants R, B, R, T: more than three, so the
    1st, 3rd and 4th are taken → "RRT".

    Raises:
        InvalidInputError: If the name has no letters.
    """
    consonants, vowels = _split(name)
    if len(consonants) > _FRAGMENT_LENGTH:
        return "".join(consonants[i] for i in _LONG_NAME_CONSONANTS).upper()
    return _fragment(consonants, vowels)
