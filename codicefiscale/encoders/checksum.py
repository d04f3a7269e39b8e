"""Control character (position 16) of the codice fiscale.

Positions are numbered from 1 in the decree, so index 0 of the string is an
"odd" position and goes through ODD_VALUES.
"""

from __future__ import annotations

from codicefiscale.encoders.tables import ALPHABET, EVEN_VALUES, ODD_VALUES

PRELIMINARY_LENGTH = 15
CODE_LENGTH = 16


def compute_control_character(preliminary_code: str) -> str:
    """Compute the check letter over a 15-character preliminary code.

    Args:
        preliminary_code: Uppercase letters and digits. Lowercase letters are
            uppercased first; anything else is outside the contract.

    Returns:
        A single letter A–Z.
    """
    total = 0
    for i, char in enumerate(preliminary_code.upper()):
        if i % 2 == 0:  # odd position (1-indexed)
            total += ODD_VALUES[char]
        else:  # even position (1-indexed)
            total += EVEN_VALUES[char]
    return ALPHABET[total % 26]


def validate_control_character(code: str) -> bool:
    """Check the last character of a 16-character code against its payload."""
    if len(code) != CODE_LENGTH:
        return False
    payload = code[:PRELIMINARY_LENGTH].upper()
    if not all(char in ODD_VALUES for char in payload):
        return False
    return code[PRELIMINARY_LENGTH].upper() == compute_control_character(payload)
