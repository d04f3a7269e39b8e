"""Homocodic variants (omocodia).

When two people share the same code, the issuing office replaces digits of
the payload with letters, starting from the rightmost one, and recomputes
the control character. The substitution is lossy: a letter in a digit slot
does not say which person attribute it came from.
"""

from __future__ import annotations

import logging
import re

from codicefiscale.encoders.checksum import PRELIMINARY_LENGTH, compute_control_character
from codicefiscale.encoders.tables import HOMOCODIC_LETTERS
from codicefiscale.errors import InvalidInputError, MalformedCodeError

logger = logging.getLogger(__name__)

_CODE_PATTERN = re.compile(r"[A-Z0-9]{16}")


def substitute_digits(preliminary_code: str, substitution_depth: int) -> str:
    """Replace up to `substitution_depth` digits, scanning right to left.

    Letters are never substituted and do not consume the budget. A depth
    larger than the number of digits replaces them all.
    """
    if substitution_depth < 0:
        msg = f"Substitution depth must be non-negative, got {substitution_depth}"
        raise InvalidInputError(msg)

    budget = substitution_depth
    chars = list(preliminary_code)
    for i in range(len(chars) - 1, -1, -1):
        if budget == 0:
            break
        if chars[i] in HOMOCODIC_LETTERS:
            chars[i] = HOMOCODIC_LETTERS[chars[i]]
            budget -= 1
    return "".join(chars)


def generate_homocodic_from_code(code: str, substitution_depth: int) -> str:
    """Generate the homocodic version of a finished code.

    Args:
        code: A 16-character code (uppercase letters and digits).
        substitution_depth: How many digits to turn into letters.

    Returns:
        The new 16-character code with a recomputed control character.

    Raises:
        MalformedCodeError: If `code` is not 16 uppercase letters/digits.
        InvalidInputError: If `substitution_depth` is negative.
    """
    if not _CODE_PATTERN.fullmatch(code):
        msg = f"Malformed code {code!r}: expected 16 uppercase letters and digits"
        raise MalformedCodeError(msg, code=code)

    # Drop the old control character, it is recomputed below
    preliminary_code = substitute_digits(code[:PRELIMINARY_LENGTH], substitution_depth)
    logger.debug("Homocodic substitution at depth %d", substitution_depth)
    return preliminary_code + compute_control_character(preliminary_code)
