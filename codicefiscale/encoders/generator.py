"""Codice fiscale generator.

Pure Python, no DB. Composes the fragments of the 16-character code:

  AAABBB 00C00 D000 E
  - AAA:  surname consonants (then vowels, then X)
  - BBB:  name consonants (then vowels, then X)
  - 00C00: year, month letter, day (+40 for females)
  - D000: birthplace code (codice catastale / Belfiore)
  - E:    check character
"""

from __future__ import annotations

import logging
from datetime import date

from pydantic import ValidationError

from codicefiscale.encoders.checksum import compute_control_character
from codicefiscale.encoders.dates import encode_day, encode_month, encode_year, select_location_code
from codicefiscale.encoders.names import encode_name, encode_surname
from codicefiscale.errors import InvalidInputError, LookupNotFoundError
from codicefiscale.models.enums import Sex
from codicefiscale.schemas.person import CityRecord, NationRecord, PersonInput

logger = logging.getLogger(__name__)


def build_preliminary_code(person: PersonInput) -> str:
    """Build the 15-character code without the control character."""
    return "".join((
        encode_surname(person.surname),
        encode_name(person.name),
        encode_year(person.birth_date.year),
        encode_month(person.birth_date.month),
        encode_day(person.birth_date.day, person.sex),
        select_location_code(person.nation, person.city),
    ))


def generate_code_for(person: PersonInput) -> str:
    """Generate the full 16-character code for a validated person."""
    preliminary_code = build_preliminary_code(person)
    code = preliminary_code + compute_control_character(preliminary_code)
    logger.debug("Generated code for birth place %s", code[11:15])
    return code


def generate_code(
    name: str,
    surname: str,
    sex: Sex | str,
    nation: NationRecord | None,
    city: CityRecord | None,
    birth_date: date,
) -> str:
    """Generate the code with the given data.

    Args:
        name: Given name, ASCII letters (spaces and apostrophes are ignored).
        surname: Family name, same rules as `name`.
        sex: Sex.MALE / Sex.FEMALE, or "M" / "F".
        nation: Birth nation. Italy carries the sentinel code "0000".
        city: Birth city, only used when the nation is the sentinel.
        birth_date: A valid calendar date.

    Returns:
        The 16-character code.

    Raises:
        InvalidInputError: If the person data cannot be encoded.
        LookupNotFoundError: If the nation is missing, or the city is
            missing for someone born in Italy.
    """
    if nation is None:
        raise LookupNotFoundError("nation")

    try:
        person = PersonInput(
            name=name,
            surname=surname,
            sex=sex,
            birth_date=birth_date,
            nation=nation,
            city=city,
        )
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid person data: {exc}") from exc

    return generate_code_for(person)
