"""Italian fiscal code (codice fiscale) generator.

Computes a person's code from name, surname, sex, birth date and birth
place, plus the homocodic variants used when two people collide.
Birth places come from a nations/cities database built with
`codicefiscale build-database`.
"""

from codicefiscale.encoders import generate_code, generate_homocodic_from_code
from codicefiscale.errors import (
    CodiceFiscaleError,
    InvalidInputError,
    LookupNotFoundError,
    MalformedCodeError,
)
from codicefiscale.models.enums import Sex
from codicefiscale.schemas.person import CityRecord, NationRecord

__all__ = [
    "generate_code",
    "generate_homocodic_from_code",
    "Sex",
    "NationRecord",
    "CityRecord",
    "CodiceFiscaleError",
    "InvalidInputError",
    "LookupNotFoundError",
    "MalformedCodeError",
]
