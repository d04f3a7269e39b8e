"""Birth date and birth place fragments (positions 7-15 of the code).

  - 00:   year of birth (last 2 digits)
  - C:    month of birth (letter A–T, non-sequential)
  - 00:   day of birth (1–31 male, 41–71 female)
  - D000: birthplace code (codice catastale / Belfiore)
"""

from __future__ import annotations

from codicefiscale.encoders.tables import MONTH_LETTERS, SENTINEL_NATION_CODE
from codicefiscale.errors import InvalidInputError, LookupNotFoundError
from codicefiscale.models.enums import Sex
from codicefiscale.schemas.person import CityRecord, NationRecord

_FEMALE_DAY_OFFSET = 40


def encode_year(year: int | str) -> str:
    """Return the last two digits of a 4-digit year."""
    year_str = str(year)
    if len(year_str) != 4 or not year_str.isdigit():
        msg = f"Year must have exactly 4 digits, got {year_str!r}"
        raise InvalidInputError(msg)
    return year_str[2:]


def encode_month(month: int) -> str:
    """Map a month number (1–12) to its letter."""
    if not 1 <= month <= 12:
        msg = f"Month must be between 1 and 12, got {month}"
        raise InvalidInputError(msg)
    return MONTH_LETTERS[month - 1]


def encode_day(day: int, sex: Sex) -> str:
    """Day of month, +40 for females, zero-padded to 2 digits.

    The day is not range-checked: calendar validity belongs to the caller.
    """
    if sex == Sex.FEMALE:
        day += _FEMALE_DAY_OFFSET
    return f"{day:02d}"


def select_location_code(nation: NationRecord | None, city: CityRecord | None) -> str:
    """Pick the birthplace code: the city's when the nation is the sentinel.

    Raises:
        LookupNotFoundError: If the nation is missing, or if it is the
            sentinel and no city was supplied.
    """
    if nation is None:
        raise LookupNotFoundError("nation")
    if nation.code != SENTINEL_NATION_CODE:
        return nation.code
    if city is None:
        raise LookupNotFoundError("city")
    return city.code
