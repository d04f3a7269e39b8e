"""Pydantic schemas for the code generator.

Immutable value objects: no DB dependencies. ORM rows are turned into
records via `Nation.to_record()` / `City.to_record()`.
"""

from __future__ import annotations

import re
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from codicefiscale.models.enums import Sex

# Separators allowed inside a name ("De Luca", "D'Angelo"), dropped before encoding
_SEPARATORS = re.compile(r"[\s']+")

_LOCATION_CODE_PATTERN = r"^[A-Z0-9]{4}$"


# ---------------------------------------------------------------------------
# Location records
# ---------------------------------------------------------------------------


class LocationRecord(BaseModel):
    """A birth place with its Belfiore code."""

    model_config = ConfigDict(frozen=True)

    name: str
    code: str = Field(pattern=_LOCATION_CODE_PATTERN)  # e.g. "H501", "Z404"


class NationRecord(LocationRecord):
    """A nation. Italy carries the sentinel code "0000"."""


class CityRecord(LocationRecord):
    """An Italian municipality."""


# ---------------------------------------------------------------------------
# Person
# ---------------------------------------------------------------------------


class PersonInput(BaseModel):
    """Everything the code is derived from."""

    model_config = ConfigDict(frozen=True)

    name: str
    surname: str
    sex: Sex
    birth_date: date
    nation: NationRecord
    city: CityRecord | None = None  # irrelevant unless the nation is the sentinel

    @field_validator("name", "surname")
    @classmethod
    def validate_letters(cls, v: str) -> str:
        """Require ASCII letters only, once separators are dropped."""
        if not v.isascii():
            msg = f"{v!r} must be in ASCII format"
            raise ValueError(msg)
        letters = _SEPARATORS.sub("", v)
        if not letters:
            msg = "must contain at least one letter"
            raise ValueError(msg)
        if not letters.isalpha():
            msg = f"{v!r} must contain only letters"
            raise ValueError(msg)
        return letters
