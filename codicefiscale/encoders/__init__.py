"""Deterministic codice fiscale encoders: names, dates, checksum, homocodic."""

from codicefiscale.encoders.checksum import compute_control_character, validate_control_character
from codicefiscale.encoders.generator import generate_code, generate_code_for
from codicefiscale.encoders.homocodic import generate_homocodic_from_code

__all__ = [
    "compute_control_character",
    "generate_code",
    "generate_code_for",
    "generate_homocodic_from_code",
    "validate_control_character",
]
