"""Tests for the control character.

Tests cover:
- Known published codes
- 0-based index parity (index 0 uses the odd-position table)
- Table contents per Decreto MEF 12/03/1974
- Validation of finished codes
"""

from __future__ import annotations

import pytest

from codicefiscale.encoders.checksum import compute_control_character, validate_control_character
from codicefiscale.encoders.tables import ALPHABET, EVEN_VALUES, ODD_VALUES


class TestComputeControlCharacter:
    """Test the check letter over 15-character payloads."""

    def test_female_milano(self) -> None:
        # Maria Rossi, born 12 June 1985 in Milano (F205)
        assert compute_control_character("RSSMRA85H52F205") == "C"

    def test_male_roma(self) -> None:
        # Marco Bianchi, born 15 March 1990 in Roma (H501)
        assert compute_control_character("BNCMRC90C15H501") == "W"

    def test_mario_rossi_1980(self) -> None:
        assert compute_control_character("RSSMRA80A01H501") == "U"

    def test_lowercase_payload_uppercased(self) -> None:
        assert compute_control_character("rssmra85h52f205") == "C"

    def test_index_zero_uses_odd_table(self) -> None:
        """'B' is worth 0 at odd positions and 1 at even ones."""
        assert compute_control_character("B") == ALPHABET[ODD_VALUES["B"]] == "A"
        assert compute_control_character("AB") == ALPHABET[ODD_VALUES["A"] + EVEN_VALUES["B"]] == "C"

    def test_result_is_letter(self) -> None:
        assert compute_control_character("ZZZZZZ99Z99Z999") in ALPHABET


class TestTables:
    """The tables are legal data: spot-check them against the decree."""

    def test_odd_table_is_complete(self) -> None:
        assert set(ODD_VALUES) == set(ALPHABET) | set("0123456789")

    def test_odd_table_values(self) -> None:
        letters = [ODD_VALUES[c] for c in ALPHABET]
        assert letters == [
            1, 0, 5, 7, 9, 13, 15, 17, 19, 21, 2, 4, 18,
            20, 11, 3, 6, 8, 12, 14, 16, 10, 22, 25, 24, 23,
        ]
        assert [ODD_VALUES[d] for d in "0123456789"] == [1, 0, 5, 7, 9, 13, 15, 17, 19, 21]

    def test_even_table_values(self) -> None:
        assert [EVEN_VALUES[c] for c in ALPHABET] == list(range(26))
        assert [EVEN_VALUES[d] for d in "0123456789"] == list(range(10))


class TestValidateControlCharacter:
    @pytest.mark.parametrize("code", ["RSSMRA85H52F205C", "BNCMRC90C15H501W", "rssmra85h52f205c"])
    def test_valid(self, code: str) -> None:
        assert validate_control_character(code) is True

    def test_wrong_check_letter(self) -> None:
        assert validate_control_character("RSSMRA85H52F205A") is False

    def test_too_short(self) -> None:
        assert validate_control_character("RSSMRA") is False

    def test_invalid_characters(self) -> None:
        assert validate_control_character("RSSMRA85H52F20!C") is False
