"""Tests for homocodic variants.

Tests cover:
- Right-to-left digit substitution with a budget
- Letters never consume budget
- Depth 0 is a no-op, large depths saturate
- Control character recomputed
- Malformed input codes and negative depths rejected
"""

from __future__ import annotations

import pytest

from codicefiscale.encoders.checksum import validate_control_character
from codicefiscale.encoders.homocodic import generate_homocodic_from_code, substitute_digits
from codicefiscale.errors import InvalidInputError, MalformedCodeError

# Mario Rossi, male, 25 April 1980, Roma
CODE = "RSSMRA80D25H501P"


class TestSubstituteDigits:
    def test_rightmost_digit_first(self) -> None:
        assert substitute_digits("RSSMRA80D25H501", 1) == "RSSMRA80D25H50M"

    def test_letters_skipped(self) -> None:
        """The H at index 11 sits between digits and is never touched."""
        assert substitute_digits("RSSMRA80D25H501", 4) == "RSSMRA80D2RHRLM"

    def test_every_digit_mapped(self) -> None:
        assert substitute_digits("0123456789", 10) == "LMNPQRSTUV"

    def test_zero_depth(self) -> None:
        assert substitute_digits("RSSMRA80D25H501", 0) == "RSSMRA80D25H501"

    def test_no_digits(self) -> None:
        assert substitute_digits("ABCDEF", 3) == "ABCDEF"

    def test_negative_depth(self) -> None:
        with pytest.raises(InvalidInputError):
            substitute_digits("RSSMRA80D25H501", -1)


class TestGenerateHomocodic:
    def test_depth_zero_is_identity(self) -> None:
        assert generate_homocodic_from_code(CODE, 0) == CODE

    def test_depth_one(self) -> None:
        assert generate_homocodic_from_code(CODE, 1) == "RSSMRA80D25H50MH"

    def test_depth_two(self) -> None:
        assert generate_homocodic_from_code(CODE, 2) == "RSSMRA80D25H5LMS"

    def test_depth_three(self) -> None:
        assert generate_homocodic_from_code(CODE, 3) == "RSSMRA80D25HRLMN"

    def test_all_digits(self) -> None:
        assert generate_homocodic_from_code(CODE, 7) == "RSSMRAULDNRHRLMB"

    def test_saturation(self) -> None:
        """The payload has 7 digits: any larger depth gives the same code."""
        saturated = generate_homocodic_from_code(CODE, 7)
        assert generate_homocodic_from_code(CODE, 8) == saturated
        assert generate_homocodic_from_code(CODE, 100) == saturated

    def test_result_has_valid_checksum(self) -> None:
        for depth in range(8):
            result = generate_homocodic_from_code(CODE, depth)
            assert len(result) == 16
            assert validate_control_character(result) is True

    def test_old_control_character_ignored(self) -> None:
        """Only index 15 is dropped; a wrong check letter is simply replaced."""
        assert generate_homocodic_from_code("RSSMRA80D25H501A", 1) == "RSSMRA80D25H50MH"

    def test_homocodic_of_homocodic(self) -> None:
        """Already substituted letters do not use budget on a second pass."""
        once = generate_homocodic_from_code(CODE, 1)
        assert generate_homocodic_from_code(once, 1) == generate_homocodic_from_code(CODE, 2)

    @pytest.mark.parametrize(
        "code",
        [
            "RSSMRA80D25H501",     # 15 chars
            "RSSMRA80D25H501PX",   # 17 chars
            "RSSMRA80D25H501P\n",  # trailing newline
            "rssmra80d25h501p",    # lowercase
            "RSSMRA80D25H50!P",    # punctuation
            "",
        ],
    )
    def test_malformed_code(self, code: str) -> None:
        with pytest.raises(MalformedCodeError) as exc_info:
            generate_homocodic_from_code(code, 1)
        assert exc_info.value.code == code

    def test_negative_depth(self) -> None:
        with pytest.raises(InvalidInputError, match="non-negative"):
            generate_homocodic_from_code(CODE, -1)
