"""Tests for the year, month, day and birth place fragments.

Tests cover:
- Year: last two digits, 4-digit requirement
- Month letters in calendar order
- Day: +40 offset for females, zero padding
- Location: sentinel nation → city code, foreign nation → nation code
"""

from __future__ import annotations

import pytest

from codicefiscale.encoders.dates import encode_day, encode_month, encode_year, select_location_code
from codicefiscale.errors import InvalidInputError, LookupNotFoundError
from codicefiscale.models.enums import Sex
from codicefiscale.schemas.person import CityRecord, NationRecord

ITALIA = NationRecord(name="Italia", code="0000")
FRANCIA = NationRecord(name="Francia", code="Z110")
ROMA = CityRecord(name="Roma", code="H501")


class TestEncodeYear:
    def test_last_two_digits(self) -> None:
        assert encode_year(1980) == "80"

    def test_leading_zero_kept(self) -> None:
        assert encode_year(2005) == "05"

    def test_string_year(self) -> None:
        assert encode_year("1999") == "99"

    @pytest.mark.parametrize("year", [999, 10000, "198", "19a0"])
    def test_not_four_digits(self, year: int | str) -> None:
        with pytest.raises(InvalidInputError, match="4 digits"):
            encode_year(year)


class TestEncodeMonth:
    def test_calendar_order(self) -> None:
        letters = "".join(encode_month(m) for m in range(1, 13))
        assert letters == "ABCDEHLMPRST"

    @pytest.mark.parametrize("month", [0, 13])
    def test_out_of_range(self, month: int) -> None:
        with pytest.raises(InvalidInputError):
            encode_month(month)


class TestEncodeDay:
    def test_male_zero_padded(self) -> None:
        assert encode_day(5, Sex.MALE) == "05"

    def test_male_two_digits(self) -> None:
        assert encode_day(25, Sex.MALE) == "25"

    def test_female_offset(self) -> None:
        assert encode_day(5, Sex.FEMALE) == "45"
        assert encode_day(31, Sex.FEMALE) == "71"

    def test_no_upper_bound(self) -> None:
        """Out-of-calendar days are formatted, not rejected."""
        assert encode_day(65, Sex.FEMALE) == "105"


class TestSelectLocationCode:
    def test_sentinel_uses_city(self) -> None:
        assert select_location_code(ITALIA, ROMA) == "H501"

    def test_foreign_nation_uses_nation(self) -> None:
        assert select_location_code(FRANCIA, ROMA) == "Z110"

    def test_foreign_nation_without_city(self) -> None:
        assert select_location_code(FRANCIA, None) == "Z110"

    def test_missing_nation(self) -> None:
        with pytest.raises(LookupNotFoundError, match="Nation not found"):
            select_location_code(None, ROMA)

    def test_sentinel_without_city(self) -> None:
        with pytest.raises(LookupNotFoundError) as exc_info:
            select_location_code(ITALIA, None)
        assert exc_info.value.kind == "city"
