"""Tests for ISO 8601 date parsing and formatting."""

from __future__ import annotations

import logging

import pytest

from isocal import MAX_YEAR, MIN_YEAR, Date, format_date, parse_date
from isocal.errors import (
    IllegalFieldValueError,
    InvalidDateError,
    MissingValueError,
    ParseError,
)


class TestFormatDate:
    """Tests for format_date()."""

    def test_four_digit_years(self) -> None:
        assert format_date(Date(2008, 7, 5)) == "2008-07-05"
        assert format_date(Date(999, 12, 31)) == "0999-12-31"
        assert format_date(Date(0, 1, 1)) == "0000-01-01"
        assert format_date(Date(9999, 12, 31)) == "9999-12-31"

    def test_long_years_get_plus_sign(self) -> None:
        assert format_date(Date(10000, 1, 1)) == "+10000-01-01"
        assert format_date(Date(MAX_YEAR, 12, 31)) == "+2147483647-12-31"

    def test_negative_years(self) -> None:
        assert format_date(Date(-1, 1, 2)) == "-0001-01-02"
        assert format_date(Date(-9999, 1, 1)) == "-9999-01-01"
        assert format_date(Date(-12345678, 1, 1)) == "-12345678-01-01"
        assert format_date(Date(MIN_YEAR, 1, 1)) == "-2147483647-01-01"

    def test_none(self) -> None:
        with pytest.raises(MissingValueError):
            format_date(None)  # type: ignore[arg-type]


class TestParseDate:
    """Tests for parse_date()."""

    def test_basic(self) -> None:
        assert parse_date("2008-07-05") == Date(2008, 7, 5)
        assert parse_date("0000-01-01") == Date(0, 1, 1)

    def test_signed_years(self) -> None:
        assert parse_date("+10000-01-01") == Date(10000, 1, 1)
        assert parse_date("-0001-01-02") == Date(-1, 1, 2)
        assert parse_date("-12345678-01-01") == Date(-12345678, 1, 1)

    def test_long_years_without_leading_zeros(self) -> None:
        """Test that only the text format_date would emit is accepted for long years."""
        for text in ("+01000-01-01", "-00001-01-01", "+0000010000-01-01"):
            with pytest.raises(ParseError, match="leading zeros"):
                parse_date(text)
        assert format_date(parse_date("-0001-01-01")) == "-0001-01-01"
        assert format_date(parse_date("0999-01-01")) == "0999-01-01"

    def test_year_limits(self) -> None:
        assert parse_date("+2147483647-12-31") == Date.MAX
        assert parse_date("-2147483647-01-01") == Date.MIN

    def test_year_beyond_limits(self) -> None:
        """Test that an over-long year is a range failure, not a syntax failure."""
        with pytest.raises(IllegalFieldValueError):
            parse_date("+2147483648-01-01")

    @pytest.mark.parametrize(
        "text",
        [
            "2008/07/05",
            "10000-01-01",
            "2008-1-1",
            "2008--01",
            "ABCD-02-01",
            "2008-AB-01",
            "2008-02-AB",
            "-0000-02-01",
            "+2008-02-01",
            "+01000-01-01",
            "+010000-01-01",
            "-00001-01-01",
            "2008-02-01Z",
            "2008-02-01+01:00",
            "2008-02-01+01:00[Europe/Paris]",
            "2008-02-01T00:00",
            " 2008-02-01",
            "",
        ],
    )
    def test_invalid_syntax(self, text: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_date(text)
        assert exc_info.value.text == text

    def test_non_ascii_digits(self) -> None:
        """Test that only ASCII digits are accepted."""
        with pytest.raises(ParseError):
            parse_date("٢٠٠٨-01-01")

    def test_error_position(self) -> None:
        """Test that the error index points at the first offending character."""
        cases = {
            "2008/07/05": 4,
            "2008-1-1": 6,
            "2008-02-01Z": 10,
            "ABCD-02-01": 0,
            "2008-02-AB": 8,
            "+010000-01-01": 1,
            "-00001-01-01": 1,
        }
        for text, position in cases.items():
            with pytest.raises(ParseError) as exc_info:
                parse_date(text)
            assert exc_info.value.position == position, text

    def test_field_out_of_range(self) -> None:
        with pytest.raises(IllegalFieldValueError):
            parse_date("2008-06-32")
        with pytest.raises(IllegalFieldValueError):
            parse_date("2008-13-01")
        with pytest.raises(IllegalFieldValueError):
            parse_date("2008-00-01")

    def test_day_missing_from_month(self) -> None:
        with pytest.raises(InvalidDateError):
            parse_date("2008-06-31")
        with pytest.raises(InvalidDateError):
            parse_date("2007-02-29")

    def test_none(self) -> None:
        with pytest.raises(MissingValueError):
            parse_date(None)  # type: ignore[arg-type]

    def test_not_a_string(self) -> None:
        with pytest.raises(TypeError):
            parse_date(20080705)  # type: ignore[arg-type]

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="isocal.format.iso8601"):
            with pytest.raises(ParseError):
                parse_date("2008-1-1")
        assert "rejected date text" in caplog.text


class TestRoundTrip:
    """Tests that formatting and parsing agree."""

    @pytest.mark.parametrize(
        "date",
        [
            Date(2008, 7, 5),
            Date(2008, 2, 29),
            Date(0, 1, 1),
            Date(-1, 12, 31),
            Date(10000, 1, 1),
            Date.MIN,
            Date.MAX,
        ],
        ids=str,
    )
    def test_round_trip(self, date: Date) -> None:
        assert parse_date(format_date(date)) == date
        assert Date.parse(str(date)) == date
