"""Tests for locale-independent number lexing and formatting."""

import locale

import pytest

from geouri.rfc5870.errors import ErrorCode, GeoUriError
from geouri.rfc5870.numbers import format_number, lex_number


class TestLexNumber:
    """Tests for lex_number function."""

    def test_empty(self):
        assert lex_number("", 0, signed=True) is None

    def test_integer(self):
        assert lex_number("123", 0, signed=True) == (123.0, 3)

    def test_fraction(self):
        assert lex_number("123.456", 0, signed=True) == (123.456, 7)

    def test_negative_in_signed_context(self):
        assert lex_number("-16.3695,183", 0, signed=True) == (-16.3695, 8)

    def test_negative_in_unsigned_context(self):
        assert lex_number("-5", 0, signed=False) is None

    def test_sign_without_digits(self):
        assert lex_number("-", 0, signed=True) is None
        assert lex_number("-.5", 0, signed=True) is None

    def test_decimal_point_without_fraction(self):
        assert lex_number("123.", 0, signed=True) is None
        assert lex_number("123.x", 0, signed=True) is None

    def test_decimal_point_without_integral_part(self):
        assert lex_number(".456", 0, signed=True) is None

    def test_plus_sign_rejected(self):
        assert lex_number("+5", 0, signed=True) is None

    def test_exponent_not_consumed(self):
        assert lex_number("1e5", 0, signed=True) == (1.0, 1)

    def test_stops_at_delimiter(self):
        assert lex_number("48.2010,16.3695", 0, signed=True) == (48.201, 7)

    def test_starts_at_position(self):
        assert lex_number("u=6.500;", 2, signed=False) == (6.5, 7)

    def test_overflow_is_bad_number(self):
        with pytest.raises(GeoUriError) as exc_info:
            lex_number("1" * 400, 0, signed=True)
        assert exc_info.value.code is ErrorCode.BAD_NUMBER
        assert exc_info.value.position == 0


class TestFormatNumber:
    """Tests for format_number function."""

    def test_integral_value_has_no_fraction(self):
        assert format_number(66.0) == "66"
        assert format_number(100.0) == "100"

    def test_fraction(self):
        assert format_number(6.5) == "6.5"
        assert format_number(-16.3695) == "-16.3695"

    def test_small_value_without_exponent(self):
        assert format_number(1e-05) == "0.00001"

    def test_large_value_without_exponent(self):
        assert format_number(1e16) == "10000000000000000"

    def test_round_trips_through_lexer(self):
        for value in (48.198634, 0.1, 1 / 3, -0.000123, 123456.789):
            text = format_number(value)
            assert lex_number(text, 0, signed=True) == (value, len(text))

    def test_int_accepted(self):
        assert format_number(30) == "30"

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(GeoUriError) as exc_info:
            format_number(value)
        assert exc_info.value.code is ErrorCode.BAD_NUMBER

    def test_ignores_host_locale(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(
            locale, "localeconv", lambda: {"decimal_point": ",", "thousands_sep": "."}
        )
        assert format_number(6.5) == "6.5"
        assert lex_number("6.5", 0, signed=False) == (6.5, 3)
