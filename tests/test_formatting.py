"""Tests for display formatting and operand parsing."""

import math

import pytest

from calcengine_pkg.formatting import format_result, number_to_string, parse_operand


class TestFormatResult:
    """Scientific notation for extreme magnitudes, 12 significant digits otherwise."""

    def test_very_large_number(self):
        assert format_result(999999999 * 999999999) == "1e+18"

    def test_very_small_number(self):
        assert format_result(0.000001 / 1000000) == "1e-12"

    def test_floating_point_noise_removed(self):
        assert format_result(0.1 + 0.2) == "0.3"

    def test_integral_result_has_no_decimal_point(self):
        assert format_result(5.0) == "5"
        assert format_result(-12.0) == "-12"

    def test_zero(self):
        assert format_result(0.0) == "0"
        assert format_result(-0.0) == "0"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1.5e-7, "1.5e-7"),
            (-5e-7, "-5e-7"),
            (1.234567e15, "1.234567e+15"),
            (2.5e11, "2.5e+11"),
            (1e100, "1e+100"),
            (123456789012.0, "1.234568e+11"),
        ],
    )
    def test_scientific_notation(self, value, expected):
        assert format_result(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1e10, "10000000000"),
            (0.000001, "0.000001"),
            (1 / 3, "0.333333333333"),
            (2 / 3, "0.666666666667"),
            (1234.5678, "1234.5678"),
            (0.1 * 3, "0.3"),
        ],
    )
    def test_positional_notation(self, value, expected):
        assert format_result(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1000000000.125, "1000000000.13"),
            (-1000000000.125, "-1000000000.13"),
            (12345665.0 * 1000000, "1.234567e+13"),
            (0.5, "0.5"),
        ],
    )
    def test_exact_ties_round_away_from_zero(self, value, expected):
        assert format_result(value) == expected

    def test_non_finite_values(self):
        assert format_result(math.inf) == "Infinity"
        assert format_result(-math.inf) == "-Infinity"
        assert format_result(math.nan) == "NaN"


class TestNumberToString:
    """Shortest round-trip rendering used by the unary operations."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.5, "0.5"),
            (16.0, "16"),
            (100.0, "100"),
            (-2.25, "-2.25"),
            (0.010000000000000002, "0.010000000000000002"),
            (1e20, "100000000000000000000"),
            (1e21, "1e+21"),
            (1.5e25, "1.5e+25"),
            (0.000001, "0.000001"),
            (1e-7, "1e-7"),
            (1.25e-9, "1.25e-9"),
        ],
    )
    def test_rendering(self, value, expected):
        assert number_to_string(value) == expected

    def test_negative_zero(self):
        assert number_to_string(-0.0) == "0"

    def test_non_finite(self):
        assert number_to_string(math.inf) == "Infinity"
        assert number_to_string(math.nan) == "NaN"

    def test_round_trips(self):
        for value in (0.1, 1 / 3, 2**0.5, 123456.789, 9.87e-5):
            assert float(number_to_string(value)) == value


class TestParseOperand:
    """Leading-prefix parsing of display text."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", 0.0),
            ("42", 42.0),
            ("-3.5", -3.5),
            ("5.", 5.0),
            (".25", 0.25),
            ("1e+18", 1e18),
            ("1e-12", 1e-12),
            ("12abc", 12.0),
            ("  7", 7.0),
        ],
    )
    def test_numeric_prefix(self, text, expected):
        assert parse_operand(text) == expected

    @pytest.mark.parametrize("text", ["", ".", "-", "abc"])
    def test_no_numeric_prefix_is_nan(self, text):
        assert math.isnan(parse_operand(text))

    @pytest.mark.parametrize(
        "text, expected",
        [("Infinity", math.inf), ("-Infinity", -math.inf), ("+Infinity", math.inf)],
    )
    def test_infinity(self, text, expected):
        assert parse_operand(text) == expected

    def test_negative_zero(self):
        value = parse_operand("-0")
        assert value == 0
        assert math.copysign(1, value) == -1
