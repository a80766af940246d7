"""Numeric parsing and display formatting for the calculator display."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

from .config import (
    DISPLAY_PRECISION,
    EXPONENT_TRAILING_ZEROS_REGEX,
    NUMERIC_PREFIX_REGEX,
    SCIENTIFIC_DIGITS,
    SCIENTIFIC_LOWER_BOUND,
    SCIENTIFIC_UPPER_BOUND,
)


def parse_operand(text: str) -> float:
    """Parse the leading decimal number of a display string.

    Trailing garbage is ignored ("5." and "12abc" parse), "Infinity" and
    "-Infinity" read back as infinities, and text without a numeric prefix
    (".", "-", "") yields NaN rather than raising.

    Args:
        text: Display buffer contents

    Returns:
        Parsed value as a float
    """
    match = NUMERIC_PREFIX_REGEX.match(text)
    if match is None:
        return math.nan
    return float(match.group(0))


def _format_non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def number_to_string(value: float) -> str:
    """Render a float as the shortest string that round-trips to it.

    Integral values carry no ".0", positional notation is used while the
    decimal point position n satisfies -6 < n <= 21, and scientific notation
    ("1.5e+25", "1e-7") beyond that.

    Args:
        value: Number to render

    Returns:
        Display string
    """
    if not math.isfinite(value):
        return _format_non_finite(value)
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # position of the decimal point relative to the digits
    prefix = "-" if sign else ""

    if k <= n <= 21:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * (-n) + digits

    e = n - 1
    mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
    return f"{prefix}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def _round_significant(value: float, digits: int) -> Decimal:
    # Exact binary value, ties away from zero
    context = Context(prec=digits, rounding=ROUND_HALF_UP)
    return context.plus(Decimal(value))


def format_result(result: float) -> str:
    """Format a calculation result for the display.

    Very large or very small non-zero magnitudes use scientific notation with
    trailing mantissa zeros removed (1.000000e-12 -> 1e-12). Everything else is
    rounded to DISPLAY_PRECISION significant digits, which hides binary noise
    such as 0.1 + 0.2 = 0.30000000000000004.

    Rounding works on the exact binary value of the result and resolves ties
    upward in magnitude, so 1000000000.125 shows as 1000000000.13.

    Args:
        result: Raw numeric result

    Returns:
        Formatted string representation of the result
    """
    if not math.isfinite(result):
        return _format_non_finite(result)

    magnitude = abs(result)
    if magnitude > SCIENTIFIC_UPPER_BOUND or (
        magnitude < SCIENTIFIC_LOWER_BOUND and result != 0
    ):
        rounded = _round_significant(result, SCIENTIFIC_DIGITS + 1)
        text = f"{rounded:.{SCIENTIFIC_DIGITS}e}"
        return EXPONENT_TRAILING_ZEROS_REGEX.sub("e", text, count=1)

    rounded = _round_significant(result, DISPLAY_PRECISION)
    return number_to_string(float(rounded))
