"""Locale-independent numeric lexing and formatting.

Coordinates and the uncertainty value share one decimal literal form:

    num   = [ "-" ] pnum
    pnum  = 1*DIGIT [ "." 1*DIGIT ]

The decimal point is always ``"."``. Python's ``float()`` and ``repr()`` never
consult the host locale, so no locale state is read or modified here.
Exponents, a leading ``"+"``, and digits-less fractions such as ``"5."`` or
``".5"`` are not part of the grammar and are rejected.
"""

import decimal
import math

from geouri.rfc5870.chars import is_digit
from geouri.rfc5870.errors import ErrorCode, GeoUriError


def _skip_digits(text: str, position: int) -> int:
    """Return the index of the first non-digit at or after ``position``."""
    end = len(text)
    while position < end and is_digit(text[position]):
        position += 1
    return position


def lex_number(
    text: str,
    position: int,
    signed: bool,
) -> tuple[float, int] | None:
    """Consume a decimal literal starting at ``position``.

    Args:
        text: The text being scanned
        position: Index where the literal is expected to start
        signed: Whether a leading ``"-"`` is permitted. Latitude, longitude
            and altitude are signed; the uncertainty value is not.

    Returns:
        A tuple of (value, next_position), or None if no literal matches:
        - No digit before the optional decimal point
        - A decimal point not followed by at least one digit
        - A ``"-"`` in unsigned context

    Raises:
        GeoUriError: With ``ErrorCode.BAD_NUMBER`` if the literal matches the
            grammar but does not convert to a finite float (e.g. a run of
            400 digits overflows to infinity).

    Example:
        >>> lex_number("-16.3695,183", 0, signed=True)
        (-16.3695, 8)
        >>> lex_number("123.", 0, signed=True)
        None
    """
    start = position
    if signed and position < len(text) and text[position] == "-":
        position += 1

    integral_end = _skip_digits(text, position)
    if integral_end == position:
        return None
    position = integral_end

    if position < len(text) and text[position] == ".":
        fraction_end = _skip_digits(text, position + 1)
        if fraction_end == position + 1:
            return None
        position = fraction_end

    value = float(text[start:position])
    if not math.isfinite(value):
        raise GeoUriError(ErrorCode.BAD_NUMBER, start)

    return value, position


def format_number(value: float) -> str:
    """Render ``value`` as a grammar-conformant ``num`` literal.

    Uses the shortest representation that round-trips through ``float()``,
    written in fixed-point notation because the grammar has no exponent.
    Integral values drop the fractional part entirely.

    Raises:
        GeoUriError: With ``ErrorCode.BAD_NUMBER`` for NaN and infinities.

    Example:
        >>> format_number(66.0)
        '66'
        >>> format_number(6.5)
        '6.5'
        >>> format_number(1e-05)
        '0.00001'
    """
    if not math.isfinite(value):
        raise GeoUriError(ErrorCode.BAD_NUMBER)

    rendered = format(decimal.Decimal(repr(float(value))), "f")
    if "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")
    return rendered
