"""Percent-encoding of parameter values.

Parameter values may carry any byte as a ``pct-encoded`` escape:

    pct-encoded   = "%" HEXDIG HEXDIG

Example:
    this%2dthat
        ^^^
        0x2D = "-"  ->  "this-that"

Hex digits are accepted in either case. The encoder emits uppercase hex,
the form RFC 3986 recommends for producers.
"""

from geouri.rfc5870.chars import is_hex_digit, is_param_character

_ESCAPE_LENGTH = 3


def decode_percent_escape(text: str, position: int) -> tuple[int, int] | None:
    """Decode the ``%XX`` escape starting at ``position``.

    Exactly three characters are consumed: the ``%`` and two hex digits.

    Args:
        text: The text being scanned
        position: Index of the expected ``%``

    Returns:
        A tuple of (byte_value, next_position), or None if:
        - ``position`` is at or beyond the end of ``text``
        - The character at ``position`` is not ``%``
        - Fewer than two hex digits follow the ``%``

    Example:
        >>> decode_percent_escape("%2dx", 0)
        (45, 3)
        >>> decode_percent_escape("%2", 0)
        None
    """
    end = position + _ESCAPE_LENGTH
    if end > len(text) or text[position] != "%":
        return None

    high, low = text[position + 1], text[position + 2]
    if not (is_hex_digit(high) and is_hex_digit(low)):
        return None

    return 16 * int(high, 16) + int(low, 16), end


def percent_encode(value: str) -> str:
    """Escape every character of ``value`` that is not a literal ``paramchar``.

    Characters outside ``p-unreserved / unreserved`` are encoded as UTF-8
    and each byte is written as ``%XX``.

    Example:
        >>> percent_encode("a b;c")
        'a%20b%3Bc'
    """
    encoded: list[str] = []
    for character in value:
        if is_param_character(character):
            encoded.append(character)
            continue
        encoded.extend(f"%{byte:02X}" for byte in character.encode("utf-8"))
    return "".join(encoded)
