"""Character classes of the RFC 5870 grammar.

Every token of a geo URI is built from a handful of ASCII character classes.
These predicates classify a single character and never fail: any character
outside the ASCII ranges below simply belongs to no class.

Grammar (RFC 5870, section 3.3):
    alphanum      = ALPHA / DIGIT
    unreserved    = alphanum / mark
    mark          = "-" / "_" / "." / "!" / "~" / "*" / "'" / "(" / ")"
    p-unreserved  = "[" / "]" / ":" / "&" / "+" / "$"
    labeltext     = 1*( alphanum / "-" )
"""

MARK_CHARACTERS = frozenset("-_.!~*'()")
P_UNRESERVED_CHARACTERS = frozenset("[]:&+$")

_HEX_LETTERS = frozenset("abcdefABCDEF")


def is_digit(character: str) -> bool:
    """Return True for the decimal digits ``0``-``9``.

    ``str.isdigit`` is not used because it accepts non-ASCII digits
    such as ``"٣"`` which the grammar does not.
    """
    return "0" <= character <= "9"


def is_alpha(character: str) -> bool:
    """Return True for the ASCII letters ``A``-``Z`` and ``a``-``z``."""
    return "A" <= character <= "Z" or "a" <= character <= "z"


def is_alphanumeric(character: str) -> bool:
    return is_alpha(character) or is_digit(character)


def is_hex_digit(character: str) -> bool:
    """Return True for ``0``-``9``, ``a``-``f`` and ``A``-``F``."""
    return is_digit(character) or character in _HEX_LETTERS


def is_mark(character: str) -> bool:
    return character in MARK_CHARACTERS


def is_p_unreserved(character: str) -> bool:
    return character in P_UNRESERVED_CHARACTERS


def is_unreserved(character: str) -> bool:
    """Return True for ``alphanum / mark`` characters."""
    return is_alphanumeric(character) or is_mark(character)


def is_label_character(character: str) -> bool:
    """Return True for characters allowed in ``labeltext``.

    Label text names the CRS and the parameters: letters, digits and
    the hyphen.
    """
    return character == "-" or is_alphanumeric(character)


def is_param_character(character: str) -> bool:
    """Return True for literal (not percent-encoded) ``paramchar`` characters."""
    return is_p_unreserved(character) or is_unreserved(character)
