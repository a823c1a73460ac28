"""Recursive-descent parser for ``geo`` URIs (RFC 5870).

Grammar:
    geo-URI       = geo-scheme ":" geo-path
    geo-scheme    = "geo"
    geo-path      = coordinates p
    coordinates   = coord-a "," coord-b [ "," coord-c ]
    p             = [ crsp ] [ uncp ] *parameter
    crsp          = ";crs=" crslabel
    crslabel      = "wgs84" / labeltext
    uncp          = ";u=" uval
    uval          = pnum
    parameter     = ";" pname [ "=" pvalue ]
    pname         = labeltext
    pvalue        = *paramchar
    paramchar     = p-unreserved / unreserved / pct-encoded

Example:
    geo:48.198634,16.371648,183;crs=wgs84;u=40;foo=this%2dthat;bar
        |         |         |   |         |    |                |
        |         |         |   |         |    |                +-- parameter without value
        |         |         |   |         |    +-- parameter, value percent-decoded
        |         |         |   |         +-- uncertainty (meters, unsigned)
        |         |         |   +-- coordinate reference system
        |         |         +-- altitude (optional)
        |         +-- longitude
        +-- latitude

Every ``advance_*`` production takes the text and a start index and returns
the index just past what it matched, or None with nothing consumed. No
production ever has to undo a sibling's consumption. Extracted values are
written into the ``GeoUri`` passed in, and only once the production has
matched in full.

Scheme, ``crs`` and ``u`` are matched case-insensitively. Cross-clause rules
the grammar cannot express (``crs`` and ``u`` at most once, ``crs`` before
``u``) are checked with a ``ParseState`` as each generic parameter completes
and raise ``GeoUriError``; the public entry points turn that into a failed
``ParseResult``.
"""

import logging

from geouri.rfc5870.chars import is_label_character, is_param_character
from geouri.rfc5870.errors import ErrorCode, GeoUriError
from geouri.rfc5870.numbers import lex_number
from geouri.rfc5870.percent import decode_percent_escape
from geouri.rfc5870.types import (
    DEFAULT_PARSE_POLICY,
    ParsePolicy,
    ParseResult,
    ParseState,
)
from geouri.uri.types import WGS84, GeoUri

__all__ = [
    "advance_coordinates",
    "advance_crs_clause",
    "advance_geo_uri",
    "advance_label_text",
    "advance_literal_ignorecase",
    "advance_parameter",
    "advance_parameter_list",
    "advance_parameter_value",
    "advance_scheme",
    "advance_uncertainty_clause",
    "like_geo_uri",
    "loads",
    "parse_geo_uri",
]

logger = logging.getLogger(__name__)

_SCHEME = "geo"
_CRS_PREFIX = ";crs="
_UNCERTAINTY_PREFIX = ";u="
_CRS_NAME = "crs"
_UNCERTAINTY_NAME = "u"


def advance_literal_ignorecase(text: str, position: int, literal: str) -> int | None:
    """Match ``literal`` at ``position`` ignoring ASCII case.

    ``literal`` must be lowercase.
    """
    end = position + len(literal)
    if text[position:end].lower() != literal:
        return None
    return end


def advance_scheme(text: str, position: int) -> int | None:
    """Match the ``geo`` scheme name, case-insensitively."""
    return advance_literal_ignorecase(text, position, _SCHEME)


def advance_coordinates(text: str, position: int, uri: GeoUri) -> int | None:
    """Match ``coord-a "," coord-b [ "," coord-c ]``.

    Latitude and longitude are required. The altitude is optional, but a
    comma after the longitude commits to it: ``"1,2,"`` does not match,
    while ``"1,2"`` and ``"1,2;u=3"`` do.

    Args:
        text: The text being scanned
        position: Index of the first coordinate
        uri: Receives latitude, longitude and, if present, altitude

    Returns:
        Index just past the last coordinate, or None if no match

    Raises:
        GeoUriError: ``BAD_NUMBER`` if a coordinate overflows.
    """
    latitude = lex_number(text, position, signed=True)
    if latitude is None:
        return None
    latitude_value, position = latitude

    if position >= len(text) or text[position] != ",":
        return None

    longitude = lex_number(text, position + 1, signed=True)
    if longitude is None:
        return None
    longitude_value, position = longitude

    altitude_value: float | None = None
    if position < len(text) and text[position] == ",":
        altitude = lex_number(text, position + 1, signed=True)
        if altitude is None:
            return None
        altitude_value, position = altitude

    uri.latitude = latitude_value
    uri.longitude = longitude_value
    uri.altitude = altitude_value
    return position


def advance_label_text(
    text: str,
    position: int,
    policy: ParsePolicy = DEFAULT_PARSE_POLICY,
) -> tuple[str, int] | None:
    """Match ``labeltext = 1*( alphanum / "-" )``.

    Returns:
        A tuple of (label, next_position), or None if the character at
        ``position`` cannot start a label. The label is lowercased when
        ``policy.lowercase_label_text`` is set.

    Example:
        >>> advance_label_text("FOo=this", 0)
        ('foo', 3)
    """
    end = position
    while end < len(text) and is_label_character(text[end]):
        end += 1

    if end == position:
        return None

    label = text[position:end]
    if policy.lowercase_label_text:
        label = label.lower()
    return label, end


def advance_crs_clause(
    text: str,
    position: int,
    uri: GeoUri,
    state: ParseState,
    policy: ParsePolicy = DEFAULT_PARSE_POLICY,
) -> int | None:
    """Match ``";crs=" crslabel``.

    ``wgs84`` is recognized in any case and always stored as "wgs84"; any
    other label follows ``policy``. A label merely starting with "wgs84"
    (e.g. "wgs84x") is an ordinary label.
    """
    label_start = advance_literal_ignorecase(text, position, _CRS_PREFIX)
    if label_start is None:
        return None

    label = advance_label_text(text, label_start, policy)
    if label is None:
        return None
    crs, position = label

    if crs.lower() == WGS84:
        crs = WGS84

    uri.crs = crs
    state.crs_seen = True
    return position


def advance_uncertainty_clause(
    text: str,
    position: int,
    uri: GeoUri,
    state: ParseState,
) -> int | None:
    """Match ``";u=" pnum``; the value is unsigned.

    Raises:
        GeoUriError: ``BAD_NUMBER`` if the value overflows.
    """
    value_start = advance_literal_ignorecase(text, position, _UNCERTAINTY_PREFIX)
    if value_start is None:
        return None

    number = lex_number(text, value_start, signed=False)
    if number is None:
        return None
    uri.uncertainty, position = number

    state.uncertainty_seen = True
    return position


def _decode_value(raw: bytearray) -> str:
    # Invalid UTF-8 falls back to one code point per byte.
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def advance_parameter_value(text: str, position: int) -> tuple[str, int] | None:
    """Match ``*paramchar`` and percent-decode it.

    Consumes literal ``p-unreserved`` / ``unreserved`` characters and
    ``%XX`` escapes until any other character or the end of ``text``. An
    empty value matches.

    Returns:
        A tuple of (decoded_value, next_position), or None if a ``%`` is not
        followed by two hex digits.

    Example:
        >>> advance_parameter_value("this%2dthat;bar", 0)
        ('this-that', 11)
    """
    raw = bytearray()
    while position < len(text):
        character = text[position]
        if is_param_character(character):
            raw.append(ord(character))
            position += 1
        elif character == "%":
            escape = decode_percent_escape(text, position)
            if escape is None:
                return None
            byte, position = escape
            raw.append(byte)
        else:
            break
    return _decode_value(raw), position


def _check_clause_order(name: str, state: ParseState, position: int) -> None:
    """Reject a generic ``crs`` or ``u`` parameter that breaks clause rules.

    Raises:
        GeoUriError: ``DUPLICATE_CRS``, ``UNORDERED_CRS`` or
            ``DUPLICATE_UNCERTAINTY``.
    """
    folded = name.lower()
    if folded == _CRS_NAME:
        if state.crs_seen:
            raise GeoUriError(ErrorCode.DUPLICATE_CRS, position)
        if state.uncertainty_seen:
            raise GeoUriError(ErrorCode.UNORDERED_CRS, position)
    elif folded == _UNCERTAINTY_NAME and state.uncertainty_seen:
        raise GeoUriError(ErrorCode.DUPLICATE_UNCERTAINTY, position)


def advance_parameter(
    text: str,
    position: int,
    uri: GeoUri,
    state: ParseState,
    policy: ParsePolicy = DEFAULT_PARSE_POLICY,
) -> int | None:
    """Match ``";" pname [ "=" pvalue ]`` and store the parameter.

    A parameter without ``=value`` is stored with value "".

    Raises:
        GeoUriError: If the parameter is a second ``crs``, a ``crs`` after
            ``u``, or a second ``u``.
    """
    if position >= len(text) or text[position] != ";":
        return None

    label = advance_label_text(text, position + 1, policy)
    if label is None:
        return None
    name, end = label

    value = ""
    if end < len(text) and text[end] == "=":
        matched = advance_parameter_value(text, end + 1)
        if matched is None:
            return None
        value, end = matched

    _check_clause_order(name, state, position)
    uri.insert(name, value)
    return end


def advance_parameter_list(
    text: str,
    position: int,
    uri: GeoUri,
    state: ParseState,
    policy: ParsePolicy = DEFAULT_PARSE_POLICY,
) -> int:
    """Match ``*parameter``; always succeeds, possibly consuming nothing."""
    while True:
        end = advance_parameter(text, position, uri, state, policy)
        if end is None:
            return position
        position = end


def _advance_geo_uri(
    text: str,
    position: int,
    state: ParseState,
    policy: ParsePolicy,
) -> tuple[GeoUri, int] | None:
    """Match ``geo-URI`` and build the ``GeoUri`` it describes."""
    position = advance_scheme(text, position)
    if position is None or position >= len(text) or text[position] != ":":
        return None

    uri = GeoUri()
    position = advance_coordinates(text, position + 1, uri)
    if position is None:
        return None

    end = advance_crs_clause(text, position, uri, state, policy)
    if end is not None:
        position = end

    end = advance_uncertainty_clause(text, position, uri, state)
    if end is not None:
        position = end

    position = advance_parameter_list(text, position, uri, state, policy)
    return uri, position


def advance_geo_uri(
    text: str,
    position: int = 0,
    policy: ParsePolicy = DEFAULT_PARSE_POLICY,
) -> ParseResult:
    """Parse the longest geo URI starting at ``position``.

    Text after the URI is left unconsumed; compare ``result.position`` with
    ``len(text)`` to see how far the parse got. Use ``parse_geo_uri`` when
    the whole text must be a URI.

    Args:
        text: Text containing a geo URI at ``position``
        position: Start index
        policy: Label text normalization options

    Returns:
        ``ParseResult`` whose ``position`` is just past the URI on success,
        or equal to the start ``position`` on failure.

    Example:
        >>> result = advance_geo_uri("geo:1,2;u=3 is here")
        >>> result.position
        11
    """
    state = ParseState()
    try:
        matched = _advance_geo_uri(text, position, state, policy)
    except GeoUriError as error:
        logger.debug("Rejected geo URI %r: %s", text, error)
        return ParseResult(
            uri=None,
            position=position,
            error=error.code,
            error_position=error.position,
        )

    if matched is None:
        return ParseResult(
            uri=None,
            position=position,
            error=ErrorCode.NO_MATCH,
            error_position=position,
        )

    uri, end = matched
    return ParseResult(uri=uri, position=end)


def parse_geo_uri(
    text: str,
    policy: ParsePolicy = DEFAULT_PARSE_POLICY,
) -> ParseResult:
    """Parse ``text`` as exactly one geo URI.

    This is the main entry point for parsing. Nothing is stripped: leading
    or trailing whitespace makes the text not a geo URI.

    Args:
        text: Candidate geo URI
        policy: Label text normalization options

    Returns:
        ``ParseResult`` with the ``GeoUri`` on success. On failure ``error``
        says why:
        - ``NO_MATCH`` if the text does not follow the grammar, including
          trailing text after a valid prefix (``error_position`` marks it)
        - ``BAD_NUMBER`` if a number does not convert to a finite float
        - ``DUPLICATE_CRS``, ``DUPLICATE_UNCERTAINTY`` or ``UNORDERED_CRS``
          if ``crs`` / ``u`` repeat or appear out of order

    Example:
        >>> result = parse_geo_uri("geo:66,30;u=6.500;FOo=this%2dthat;Bar")
        >>> result.uri.parameters
        {'foo': 'this-that', 'bar': ''}
        >>> parse_geo_uri("geo:1,2;u=5;u=6").error
        <ErrorCode.DUPLICATE_UNCERTAINTY: 'duplicate uncertainty parameter'>
    """
    result = advance_geo_uri(text, 0, policy)
    if result.ok and result.position != len(text):
        return ParseResult(
            uri=None,
            position=0,
            error=ErrorCode.NO_MATCH,
            error_position=result.position,
        )
    return result


def loads(text: str, policy: ParsePolicy = DEFAULT_PARSE_POLICY) -> GeoUri:
    """Parse ``text`` as one geo URI, raising on failure.

    Raises:
        GeoUriError: With the ``ErrorCode`` and position of the failure.
    """
    return parse_geo_uri(text, policy).unwrap()


def like_geo_uri(text: str) -> bool:
    """Cheaply check whether ``text`` starts like a geo URI.

    Only the scheme and the following ``:`` are checked, so a True result
    does not guarantee that ``parse_geo_uri`` succeeds.

    Example:
        >>> like_geo_uri("GEO:not-a-location")
        True
        >>> like_geo_uri("https://example.com")
        False
    """
    position = advance_scheme(text, 0)
    return position is not None and position < len(text) and text[position] == ":"
