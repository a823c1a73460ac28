"""RFC 5870 ``geo`` URI grammar: parser engine and its building blocks."""

from geouri.rfc5870.errors import ErrorCode, GeoUriError
from geouri.rfc5870.parser import (
    advance_geo_uri,
    like_geo_uri,
    loads,
    parse_geo_uri,
)
from geouri.rfc5870.types import (
    DEFAULT_PARSE_POLICY,
    STRICT_PARSE_POLICY,
    ParsePolicy,
    ParseResult,
    ParseState,
)

__all__ = [
    "DEFAULT_PARSE_POLICY",
    "STRICT_PARSE_POLICY",
    "ErrorCode",
    "GeoUriError",
    "ParsePolicy",
    "ParseResult",
    "ParseState",
    "advance_geo_uri",
    "like_geo_uri",
    "loads",
    "parse_geo_uri",
]
