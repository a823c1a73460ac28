"""Parsing and composing of RFC 5870 ``geo`` URIs."""

from geouri.rfc5870 import (
    DEFAULT_PARSE_POLICY,
    STRICT_PARSE_POLICY,
    ErrorCode,
    GeoUriError,
    ParsePolicy,
    ParseResult,
    advance_geo_uri,
    like_geo_uri,
    loads,
    parse_geo_uri,
)
from geouri.uri import (
    RELAXED_COMPOSER_POLICY,
    STRICT_COMPOSER_POLICY,
    WGS84,
    ComposerPolicy,
    GeoUri,
    compose,
    dumps,
)

__all__ = [
    "DEFAULT_PARSE_POLICY",
    "RELAXED_COMPOSER_POLICY",
    "STRICT_COMPOSER_POLICY",
    "STRICT_PARSE_POLICY",
    "WGS84",
    "ComposerPolicy",
    "ErrorCode",
    "GeoUri",
    "GeoUriError",
    "ParsePolicy",
    "ParseResult",
    "advance_geo_uri",
    "compose",
    "dumps",
    "like_geo_uri",
    "loads",
    "parse_geo_uri",
]
