"""Geo URI value holder and composer."""

from geouri.uri.composer import (
    RELAXED_COMPOSER_POLICY,
    STRICT_COMPOSER_POLICY,
    ComposerPolicy,
    compose,
    dumps,
)
from geouri.uri.types import WGS84, GeoUri

__all__ = [
    "RELAXED_COMPOSER_POLICY",
    "STRICT_COMPOSER_POLICY",
    "WGS84",
    "ComposerPolicy",
    "GeoUri",
    "compose",
    "dumps",
]
