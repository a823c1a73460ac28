"""Geo URI composer.

Renders a ``GeoUri`` back into text, clauses in the order the grammar
requires:

    geo:<lat>,<lon>[,<alt>][;crs=<label>][;u=<uval>][;<name>[=<value>]]...

Numbers are written in fixed-point with "." as decimal point, independent
of the host locale, so composed text always parses back.

Parameter values are written as stored unless the policy asks for
percent-encoding. Values holding characters outside ``paramchar`` (space,
";", "=", "%", non-ASCII...) only round-trip with
``percent_encode_values=True``.
"""

from dataclasses import dataclass

from geouri.rfc5870.numbers import format_number
from geouri.rfc5870.percent import percent_encode
from geouri.uri.types import GeoUri

__all__ = [
    "RELAXED_COMPOSER_POLICY",
    "STRICT_COMPOSER_POLICY",
    "ComposerPolicy",
    "compose",
    "dumps",
]


@dataclass(frozen=True)
class ComposerPolicy:
    """Options controlling which optional text the composer emits.

    Attributes:
        suppress_default_crs: Omit ``;crs=wgs84``, since WGS-84 is implied
            when no CRS is given.
        percent_encode_values: Escape parameter value characters that are
            not literal ``paramchar`` as ``%XX``.
    """

    suppress_default_crs: bool = True
    percent_encode_values: bool = False


RELAXED_COMPOSER_POLICY = ComposerPolicy()
STRICT_COMPOSER_POLICY = ComposerPolicy(suppress_default_crs=False)


def _compose_coordinates(uri: GeoUri) -> str:
    coordinates = [uri.latitude, uri.longitude]
    if uri.altitude is not None:
        coordinates.append(uri.altitude)
    return ",".join(format_number(value) for value in coordinates)


def _compose_parameter(name: str, value: str, policy: ComposerPolicy) -> str:
    if not value:
        return f";{name}"
    if policy.percent_encode_values:
        value = percent_encode(value)
    return f";{name}={value}"


def compose(uri: GeoUri, policy: ComposerPolicy = RELAXED_COMPOSER_POLICY) -> str:
    """Render ``uri`` as geo URI text.

    Args:
        uri: The location to render
        policy: Which optional clauses to emit and how to write values

    Returns:
        The geo URI text. Parameters follow in ``uri.parameters`` order;
        an empty value is written as a bare name, without ``=``.

    Raises:
        GeoUriError: ``BAD_NUMBER`` if a coordinate or the uncertainty is
            NaN or infinite.

    Example:
        >>> uri = GeoUri(latitude=66, longitude=30, altitude=100, crs="ABC",
        ...              uncertainty=6.5, parameters={"foo": "val", "bar": ""})
        >>> compose(uri)
        'geo:66,30,100;crs=ABC;u=6.5;foo=val;bar'
    """
    parts = ["geo:", _compose_coordinates(uri)]

    if not (uri.is_wgs84() and policy.suppress_default_crs):
        parts.append(f";crs={uri.crs}")

    if uri.uncertainty is not None:
        parts.append(f";u={format_number(uri.uncertainty)}")

    parts.extend(
        _compose_parameter(name, value, policy)
        for name, value in uri.iter_parameters()
    )
    return "".join(parts)


dumps = compose
