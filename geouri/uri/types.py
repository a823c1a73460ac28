"""Geo URI value holder.

Design Decisions:
    1. Optional values (float | None): altitude and uncertainty are tri-state.
       None means "not given in the URI", which is not the same as a measured
       zero - ``geo:1,2`` and ``geo:1,2,0`` describe different locations.

    2. CRS defaults to "wgs84": RFC 5870 makes WGS-84 the implied reference
       system when no ``crs`` parameter is present.

    3. Parameters in a plain dict: names are unique keys and insertion order
       is kept for composing. Inserting an existing name replaces its value,
       so the last occurrence in a URI wins.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

WGS84 = "wgs84"


def _require_finite(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    return value


@dataclass
class GeoUri:
    """A location identified by a ``geo`` URI (RFC 5870).

    Attributes:
        latitude: Latitude in decimal degrees (first coordinate).

        longitude: Longitude in decimal degrees (second coordinate).

        altitude: Altitude in meters (third coordinate).
            None if the URI has only two coordinates.

        crs: Coordinate reference system label, lowercase by default
            parse policy. Defaults to "wgs84".

        uncertainty: Location uncertainty radius in meters, never negative.
            None if the URI has no ``u`` parameter.

        parameters: Remaining ``;name[=value]`` parameters, values already
            percent-decoded. A parameter without ``=value`` maps to "".

    Example:
        >>> uri = loads("geo:66,30;u=6.500;FOo=this%2dthat;Bar")
        >>> uri.latitude, uri.longitude, uri.altitude
        (66.0, 30.0, None)
        >>> uri.uncertainty
        6.5
        >>> uri.parameters
        {'foo': 'this-that', 'bar': ''}
    """

    latitude: float = 0.0
    longitude: float = 0.0
    altitude: float | None = None
    crs: str = WGS84
    uncertainty: float | None = None
    parameters: dict[str, str] = field(default_factory=dict)

    def set_latitude(self, value: float) -> None:
        self.latitude = _require_finite("latitude", value)

    def set_longitude(self, value: float) -> None:
        self.longitude = _require_finite("longitude", value)

    def set_altitude(self, value: float) -> None:
        self.altitude = _require_finite("altitude", value)

    def has_altitude(self) -> bool:
        return self.altitude is not None

    def clear_altitude(self) -> None:
        self.altitude = None

    def set_crs(self, label: str) -> None:
        self.crs = label

    def is_wgs84(self) -> bool:
        """Return True if the CRS is exactly ``"wgs84"``.

        The comparison is case-sensitive: the default parse policy already
        folds the label, and a label kept as "WGS84" under a case-preserving
        policy is reported as written.
        """
        return self.crs == WGS84

    def set_uncertainty(self, value: float) -> None:
        """Set the uncertainty radius in meters.

        Raises:
            ValueError: If ``value`` is negative, NaN or infinite.
        """
        value = _require_finite("uncertainty", value)
        if value < 0:
            raise ValueError(f"uncertainty must not be negative, got {value!r}")
        self.uncertainty = value

    def has_uncertainty(self) -> bool:
        return self.uncertainty is not None

    def clear_uncertainty(self) -> None:
        self.uncertainty = None

    def insert(self, name: str, value: str = "") -> None:
        """Add a parameter; an existing ``name`` has its value replaced."""
        self.parameters[name] = value

    def has_parameter(self, name: str) -> bool:
        return name in self.parameters

    def parameter(self, name: str) -> str:
        """Return the value of ``name``, or "" if there is no such parameter."""
        return self.parameters.get(name, "")

    def count(self) -> int:
        return len(self.parameters)

    def iter_parameters(self) -> Iterator[tuple[str, str]]:
        """Yield ``(name, value)`` pairs in insertion order."""
        yield from self.parameters.items()
