"""Geographic value types in the WGS 84 reference system."""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Sequence

from .constants import LATITUDE_BOUNDS, LONGITUDE_BOUNDS
from .exceptions import GeographicBoundsError
from .units import Metres


def _checked_degrees(axis: str, value: Any, bounds: tuple) -> float:
    """Return ``value`` as a float, raising if it is non-finite or out of bounds."""
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool):
        raise GeographicBoundsError(axis, value)
    try:
        degrees = float(value)
    except (TypeError, ValueError) as exc:
        raise GeographicBoundsError(axis, value) from exc
    lower, upper = bounds
    if not math.isfinite(degrees) or not lower <= degrees <= upper:
        raise GeographicBoundsError(axis, value)
    return degrees


@dataclass(frozen=True, order=True)
class Latitude:
    """Latitude in decimal degrees.

    Raises:
        GeographicBoundsError: If the value is outside ±90° or not finite.
    """

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _checked_degrees("latitude", self.value, LATITUDE_BOUNDS))

    def __str__(self) -> str:
        hemisphere = "N" if self.value >= 0 else "S"
        return f"{abs(self.value):.3f}° {hemisphere}"


@dataclass(frozen=True, order=True)
class Longitude:
    """Longitude in decimal degrees.

    Raises:
        GeographicBoundsError: If the value is outside ±180° or not finite.
    """

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _checked_degrees("longitude", self.value, LONGITUDE_BOUNDS))

    def __str__(self) -> str:
        hemisphere = "E" if self.value >= 0 else "W"
        return f"{abs(self.value):.3f}° {hemisphere}"


@dataclass(frozen=True)
class Coordinates:
    """Position of a forecast site.

    Attributes:
        latitude: Validated latitude.
        longitude: Validated longitude.
        altitude: Height above mean sea level.
    """

    latitude: Latitude
    longitude: Longitude
    altitude: Metres

    @classmethod
    def from_lon_lat_alt(cls, values: Sequence[float]) -> "Coordinates":
        """Build coordinates from a GeoJSON position.

        The sequence is in ``[longitude, latitude, altitude]`` order, which is
        the reverse of the attribute order.

        Args:
            values: Exactly three numbers, longitude first.

        Returns:
            Validated coordinates.

        Raises:
            GeographicBoundsError: If either angular component is out of range.
            ValueError: If ``values`` does not hold exactly three items.
        """
        if len(values) != 3:
            raise ValueError(f"Expected [longitude, latitude, altitude], got {len(values)} values")
        lon, lat, alt = values
        return cls(
            latitude=Latitude(lat),
            longitude=Longitude(lon),
            altitude=Metres(float(alt)),
        )

    def __str__(self) -> str:
        return f"{self.latitude}, {self.longitude} {self.altitude}"


__all__ = ["Latitude", "Longitude", "Coordinates"]
