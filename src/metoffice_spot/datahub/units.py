"""Unit wrappers for forecast quantities.

Each physical quantity gets its own immutable type so that values in
different units cannot be mixed up. None of the types define arithmetic;
ordering comparisons only work between values of the same unit.

Example:
    >>> from metoffice_spot.datahub.units import Celsius, Pascals
    >>> str(Celsius(12.346))
    '12.35°C'
    >>> str(Pascals(101300))
    '101300 Pa'
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, order=True)
class Celsius:
    """Temperature in degrees Celsius."""
    value: float

    def __str__(self) -> str:
        return f"{self.value:.2f}°C"


@dataclass(frozen=True, order=True)
class Metres:
    """Distance or height in metres."""
    value: float

    def __str__(self) -> str:
        return f"{self.value:.0f}m"


@dataclass(frozen=True, order=True)
class MetresPerSecond:
    """Speed in metres per second."""
    value: float

    def __str__(self) -> str:
        return f"{self.value:.2f} m/s"


@dataclass(frozen=True, order=True)
class Millimetres:
    """Depth of liquid water equivalent in millimetres."""
    value: float

    def __str__(self) -> str:
        return f"{self.value:.2f} mm"


@dataclass(frozen=True, order=True)
class MillimetresPerHour:
    """Precipitation rate in millimetres per hour."""
    value: float

    def __str__(self) -> str:
        return f"{self.value:.2f} mm/hour"


@dataclass(frozen=True, order=True)
class Pascals:
    """Air pressure in whole Pascals."""
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Pressure cannot be negative, got {self.value} Pa")

    def __str__(self) -> str:
        return f"{self.value} Pa"


@dataclass(frozen=True, order=True)
class Percentage:
    value: float

    def __str__(self) -> str:
        return f"{self.value:.0f}%"


@dataclass(frozen=True, order=True)
class Degrees:
    """Azimuth in degrees relative to north.

    This is a direction seen from the forecast location, so ``Degrees(90.0)``
    is due east.
    """
    value: float

    def __str__(self) -> str:
        return f"{self.value:.0f}°"


class UvTier(str, Enum):
    """Advisory band for a UV index value."""

    NONE = "None"
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very high"
    EXTREME = "Extreme"


# Upper bound (inclusive) of each band; anything above the last is extreme
_UV_TIER_BANDS = (
    (0, UvTier.NONE),
    (2, UvTier.LOW),
    (5, UvTier.MODERATE),
    (7, UvTier.HIGH),
    (10, UvTier.VERY_HIGH),
)


@dataclass(frozen=True, order=True)
class UvIndex:
    """UV index value.

    A unitless measure of the strength of solar radiation, usually 0 to 13
    but higher values are possible in extreme situations.
    """
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 255:
            raise ValueError(f"UV index must be between 0 and 255, got {self.value}")

    @property
    def tier(self) -> UvTier:
        """Advisory tier derived from the value."""
        for upper, tier in _UV_TIER_BANDS:
            if self.value <= upper:
                return tier
        return UvTier.EXTREME

    @property
    def advice_message(self) -> str:
        """Sun safety advice for this UV index."""
        if self.value <= 2:
            return "No protection required. You can safely stay outside."
        if self.value <= 5:
            return "Seek shade during midday hours, cover up and wear sunscreen."
        return "Avoid being outside during midday hours. Shirt, sunscreen and hat are essential."

    def __str__(self) -> str:
        return f"{self.value}"


__all__ = [
    "Celsius",
    "Metres",
    "MetresPerSecond",
    "Millimetres",
    "MillimetresPerHour",
    "Pascals",
    "Percentage",
    "Degrees",
    "UvTier",
    "UvIndex",
]
