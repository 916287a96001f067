"""Hourly forecast records."""
from __future__ import annotations
import datetime as dt
from dataclasses import dataclass
from typing import Optional

from .conditions import Conditions
from .schema import RawHourlyRecord
from .units import (
    Celsius,
    Degrees,
    Metres,
    MetresPerSecond,
    Millimetres,
    MillimetresPerHour,
    Pascals,
    Percentage,
    UvIndex,
)


def _optional(unit, value: Optional[float]):
    return None if value is None else unit(value)


@dataclass(frozen=True)
class Hourly:
    """Forecast for a single hour.

    The ``Optional`` fields cover the hour preceding the validity time and
    are not provided beyond roughly 48 hours into the series.

    Attributes:
        time: Time at which this forecast is valid (UTC).
        conditions: Most significant weather, taking into account both
            instantaneous and preceding conditions.
        temperature: Air temperature at screen level (about 1.5m).
        temperature_maximum: Maximum screen air temperature over the previous hour.
        temperature_minimum: Minimum screen air temperature over the previous hour.
        temperature_feels_like: Temperature it feels like, taking into account
            humidity and wind chill but not radiation.
        screen_dew_point_temperature: Dew point at screen level.
        precipitation_probability: Probability of precipitation over the hour
            centred at the validity time.
        precipitation_rate: Rate at which liquid water is being deposited.
        precipitation_total: Liquid water deposited since the previous hour.
        snow_total: Snow that fell in the last hour, as liquid water equivalent.
            This does not reflect snow lying on the ground.
        wind_speed: Mean 10m wind speed over the preceding 10 minutes.
        wind_direction: Mean 10m direction the wind is blowing from.
        wind_gust_speed: Maximum 3-second mean wind speed over the preceding
            10 minutes.
        wind_gust_hourly_maximum_speed: Maximum 3-second mean wind speed over
            the preceding hour.
        visibility: Horizontal visibility from screen level.
        relative_humidity: Relative humidity at screen level.
        pressure: Mean sea level pressure.
        uv_index: Maximum UV index over the preceding hour.
    """

    time: dt.datetime
    conditions: Conditions
    temperature: Celsius
    temperature_maximum: Optional[Celsius]
    temperature_minimum: Optional[Celsius]
    temperature_feels_like: Celsius
    screen_dew_point_temperature: Celsius
    precipitation_probability: Percentage
    precipitation_rate: MillimetresPerHour
    precipitation_total: Optional[Millimetres]
    snow_total: Optional[Millimetres]
    wind_speed: MetresPerSecond
    wind_direction: Degrees
    wind_gust_speed: MetresPerSecond
    wind_gust_hourly_maximum_speed: Optional[MetresPerSecond]
    visibility: Metres
    relative_humidity: Percentage
    pressure: Pascals
    uv_index: UvIndex

    @classmethod
    def from_raw(cls, rf: RawHourlyRecord) -> "Hourly":
        """Convert a raw hourly entry.

        Raises:
            UnknownConditionError: If the weather code is not recognised.
        """
        return cls(
            time=rf.time,
            conditions=Conditions.from_code(rf.significant_weather_code),
            temperature=Celsius(rf.screen_temperature),
            temperature_maximum=_optional(Celsius, rf.max_screen_air_temp),
            temperature_minimum=_optional(Celsius, rf.min_screen_air_temp),
            temperature_feels_like=Celsius(rf.feels_like_temperature),
            screen_dew_point_temperature=Celsius(rf.screen_dew_point_temperature),
            precipitation_probability=Percentage(rf.prob_of_precipitation),
            precipitation_rate=MillimetresPerHour(rf.precipitation_rate),
            precipitation_total=_optional(Millimetres, rf.total_precip_amount),
            snow_total=_optional(Millimetres, rf.total_snow_amount),
            wind_speed=MetresPerSecond(rf.wind_speed_10m),
            wind_direction=Degrees(rf.wind_direction_from_10m),
            wind_gust_speed=MetresPerSecond(rf.wind_gust_speed_10m),
            wind_gust_hourly_maximum_speed=_optional(MetresPerSecond, rf.max_10m_wind_gust),
            visibility=Metres(rf.visibility),
            relative_humidity=Percentage(rf.screen_relative_humidity),
            pressure=Pascals(rf.mslp),
            uv_index=UvIndex(rf.uv_index),
        )


__all__ = ["Hourly"]
