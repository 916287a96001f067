"""Three-hourly forecast records."""
from __future__ import annotations
import datetime as dt
from dataclasses import dataclass

from .conditions import Conditions
from .schema import RawThreeHourlyRecord
from .units import (
    Celsius,
    Degrees,
    Metres,
    MetresPerSecond,
    Millimetres,
    Pascals,
    Percentage,
    UvIndex,
)


@dataclass(frozen=True)
class ThreeHourly:
    """Forecast for a three-hour period.

    Every field is always provided. Probabilities are over the three hours
    centred at the validity time; heavy rain and heavy snow mean more than
    1mm per hour (liquid water equivalent), and lightning means a strike
    within 50km.
    """

    time: dt.datetime
    conditions: Conditions
    temperature_maximum: Celsius
    temperature_minimum: Celsius
    temperature_feels_like: Celsius
    wind_speed: MetresPerSecond
    wind_direction: Degrees
    wind_gust_speed: MetresPerSecond
    # Most extreme wind speed that might be experienced in the period
    wind_gust_three_hourly_maximum: MetresPerSecond
    visibility: Metres
    relative_humidity: Percentage
    pressure: Pascals
    uv_index: UvIndex
    precipitation_total: Millimetres
    snow_total: Millimetres
    precipitation_probability: Percentage
    rain_probability: Percentage
    heavy_rain_probability: Percentage
    snow_probability: Percentage
    heavy_snow_probability: Percentage
    hail_probability: Percentage
    lightning_probability: Percentage

    @classmethod
    def from_raw(cls, rf: RawThreeHourlyRecord) -> "ThreeHourly":
        return cls(
            time=rf.time,
            conditions=Conditions.from_code(rf.significant_weather_code),
            temperature_maximum=Celsius(rf.max_screen_air_temp),
            temperature_minimum=Celsius(rf.min_screen_air_temp),
            temperature_feels_like=Celsius(rf.feels_like_temp),
            wind_speed=MetresPerSecond(rf.wind_speed_10m),
            wind_direction=Degrees(rf.wind_direction_from_10m),
            wind_gust_speed=MetresPerSecond(rf.wind_gust_speed_10m),
            wind_gust_three_hourly_maximum=MetresPerSecond(rf.max_10m_wind_gust),
            visibility=Metres(rf.visibility),
            relative_humidity=Percentage(rf.screen_relative_humidity),
            pressure=Pascals(rf.mslp),
            uv_index=UvIndex(rf.uv_index),
            precipitation_total=Millimetres(rf.total_precip_amount),
            snow_total=Millimetres(rf.total_snow_amount),
            precipitation_probability=Percentage(rf.prob_of_precipitation),
            rain_probability=Percentage(rf.prob_of_rain),
            heavy_rain_probability=Percentage(rf.prob_of_heavy_rain),
            snow_probability=Percentage(rf.prob_of_snow),
            heavy_snow_probability=Percentage(rf.prob_of_heavy_snow),
            hail_probability=Percentage(rf.prob_of_hail),
            lightning_probability=Percentage(rf.prob_of_sferics),
        )


__all__ = ["ThreeHourly"]
