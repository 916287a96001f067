"""Daily forecast records.

A daily entry covers one day (local dawn to dusk) and the following night
(dusk to dawn). Fields given "at midday" or "at midnight" are at 12pm or
12am in the site's local time zone; all others cover the whole day or night.

The first entry of a daily series describes a day that is already under
way. The provider omits its UV, weather code, feels-like maximum and
probability fields, so the day half is modelled as either :class:`PastDay`
or :class:`FutureDay`.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Optional, Union

from .conditions import Conditions
from .exceptions import SchemaError
from .schema import RawDailyRecord
from .units import Celsius, Degrees, Metres, MetresPerSecond, Pascals, Percentage, UvIndex

LOGGER = logging.getLogger(__name__)

# Day fields the provider only computes for days that have not started yet
FUTURE_ONLY_FIELDS = (
    "max_uv_index",
    "day_significant_weather_code",
    "day_max_feels_like_temp",
    "day_probability_of_precipitation",
    "day_probability_of_rain",
    "day_probability_of_heavy_rain",
    "day_probability_of_snow",
    "day_probability_of_heavy_snow",
    "day_probability_of_hail",
    "day_probability_of_sferics",
)


@dataclass(frozen=True)
class TemperaturePrediction:
    """Prediction for a maximum or minimum temperature.

    Attributes:
        most_likely: Most likely extreme temperature.
        upper_bound: 97.5% confidence upper bound.
        lower_bound: 97.5% confidence lower bound.
    """

    most_likely: Celsius
    upper_bound: Celsius
    lower_bound: Celsius

    def __str__(self) -> str:
        return f"{self.most_likely} ({self.lower_bound} to {self.upper_bound})"


@dataclass(frozen=True)
class PastDay:
    """Daytime data for a day that has already started.

    Wind is the 10 minute mean at 10m above ground up to midday; gust is the
    maximum 3-second mean over the same window. Humidity and temperatures
    are at screen height (about 1.5m).

    Attributes:
        temperature_feels_like_maximum_upper_bound: 97.5% probability that the
            maximum feels-like temperature is below this value.
        temperature_feels_like_maximum_lower_bound: 97.5% probability that the
            maximum feels-like temperature is above this value.
    """

    wind_speed: MetresPerSecond
    wind_direction: Degrees
    wind_gust_speed: MetresPerSecond
    visibility: Metres
    relative_humidity: Percentage
    pressure: Pascals
    temperature_maximum: TemperaturePrediction
    temperature_feels_like_maximum_upper_bound: Celsius
    temperature_feels_like_maximum_lower_bound: Celsius


@dataclass(frozen=True)
class FutureDay:
    """Daytime data for a day that has not started yet.

    Midday fields are as for :class:`PastDay`. Heavy rain is more than
    1mm/hour; heavy snow is more than 1mm/hour liquid water equivalent
    (about 1cm of snow per hour).
    """

    wind_speed: MetresPerSecond
    wind_direction: Degrees
    wind_gust_speed: MetresPerSecond
    visibility: Metres
    relative_humidity: Percentage
    pressure: Pascals
    uv_index_maximum: UvIndex
    conditions: Conditions
    temperature_maximum: TemperaturePrediction
    temperature_feels_like_maximum: TemperaturePrediction
    precipitation_probability: Percentage
    rain_probability: Percentage
    heavy_rain_probability: Percentage
    snow_probability: Percentage
    heavy_snow_probability: Percentage
    hail_probability: Percentage
    lightning_probability: Percentage


Day = Union[PastDay, FutureDay]


@dataclass(frozen=True)
class Night:
    """Nighttime data, always complete.

    Wind, visibility, humidity and pressure are at midnight.
    """

    wind_speed: MetresPerSecond
    wind_direction: Degrees
    wind_gust_speed: MetresPerSecond
    visibility: Metres
    relative_humidity: Percentage
    pressure: Pascals
    conditions: Conditions
    temperature_minimum: TemperaturePrediction
    temperature_feels_like_minimum: TemperaturePrediction
    precipitation_probability: Percentage
    rain_probability: Percentage
    heavy_rain_probability: Percentage
    snow_probability: Percentage
    heavy_snow_probability: Percentage
    hail_probability: Percentage
    lightning_probability: Percentage


def _check_future_fields(rf: RawDailyRecord) -> None:
    missing = [name for name in FUTURE_ONLY_FIELDS if getattr(rf, name) is None]
    if missing:
        raise SchemaError(
            f"Daily entry for {rf.time:%Y-%m-%d} has dayMaxFeelsLikeTemp "
            f"but is missing {', '.join(missing)}"
        )


def _past_day(rf: RawDailyRecord) -> PastDay:
    return PastDay(
        wind_speed=MetresPerSecond(rf.midday_10m_wind_speed),
        wind_direction=Degrees(rf.midday_10m_wind_direction),
        wind_gust_speed=MetresPerSecond(rf.midday_10m_wind_gust),
        visibility=Metres(rf.midday_visibility),
        relative_humidity=Percentage(rf.midday_relative_humidity),
        pressure=Pascals(rf.midday_mslp),
        temperature_maximum=_day_maximum(rf),
        temperature_feels_like_maximum_upper_bound=Celsius(rf.day_upper_bound_max_feels_like_temp),
        temperature_feels_like_maximum_lower_bound=Celsius(rf.day_lower_bound_max_feels_like_temp),
    )


def _future_day(rf: RawDailyRecord) -> FutureDay:
    _check_future_fields(rf)
    return FutureDay(
        wind_speed=MetresPerSecond(rf.midday_10m_wind_speed),
        wind_direction=Degrees(rf.midday_10m_wind_direction),
        wind_gust_speed=MetresPerSecond(rf.midday_10m_wind_gust),
        visibility=Metres(rf.midday_visibility),
        relative_humidity=Percentage(rf.midday_relative_humidity),
        pressure=Pascals(rf.midday_mslp),
        uv_index_maximum=UvIndex(rf.max_uv_index),
        conditions=Conditions.from_code(rf.day_significant_weather_code),
        temperature_maximum=_day_maximum(rf),
        temperature_feels_like_maximum=TemperaturePrediction(
            most_likely=Celsius(rf.day_max_feels_like_temp),
            upper_bound=Celsius(rf.day_upper_bound_max_feels_like_temp),
            lower_bound=Celsius(rf.day_lower_bound_max_feels_like_temp),
        ),
        precipitation_probability=Percentage(rf.day_probability_of_precipitation),
        rain_probability=Percentage(rf.day_probability_of_rain),
        heavy_rain_probability=Percentage(rf.day_probability_of_heavy_rain),
        snow_probability=Percentage(rf.day_probability_of_snow),
        heavy_snow_probability=Percentage(rf.day_probability_of_heavy_snow),
        hail_probability=Percentage(rf.day_probability_of_hail),
        lightning_probability=Percentage(rf.day_probability_of_sferics),
    )


def _day_maximum(rf: RawDailyRecord) -> TemperaturePrediction:
    return TemperaturePrediction(
        most_likely=Celsius(rf.day_max_screen_temperature),
        upper_bound=Celsius(rf.day_upper_bound_max_temp),
        lower_bound=Celsius(rf.day_lower_bound_max_temp),
    )


def _night(rf: RawDailyRecord) -> Night:
    return Night(
        wind_speed=MetresPerSecond(rf.midnight_10m_wind_speed),
        wind_direction=Degrees(rf.midnight_10m_wind_direction),
        wind_gust_speed=MetresPerSecond(rf.midnight_10m_wind_gust),
        visibility=Metres(rf.midnight_visibility),
        relative_humidity=Percentage(rf.midnight_relative_humidity),
        pressure=Pascals(rf.midnight_mslp),
        conditions=Conditions.from_code(rf.night_significant_weather_code),
        temperature_minimum=TemperaturePrediction(
            most_likely=Celsius(rf.night_min_screen_temperature),
            upper_bound=Celsius(rf.night_upper_bound_min_temp),
            lower_bound=Celsius(rf.night_lower_bound_min_temp),
        ),
        temperature_feels_like_minimum=TemperaturePrediction(
            most_likely=Celsius(rf.night_min_feels_like_temp),
            upper_bound=Celsius(rf.night_upper_bound_min_feels_like_temp),
            lower_bound=Celsius(rf.night_lower_bound_min_feels_like_temp),
        ),
        precipitation_probability=Percentage(rf.night_probability_of_precipitation),
        rain_probability=Percentage(rf.night_probability_of_rain),
        heavy_rain_probability=Percentage(rf.night_probability_of_heavy_rain),
        snow_probability=Percentage(rf.night_probability_of_snow),
        heavy_snow_probability=Percentage(rf.night_probability_of_heavy_snow),
        hail_probability=Percentage(rf.night_probability_of_hail),
        lightning_probability=Percentage(rf.night_probability_of_sferics),
    )


@dataclass(frozen=True)
class Daily:
    """Forecast for a day and the following night.

    Attributes:
        time: Start of the day this entry is valid for (UTC).
        day: :class:`PastDay` for a day already under way, otherwise
            :class:`FutureDay`.
        night: Nighttime data.
    """

    time: dt.datetime
    day: Day
    night: Night

    @property
    def is_past(self) -> bool:
        return isinstance(self.day, PastDay)

    @property
    def day_conditions(self) -> Optional[Conditions]:
        """Daytime conditions, unknown for a day already under way."""
        return self.day.conditions if isinstance(self.day, FutureDay) else None

    @classmethod
    def from_raw(cls, rf: RawDailyRecord) -> "Daily":
        """Convert a raw daily entry.

        The day variant is chosen by whether ``dayMaxFeelsLikeTemp`` is
        present. This matches the provider's current output, where it is
        only missing from the first (already started) day, but it is not a
        documented schema guarantee.

        Raises:
            UnknownConditionError: If the day or night weather code is not
                recognised.
            SchemaError: If ``dayMaxFeelsLikeTemp`` is present but another
                future-only day field is missing.
        """
        if rf.day_max_feels_like_temp is None:
            LOGGER.debug("Daily entry %s has no dayMaxFeelsLikeTemp, treating as past day", rf.time)
            day: Day = _past_day(rf)
        else:
            day = _future_day(rf)
        return cls(time=rf.time, day=day, night=_night(rf))


__all__ = [
    "FUTURE_ONLY_FIELDS",
    "TemperaturePrediction",
    "PastDay",
    "FutureDay",
    "Day",
    "Night",
    "Daily",
]
