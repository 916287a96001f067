"""Raw DataHub Global Spot wire schema.

These models mirror the provider's JSON field names (via aliases) and only
check structure and primitive types. Numbers are strict: a string, a
boolean or a float where an integer is expected is rejected, never coerced.
Units, weather codes and coordinate bounds are validated later, when a raw
record is converted to its domain type.

Which fields are optional depends on the granularity:

- hourly: the five trailing-hour extrema/totals are absent towards the end
  of the series (after roughly 48 hours);
- three-hourly: every field is present;
- daily: the first record describes a day that has already started, so the
  day-only UV, weather code, feels-like maximum and probability fields are
  absent for it.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
)

from .constants import DATAHUB_TIME_FORMAT


def parse_datahub_time(value: Any) -> dt.datetime:
    """Parse a DataHub timestamp such as ``2023-07-05T10:00Z`` as UTC.

    The provider omits the seconds field, which is why a fixed format is
    used rather than ISO 8601 auto-detection.

    Raises:
        ValueError: If the string does not match the DataHub format.
    """
    if isinstance(value, dt.datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=dt.timezone.utc)
        return value.astimezone(dt.timezone.utc)
    if not isinstance(value, str):
        raise ValueError(f"Expected timestamp string, got {type(value).__name__}")
    try:
        parsed = dt.datetime.strptime(value, DATAHUB_TIME_FORMAT)
    except ValueError as exc:
        raise ValueError(f"Invalid timestamp '{value}'. Expected YYYY-MM-DDTHH:MMZ") from exc
    return parsed.replace(tzinfo=dt.timezone.utc)


class RawRecord(BaseModel):
    """Base for a single time series entry."""

    time: dt.datetime

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("time", mode="before")
    @classmethod
    def parse_time(cls, v: Any) -> dt.datetime:
        return parse_datahub_time(v)


class RawHourlyRecord(RawRecord):
    """One hourly time series entry."""

    screen_temperature: StrictFloat = Field(alias="screenTemperature")
    max_screen_air_temp: Optional[StrictFloat] = Field(None, alias="maxScreenAirTemp")
    min_screen_air_temp: Optional[StrictFloat] = Field(None, alias="minScreenAirTemp")
    screen_dew_point_temperature: StrictFloat = Field(alias="screenDewPointTemperature")
    feels_like_temperature: StrictFloat = Field(alias="feelsLikeTemperature")
    wind_speed_10m: StrictFloat = Field(alias="windSpeed10m")
    wind_direction_from_10m: StrictFloat = Field(alias="windDirectionFrom10m")
    wind_gust_speed_10m: StrictFloat = Field(alias="windGustSpeed10m")
    max_10m_wind_gust: Optional[StrictFloat] = Field(None, alias="max10mWindGust")
    visibility: StrictFloat = Field(alias="visibility")
    screen_relative_humidity: StrictFloat = Field(alias="screenRelativeHumidity")
    mslp: StrictInt = Field(ge=0, alias="mslp")
    uv_index: StrictInt = Field(ge=0, le=255, alias="uvIndex")
    significant_weather_code: StrictInt = Field(alias="significantWeatherCode")
    precipitation_rate: StrictFloat = Field(alias="precipitationRate")
    total_precip_amount: Optional[StrictFloat] = Field(None, alias="totalPrecipAmount")
    total_snow_amount: Optional[StrictFloat] = Field(None, alias="totalSnowAmount")
    prob_of_precipitation: StrictFloat = Field(alias="probOfPrecipitation")


class RawThreeHourlyRecord(RawRecord):
    """One three-hourly time series entry."""

    max_screen_air_temp: StrictFloat = Field(alias="maxScreenAirTemp")
    min_screen_air_temp: StrictFloat = Field(alias="minScreenAirTemp")
    max_10m_wind_gust: StrictFloat = Field(alias="max10mWindGust")
    significant_weather_code: StrictInt = Field(alias="significantWeatherCode")
    total_precip_amount: StrictFloat = Field(alias="totalPrecipAmount")
    total_snow_amount: StrictFloat = Field(alias="totalSnowAmount")
    wind_speed_10m: StrictFloat = Field(alias="windSpeed10m")
    wind_direction_from_10m: StrictFloat = Field(alias="windDirectionFrom10m")
    wind_gust_speed_10m: StrictFloat = Field(alias="windGustSpeed10m")
    visibility: StrictFloat = Field(alias="visibility")
    mslp: StrictInt = Field(ge=0, alias="mslp")
    screen_relative_humidity: StrictFloat = Field(alias="screenRelativeHumidity")
    feels_like_temp: StrictFloat = Field(alias="feelsLikeTemp")
    uv_index: StrictInt = Field(ge=0, le=255, alias="uvIndex")
    prob_of_precipitation: StrictFloat = Field(alias="probOfPrecipitation")
    prob_of_snow: StrictFloat = Field(alias="probOfSnow")
    prob_of_heavy_snow: StrictFloat = Field(alias="probOfHeavySnow")
    prob_of_rain: StrictFloat = Field(alias="probOfRain")
    prob_of_heavy_rain: StrictFloat = Field(alias="probOfHeavyRain")
    prob_of_hail: StrictFloat = Field(alias="probOfHail")
    prob_of_sferics: StrictFloat = Field(alias="probOfSferics")


class RawDailyRecord(RawRecord):
    """One daily time series entry, covering a day and the following night.

    The ``Optional`` day fields are only missing from the first entry of a
    series, which describes a day that is already under way.
    """

    # Midday / daytime
    midday_10m_wind_speed: StrictFloat = Field(alias="midday10MWindSpeed")
    midday_10m_wind_direction: StrictFloat = Field(alias="midday10MWindDirection")
    midday_10m_wind_gust: StrictFloat = Field(alias="midday10MWindGust")
    midday_visibility: StrictFloat = Field(alias="middayVisibility")
    midday_relative_humidity: StrictFloat = Field(alias="middayRelativeHumidity")
    midday_mslp: StrictInt = Field(ge=0, alias="middayMslp")
    max_uv_index: Optional[StrictInt] = Field(None, ge=0, le=255, alias="maxUvIndex")
    day_significant_weather_code: Optional[StrictInt] = Field(None, alias="daySignificantWeatherCode")
    day_max_screen_temperature: StrictFloat = Field(alias="dayMaxScreenTemperature")
    day_upper_bound_max_temp: StrictFloat = Field(alias="dayUpperBoundMaxTemp")
    day_lower_bound_max_temp: StrictFloat = Field(alias="dayLowerBoundMaxTemp")
    day_max_feels_like_temp: Optional[StrictFloat] = Field(None, alias="dayMaxFeelsLikeTemp")
    day_upper_bound_max_feels_like_temp: StrictFloat = Field(alias="dayUpperBoundMaxFeelsLikeTemp")
    day_lower_bound_max_feels_like_temp: StrictFloat = Field(alias="dayLowerBoundMaxFeelsLikeTemp")
    day_probability_of_precipitation: Optional[StrictFloat] = Field(None, alias="dayProbabilityOfPrecipitation")
    day_probability_of_snow: Optional[StrictFloat] = Field(None, alias="dayProbabilityOfSnow")
    day_probability_of_heavy_snow: Optional[StrictFloat] = Field(None, alias="dayProbabilityOfHeavySnow")
    day_probability_of_rain: Optional[StrictFloat] = Field(None, alias="dayProbabilityOfRain")
    day_probability_of_heavy_rain: Optional[StrictFloat] = Field(None, alias="dayProbabilityOfHeavyRain")
    day_probability_of_hail: Optional[StrictFloat] = Field(None, alias="dayProbabilityOfHail")
    day_probability_of_sferics: Optional[StrictFloat] = Field(None, alias="dayProbabilityOfSferics")

    # Midnight / nighttime
    midnight_10m_wind_speed: StrictFloat = Field(alias="midnight10MWindSpeed")
    midnight_10m_wind_direction: StrictFloat = Field(alias="midnight10MWindDirection")
    midnight_10m_wind_gust: StrictFloat = Field(alias="midnight10MWindGust")
    midnight_visibility: StrictFloat = Field(alias="midnightVisibility")
    midnight_relative_humidity: StrictFloat = Field(alias="midnightRelativeHumidity")
    midnight_mslp: StrictInt = Field(ge=0, alias="midnightMslp")
    night_significant_weather_code: StrictInt = Field(alias="nightSignificantWeatherCode")
    night_min_screen_temperature: StrictFloat = Field(alias="nightMinScreenTemperature")
    night_upper_bound_min_temp: StrictFloat = Field(alias="nightUpperBoundMinTemp")
    night_lower_bound_min_temp: StrictFloat = Field(alias="nightLowerBoundMinTemp")
    night_min_feels_like_temp: StrictFloat = Field(alias="nightMinFeelsLikeTemp")
    night_upper_bound_min_feels_like_temp: StrictFloat = Field(alias="nightUpperBoundMinFeelsLikeTemp")
    night_lower_bound_min_feels_like_temp: StrictFloat = Field(alias="nightLowerBoundMinFeelsLikeTemp")
    night_probability_of_precipitation: StrictFloat = Field(alias="nightProbabilityOfPrecipitation")
    night_probability_of_snow: StrictFloat = Field(alias="nightProbabilityOfSnow")
    night_probability_of_heavy_snow: StrictFloat = Field(alias="nightProbabilityOfHeavySnow")
    night_probability_of_rain: StrictFloat = Field(alias="nightProbabilityOfRain")
    night_probability_of_heavy_rain: StrictFloat = Field(alias="nightProbabilityOfHeavyRain")
    night_probability_of_hail: StrictFloat = Field(alias="nightProbabilityOfHail")
    night_probability_of_sferics: StrictFloat = Field(alias="nightProbabilityOfSferics")


RecordT = TypeVar("RecordT", bound=RawRecord)


class RawLocation(BaseModel):
    name: StrictStr


class RawGeometry(BaseModel):
    """GeoJSON point; ``coordinates`` is ``[longitude, latitude, altitude]``."""

    type: Optional[str] = None
    coordinates: List[StrictFloat] = Field(min_length=3, max_length=3)


class RawProperties(BaseModel, Generic[RecordT]):
    """Feature properties: site metadata plus the time series."""

    location: RawLocation
    request_point_distance: StrictFloat = Field(alias="requestPointDistance")
    model_run_date: dt.datetime = Field(alias="modelRunDate")
    time_series: List[RecordT] = Field(alias="timeSeries")

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    @field_validator("model_run_date", mode="before")
    @classmethod
    def parse_model_run_date(cls, v: Any) -> dt.datetime:
        return parse_datahub_time(v)


class RawFeature(BaseModel, Generic[RecordT]):
    type: Optional[str] = None
    geometry: RawGeometry
    properties: RawProperties[RecordT]


class RawForecast(BaseModel, Generic[RecordT]):
    """Top-level GeoJSON feature collection returned by the endpoint.

    The provider always returns exactly one feature; an empty collection is
    rejected.
    """

    type: Optional[str] = None
    features: List[RawFeature[RecordT]] = Field(min_length=1)


RawHourlyForecast = RawForecast[RawHourlyRecord]
RawThreeHourlyForecast = RawForecast[RawThreeHourlyRecord]
RawDailyForecast = RawForecast[RawDailyRecord]


__all__ = [
    "parse_datahub_time",
    "RawRecord",
    "RawHourlyRecord",
    "RawThreeHourlyRecord",
    "RawDailyRecord",
    "RawLocation",
    "RawGeometry",
    "RawProperties",
    "RawFeature",
    "RawForecast",
    "RawHourlyForecast",
    "RawThreeHourlyForecast",
    "RawDailyForecast",
]
