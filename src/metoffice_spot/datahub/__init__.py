"""Met Office DataHub Global Spot forecast package.

This package turns DataHub point forecast payloads into typed, unit-safe
records with support for:
- Raw wire models via Pydantic (structure and primitive types only)
- Immutable domain records with distinct unit types
- Hourly, three-hourly and daily granularities
- Query URL construction for a validated location

Example usage:
    >>> from metoffice_spot.datahub import Latitude, Longitude, daily_url_for_location
    >>> url = daily_url_for_location(Latitude(50.727), Longitude(-3.474))

    >>> from metoffice_spot.datahub import parse_hourly
    >>> forecast = parse_hourly(response_bytes)
    >>> forecast.predictions[0].temperature
    Celsius(value=17.6)
"""

from __future__ import annotations

from .conditions import Conditions, TimeOfDay
from .constants import (
    API_KEY_HEADER,
    DATA_SOURCE,
    DATAHUB_BASE_URL,
    DATAHUB_TIME_FORMAT,
    FIXED_QUERY_PARAMS,
)
from .daily import Daily, Day, FutureDay, Night, PastDay, TemperaturePrediction
from .dataframes import forecast_to_dataframe, prediction_to_row
from .exceptions import (
    ForecastError,
    GeographicBoundsError,
    SchemaError,
    UnknownConditionError,
)
from .forecast import (
    Forecast,
    parse_daily,
    parse_forecast,
    parse_hourly,
    parse_three_hourly,
)
from .formatting import format_celsius, format_quantity
from .geo import Coordinates, Latitude, Longitude
from .granularity import Granularity
from .hourly import Hourly
from .schema import (
    RawDailyForecast,
    RawDailyRecord,
    RawForecast,
    RawHourlyForecast,
    RawHourlyRecord,
    RawThreeHourlyForecast,
    RawThreeHourlyRecord,
)
from .three_hourly import ThreeHourly
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
    UvTier,
)
from .urls import (
    daily_url_for_location,
    hourly_url_for_location,
    request_headers,
    three_hourly_url_for_location,
    url_for_location,
)

__all__ = [
    # Envelope and parsing
    "Forecast",
    "Granularity",
    "parse_forecast",
    "parse_hourly",
    "parse_three_hourly",
    "parse_daily",
    # Domain records
    "Hourly",
    "ThreeHourly",
    "Daily",
    "Day",
    "PastDay",
    "FutureDay",
    "Night",
    "TemperaturePrediction",
    "Conditions",
    "TimeOfDay",
    # Geography
    "Latitude",
    "Longitude",
    "Coordinates",
    # Units
    "Celsius",
    "Degrees",
    "Metres",
    "MetresPerSecond",
    "Millimetres",
    "MillimetresPerHour",
    "Pascals",
    "Percentage",
    "UvIndex",
    "UvTier",
    # Raw models
    "RawForecast",
    "RawHourlyForecast",
    "RawThreeHourlyForecast",
    "RawDailyForecast",
    "RawHourlyRecord",
    "RawThreeHourlyRecord",
    "RawDailyRecord",
    # URLs
    "url_for_location",
    "hourly_url_for_location",
    "three_hourly_url_for_location",
    "daily_url_for_location",
    "request_headers",
    # Presentation
    "format_quantity",
    "format_celsius",
    "forecast_to_dataframe",
    "prediction_to_row",
    # Exceptions
    "ForecastError",
    "SchemaError",
    "GeographicBoundsError",
    "UnknownConditionError",
    # Constants
    "DATAHUB_BASE_URL",
    "DATA_SOURCE",
    "FIXED_QUERY_PARAMS",
    "API_KEY_HEADER",
    "DATAHUB_TIME_FORMAT",
]
