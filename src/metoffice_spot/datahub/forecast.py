"""Forecast envelope and parse entry points.

Example usage:
    >>> from metoffice_spot.datahub import Forecast, Granularity
    >>> forecast = Forecast.from_text(payload, Granularity.DAILY)
    >>> forecast.location_name
    'Exeter'
    >>> forecast.predictions[0].is_past
    True
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Tuple, Type, TypeVar, Union

from pydantic import ValidationError

from .daily import Daily
from .exceptions import SchemaError
from .geo import Coordinates
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
from .units import Metres

LOGGER = logging.getLogger(__name__)

PeriodT = TypeVar("PeriodT", Hourly, ThreeHourly, Daily)

# Raw envelope model, raw record model and converter for each granularity
_PERIODS: Dict[Granularity, Tuple[Type[RawForecast], type, Callable]] = {
    Granularity.HOURLY: (RawHourlyForecast, RawHourlyRecord, Hourly.from_raw),
    Granularity.THREE_HOURLY: (RawThreeHourlyForecast, RawThreeHourlyRecord, ThreeHourly.from_raw),
    Granularity.DAILY: (RawDailyForecast, RawDailyRecord, Daily.from_raw),
}


def _period(
    granularity: Union[Granularity, str],
) -> Tuple[Granularity, Tuple[Type[RawForecast], type, Callable]]:
    granularity = Granularity(granularity)
    return granularity, _PERIODS[granularity]


@dataclass(frozen=True)
class Forecast(Generic[PeriodT]):
    """Forecast for one site at a single granularity.

    Attributes:
        location_name: Forecast location name.
        coordinates: Position of the forecast reference point.
        requested_point_distance: Distance from the requested location to the
            reference point.
        predictions_made_at: When the weather model was run (UTC).
        granularity: Time period of each prediction.
        predictions: Predictions in provider order.
    """

    location_name: str
    coordinates: Coordinates
    requested_point_distance: Metres
    predictions_made_at: dt.datetime
    granularity: Granularity
    predictions: Tuple[PeriodT, ...]

    @classmethod
    def from_raw(cls, raw: RawForecast, granularity: Union[Granularity, str]) -> "Forecast":
        """Convert a validated raw feature collection.

        Args:
            raw: Raw forecast whose time series holds records of ``granularity``.
            granularity: Time period of the records.

        Returns:
            The converted forecast.

        Raises:
            SchemaError: If the time series records are of another granularity.
            GeographicBoundsError: If the site coordinates are out of range.
            UnknownConditionError: If any record has an unknown weather code;
                no partial forecast is returned.
        """
        granularity, (_, record_cls, convert) = _period(granularity)
        feature = raw.features[0]
        properties = feature.properties

        predictions = []
        for record in properties.time_series:
            if not isinstance(record, record_cls):
                raise SchemaError(
                    f"Expected {record_cls.__name__} entries for {granularity} forecast, "
                    f"got {type(record).__name__}"
                )
            predictions.append(convert(record))

        forecast = cls(
            location_name=properties.location.name,
            coordinates=Coordinates.from_lon_lat_alt(feature.geometry.coordinates),
            requested_point_distance=Metres(properties.request_point_distance),
            predictions_made_at=properties.model_run_date,
            granularity=granularity,
            predictions=tuple(predictions),
        )
        LOGGER.debug(
            "Parsed %s forecast for %s with %d predictions",
            granularity,
            forecast.location_name,
            len(forecast.predictions),
        )
        return forecast

    @classmethod
    def from_text(cls, text: str, granularity: Union[Granularity, str]) -> "Forecast":
        """Parse a JSON document.

        Raises:
            SchemaError: If the document is not valid JSON of the expected shape.
            GeographicBoundsError: If the site coordinates are out of range.
            UnknownConditionError: If any record has an unknown weather code.
        """
        return cls.from_raw(_validate_json(text, granularity), granularity)

    @classmethod
    def from_bytes(cls, data: bytes, granularity: Union[Granularity, str]) -> "Forecast":
        """Parse a JSON document from raw bytes (e.g. an HTTP response body)."""
        return cls.from_raw(_validate_json(data, granularity), granularity)

    @property
    def location_label(self) -> str:
        return f"{self.location_name} ({self.coordinates})"


def _validate_json(payload: Union[str, bytes], granularity: Union[Granularity, str]) -> RawForecast:
    granularity, (raw_cls, _, _) = _period(granularity)
    try:
        return raw_cls.model_validate_json(payload)
    except ValidationError as exc:
        raise SchemaError(
            f"Invalid {granularity} forecast payload: {exc}", source=exc
        ) from exc


def parse_forecast(payload: Union[str, bytes], granularity: Union[Granularity, str]) -> Forecast:
    """Parse a JSON payload (text or bytes) for the given granularity."""
    if isinstance(payload, (bytes, bytearray)):
        return Forecast.from_bytes(bytes(payload), granularity)
    return Forecast.from_text(payload, granularity)


def parse_hourly(payload: Union[str, bytes]) -> "Forecast[Hourly]":
    return parse_forecast(payload, Granularity.HOURLY)


def parse_three_hourly(payload: Union[str, bytes]) -> "Forecast[ThreeHourly]":
    return parse_forecast(payload, Granularity.THREE_HOURLY)


def parse_daily(payload: Union[str, bytes]) -> "Forecast[Daily]":
    return parse_forecast(payload, Granularity.DAILY)


__all__ = [
    "Forecast",
    "parse_forecast",
    "parse_hourly",
    "parse_three_hourly",
    "parse_daily",
]
