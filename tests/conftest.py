"""Shared pytest fixtures for metoffice-spot tests."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

from metoffice_spot.config.settings import reset_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"

HOURLY_ENTRY: Dict[str, Any] = {
    "time": "2023-07-05T10:00Z",
    "screenTemperature": 17.6,
    "maxScreenAirTemp": 17.62,
    "minScreenAirTemp": 17.12,
    "screenDewPointTemperature": 11.3,
    "feelsLikeTemperature": 16.43,
    "windSpeed10m": 3.09,
    "windDirectionFrom10m": 252,
    "windGustSpeed10m": 6.17,
    "max10mWindGust": 7.2,
    "visibility": 23128,
    "screenRelativeHumidity": 66.75,
    "mslp": 101580,
    "uvIndex": 3,
    "significantWeatherCode": 3,
    "precipitationRate": 0.0,
    "totalPrecipAmount": 0.0,
    "totalSnowAmount": 0,
    "probOfPrecipitation": 4,
}

THREE_HOURLY_ENTRY: Dict[str, Any] = {
    "time": "2023-07-05T09:00Z",
    "maxScreenAirTemp": 18.81,
    "minScreenAirTemp": 15.64,
    "max10mWindGust": 7.72,
    "significantWeatherCode": 7,
    "totalPrecipAmount": 0,
    "totalSnowAmount": 0,
    "windSpeed10m": 3.6,
    "windDirectionFrom10m": 255,
    "windGustSpeed10m": 6.1,
    "visibility": 21500,
    "mslp": 101570,
    "screenRelativeHumidity": 68,
    "feelsLikeTemp": 16.92,
    "uvIndex": 4,
    "probOfPrecipitation": 6,
    "probOfSnow": 0,
    "probOfHeavySnow": 0,
    "probOfRain": 6,
    "probOfHeavyRain": 2,
    "probOfHail": 0,
    "probOfSferics": 0,
}

DAILY_ENTRY: Dict[str, Any] = {
    "time": "2023-07-06T00:00Z",
    "midday10MWindSpeed": 3.33,
    "midnight10MWindSpeed": 1.97,
    "midday10MWindDirection": 261,
    "midnight10MWindDirection": 243,
    "midday10MWindGust": 6.51,
    "midnight10MWindGust": 4.39,
    "middayVisibility": 23100,
    "midnightVisibility": 17300,
    "middayRelativeHumidity": 62.5,
    "midnightRelativeHumidity": 84.9,
    "middayMslp": 101560,
    "midnightMslp": 101510,
    "maxUvIndex": 5,
    "daySignificantWeatherCode": 3,
    "nightSignificantWeatherCode": 2,
    "dayMaxScreenTemperature": 20.87,
    "nightMinScreenTemperature": 12.19,
    "dayUpperBoundMaxTemp": 22.87,
    "nightUpperBoundMinTemp": 14.69,
    "dayLowerBoundMaxTemp": 18.87,
    "nightLowerBoundMinTemp": 10.29,
    "dayMaxFeelsLikeTemp": 20.13,
    "nightMinFeelsLikeTemp": 11.71,
    "dayUpperBoundMaxFeelsLikeTemp": 21.83,
    "nightUpperBoundMinFeelsLikeTemp": 14.11,
    "dayLowerBoundMaxFeelsLikeTemp": 17.93,
    "nightLowerBoundMinFeelsLikeTemp": 9.61,
    "dayProbabilityOfPrecipitation": 10,
    "nightProbabilityOfPrecipitation": 8,
    "dayProbabilityOfSnow": 0,
    "nightProbabilityOfSnow": 0,
    "dayProbabilityOfHeavySnow": 0,
    "nightProbabilityOfHeavySnow": 0,
    "dayProbabilityOfRain": 10,
    "nightProbabilityOfRain": 8,
    "dayProbabilityOfHeavyRain": 4,
    "nightProbabilityOfHeavyRain": 3,
    "dayProbabilityOfHail": 0,
    "nightProbabilityOfHail": 0,
    "dayProbabilityOfSferics": 1,
    "nightProbabilityOfSferics": 0,
}

# Day fields the provider leaves out for a day that has already started
PAST_DAY_MISSING = (
    "maxUvIndex",
    "daySignificantWeatherCode",
    "dayMaxFeelsLikeTemp",
    "dayProbabilityOfPrecipitation",
    "dayProbabilityOfSnow",
    "dayProbabilityOfHeavySnow",
    "dayProbabilityOfRain",
    "dayProbabilityOfHeavyRain",
    "dayProbabilityOfHail",
    "dayProbabilityOfSferics",
)


def _entry(template: Dict[str, Any], drop: tuple, overrides: Dict[str, Any]) -> Dict[str, Any]:
    entry = copy.deepcopy(template)
    for name in drop:
        entry.pop(name, None)
    entry.update(overrides)
    return entry


@pytest.fixture
def hourly_entry() -> Callable[..., Dict[str, Any]]:
    """Factory for a raw hourly entry; keyword arguments override fields."""

    def make(*, drop: tuple = (), **overrides: Any) -> Dict[str, Any]:
        return _entry(HOURLY_ENTRY, drop, overrides)

    return make


@pytest.fixture
def three_hourly_entry() -> Callable[..., Dict[str, Any]]:
    """Factory for a raw three-hourly entry."""

    def make(*, drop: tuple = (), **overrides: Any) -> Dict[str, Any]:
        return _entry(THREE_HOURLY_ENTRY, drop, overrides)

    return make


@pytest.fixture
def daily_entry() -> Callable[..., Dict[str, Any]]:
    """Factory for a raw daily entry.

    ``past=True`` removes the fields the provider omits for a day that is
    already under way.
    """

    def make(*, past: bool = False, drop: tuple = (), **overrides: Any) -> Dict[str, Any]:
        if past:
            drop = tuple(drop) + PAST_DAY_MISSING
        return _entry(DAILY_ENTRY, drop, overrides)

    return make


@pytest.fixture
def feature_collection() -> Callable[..., Dict[str, Any]]:
    """Factory wrapping a time series in the DataHub GeoJSON envelope."""

    def make(
        series: List[Dict[str, Any]],
        *,
        coordinates: Optional[List[float]] = None,
        name: str = "Exeter",
        distance: float = 27.9057,
        model_run: str = "2023-07-05T10:00Z",
    ) -> Dict[str, Any]:
        return {
            "type": "FeatureCollection",
            "features": [
                {
                    "type": "Feature",
                    "geometry": {
                        "type": "Point",
                        "coordinates": coordinates if coordinates is not None else [-3.474, 50.727, 27.0],
                    },
                    "properties": {
                        "location": {"name": name},
                        "requestPointDistance": distance,
                        "modelRunDate": model_run,
                        "timeSeries": series,
                    },
                }
            ],
            "parameters": [{}],
        }

    return make


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the saved sample payloads."""
    return FIXTURES_DIR


@pytest.fixture
def hourly_payload() -> bytes:
    """49-entry hourly sample; the last three entries lack the trailing-hour fields."""
    return (FIXTURES_DIR / "hourly.json").read_bytes()


@pytest.fixture
def three_hourly_payload() -> bytes:
    return (FIXTURES_DIR / "three_hourly.json").read_bytes()


@pytest.fixture
def daily_payload() -> bytes:
    """8-entry daily sample whose first day is already under way."""
    return (FIXTURES_DIR / "daily.json").read_bytes()


@pytest.fixture
def clean_env(monkeypatch, tmp_path) -> None:
    """Remove metoffice-spot env vars and step away from any local .env file."""
    env_vars = [
        "MET_OFFICE_DATAHUB_KEY",
        "LOG_LEVEL",
        "DEFAULT_GRANULARITY",
        "NO_COLOR",
        "FORCE_COLOR",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test load settings from its own environment."""
    reset_settings()
    yield
    reset_settings()
