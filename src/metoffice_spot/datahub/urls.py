"""Query URL builder for the Global Spot point forecast endpoints.

The request itself is made by the caller's HTTP client, which must send the
DataHub key in the ``apikey`` header (see :func:`request_headers`).
"""
from __future__ import annotations
from typing import Dict, List, Tuple, Union
from urllib.parse import urlencode

from .constants import API_KEY_HEADER, DATAHUB_BASE_URL, FIXED_QUERY_PARAMS
from .geo import Latitude, Longitude
from .granularity import Granularity


def endpoint_for(granularity: Union[Granularity, str]) -> str:
    """Return the base endpoint URL for a granularity."""
    return f"{DATAHUB_BASE_URL}/{Granularity(granularity).value}"


def query_params(latitude: Latitude, longitude: Longitude) -> List[Tuple[str, str]]:
    """Build the ordered query parameters for a point forecast request."""
    return [
        ("latitude", str(latitude.value)),
        ("longitude", str(longitude.value)),
        *FIXED_QUERY_PARAMS,
    ]


def url_for_location(
    granularity: Union[Granularity, str],
    latitude: Latitude,
    longitude: Longitude,
) -> str:
    """Build the full query URL for a location.

    Args:
        granularity: Forecast time period, selects the endpoint.
        latitude: Validated latitude.
        longitude: Validated longitude.

    Returns:
        URL including the latitude, longitude and fixed DataHub flags.

    Example:
        >>> url_for_location(Granularity.DAILY, Latitude(50.727), Longitude(-3.474))
        'https://data.hub.api.metoffice.gov.uk/sitespecific/v0/point/daily?latitude=50.727&longitude=-3.474&dataSource=BD1&excludeParameterMetadata=true&includeLocationName=true'
    """
    return f"{endpoint_for(granularity)}?{urlencode(query_params(latitude, longitude))}"


def hourly_url_for_location(latitude: Latitude, longitude: Longitude) -> str:
    return url_for_location(Granularity.HOURLY, latitude, longitude)


def three_hourly_url_for_location(latitude: Latitude, longitude: Longitude) -> str:
    return url_for_location(Granularity.THREE_HOURLY, latitude, longitude)


def daily_url_for_location(latitude: Latitude, longitude: Longitude) -> str:
    return url_for_location(Granularity.DAILY, latitude, longitude)


def request_headers(api_key: str) -> Dict[str, str]:
    """Return request headers for a DataHub call."""
    if not api_key:
        raise ValueError("A DataHub API key is required")
    return {
        API_KEY_HEADER: api_key,
        "Accept": "application/json",
    }


__all__ = [
    "endpoint_for",
    "query_params",
    "url_for_location",
    "hourly_url_for_location",
    "three_hourly_url_for_location",
    "daily_url_for_location",
    "request_headers",
]
