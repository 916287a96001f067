"""Forecast time granularities offered by the Global Spot endpoint."""
from __future__ import annotations
from enum import Enum


class Granularity(str, Enum):
    """Closed set of forecast time periods.

    The value is the endpoint path segment for the period, so
    ``Granularity("three-hourly")`` also parses CLI input.
    """

    HOURLY = "hourly"
    THREE_HOURLY = "three-hourly"
    DAILY = "daily"

    def __str__(self) -> str:
        return self.value


__all__ = ["Granularity"]
