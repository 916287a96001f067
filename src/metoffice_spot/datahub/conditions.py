"""Decoder for the Met Office "significant weather code"."""
from __future__ import annotations
from enum import Enum
from typing import Optional

from .exceptions import UnknownConditionError


class TimeOfDay(str, Enum):
    """Whether a condition code is the daytime or nighttime variant."""

    DAY = "day"
    NIGHT = "night"


class Conditions(Enum):
    """Most significant weather conditions at a forecast time.

    Each member's value is the provider code. Codes that differ only by
    happening at night or during the day are separate members sharing a
    description and tagged with a :class:`TimeOfDay`. Code 4 is not used
    by the provider.
    """

    TRACE_RAIN = (-1, "Trace of rain", None)
    CLEAR_NIGHT = (0, "Clear", TimeOfDay.NIGHT)
    SUNNY_DAY = (1, "Sunny", TimeOfDay.DAY)
    PARTLY_CLOUDY_NIGHT = (2, "Partly cloudy", TimeOfDay.NIGHT)
    PARTLY_CLOUDY_DAY = (3, "Partly cloudy", TimeOfDay.DAY)
    MIST = (5, "Mist", None)
    FOG = (6, "Fog", None)
    CLOUDY = (7, "Cloudy", None)
    OVERCAST = (8, "Overcast", None)
    LIGHT_RAIN_SHOWER_NIGHT = (9, "Light rain shower", TimeOfDay.NIGHT)
    LIGHT_RAIN_SHOWER_DAY = (10, "Light rain shower", TimeOfDay.DAY)
    DRIZZLE = (11, "Drizzle", None)
    LIGHT_RAIN = (12, "Light rain", None)
    HEAVY_RAIN_SHOWER_NIGHT = (13, "Heavy rain shower", TimeOfDay.NIGHT)
    HEAVY_RAIN_SHOWER_DAY = (14, "Heavy rain shower", TimeOfDay.DAY)
    HEAVY_RAIN = (15, "Heavy rain", None)
    SLEET_SHOWER_NIGHT = (16, "Sleet shower", TimeOfDay.NIGHT)
    SLEET_SHOWER_DAY = (17, "Sleet shower", TimeOfDay.DAY)
    SLEET = (18, "Sleet", None)
    HAIL_SHOWER_NIGHT = (19, "Hail shower", TimeOfDay.NIGHT)
    HAIL_SHOWER_DAY = (20, "Hail shower", TimeOfDay.DAY)
    HAIL = (21, "Hail", None)
    LIGHT_SNOW_SHOWER_NIGHT = (22, "Light snow shower", TimeOfDay.NIGHT)
    LIGHT_SNOW_SHOWER_DAY = (23, "Light snow shower", TimeOfDay.DAY)
    LIGHT_SNOW = (24, "Light snow", None)
    HEAVY_SNOW_SHOWER_NIGHT = (25, "Heavy snow shower", TimeOfDay.NIGHT)
    HEAVY_SNOW_SHOWER_DAY = (26, "Heavy snow shower", TimeOfDay.DAY)
    HEAVY_SNOW = (27, "Heavy snow", None)
    THUNDER_SHOWER_NIGHT = (28, "Thunder shower", TimeOfDay.NIGHT)
    THUNDER_SHOWER_DAY = (29, "Thunder shower", TimeOfDay.DAY)
    THUNDER = (30, "Thunder", None)

    def __new__(cls, code: int, description: str, time_of_day: Optional[TimeOfDay]) -> "Conditions":
        member = object.__new__(cls)
        member._value_ = code
        member.description = description
        member.time_of_day = time_of_day
        return member

    @property
    def code(self) -> int:
        return self._value_

    @classmethod
    def from_code(cls, code: int) -> "Conditions":
        """Decode a significant weather code.

        Args:
            code: Provider code, -1 to 30 excluding 4.

        Returns:
            The matching member.

        Raises:
            UnknownConditionError: If the code is not in the table.
        """
        # bool is an int subclass but never a valid code
        if isinstance(code, bool) or not isinstance(code, int):
            raise UnknownConditionError(code)
        try:
            return cls(code)
        except ValueError:
            raise UnknownConditionError(code) from None

    def __str__(self) -> str:
        return self.description


__all__ = ["TimeOfDay", "Conditions"]
