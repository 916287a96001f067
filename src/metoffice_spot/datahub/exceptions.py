"""Custom exceptions for Met Office DataHub forecast parsing."""
from __future__ import annotations
from typing import Optional


class ForecastError(Exception):
    """Base exception for all forecast parsing and validation errors."""
    pass


class SchemaError(ForecastError):
    """Payload does not match the expected DataHub JSON shape."""

    def __init__(self, message: str, *, source: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.source = source


class GeographicBoundsError(ForecastError, ValueError):
    """Latitude or longitude outside its valid range."""

    def __init__(self, axis: str, value: float) -> None:
        super().__init__(f"{axis} {value!r} is out of bounds")
        self.axis = axis
        self.value = value


class UnknownConditionError(ForecastError, ValueError):
    """Significant weather code outside the known set."""

    def __init__(self, code: object) -> None:
        super().__init__(f"Unknown significant weather code: {code!r}")
        self.code = code


__all__ = [
    "ForecastError",
    "SchemaError",
    "GeographicBoundsError",
    "UnknownConditionError",
]
