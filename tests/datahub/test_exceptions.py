from __future__ import annotations

import pytest

from metoffice_spot.datahub.exceptions import (
    ForecastError,
    GeographicBoundsError,
    SchemaError,
    UnknownConditionError,
)
from metoffice_spot.datahub.granularity import Granularity


class TestExceptionHierarchy:
    @pytest.mark.parametrize("error_cls", [SchemaError, GeographicBoundsError, UnknownConditionError])
    def test_all_are_forecast_errors(self, error_cls):
        assert issubclass(error_cls, ForecastError)

    def test_schema_error_keeps_source(self):
        cause = ValueError("bad payload")
        error = SchemaError("Invalid hourly forecast payload", source=cause)
        assert error.source is cause
        assert str(error) == "Invalid hourly forecast payload"

    def test_bounds_error_attributes(self):
        error = GeographicBoundsError("latitude", 91.0)
        assert error.axis == "latitude"
        assert error.value == 91.0
        assert str(error) == "latitude 91.0 is out of bounds"

    def test_unknown_condition_message(self):
        assert str(UnknownConditionError(4)) == "Unknown significant weather code: 4"


class TestGranularity:
    @pytest.mark.parametrize(
        "segment, member",
        [("hourly", Granularity.HOURLY), ("three-hourly", Granularity.THREE_HOURLY), ("daily", Granularity.DAILY)],
    )
    def test_parse_path_segment(self, segment, member):
        assert Granularity(segment) is member

    def test_closed_set(self):
        assert len(Granularity) == 3
        with pytest.raises(ValueError):
            Granularity("weekly")

    def test_str_is_segment(self):
        assert str(Granularity.THREE_HOURLY) == "three-hourly"
        assert f"{Granularity.DAILY}" == "daily"
