"""End-to-end parsing of saved DataHub payloads."""

from __future__ import annotations

import datetime as dt
import json
import logging

import pytest

from metoffice_spot.datahub import (
    Conditions,
    Coordinates,
    Daily,
    Forecast,
    FutureDay,
    GeographicBoundsError,
    Granularity,
    Hourly,
    Metres,
    PastDay,
    SchemaError,
    ThreeHourly,
    UnknownConditionError,
    parse_daily,
    parse_forecast,
    parse_hourly,
    parse_three_hourly,
)
from metoffice_spot.datahub.schema import RawHourlyForecast

UTC = dt.timezone.utc


class TestHourlySample:
    def test_envelope(self, hourly_payload):
        forecast = parse_hourly(hourly_payload)

        assert forecast.location_name == "Exeter"
        assert forecast.coordinates == Coordinates.from_lon_lat_alt([-3.474, 50.727, 27.0])
        assert forecast.coordinates.latitude.value == 50.727
        assert forecast.coordinates.longitude.value == -3.474
        assert forecast.requested_point_distance == Metres(27.9057)
        assert forecast.predictions_made_at == dt.datetime(2023, 7, 5, 10, 0, tzinfo=UTC)
        assert forecast.granularity is Granularity.HOURLY

    def test_49_predictions_with_three_incomplete(self, hourly_payload):
        predictions = parse_hourly(hourly_payload).predictions

        assert len(predictions) == 49
        assert all(isinstance(p, Hourly) for p in predictions)
        complete = [p for p in predictions if p.temperature_maximum is not None]
        assert len(complete) == 46
        for prediction in predictions[46:]:
            assert prediction.temperature_maximum is None
            assert prediction.temperature_minimum is None
            assert prediction.wind_gust_hourly_maximum_speed is None
            assert prediction.precipitation_total is None
            assert prediction.snow_total is None

    def test_provider_order_preserved(self, hourly_payload):
        predictions = parse_hourly(hourly_payload).predictions

        assert predictions[0].time == dt.datetime(2023, 7, 5, 10, 0, tzinfo=UTC)
        assert predictions[-1].time == dt.datetime(2023, 7, 7, 10, 0, tzinfo=UTC)
        times = [p.time for p in predictions]
        assert times == sorted(times)

    def test_first_prediction(self, hourly_payload):
        first = parse_hourly(hourly_payload).predictions[0]
        assert first.conditions is Conditions.PARTLY_CLOUDY_DAY
        assert str(first.temperature) == "17.60°C"

    def test_parsing_is_deterministic(self, hourly_payload):
        assert parse_hourly(hourly_payload) == parse_hourly(hourly_payload)

    def test_text_and_bytes_agree(self, hourly_payload):
        from_bytes = Forecast.from_bytes(hourly_payload, Granularity.HOURLY)
        from_text = Forecast.from_text(hourly_payload.decode("utf-8"), Granularity.HOURLY)
        assert from_bytes == from_text

    def test_from_raw(self, hourly_payload):
        raw = RawHourlyForecast.model_validate_json(hourly_payload)
        assert Forecast.from_raw(raw, "hourly") == parse_hourly(hourly_payload)

    def test_location_label(self, hourly_payload):
        forecast = parse_hourly(hourly_payload)
        assert forecast.location_label == "Exeter (50.727° N, 3.474° W 27m)"


class TestThreeHourlySample:
    def test_predictions(self, three_hourly_payload):
        forecast = parse_three_hourly(three_hourly_payload)

        assert forecast.granularity is Granularity.THREE_HOURLY
        assert len(forecast.predictions) == 10
        assert all(isinstance(p, ThreeHourly) for p in forecast.predictions)
        assert forecast.predictions[0].time == dt.datetime(2023, 7, 5, 9, 0, tzinfo=UTC)
        assert forecast.predictions[1].time - forecast.predictions[0].time == dt.timedelta(hours=3)


class TestDailySample:
    def test_first_day_past_rest_future(self, daily_payload):
        forecast = parse_daily(daily_payload)

        assert forecast.granularity is Granularity.DAILY
        assert len(forecast.predictions) == 8
        assert all(isinstance(p, Daily) for p in forecast.predictions)
        assert isinstance(forecast.predictions[0].day, PastDay)
        assert all(isinstance(p.day, FutureDay) for p in forecast.predictions[1:])

    def test_past_day_values(self, daily_payload):
        first = parse_daily(daily_payload).predictions[0]

        assert first.time == dt.datetime(2023, 7, 5, tzinfo=UTC)
        assert first.day.temperature_maximum.most_likely.value == 21.29
        assert first.night.conditions is Conditions.CLEAR_NIGHT


class TestParseForecast:
    @pytest.mark.parametrize("granularity", [Granularity.DAILY, "daily"])
    def test_accepts_enum_or_segment(self, daily_payload, granularity):
        assert parse_forecast(daily_payload, granularity).granularity is Granularity.DAILY

    def test_accepts_bytearray(self, daily_payload):
        assert len(parse_forecast(bytearray(daily_payload), Granularity.DAILY).predictions) == 8

    def test_unknown_granularity(self, daily_payload):
        with pytest.raises(ValueError):
            parse_forecast(daily_payload, "weekly")

    def test_empty_time_series(self, feature_collection):
        forecast = parse_hourly(json.dumps(feature_collection([])))
        assert forecast.predictions == ()

    def test_debug_log(self, hourly_payload, caplog):
        with caplog.at_level(logging.DEBUG, logger="metoffice_spot.datahub.forecast"):
            parse_hourly(hourly_payload)
        assert "49 predictions" in caplog.text


class TestParseFailures:
    def test_invalid_json(self):
        with pytest.raises(SchemaError) as exc_info:
            parse_hourly(b"{not json")
        assert exc_info.value.source is not None
        assert exc_info.value.__cause__ is exc_info.value.source

    def test_wrong_granularity(self, daily_payload):
        with pytest.raises(SchemaError):
            parse_hourly(daily_payload)

    def test_empty_feature_collection(self):
        with pytest.raises(SchemaError):
            parse_daily('{"type": "FeatureCollection", "features": []}')

    def test_missing_location(self, hourly_entry, feature_collection):
        payload = feature_collection([hourly_entry()])
        del payload["features"][0]["properties"]["location"]
        with pytest.raises(SchemaError):
            parse_hourly(json.dumps(payload))

    def test_bad_model_run_date(self, hourly_entry, feature_collection):
        payload = feature_collection([hourly_entry()], model_run="2023-07-05T10:00:00+00:00")
        with pytest.raises(SchemaError):
            parse_hourly(json.dumps(payload))

    def test_out_of_range_latitude(self, hourly_entry, feature_collection):
        payload = feature_collection([hourly_entry()], coordinates=[-3.474, 91.0, 27.0])
        with pytest.raises(GeographicBoundsError) as exc_info:
            parse_hourly(json.dumps(payload))
        assert exc_info.value.axis == "latitude"

    def test_out_of_range_longitude(self, hourly_entry, feature_collection):
        payload = feature_collection([hourly_entry()], coordinates=[-181.0, 50.727, 27.0])
        with pytest.raises(GeographicBoundsError) as exc_info:
            parse_hourly(json.dumps(payload))
        assert exc_info.value.axis == "longitude"

    def test_one_bad_code_fails_whole_series(self, hourly_entry, feature_collection):
        series = [hourly_entry(), hourly_entry(time="2023-07-05T11:00Z", significantWeatherCode=4)]
        with pytest.raises(UnknownConditionError):
            parse_hourly(json.dumps(feature_collection(series)))

    @pytest.mark.parametrize("code", [True, "3", 3.0])
    def test_non_integer_weather_code(self, hourly_entry, feature_collection, code):
        payload = feature_collection([hourly_entry(significantWeatherCode=code)])
        with pytest.raises(SchemaError):
            parse_hourly(json.dumps(payload))

    def test_string_temperature(self, hourly_entry, feature_collection):
        payload = feature_collection([hourly_entry(screenTemperature="17.6")])
        with pytest.raises(SchemaError):
            parse_hourly(json.dumps(payload))

    @pytest.mark.parametrize("code", [True, "2"])
    def test_non_integer_night_code(self, daily_entry, feature_collection, code):
        payload = feature_collection([daily_entry(nightSignificantWeatherCode=code)])
        with pytest.raises(SchemaError):
            parse_daily(json.dumps(payload))

    def test_raw_records_of_other_granularity(self, hourly_payload):
        raw = RawHourlyForecast.model_validate_json(hourly_payload)
        with pytest.raises(SchemaError):
            Forecast.from_raw(raw, Granularity.DAILY)
