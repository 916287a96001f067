#!/usr/bin/env python3
"""Command line interface for building DataHub URLs and reading saved forecasts.

Examples:
    metoffice-spot url daily --lat 50.727 --lon -3.474
    metoffice-spot parse hourly forecast.json
    metoffice-spot --log-level DEBUG parse daily daily.json --table
"""
from __future__ import annotations
import argparse
import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd
from pydantic import ValidationError

from metoffice_spot.config.settings import LOG_LEVELS, get_settings
from metoffice_spot.datahub import (
    Daily,
    ForecastError,
    Forecast,
    FutureDay,
    GeographicBoundsError,
    Granularity,
    Hourly,
    Latitude,
    Longitude,
    ThreeHourly,
    forecast_to_dataframe,
    format_celsius,
    format_quantity,
    parse_forecast,
    url_for_location,
)
from metoffice_spot.utils.logging_config import configure_logging

LOGGER = logging.getLogger(__name__)

GRANULARITY_CHOICES = [g.value for g in Granularity]


def _parse_latitude(value: str) -> Latitude:
    """Parse a latitude argument in decimal degrees."""
    try:
        return Latitude(float(value))
    except (ValueError, GeographicBoundsError) as exc:
        raise argparse.ArgumentTypeError(
            f"Invalid latitude '{value}'. Expected decimal degrees between -90 and 90"
        ) from exc


def _parse_longitude(value: str) -> Longitude:
    """Parse a longitude argument in decimal degrees."""
    try:
        return Longitude(float(value))
    except (ValueError, GeographicBoundsError) as exc:
        raise argparse.ArgumentTypeError(
            f"Invalid longitude '{value}'. Expected decimal degrees between -180 and 180"
        ) from exc


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser for the metoffice-spot CLI."""
    parser = argparse.ArgumentParser(
        prog="metoffice-spot",
        description="Build Met Office DataHub Global Spot URLs and read saved forecasts.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override LOG_LEVEL from the environment",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    url_parser = subparsers.add_parser("url", help="Print the query URL for a location")
    url_parser.add_argument(
        "granularity",
        nargs="?",
        choices=GRANULARITY_CHOICES,
        help="Forecast time period (default: DEFAULT_GRANULARITY, else hourly)",
    )
    url_parser.add_argument("--lat", type=_parse_latitude, required=True, help="Latitude in decimal degrees")
    url_parser.add_argument("--lon", type=_parse_longitude, required=True, help="Longitude in decimal degrees")

    parse_parser = subparsers.add_parser("parse", help="Parse a saved forecast JSON payload")
    parse_parser.add_argument("granularity", choices=GRANULARITY_CHOICES, help="Forecast time period")
    parse_parser.add_argument("file", type=Path, help="Path to the saved JSON response")
    parse_parser.add_argument(
        "--table",
        action="store_true",
        help="Print every field as a table instead of the summary",
    )
    return parser


def _period_line(prediction) -> str:
    if isinstance(prediction, Hourly):
        return (
            f"{prediction.time:%Y-%m-%d %H:%M}  "
            f"{format_celsius(prediction.temperature, width=5, align='>')}  "
            f"{format_quantity(prediction.precipitation_probability, width=4, align='>')}  "
            f"{format_quantity(prediction.wind_speed, precision=1)} from {prediction.wind_direction}  "
            f"{prediction.conditions}"
        )
    if isinstance(prediction, ThreeHourly):
        return (
            f"{prediction.time:%Y-%m-%d %H:%M}  "
            f"{format_celsius(prediction.temperature_minimum, width=5, align='>')} to "
            f"{format_celsius(prediction.temperature_maximum, width=5, align='>')}  "
            f"{format_quantity(prediction.precipitation_probability, width=4, align='>')}  "
            f"{prediction.conditions}"
        )
    if isinstance(prediction, Daily):
        day = prediction.day
        if isinstance(day, FutureDay):
            day_text = f"{day.conditions}, UV {day.uv_index_maximum} ({day.uv_index_maximum.tier.value})"
        else:
            day_text = "already under way"
        night = prediction.night
        return (
            f"{prediction.time:%Y-%m-%d}  "
            f"high {format_celsius(day.temperature_maximum.most_likely, width=4, align='>')}  "
            f"low {format_celsius(night.temperature_minimum.most_likely, width=4, align='>')}  "
            f"day: {day_text}  night: {night.conditions}"
        )
    raise TypeError(f"Unsupported prediction type {type(prediction).__name__}")


def summarize(forecast: Forecast) -> List[str]:
    """Render a forecast as human-readable lines.

    Args:
        forecast: Parsed forecast of any granularity.

    Returns:
        Header lines (location, station distance, model run) followed by one
        line per prediction.
    """
    lines = [
        forecast.location_label,
        f"Station distance: {forecast.requested_point_distance}",
        f"Model run: {forecast.predictions_made_at:%Y-%m-%d %H:%M} UTC",
        f"{forecast.granularity.value} predictions: {len(forecast.predictions)}",
    ]
    lines.extend(_period_line(p) for p in forecast.predictions)
    return lines


def _run_url(args: argparse.Namespace, default_granularity: Granularity) -> int:
    granularity = Granularity(args.granularity) if args.granularity else default_granularity
    print(url_for_location(granularity, args.lat, args.lon))
    return 0


def _run_parse(args: argparse.Namespace) -> int:
    try:
        payload = args.file.read_bytes()
    except OSError as e:
        LOGGER.error("Cannot read forecast file '%s': %s", args.file, e)
        return 1

    try:
        forecast = parse_forecast(payload, args.granularity)
    except ForecastError as e:
        LOGGER.error("Failed to parse %s forecast '%s': %s", args.granularity, args.file, e)
        return 1

    LOGGER.info(
        "Parsed %d %s predictions for %s",
        len(forecast.predictions),
        forecast.granularity.value,
        forecast.location_name,
    )
    if args.table:
        with pd.option_context("display.max_rows", None, "display.max_columns", None, "display.width", None):
            print(forecast_to_dataframe(forecast).to_string(index=False))
    else:
        print("\n".join(summarize(forecast)))
    return 0


def run_cli(argv: Optional[List[str]] = None) -> int:
    """Execute CLI with given arguments.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Process exit code: 0 on success, 1 if configuration or the forecast
        file is invalid. Argument errors exit with status 2 via argparse.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging(logging.getLevelName(args.log_level or "INFO"))
        LOGGER.error("Invalid configuration: %s", e)
        return 1

    level = logging.getLevelName(args.log_level) if args.log_level else settings.log_level_number
    configure_logging(level)

    if args.command == "url":
        return _run_url(args, settings.default_granularity)
    return _run_parse(args)


def main() -> None:  # pragma: no cover - CLI entrypoint
    """CLI entry point."""
    raise SystemExit(run_cli())


if __name__ == "__main__":  # pragma: no cover - CLI execution path
    main()
