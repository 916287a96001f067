"""Flatten forecasts into pandas DataFrames.

One row per prediction, in provider order. Unit values become plain
numbers, temperature predictions are split into ``_most_likely``,
``_upper_bound`` and ``_lower_bound`` columns, and conditions become a
description column plus a ``_code`` column. Daily rows get ``day_`` and
``night_`` prefixed columns; future-only day columns are empty for a past
day.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Any, Dict, List

import pandas as pd

from .conditions import Conditions
from .daily import Daily, PastDay
from .forecast import Forecast
from .formatting import UNIT_FORMATS


def _flatten(prefix: str, value: Any, row: Dict[str, Any]) -> None:
    if isinstance(value, Conditions):
        row[prefix] = value.description
        row[f"{prefix}_code"] = value.code
    elif type(value) in UNIT_FORMATS:
        row[prefix] = value.value
    elif is_dataclass(value):
        for field in fields(value):
            _flatten(f"{prefix}_{field.name}", getattr(value, field.name), row)
    else:
        row[prefix] = value


def prediction_to_row(prediction: Any) -> Dict[str, Any]:
    """Flatten a single Hourly, ThreeHourly or Daily prediction."""
    row: Dict[str, Any] = {}
    for field in fields(prediction):
        _flatten(field.name, getattr(prediction, field.name), row)
    if isinstance(prediction, Daily):
        row["day_variant"] = "past" if isinstance(prediction.day, PastDay) else "future"
    return row


def forecast_to_dataframe(forecast: Forecast) -> pd.DataFrame:
    """Build a DataFrame with one row per prediction.

    Args:
        forecast: Parsed forecast of any granularity.

    Returns:
        DataFrame with a ``time`` column first, followed by the flattened
        prediction fields. Empty if the forecast has no predictions.
    """
    rows: List[Dict[str, Any]] = [prediction_to_row(p) for p in forecast.predictions]
    dataframe = pd.DataFrame(rows)
    if dataframe.empty:
        return dataframe

    dataframe.insert(1, "location_name", forecast.location_name)
    dataframe.attrs["granularity"] = forecast.granularity.value
    dataframe.attrs["predictions_made_at"] = forecast.predictions_made_at
    return dataframe


__all__ = ["prediction_to_row", "forecast_to_dataframe"]
