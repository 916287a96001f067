"""Presentation helpers for unit values.

The unit types only know their canonical rendering. Column layout (width,
alignment, precision, explicit sign) is handled here so it stays out of the
domain types.
"""
from __future__ import annotations
from typing import Dict, Optional, Tuple, Type

from .units import (
    Celsius,
    Degrees,
    Metres,
    MetresPerSecond,
    Millimetres,
    MillimetresPerHour,
    Pascals,
    Percentage,
    UvIndex,
)

# Unit suffix and default precision for each unit type
UNIT_FORMATS: Dict[Type, Tuple[str, int]] = {
    Celsius: ("°C", 2),
    Metres: ("m", 0),
    MetresPerSecond: (" m/s", 2),
    Millimetres: (" mm", 2),
    MillimetresPerHour: (" mm/hour", 2),
    Pascals: (" Pa", 0),
    Percentage: ("%", 0),
    Degrees: ("°", 0),
    UvIndex: ("", 0),
}

_ALIGNMENTS = {"<": str.ljust, ">": str.rjust, "^": str.center}


def format_quantity(
    quantity,
    *,
    precision: Optional[int] = None,
    sign: bool = False,
    width: int = 0,
    align: str = "<",
) -> str:
    """Render a unit value with layout options.

    Precision and sign apply to the number; width and alignment apply to
    the whole ``value + suffix`` string.

    Args:
        quantity: Any unit value from :mod:`metoffice_spot.datahub.units`.
        precision: Decimal places (defaults to the unit's canonical precision).
        sign: Always show a sign, as in ``+3°C``.
        width: Minimum total width.
        align: One of ``<``, ``>`` or ``^``.

    Raises:
        TypeError: If ``quantity`` is not a unit value.
        ValueError: If ``align`` is not a valid alignment.
    """
    try:
        suffix, default_precision = UNIT_FORMATS[type(quantity)]
    except KeyError:
        raise TypeError(f"Cannot format {type(quantity).__name__} as a unit value") from None
    pad = _ALIGNMENTS.get(align)
    if pad is None:
        raise ValueError(f"Unsupported alignment {align!r}")

    digits = default_precision if precision is None else precision
    number = f"{quantity.value:+.{digits}f}" if sign else f"{quantity.value:.{digits}f}"
    return pad(number + suffix, width)


def format_celsius(
    temperature: Celsius,
    *,
    precision: int = 0,
    sign: bool = False,
    width: int = 0,
    align: str = "<",
) -> str:
    """Render a temperature for tabular output, whole degrees by default."""
    return format_quantity(temperature, precision=precision, sign=sign, width=width, align=align)


__all__ = ["UNIT_FORMATS", "format_quantity", "format_celsius"]
