"""metoffice-spot: typed Met Office DataHub Global Spot forecasts."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
