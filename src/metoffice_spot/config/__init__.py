"""Configuration management for metoffice-spot."""

from __future__ import annotations

from .settings import Settings, get_settings, reset_settings

__all__ = ["Settings", "get_settings", "reset_settings"]
