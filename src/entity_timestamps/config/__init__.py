"""Configuration module using Pydantic Settings.

Usage:
    from entity_timestamps.config import TimestampSettings, get_settings

    settings = TimestampSettings(timezone_aware=False)
"""

from entity_timestamps.config.settings import TimestampSettings, default_clock, get_settings

__all__ = [
    "TimestampSettings",
    "default_clock",
    "get_settings",
]
