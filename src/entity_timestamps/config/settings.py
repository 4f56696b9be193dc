"""Configuration settings using Pydantic Settings.

Selects the default clock used by registries created without an explicit
`clock=` argument.

Usage:
    from entity_timestamps.config import TimestampSettings, default_clock

    # Load from environment variables (TIMESTAMPS_*)
    settings = TimestampSettings()

    # Or override with explicit values
    clock = default_clock(TimestampSettings(timezone_aware=False))
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from entity_timestamps.core.clock import local_now, utc_now
from entity_timestamps.core.types import Clock


class TimestampSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for timestamp registries.

    Attributes:
        timezone_aware: Stamp writes with aware UTC datetimes (True) or
            naive local datetimes (False).

    Environment Variables:
        TIMESTAMPS_TIMEZONE_AWARE
    """

    model_config = SettingsConfigDict(
        env_prefix="TIMESTAMPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    timezone_aware: bool = True


@lru_cache(maxsize=1)
def get_settings() -> TimestampSettings:
    """Return the process-wide settings, loaded on first use."""
    return TimestampSettings()


def default_clock(settings: TimestampSettings | None = None) -> Clock:
    """Resolve the clock a registry uses when none is supplied.

    Args:
        settings: Settings to consult. Defaults to `get_settings()`.

    Returns:
        `utc_now` for timezone-aware settings, `local_now` otherwise.
    """
    settings = settings or get_settings()
    return utc_now if settings.timezone_aware else local_now
