"""entity-timestamps: change timestamps for entity fields without bookkeeping code.

Usage:
    from entity_timestamps import Timestamps, tracked, only_when_it_changes_to

    class Ticket:
        title = tracked()
        status = tracked()

        def __init__(self, title: str, status: str, timestamps: Timestamps | None = None):
            self.timestamps = timestamps if timestamps is not None else Timestamps.new()
            self.title = self.timestamps.track(title)
            self.status = self.timestamps.track(
                status, "closed_at", only_when_it_changes_to("closed")
            )

    ticket = Ticket("Broken build", "open")
    ticket.title = "Broken nightly build"
    ticket.status = "closed"

    ticket.timestamps.created_at
    ticket.timestamps.updated_at
    ticket.timestamps["title"]
    ticket.timestamps["closed_at"]
"""

__version__ = "0.1.0"

# Configuration
from entity_timestamps.config import TimestampSettings, default_clock, get_settings

# Core primitives
from entity_timestamps.core import (
    ChangePredicate,
    Clock,
    FieldBindingError,
    TimestampError,
    TimestampRegistry,
    Timestamps,
    TrackedField,
    UnboundFieldError,
    always,
    local_now,
    only_when_changed,
    only_when_it_changes_to,
    tracked,
    utc_now,
)

# Persistence
from entity_timestamps.persistence import TimestampRecord

__all__ = [
    # Version
    "__version__",
    # Core
    "Timestamps",
    "TimestampRegistry",
    "TrackedField",
    "tracked",
    "always",
    "only_when_changed",
    "only_when_it_changes_to",
    "Clock",
    "ChangePredicate",
    "utc_now",
    "local_now",
    # Errors
    "TimestampError",
    "UnboundFieldError",
    "FieldBindingError",
    # Persistence
    "TimestampRecord",
    # Configuration
    "TimestampSettings",
    "get_settings",
    "default_clock",
]
