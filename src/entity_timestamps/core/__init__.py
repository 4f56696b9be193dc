"""Core functionality: the timestamp registry and tracked fields.

Architecture Note:
    The registry (registry.py) never refers to the trackers that mutate it;
    field/ depends on the registry, not the other way round. Neither is
    thread-safe: guard an entity with one lock if it is shared.
"""

from entity_timestamps.core.clock import local_now, utc_now
from entity_timestamps.core.errors import FieldBindingError, TimestampError, UnboundFieldError
from entity_timestamps.core.field import (
    TrackedField,
    always,
    only_when_changed,
    only_when_it_changes_to,
    tracked,
)
from entity_timestamps.core.registry import TimestampRegistry, Timestamps
from entity_timestamps.core.types import ChangePredicate, Clock

__all__ = [
    # Types
    "Clock",
    "ChangePredicate",
    # Clocks
    "utc_now",
    "local_now",
    # Registry
    "Timestamps",
    "TimestampRegistry",
    # Field
    "TrackedField",
    "tracked",
    "always",
    "only_when_changed",
    "only_when_it_changes_to",
    # Errors
    "TimestampError",
    "UnboundFieldError",
    "FieldBindingError",
]
