"""Tracked field functionality: wrapper, attribute delegation, and predicates."""

from entity_timestamps.core.field.descriptor import tracked
from entity_timestamps.core.field.predicates import (
    always,
    only_when_changed,
    only_when_it_changes_to,
)
from entity_timestamps.core.field.wrapper import TrackedField

__all__ = [
    # Wrapper
    "TrackedField",
    "tracked",
    # Predicates
    "always",
    "only_when_changed",
    "only_when_it_changes_to",
]
