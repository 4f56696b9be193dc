"""Timestamp registry: creation, update and per-field change times for one entity.

Usage:
    class Order:
        status = tracked()

        def __init__(self, status: str, timestamps: Timestamps | None = None) -> None:
            self.timestamps = timestamps if timestamps is not None else Timestamps.new()
            self.status = self.timestamps.track(status, "shipped_at", only_when_it_changes_to("shipped"))

    order = Order("new")
    order.status = "shipped"
    order.timestamps.created_at
    order.timestamps.updated_at
    order.timestamps["shipped_at"]
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from datetime import datetime
from typing import TYPE_CHECKING

from entity_timestamps.core.field.predicates import always
from entity_timestamps.core.types import ChangePredicate, Clock
from entity_timestamps.persistence.models import TimestampRecord

if TYPE_CHECKING:
    from entity_timestamps.core.field.wrapper import TrackedField

logger = logging.getLogger(__name__)


def _resolve_clock(clock: Clock | None) -> Clock:
    if clock is not None:
        return clock
    # Late import to avoid circular dependency
    from entity_timestamps.config import default_clock

    return default_clock()


class Timestamps(Mapping[str, datetime]):
    """Change timestamps for a single entity instance.

    Behaves as a read-only mapping from timestamp name to the instant of the
    last significant write recorded under that name. Only tracked fields bound
    to this registry mutate it.

    Use `Timestamps.new()` for a fresh entity and `Timestamps.rehydrate()` to
    rebuild one from stored data; calling the constructor directly hands
    ownership of `fields` to the registry without copying.

    A registry is always truthy, even with no field timestamps. Two
    registries are equal when their creation time, update time and field
    timestamps all match; registries are mutable and therefore unhashable.

    Attributes:
        clock: Callable read at every significant write.
    """

    __slots__ = ("_fields", "_created_at", "_updated_at", "clock")

    def __init__(
        self,
        fields: dict[str, datetime],
        created_at: datetime,
        updated_at: datetime | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._fields = fields
        self._created_at = created_at
        self._updated_at = created_at if updated_at is None else updated_at
        self.clock: Clock = _resolve_clock(clock)

    @classmethod
    def new(cls, clock: Clock | None = None) -> Timestamps:
        """Create an empty registry with creation and update time set to now.

        Args:
            clock: Clock for this registry. Defaults to the configured clock.

        Returns:
            Registry with `created_at == updated_at` and no field timestamps.
        """
        clock = _resolve_clock(clock)
        return cls({}, created_at=clock(), clock=clock)

    @classmethod
    def rehydrate(
        cls,
        fields: Mapping[str, datetime],
        created_at: datetime,
        updated_at: datetime,
        clock: Clock | None = None,
    ) -> Timestamps:
        """Rebuild a registry from previously stored timestamps.

        Values are taken verbatim. Nothing checks that `updated_at` is
        consistent with `created_at` or with the field timestamps.

        Args:
            fields: Stored field timestamps. Copied, never retained.
            created_at: Stored creation time.
            updated_at: Stored last-update time.
            clock: Clock for future writes. Defaults to the configured clock.

        Returns:
            Registry reproducing the stored state.
        """
        logger.debug(
            "Rehydrating timestamps: created_at=%s updated_at=%s fields=%d",
            created_at,
            updated_at,
            len(fields),
        )
        return cls(dict(fields), created_at=created_at, updated_at=updated_at, clock=clock)

    @classmethod
    def from_record(cls, record: TimestampRecord, clock: Clock | None = None) -> Timestamps:
        """Rehydrate from a `TimestampRecord` produced by `snapshot()`."""
        return cls.rehydrate(record.fields, record.created_at, record.updated_at, clock=clock)

    @property
    def created_at(self) -> datetime:
        """When the entity was created."""
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        """The most recent time any tracked field had a significant write."""
        return self._updated_at

    def __getitem__(self, key: str) -> datetime:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __bool__(self) -> bool:
        # A registry with no field timestamps is still a registry
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timestamps):
            return NotImplemented
        return (
            self._created_at == other._created_at
            and self._updated_at == other._updated_at
            and self._fields == other._fields
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Timestamps(created_at={self._created_at!r}, "
            f"updated_at={self._updated_at!r}, fields={self._fields!r})"
        )

    def snapshot(self) -> TimestampRecord:
        """Copy the current state out for persistence.

        Returns:
            Record whose field map is independent of this registry.
        """
        return TimestampRecord(
            fields=dict(self._fields),
            created_at=self._created_at,
            updated_at=self._updated_at,
        )

    def track[T](
        self,
        initial_value: T,
        timestamp_name: str | None = None,
        track_change: ChangePredicate[T] = always,
    ) -> TrackedField[T]:
        """Create a tracker for one field of the owning entity.

        Creating the tracker records nothing; only later writes can.

        Args:
            initial_value: The field's starting value.
            timestamp_name: Key for this field's timestamp. If None, the
                attribute name the tracker is bound to is used instead.
            track_change: Called as `track_change(old, new)` on every write;
                the write is recorded only when it returns True.

        Returns:
            TrackedField bound to this registry.
        """
        # Late import to avoid circular dependency
        from entity_timestamps.core.field.wrapper import TrackedField

        return TrackedField(self, initial_value, timestamp_name, track_change)

    def _mark_field_updated(self, key: str, at: datetime) -> None:
        """Record a significant write. Only TrackedField calls this."""
        self._fields[key] = at
        self._updated_at = at
        logger.debug("Recorded %r at %s", key, at)


TimestampRegistry = Timestamps
