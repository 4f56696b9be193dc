from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from entity_timestamps.core.errors import FieldBindingError, UnboundFieldError
from entity_timestamps.core.types import ChangePredicate

if TYPE_CHECKING:
    from entity_timestamps.core.registry import Timestamps

logger = logging.getLogger(__name__)


class TrackedField[T]:
    """Holds one field's value and records significant writes in a registry.

    Created by `Timestamps.track()`. Use `read()`/`write()` directly, or
    install it behind a `tracked()` class attribute for plain attribute
    syntax.
    """

    __slots__ = ("_timestamps", "_value", "_timestamp_name", "_track_change", "_name")

    def __init__(
        self,
        timestamps: Timestamps,
        initial_value: T,
        timestamp_name: str | None,
        track_change: ChangePredicate[T],
    ) -> None:
        self._timestamps = timestamps
        self._value = initial_value
        self._timestamp_name = timestamp_name
        self._track_change = track_change
        self._name: str | None = None

    @property
    def timestamps(self) -> Timestamps:
        """Return the registry this field records into."""
        return self._timestamps

    @property
    def name(self) -> str | None:
        """Return the attribute name this field is bound to, if any."""
        return self._name

    @property
    def timestamp_key(self) -> str:
        """Return the key significant writes are recorded under.

        Raises:
            UnboundFieldError: If no timestamp name was given and the field
                was never bound to an attribute.
        """
        key = self._timestamp_name if self._timestamp_name is not None else self._name
        if key is None:
            raise UnboundFieldError(
                "Tracked field has no timestamp name and is not bound to an attribute"
            )
        return key

    @property
    def timestamp(self) -> datetime | None:
        """Return when this field last had a significant write, if ever."""
        return self._timestamps.get(self.timestamp_key)

    def bind(self, name: str) -> None:
        """Bind the field to an attribute name, used as the fallback key.

        Raises:
            FieldBindingError: If already bound to a different name.
        """
        if self._name is not None and self._name != name:
            raise FieldBindingError(
                f"Tracked field already bound to {self._name!r}, cannot rebind to {name!r}"
            )
        self._name = name
        logger.debug("Bound tracked field to %r (key %r)", name, self.timestamp_key)

    def read(self) -> T:
        """Return the current value."""
        return self._value

    def write(self, new_value: T) -> None:
        """Store `new_value`, recording a timestamp if the write is significant.

        The value is always stored. The registry is touched only when the
        change predicate returns True. Predicate errors propagate and leave
        both the value and the registry unchanged.
        """
        old_value = self._value
        significant = self._track_change(old_value, new_value)
        key = self.timestamp_key if significant else None
        self._value = new_value
        if key is None:
            return
        self._timestamps._mark_field_updated(key, self._timestamps.clock())

    def __repr__(self) -> str:
        return f"TrackedField(name={self._name!r}, value={self._value!r})"
