"""Change predicates for `Timestamps.track`.

A predicate receives `(old_value, new_value)` and returns True when the
write should be recorded. The stored value is updated either way.
"""

from __future__ import annotations

from typing import Any

from entity_timestamps.core.types import ChangePredicate


def always(old_value: Any, new_value: Any) -> bool:
    """Record every write, including ones that don't change the value."""
    return True


def only_when_changed(old_value: Any, new_value: Any) -> bool:
    """Record writes that change the value; same-value writes are ignored."""
    return old_value != new_value


def only_when_it_changes_to[T](interesting_value: T) -> ChangePredicate[T]:
    """Record a write only when the field changes to `interesting_value`.

    Writing `interesting_value` again while already holding it is not a
    change, and writing any other value is never recorded.

    Args:
        interesting_value: The value whose arrival should be timestamped.

    Returns:
        Predicate suitable for `track_change`.
    """

    def predicate(old_value: T, new_value: T) -> bool:
        return new_value == interesting_value and new_value != old_value

    return predicate
