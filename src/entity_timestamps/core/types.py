"""Core type definitions for entity-timestamps."""

from collections.abc import Callable
from datetime import datetime

type Clock = Callable[[], datetime]
"""Zero-argument callable returning the current instant.

Read once per significant write, never cached.
"""

type ChangePredicate[T] = Callable[[T, T], bool]
"""Decides whether a write counts as significant: `(old_value, new_value) -> bool`."""
