"""Attribute delegation for tracked fields.

Usage:
    class Entity:
        name = tracked()

        def __init__(self, name: str) -> None:
            self.timestamps = Timestamps.new()
            self.name = self.timestamps.track(name)   # installs, records nothing

    e = Entity("a")
    e.name = "b"                                      # TrackedField.write("b")
    e.timestamps["name"]
"""

from __future__ import annotations

from typing import Any, overload

from entity_timestamps.core.errors import UnboundFieldError
from entity_timestamps.core.field.wrapper import TrackedField


class tracked[T]:  # noqa: N801
    """Class-level descriptor forwarding attribute access to a TrackedField.

    Assigning a TrackedField installs it on the instance and binds it to this
    attribute's name. Any other assignment is a `write()`; reads are `read()`.
    """

    __slots__ = ("name", "_slot")

    def __init__(self) -> None:
        self.name: str | None = None
        self._slot: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self._slot = f"_tracked_{name}"

    @overload
    def __get__(self, instance: None, owner: type | None = None) -> tracked[T]: ...

    @overload
    def __get__(self, instance: object, owner: type | None = None) -> T: ...

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return self.field_of(instance).read()

    def __set__(self, instance: object, value: T | TrackedField[T]) -> None:
        if isinstance(value, TrackedField):
            self._install(instance, value)
            return
        self.field_of(instance).write(value)

    def field_of(self, instance: object) -> TrackedField[T]:
        """Return the TrackedField installed on `instance`.

        Raises:
            UnboundFieldError: If nothing has been installed yet.
        """
        if self._slot is None:
            raise UnboundFieldError("tracked() must be declared as a class attribute")
        field = instance.__dict__.get(self._slot)
        if field is None:
            raise UnboundFieldError(
                f"{type(instance).__name__}.{self.name} has no tracked field installed"
            )
        return field

    def _install(self, instance: object, field: TrackedField[T]) -> None:
        if self.name is None or self._slot is None:
            raise UnboundFieldError("tracked() must be declared as a class attribute")
        field.bind(self.name)
        instance.__dict__[self._slot] = field
