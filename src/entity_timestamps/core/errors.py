"""Exceptions raised by tracked fields and their attribute bindings."""


class TimestampError(Exception):
    """Base class for entity-timestamps errors."""

    pass


class UnboundFieldError(TimestampError, AttributeError):
    """Raised when a field has no timestamp key or no installed tracker."""

    pass


class FieldBindingError(TimestampError):
    """Raised when a tracked field is bound to a second attribute name."""

    pass
