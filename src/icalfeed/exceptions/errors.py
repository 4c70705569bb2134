"""Exception classes for icalfeed."""

from typing import Any, Iterable, Optional


class ICalFeedError(Exception):
    """Base class for all icalfeed errors."""


class MissingFieldError(ICalFeedError):
    """Raised when an event record lacks one or more required fields."""

    def __init__(self, missing_fields: Iterable[str], event_id: Optional[str] = None):
        self.missing_fields = set(missing_fields)
        self.event_id = event_id
        fields = ", ".join(sorted(self.missing_fields))
        if event_id is not None:
            message = f"Event '{event_id}' is missing required fields: {fields}"
        else:
            message = f"Event is missing required fields: {fields}"
        super().__init__(message)


class TimeConversionError(ICalFeedError):
    """Raised when a value cannot be interpreted as an instant in time."""

    def __init__(self, value: Any, reason: Optional[str] = None):
        self.value = value
        self.reason = reason
        message = f"Cannot convert {value!r} to a UTC datetime"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
