"""Custom exceptions for icalfeed."""

from icalfeed.exceptions.errors import (
    ICalFeedError,
    MissingFieldError,
    TimeConversionError,
)

__all__ = [
    "ICalFeedError",
    "MissingFieldError",
    "TimeConversionError",
]
