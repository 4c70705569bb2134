"""Explicit UTC conversion of instants.

Every conversion goes through ``pytz.utc`` directly; the process-wide time
zone (``TZ``/``time.tzset``) is never consulted or changed, so callers on
different threads never observe each other's conversions.
"""

import logging
import re
from datetime import date, datetime, time
from typing import Union

import pytz
from dateutil import parser

from icalfeed.exceptions.errors import TimeConversionError

logger = logging.getLogger(__name__)

Instant = Union[int, float, str, date, datetime]

_EPOCH_PATTERN = re.compile(r"^[+-]?\d+(?:\.\d+)?$")


def now_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(pytz.utc)


def attach_utc(naive_dt: datetime) -> datetime:
    """Attach UTC to a naive datetime, or convert an aware one to UTC.

    Args:
        naive_dt: The datetime to normalise.

    Returns:
        A timezone-aware datetime in UTC.
    """
    if naive_dt.tzinfo is None or naive_dt.tzinfo.utcoffset(naive_dt) is None:
        return pytz.utc.localize(naive_dt.replace(tzinfo=None))
    return naive_dt.astimezone(pytz.utc)


def from_epoch(seconds: Union[int, float]) -> datetime:
    """Convert seconds since the Unix epoch to an aware UTC datetime.

    Args:
        seconds: Seconds since 1970-01-01T00:00:00Z.

    Returns:
        A timezone-aware datetime in UTC.

    Raises:
        TimeConversionError: If the value is out of the representable range.
    """
    try:
        return datetime.fromtimestamp(seconds, tz=pytz.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise TimeConversionError(seconds, str(e)) from e


def to_utc(value: Instant) -> datetime:
    """Interpret an instant in any supported representation as UTC.

    Supported inputs are epoch seconds (int, float or an all-digit string),
    datetimes (naive ones are read as UTC), dates (midnight UTC) and any
    string python-dateutil can parse.

    Args:
        value: The instant to convert.

    Returns:
        A timezone-aware datetime in UTC.

    Raises:
        TimeConversionError: If the value cannot be interpreted.
    """
    # bool is an int subclass but never a meaningful timestamp
    if isinstance(value, bool):
        raise TimeConversionError(value, "booleans are not instants")

    if isinstance(value, (int, float)):
        return from_epoch(value)

    if isinstance(value, datetime):
        return attach_utc(value)

    if isinstance(value, date):
        return pytz.utc.localize(datetime.combine(value, time()))

    if isinstance(value, str):
        s = value.strip()
        if _EPOCH_PATTERN.match(s):
            return from_epoch(float(s) if "." in s else int(s))
        try:
            parsed = parser.parse(s)
        except (ValueError, OverflowError) as e:
            logger.debug("Could not parse time string %r: %s", value, e)
            raise TimeConversionError(value, str(e)) from e
        return attach_utc(parsed)

    raise TimeConversionError(value, f"unsupported type {type(value).__name__}")
