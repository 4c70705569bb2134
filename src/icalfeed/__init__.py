"""
icalfeed - iCalendar feed renderer

Renders event records into an iCalendar (RFC 2445/5545) document with the
HTTP headers to serve it, plus an HTML panel explaining how to subscribe.
"""

__version__ = "1.0.1"

# Public API - import commonly used components
from icalfeed.config.settings import FEED_CONFIG, FeedConfig, load_feed_config
from icalfeed.exceptions.errors import (
    ICalFeedError,
    MissingFieldError,
    TimeConversionError,
)
from icalfeed.core.event_model import EventRecord, FeedMetadata
from icalfeed.core.ics_builder import render, render_feed
from icalfeed.core.instructions import instructions_link
from icalfeed.core.text_format import format_datetime, format_text

__all__ = [
    # Version
    "__version__",
    # Config
    "FEED_CONFIG",
    "FeedConfig",
    "load_feed_config",
    # Exceptions
    "ICalFeedError",
    "MissingFieldError",
    "TimeConversionError",
    # Core
    "EventRecord",
    "FeedMetadata",
    "render",
    "render_feed",
    "instructions_link",
    "format_datetime",
    "format_text",
]
