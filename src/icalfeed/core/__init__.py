"""Core business logic for icalfeed."""

from icalfeed.core.event_model import EventRecord, FeedMetadata
from icalfeed.core.ics_builder import render, render_feed, response_headers
from icalfeed.core.instructions import instructions_link
from icalfeed.core.text_format import escape_text, format_datetime, format_text
from icalfeed.core.timezone_utils import to_utc

__all__ = [
    "EventRecord",
    "FeedMetadata",
    "render",
    "render_feed",
    "response_headers",
    "instructions_link",
    "escape_text",
    "format_datetime",
    "format_text",
    "to_utc",
]
