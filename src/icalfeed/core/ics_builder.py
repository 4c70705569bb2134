"""iCalendar feed rendering."""

import logging
from collections import OrderedDict
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from icalfeed.config.constants import (
    CACHE_CONTROL,
    CONTENT_DISPOSITION,
    CONTENT_TYPE,
    EXPIRES_IN_PAST,
    ICS_LINE_BREAK,
    ICS_VERSION,
    UTC_TIMEZONE_LINES,
)
from icalfeed.core.event_model import EventRecord, FeedMetadata
from icalfeed.core.text_format import format_datetime, format_text
from icalfeed.core.timezone_utils import Instant, now_utc, to_utc

logger = logging.getLogger(__name__)

EventInput = Union[EventRecord, Mapping[str, Any]]


def render(
    events: Mapping[Any, EventInput],
    title: str,
    namespace: str,
    application_name: str,
    now: Optional[Instant] = None,
) -> Tuple[str, Dict[str, str]]:
    """Render events into an iCalendar document.

    Args:
        events: Ordered mapping of event id to EventRecord (or a plain dict
            accepted by EventRecord.from_dict). Output follows its order.
        title: Calendar display name and description.
        namespace: Vendor/organisation part of the PRODID.
        application_name: Product part of the PRODID.
        now: Optional DTSTAMP instant; defaults to the current UTC time.

    Returns:
        Tuple of (document, headers). The document uses CRLF line endings;
        headers are meant for the caller's HTTP response.

    Raises:
        MissingFieldError: If a dict event lacks a required field.
        TimeConversionError: If a time value cannot be interpreted.
    """
    metadata = FeedMetadata(
        title=title,
        namespace=namespace,
        application_name=application_name,
    )
    return render_feed(events, metadata, now=now)


def render_feed(
    events: Mapping[Any, EventInput],
    metadata: FeedMetadata,
    now: Optional[Instant] = None,
) -> Tuple[str, Dict[str, str]]:
    """Render events using a FeedMetadata instance. See render()."""
    lines = build_calendar_lines(events, metadata, now=now)
    ical = ICS_LINE_BREAK.join(lines)
    return ical, response_headers()


def build_calendar_lines(
    events: Mapping[Any, EventInput],
    metadata: FeedMetadata,
    now: Optional[Instant] = None,
) -> List[str]:
    """Build the content lines of the calendar, before joining with CRLF.

    Folded values contain their own CRLF + space continuations.
    """
    records = _normalize_events(events)
    stamp = format_datetime(now_utc() if now is None else to_utc(now))

    lines = [
        "BEGIN:VCALENDAR",
        f"VERSION:{ICS_VERSION}",
        f"PRODID:{metadata.prodid}",
        f"X-WR-CALNAME:{format_text(metadata.title)}",
        # Google Calendar ignores X-WR-CALNAME
        f"X-WR-CALDESC:{format_text(metadata.title)}",
    ]
    lines.extend(UTC_TIMEZONE_LINES)

    for record in records:
        lines.extend(_event_lines(record, stamp))

    lines.append("END:VCALENDAR")

    logger.debug("Rendered %d event(s) for feed '%s'", len(records), metadata.title)
    return lines


def response_headers() -> Dict[str, str]:
    """Return the HTTP headers that should accompany a rendered feed."""
    return OrderedDict(
        [
            ("Content-Type", CONTENT_TYPE),
            ("Content-Disposition", CONTENT_DISPOSITION),
            ("Cache-Control", CACHE_CONTROL),
            ("Expires", EXPIRES_IN_PAST),
        ]
    )


def _normalize_events(events: Mapping[Any, EventInput]) -> List[EventRecord]:
    """Convert the input mapping into EventRecords, keeping its order.

    The mapping key always becomes the record id. Every event is validated
    before any output is produced.
    """
    records = []
    for event_id, event in events.items():
        if isinstance(event, EventRecord):
            # The mapping key is the UID, as for plain dict events
            if event.id != str(event_id):
                event = replace(event, id=str(event_id))
            records.append(event)
        else:
            records.append(EventRecord.from_dict(event_id, event))
    return records


def _event_lines(record: EventRecord, stamp: str) -> List[str]:
    lines = [
        "BEGIN:VEVENT",
        f"DTSTAMP:{stamp}",
        f"UID:{record.id}",
        f"SUMMARY:{format_text(record.title)}",
        f"STATUS:{record.status}",
        f"DTSTART:{format_datetime(record.start_time)}",
        f"DTEND:{format_datetime(record.end_time)}",
        f"LOCATION:{format_text(record.location)}",
    ]
    if record.url:
        lines.append(f"URL:{format_text(record.url)}")
    if record.description:
        description = format_text(record.description)
        lines.append(f"COMMENT:{description}")
        # Google Calendar ignores COMMENT
        lines.append(f"DESCRIPTION:{description}")
    lines.append("END:VEVENT")
    return lines
