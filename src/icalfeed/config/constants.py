"""Centralized constants for icalfeed.

Wire-format values for the iCalendar document and the HTTP headers that
accompany it.
"""

# iCalendar document constants
ICS_VERSION = "2.0"
ICS_PRODID_TEMPLATE = "-//{namespace}//{application_name}//EN"
ICS_LINE_BREAK = "\r\n"  # RFC 2445 requires CRLF
ICS_FOLD = "\r\n "  # Continuation lines start with whitespace
ICS_WRAP_WIDTH = 74
ICS_DATETIME_FORMAT = "{0.year:04d}{0.month:02d}{0.day:02d}T{0.hour:02d}{0.minute:02d}{0.second:02d}Z"

# Event status values
STATUS_CONFIRMED = "CONFIRMED"
STATUS_TENTATIVE = "TENTATIVE"

# UTC is declared explicitly; it has no daylight component
UTC_TIMEZONE_LINES = (
    "BEGIN:VTIMEZONE",
    "TZID:UTC",
    "TZNAME:UTC",
    "BEGIN:STANDARD",
    "TZOFFSETFROM:+0000",
    "TZOFFSETTO:+0000",
    "END:STANDARD",
    "END:VTIMEZONE",
)

# HTTP response headers for the rendered feed
CONTENT_TYPE = "text/calendar; charset=utf-8"
CONTENT_DISPOSITION = 'inline; filename="calendar.ics"'
CACHE_CONTROL = "no-cache, must-revalidate"
EXPIRES_IN_PAST = "Sat, 26 Jul 1997 05:00:00 GMT"

# Environment variable names for feed defaults
ENV_NAMESPACE = "ICALFEED_NAMESPACE"
ENV_APPLICATION_NAME = "ICALFEED_APPLICATION_NAME"
ENV_TITLE = "ICALFEED_TITLE"
ENV_SITE_URL = "ICALFEED_SITE_URL"

# Defaults used when nothing is configured
DEFAULT_NAMESPACE = "icalfeed"
DEFAULT_APPLICATION_NAME = "icalfeed"
DEFAULT_FEED_TITLE = "Events"

# Instructions panel
ICAL_ICON_PATH = "/images/icons/extras/ical.gif"
