"""Event and feed data models."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from icalfeed.config.constants import (
    ICS_PRODID_TEMPLATE,
    STATUS_CONFIRMED,
    STATUS_TENTATIVE,
)
from icalfeed.core.timezone_utils import Instant
from icalfeed.exceptions.errors import MissingFieldError

# Canonical field name -> accepted input keys, in lookup order
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "title": ("title",),
    "start_time": ("startTime", "start_time"),
    "end_time": ("endTime", "end_time", "untilTime"),
    "location": ("location",),
    "is_draft": ("isDraft", "is_draft", "draft"),
    "url": ("url",),
    "description": ("description",),
}

REQUIRED_FIELDS = frozenset({"title", "start_time", "end_time", "location"})


def _lookup(data: Mapping[str, Any], field: str) -> Tuple[bool, Any]:
    for key in FIELD_ALIASES[field]:
        if key in data:
            return True, data[key]
    return False, None


@dataclass
class EventRecord:
    """A single calendar entry.

    ``id`` is written verbatim as the UID and is never escaped, so it must
    not contain line breaks.
    """

    id: str
    title: str
    start_time: Instant
    end_time: Instant
    location: str = ""
    is_draft: bool = False
    url: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, event_id: Any, data: Mapping[str, Any]) -> "EventRecord":
        """Create an EventRecord from a plain mapping, validating required fields.

        Args:
            event_id: The event's unique id.
            data: Mapping using ``startTime``/``endTime``/``isDraft`` keys
                (``untilTime``, ``draft`` and snake_case spellings are also
                accepted).

        Returns:
            A validated EventRecord instance.

        Raises:
            MissingFieldError: If any required field is absent.
        """
        found = {}
        missing = set()
        for field in FIELD_ALIASES:
            present, value = _lookup(data, field)
            if present:
                found[field] = value
            elif field in REQUIRED_FIELDS:
                missing.add(field)
        if missing:
            raise MissingFieldError(missing_fields=missing, event_id=str(event_id))

        return cls(
            id=str(event_id),
            title=found["title"],
            start_time=found["start_time"],
            end_time=found["end_time"],
            location=found["location"],
            is_draft=bool(found.get("is_draft", False)),
            url=found.get("url"),
            description=found.get("description"),
        )

    @property
    def status(self) -> str:
        return STATUS_TENTATIVE if self.is_draft else STATUS_CONFIRMED


@dataclass(frozen=True)
class FeedMetadata:
    """Feed-level values written into the calendar header."""

    title: str
    namespace: str
    application_name: str

    @property
    def prodid(self) -> str:
        return ICS_PRODID_TEMPLATE.format(
            namespace=self.namespace,
            application_name=self.application_name,
        )
