"""Entry point for running icalfeed as a module.

Usage: python -m icalfeed events.json [--title TITLE] [--output calendar.ics]
"""

import argparse
import json
import logging
import sys
from collections import OrderedDict

from icalfeed.config.settings import load_feed_config
from icalfeed.core.ics_builder import render
from icalfeed.core.instructions import instructions_link
from icalfeed.exceptions.errors import ICalFeedError

logger = logging.getLogger("icalfeed")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="icalfeed",
        description="Render a JSON event list as an iCalendar feed.",
    )
    parser.add_argument("events", nargs="?", help="JSON file mapping event id to event")
    parser.add_argument("--title", help="Calendar title")
    parser.add_argument("--namespace", help="Vendor/organisation part of the PRODID")
    parser.add_argument("--app-name", dest="application_name", help="Product part of the PRODID")
    parser.add_argument("--output", "-o", help="Write the feed here instead of stdout")
    parser.add_argument("--headers", action="store_true", help="Print HTTP headers to stderr")
    parser.add_argument("--instructions", metavar="LINK", help="Print the subscription help panel for LINK")
    parser.add_argument("--extra", metavar="FILE", help="HTML fragment to add to the help panel")
    parser.add_argument("--env", metavar="FILE", help=".env file with feed defaults")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def load_events(path: str) -> "OrderedDict":
    """Load an ordered id -> event mapping from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        events = json.load(f, object_pairs_hook=OrderedDict)
    if not isinstance(events, dict):
        raise ValueError(f"Expected a JSON object of events in {path}, got {type(events).__name__}")
    return events


def main(argv=None) -> int:
    """Main entry point for the command line."""
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = load_feed_config(args.env)

    if args.instructions:
        extra = None
        if args.extra:
            try:
                with open(args.extra, "r", encoding="utf-8") as f:
                    extra = f.read()
            except OSError as e:
                logger.error("Failed to read extra instructions: %s", e)
                return 1
        sys.stdout.write(instructions_link(args.instructions, extra, site_url=config.site_url))
        sys.stdout.write("\n")
        return 0

    if not args.events:
        logger.error("No events file given")
        return 2

    try:
        events = load_events(args.events)
        ical, headers = render(
            events,
            args.title or config.title,
            args.namespace or config.namespace,
            args.application_name or config.application_name,
        )
    except (OSError, ValueError, ICalFeedError) as e:
        logger.error("Failed to render feed: %s", e)
        return 1

    if args.headers:
        for name, value in headers.items():
            sys.stderr.write(f"{name}: {value}\n")

    data = ical.encode("utf-8")
    if args.output:
        with open(args.output, "wb") as f:
            f.write(data)
        logger.info("Wrote %d event(s) to %s", len(events), args.output)
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
