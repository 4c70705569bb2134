"""Configuration module for icalfeed."""

from icalfeed.config.settings import FEED_CONFIG, FeedConfig, load_feed_config
from icalfeed.config.constants import (
    CACHE_CONTROL,
    CONTENT_DISPOSITION,
    CONTENT_TYPE,
    EXPIRES_IN_PAST,
    ICS_WRAP_WIDTH,
)

__all__ = [
    "FEED_CONFIG",
    "FeedConfig",
    "load_feed_config",
    "CACHE_CONTROL",
    "CONTENT_DISPOSITION",
    "CONTENT_TYPE",
    "EXPIRES_IN_PAST",
    "ICS_WRAP_WIDTH",
]
