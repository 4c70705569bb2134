"""Feed configuration loaded from the environment or a .env file."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import dotenv_values

from icalfeed.config.constants import (
    DEFAULT_APPLICATION_NAME,
    DEFAULT_FEED_TITLE,
    DEFAULT_NAMESPACE,
    ENV_APPLICATION_NAME,
    ENV_NAMESPACE,
    ENV_SITE_URL,
    ENV_TITLE,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedConfig:
    """Feed-level defaults used by the command line entry point."""

    namespace: str = DEFAULT_NAMESPACE
    application_name: str = DEFAULT_APPLICATION_NAME
    title: str = DEFAULT_FEED_TITLE
    site_url: str = ""


# Built-in defaults, used for anything not configured
FEED_CONFIG = FeedConfig()


def load_feed_config(env_path: Optional[Union[str, Path]] = None) -> FeedConfig:
    """Build a FeedConfig from a .env file and the process environment.

    Process environment variables take precedence over the .env file, which
    in turn takes precedence over FEED_CONFIG.

    Args:
        env_path: Optional path to a .env file.

    Returns:
        The resolved FeedConfig.
    """
    values = {}
    if env_path is not None:
        path = Path(env_path)
        if path.exists():
            # Parse without mutating os.environ
            values.update({k: v for k, v in dotenv_values(path).items() if v is not None})
        else:
            logger.warning("Config file %s does not exist, using defaults", path)

    def lookup(name: str, default: str) -> str:
        value = os.environ.get(name) or values.get(name)
        return str(value).strip() if value else default

    return FeedConfig(
        namespace=lookup(ENV_NAMESPACE, FEED_CONFIG.namespace),
        application_name=lookup(ENV_APPLICATION_NAME, FEED_CONFIG.application_name),
        title=lookup(ENV_TITLE, FEED_CONFIG.title),
        site_url=lookup(ENV_SITE_URL, FEED_CONFIG.site_url),
    )

