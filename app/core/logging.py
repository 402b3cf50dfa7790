"""Process-wide logging setup."""

import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Send log records to stdout with timestamps.

    The level defaults to `settings.LOG_LEVEL`. Calling this more than once
    is harmless: `basicConfig` leaves an already configured root logger alone.
    """

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        handlers=[console_handler],
    )
