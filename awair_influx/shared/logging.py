"""Logging configuration for the export job."""

import logging
import sys
from typing import Iterable, Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# HTTP and InfluxDB clients log every request at DEBUG/INFO
QUIET_LOGGERS = ("aiohttp", "asyncio", "influxdb_client")


def resolve_level(level: Optional[str]) -> int:
    """Map a level name such as 'debug' to its logging constant, defaulting to INFO."""
    if not level:
        return logging.INFO
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: Optional[str] = "INFO",
    stream: TextIO = sys.stderr,
    quiet_loggers: Iterable[str] = QUIET_LOGGERS,
) -> None:
    """Send log records to ``stream`` (stderr by default) at ``level``.

    Safe to call more than once: the job configures a fallback logger
    before its config is loaded and reconfigures it afterwards.

    Args:
        level: Level name, usually ``Config.log_level``.
        stream: Destination for log output.
        quiet_loggers: Third-party loggers held at WARNING unless ``level`` is DEBUG.
    """
    log_level = resolve_level(level)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        stream=stream,
        force=True,
    )

    quiet_level = logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING
    for logger_name in quiet_loggers:
        logging.getLogger(logger_name).setLevel(quiet_level)
