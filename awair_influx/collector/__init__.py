"""Awair to InfluxDB export job."""

import logging

from .collector import AirDataCollector

logger = logging.getLogger(__name__)


def main():
    """Entry point for the export job. Exits 0 on success, 1 on any error."""
    import asyncio
    import sys

    from awair_influx.shared.config import load_config
    from awair_influx.shared.errors import AwairInfluxError, ConfigError
    from awair_influx.shared.logging import setup_logging

    setup_logging()

    try:
        config = load_config()
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    setup_logging(config.log_level)

    collector = AirDataCollector(config)

    try:
        count = asyncio.run(collector.run())
    except AwairInfluxError as e:
        logger.error(f"{type(e).__name__}: {e}")
        sys.exit(1)

    logger.info(f"Exported {count} data points")
    sys.exit(0)


__all__ = ["AirDataCollector", "main"]
