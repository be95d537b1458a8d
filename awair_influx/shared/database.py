"""InfluxDB storage for air-data write records."""

import asyncio
import logging
from typing import List, Sequence

from influxdb_client import Point, WritePrecision
from influxdb_client.client.influxdb_client_async import InfluxDBClientAsync

from .config import InfluxConfig
from .errors import PublishError
from .models import WriteRecord

logger = logging.getLogger(__name__)

MAX_CONCURRENT_WRITES = 10

# InfluxDB 1.8 compatibility endpoints ignore the organisation
_V1_ORG = "-"


def to_point(record: WriteRecord) -> Point:
    """Convert a write record into an influxdb_client Point."""
    point = Point(record.measurement)
    for key, value in record.tags.items():
        point = point.tag(key, value)
    for key, value in record.fields.items():
        point = point.field(key, value)
    return point.time(record.timestamp, WritePrecision.NS)


class InfluxPublisher:
    """Writes records to InfluxDB with a bounded number of writes in flight.

    One client is opened per ``publish`` call and shared by all write tasks.
    """

    def __init__(
        self,
        influx_config: InfluxConfig,
        max_concurrent_writes: int = MAX_CONCURRENT_WRITES,
    ):
        """Initialize the publisher.

        Args:
            influx_config: InfluxDB connection configuration.
            max_concurrent_writes: Upper bound on simultaneous writes.
        """
        if max_concurrent_writes < 1:
            raise ValueError("max_concurrent_writes must be at least 1")
        self.influx_config = influx_config
        self.max_concurrent_writes = max_concurrent_writes

    def _create_client(self) -> InfluxDBClientAsync:
        """Create the async client, with basic auth when a username is set."""
        config = self.influx_config
        if config.username is not None:
            return InfluxDBClientAsync(
                url=config.url,
                token=f"{config.username}:{config.password}",
                org=_V1_ORG,
                auth_basic=True,
            )
        return InfluxDBClientAsync(url=config.url, org=_V1_ORG)

    async def publish(self, records: Sequence[WriteRecord]) -> None:
        """Write every record, one write per record.

        Writes are admitted in record order. After the first failure no
        further writes are admitted; writes already in flight are allowed
        to finish.

        Args:
            records: Records to write.

        Raises:
            PublishError: For the first write that failed.
        """
        if not records:
            logger.debug("No records to publish")
            return

        semaphore = asyncio.Semaphore(self.max_concurrent_writes)
        failures: List[PublishError] = []
        skipped = 0

        async with self._create_client() as client:
            write_api = client.write_api()

            async def write(record: WriteRecord) -> None:
                nonlocal skipped
                async with semaphore:
                    if failures:
                        skipped += 1
                        return
                    try:
                        await write_api.write(
                            bucket=self.influx_config.database,
                            record=to_point(record),
                        )
                    except Exception as e:
                        logger.error(f"Failed to write point at {record.timestamp}: {e}")
                        error = PublishError(
                            f"InfluxDB write failed for point at {record.timestamp}: {e}",
                            record=record,
                        )
                        error.__cause__ = e
                        failures.append(error)

            await asyncio.gather(*(write(record) for record in records))

        if failures:
            if skipped:
                logger.warning(f"Skipped {skipped} writes after the first failure")
            raise failures[0]

        logger.info(f"Wrote {len(records)} points to {self.influx_config.database}")
