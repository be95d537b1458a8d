from datetime import datetime, timezone
from typing import Optional
import logging

from awair_influx.shared.config import Config
from awair_influx.shared.database import InfluxPublisher
from .readers.awair import AwairReader
from .readers.base import AirDataReader
from .transform import to_write_record
from .window import format_rfc3339, latest_complete_period

logger = logging.getLogger(__name__)


class AirDataCollector:
    """Runs one fetch-transform-publish cycle for the configured device."""

    def __init__(
        self,
        config: Config,
        reader: Optional[AirDataReader] = None,
        publisher: Optional[InfluxPublisher] = None,
    ):
        self.config = config
        self.reader = reader or AwairReader(config.awair)
        self.publisher = publisher or InfluxPublisher(config.influx)

    async def run(self, now: Optional[datetime] = None) -> int:
        """Export the latest complete period and return the number of points written."""
        if now is None:
            now = datetime.now(timezone.utc)

        lower, upper = latest_complete_period(now, self.config.awair.period_seconds)
        logger.info(f"Exporting window {format_rfc3339(lower)} - {format_rfc3339(upper)}")

        response = await self.reader.get_air_data(lower, upper)

        device_id = self.config.awair.device_id
        records = [to_write_record(point, device_id) for point in response.data]

        await self.publisher.publish(records)
        return len(records)
