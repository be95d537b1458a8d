"""Base class for air-data readers."""

from abc import ABC, abstractmethod
from datetime import datetime

from awair_influx.shared.models import AirDataResponse


class AirDataReader(ABC):
    """Base class for all air-data readers."""

    @abstractmethod
    async def get_air_data(self, lower: datetime, upper: datetime) -> AirDataResponse:
        """Get every data point recorded between ``lower`` and ``upper``."""
        pass
