import asyncio
import json
import logging
from datetime import datetime

import aiohttp

from awair_influx.shared.config import AwairConfig
from awair_influx.shared.errors import DecodeError, InvalidResponseError, TransportError
from awair_influx.shared.models import AirDataResponse
from ..window import format_rfc3339
from .base import AirDataReader

logger = logging.getLogger(__name__)

RAW_AIR_DATA_PATH = "/v1/users/self/devices/{device_type}/{device_id}/air-data/raw"


def _reject_constant(name: str):
    # json accepts NaN and Infinity, which are not valid JSON
    raise DecodeError(f"Awair response contains non-JSON number {name}")


class AwairReader(AirDataReader):
    def __init__(self, config: AwairConfig):
        """
        Initialize Awair reader
        Args:
            config: AwairConfig with the API key and the device to read
        """
        self.config = config
        logger.info(f"Initialized AwairReader for {config.device_type}/{config.device_id}")

    @property
    def endpoint(self) -> str:
        """Raw air-data URL for the configured device"""
        path = RAW_AIR_DATA_PATH.format(
            device_type=self.config.device_type,
            device_id=self.config.device_id,
        )
        return f"{self.config.api_base}{path}"

    async def _fetch(self, lower: datetime, upper: datetime) -> str:
        params = {"from": format_rfc3339(lower), "to": format_rfc3339(upper)}
        headers = {"Authorization": f"Bearer {self.config.api_key}"}

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(self.endpoint, params=params, headers=headers) as response:
                    body = await response.text(errors="replace")
                    if response.status != 200:
                        raise InvalidResponseError(response.status, body)
                    return body
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Failed to reach Awair API: {e!r}") from e

    async def get_air_data(self, lower: datetime, upper: datetime) -> AirDataResponse:
        """Fetch and decode the raw air data for one window"""
        logger.debug(f"Fetching data from {format_rfc3339(lower)} to {format_rfc3339(upper)}")
        body = await self._fetch(lower, upper)
        logger.debug(f"Awair response: {body}")

        try:
            payload = json.loads(body, parse_constant=_reject_constant)
        except ValueError as e:
            raise DecodeError(f"Awair response is not valid JSON: {e}") from e

        response = AirDataResponse.from_dict(payload)
        logger.info(f"Got {len(response.data)} data points from Awair")
        return response
