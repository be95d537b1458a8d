"""Exception types raised by the export pipeline."""

from typing import Optional


class AwairInfluxError(Exception):
    """Base class for all pipeline errors."""


class ConfigError(AwairInfluxError):
    """Missing or invalid configuration value."""


class TransportError(AwairInfluxError):
    """The Awair API could not be reached."""


class InvalidResponseError(AwairInfluxError):
    """The Awair API answered with a status other than 200."""

    def __init__(self, status: int, body: Optional[str] = None):
        self.status = status
        self.body = body
        message = f"Invalid response: HTTP {status}"
        if body:
            message = f"{message}: {body}"
        super().__init__(message)


class DecodeError(AwairInfluxError):
    """The Awair payload was malformed or contained an unknown measurement."""


class PublishError(AwairInfluxError):
    """A write to InfluxDB failed."""

    def __init__(self, message: str, record=None):
        self.record = record
        super().__init__(message)
