"""Air-data readers."""

from .base import AirDataReader
from .awair import AwairReader

__all__ = [
    "AirDataReader",
    "AwairReader",
]
