"""Shared utilities for the Awair exporter."""

from .models import AirDataResponse, DataPoint, Measurement, MeasurementKind, WriteRecord
from .database import InfluxPublisher
from .config import AwairConfig, Config, InfluxConfig, load_config
from .logging import setup_logging

__all__ = [
    "AirDataResponse",
    "DataPoint",
    "Measurement",
    "MeasurementKind",
    "WriteRecord",
    "InfluxPublisher",
    "AwairConfig",
    "Config",
    "InfluxConfig",
    "load_config",
    "setup_logging",
]
