"""Periodic export of Awair air-quality data to InfluxDB."""

__version__ = "0.1.0"
