"""Core data models for Awair air-data readings."""

import math
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Tuple

from .errors import DecodeError


class MeasurementKind(Enum):
    """Sensor and index kinds reported by Awair devices.

    Member values are the ``comp`` names used in the API payload. Ranges
    below are the documented sensor ranges; they are not enforced.
    """
    TEMPERATURE = "temp"  # degrees Celsius, -40 to 185
    HUMIDITY = "humid"  # relative humidity %, 0 to 100
    CO2 = "co2"  # ppm, 0 to 5000
    VOC = "voc"  # total VOCs in ppb, 20 to 60000
    DUST = "dust"  # aggregate PM in ug/m3, 0 to 250
    PM25 = "pm25"  # PM2.5 in ug/m3, 0 to 1000

    @classmethod
    def from_wire(cls, name: str) -> "MeasurementKind":
        """Look up a kind by its payload name.

        Raises:
            DecodeError: If the name is not a known measurement kind.
        """
        try:
            return cls(name)
        except ValueError:
            raise DecodeError(f"Unknown measurement kind: {name!r}") from None

    @property
    def field_name(self) -> str:
        """Name used for this kind when writing to InfluxDB."""
        return _FIELD_NAMES[self]


_FIELD_NAMES = {
    MeasurementKind.TEMPERATURE: "temperature",
    MeasurementKind.HUMIDITY: "humidity",
    MeasurementKind.CO2: "CO2",
    MeasurementKind.VOC: "VOC",
    MeasurementKind.DUST: "dust",
    MeasurementKind.PM25: "PM25",
}


def _require(data: Any, key: str, context: str) -> Any:
    if not isinstance(data, dict):
        raise DecodeError(f"Expected an object for {context}, got {type(data).__name__}")
    if key not in data:
        raise DecodeError(f"Missing '{key}' in {context}")
    return data[key]


def _as_float(value: Any, context: str) -> float:
    # bool is an int subclass but never a valid reading
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"Expected a number for {context}, got {value!r}")
    try:
        number = float(value)
    except OverflowError:
        raise DecodeError(f"Number out of range for {context}") from None
    if not math.isfinite(number):
        raise DecodeError(f"Expected a finite number for {context}, got {value!r}")
    return number


def _as_list(value: Any, context: str) -> list:
    if not isinstance(value, list):
        raise DecodeError(f"Expected a list for {context}, got {type(value).__name__}")
    return value


# Full date and time with a T separator
_TIMESTAMP_SHAPE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}")


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO 8601 timestamp into an aware UTC datetime."""
    if not isinstance(value, str):
        raise DecodeError(f"Expected a timestamp string, got {value!r}")

    if not _TIMESTAMP_SHAPE.match(value):
        raise DecodeError(f"Invalid timestamp: {value!r}")

    text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise DecodeError(f"Invalid timestamp: {value!r}") from None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass(frozen=True)
class Measurement:
    """A single sensor or index value."""
    kind: MeasurementKind
    value: float

    @classmethod
    def from_dict(cls, data: Any) -> "Measurement":
        """Create a measurement from a ``{"comp": ..., "value": ...}`` object."""
        comp = _require(data, "comp", "measurement")
        if not isinstance(comp, str):
            raise DecodeError(f"Expected a string for 'comp', got {comp!r}")
        return cls(
            kind=MeasurementKind.from_wire(comp),
            value=_as_float(_require(data, "value", "measurement"), f"'{comp}' value"),
        )


@dataclass(frozen=True)
class DataPoint:
    """One timestamped bundle of score, sensor and index readings."""
    timestamp: datetime
    score: float
    sensors: Tuple[Measurement, ...] = ()
    indices: Tuple[Measurement, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "DataPoint":
        return cls(
            timestamp=parse_timestamp(_require(data, "timestamp", "data point")),
            score=_as_float(_require(data, "score", "data point"), "score"),
            sensors=tuple(
                Measurement.from_dict(item)
                for item in _as_list(_require(data, "sensors", "data point"), "sensors")
            ),
            indices=tuple(
                Measurement.from_dict(item)
                for item in _as_list(_require(data, "indices", "data point"), "indices")
            ),
        )


@dataclass(frozen=True)
class AirDataResponse:
    """Decoded body of an air-data/raw response, in delivery order."""
    data: Tuple[DataPoint, ...] = ()

    @classmethod
    def from_dict(cls, payload: Any) -> "AirDataResponse":
        """Decode a full payload.

        Raises:
            DecodeError: On any structural problem; nothing is partially decoded.
        """
        items = _as_list(_require(payload, "data", "response"), "data")
        return cls(data=tuple(DataPoint.from_dict(item) for item in items))


@dataclass(frozen=True)
class WriteRecord:
    """Destination-ready form of a data point."""
    timestamp: datetime
    tags: Dict[str, str] = field(default_factory=dict)
    fields: Dict[str, float] = field(default_factory=dict)
    measurement: str = "awair"
