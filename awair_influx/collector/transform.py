"""Conversion of Awair data points into InfluxDB write records."""

from typing import Dict

from awair_influx.shared.models import DataPoint, WriteRecord

MEASUREMENT_NAME = "awair"


def to_write_record(data_point: DataPoint, device_id: str) -> WriteRecord:
    """Flatten a data point into a single write record.

    Sensor values become ``<field>.sensor`` fields and index values become
    ``<field>.index`` fields, next to the overall ``score``.
    """
    fields: Dict[str, float] = {"score": data_point.score}

    for measurement in data_point.sensors:
        fields[f"{measurement.kind.field_name}.sensor"] = measurement.value

    for measurement in data_point.indices:
        fields[f"{measurement.kind.field_name}.index"] = measurement.value

    return WriteRecord(
        timestamp=data_point.timestamp,
        tags={"device_id": device_id},
        fields=fields,
        measurement=MEASUREMENT_NAME,
    )
