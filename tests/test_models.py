"""Tests for measurement kinds and payload decoding."""

from datetime import datetime, timezone

import pytest

from awair_influx.shared.errors import DecodeError
from awair_influx.shared.models import (
    AirDataResponse,
    DataPoint,
    Measurement,
    MeasurementKind,
    parse_timestamp,
)

WIRE_NAMES = {
    "temp": MeasurementKind.TEMPERATURE,
    "humid": MeasurementKind.HUMIDITY,
    "co2": MeasurementKind.CO2,
    "voc": MeasurementKind.VOC,
    "dust": MeasurementKind.DUST,
    "pm25": MeasurementKind.PM25,
}


@pytest.mark.parametrize("wire_name,kind", WIRE_NAMES.items())
def test_from_wire_maps_every_supported_name(wire_name, kind):
    assert MeasurementKind.from_wire(wire_name) is kind


def test_every_kind_has_a_wire_name():
    assert set(WIRE_NAMES.values()) == set(MeasurementKind)


def test_field_names_are_distinct():
    names = [kind.field_name for kind in MeasurementKind]

    assert len(set(names)) == len(names)


def test_field_names():
    assert MeasurementKind.TEMPERATURE.field_name == "temperature"
    assert MeasurementKind.HUMIDITY.field_name == "humidity"
    assert MeasurementKind.CO2.field_name == "CO2"
    assert MeasurementKind.VOC.field_name == "VOC"
    assert MeasurementKind.DUST.field_name == "dust"
    assert MeasurementKind.PM25.field_name == "PM25"


def test_unknown_wire_name_fails():
    with pytest.raises(DecodeError, match="lux"):
        MeasurementKind.from_wire("lux")


def test_decode_sample_payload(sample_payload):
    response = AirDataResponse.from_dict(sample_payload)

    assert len(response.data) == 1
    point = response.data[0]
    assert point.timestamp == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert point.score == 80.0
    assert point.sensors == (Measurement(MeasurementKind.TEMPERATURE, 21.5),)
    assert point.indices == (Measurement(MeasurementKind.CO2, 450.0),)


def test_decode_preserves_order():
    payload = {
        "data": [
            {"timestamp": f"2024-01-01T00:0{minute}:00Z", "score": 90, "sensors": [], "indices": []}
            for minute in (3, 1, 2)
        ]
    }

    response = AirDataResponse.from_dict(payload)

    assert [point.timestamp.minute for point in response.data] == [3, 1, 2]


def test_integer_values_become_floats():
    measurement = Measurement.from_dict({"comp": "co2", "value": 612})

    assert measurement.value == 612.0
    assert isinstance(measurement.value, float)


def test_out_of_range_values_pass_through():
    measurement = Measurement.from_dict({"comp": "humid", "value": -5.0})

    assert measurement.value == -5.0


def test_unknown_comp_fails_whole_payload():
    payload = {
        "data": [
            {
                "timestamp": "2024-01-01T00:00:00Z",
                "score": 80.0,
                "sensors": [{"comp": "temp", "value": 21.5}, {"comp": "lux", "value": 3.0}],
                "indices": [],
            }
        ]
    }

    with pytest.raises(DecodeError):
        AirDataResponse.from_dict(payload)


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {},
        {"data": {}},
        {"data": [{"score": 1, "sensors": [], "indices": []}]},
        {"data": [{"timestamp": "2024-01-01T00:00:00Z", "sensors": [], "indices": []}]},
        {"data": [{"timestamp": "2024-01-01T00:00:00Z", "score": 1, "indices": []}]},
        {"data": [{"timestamp": "2024-01-01T00:00:00Z", "score": "high", "sensors": [], "indices": []}]},
        {"data": [{"timestamp": "not a time", "score": 1, "sensors": [], "indices": []}]},
        {"data": [{"timestamp": "2024-01-01T00:00:00Z", "score": 1, "sensors": [{"comp": "temp"}], "indices": []}]},
        {"data": [{"timestamp": "2024-01-01T00:00:00Z", "score": 1, "sensors": [{"value": 1}], "indices": []}]},
        {"data": [{"timestamp": "2024-01-01T00:00:00Z", "score": 1, "sensors": [], "indices": [{"comp": "co2", "value": True}]}]},
    ],
)
def test_structurally_invalid_payloads_fail(payload):
    with pytest.raises(DecodeError):
        AirDataResponse.from_dict(payload)


def test_parse_timestamp_with_milliseconds():
    assert parse_timestamp("2024-01-01T00:00:00.250Z") == datetime(
        2024, 1, 1, 0, 0, 0, 250000, tzinfo=timezone.utc
    )


def test_parse_timestamp_with_offset_is_converted_to_utc():
    assert parse_timestamp("2024-01-01T02:00:00+02:00") == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_parse_timestamp_naive_is_utc():
    assert parse_timestamp("2024-01-01T00:00:00").tzinfo == timezone.utc


def test_data_point_defaults_to_empty_buckets():
    point = DataPoint(timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc), score=50.0)

    assert point.sensors == ()
    assert point.indices == ()


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_values_fail(value):
    with pytest.raises(DecodeError, match="finite"):
        Measurement.from_dict({"comp": "temp", "value": value})


def test_non_finite_score_fails_whole_payload():
    payload = {
        "data": [{"timestamp": "2024-01-01T00:00:00Z", "score": float("nan"), "sensors": [], "indices": []}]
    }

    with pytest.raises(DecodeError):
        AirDataResponse.from_dict(payload)


def test_integer_too_large_for_float_fails():
    payload = {
        "data": [{"timestamp": "2024-01-01T00:00:00Z", "score": 10 ** 400, "sensors": [], "indices": []}]
    }

    with pytest.raises(DecodeError, match="out of range"):
        AirDataResponse.from_dict(payload)


@pytest.mark.parametrize("value", ["2024-01-01", "20240101T000000Z", "2024-01-01 00:00:00Z", "2024-01-01T00:00Z"])
def test_parse_timestamp_requires_full_date_and_time(value):
    with pytest.raises(DecodeError):
        parse_timestamp(value)
