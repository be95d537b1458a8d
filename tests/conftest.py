import pytest

from awair_influx.shared.config import AwairConfig, Config, InfluxConfig

ENV_VARIABLES = (
    "AWAIR_API_KEY",
    "AWAIR_DEVICE_TYPE",
    "AWAIR_DEVICE_ID",
    "AWAIR_API_BASE",
    "AWAIR_PERIOD_SECONDS",
    "AWAIR_INFLUX_CONFIG",
    "INFLUXDB_URL",
    "INFLUXDB_DATABASE",
    "INFLUXDB_USERNAME",
    "INFLUXDB_PASSWORD",
    "LOG_LEVEL",
)


@pytest.fixture
def sample_payload():
    return {
        "data": [
            {
                "timestamp": "2024-01-01T00:00:00Z",
                "score": 80.0,
                "sensors": [{"comp": "temp", "value": 21.5}],
                "indices": [{"comp": "co2", "value": 450.0}],
            }
        ]
    }


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every exporter variable so tests start from a blank environment."""
    for name in ENV_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def awair_config():
    return AwairConfig(
        api_key="secret-key",
        device_type="awair-element",
        device_id="1234",
    )


@pytest.fixture
def influx_config():
    return InfluxConfig(url="http://influx:8086", database="telemetry")


@pytest.fixture
def config(awair_config, influx_config):
    return Config(awair=awair_config, influx=influx_config)
