"""Configuration loading utilities."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml
from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError

DEFAULT_API_BASE = "https://developer-apis.awair.is"
DEFAULT_PERIOD_SECONDS = 300

REQUIRED_VARIABLES = (
    "AWAIR_API_KEY",
    "AWAIR_DEVICE_TYPE",
    "AWAIR_DEVICE_ID",
    "INFLUXDB_URL",
    "INFLUXDB_DATABASE",
)


@dataclass(frozen=True)
class AwairConfig:
    """Awair developer API settings."""
    api_key: str
    device_type: str
    device_id: str
    api_base: str = DEFAULT_API_BASE
    period_seconds: int = DEFAULT_PERIOD_SECONDS

    def __repr__(self) -> str:
        return (
            f"AwairConfig(device_type={self.device_type!r}, "
            f"device_id={self.device_id!r}, api_base={self.api_base!r}, "
            f"period_seconds={self.period_seconds})"
        )


@dataclass(frozen=True)
class InfluxConfig:
    """InfluxDB connection configuration."""
    url: str
    database: str
    username: Optional[str] = None
    password: str = ""

    def __repr__(self) -> str:
        return (
            f"InfluxConfig(url={self.url!r}, database={self.database!r}, "
            f"username={self.username!r})"
        )


@dataclass(frozen=True)
class Config:
    """Main configuration."""
    awair: AwairConfig
    influx: InfluxConfig
    log_level: str = "INFO"


def load_yaml_config(config_path: Union[str, Path]) -> dict:
    """Load a YAML settings file.

    Args:
        config_path: Path to the YAML file.

    Returns:
        Configuration dictionary.

    Raises:
        ConfigError: If the file is missing, invalid, or not a mapping.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    return data


def _parse_period(value) -> int:
    try:
        period = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid period_seconds: {value!r}") from None
    if period <= 0:
        raise ConfigError(f"period_seconds must be positive, got {period}")
    return period


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    load_env: bool = True,
) -> Config:
    """Build the process configuration from the environment.

    Non-secret settings (log_level, period_seconds, api_base) may come from
    a YAML file named by ``config_path`` or ``AWAIR_INFLUX_CONFIG``.
    Environment variables always take precedence over the file.

    Args:
        config_path: Optional YAML settings file.
        load_env: Whether to load a .env file first.

    Returns:
        Config object with loaded settings.

    Raises:
        ConfigError: If a required variable is missing or a value is invalid.
    """
    if load_env:
        load_dotenv(find_dotenv(usecwd=True))

    if config_path is None:
        config_path = os.getenv("AWAIR_INFLUX_CONFIG")

    file_settings = load_yaml_config(config_path) if config_path else {}

    missing = [name for name in REQUIRED_VARIABLES if not os.getenv(name)]
    if missing:
        raise ConfigError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    period = os.getenv("AWAIR_PERIOD_SECONDS") or file_settings.get(
        "period_seconds", DEFAULT_PERIOD_SECONDS
    )

    awair = AwairConfig(
        api_key=os.environ["AWAIR_API_KEY"],
        device_type=os.environ["AWAIR_DEVICE_TYPE"],
        device_id=os.environ["AWAIR_DEVICE_ID"],
        api_base=(
            os.getenv("AWAIR_API_BASE")
            or file_settings.get("api_base", DEFAULT_API_BASE)
        ).rstrip("/"),
        period_seconds=_parse_period(period),
    )

    influx = InfluxConfig(
        url=os.environ["INFLUXDB_URL"],
        database=os.environ["INFLUXDB_DATABASE"],
        username=os.getenv("INFLUXDB_USERNAME") or None,
        password=os.getenv("INFLUXDB_PASSWORD", ""),
    )

    log_level = os.getenv("LOG_LEVEL") or file_settings.get("log_level", "INFO")

    return Config(
        awair=awair,
        influx=influx,
        log_level=str(log_level).upper(),
    )
