"""Setup script for the awair-influx package."""

from setuptools import find_packages, setup

setup(
    name="awair-influx",
    version="0.1.0",
    description="Periodic Awair air-quality export to InfluxDB",
    author="Peter Butler",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pyyaml",
        "python-dotenv",
        "aiohttp",
        "influxdb-client[async]",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-asyncio",
            "black",
            "isort",
            "mypy",
        ],
    },
    entry_points={
        "console_scripts": [
            "awair-influx=awair_influx.collector:main",
        ],
    },
)
