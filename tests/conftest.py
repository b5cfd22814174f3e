# ABOUTME: Shared test fixtures for the weatherwiz test suite.
# ABOUTME: Provides Open-Meteo sample payloads and a mock HTTP client that routes by endpoint URL.

from unittest.mock import AsyncMock

import httpx
import pytest

from weatherwiz.config import AIR_QUALITY_URL, FORECAST_URL, GEOCODING_URL
from weatherwiz.models import Location


def make_response(json_data, status_code: int = 200) -> httpx.Response:
    """Build an httpx.Response bound to a request so raise_for_status works."""
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test"))


def routed_client(responses: dict) -> httpx.AsyncClient:
    """Create a mock httpx.AsyncClient whose get() answers per URL.

    Values may be an httpx.Response or an exception instance to raise.
    """
    mock = AsyncMock(spec=httpx.AsyncClient)

    async def _get(url, params=None):
        result = responses[url]
        if isinstance(result, Exception):
            raise result
        return result

    mock.get.side_effect = _get
    return mock


GEOCODING_PAYLOAD = {
    "results": [
        {
            "id": 5913490,
            "name": "Calgary",
            "latitude": 51.05011,
            "longitude": -114.08529,
            "timezone": "America/Edmonton",
            "country": "Canada",
        },
        {
            "id": 1,
            "name": "Calgary",
            "latitude": 56.51,
            "longitude": -6.32,
            "timezone": "Europe/London",
            "country": "United Kingdom",
        },
    ]
}

FORECAST_PAYLOAD = {
    "latitude": 51.05,
    "longitude": -114.08,
    "timezone": "America/Edmonton",
    "utc_offset_seconds": -21600,
    "current": {
        "time": "2025-06-01T14:00",
        "temperature_2m": 21.4,
        "apparent_temperature": 20.6,
        "weather_code": 2,
        "wind_speed_10m": 14.5,
        "precipitation": 0.0,
    },
    "hourly": {
        "time": ["2025-06-01T13:00", "2025-06-01T14:00", "2025-06-01T15:00"],
        "temperature_2m": [20.1, 21.4, 22.0],
        "weather_code": [1, 2, 61],
        "uv_index": [5.1, 5.6, 4.8],
        "precipitation_probability": [0, 10, 55],
        "wind_speed_10m": [12.0, 14.5, 16.2],
    },
    "daily": {
        "time": ["2025-06-01", "2025-06-02"],
        "weather_code": [61, 0],
        "temperature_2m_max": [22.5, 25.0],
        "temperature_2m_min": [9.5, 11.2],
        "sunrise": ["2025-06-01T05:21", "2025-06-02T05:20"],
        "sunset": ["2025-06-01T21:44", "2025-06-02T21:45"],
        "uv_index_max": [6.35, 7.1],
        "precipitation_sum": [2.14, 0.0],
    },
}

AIR_QUALITY_PAYLOAD = {
    "latitude": 51.05,
    "longitude": -114.08,
    "hourly": {
        "time": ["2025-06-01T00:00", "2025-06-01T01:00"],
        "us_aqi": [42, 47],
    },
}


@pytest.fixture
def calgary() -> Location:
    return Location(
        name="Calgary", country="Canada", latitude=51.05011, longitude=-114.08529, timezone="America/Edmonton"
    )


@pytest.fixture
def weather_client() -> httpx.AsyncClient:
    """Mock client serving successful responses from all three endpoints."""
    return routed_client(
        {
            GEOCODING_URL: make_response(GEOCODING_PAYLOAD),
            FORECAST_URL: make_response(FORECAST_PAYLOAD),
            AIR_QUALITY_URL: make_response(AIR_QUALITY_PAYLOAD),
        }
    )
