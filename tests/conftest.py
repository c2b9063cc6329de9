"""Shared fixtures for the city weather tests."""
import copy
from unittest.mock import Mock

import pytest

from city_weather.config import Settings

LONDON_PAYLOAD = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [
        {
            "id": 804,
            "main": "Clouds",
            "description": "overcast clouds",
            "icon": "04d",
        }
    ],
    "base": "stations",
    "main": {
        "temp": 15.2,
        "feels_like": 14.0,
        "temp_min": 13.9,
        "temp_max": 16.1,
        "pressure": 1012,
        "humidity": 70,
        "sea_level": 1012,
        "grnd_level": 1008,
    },
    "visibility": 10000,
    "wind": {"speed": 3.1, "deg": 200, "gust": 5.2},
    "clouds": {"all": 100},
    "dt": 1700000000,
    "sys": {
        "type": 2,
        "id": 2075535,
        "country": "GB",
        "sunrise": 1699975000,
        "sunset": 1700007000,
    },
    "timezone": 0,
    "id": 2643743,
    "name": "London",
    "cod": 200,
}


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def london_payload():
    """Sample OpenWeatherMap current weather body for London."""
    return copy.deepcopy(LONDON_PAYLOAD)


@pytest.fixture
def settings():
    return Settings(api_key="test_key")


@pytest.fixture
def make_response():
    """Build a stand-in for ``requests.Response``."""

    def _make(status_code=200, reason="OK", payload=None, json_error=None):
        response = Mock()
        response.status_code = status_code
        response.reason = reason
        response.ok = 200 <= status_code < 400
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = payload
        return response

    return _make
