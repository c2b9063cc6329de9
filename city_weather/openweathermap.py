"""
Thin wrapper around OpenWeatherMap's current weather endpoint.
"""

from __future__ import annotations

import logging

import requests

from .models import WeatherDecodeError, WeatherReport

logger = logging.getLogger(__name__)

BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
UNITS = "metric"


class OpenWeatherMapError(RuntimeError):
    """Raised when OpenWeatherMap cannot satisfy a request."""


class UpstreamStatusError(OpenWeatherMapError):
    """Raised when the endpoint answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"{status_code} {reason}")
        self.status_code = status_code
        self.reason = reason


class MalformedResponseError(OpenWeatherMapError):
    """Raised when a 2xx body is not a usable weather report."""


def fetch_city_weather(
    city: str, api_key: str, *, timeout: float | None = None
) -> WeatherReport:
    """
    Fetch the current weather for ``city`` in metric units.

    A single attempt is made; nothing is retried.

    Raises:
        UpstreamStatusError: on a non-2xx response. The body is not read.
        MalformedResponseError: if the body is not JSON or lacks a field.
        OpenWeatherMapError: if the request itself fails.
    """
    params = {"q": city, "units": UNITS, "appid": api_key}
    logger.info("Requesting current weather for %s", city)

    try:
        response = requests.get(BASE_URL, params=params, timeout=timeout)
    except requests.RequestException as exc:
        logger.error("Request to OpenWeatherMap failed: %s", exc)
        raise OpenWeatherMapError(str(exc)) from exc

    logger.info("OpenWeatherMap answered %s for %s", response.status_code, city)
    if not response.ok:
        raise UpstreamStatusError(response.status_code, response.reason or "")

    try:
        payload = response.json()
    except ValueError as exc:
        logger.error("OpenWeatherMap returned a body that is not JSON: %s", exc)
        raise MalformedResponseError(str(exc)) from exc

    try:
        return WeatherReport.from_dict(payload)
    except WeatherDecodeError as exc:
        logger.error("Unexpected weather payload for %s: %s", city, exc)
        raise MalformedResponseError(str(exc)) from exc


__all__ = [
    "BASE_URL",
    "MalformedResponseError",
    "OpenWeatherMapError",
    "UpstreamStatusError",
    "fetch_city_weather",
]
