"""
FastMCP server exposing a BMI calculator and an OpenWeatherMap city lookup.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated

from fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from .bmi import calculate_bmi
from .config import API_KEY_VARIABLE, Settings
from .formatting import format_number, normalize_numbers
from .models import WeatherReport
from .openweathermap import (
    OpenWeatherMapError,
    UpstreamStatusError,
    fetch_city_weather,
)

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp-city-weather"
SERVER_VERSION = "1.1.0"

NO_CITY_MESSAGE = "No city provided"
MISSING_KEY_MESSAGE = (
    "API key is not configured. "
    f"Please set the {API_KEY_VARIABLE} environment variable."
)


def _text(message: str) -> TextContent:
    return TextContent(type="text", text=message)


def render_report_json(report: WeatherReport) -> str:
    body = json.dumps(
        normalize_numbers(report.to_dict()), ensure_ascii=False, separators=(",", ":")
    )
    return f"[ {body} ]"


def render_report_summary(report: WeatherReport) -> str:
    condition = report.primary_condition
    lines = [
        f"Weather for {report.name}, {report.sys.country}:",
        f"Temperature: {format_number(report.main.temp)}°C "
        f"(feels like {format_number(report.main.feels_like)}°C)",
        f"Conditions: {condition.main} - {condition.description}",
        f"Humidity: {format_number(report.main.humidity)}%",
        f"Wind: {format_number(report.wind.speed)} m/s, "
        f"direction: {format_number(report.wind.deg)}°",
    ]
    return "\n".join(lines).strip()


def bmi_blocks(weight_kg: float, height_m: float) -> list[TextContent]:
    return [_text(format_number(calculate_bmi(weight_kg, height_m)))]


def weather_blocks(city: str | None, settings: Settings) -> list[TextContent]:
    """
    Look up ``city`` and render the outcome as text blocks.

    Every outcome is a normal result: bad input, a missing key, an upstream
    error status and transport or decode failures all come back as a single
    descriptive block. Success yields the JSON echo followed by a summary.
    """
    if not city:
        return [_text(NO_CITY_MESSAGE)]

    if not settings.api_key:
        logger.warning("Weather requested without %s set", API_KEY_VARIABLE)
        return [_text(MISSING_KEY_MESSAGE)]

    try:
        report = fetch_city_weather(city, settings.api_key, timeout=settings.timeout)
        blocks = [render_report_json(report), render_report_summary(report)]
    except UpstreamStatusError as exc:
        logger.error("Weather lookup for %s rejected: %s", city, exc)
        return [_text(f"Error fetching weather data: {exc.status_code} {exc.reason}")]
    except OpenWeatherMapError as exc:
        logger.error("Weather lookup for %s failed: %s", city, exc)
        return [_text(f"Failed to fetch weather data: {exc}")]
    except Exception as exc:
        logger.exception("Unexpected error looking up weather for %s", city)
        return [_text(f"Failed to fetch weather data: {exc}")]

    return [_text(block) for block in blocks]


def create_weather_server(settings: Settings) -> FastMCP:
    """
    Create and configure the FastMCP server with both tools.
    """

    server = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    @server.tool(
        name="calculate-bmi",
        description="Calculate Body Mass Index (BMI) from weight and height",
        output_schema=None,
    )
    def calculate_bmi_tool(weightKg: float, heightM: float) -> list[TextContent]:  # noqa: N803
        logger.info("Calculating BMI weight=%s height=%s", weightKg, heightM)
        return bmi_blocks(weightKg, heightM)

    @server.tool(
        name="fetch-weather",
        description="Get weather forecast for a city",
        output_schema=None,
    )
    def fetch_weather_tool(
        city: Annotated[str, Field(description="City name")],
    ) -> list[TextContent]:
        return weather_blocks(city, settings)

    return server


__all__ = [
    "MISSING_KEY_MESSAGE",
    "NO_CITY_MESSAGE",
    "SERVER_NAME",
    "SERVER_VERSION",
    "bmi_blocks",
    "create_weather_server",
    "render_report_json",
    "render_report_summary",
    "weather_blocks",
]
