"""
City weather MCP server package exposing OpenWeatherMap and BMI tools.
"""

from .city_weather_server import create_weather_server
from .config import Settings

__all__ = ["Settings", "create_weather_server"]
