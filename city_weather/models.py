"""
Typed view of the OpenWeatherMap current weather payload.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Mapping


class WeatherDecodeError(ValueError):
    """Raised when a payload lacks a field the summary depends on."""


def _section(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = _require(payload, key)
    if not isinstance(value, Mapping):
        raise WeatherDecodeError(f"Field '{key}' must be an object")
    return value


def _optional_section(payload: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise WeatherDecodeError(f"Field '{key}' must be an object")
    return value


def _require(payload: Mapping[str, Any], key: str) -> Any:
    if key not in payload:
        raise WeatherDecodeError(f"Missing field '{key}'")
    return payload[key]


@dataclass(frozen=True)
class Coordinates:
    lon: float | None = None
    lat: float | None = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Coordinates:
        return cls(lon=payload.get("lon"), lat=payload.get("lat"))


@dataclass(frozen=True)
class Condition:
    main: str  # e.g. "Clouds", "Rain", "Clear"
    description: str  # e.g. "overcast clouds"
    id: int | None = None
    icon: str | None = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Condition:
        return cls(
            main=_require(payload, "main"),
            description=_require(payload, "description"),
            id=payload.get("id"),
            icon=payload.get("icon"),
        )


@dataclass(frozen=True)
class MainReadings:
    temp: float
    feels_like: float
    humidity: float
    temp_min: float | None = None
    temp_max: float | None = None
    pressure: float | None = None
    sea_level: float | None = None
    grnd_level: float | None = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> MainReadings:
        return cls(
            temp=_require(payload, "temp"),
            feels_like=_require(payload, "feels_like"),
            humidity=_require(payload, "humidity"),
            temp_min=payload.get("temp_min"),
            temp_max=payload.get("temp_max"),
            pressure=payload.get("pressure"),
            sea_level=payload.get("sea_level"),
            grnd_level=payload.get("grnd_level"),
        )


@dataclass(frozen=True)
class Wind:
    speed: float
    deg: float
    gust: float | None = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Wind:
        return cls(
            speed=_require(payload, "speed"),
            deg=_require(payload, "deg"),
            gust=payload.get("gust"),
        )


@dataclass(frozen=True)
class Clouds:
    all: int | None = None  # coverage percentage

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Clouds:
        return cls(all=payload.get("all"))


@dataclass(frozen=True)
class SystemInfo:
    country: str
    sunrise: int | None = None
    sunset: int | None = None
    type: int | None = None
    id: int | None = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> SystemInfo:
        return cls(
            country=_require(payload, "country"),
            sunrise=payload.get("sunrise"),
            sunset=payload.get("sunset"),
            type=payload.get("type"),
            id=payload.get("id"),
        )


@dataclass(frozen=True)
class WeatherReport:
    """
    Current conditions for one city, as returned by OpenWeatherMap.

    Only the fields the summary reads are required; everything else is
    optional and the full decoded body is kept for the JSON echo, including
    blocks such as ``rain`` or ``snow`` that are not modelled here.
    """

    name: str
    weather: tuple[Condition, ...]
    main: MainReadings
    wind: Wind
    sys: SystemInfo
    coord: Coordinates | None = None
    base: str | None = None
    visibility: int | None = None
    clouds: Clouds | None = None
    dt: int | None = None  # observation time, UNIX seconds (UTC)
    timezone: int | None = None  # offset from UTC in seconds
    id: int | None = None
    cod: int | None = None
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, payload: Any) -> WeatherReport:
        """
        Decode a parsed JSON body, checking every field the renderer reads.

        Raises:
            WeatherDecodeError: if a required field is missing, a section has
                the wrong type, or the condition list is empty.
        """
        if not isinstance(payload, Mapping):
            raise WeatherDecodeError("Weather payload must be a JSON object")

        conditions = _require(payload, "weather")
        if not isinstance(conditions, list):
            raise WeatherDecodeError("Field 'weather' must be a list")
        if not conditions:
            raise WeatherDecodeError("Field 'weather' has no conditions")
        for condition in conditions:
            if not isinstance(condition, Mapping):
                raise WeatherDecodeError("Entries of 'weather' must be objects")

        coord = _optional_section(payload, "coord")
        clouds = _optional_section(payload, "clouds")
        return cls(
            name=_require(payload, "name"),
            weather=tuple(Condition.from_dict(item) for item in conditions),
            main=MainReadings.from_dict(_section(payload, "main")),
            wind=Wind.from_dict(_section(payload, "wind")),
            sys=SystemInfo.from_dict(_section(payload, "sys")),
            coord=Coordinates.from_dict(coord) if coord is not None else None,
            base=payload.get("base"),
            visibility=payload.get("visibility"),
            clouds=Clouds.from_dict(clouds) if clouds is not None else None,
            dt=payload.get("dt"),
            timezone=payload.get("timezone"),
            id=payload.get("id"),
            cod=payload.get("cod"),
            raw=copy.deepcopy(dict(payload)),
        )

    @property
    def primary_condition(self) -> Condition:
        return self.weather[0]

    def to_dict(self) -> dict[str, Any]:
        """The decoded body as received, ready for ``json.dumps``."""
        return copy.deepcopy(dict(self.raw))


__all__ = [
    "Clouds",
    "Condition",
    "Coordinates",
    "MainReadings",
    "SystemInfo",
    "WeatherDecodeError",
    "WeatherReport",
    "Wind",
]
