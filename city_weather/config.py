"""
Process-wide settings, read once from the environment at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

API_KEY_VARIABLE = "OPEN_WEATHER_MAP_API_KEY"
TIMEOUT_VARIABLE = "OPEN_WEATHER_MAP_TIMEOUT"


class ConfigurationError(ValueError):
    """Raised when an environment variable holds an unusable value."""


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{TIMEOUT_VARIABLE} must be a number of seconds.") from exc
    if value <= 0:
        raise ConfigurationError(f"{TIMEOUT_VARIABLE} must be greater than 0.")
    return value


@dataclass(frozen=True)
class Settings:
    """
    Immutable configuration handed to the server factory.

    ``api_key`` may be ``None``; the weather tool reports that case to the
    caller instead of failing startup. ``timeout`` of ``None`` means the
    upstream call waits indefinitely.
    """

    api_key: str | None = None
    timeout: float | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        api_key = (env.get(API_KEY_VARIABLE) or "").strip() or None
        return cls(api_key=api_key, timeout=_parse_timeout(env.get(TIMEOUT_VARIABLE)))


__all__ = ["API_KEY_VARIABLE", "TIMEOUT_VARIABLE", "ConfigurationError", "Settings"]
