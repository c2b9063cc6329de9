"""
Render numbers the way the upstream JSON spells them.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

_POSITIONAL_FLOOR = 1e-6
_INTEGRAL_CEILING = 1e21


def format_number(value: object) -> str:
    """
    Return the canonical text for a JSON number.

    Integral floats drop their fraction (``14.0`` -> ``"14"``) and
    non-finite values read ``Infinity``, ``-Infinity`` and ``NaN``.
    """
    if isinstance(value, bool) or not isinstance(value, float):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _INTEGRAL_CEILING:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    if _POSITIONAL_FLOOR <= abs(value) < 1:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"


def normalize_numbers(value: Any) -> Any:
    """
    Return a copy of a decoded JSON value with integral floats made ints.

    ``json.dumps`` then writes ``14.0`` as ``14``, matching ``format_number``.
    """
    if isinstance(value, float) and value.is_integer() and abs(value) < _INTEGRAL_CEILING:
        return int(value)
    if isinstance(value, dict):
        return {key: normalize_numbers(item) for key, item in value.items()}
    if isinstance(value, list):
        return [normalize_numbers(item) for item in value]
    return value


__all__ = ["format_number", "normalize_numbers"]
