"""
Body mass index arithmetic.
"""

from __future__ import annotations

import math


def calculate_bmi(weight_kg: float, height_m: float) -> float:
    """
    Return ``weight_kg / height_m ** 2``.

    Inputs are not range checked. A zero height gives an infinite result
    signed like the weight, or NaN when the weight is zero as well.
    """
    denominator = height_m * height_m
    if denominator == 0:
        if weight_kg == 0 or math.isnan(weight_kg):
            return math.nan
        return math.copysign(math.inf, weight_kg)
    return weight_kg / denominator


__all__ = ["calculate_bmi"]
