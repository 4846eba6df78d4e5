from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity.

    Scores and money amounts are rounded this way everywhere (2.5 -> 3,
    -2.5 -> -2), unlike Python's ``round`` which rounds halves to even.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))
