"""Numeric helpers shared by the engine modules."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positive values.

    Python's :func:`round` rounds ties to even (``round(92.5) == 92``); the
    scoring tables are calibrated on half-up rounding.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp *value* into ``[low, high]``."""
    return max(low, min(high, value))
