"""Conversion between hardware tick counts and times in nanoseconds."""

from __future__ import annotations

import math
from fractions import Fraction

__all__ = ["ticks_to_time_ns", "time_ns_to_ticks"]

_NS_PER_SECOND = 1_000_000_000


def _rate_fraction(rate: float) -> Fraction:
    if not (isinstance(rate, (int, float)) and math.isfinite(rate) and rate > 0):
        raise ValueError(f"tick rate must be a positive finite number, got {rate!r}")
    return Fraction(rate)


def _round_half_away(value: Fraction) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = (2 * abs(value.numerator) + value.denominator) // (2 * value.denominator)
    return magnitude if value >= 0 else -magnitude


def ticks_to_time_ns(ticks: int, rate: float) -> int:
    """Convert a tick count into nanoseconds at ``rate`` ticks per second."""
    exact = Fraction(int(ticks)) * _NS_PER_SECOND / _rate_fraction(rate)
    return _round_half_away(exact)


def time_ns_to_ticks(time_ns: int, rate: float) -> int:
    """Convert a time in nanoseconds into a tick count at ``rate`` ticks per second."""
    exact = Fraction(int(time_ns)) * _rate_fraction(rate) / _NS_PER_SECOND
    return _round_half_away(exact)