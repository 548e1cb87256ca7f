"""
ranges.py
=========

Does: Inclusive and circular (hue wheel) range tests used by palette filters.
Returns: bool predicates plus a true modulo helper.
"""

from __future__ import annotations

__all__ = ["mod", "between", "polar_between"]


def mod(n: float, m: float) -> float:
    """Does: Mathematical modulo; non-negative for positive m."""
    return ((n % m) + m) % m


def between(val: float, lo: float, hi: float) -> bool:
    """Does: Inclusive containment, lo <= val <= hi."""
    return lo <= val <= hi


def polar_between(val: float, theta: float, spread: float) -> bool:
    """Does: True when `val` lies within ±spread degrees of `theta` on a 360° wheel.

    The offset from the lower edge of the window (theta - spread) is folded
    into [0, 360) and compared against spread, so 355 falls within 0±10 and a
    spread of 180 or more admits every hue.

    This departs from the one-sided `abs(mod(val - theta, 360) - spread) <= spread`
    (which admits theta..theta + 2*spread); keep the centered window.
    """
    return abs(mod(val - theta + spread, 360) - spread) <= spread
