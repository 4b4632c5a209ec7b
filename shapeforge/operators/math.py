# ShapeForge - A Vector Shape Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import math

from ..core.types.constants import HALF_PI, TWO_PI

__all__ = [
    "HALF_PI", "TWO_PI",
    "norm", "lerp", "map_to", "wrap", "clamp",
    "sin_range", "cos_range", "equalish",
]


def norm(value: float, lo: float, hi: float) -> float:
    """
    value lo hi **norm** t


    returns where value sits in the range lo to hi, as 0.0 at lo and 1.0 at hi.
    Values outside the range give results outside 0 to 1.

    A zero-width range is not special cased: the result follows IEEE 754
    division by zero (nan or an infinity).

    **Examples**
        5 0 10 **norm**     -> 0.5
        15 10 20 **norm**   -> 0.5

    **See Also**:   **lerp**, **map_to**
    """
    span = hi - lo
    if span == 0:
        # Python raises on float division by zero
        diff = value - lo
        if diff == 0 or math.isnan(diff):
            return math.nan
        return math.copysign(math.inf, diff) * math.copysign(1.0, span)
    return (value - lo) / span


def lerp(t: float, lo: float, hi: float) -> float:
    """
    t lo hi **lerp** value


    linear interpolation: returns the value at fraction t of the way from lo
    to hi. t is not clamped, so values outside 0 to 1 extrapolate.

    **Examples**
        0.5 0 10 **lerp**   -> 5.0
        2 0 10 **lerp**     -> 20.0

    **See Also**:   **norm**, **map_to**
    """
    return lo + (hi - lo) * t


def map_to(value: float, src_lo: float, src_hi: float, dst_lo: float, dst_hi: float) -> float:
    """
    value src_lo src_hi dst_lo dst_hi **map_to** result


    maps a value within one range to the matching value within another.

    **Examples**
        5 0 10 100 200 **map_to**   -> 150.0

    **See Also**:   **norm**, **lerp**
    """
    return lerp(norm(value, src_lo, src_hi), dst_lo, dst_hi)


def wrap(value: float, lo: float, hi: float) -> float:
    """
    value lo hi **wrap** result


    wraps value around so it falls in the half open range [lo, hi). The
    remainder is taken so that negative values wrap upward from hi rather
    than staying negative.

    **Examples**
        370 0 360 **wrap**  -> 10.0
        -10 0 360 **wrap**  -> 350.0

    **See Also**:   **clamp**
    """
    r = hi - lo
    return lo + math.fmod(math.fmod(value - lo, r) + r, r)


def clamp(value: float, lo: float, hi: float) -> float:
    """
    value lo hi **clamp** result


    limits value to the range between lo and hi. The bounds may be given in
    either order.

    **Examples**
        15 0 10 **clamp**   -> 10
        15 10 0 **clamp**   -> 10
        -5 0 10 **clamp**   -> 0

    **See Also**:   **wrap**
    """
    # let lo and hi be reversed and still work
    real_lo = lo
    real_hi = hi
    if lo > hi:
        real_lo = hi
        real_hi = lo
    result = value
    if value < real_lo:
        result = real_lo
    if value > real_hi:
        result = real_hi
    return result


def sin_range(angle: float, lo: float, hi: float) -> float:
    """Return the sine of angle mapped from [-1, 1] to [lo, hi]."""
    return map_to(math.sin(angle), -1.0, 1.0, lo, hi)


def cos_range(angle: float, lo: float, hi: float) -> float:
    """Return the cosine of angle mapped from [-1, 1] to [lo, hi]."""
    return map_to(math.cos(angle), -1.0, 1.0, lo, hi)


def equalish(a: float, b: float, delta: float) -> bool:
    """Return whether a and b differ by no more than delta."""
    return abs(a - b) <= delta
