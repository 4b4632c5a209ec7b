# ShapeForge - A Vector Shape Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
ShapeForge Types Package

Re-exports the constants and graphics classes so callers can use a single
``from shapeforge.core import types as sf`` import.
"""

from .constants import (
    ARC_EPSILON,
    ARC_MAX_TURNS,
    ARC_SEGMENT_MAX,
    FRACTAL_OFFSET_RATIO,
    G_STACK_MAX,
    HALF_PI,
    HEART_COS_1,
    HEART_COS_2,
    HEART_COS_3,
    HEART_COS_4,
    QUAD_ANCHOR_WEIGHT,
    QUAD_CONTROL_WEIGHT,
    SPLAT_CURVE,
    SPLAT_SHOULDER,
    TWO_PI,
)
from .graphics import (
    Call,
    ClosePath,
    CurveTo,
    DisplayList,
    Fill,
    LineTo,
    Matrix,
    MoveTo,
    Path,
    Point,
    Stroke,
    SubPath,
    to_points,
)

__all__ = [
    "ARC_EPSILON",
    "ARC_MAX_TURNS",
    "ARC_SEGMENT_MAX",
    "FRACTAL_OFFSET_RATIO",
    "G_STACK_MAX",
    "HALF_PI",
    "HEART_COS_1",
    "HEART_COS_2",
    "HEART_COS_3",
    "HEART_COS_4",
    "QUAD_ANCHOR_WEIGHT",
    "QUAD_CONTROL_WEIGHT",
    "SPLAT_CURVE",
    "SPLAT_SHOULDER",
    "TWO_PI",
    "Call",
    "ClosePath",
    "CurveTo",
    "DisplayList",
    "Fill",
    "LineTo",
    "Matrix",
    "MoveTo",
    "Path",
    "Point",
    "Stroke",
    "SubPath",
    "to_points",
]
