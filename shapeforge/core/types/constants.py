# ShapeForge - A Vector Shape Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
ShapeForge Types Constants Module

This module contains the constants and tuning values used throughout
ShapeForge. Shape geometry that is not passed in by the caller is fixed
here so the operators themselves stay free of magic numbers.
"""

import math

# Angles
TWO_PI = math.pi * 2                        # Full turn in radians
HALF_PI = math.pi / 2                       # Quarter turn in radians

# Arc flattening
ARC_EPSILON = 0.00001                       # Smallest visible angle on displays up to 4K
ARC_SEGMENT_MAX = HALF_PI                   # Largest sweep approximated by one Bezier
ARC_MAX_TURNS = 65536                       # Longest sweep drawn, in full turns

# Graphics state
G_STACK_MAX = 20                            # Recording surface save stack maximum depth

# Splat
SPLAT_CURVE = 0.3                           # Curvature of each lobe relative to its slice
SPLAT_SHOULDER = 0.8                        # Lobe shoulder height as a share of the radius range

# Fractal line
FRACTAL_OFFSET_RATIO = 0.15                 # Initial displacement as a share of segment length

# Heart curve coefficients
HEART_COS_1 = 0.8125
HEART_COS_2 = 0.3125
HEART_COS_3 = 0.125
HEART_COS_4 = 0.0625

# Quadratic to cubic control point weights
QUAD_CONTROL_WEIGHT = 2.0 / 3.0
QUAD_ANCHOR_WEIGHT = 1.0 / 3.0
