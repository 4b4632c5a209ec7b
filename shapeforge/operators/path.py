# ShapeForge - A Vector Shape Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Line and curve operators.

Every operator takes the backend surface as its first argument and issues
path construction calls in the current user coordinate system. Operators
named ``stroke_*`` or ``fill_*`` build the same path as their plain
counterpart and then paint it once.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from ..core import error as sf_error
from ..core import types as sf
from ..core.surface import Sampler, Surface, gsave, resolve_sampler

logger = logging.getLogger(__name__)


def line(surface: Surface, x0: float, y0: float, x1: float, y1: float) -> None:
    """
    x0 y0 x1 y1 **line** -


    strokes a straight **line** between two points.

    **See Also**:   **line_through**, **ray**
    """
    surface.move_to(x0, y0)
    surface.line_to(x1, y1)
    surface.stroke()


def line_through(surface: Surface, x0: float, y0: float, x1: float, y1: float, overlap: float) -> None:
    """
    x0 y0 x1 y1 overlap **line_through** -


    strokes a line through two points, extended past each of them by overlap.
    The line is drawn along the x axis of a coordinate system translated to
    the first point and rotated to face the second.

    **See Also**:   **line**, **ray**
    """
    with gsave(surface):
        surface.translate(x0, y0)
        surface.rotate(math.atan2(y1 - y0, x1 - x0))
        length = math.hypot(x1 - x0, y1 - y0)

        surface.move_to(-overlap, 0.0)
        surface.line_to(length + overlap, 0.0)
        surface.stroke()


def ray(surface: Surface, x: float, y: float, angle: float, offset: float, length: float) -> None:
    """
    x y angle offset length **ray** -


    strokes a line segment of the given length pointing away from (x, y) at
    angle radians, starting offset units out from the point.

    **See Also**:   **line**, **line_through**
    """
    with gsave(surface):
        surface.translate(x, y)
        surface.rotate(angle)
        surface.move_to(offset, 0.0)
        surface.line_to(offset + length, 0.0)
        surface.stroke()


def path(surface: Surface, points: Sequence) -> None:
    """
    Append a line to each point in order.

    The first point is not moved to: the path continues from the current
    point, or starts at the first point when there is none.
    """
    for point in sf.to_points(points):
        surface.line_to(point.x, point.y)


def fill_path(surface: Surface, points: Sequence) -> None:
    path(surface, points)
    surface.fill()


def stroke_path(surface: Surface, points: Sequence, close: bool = False) -> None:
    path(surface, points)
    if close:
        surface.close_path()
    surface.stroke()


def stroke_curve_to(surface: Surface, x0: float, y0: float, x1: float, y1: float, x2: float, y2: float) -> None:
    surface.curve_to(x0, y0, x1, y1, x2, y2)
    surface.stroke()


def quadratic_curve_to(surface: Surface, x0: float, y0: float, x1: float, y1: float) -> None:
    """
    x0 y0 x1 y1 **quadratic_curve_to** -


    appends a quadratic Bezier curve from the current point, with control
    point (x0, y0) and end point (x1, y1). The backend only draws cubics, so
    the curve is raised to the equivalent cubic whose control points lie
    two thirds of the way from each end point toward the quadratic control:

        c1 = P + 2/3 (C - P)
        c2 = E + 2/3 (C - E)

    **Errors**:     whatever the backend raises when there is no current point
    **See Also**:   **multi_curve**, **multi_loop**
    """
    px, py = surface.get_current_point()
    surface.curve_to(
        sf.QUAD_CONTROL_WEIGHT * x0 + sf.QUAD_ANCHOR_WEIGHT * px,
        sf.QUAD_CONTROL_WEIGHT * y0 + sf.QUAD_ANCHOR_WEIGHT * py,
        sf.QUAD_CONTROL_WEIGHT * x0 + sf.QUAD_ANCHOR_WEIGHT * x1,
        sf.QUAD_CONTROL_WEIGHT * y0 + sf.QUAD_ANCHOR_WEIGHT * y1,
        x1, y1,
    )


def stroke_quadratic_curve_to(surface: Surface, x0: float, y0: float, x1: float, y1: float) -> None:
    quadratic_curve_to(surface, x0, y0, x1, y1)
    surface.stroke()


def multi_curve(surface: Surface, points: Sequence) -> None:
    """
    points **multi_curve** -


    draws a smooth open curve through a list of points. The curve runs
    straight from the first point to the midpoint of the first pair, then
    uses each interior point as the control of a quadratic curve ending at
    the midpoint of that point and the next. Joining at midpoints keeps the
    tangent continuous. A final straight segment reaches the last point.

    **Errors**:     **rangecheck** (fewer than 2 points)
    **See Also**:   **multi_loop**, **quadratic_curve_to**
    """
    points = sf.to_points(points)
    if len(points) < 2:
        return sf_error.e(sf_error.RANGECHECK, multi_curve.__name__, "needs at least 2 points")

    surface.move_to(points[0].x, points[0].y)
    mid = points[0].midpoint(points[1])
    surface.line_to(mid.x, mid.y)
    for i in range(1, len(points) - 1):
        p0 = points[i]
        mid = p0.midpoint(points[i + 1])
        quadratic_curve_to(surface, p0.x, p0.y, mid.x, mid.y)
    last = points[-1]
    surface.line_to(last.x, last.y)


def stroke_multi_curve(surface: Surface, points: Sequence) -> None:
    multi_curve(surface, points)
    surface.stroke()


def multi_loop(surface: Surface, points: Sequence) -> None:
    """
    points **multi_loop** -


    draws a smooth closed curve around a list of points. The loop starts at
    the midpoint of the last and first points. Every point is then the
    control of a quadratic curve ending at the midpoint between it and the
    next point, wrapping around to end where the loop began.

    **Errors**:     **rangecheck** (fewer than 2 points)
    **See Also**:   **multi_curve**, **splat**
    """
    points = sf.to_points(points)
    if len(points) < 2:
        return sf_error.e(sf_error.RANGECHECK, multi_loop.__name__, "needs at least 2 points")

    first = points[0]
    last = points[-1]
    start = last.midpoint(first)
    surface.move_to(start.x, start.y)
    for i in range(len(points) - 1):
        p0 = points[i]
        mid = p0.midpoint(points[i + 1])
        quadratic_curve_to(surface, p0.x, p0.y, mid.x, mid.y)
    quadratic_curve_to(surface, last.x, last.y, start.x, start.y)


def fill_multi_loop(surface: Surface, points: Sequence) -> None:
    multi_loop(surface, points)
    surface.fill()


def stroke_multi_loop(surface: Surface, points: Sequence) -> None:
    multi_loop(surface, points)
    surface.stroke()


def fractal_line(
    surface: Surface,
    x1: float, y1: float,
    x2: float, y2: float,
    roughness: float,
    iterations: int,
    sampler: Optional[Sampler] = None,
) -> List[sf.Point]:
    """
    x1 y1 x2 y2 roughness iterations **fractal_line** points


    draws a jagged line between two points by midpoint displacement. Each
    iteration inserts a midpoint between every pair of neighbouring points,
    moved in x and y by a uniform random amount of up to offset in either
    direction. The offset starts at 0.15 times the length of the line and
    is multiplied by roughness after every iteration, so roughness below 1
    gives finer detail at each level.

    After k iterations the line has 2^k + 1 points. They are appended with
    **path** and also returned.

    Args:
        sampler: Uniform [0, 1) source; a private generator is used if None
    """
    rand = resolve_sampler(sampler)
    offset = math.hypot(x2 - x1, y2 - y1) * sf.FRACTAL_OFFSET_RATIO

    points = [sf.Point(x1, y1), sf.Point(x2, y2)]
    for _ in range(iterations):
        new_points = []
        for j, point in enumerate(points):
            new_points.append(point)
            if j < len(points) - 1:
                mid = point.midpoint(points[j + 1])
                x = mid.x + rand() * offset * 2.0 - offset
                y = mid.y + rand() * offset * 2.0 - offset
                new_points.append(sf.Point(x, y))
        offset *= roughness
        points = new_points

    logger.debug("fractal_line: %d iterations, %d points", max(iterations, 0), len(points))
    path(surface, points)
    return points


def stroke_fractal_line(
    surface: Surface,
    x1: float, y1: float,
    x2: float, y2: float,
    roughness: float,
    iterations: int,
    sampler: Optional[Sampler] = None,
) -> List[sf.Point]:
    points = fractal_line(surface, x1, y1, x2, y2, roughness, iterations, sampler)
    surface.stroke()
    return points


def grid(surface: Surface, x: float, y: float, w: float, h: float, xres: float, yres: float) -> None:
    """
    x y w h xres yres **grid** -


    strokes a grid of vertical lines every xres units and horizontal lines
    every yres units, starting at the top left corner and covering the
    rectangle x, y, w, h. Lines are placed while they do not pass the right
    or bottom edge. The whole grid is stroked once.

    **Errors**:     **rangecheck** (resolution not positive or too fine to advance,
                    or unbounded extent)
    """
    if not (xres > 0 and yres > 0):
        return sf_error.e(sf_error.RANGECHECK, grid.__name__, "resolution must be positive")
    if not (math.isfinite(x + w) and math.isfinite(y + h)):
        return sf_error.e(sf_error.RANGECHECK, grid.__name__, "extent must be finite")
    # a step lost to rounding at either end would never advance
    for lo, hi, res in ((x, x + w, xres), (y, y + h, yres)):
        if lo + res == lo or hi + res == hi:
            return sf_error.e(sf_error.RANGECHECK, grid.__name__, "resolution below float spacing")

    xx = x
    while xx <= x + w:
        surface.move_to(xx, y)
        surface.line_to(xx, y + h)
        xx += xres

    yy = y
    while yy <= y + h:
        surface.move_to(x, yy)
        surface.line_to(x + w, yy)
        yy += yres

    surface.stroke()
