# ShapeForge - A Vector Shape Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Closed figure operators: rectangles, circles, ellipses, polygons, stars,
splats and hearts, plus point scatters.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from ..core import error as sf_error
from ..core import types as sf
from ..core.surface import Sampler, Surface, gsave, resolve_sampler
from .math import clamp
from .path import multi_loop, path

logger = logging.getLogger(__name__)


def rectangle(surface: Surface, x: float, y: float, w: float, h: float) -> None:
    surface.rectangle(x, y, w, h)


def fill_rectangle(surface: Surface, x: float, y: float, w: float, h: float) -> None:
    rectangle(surface, x, y, w, h)
    surface.fill()


def stroke_rectangle(surface: Surface, x: float, y: float, w: float, h: float) -> None:
    rectangle(surface, x, y, w, h)
    surface.stroke()


def round_rectangle(surface: Surface, x: float, y: float, w: float, h: float, r: float) -> None:
    """
    x y w h r **round_rectangle** -


    appends a rectangle with corners rounded to radius r. The outline starts
    after the top left corner and runs clockwise on a y-down surface, with a
    quarter arc at each corner. The last arc ends where the outline began,
    so the path is not closed explicitly.

    **See Also**:   **rectangle**
    """
    surface.move_to(x + r, y)
    surface.line_to(x + w - r, y)
    surface.arc(x + w - r, y + r, r, -sf.HALF_PI, 0.0)
    surface.line_to(x + w, y + h - r)
    surface.arc(x + w - r, y + h - r, r, 0.0, sf.HALF_PI)
    surface.line_to(x + r, y + h)
    surface.arc(x + r, y + h - r, r, sf.HALF_PI, math.pi)
    surface.line_to(x, y + r)
    surface.arc(x + r, y + r, r, math.pi, -sf.HALF_PI)


def stroke_round_rectangle(surface: Surface, x: float, y: float, w: float, h: float, r: float) -> None:
    round_rectangle(surface, x, y, w, h, r)
    surface.stroke()


def fill_round_rectangle(surface: Surface, x: float, y: float, w: float, h: float, r: float) -> None:
    round_rectangle(surface, x, y, w, h, r)
    surface.fill()


def circle(surface: Surface, x: float, y: float, r: float) -> None:
    surface.arc(x, y, r, 0.0, sf.TWO_PI)


def fill_circle(surface: Surface, x: float, y: float, r: float) -> None:
    circle(surface, x, y, r)
    surface.fill()


def stroke_circle(surface: Surface, x: float, y: float, r: float) -> None:
    circle(surface, x, y, r)
    surface.stroke()


def ellipse(surface: Surface, x: float, y: float, xr: float, yr: float) -> None:
    """
    x y xr yr **ellipse** -


    appends an axis-aligned ellipse by drawing a unit circle in a coordinate
    system scaled by xr and yr. The path is built in device space before the
    scale is restored, but a stroke issued afterwards uses the restored
    transform, so the stroke width is not distorted by the scale.
    """
    with gsave(surface):
        surface.translate(x, y)
        surface.scale(xr, yr)
        circle(surface, 0.0, 0.0, 1.0)


def fill_ellipse(surface: Surface, x: float, y: float, xr: float, yr: float) -> None:
    ellipse(surface, x, y, xr, yr)
    surface.fill()


def stroke_ellipse(surface: Surface, x: float, y: float, xr: float, yr: float) -> None:
    ellipse(surface, x, y, xr, yr)
    surface.stroke()


def polygon(surface: Surface, x: float, y: float, r: float, sides: int, rotation: float) -> None:
    """
    x y r sides rotation **polygon** -


    appends a regular polygon with the given number of sides, inscribed in a
    circle of radius r about (x, y). The first vertex lies at angle rotation.
    The outline starts on that vertex, visits every vertex including the
    first again, and finishes with a final line back to it. With no sides,
    only that final line is drawn.

    **See Also**:   **star**
    """
    with gsave(surface):
        surface.translate(x, y)
        surface.rotate(rotation)
        surface.move_to(r, 0.0)
        for i in range(sides):
            angle = sf.TWO_PI / sides * i
            surface.line_to(math.cos(angle) * r, math.sin(angle) * r)
        surface.line_to(r, 0.0)


def stroke_polygon(surface: Surface, x: float, y: float, r: float, sides: int, rotation: float) -> None:
    polygon(surface, x, y, r, sides, rotation)
    surface.stroke()


def fill_polygon(surface: Surface, x: float, y: float, r: float, sides: int, rotation: float) -> None:
    polygon(surface, x, y, r, sides, rotation)
    surface.fill()


def star(surface: Surface, x: float, y: float, r0: float, r1: float, points: int, rotation: float) -> None:
    """
    x y r0 r1 points rotation **star** -


    appends a closed star with the given number of points. Vertices alternate
    between the outer radius r1 (starting at angle rotation) and the inner
    radius r0, spaced pi / points apart. There is no initial move; the first
    line begins the subpath.

    **See Also**:   **polygon**
    """
    with gsave(surface):
        surface.translate(x, y)
        surface.rotate(rotation)
        for i in range(points * 2):
            r = r1
            if i % 2 == 1:
                r = r0
            angle = math.pi / points * i
            surface.line_to(math.cos(angle) * r, math.sin(angle) * r)
        surface.close_path()


def stroke_star(surface: Surface, x: float, y: float, r0: float, r1: float, points: int, rotation: float) -> None:
    star(surface, x, y, r0, r1, points, rotation)
    surface.stroke()


def fill_star(surface: Surface, x: float, y: float, r0: float, r1: float, points: int, rotation: float) -> None:
    star(surface, x, y, r0, r1, points, rotation)
    surface.fill()


def _polar(angle: float, radius: float) -> sf.Point:
    return sf.Point(math.cos(angle) * radius, math.sin(angle) * radius)


def splat(
    surface: Surface,
    x: float, y: float,
    num_nodes: int,
    radius: float,
    inner_radius: float,
    variation: float,
    sampler: Optional[Sampler] = None,
) -> None:
    """
    x y num_nodes radius inner_radius variation **splat** -


    appends a lumpy closed blob: num_nodes rounded lobes reaching out to
    radius from a core of inner_radius. variation (clamped to 0..1) scales a
    random change to each lobe's reach of up to the radius range either way.

    Each lobe contributes five control points to a **multi_loop**: two on the
    core either side of the lobe, two shoulders, and the tip.

    **Errors**:     **rangecheck** (num_nodes less than 1)
    **See Also**:   **multi_loop**
    """
    if num_nodes < 1:
        return sf_error.e(sf_error.RANGECHECK, splat.__name__, "needs at least 1 node")

    rand = resolve_sampler(sampler)
    points = []
    slice_ = sf.TWO_PI / (num_nodes * 2)
    angle = 0.0
    curve = sf.SPLAT_CURVE
    radius_range = radius - inner_radius
    variation = clamp(variation, 0.0, 1.0)
    for _ in range(num_nodes):
        node_radius = radius + variation * (rand() * radius_range * 2.0 - radius_range)
        node_range = node_radius - inner_radius
        points.append(_polar(angle - slice_ * (1.0 + curve), inner_radius))
        points.append(_polar(angle + slice_ * curve, inner_radius))
        points.append(_polar(angle - slice_ * curve, inner_radius + node_range * sf.SPLAT_SHOULDER))
        points.append(_polar(angle + slice_ / 2.0, node_radius))
        points.append(_polar(angle + slice_ * (1.0 + curve), inner_radius + node_range * sf.SPLAT_SHOULDER))
        angle += slice_ * 2.0

    logger.debug("splat: %d nodes, %d control points", num_nodes, len(points))
    with gsave(surface):
        surface.translate(x, y)
        multi_loop(surface, points)


def stroke_splat(
    surface: Surface,
    x: float, y: float,
    num_nodes: int,
    radius: float,
    inner_radius: float,
    variation: float,
    sampler: Optional[Sampler] = None,
) -> None:
    splat(surface, x, y, num_nodes, radius, inner_radius, variation, sampler)
    surface.stroke()


def fill_splat(
    surface: Surface,
    x: float, y: float,
    num_nodes: int,
    radius: float,
    inner_radius: float,
    variation: float,
    sampler: Optional[Sampler] = None,
) -> None:
    splat(surface, x, y, num_nodes, radius, inner_radius, variation, sampler)
    surface.fill()


def heart(surface: Surface, x: float, y: float, w: float, h: float, r: float) -> None:
    """
    x y w h r **heart** -


    appends a heart outline centred on (x, y), rotated by r radians, traced
    with floor(sqrt(w * h)) points of the parametric heart curve. The vertical
    coordinate is negated so the heart points down on a y-down surface.

    Only the first term of the vertical component is scaled by h; the smaller
    lobe-shaping terms are added unscaled.

    **Errors**:     **rangecheck** (negative area)
    **See Also**:   **path**
    """
    area = w * h
    if not (area >= 0 and math.isfinite(area)):
        return sf_error.e(sf_error.RANGECHECK, heart.__name__, "w * h must be finite and not negative")

    res = int(math.sqrt(area))
    if res == 0:
        logger.debug("heart: %g x %g gives no points, nothing drawn", w, h)

    with gsave(surface):
        surface.translate(x, y)
        surface.rotate(r)
        points = []
        for i in range(res):
            a = sf.TWO_PI * i / res
            px = w * math.pow(math.sin(a), 3.0)
            py = (h * (sf.HEART_COS_1 * math.cos(a))
                  - sf.HEART_COS_2 * math.cos(2.0 * a)
                  - sf.HEART_COS_3 * math.cos(3.0 * a)
                  - sf.HEART_COS_4 * math.cos(4.0 * a))
            points.append(sf.Point(px, -py))
        path(surface, points)


def fill_heart(surface: Surface, x: float, y: float, w: float, h: float, r: float) -> None:
    heart(surface, x, y, w, h, r)
    surface.fill()


def stroke_heart(surface: Surface, x: float, y: float, w: float, h: float, r: float) -> None:
    heart(surface, x, y, w, h, r)
    surface.stroke()


def points(surface: Surface, points: Sequence, radius: float) -> None:
    """Fill a dot of the given radius at each point."""
    for point in sf.to_points(points):
        fill_circle(surface, point.x, point.y, radius)
