# ShapeForge - A Vector Shape Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
RecordingSurface - A Pure Python Backend Surface

This module provides a backend surface that follows cairo's drawing model
without rasterizing anything. Every call is recorded as it was issued, and
the path it builds is kept in device space and appended to a display list
whenever it is stroked or filled.

Architecture:
- ``calls`` holds the call trace with user space arguments, in order
- ``display_list`` holds device space Paths followed by their Stroke or Fill
- Graphics state (the CTM) is saved and restored as a stack; as in cairo,
  the current path is not part of the saved state
- Arcs are flattened into at most quarter-turn cubic Bezier curves

The display list can be replayed onto a cairo context with
``shapeforge.devices.common.cairo_renderer.render_display_list``.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from ..operators.matrix import (
    IDENTITY,
    _matmult,
    _matrix_inverse,
    _transform_point,
    rotation,
    scaling,
    translation,
)
from . import error as sf_error
from . import types as sf


def _acute_arc_to_bezier(start: float, size: float):
    # Evaluate constants.
    alpha = size / 2.0

    cos_alpha = math.cos(alpha)
    sin_alpha = math.sin(alpha)

    cot_alpha = 1.0 / math.tan(alpha)
    phi = start + alpha  # This is how far the arc needs to be rotated.

    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)

    lmbda = (4.0 - cos_alpha) / 3.0
    mu = sin_alpha + (cos_alpha - lmbda) * cot_alpha

    # Return rotated waypoints.
    return (
        math.cos(start),  # p0.x
        math.sin(start),  # p0.y
        lmbda * cos_phi + mu * sin_phi,  # p1.x
        lmbda * sin_phi - mu * cos_phi,  # p1.y
        lmbda * cos_phi - mu * sin_phi,  # p2.x
        lmbda * sin_phi + mu * cos_phi,  # p2.y
        math.cos(start + size),  # p3.x
        math.sin(start + size),
    )  # p3.y


class GraphicsState:
    __slots__ = ("ctm",)

    def __init__(self, ctm: sf.Matrix = IDENTITY) -> None:
        self.ctm = ctm  # the current transformation matrix

    def copy(self) -> "GraphicsState":
        # the CTM is an immutable tuple, so a shallow copy is enough
        return GraphicsState(self.ctm)


class RecordingSurface:
    """
    Backend surface that records calls and builds a device space display list.

    Args:
        ctm: Initial transformation matrix, identity by default
    """

    def __init__(self, ctm: sf.Matrix = IDENTITY) -> None:
        self.calls: List[sf.Call] = []
        self.display_list = sf.DisplayList()
        self.gstate = GraphicsState(tuple(float(v) for v in ctm))
        self.gstate_stack: List[GraphicsState] = []
        self.path = sf.Path()
        self.currentpoint: Optional[sf.Point] = None  # device space
        self._subpath_start: Optional[sf.Point] = None

    # ---- recording ----------------------------------------------------

    def _record(self, name: str, *args) -> None:
        self.calls.append(sf.Call(name, args))

    def call_names(self) -> List[str]:
        return [call.name for call in self.calls]

    def calls_named(self, name: str) -> List[sf.Call]:
        return [call for call in self.calls if call.name == name]

    def clear(self) -> None:
        """Forget the recorded calls and display list, keeping the graphics state."""
        self.calls = []
        self.display_list = sf.DisplayList()

    # ---- state queries ------------------------------------------------

    def get_matrix(self) -> sf.Matrix:
        return self.gstate.ctm

    def has_current_point(self) -> bool:
        return self.currentpoint is not None

    def get_current_point(self) -> Tuple[float, float]:
        if self.currentpoint is None:
            return sf_error.e(sf_error.NOCURRENTPOINT, "get_current_point")
        ictm = _matrix_inverse(self.gstate.ctm)
        return _transform_point(ictm, self.currentpoint.x, self.currentpoint.y)

    # ---- device space path building -------------------------------------

    def _device(self, x: float, y: float) -> sf.Point:
        return sf.Point(*_transform_point(self.gstate.ctm, x, y))

    def _begin_subpath(self, p: sf.Point) -> None:
        subpath = sf.SubPath()
        subpath.append(sf.MoveTo(p))
        self.path.append(subpath)
        self.currentpoint = p
        self._subpath_start = p

    def _line(self, p: sf.Point) -> None:
        # with no current point a line_to behaves as a move_to
        if self.currentpoint is None:
            self._begin_subpath(p)
            return
        self.path[-1].append(sf.LineTo(p))
        self.currentpoint = p

    def _curve(self, p1: sf.Point, p2: sf.Point, p3: sf.Point) -> None:
        if self.currentpoint is None:
            self._begin_subpath(p1)
        self.path[-1].append(sf.CurveTo(p1, p2, p3))
        self.currentpoint = p3

    # ---- path construction ----------------------------------------------

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)
        self._begin_subpath(self._device(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)
        self._line(self._device(x, y))

    def curve_to(self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> None:
        self._record("curve_to", x1, y1, x2, y2, x3, y3)
        self._curve(self._device(x1, y1), self._device(x2, y2), self._device(x3, y3))

    def arc(self, xc: float, yc: float, radius: float, angle1: float, angle2: float) -> None:
        """
        Add a circular arc to the current path, sweeping from angle1 toward
        increasing angles until angle2 is reached. If angle2 is less than
        angle1 it is raised by multiples of 2π until it is not. A straight
        segment joins the current point, if any, to the start of the arc.
        As in cairo, a sweep of more than ARC_MAX_TURNS full turns is cut
        down to that many.
        """
        self._record("arc", xc, yc, radius, angle1, angle2)

        start = angle1
        sweep = angle2 - angle1
        if not (math.isfinite(angle1) and math.isfinite(angle2)):
            sweep = 0.0
        elif sweep < 0:
            sweep = math.fmod(math.fmod(angle2, sf.TWO_PI) - math.fmod(angle1, sf.TWO_PI), sf.TWO_PI)
            if sweep < 0:
                sweep += sf.TWO_PI
        sweep = min(sweep, sf.TWO_PI * sf.ARC_MAX_TURNS)

        self._line(self._device(xc + radius * math.cos(start), yc + radius * math.sin(start)))

        # progress is tracked from zero so huge start angles still advance
        drawn = 0.0
        while sweep - drawn > sf.ARC_EPSILON:
            arc_to_draw = min(sweep - drawn, sf.ARC_SEGMENT_MAX)
            _, _, p1_x, p1_y, p2_x, p2_y, p3_x, p3_y = _acute_arc_to_bezier(start + drawn, arc_to_draw)
            self._curve(
                self._device(xc + radius * p1_x, yc + radius * p1_y),
                self._device(xc + radius * p2_x, yc + radius * p2_y),
                self._device(xc + radius * p3_x, yc + radius * p3_y),
            )
            drawn += arc_to_draw

    def rectangle(self, x: float, y: float, width: float, height: float) -> None:
        self._record("rectangle", x, y, width, height)
        self._begin_subpath(self._device(x, y))
        self._line(self._device(x + width, y))
        self._line(self._device(x + width, y + height))
        self._line(self._device(x, y + height))
        self._close()

    def close_path(self) -> None:
        self._record("close_path")
        self._close()

    def _close(self) -> None:
        if self.currentpoint is None or not self.path:
            return
        self.path[-1].append(sf.ClosePath())
        self.currentpoint = self._subpath_start

    # ---- painting -------------------------------------------------------

    def stroke(self) -> None:
        self._record("stroke")
        self._paint(sf.Stroke(self.gstate.ctm))

    def fill(self) -> None:
        self._record("fill")
        self._paint(sf.Fill(self.gstate.ctm))

    def _paint(self, element) -> None:
        if self.path:
            self.display_list.append(self.path)
            self.display_list.append(element)
        self.path = sf.Path()
        self.currentpoint = None
        self._subpath_start = None

    # ---- graphics state -------------------------------------------------

    def save(self) -> None:
        self._record("save")
        if len(self.gstate_stack) >= sf.G_STACK_MAX:
            return sf_error.e(sf_error.LIMITCHECK, self.save.__name__)
        self.gstate_stack.append(self.gstate.copy())

    def restore(self) -> None:
        self._record("restore")
        if not self.gstate_stack:
            return sf_error.e(sf_error.INVALIDRESTORE, self.restore.__name__)
        self.gstate = self.gstate_stack.pop()

    def translate(self, tx: float, ty: float) -> None:
        self._record("translate", tx, ty)
        self._concat(translation(tx, ty), self.translate.__name__)

    def rotate(self, angle: float) -> None:
        self._record("rotate", angle)
        self._concat(rotation(angle), self.rotate.__name__)

    def scale(self, sx: float, sy: float) -> None:
        self._record("scale", sx, sy)
        self._concat(scaling(sx, sy), self.scale.__name__)

    def _concat(self, m: sf.Matrix, func_name: str) -> None:
        ctm = _matmult(m, self.gstate.ctm)
        # cairo refuses a transform it cannot invert
        if _matrix_inverse(ctm) is None:
            return sf_error.e(sf_error.INVALIDMATRIX, func_name)
        self.gstate.ctm = ctm
