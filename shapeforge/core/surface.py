# ShapeForge - A Vector Shape Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Backend Surface Protocol

The shape operators draw on any object providing the path, painting and
transform calls below. The method names are those of ``cairo.Context``, so a
pycairo context can be passed in directly; ``RecordingSurface`` provides the
same calls in pure Python.
"""

from __future__ import annotations

import random
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Protocol, Tuple, runtime_checkable

# A uniform sampler over [0, 1)
Sampler = Callable[[], float]


@runtime_checkable
class Surface(Protocol):
    # path construction
    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...
    def arc(self, xc: float, yc: float, radius: float, angle1: float, angle2: float) -> None: ...
    def curve_to(self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> None: ...
    def rectangle(self, x: float, y: float, width: float, height: float) -> None: ...
    def close_path(self) -> None: ...
    def get_current_point(self) -> Tuple[float, float]: ...

    # painting
    def stroke(self) -> None: ...
    def fill(self) -> None: ...

    # transform
    def save(self) -> None: ...
    def restore(self) -> None: ...
    def translate(self, tx: float, ty: float) -> None: ...
    def rotate(self, angle: float) -> None: ...
    def scale(self, sx: float, sy: float) -> None: ...


@contextmanager
def gsave(surface: Surface) -> Iterator[Surface]:
    """
    Save the surface state for the duration of a ``with`` block.

    The matching restore runs on every exit path, including when the backend
    raises part way through building a shape, so a failed call never leaves
    a pushed transform behind.
    """
    surface.save()
    try:
        yield surface
    finally:
        surface.restore()


def resolve_sampler(sampler: Optional[Sampler]) -> Sampler:
    """Return the caller's sampler, or a private unseeded one."""
    if sampler is not None:
        return sampler
    return random.Random().random
