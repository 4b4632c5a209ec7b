# ShapeForge - A Vector Shape Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
ShapeForge Types Graphics Classes Module

This module contains the geometry value type and the path and display list
element classes. Path elements are always stored in device space by the
recording surface; Point values handed to the shape operators are in user
space.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, NamedTuple, Tuple

Matrix = Tuple[float, float, float, float, float, float]


@dataclass(frozen=True)
class Point:
    """A 2D coordinate pair.

    Frozen so points can be shared between point lists and used as
    dictionary keys.
    """
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def midpoint(self, other: "Point") -> "Point":
        return Point((self.x + other.x) / 2.0, (self.y + other.y) / 2.0)


def to_points(points: Iterable) -> List[Point]:
    """Coerce a sequence of Points or (x, y) pairs to a list of Points."""
    return [p if isinstance(p, Point) else Point(*p) for p in points]


class Call(NamedTuple):
    """One backend call as issued, with user space arguments."""
    name: str
    args: tuple


class DisplayList(list):
    """
    This is a list of elements like Paths, Fills and Strokes.
    A Path is a list of SubPaths.
    SubPaths consist of path construction elements like MoveTo, LineTo, CurveTo and ClosePath.
    """


# Path Elements
class Path(list):
    def __init__(self) -> None:
        super().__init__()


class SubPath(list):
    def __init__(self) -> None:
        super().__init__()


class Fill:
    def __init__(self, ctm: Matrix) -> None:
        self.ctm = ctm


class Stroke:
    def __init__(self, ctm: Matrix) -> None:
        # The CTM is stored so the renderer can stroke with the line width
        # scaled the same way it was when the stroke was issued
        self.ctm = ctm


# SubPath Elements
class MoveTo:
    def __init__(self, p: Point) -> None:
        self.p = p


class LineTo:
    def __init__(self, p: Point) -> None:
        self.p = p


class CurveTo:
    def __init__(self, p1: Point, p2: Point, p3: Point) -> None:
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3


class ClosePath:
    pass
