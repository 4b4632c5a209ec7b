# ShapeForge - A Vector Shape Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
ShapeContext - Shape Operators Bound To One Surface

The shape operators are free functions taking the backend surface as their
first argument. ``ShapeContext`` binds them to a single surface so they can
be called as methods:

```python
import cairo
from shapeforge.context import ShapeContext

surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 200, 200)
sc = ShapeContext(cairo.Context(surface))
sc.fill_star(100, 100, 40, 90, 5, 0)
sc.set_source_rgb(1, 0, 0)   # not an operator, passed through to cairo
sc.stroke_round_rectangle(10, 10, 180, 180, 12)
```

The operator table below is the complete set of names the context answers
for; any other attribute is looked up on the bound surface.
"""

from __future__ import annotations

import functools

from .core.surface import Surface
from .operators import path as sf_path
from .operators import shapes as sf_shapes

OPERATORS = (
    # line operators
    ("line", sf_path.line),
    ("line_through", sf_path.line_through),
    ("ray", sf_path.ray),
    ("grid", sf_path.grid),
    # point list operators
    ("path", sf_path.path),
    ("fill_path", sf_path.fill_path),
    ("stroke_path", sf_path.stroke_path),
    ("points", sf_shapes.points),
    # curve operators
    ("stroke_curve_to", sf_path.stroke_curve_to),
    ("quadratic_curve_to", sf_path.quadratic_curve_to),
    ("stroke_quadratic_curve_to", sf_path.stroke_quadratic_curve_to),
    ("multi_curve", sf_path.multi_curve),
    ("stroke_multi_curve", sf_path.stroke_multi_curve),
    ("multi_loop", sf_path.multi_loop),
    ("fill_multi_loop", sf_path.fill_multi_loop),
    ("stroke_multi_loop", sf_path.stroke_multi_loop),
    ("fractal_line", sf_path.fractal_line),
    ("stroke_fractal_line", sf_path.stroke_fractal_line),
    # rectangle operators
    ("rectangle", sf_shapes.rectangle),
    ("fill_rectangle", sf_shapes.fill_rectangle),
    ("stroke_rectangle", sf_shapes.stroke_rectangle),
    ("round_rectangle", sf_shapes.round_rectangle),
    ("fill_round_rectangle", sf_shapes.fill_round_rectangle),
    ("stroke_round_rectangle", sf_shapes.stroke_round_rectangle),
    # round operators
    ("circle", sf_shapes.circle),
    ("fill_circle", sf_shapes.fill_circle),
    ("stroke_circle", sf_shapes.stroke_circle),
    ("ellipse", sf_shapes.ellipse),
    ("fill_ellipse", sf_shapes.fill_ellipse),
    ("stroke_ellipse", sf_shapes.stroke_ellipse),
    # figure operators
    ("polygon", sf_shapes.polygon),
    ("fill_polygon", sf_shapes.fill_polygon),
    ("stroke_polygon", sf_shapes.stroke_polygon),
    ("star", sf_shapes.star),
    ("fill_star", sf_shapes.fill_star),
    ("stroke_star", sf_shapes.stroke_star),
    ("splat", sf_shapes.splat),
    ("fill_splat", sf_shapes.fill_splat),
    ("stroke_splat", sf_shapes.stroke_splat),
    ("heart", sf_shapes.heart),
    ("fill_heart", sf_shapes.fill_heart),
    ("stroke_heart", sf_shapes.stroke_heart),
)

operator_table = {name: fn for name, fn in OPERATORS}


class ShapeContext:
    """
    Binds the shape operators to one backend surface.

    The context holds nothing but the surface, so any number of contexts may
    wrap the same surface. Like the surface itself, a context must not be
    drawn on from more than one thread at a time.
    """

    __slots__ = ("surface",)

    def __init__(self, surface: Surface) -> None:
        self.surface = surface

    def __getattr__(self, name: str):
        # only reached when the slot itself is unset
        if name == "surface":
            raise AttributeError(name)
        fn = operator_table.get(name)
        if fn is not None:
            return functools.partial(fn, self.surface)
        return getattr(self.surface, name)

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(operator_table))

    def __repr__(self) -> str:
        return f"ShapeContext({self.surface!r})"
