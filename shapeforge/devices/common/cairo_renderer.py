# ShapeForge - A Vector Shape Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Cairo Display List Replay

Replays a display list recorded by ``RecordingSurface`` onto a Cairo
context owned by the caller. The caller keeps control of the paint source,
line width and everything else that is not path geometry.

Paths are stored in device space, so they are rebuilt under the context's
matrix at entry. Each Stroke carries the CTM that was current when it was
issued; the stroke is performed under that CTM so line widths scale exactly
as they would have when drawing on the Cairo context directly.
"""

import logging

import cairo

from ...core import types as sf

logger = logging.getLogger(__name__)


def _build_path(cairo_ctx: cairo.Context, path: sf.Path) -> None:
    for subpath in path:
        for pc_item in subpath:
            if isinstance(pc_item, sf.MoveTo):
                cairo_ctx.move_to(pc_item.p.x, pc_item.p.y)
                continue
            if isinstance(pc_item, sf.LineTo):
                cairo_ctx.line_to(pc_item.p.x, pc_item.p.y)
                continue
            if isinstance(pc_item, sf.CurveTo):
                cairo_ctx.curve_to(
                    pc_item.p1.x, pc_item.p1.y,
                    pc_item.p2.x, pc_item.p2.y,
                    pc_item.p3.x, pc_item.p3.y,
                )
                continue
            if isinstance(pc_item, sf.ClosePath):
                cairo_ctx.close_path()


def render_display_list(display_list: sf.DisplayList, cairo_ctx: cairo.Context) -> None:
    """
    Render a recorded display list to a Cairo context.

    Args:
        display_list: Paths, each followed by the Stroke or Fill that consumed it
        cairo_ctx: Cairo context to render to; its matrix at entry maps the
            recording's device space onto the target

    The context's graphics state is saved on entry and restored on exit, and
    its current path is left empty.
    """
    logger.debug("rendering %d display list elements", len(display_list))

    base_matrix = cairo_ctx.get_matrix()
    cairo_ctx.save()
    try:
        cairo_ctx.new_path()
        for item in display_list:
            if isinstance(item, sf.Path):
                cairo_ctx.set_matrix(base_matrix)
                _build_path(cairo_ctx, item)
                continue

            if isinstance(item, sf.Fill):
                cairo_ctx.fill()
                continue

            if isinstance(item, sf.Stroke):
                # the path is already fixed in device space; only the pen
                # follows the CTM recorded with the stroke
                cairo_ctx.set_matrix(cairo.Matrix(*item.ctm).multiply(base_matrix))
                cairo_ctx.stroke()
                continue

            logger.warning("skipping unknown display list element %r", item)
    finally:
        cairo_ctx.new_path()
        cairo_ctx.restore()
