# ShapeForge - A Vector Shape Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Affine matrix helpers.

Matrices are six-tuples ``(xx, yx, xy, yy, x0, y0)``, the same layout as
``cairo.Matrix``, so that a point transforms as

    x' = xx * x + xy * y + x0
    y' = yx * x + yy * y + y0

Products are computed with high-precision decimal arithmetic in a private
context and rounded once to the nearest float, so a chain of
translate/rotate/restore calls does not accumulate floating-point drift.
The caller's decimal context is never touched.
"""

import math
from decimal import Context, Decimal, localcontext
from typing import Optional, Tuple

from ..core.types.graphics import Matrix

# High precision, and inf * 0 gives nan as it does for floats
_CTX = Context(prec=50, traps=[])

IDENTITY: Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


def _dec(value: float) -> Decimal:
    return Decimal(str(value))


def _transform_point(m: Matrix, x: float, y: float) -> Tuple[float, float]:
    x_dec = _dec(x)
    y_dec = _dec(y)
    m00, m01, m10, m11, m20, m21 = (_dec(v) for v in m)

    with localcontext(_CTX):
        xt_dec = m00 * x_dec + m10 * y_dec + m20
        yt_dec = m01 * x_dec + m11 * y_dec + m21

    return float(xt_dec), float(yt_dec)


def _matmult(mat1: Matrix, mat2: Matrix) -> Matrix:
    """
    Multiplies mat1 by mat2 and returns the product.

    [m1_00 m1_01  0 ]   [m2_00 m2_01  0 ]
    [m1_10 m1_11  0 ] x [m2_10 m2_11  0 ]
    [m1_20 m1_21  1 ]   [m2_20 m2_21  1 ]
    """
    m1_00, m1_01, m1_10, m1_11, m1_20, m1_21 = (_dec(v) for v in mat1)
    m2_00, m2_01, m2_10, m2_11, m2_20, m2_21 = (_dec(v) for v in mat2)

    with localcontext(_CTX):
        product = (
            m1_00 * m2_00 + m1_01 * m2_10,  # xx
            m1_00 * m2_01 + m1_01 * m2_11,  # yx
            m1_10 * m2_00 + m1_11 * m2_10,  # xy
            m1_10 * m2_01 + m1_11 * m2_11,  # yy
            m1_20 * m2_00 + m1_21 * m2_10 + m2_20,  # x0
            m1_20 * m2_01 + m1_21 * m2_11 + m2_21,  # y0
        )
    return tuple(float(v) for v in product)


def _matrix_inverse(m: Matrix) -> Optional[Matrix]:
    """
    Calculate the inverse of an affine matrix with the direct formula.
    Intermediate results are kept at full Decimal precision; only the final
    results are rounded. Returns None for a singular matrix, that is one
    whose determinant is zero or not finite.
    """
    a, b, c, d, tx, ty = (_dec(v) for v in m)

    with localcontext(_CTX):
        det = a * d - b * c
        if not det.is_finite() or det == 0:
            return None
        inverse = (
            d / det,
            -b / det,
            -c / det,
            a / det,
            (c * ty - d * tx) / det,
            (b * tx - a * ty) / det,
        )
    return tuple(float(v) for v in inverse)


def translation(tx: float, ty: float) -> Matrix:
    return (1.0, 0.0, 0.0, 1.0, float(tx), float(ty))


def rotation(angle: float) -> Matrix:
    """Rotation by angle radians, positive from the x axis toward the y axis."""
    c = math.cos(angle)
    s = math.sin(angle)
    return (c, s, -s, c, 0.0, 0.0)


def scaling(sx: float, sy: float) -> Matrix:
    return (float(sx), 0.0, 0.0, float(sy), 0.0, 0.0)
