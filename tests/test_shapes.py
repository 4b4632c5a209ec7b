"""Tests for the closed figure operators."""

import math

import pytest

from shapeforge.core import error as sf_error
from shapeforge.core import types as sf
from shapeforge.core.display_list import RecordingSurface
from shapeforge.operators import path as sf_path
from shapeforge.operators import shapes as sf_shapes


def half():
    return 0.5


def approx_call(name, *args):
    return sf.Call(name, pytest.approx(args))


class TestRectangles:
    def test_rectangle(self, surface):
        sf_shapes.rectangle(surface, 1, 2, 3, 4)
        assert surface.calls == [sf.Call("rectangle", (1, 2, 3, 4))]

    def test_round_rectangle(self, surface):
        sf_shapes.round_rectangle(surface, 0, 0, 10, 10, 2)
        assert surface.calls == [
            sf.Call("move_to", (2, 0)),
            sf.Call("line_to", (8, 0)),
            approx_call("arc", 8, 2, 2, -math.pi / 2, 0),
            sf.Call("line_to", (10, 8)),
            approx_call("arc", 8, 8, 2, 0, math.pi / 2),
            sf.Call("line_to", (2, 10)),
            approx_call("arc", 2, 8, 2, math.pi / 2, math.pi),
            sf.Call("line_to", (0, 2)),
            approx_call("arc", 2, 2, 2, math.pi, -math.pi / 2),
        ]

    def test_round_rectangle_ends_where_it_began(self, surface):
        sf_shapes.round_rectangle(surface, 0, 0, 10, 10, 2)
        assert surface.get_current_point() == pytest.approx((2, 0))
        assert len(surface.path) == 1


class TestRound:
    def test_circle(self, surface):
        sf_shapes.circle(surface, 1, 2, 3)
        assert surface.calls == [approx_call("arc", 1, 2, 3, 0, 2 * math.pi)]

    def test_ellipse(self, surface):
        sf_shapes.ellipse(surface, 5, 5, 3, 2)
        assert surface.calls == [
            sf.Call("save", ()),
            sf.Call("translate", (5, 5)),
            sf.Call("scale", (3, 2)),
            approx_call("arc", 0, 0, 1, 0, 2 * math.pi),
            sf.Call("restore", ()),
        ]
        subpath = surface.path[0]
        assert tuple(subpath[0].p) == pytest.approx((8, 5))
        assert subpath[1].p3.x == pytest.approx(5, abs=1e-9)
        assert subpath[1].p3.y == pytest.approx(7)
        assert surface.get_matrix() == pytest.approx((1, 0, 0, 1, 0, 0))

    def test_ellipse_zero_radius(self, surface):
        with pytest.raises(sf_error.BackendError) as excinfo:
            sf_shapes.ellipse(surface, 5, 5, 0, 2)
        assert excinfo.value.error_code == sf_error.INVALIDMATRIX
        assert surface.call_names()[-1] == "restore"
        assert surface.gstate_stack == []

    def test_tiny_ellipse(self, surface):
        sf_shapes.ellipse(surface, 0, 0, 1e-8, 1e-8)
        assert surface.get_matrix() == pytest.approx((1, 0, 0, 1, 0, 0))
        assert surface.get_current_point() == pytest.approx((1e-8, 0), rel=1e-6, abs=1e-20)

    def test_stroke_ellipse_uses_restored_transform(self, surface):
        sf_shapes.stroke_ellipse(surface, 5, 5, 3, 2)
        assert surface.display_list[1].ctm == pytest.approx((1, 0, 0, 1, 0, 0))


class TestPolygon:
    @pytest.mark.parametrize("sides", [3, 4, 6, 9])
    def test_vertices(self, surface, sides):
        sf_shapes.polygon(surface, 0, 0, 10, sides, 0)
        assert surface.calls_named("move_to") == [sf.Call("move_to", (10, 0))]
        lines = surface.calls_named("line_to")
        assert len(lines) == sides + 1
        for i, call in enumerate(lines[:-1]):
            angle = 2 * math.pi / sides * i
            assert call.args == pytest.approx((10 * math.cos(angle), 10 * math.sin(angle)))
        assert lines[-1] == sf.Call("line_to", (10, 0))

    def test_rotation_and_position(self, surface):
        sf_shapes.polygon(surface, 20, 30, 5, 4, math.pi / 2)
        assert surface.calls[:3] == [
            sf.Call("save", ()),
            sf.Call("translate", (20, 30)),
            approx_call("rotate", math.pi / 2),
        ]
        start = surface.path[0][0].p
        assert start.x == pytest.approx(20, abs=1e-9)
        assert start.y == pytest.approx(35)

    def test_no_sides(self, surface):
        sf_shapes.polygon(surface, 0, 0, 10, 0, 0)
        assert surface.call_names() == ["save", "translate", "rotate", "move_to", "line_to", "restore"]


class TestStar:
    def test_alternating_radii(self, surface):
        sf_shapes.star(surface, 0, 0, 5, 10, 5, 0)
        assert "move_to" not in surface.call_names()
        lines = surface.calls_named("line_to")
        assert len(lines) == 10
        for i, call in enumerate(lines):
            r = 10 if i % 2 == 0 else 5
            angle = math.pi / 5 * i
            assert call.args == pytest.approx((r * math.cos(angle), r * math.sin(angle)))
        assert surface.call_names()[-2:] == ["close_path", "restore"]

    def test_closed(self, surface):
        sf_shapes.star(surface, 0, 0, 2, 4, 3, 0)
        assert isinstance(surface.path[0][-1], sf.ClosePath)
        assert surface.get_current_point() == pytest.approx((4, 0))


class TestSplat:
    def test_control_points(self, surface, monkeypatch):
        captured = []
        monkeypatch.setattr(sf_shapes, "multi_loop", lambda s, points: captured.extend(points))
        # radius 10, core 4 and sample 0.75 give every lobe a reach of 13
        sf_shapes.splat(surface, 0, 0, 3, 10, 4, 1, sampler=lambda: 0.75)

        slice_ = 2 * math.pi / 6
        node_radius = 13
        shoulder = 4 + 0.8 * (node_radius - 4)
        expected = []
        for node in range(3):
            angle = slice_ * 2 * node
            for a, r in [
                (angle - slice_ * 1.3, 4),
                (angle + slice_ * 0.3, 4),
                (angle - slice_ * 0.3, shoulder),
                (angle + slice_ / 2, node_radius),
                (angle + slice_ * 1.3, shoulder),
            ]:
                expected.append(pytest.approx((r * math.cos(a), r * math.sin(a))))
        assert [tuple(p) for p in captured] == expected

    def test_shoulders_follow_each_lobe(self, surface, monkeypatch):
        captured = []
        monkeypatch.setattr(sf_shapes, "multi_loop", lambda s, points: captured.extend(points))
        # sample 0 pulls the lobe in to the core, shoulders included
        sf_shapes.splat(surface, 0, 0, 1, 10, 4, 1, sampler=lambda: 0.0)
        radii = [math.hypot(*p) for p in captured]
        assert radii == pytest.approx([4, 4, 4, 4, 4])

    def test_trace(self, surface):
        sf_shapes.splat(surface, 10, 10, 4, 8, 3, 0.5, sampler=half)
        names = surface.call_names()
        assert names[:3] == ["save", "translate", "move_to"]
        assert names[3:-1] == ["curve_to"] * 20
        assert names[-1] == "restore"

    def test_one_sample_per_node(self, surface):
        draws = []

        def sampler():
            draws.append(None)
            return 0.3

        sf_shapes.splat(surface, 0, 0, 7, 8, 3, 1, sampler=sampler)
        assert len(draws) == 7

    def test_no_variation_ignores_sampler(self):
        low, high = RecordingSurface(), RecordingSurface()
        sf_shapes.splat(low, 0, 0, 5, 10, 4, 0, sampler=lambda: 0.01)
        sf_shapes.splat(high, 0, 0, 5, 10, 4, 0, sampler=lambda: 0.99)
        assert low.calls == high.calls

    def test_variation_is_clamped(self):
        clamped, unit = RecordingSurface(), RecordingSurface()
        sf_shapes.splat(clamped, 0, 0, 3, 10, 4, 5, sampler=lambda: 0.2)
        sf_shapes.splat(unit, 0, 0, 3, 10, 4, 1, sampler=lambda: 0.2)
        assert clamped.calls == unit.calls

    def test_stays_within_radius(self, surface):
        sf_shapes.splat(surface, 0, 0, 6, 10, 4, 0, sampler=half)
        for call in surface.calls_named("curve_to"):
            assert math.hypot(*call.args[-2:]) <= 10 + 1e-9

    def test_needs_a_node(self, surface):
        with pytest.raises(sf_error.PreconditionViolated) as excinfo:
            sf_shapes.splat(surface, 0, 0, 0, 10, 4, 0.5, sampler=half)
        assert excinfo.value.error_code == sf_error.RANGECHECK
        assert surface.calls == []


class TestHeart:
    def test_trace(self, surface):
        sf_shapes.heart(surface, 50, 50, 10, 10, 0)
        names = surface.call_names()
        assert names == ["save", "translate", "rotate"] + ["line_to"] * 10 + ["restore"]
        first = surface.calls_named("line_to")[0]
        assert first.args == pytest.approx((0, -(10 * 0.8125 - 0.3125 - 0.125 - 0.0625)))

    def test_point_count_from_area(self, surface):
        sf_shapes.heart(surface, 0, 0, 5, 20, 0)
        assert len(surface.calls_named("line_to")) == 10
        surface.clear()
        sf_shapes.heart(surface, 0, 0, 3, 3, 0)
        assert len(surface.calls_named("line_to")) == 3

    def test_zero_area_draws_nothing(self, surface):
        sf_shapes.heart(surface, 0, 0, 0, 10, 0)
        assert surface.call_names() == ["save", "translate", "rotate", "restore"]
        assert surface.path == []

    def test_negative_area(self, surface):
        with pytest.raises(sf_error.PreconditionViolated):
            sf_shapes.heart(surface, 0, 0, -1, 4, 0)
        assert surface.calls == []


class TestPoints:
    def test_dot_per_point(self, surface):
        sf_shapes.points(surface, [(0, 0), sf.Point(5, 5)], 2)
        assert surface.calls == [
            approx_call("arc", 0, 0, 2, 0, 2 * math.pi),
            sf.Call("fill", ()),
            approx_call("arc", 5, 5, 2, 0, 2 * math.pi),
            sf.Call("fill", ()),
        ]

    def test_no_points(self, surface):
        sf_shapes.points(surface, [], 2)
        assert surface.calls == []


PAINT_VARIANTS = [
    (sf_shapes.rectangle, sf_shapes.fill_rectangle, "fill", (1, 2, 3, 4)),
    (sf_shapes.rectangle, sf_shapes.stroke_rectangle, "stroke", (1, 2, 3, 4)),
    (sf_shapes.round_rectangle, sf_shapes.fill_round_rectangle, "fill", (0, 0, 10, 8, 2)),
    (sf_shapes.round_rectangle, sf_shapes.stroke_round_rectangle, "stroke", (0, 0, 10, 8, 2)),
    (sf_shapes.circle, sf_shapes.fill_circle, "fill", (1, 1, 3)),
    (sf_shapes.circle, sf_shapes.stroke_circle, "stroke", (1, 1, 3)),
    (sf_shapes.ellipse, sf_shapes.fill_ellipse, "fill", (1, 1, 3, 2)),
    (sf_shapes.ellipse, sf_shapes.stroke_ellipse, "stroke", (1, 1, 3, 2)),
    (sf_shapes.polygon, sf_shapes.fill_polygon, "fill", (0, 0, 5, 6, 0.3)),
    (sf_shapes.polygon, sf_shapes.stroke_polygon, "stroke", (0, 0, 5, 6, 0.3)),
    (sf_shapes.star, sf_shapes.fill_star, "fill", (0, 0, 2, 5, 5, 0.1)),
    (sf_shapes.star, sf_shapes.stroke_star, "stroke", (0, 0, 2, 5, 5, 0.1)),
    (sf_shapes.splat, sf_shapes.fill_splat, "fill", (0, 0, 4, 10, 3, 0.5, half)),
    (sf_shapes.splat, sf_shapes.stroke_splat, "stroke", (0, 0, 4, 10, 3, 0.5, half)),
    (sf_shapes.heart, sf_shapes.fill_heart, "fill", (0, 0, 6, 6, 0.2)),
    (sf_shapes.heart, sf_shapes.stroke_heart, "stroke", (0, 0, 6, 6, 0.2)),
    (sf_path.path, sf_path.fill_path, "fill", ([(0, 0), (3, 0), (3, 3)],)),
    (sf_path.path, sf_path.stroke_path, "stroke", ([(0, 0), (3, 0), (3, 3)],)),
    (sf_path.multi_curve, sf_path.stroke_multi_curve, "stroke", ([(0, 0), (3, 0), (3, 3)],)),
    (sf_path.multi_loop, sf_path.fill_multi_loop, "fill", ([(0, 0), (3, 0), (3, 3)],)),
    (sf_path.multi_loop, sf_path.stroke_multi_loop, "stroke", ([(0, 0), (3, 0), (3, 3)],)),
    (sf_path.fractal_line, sf_path.stroke_fractal_line, "stroke", (0, 0, 10, 0, 0.5, 3, half)),
]


@pytest.mark.parametrize(
    "plain, variant, paint, args",
    PAINT_VARIANTS,
    ids=[variant.__name__ for _, variant, _, _ in PAINT_VARIANTS],
)
def test_paint_variant_builds_same_path(plain, variant, paint, args):
    expected = RecordingSurface()
    plain(expected, *args)
    actual = RecordingSurface()
    variant(actual, *args)
    assert actual.calls == expected.calls + [sf.Call(paint, ())]


TRANSFORMING_SHAPES = [
    ("line_through", lambda s: sf_path.line_through(s, 0, 0, 5, 5, 1)),
    ("ray", lambda s: sf_path.ray(s, 0, 0, 1, 2, 3)),
    ("ellipse", lambda s: sf_shapes.ellipse(s, 3, 3, 2, 1)),
    ("polygon", lambda s: sf_shapes.polygon(s, 3, 3, 2, 5, 0.5)),
    ("star", lambda s: sf_shapes.star(s, 3, 3, 1, 2, 5, 0.5)),
    ("splat", lambda s: sf_shapes.splat(s, 3, 3, 4, 5, 2, 1, sampler=half)),
    ("heart", lambda s: sf_shapes.heart(s, 3, 3, 4, 4, 0.5)),
]


@pytest.mark.parametrize(
    "draw",
    [draw for _, draw in TRANSFORMING_SHAPES],
    ids=[name for name, _ in TRANSFORMING_SHAPES],
)
def test_transform_restored(draw):
    surface = RecordingSurface()
    surface.translate(7, -3)
    surface.rotate(0.25)
    before = surface.get_matrix()
    draw(surface)
    assert surface.get_matrix() == before
    assert surface.gstate_stack == []
    assert surface.call_names().count("save") == surface.call_names().count("restore")


class LineFailingSurface(RecordingSurface):
    """Recording surface whose line_to always fails."""

    def line_to(self, x, y):
        self._record("line_to", x, y)
        return sf_error.e(sf_error.LIMITCHECK, "line_to")


@pytest.mark.parametrize(
    "draw",
    [
        lambda s: sf_shapes.polygon(s, 0, 0, 5, 6, 0),
        lambda s: sf_shapes.star(s, 0, 0, 2, 5, 5, 0),
        lambda s: sf_shapes.heart(s, 0, 0, 5, 5, 0),
        lambda s: sf_path.line_through(s, 0, 0, 5, 5, 1),
    ],
    ids=["polygon", "star", "heart", "line_through"],
)
def test_transform_restored_on_backend_failure(draw):
    surface = LineFailingSurface()
    with pytest.raises(sf_error.BackendError):
        draw(surface)
    assert surface.get_matrix() == pytest.approx((1, 0, 0, 1, 0, 0))
    assert surface.gstate_stack == []
    assert surface.call_names()[-1] == "restore"
