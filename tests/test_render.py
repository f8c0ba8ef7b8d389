"""Tests for the renderer."""

import logging

import numpy as np
import pytest

from rastershapes.canvas import ImageCanvas
from rastershapes.errors import CanvasWriteError
from rastershapes.render import Renderer, shape_pixels
from rastershapes.rng import RandomSource
from rastershapes.shapes import (
    Circle, Color, Line, Point, Rectangle, RegularPolygon, Triangle,
)


RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)


class ScriptedRng:
    """Deterministic stand-in that hands out colors from a list."""

    def __init__(self, colors):
        self.colors = list(colors)
        self.color_calls = 0

    def next_u8_triple(self):
        color = self.colors[self.color_calls % len(self.colors)]
        self.color_calls += 1
        return color

    def next_int_in_range(self, lo, hi):
        return lo


class RecordingCanvas:
    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.writes = []

    def set_pixel(self, x, y, color):
        self.writes.append((x, y, color))


class BrokenCanvas(RecordingCanvas):
    def set_pixel(self, x, y, color):
        raise CanvasWriteError("device gone")


@pytest.fixture
def canvas():
    return ImageCanvas(100, 100)


def _painted(canvas):
    ys, xs = np.nonzero(canvas.painted_mask())
    return set(zip(xs.tolist(), ys.tolist()))


class TestColorPolicy:
    def test_fixed_color_used(self, canvas):
        rng = ScriptedRng([GREEN])
        Renderer(rng).draw(Line(Point(0, 0), Point(10, 0), RED), canvas)
        assert rng.color_calls == 0
        assert canvas.get_pixel(5, 0) == RED

    @pytest.mark.parametrize("shape", [
        Triangle(Point(10, 10), Point(90, 20), Point(40, 80)),
        Rectangle(Point(5, 5), Point(60, 70)),
        RegularPolygon(Point(50, 50), 40, 7),
        Circle(Point(50, 50), 30),
    ])
    def test_one_color_per_draw(self, shape):
        rng = ScriptedRng([RED, GREEN, Color(0, 0, 255)])
        target = RecordingCanvas(100, 100)
        Renderer(rng).draw(shape, target)
        assert rng.color_calls == 1
        assert {c for _, _, c in target.writes} == {RED}

    def test_random_color_in_range(self, canvas):
        renderer = Renderer(RandomSource(3))
        for _ in range(20):
            c = renderer.pick_color(Point(1, 1))
            assert all(0 <= v <= 255 for v in c.rgb)


class TestBounds:
    def test_out_of_bounds_dropped(self):
        target = RecordingCanvas(50, 50)
        Renderer(ScriptedRng([RED])).draw(Circle(Point(45, 45), 40), target)
        assert target.writes
        assert all(0 <= x < 50 and 0 <= y < 50 for x, y, _ in target.writes)

    def test_point_off_canvas(self, canvas):
        written = Renderer(ScriptedRng([RED])).draw(Point(-1, 500), canvas)
        assert written == 0
        assert not canvas.painted_mask().any()

    def test_rectangle_partially_off_canvas(self):
        small = ImageCanvas(50, 50)
        Renderer(ScriptedRng([RED])).draw(Rectangle(Point(80, 80), Point(20, 20)), small)
        expected = {(x, 20) for x in range(20, 50)} | {(20, y) for y in range(20, 50)}
        assert _painted(small) == expected

    def test_debug_log_reports_written_pixels(self, caplog):
        small = ImageCanvas(50, 50)
        with caplog.at_level(logging.DEBUG, logger="rastershapes.render"):
            written = Renderer(ScriptedRng([RED])).draw(Circle(Point(45, 45), 40), small)
        assert written > 0
        assert f"circle: wrote {written} pixels" in caplog.text

    def test_canvas_failure_propagates(self):
        with pytest.raises(CanvasWriteError):
            Renderer(ScriptedRng([RED])).draw(Line(Point(0, 0), Point(5, 5)), BrokenCanvas(10, 10))


class TestDraw:
    def test_diagonal_line(self, canvas):
        written = Renderer(ScriptedRng([RED])).draw(Line(Point(0, 0), Point(99, 99)), canvas)
        assert written == 100
        assert _painted(canvas) == {(i, i) for i in range(100)}

    def test_write_order_matches_sequence(self):
        target = RecordingCanvas(100, 100)
        line = Line(Point(3, 4), Point(40, 17))
        Renderer(ScriptedRng([RED])).draw(line, target)
        assert [(x, y) for x, y, _ in target.writes] == shape_pixels(line)

    def test_painters_algorithm(self, canvas):
        renderer = Renderer(ScriptedRng([RED]))
        renderer.draw_all([
            Line(Point(0, 50), Point(99, 50), RED),
            Line(Point(50, 0), Point(50, 99), GREEN),
        ], canvas)
        assert canvas.get_pixel(50, 50) == GREEN
        assert canvas.get_pixel(10, 50) == RED

    def test_draw_all_counts(self, canvas):
        renderer = Renderer(ScriptedRng([RED]))
        total = renderer.draw_all([Point(1, 1), Point(2, 2), Point(200, 2)], canvas)
        assert total == 2

    def test_polygon_edges_all_drawn(self, canvas):
        poly = RegularPolygon(Point(50, 50), 30, 5)
        Renderer(ScriptedRng([RED])).draw(poly, canvas)
        painted = _painted(canvas)
        for v in poly.vertices:
            assert v in painted

    def test_triangle_closed(self, canvas):
        tri = Triangle(Point(10, 10), Point(80, 10), Point(10, 80))
        Renderer(ScriptedRng([RED])).draw(tri, canvas)
        painted = _painted(canvas)
        assert (45, 45) in painted      # hypotenuse
        assert (10, 45) in painted      # closing edge c -> a
