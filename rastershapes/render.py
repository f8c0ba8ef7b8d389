"""
Renderer: turns one shape into pixel writes on a canvas.

Each ``draw`` call picks a single color (the shape's own, or one random
triple), asks the raster kernel for the shape's pixel sequence and writes
every in-bounds pixel in order.  Later writes replace earlier ones; there
is no blending and no state carried between calls.
"""

import logging

from rastershapes.raster import (
    in_bounds, rasterize_circle, rasterize_line, rasterize_polyline,
    rectangle_corners,
)
from rastershapes.shapes import ShapeKind

logger = logging.getLogger(__name__)


def shape_pixels(shape, width=None, height=None):
    """Ordered pixel sequence for ``shape``, dispatched on ``shape.kind``.

    ``width``/``height`` are only used to pre-clip circle samples; line
    based shapes return their full sequence and are clipped by the caller.
    """
    kind = shape.kind
    if kind is ShapeKind.POINT:
        return [shape.xy]
    if kind is ShapeKind.LINE:
        return rasterize_line(shape.start.xy, shape.end.xy)
    if kind is ShapeKind.RECTANGLE:
        return rasterize_polyline(rectangle_corners(shape.corner_a.xy, shape.corner_b.xy))
    if kind is ShapeKind.TRIANGLE:
        return rasterize_polyline(shape.vertices)
    if kind is ShapeKind.CIRCLE:
        return rasterize_circle(shape.center.xy, shape.radius, width, height)
    if kind is ShapeKind.REGULAR_POLYGON:
        return rasterize_polyline(shape.vertices)
    raise TypeError(f"unknown shape kind: {kind!r}")


class Renderer:
    """Draws shapes onto any object satisfying the ``Canvas`` protocol."""

    def __init__(self, rng):
        self.rng = rng

    def pick_color(self, shape):
        if shape.color is not None:
            return shape.color
        return self.rng.next_u8_triple()

    def draw(self, shape, canvas):
        """Draw one shape; returns the number of pixels written."""
        color = self.pick_color(shape)
        w, h = canvas.width, canvas.height
        pixels = shape_pixels(shape, w, h)
        written = 0
        for x, y in pixels:
            if in_bounds(x, y, w, h):
                canvas.set_pixel(x, y, color)
                written += 1
        logger.debug("%s: wrote %d pixels", shape.kind.value, written)
        return written

    def draw_all(self, shapes, canvas):
        """Draw ``shapes`` in order (painter's algorithm)."""
        return sum(self.draw(shape, canvas) for shape in shapes)
