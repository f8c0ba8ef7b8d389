"""rastershapes - Rasterize points, lines, rectangles, triangles, circles and regular polygons."""

from rastershapes.canvas import Canvas, ImageCanvas
from rastershapes.render import Renderer, shape_pixels
from rastershapes.rng import RandomSource
from rastershapes.shapes import (
    Color, ShapeKind, Point, Line, Rectangle, Triangle, Circle, RegularPolygon,
    SHAPE_TYPES, random_shape,
)
