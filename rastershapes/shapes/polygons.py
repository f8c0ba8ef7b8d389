"""
Triangles and regular polygons.

Both reduce to a cyclic vertex list that the renderer draws edge by edge
with a single color.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from rastershapes.config import MIN_POLYGON_SIDES, RADIUS_RANGE, SIDES_RANGE
from rastershapes.errors import InvalidParameterError
from rastershapes.raster import regular_polygon_vertices
from rastershapes.shapes._types import Color, ShapeKind
from rastershapes.shapes.primitives import Point, _check_canvas, _check_radius, _is_int, _rand_pt


# ---------------------------------------------------------------------------
# Triangle
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Triangle:
    kind: ClassVar[ShapeKind] = ShapeKind.TRIANGLE

    a: Point
    b: Point
    c: Point
    color: Optional[Color] = None

    @property
    def vertices(self):
        return [self.a.xy, self.b.xy, self.c.xy]

    @classmethod
    def random(cls, width, height, rng):
        _check_canvas(width, height)
        return cls(_rand_pt(width, height, rng),
                   _rand_pt(width, height, rng),
                   _rand_pt(width, height, rng))


# ---------------------------------------------------------------------------
# Regular polygon (3+ sides)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RegularPolygon:
    """Regular N-gon inscribed in a circle of ``radius`` around ``center``.

    ``rotation`` (radians) places vertex 0; the default puts it directly to
    the right of the center.
    """
    kind: ClassVar[ShapeKind] = ShapeKind.REGULAR_POLYGON

    center: Point
    radius: int
    sides: int
    rotation: float = 0.0
    color: Optional[Color] = None

    def __post_init__(self):
        _check_radius(self.radius)
        if not _is_int(self.sides) or self.sides < MIN_POLYGON_SIDES:
            raise InvalidParameterError(
                f"a polygon needs an integer side count of at least {MIN_POLYGON_SIDES}, "
                f"got {self.sides!r}")

    @property
    def vertices(self):
        return regular_polygon_vertices(self.center.xy, self.radius, self.sides, self.rotation)

    @classmethod
    def pentagon(cls, center, radius, color=None):
        return cls(center, radius, 5, color=color)

    @classmethod
    def hexagon(cls, center, radius, color=None):
        return cls(center, radius, 6, color=color)

    @classmethod
    def random(cls, width, height, rng):
        _check_canvas(width, height)
        center = _rand_pt(width, height, rng)
        radius = rng.next_int_in_range(*RADIUS_RANGE)
        sides = rng.next_int_in_range(*SIDES_RANGE)
        return cls(center, radius, sides)


POLYGON_SHAPES = (Triangle, RegularPolygon)
