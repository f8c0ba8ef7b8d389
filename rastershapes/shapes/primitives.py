"""
Primitive shapes: points, lines, rectangles, circles.

Each variant is an immutable dataclass tagged with a ``ShapeKind`` and can
be built explicitly or via ``random(width, height, rng)``.
"""

import numbers
from dataclasses import dataclass
from typing import ClassVar, Optional

from rastershapes.config import RADIUS_RANGE
from rastershapes.errors import InvalidParameterError
from rastershapes.shapes._types import Color, ShapeKind


def _check_canvas(width, height):
    if width <= 0 or height <= 0:
        raise InvalidParameterError(f"canvas size must be positive, got {width}x{height}")


def _rand_pt(width, height, rng):
    return Point(rng.next_int_in_range(0, width), rng.next_int_in_range(0, height))


def _is_int(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _check_radius(radius):
    if not _is_int(radius) or radius <= 0:
        raise InvalidParameterError(f"radius must be a positive integer, got {radius!r}")


# ---------------------------------------------------------------------------
# Point
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Point:
    """Signed integer pixel coordinate; may lie off-canvas."""
    kind: ClassVar[ShapeKind] = ShapeKind.POINT

    x: int
    y: int
    color: Optional[Color] = None

    def __post_init__(self):
        if not (_is_int(self.x) and _is_int(self.y)):
            raise InvalidParameterError(
                f"point coordinates must be integers, got ({self.x!r}, {self.y!r})")

    @property
    def xy(self):
        return (self.x, self.y)

    @classmethod
    def random(cls, width, height, rng):
        _check_canvas(width, height)
        return _rand_pt(width, height, rng)


# ---------------------------------------------------------------------------
# Line
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Line:
    kind: ClassVar[ShapeKind] = ShapeKind.LINE

    start: Point
    end: Point
    color: Optional[Color] = None

    @classmethod
    def random(cls, width, height, rng):
        _check_canvas(width, height)
        return cls(_rand_pt(width, height, rng), _rand_pt(width, height, rng))


# ---------------------------------------------------------------------------
# Rectangle (axis-aligned, any two opposite corners)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Rectangle:
    kind: ClassVar[ShapeKind] = ShapeKind.RECTANGLE

    corner_a: Point
    corner_b: Point
    color: Optional[Color] = None

    @property
    def bounds(self):
        """``(min_x, min_y, max_x, max_y)`` regardless of corner order."""
        return (min(self.corner_a.x, self.corner_b.x),
                min(self.corner_a.y, self.corner_b.y),
                max(self.corner_a.x, self.corner_b.x),
                max(self.corner_a.y, self.corner_b.y))

    @classmethod
    def random(cls, width, height, rng):
        _check_canvas(width, height)
        return cls(_rand_pt(width, height, rng), _rand_pt(width, height, rng))


# ---------------------------------------------------------------------------
# Circle
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Circle:
    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    center: Point
    radius: int
    color: Optional[Color] = None

    def __post_init__(self):
        _check_radius(self.radius)

    @classmethod
    def random(cls, width, height, rng):
        _check_canvas(width, height)
        center = _rand_pt(width, height, rng)
        return cls(center, rng.next_int_in_range(*RADIUS_RANGE))


PRIMITIVE_SHAPES = (Point, Line, Rectangle, Circle)
