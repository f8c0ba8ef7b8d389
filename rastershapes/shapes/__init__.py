"""
Shape catalog for rastershapes.

The variant set is closed: every shape class carries a ``kind`` tag from
``ShapeKind`` and a ``random(width, height, rng)`` factory.

Usage::

    from rastershapes.rng import RandomSource
    from rastershapes.shapes import random_shape
    shape = random_shape(1000, 1000, RandomSource(seed=0))
"""

from rastershapes.shapes._types import Color, ShapeKind  # noqa: F401
from rastershapes.shapes.primitives import PRIMITIVE_SHAPES, Point, Line, Rectangle, Circle  # noqa: F401
from rastershapes.shapes.polygons import POLYGON_SHAPES, Triangle, RegularPolygon  # noqa: F401


SHAPE_TYPES = PRIMITIVE_SHAPES + POLYGON_SHAPES

SHAPE_BY_KIND = {cls.kind: cls for cls in SHAPE_TYPES}


def random_shape(width, height, rng, kinds=None):
    """Pick a variant uniformly (optionally among ``kinds``) and build one."""
    pool = SHAPE_TYPES if kinds is None else [SHAPE_BY_KIND[k] for k in kinds]
    cls = pool[rng.next_int_in_range(0, len(pool))]
    return cls.random(width, height, rng)
