"""Shared types for the shapes package (avoids circular imports)."""

import enum
from dataclasses import dataclass

from rastershapes.errors import InvalidParameterError


class ShapeKind(enum.Enum):
    """Closed set of drawable variants; the renderer dispatches on this tag."""
    POINT = "point"
    LINE = "line"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    CIRCLE = "circle"
    REGULAR_POLYGON = "regular_polygon"


@dataclass(frozen=True)
class Color:
    """24-bit RGB color, no alpha."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise InvalidParameterError(
                    f"color channel {name}={value} outside [0, 255]")

    @property
    def rgb(self):
        return (self.r, self.g, self.b)

    @classmethod
    def from_tuple(cls, rgb):
        r, g, b = rgb
        return cls(int(r), int(g), int(b))
