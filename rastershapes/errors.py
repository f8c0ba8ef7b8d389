"""Exception hierarchy for rastershapes."""


class RasterShapesError(Exception):
    """Base class for every error raised by this package."""


class InvalidParameterError(RasterShapesError, ValueError):
    """A shape, color or canvas was built with out-of-range parameters."""


class OutOfBoundsError(RasterShapesError, IndexError):
    """A pixel write targeted coordinates outside the canvas."""

    def __init__(self, x, y, width, height):
        super().__init__(f"pixel ({x}, {y}) outside {width}x{height} canvas")
        self.x = x
        self.y = y


class CanvasWriteError(RasterShapesError):
    """The output surface failed for a reason other than bounds."""
