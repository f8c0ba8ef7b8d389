"""
Global configuration: shape parameter ranges, sampling limits, canvas presets.

Random shape sizes are independent of the canvas size.  Shapes that spill
over the edge are clipped pixel by pixel at draw time, so small canvases
simply show less of a large circle.
"""

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Random construction ranges (half-open: [lo, hi))
# ---------------------------------------------------------------------------

RADIUS_RANGE = (30, 250)       # Circle / RegularPolygon radius
SIDES_RANGE = (3, 13)          # RegularPolygon vertex count

# ---------------------------------------------------------------------------
# Rasterization
# ---------------------------------------------------------------------------

MIN_CIRCLE_SAMPLES = 8         # floor for tiny radii
MIN_POLYGON_SIDES = 3

# ---------------------------------------------------------------------------
# Canvas presets
# ---------------------------------------------------------------------------

BACKGROUND = (0, 0, 0)


@dataclass
class CanvasPreset:
    name: str
    width: int
    height: int


PRESET_SMALL = CanvasPreset(
    name="small",
    width=500,
    height=500,
)

PRESET_LARGE = CanvasPreset(
    name="large",
    width=1000,
    height=1000,
)

CANVAS_PRESETS = {"small": PRESET_SMALL, "large": PRESET_LARGE}
