"""Canvas protocol and a numpy-backed RGB implementation.

The renderer only needs ``width``, ``height`` and ``set_pixel``; anything
satisfying ``Canvas`` can be drawn on.  ``ImageCanvas`` is the in-memory
surface used by the demo and the tests, with PNG output through OpenCV.
"""

from __future__ import annotations

import logging
from typing import Protocol

import cv2
import numpy as np

from rastershapes.config import BACKGROUND
from rastershapes.errors import CanvasWriteError, InvalidParameterError, OutOfBoundsError
from rastershapes.shapes._types import Color

logger = logging.getLogger(__name__)


def _as_color(color):
    """Accept a ``Color`` or any (r, g, b) sequence."""
    if isinstance(color, Color):
        return color
    return Color.from_tuple(color)


class Canvas(Protocol):
    width: int
    height: int

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        ...


class ImageCanvas:
    """RGB raster stored as a ``uint8`` array of shape (height, width, 3)."""

    def __init__(self, width: int, height: int, background=BACKGROUND):
        if width <= 0 or height <= 0:
            raise InvalidParameterError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.background = _as_color(background).rgb
        self._buf = np.empty((height, width, 3), dtype=np.uint8)
        self.clear()

    @property
    def pixels(self) -> np.ndarray:
        """Read-only view of the buffer, indexed ``[y, x, channel]``."""
        view = self._buf.view()
        view.flags.writeable = False
        return view

    def clear(self, color=None) -> None:
        self._buf[...] = self.background if color is None else _as_color(color).rgb

    def get_pixel(self, x: int, y: int) -> Color:
        self._check(x, y)
        return Color.from_tuple(self._buf[y, x])

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        self._check(x, y)
        self._buf[y, x] = color.rgb

    def painted_mask(self) -> np.ndarray:
        """Boolean (height, width) mask of pixels that differ from the background."""
        return np.any(self._buf != np.array(self.background, dtype=np.uint8), axis=-1)

    def save(self, path: str) -> None:
        """Encode the canvas to an image file (format from the extension)."""
        bgr = cv2.cvtColor(self._buf, cv2.COLOR_RGB2BGR)
        try:
            ok = cv2.imwrite(str(path), bgr)
        except cv2.error as exc:
            raise CanvasWriteError(f"cannot encode canvas to {path}: {exc}") from exc
        if not ok:
            raise CanvasWriteError(f"cannot write canvas to {path}")
        logger.debug("saved %dx%d canvas to %s", self.width, self.height, path)

    def _check(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(x, y, self.width, self.height)
