"""
Low-level rasterization kernel.

Every function here is pure: it takes integer geometry and returns the
ordered list of integer pixel coordinates that represent the outline.
Nothing is written to a canvas at this level; bounds filtering is either
requested explicitly (circles) or left to the caller (lines).

Lines use integer-only Bresenham traversal.  Circles sample the parametric
equation with a step count that grows with the circumference so adjacent
samples never leave a gap.
"""

import math

import numpy as np

from rastershapes.config import MIN_CIRCLE_SAMPLES


# ---------------------------------------------------------------------------
# Bounds
# ---------------------------------------------------------------------------

def in_bounds(x, y, width, height):
    return 0 <= x < width and 0 <= y < height


def clip_pixels(pixels, width, height):
    """Yield only the pixels that fall inside a ``width`` x ``height`` raster."""
    for x, y in pixels:
        if in_bounds(x, y, width, height):
            yield x, y


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------

def rasterize_line(p0, p1):
    """Return the Bresenham pixel sequence from ``p0`` to ``p1`` inclusive.

    The walk always starts from the lexicographically smaller endpoint and
    is reversed afterwards when needed, so (A, B) and (B, A) cover exactly
    the same pixels.  The result has ``max(|dx|, |dy|) + 1`` entries.
    """
    a = (int(p0[0]), int(p0[1]))
    b = (int(p1[0]), int(p1[1]))
    if a <= b:
        return _bresenham(a, b)
    pts = _bresenham(b, a)
    pts.reverse()
    return pts


def _bresenham(a, b):
    x, y = a
    x1, y1 = b
    dx = abs(x1 - x)
    dy = abs(y1 - y)
    sx = 1 if x < x1 else -1
    sy = 1 if y < y1 else -1

    pts = []
    if dx >= dy:
        err = dx // 2
        for _ in range(dx):
            pts.append((x, y))
            err -= dy
            if err < 0:
                y += sy
                err += dx
            x += sx
    else:
        err = dy // 2
        for _ in range(dy):
            pts.append((x, y))
            err -= dx
            if err < 0:
                x += sx
                err += dy
            y += sy
    # The error term lands exactly on the far endpoint.
    pts.append((x, y))
    return pts


def rasterize_polyline(vertices, closed=True):
    """Concatenate the line sequences through ``vertices``.

    With ``closed=True`` the last vertex connects back to the first.
    Shared vertices appear once per edge touching them.
    """
    pts = []
    edges = polygon_edges(vertices) if closed else list(zip(vertices, vertices[1:]))
    for a, b in edges:
        pts.extend(rasterize_line(a, b))
    return pts


# ---------------------------------------------------------------------------
# Circles
# ---------------------------------------------------------------------------

def circle_sample_count(radius):
    """Samples needed so consecutive points are at most one pixel apart."""
    return max(MIN_CIRCLE_SAMPLES, int(math.ceil(2 * math.pi * radius)))


def rasterize_circle(center, radius, width=None, height=None):
    """Sample the boundary of a circle as integer pixels.

    Samples are rounded half-up, so the rounded positions of two
    neighbouring samples differ by at most one in each axis.  Repeated
    consecutive pixels are collapsed.  When ``width`` and ``height`` are
    given, each sample is bounds-checked on its own and dropped if it lies
    outside the raster.
    """
    cx, cy = int(center[0]), int(center[1])
    n = circle_sample_count(radius)
    angles = np.arange(n) * (2 * np.pi / n)
    xs = cx + np.floor(radius * np.cos(angles) + 0.5).astype(np.int64)
    ys = cy + np.floor(radius * np.sin(angles) + 0.5).astype(np.int64)

    pts = []
    for x, y in zip(xs.tolist(), ys.tolist()):
        if pts and pts[-1] == (x, y):
            continue
        pts.append((x, y))
    if len(pts) > 1 and pts[-1] == pts[0]:
        pts.pop()

    if width is not None and height is not None:
        pts = list(clip_pixels(pts, width, height))
    return pts


# ---------------------------------------------------------------------------
# Polygons
# ---------------------------------------------------------------------------

def polygon_edges(vertices):
    """Cyclic edge list: vertex i joins vertex (i + 1) mod N."""
    n = len(vertices)
    return [(vertices[i], vertices[(i + 1) % n]) for i in range(n)]


def regular_polygon_vertices(center, radius, num_sides, rotation=0.0):
    """Integer vertices of a regular polygon inscribed in a circle.

    Vertex ``i`` sits at angle ``rotation + 2*pi*i / num_sides``.
    """
    cx, cy = int(center[0]), int(center[1])
    angles = np.linspace(0, 2 * np.pi, num_sides, endpoint=False) + rotation
    xs = cx + np.floor(radius * np.cos(angles) + 0.5).astype(np.int64)
    ys = cy + np.floor(radius * np.sin(angles) + 0.5).astype(np.int64)
    return list(zip(xs.tolist(), ys.tolist()))


def rectangle_corners(corner_a, corner_b):
    """Normalize two opposite corners into four cyclic corners.

    Order: top-left, top-right, bottom-right, bottom-left (y grows down).
    """
    x0, x1 = sorted((int(corner_a[0]), int(corner_b[0])))
    y0, y1 = sorted((int(corner_a[1]), int(corner_b[1])))
    return [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]
