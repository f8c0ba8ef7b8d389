"""
Gallery demo.

Draws a random line and point, a fixed rectangle and triangle, a pentagon
and a batch of random circles, then saves the result as a PNG.

Usage (CLI):
    python -m rastershapes.demo --out image.png --seed 7

Or from a notebook:
    from rastershapes.demo import render_gallery
    render_gallery("image.png", seed=7)
"""

import argparse
import os

from tqdm import tqdm

from rastershapes.canvas import ImageCanvas
from rastershapes.config import CANVAS_PRESETS
from rastershapes.render import Renderer
from rastershapes.rng import RandomSource
from rastershapes.shapes import Circle, Line, Point, Rectangle, RegularPolygon, Triangle


def build_gallery(width, height, rng, num_random=50):
    """Return the gallery shapes in draw order."""
    shapes = [
        Line.random(width, height, rng),
        Point.random(width, height, rng),
        Rectangle(Point(150, 300), Point(50, 60)),
        Triangle(Point(500, 500), Point(250, 700), Point(700, 800)),
        RegularPolygon.pentagon(Point(width // 2, height // 2), max(1, min(width, height) // 4)),
    ]
    shapes += [Circle.random(width, height, rng) for _ in range(num_random)]
    return shapes


def render_gallery(path="image.png", preset="large", width=None, height=None,
                   seed=None, num_random=50):
    """Draw the gallery onto a fresh canvas and save it to ``path``."""
    p = CANVAS_PRESETS[preset]
    W = width if width is not None else p.width
    H = height if height is not None else p.height
    rng = RandomSource(seed)
    canvas = ImageCanvas(W, H)
    renderer = Renderer(rng)

    shapes = build_gallery(W, H, rng, num_random)
    written = 0
    for shape in tqdm(shapes, desc="drawing", unit="shape"):
        written += renderer.draw(shape, canvas)

    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(path)
    print(f"Gallery saved to {path} ({len(shapes)} shapes, {written} pixels)")
    return canvas


def main():
    p = argparse.ArgumentParser(description="rastershapes gallery demo")
    p.add_argument("--preset", choices=sorted(CANVAS_PRESETS), default="large")
    p.add_argument("--width", type=int, default=None, help="Override preset width")
    p.add_argument("--height", type=int, default=None, help="Override preset height")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--count", type=int, default=50, help="Number of random circles")
    p.add_argument("--out", default="image.png")
    args = p.parse_args()
    render_gallery(
        args.out,
        preset=args.preset,
        width=args.width,
        height=args.height,
        seed=args.seed,
        num_random=args.count,
    )


if __name__ == "__main__":
    main()
