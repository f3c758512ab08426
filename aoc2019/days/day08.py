"""Decoding a layered space image."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from ..grid import BoundedHashGrid, Point
from ..seqs import parse_int

BLACK = 0
WHITE = 1
TRANSPARENT = 2


def _layers(text: str, size: int) -> list[list[int]]:
    pixels = [parse_int(char) for char in text.strip()]
    return [pixels[start:start + size] for start in range(0, len(pixels), size)]


def part1(text: str, width: int = 25, height: int = 6) -> int:
    """Ones times twos on the layer with the fewest zeros."""
    layers = _layers(text, width * height)
    if not layers:
        raise ValueError("image has no layers")
    layer = min(layers, key=lambda pixels: pixels.count(0))
    return layer.count(1) * layer.count(2)


def part2(text: str, width: int = 25, height: int = 6) -> str:
    """Render the image formed by stacking the layers, front layer first."""
    image: dict[Point, bool] = {}
    for layer in _layers(text, width * height):
        for index, value in enumerate(layer):
            point = Point(index % width, index // width)
            if point in image:
                continue
            if value == BLACK:
                image[point] = False
            elif value == WHITE:
                image[point] = True
            elif value != TRANSPARENT:
                raise ValueError(f"Invalid pixel type: {value}")
    return BoundedHashGrid(image, width, height).render()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 8.")
    parser.add_argument("input", nargs="?", default="input.in")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print(f"Error reading file {args.input}:\n{exc}", file=sys.stderr)
        return 1
    print(part1(text, 25, 6))
    print(part2(text, 25, 6))
    return 0


if __name__ == "__main__":
    sys.exit(main())