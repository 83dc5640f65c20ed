"""Draw the twin Heighway dragon as an L-system traced by a turtle."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from os import PathLike

from labkit.image import DEPTH, GRAY, Image, ImageError, ImageFormat

LEVEL = 6
AXIOM = "FX+FX+"
DEFAULT_FILENAME = "../output/twindragon.pgm"
DEFAULT_ITERATIONS = 9

_RULES = {"X": "X+YF", "Y": "FX-Y"}
_GREYS = (100, 120, 150, 180, 200)
_DIRECTIONS = ((1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1))
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def starting_direction(total_iterations: int) -> tuple[int, int]:
    """The turtle's first heading: 45 degrees anti-clockwise per iteration.

    A negative count leaves a negative remainder, which falls back to (1, 0).
    """
    if total_iterations < 0:
        return _DIRECTIONS[0]
    return _DIRECTIONS[total_iterations % 8]


class Turtle:
    """A pen that walks over an image, drawing a pixel at each step."""

    def __init__(
        self,
        image: Image,
        x: int,
        y: int,
        scale: int = 1,
        direction: tuple[int, int] = (1, 0),
    ) -> None:
        if scale < 1:
            raise ValueError("scale must be positive")
        self.image = image
        self.x = x
        self.y = y
        self.scale = scale
        self.direction = direction
        self.drawn_pixels = 0

    def draw_greyscale(self, x: int, y: int) -> None:
        """Set pixel (x, y) to a grey that brightens as the path grows."""
        level = LEVEL * self.drawn_pixels // (self.image.height * self.image.height)
        grey = _GREYS[level] if 0 <= level < len(_GREYS) else 255
        self.image.set_pixel(x, y, grey)

    def iterate(self, text: str, iterations: int) -> None:
        """Interpret text, expanding X and Y until iterations runs below zero."""
        if iterations < 0:
            return
        for symbol in text:
            if symbol in _RULES:
                self.iterate(_RULES[symbol], iterations - 1)
            elif symbol == "-":
                dx, dy = self.direction
                self.direction = (-dy, dx)
            elif symbol == "+":
                dx, dy = self.direction
                self.direction = (dy, -dx)
            elif symbol == "F":
                self.drawn_pixels += 1
                self.draw_greyscale(
                    _trunc_div(self.x, self.scale), _trunc_div(self.y, self.scale)
                )
                dx, dy = self.direction
                self.x += dx
                self.y += dy


def dragon(
    size: int,
    total_iterations: int,
    filename: str | PathLike[str] = DEFAULT_FILENAME,
) -> Image:
    """Draw a twin dragon on a 1.5*size by size image, save it and return it."""
    image = Image(int(1.5 * size), size, GRAY, DEPTH)
    turtle = Turtle(image, size, size, 2, starting_direction(total_iterations))
    turtle.iterate(AXIOM, total_iterations)
    image.write(filename, ImageFormat.PBM)
    return image


def main(argv: Sequence[str] | None = None) -> int:
    """Draw the dragon for the given number of iterations (9 by default)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 0:
        iterations = DEFAULT_ITERATIONS
    elif len(args) == 1:
        iterations = _atoi(args[0])
    else:
        print("Wrong number of arguments given", file=sys.stderr)
        return 1
    try:
        dragon(int(2.0**iterations), 2 * iterations)
    except ImageError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())