"""The player square: colours, resting size and the shapes it takes on a hit."""

from __future__ import annotations

import random
from typing import NamedTuple


class Color(NamedTuple):
    """An RGBA colour, 0-255 per channel."""

    r: int
    g: int
    b: int
    a: int = 255


MEDIUM_GRAY = Color(50, 50, 50, 255)
ORANGE = Color(200, 100, 50, 255)
PURPLE = Color(120, 50, 110, 255)

DEFAULT_JIGGLE = 1 / 16


class Me:
    """A square of a given resting size, anchored at a centre point."""

    def __init__(self, size: float, x: float, y: float) -> None:
        self.size = float(size)
        self.x = float(x)
        self.y = float(y)
        self.color = MEDIUM_GRAY
        self.width = self.size
        self.height = self.size
        self.left = 0.0
        self.top = 0.0
        self.recenter()

    @property
    def rect(self) -> tuple[float, float, float, float]:
        """The drawn rectangle as (left, top, width, height)."""
        return (self.left, self.top, self.width, self.height)

    def set_color(self, color: Color) -> None:
        self.color = Color(*color)

    def recenter(self) -> None:
        """Place the rectangle so that its centre sits on (x, y)."""
        self.left = self.x - self.width / 2
        self.top = self.y - self.height / 2

    def shrink(self) -> None:
        """Become a skinny short square."""
        self.width = self.size / 4
        self.height = self.size / 2
        self.recenter()

    def expand(self) -> None:
        """Become a wide flat square."""
        self.width = self.size * 2
        self.height = self.size / 1.2
        self.recenter()

    def relax(self) -> None:
        """Return to the resting size."""
        self.width = self.size
        self.height = self.size
        self.recenter()

    def jiggle(self, rng: random.Random, frac: float = DEFAULT_JIGGLE) -> None:
        """Set width and height to the resting size plus or minus up to frac of it."""
        delta = self.size * frac
        self.width = self.size + 2 * delta * rng.random() - delta
        self.height = self.size + 2 * delta * rng.random() - delta
        self.recenter()