"""Small geometric value types used by the font descriptor model.

This module defines the fundamental value types shared by the records:
- Point: An integer 2D point or size in atlas pixel space
- Rectangle: An axis-aligned pixel rectangle
- Padding: Per-side glyph padding
- Spacing: Horizontal/vertical spacing between glyphs on the atlas
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or extent) in atlas pixel space.

    Attributes:
        x: Horizontal coordinate, growing to the right
        y: Vertical coordinate, growing downwards
    """

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned rectangle; `max` is exclusive.

    Attributes:
        min: Top-left corner
        max: Bottom-right corner (exclusive)
    """

    min: Point
    max: Point

    @property
    def width(self) -> int:
        return self.max.x - self.min.x

    @property
    def height(self) -> int:
        return self.max.y - self.min.y


@dataclass(frozen=True, slots=True)
class Padding:
    """Padding around each glyph, in pixels."""

    up: int = 0
    right: int = 0
    down: int = 0
    left: int = 0


@dataclass(frozen=True, slots=True)
class Spacing:
    """Spacing between glyphs on the atlas, in pixels."""

    horizontal: int = 0
    vertical: int = 0
