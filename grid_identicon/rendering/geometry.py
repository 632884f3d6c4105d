"""Geometry value objects and grid normalization.

``Transform`` maps cell-local coordinates onto the output surface. Rotation is
expressed in quarter turns (clockwise, 0-3) around the cell square anchored at
``(x, y)`` with side ``size``.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A 2D coordinate in surface units."""

    x: float
    y: float

    def __str__(self) -> str:
        return f"{self.x}, {self.y}"


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Horizontal extent.
        height: Vertical extent.
    """

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Transform:
    """Translation, uniform cell size and quarter-turn rotation."""

    x: float
    y: float
    size: float
    rotation: int

    def transform_point(self, x: float, y: float, w: float = 0, h: float = 0) -> Point:
        """Map the top-left corner of a ``w`` x ``h`` box at ``(x, y)``.

        The box dimensions matter for rotated transforms, where the corner
        that ends up top-left is a different one of the original box.
        """
        right = self.x + self.size
        bottom = self.y + self.size
        if self.rotation == 1:
            return Point(right - y - h, self.y + x)
        if self.rotation == 2:
            return Point(right - x - w, bottom - y - h)
        if self.rotation == 3:
            return Point(self.x + y, bottom - x - w)
        return Point(self.x + x, self.y + y)


NO_TRANSFORM = Transform(0, 0, 0, 0)


def normalize_rectangle(rect: Rectangle, cell_count: int) -> Rectangle:
    """Largest centered square inside ``rect`` with a side divisible by ``cell_count``.

    Bounds smaller than a single cell collapse to a zero-size square at the
    center of ``rect`` instead of failing.
    """
    size = math.floor(min(rect.width, rect.height))

    # Make size a multiple of the cell count
    size -= size % cell_count
    size = max(size, 0)

    return Rectangle(
        rect.x + math.floor((rect.width - size) / 2),
        rect.y + math.floor((rect.height - size) / 2),
        size,
        size,
    )
