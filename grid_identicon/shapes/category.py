"""Shape categories.

A category is a logical region of the 4x4 icon grid. It names the hash digits
that choose its color, its shape and its starting rotation, and lists the
cells it occupies in drawing order. The default table is built once at import
time and shared read-only by every generation.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Iterable, Optional, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_identicon.shapes.definitions import CENTER_SHAPES, OUTER_SHAPES
from grid_identicon.types import ShapeFn


class CategoryName(StrEnum):
    SIDES = auto()
    CORNERS = auto()
    CENTER = auto()


@dataclass(frozen=True)
class Cell:
    """Grid cell coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int


def cells(*coordinates: int) -> PVector[Cell]:
    """Build a cell vector from a flat ``x0, y0, x1, y1, ...`` list."""
    if len(coordinates) % 2:
        raise ValueError(f"Cell coordinates must come in pairs, got {coordinates}")
    pairs: Iterable[Tuple[int, int]] = zip(coordinates[0::2], coordinates[1::2])
    return pvector(Cell(x, y) for x, y in pairs)


@dataclass(frozen=True)
class ShapeCategory:
    """Hash digit indexes and grid cells of one icon region.

    Attributes:
        name: Region identifier.
        color_index: Hash digit selecting the theme color.
        shapes: Candidate shape functions; one is chosen per icon.
        shape_index: Hash digit selecting the shape function.
        rotation_index: Hash digit selecting the starting rotation, or ``None``
            for a fixed rotation of 0.
        positions: Cells occupied by the shape, in drawing order.
    """

    name: CategoryName
    color_index: int
    shapes: Tuple[ShapeFn, ...]
    shape_index: int
    rotation_index: Optional[int]
    positions: PVector[Cell]

    def __post_init__(self) -> None:
        if not self.shapes:
            raise ValueError(f"Category {self.name} needs at least one shape")


SIDES = ShapeCategory(
    name=CategoryName.SIDES,
    color_index=8,
    shapes=OUTER_SHAPES,
    shape_index=2,
    rotation_index=3,
    positions=cells(1, 0, 2, 0, 2, 3, 1, 3, 0, 1, 3, 1, 3, 2, 0, 2),
)

CORNERS = ShapeCategory(
    name=CategoryName.CORNERS,
    color_index=9,
    shapes=OUTER_SHAPES,
    shape_index=4,
    rotation_index=5,
    positions=cells(0, 0, 3, 0, 3, 3, 0, 3),
)

CENTER = ShapeCategory(
    name=CategoryName.CENTER,
    color_index=10,
    shapes=CENTER_SHAPES,
    shape_index=1,
    rotation_index=None,
    positions=cells(1, 1, 2, 1, 2, 2, 1, 2),
)

# Rendering order: sides, then corners, then center.
DEFAULT_CATEGORIES: Tuple[ShapeCategory, ...] = (SIDES, CORNERS, CENTER)
