"""Hash-specific shape instances.

``build_shapes`` resolves every category against one hash: which theme color
it uses, which of its shape functions is drawn and the rotation of its first
cell. Resolution is a pure function of (categories, theme, hash).
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from pyrsistent.typing import PVector

from grid_identicon.color import Color
from grid_identicon.hash import octet
from grid_identicon.shapes.category import Cell, ShapeCategory
from grid_identicon.theme import ColorTheme, ThemeColor
from grid_identicon.types import ColorIndex, Hash, ShapeFn

logger = logging.getLogger(__name__)

# Pairs of theme colors that must not both appear in one icon.
DARK_PAIR: Tuple[ColorIndex, ColorIndex] = (ThemeColor.DARK_GRAY, ThemeColor.DARK_COLOR)
LIGHT_PAIR: Tuple[ColorIndex, ColorIndex] = (ThemeColor.LIGHT_GRAY, ThemeColor.LIGHT_COLOR)
FALLBACK_COLOR: ColorIndex = int(ThemeColor.MID_COLOR)


@dataclass(frozen=True)
class Shape:
    """A category resolved for one hash.

    Attributes:
        definition: Shape function drawn in every cell.
        color: Fill color.
        positions: The category's cells (shared, not copied).
        start_rotation_index: Rotation of the first cell. Not reduced modulo 4;
            the renderer loop increments it per cell and reduces on use.
    """

    definition: ShapeFn
    color: Color
    positions: PVector[Cell]
    start_rotation_index: int


# Only the other pair member conflicts. The PHP isDuplicate also rejects a
# repeat of the same member, so sides=0, corners=0 differs there (corners=1).
def _conflicts(used: Sequence[ColorIndex], candidate: ColorIndex, pair: Tuple[int, int]) -> bool:
    if candidate not in pair:
        return False
    other = pair[1] if candidate == pair[0] else pair[0]
    return other in used


def select_colors(
    categories: Sequence[ShapeCategory], color_theme: ColorTheme, hash: Hash
) -> List[ColorIndex]:
    """Pick one theme color index per category, in category order.

    A category whose digit points at one member of the dark or light pair
    while an earlier category already holds the other member falls back to the
    mid color.
    """
    used: List[ColorIndex] = []
    for category in categories:
        candidate = octet(hash, category.color_index) % color_theme.count
        if _conflicts(used, candidate, DARK_PAIR) or _conflicts(
            used, candidate, LIGHT_PAIR
        ):
            candidate = FALLBACK_COLOR
        used.append(candidate)
    logger.debug("Resolved theme colors %s for %s", used, hash)
    return used


def build_shapes(
    categories: Sequence[ShapeCategory], color_theme: ColorTheme, hash: Hash
) -> List[Shape]:
    color_indexes = select_colors(categories, color_theme, hash)
    shapes: List[Shape] = []
    for category, color_index in zip(categories, color_indexes):
        shape_index = octet(hash, category.shape_index) % len(category.shapes)
        start_rotation_index = (
            0 if category.rotation_index is None else octet(hash, category.rotation_index)
        )
        shapes.append(
            Shape(
                definition=category.shapes[shape_index],
                color=color_theme.by_index(color_index),
                positions=category.positions,
                start_rotation_index=start_rotation_index,
            )
        )
    return shapes
