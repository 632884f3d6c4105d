"""Icon generation.

:class:`IconGenerator` turns a hash into renderer calls in three phases:

1. Hue and color theme derived from the hash and style.
2. Background filled with the style's background color.
3. Foreground: each category's shape drawn cell by cell inside the largest
   centered square whose side is a multiple of :data:`CELL_COUNT`.

Rotation of consecutive cells of a shape advances by one quarter turn per
cell. The counter starts at the raw hash digit (0-15) and is only reduced
modulo 4 when a transform is built; reducing earlier changes the output.
"""

import logging
from typing import Optional, Sequence, Tuple

from grid_identicon.hash import hue as hash_hue
from grid_identicon.rendering.geometry import Rectangle, Transform, normalize_rectangle
from grid_identicon.rendering.renderer import Renderer
from grid_identicon.shapes.category import DEFAULT_CATEGORIES, ShapeCategory
from grid_identicon.shapes.shape import build_shapes
from grid_identicon.style import IdenticonStyle
from grid_identicon.theme import ColorTheme, build_color_theme
from grid_identicon.types import Hash

logger = logging.getLogger(__name__)

CELL_COUNT = 4


class IconGenerator:
    """Renders icons for hashes. Subclass to customize categories or phases."""

    categories: Tuple[ShapeCategory, ...]

    def __init__(self, categories: Optional[Sequence[ShapeCategory]] = None):
        self.categories = (
            DEFAULT_CATEGORIES if categories is None else tuple(categories)
        )

    def get_cell_count(self) -> int:
        """Number of cells along each side of the icon grid."""
        return CELL_COUNT

    def render_background(
        self,
        renderer: Renderer,
        rect: Rectangle,
        style: IdenticonStyle,
        color_theme: ColorTheme,
        hash: Hash,
    ) -> None:
        renderer.set_background_color(style.background_color)

    def render_foreground(
        self,
        renderer: Renderer,
        rect: Rectangle,
        style: IdenticonStyle,
        color_theme: ColorTheme,
        hash: Hash,
    ) -> None:
        # Ensure rect is square and a multiple of the cell count
        normalized = normalize_rectangle(rect, self.get_cell_count())
        if normalized.width <= 0:
            logger.debug("Bounds %s too small for a %d-cell grid", rect, CELL_COUNT)
            return
        cell_size = normalized.width / self.get_cell_count()

        for shape in build_shapes(self.categories, color_theme, hash):
            rotation = shape.start_rotation_index
            renderer.begin_shape(shape.color)
            for index, cell in enumerate(shape.positions):
                renderer.set_transform(
                    Transform(
                        normalized.x + cell.x * cell_size,
                        normalized.y + cell.y * cell_size,
                        cell_size,
                        rotation % 4,
                    )
                )
                shape.definition(renderer, cell_size, index)
                rotation += 1
            renderer.end_shape()

    def generate(
        self, renderer: Renderer, rect: Rectangle, style: IdenticonStyle, hash: Hash
    ) -> None:
        """Render the icon for ``hash`` within ``rect``.

        Arguments:
            renderer: Target surface; receives every drawing call.
            rect: Outer bounds of the icon.
            style: Colors and lightness ranges.
            hash: Hexadecimal hash, at least 11 digits long.
        """
        hue = hash_hue(hash)
        color_theme = build_color_theme(hue, style)
        logger.debug("Generating icon for %s (hue=%.4f)", hash, hue)

        self.render_background(renderer, rect, style, color_theme, hash)
        self.render_foreground(renderer, rect, style, color_theme, hash)


# Built at import time; shared read-only by all callers and threads.
_DEFAULT_GENERATOR = IconGenerator()


def get_default_generator() -> IconGenerator:
    return _DEFAULT_GENERATOR


def get_cell_count() -> int:
    return CELL_COUNT


def generate(
    renderer: Renderer, rect: Rectangle, style: IdenticonStyle, hash: Hash
) -> None:
    """Render ``hash`` with the default generator."""
    get_default_generator().generate(renderer, rect, style, hash)
