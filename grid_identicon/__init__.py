"""grid_identicon
=================================

Deterministic identicons on a fixed 4x4 grid.

A hexadecimal hash selects, for each of three grid regions (sides, corners,
center), a shape, a theme color and a starting rotation. The same hash and
style always produce the same sequence of renderer calls::

    from grid_identicon import render

    image = render("d41d8cd98f00b204e9800998ecf8427e", size=128)

Lower level entry points are :func:`generate` (drive any
:class:`~grid_identicon.rendering.renderer.Renderer`) and
:class:`~grid_identicon.generator.IconGenerator`.
"""

from .color import Color
from .generator import CELL_COUNT, IconGenerator, generate, get_cell_count
from .rendering.geometry import Rectangle, Transform
from .rendering.image import IdenticonRenderer, ImageRenderer, render
from .rendering.renderer import Renderer
from .style import DEFAULT_STYLE, IdenticonStyle

__all__ = [
    "CELL_COUNT",
    "Color",
    "DEFAULT_STYLE",
    "IconGenerator",
    "IdenticonRenderer",
    "IdenticonStyle",
    "ImageRenderer",
    "Rectangle",
    "Renderer",
    "Transform",
    "generate",
    "get_cell_count",
    "render",
]
