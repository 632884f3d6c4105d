"""Common type aliases.

``ShapeFn`` is the extension point used by shape categories: a callable that
draws one cell of a shape through the renderer it receives.
"""

from typing import Callable, TYPE_CHECKING


# Forward declaration for ShapeFn typing to avoid circular imports:
if TYPE_CHECKING:
    from grid_identicon.rendering.renderer import Renderer

Hash = str
"""Hexadecimal hash string (case-insensitive)."""

ColorIndex = int
"""Index into a :class:`grid_identicon.theme.ColorTheme`."""

ShapeFn = Callable[["Renderer", float, int], None]
"""Draws a single cell: ``(renderer, cell_size, cell_index) -> None``."""
