"""Renderer base class.

A renderer is the only side-effecting collaborator of icon generation. The
generator drives it through four scoped calls (``set_background_color``,
``begin_shape``, ``set_transform``, ``end_shape``) while shape functions issue
primitive drawing calls in cell-local coordinates.

Primitive helpers (``add_polygon``, ``add_circle``, ``add_rectangle``,
``add_triangle``, ``add_rhombus``) apply the current :class:`Transform` and
forward surface coordinates to two backend hooks:

* ``_add_polygon_no_transform(points)``
* ``_add_circle_no_transform(location, diameter, counter_clockwise)``

Inverted primitives are emitted with reversed winding so that, under a nonzero
fill rule, they cut a hole through a shape drawn earlier in the same cell.
"""

from typing import List, Sequence

from grid_identicon.color import Color
from grid_identicon.rendering.geometry import NO_TRANSFORM, Point, Transform


class Renderer:
    """Transform-aware drawing surface. Subclass and implement the hooks."""

    def __init__(self) -> None:
        self._transform: Transform = NO_TRANSFORM

    @property
    def transform(self) -> Transform:
        return self._transform

    def set_transform(self, transform: Transform) -> None:
        self._transform = transform

    # -------- Scoped calls driven by the generator --------

    def set_background_color(self, color: Color) -> None:
        raise NotImplementedError(f"{type(self).__name__} has no background support")

    def begin_shape(self, color: Color) -> None:
        raise NotImplementedError(f"{type(self).__name__} has no shape support")

    def end_shape(self) -> None:
        raise NotImplementedError(f"{type(self).__name__} has no shape support")

    # -------- Backend hooks --------

    def _add_polygon_no_transform(self, points: List[Point]) -> None:
        raise NotImplementedError(f"{type(self).__name__} cannot draw polygons")

    def _add_circle_no_transform(
        self, location: Point, diameter: float, counter_clockwise: bool
    ) -> None:
        raise NotImplementedError(f"{type(self).__name__} cannot draw circles")

    # -------- Primitives used by shape functions --------

    def add_polygon(self, points: Sequence[float], invert: bool = False) -> None:
        """Add a polygon given as a flat ``[x0, y0, x1, y1, ...]`` list."""
        if invert:
            indexes = range(len(points) - 2, -1, -2)
        else:
            indexes = range(0, len(points) - 1, 2)
        transformed = [
            self._transform.transform_point(points[i], points[i + 1]) for i in indexes
        ]
        self._add_polygon_no_transform(transformed)

    def add_circle(self, x: float, y: float, size: float, invert: bool = False) -> None:
        """Add a circle whose bounding box has its top-left corner at ``(x, y)``."""
        location = self._transform.transform_point(x, y, size, size)
        self._add_circle_no_transform(location, size, invert)

    def add_rectangle(
        self, x: float, y: float, w: float, h: float, invert: bool = False
    ) -> None:
        self.add_polygon([x, y, x + w, y, x + w, y + h, x, y + h], invert)

    def add_triangle(
        self, x: float, y: float, w: float, h: float, r: int, invert: bool = False
    ) -> None:
        """Add a right triangle filling half of the ``w`` x ``h`` box.

        ``r`` selects the removed corner (mod 4) from top-right, bottom-right,
        bottom-left and top-left, in that order.
        """
        points = [x + w, y, x + w, y + h, x, y + h, x, y]
        removed = (r % 4) * 2
        del points[removed : removed + 2]
        self.add_polygon(points, invert)

    def add_rhombus(
        self, x: float, y: float, w: float, h: float, invert: bool = False
    ) -> None:
        self.add_polygon(
            [x + w / 2, y, x + w, y + h / 2, x + w / 2, y + h, x, y + h / 2], invert
        )
