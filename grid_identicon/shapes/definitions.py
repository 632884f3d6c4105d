"""Built-in shape functions.

Each function draws one cell of a shape in cell-local coordinates
``[0, cell] x [0, cell]``; the renderer's current transform places and
rotates it. ``index`` is the position of the cell within its category, which
lets a shape draw only once per icon (see the large center circle).

Border widths are snapped to whole pixels on large cells and pinned to fixed
widths on tiny ones so thin outlines neither blur nor vanish.

Table order is significant: hash digits select entries by index.
"""

from typing import Tuple

from grid_identicon.rendering.renderer import Renderer
from grid_identicon.types import ShapeFn


# -------- Center shapes --------


def cut_corner(g: Renderer, cell: float, index: int) -> None:
    k = cell * 0.42
    g.add_polygon([0, 0, cell, 0, cell, cell - k * 2, cell - k, cell, 0, cell])


def half_triangle(g: Renderer, cell: float, index: int) -> None:
    w = int(cell * 0.5)
    h = int(cell * 0.8)
    g.add_triangle(cell - w, 0, w, h, 2)


def inner_square(g: Renderer, cell: float, index: int) -> None:
    s = int(cell / 3)
    g.add_rectangle(s, s, cell - s, cell - s)


def offset_square(g: Renderer, cell: float, index: int) -> None:
    inner = cell * 0.1
    if inner > 1:
        inner = int(inner)
    elif inner > 0.5:
        inner = 1
    if cell < 6:
        outer = 1
    elif cell < 8:
        outer = 2
    else:
        outer = int(cell * 0.25)
    g.add_rectangle(outer, outer, cell - inner - outer, cell - inner - outer)


def corner_dot(g: Renderer, cell: float, index: int) -> None:
    m = int(cell * 0.15)
    s = int(cell * 0.5)
    g.add_circle(cell - s - m, cell - s - m, s)


def square_with_triangle_hole(g: Renderer, cell: float, index: int) -> None:
    inner = cell * 0.1
    outer = inner * 4
    if outer > 3:
        outer = int(outer)
    g.add_rectangle(0, 0, cell, cell)
    g.add_polygon(
        [outer, outer, cell - inner, outer, outer + (cell - outer - inner) / 2, cell - inner],
        True,
    )


def notched_square(g: Renderer, cell: float, index: int) -> None:
    g.add_polygon(
        [0, 0, cell, 0, cell, cell * 0.7, cell * 0.4, cell * 0.4, cell * 0.7, cell, 0, cell]
    )


def quarter_triangle(g: Renderer, cell: float, index: int) -> None:
    g.add_triangle(cell / 2, cell / 2, cell / 2, cell / 2, 3)


def stair(g: Renderer, cell: float, index: int) -> None:
    g.add_rectangle(0, 0, cell, cell / 2)
    g.add_rectangle(0, cell / 2, cell / 2, cell / 2)
    g.add_triangle(cell / 2, cell / 2, cell / 2, cell / 2, 1)


def square_with_square_hole(g: Renderer, cell: float, index: int) -> None:
    inner = cell * 0.14
    if cell >= 8:
        inner = int(inner)
    if cell < 4:
        outer = 1
    elif cell < 6:
        outer = 2
    else:
        outer = int(cell * 0.35)
    g.add_rectangle(0, 0, cell, cell)
    g.add_rectangle(outer, outer, cell - outer - inner, cell - outer - inner, True)


def square_with_circle_hole(g: Renderer, cell: float, index: int) -> None:
    inner = cell * 0.12
    outer = inner * 3
    g.add_rectangle(0, 0, cell, cell)
    g.add_circle(outer, outer, cell - inner - outer, True)


def square_with_rhombus_hole(g: Renderer, cell: float, index: int) -> None:
    m = cell * 0.25
    g.add_rectangle(0, 0, cell, cell)
    g.add_rhombus(m, m, cell - m, cell - m, True)


def center_circle(g: Renderer, cell: float, index: int) -> None:
    m = cell * 0.4
    s = cell * 1.2
    if not index:
        g.add_circle(m, m, s)


# -------- Outer shapes --------


def diagonal_triangle(g: Renderer, cell: float, index: int) -> None:
    g.add_triangle(0, 0, cell, cell, 0)


def flat_triangle(g: Renderer, cell: float, index: int) -> None:
    g.add_triangle(0, cell / 2, cell, cell / 2, 0)


def rhombus(g: Renderer, cell: float, index: int) -> None:
    g.add_rhombus(0, 0, cell, cell)


def circle(g: Renderer, cell: float, index: int) -> None:
    m = cell / 6
    g.add_circle(m, m, cell - 2 * m)


CENTER_SHAPES: Tuple[ShapeFn, ...] = (
    cut_corner,
    half_triangle,
    inner_square,
    offset_square,
    corner_dot,
    square_with_triangle_hole,
    notched_square,
    quarter_triangle,
    stair,
    square_with_square_hole,
    square_with_circle_hole,
    quarter_triangle,
    square_with_rhombus_hole,
    center_circle,
)

OUTER_SHAPES: Tuple[ShapeFn, ...] = (
    diagonal_triangle,
    flat_triangle,
    rhombus,
    circle,
)
