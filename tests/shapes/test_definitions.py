# tests/shapes/test_definitions.py

import pytest

from grid_identicon.rendering.geometry import Transform
from grid_identicon.rendering.image import signed_area
from grid_identicon.shapes.definitions import (
    CENTER_SHAPES,
    OUTER_SHAPES,
    center_circle,
    diagonal_triangle,
    square_with_circle_hole,
    square_with_square_hole,
)
from grid_identicon.types import ShapeFn
from tests.test_utils import RecordingRenderer


def test_table_sizes() -> None:
    assert len(OUTER_SHAPES) == 4
    assert len(CENTER_SHAPES) == 14


@pytest.mark.parametrize("shape", OUTER_SHAPES + CENTER_SHAPES)
@pytest.mark.parametrize("cell", [1.0, 5.0, 7.0, 25.0, 120.0])
def test_every_shape_draws_first_cell(shape: ShapeFn, cell: float) -> None:
    renderer = RecordingRenderer()
    renderer.set_transform(Transform(0, 0, cell, 0))
    shape(renderer, cell, 0)
    assert any(name in ("polygon", "circle") for name in renderer.names())


def test_center_circle_only_drawn_once() -> None:
    renderer = RecordingRenderer()
    for index in range(4):
        center_circle(renderer, 20.0, index)
    assert renderer.names() == ["circle"]


def test_diagonal_triangle_points() -> None:
    renderer = RecordingRenderer()
    renderer.set_transform(Transform(10, 10, 20, 0))
    diagonal_triangle(renderer, 20.0, 0)
    _, points = renderer.calls[-1]
    assert [(p.x, p.y) for p in points] == [(30, 30), (10, 30), (10, 10)]


def test_square_hole_has_reversed_winding() -> None:
    renderer = RecordingRenderer()
    renderer.set_transform(Transform(0, 0, 40, 1))
    square_with_square_hole(renderer, 40.0, 0)
    (_, outer), (_, inner) = renderer.calls[-2:]
    assert signed_area(outer) > 0
    assert signed_area(inner) < 0


def test_circle_hole_is_counter_clockwise() -> None:
    renderer = RecordingRenderer()
    square_with_circle_hole(renderer, 50.0, 0)
    name, _, diameter, counter_clockwise = renderer.calls[-1]
    assert name == "circle"
    assert counter_clockwise is True
    assert diameter == pytest.approx(50 - 6 - 18)
