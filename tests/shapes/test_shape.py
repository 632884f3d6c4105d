# tests/shapes/test_shape.py

from typing import Dict, List

import pytest

from grid_identicon.color import Color
from grid_identicon.shapes.category import CENTER, CORNERS, DEFAULT_CATEGORIES, SIDES
from grid_identicon.shapes.definitions import (
    CENTER_SHAPES,
    OUTER_SHAPES,
    center_circle,
    circle,
    rhombus,
)
from grid_identicon.shapes.shape import build_shapes, select_colors
from tests.test_utils import make_gray_theme, make_hash


@pytest.mark.parametrize(
    "digits, expected",
    [
        # no conflicts
        ({8: 1, 9: 2, 10: 4}, [1, 2, 4]),
        ({8: 5, 9: 6, 10: 7}, [0, 1, 2]),
        # digits are reduced modulo the theme size
        ({8: 14, 9: 13, 10: 11}, [4, 3, 1]),
        # dark pair: 4 after 0, 0 after 4
        ({8: 0, 9: 4, 10: 0}, [0, 1, 0]),
        ({8: 4, 9: 0, 10: 4}, [4, 1, 4]),
        ({8: 0, 9: 1, 10: 9}, [0, 1, 1]),
        # light pair: 3 after 2, 2 after 3
        ({8: 2, 9: 3, 10: 2}, [2, 1, 2]),
        ({8: 3, 9: 7, 10: 1}, [3, 1, 1]),
        # only earlier categories count
        ({8: 4, 9: 1, 10: 0}, [4, 1, 1]),
        ({8: 1, 9: 2, 10: 3}, [1, 2, 1]),
    ],
)
def test_select_colors(digits: Dict[int, int], expected: List[int]) -> None:
    theme = make_gray_theme()
    assert select_colors(DEFAULT_CATEGORIES, theme, make_hash(digits)) == expected


def test_select_colors_never_pairs_dark_or_light_entries() -> None:
    theme = make_gray_theme()
    for a in range(16):
        for b in range(16):
            for c in range(16):
                used = select_colors(
                    DEFAULT_CATEGORIES, theme, make_hash({8: a, 9: b, 10: c})
                )
                assert not ({0, 4} <= set(used))
                assert not ({2, 3} <= set(used))


def test_select_colors_allows_repeating_the_same_pair_member() -> None:
    theme = make_gray_theme()
    hash = make_hash({8: 0, 9: 0, 10: 3})
    assert select_colors(DEFAULT_CATEGORIES, theme, hash) == [0, 0, 3]


def test_build_shapes_resolves_each_category() -> None:
    theme = make_gray_theme()
    hash = make_hash({1: 13, 2: 6, 3: 5, 4: 15, 5: 15, 8: 1, 9: 2, 10: 4})
    sides, corners, center = build_shapes(DEFAULT_CATEGORIES, theme, hash)

    assert sides.definition is rhombus  # 6 % 4
    assert corners.definition is circle  # 15 % 4
    assert center.definition is center_circle  # 13 % 14

    assert (sides.color, corners.color, center.color) == (
        Color(1, 1, 1),
        Color(2, 2, 2),
        Color(4, 4, 4),
    )


def test_build_shapes_keeps_raw_rotation() -> None:
    theme = make_gray_theme()
    hash = make_hash({3: 14, 5: 7, 10: 0})
    sides, corners, center = build_shapes(DEFAULT_CATEGORIES, theme, hash)
    assert sides.start_rotation_index == 14
    assert corners.start_rotation_index == 7
    assert center.start_rotation_index == 0  # center has no rotation digit


def test_build_shapes_shares_category_positions() -> None:
    theme = make_gray_theme()
    shapes = build_shapes(DEFAULT_CATEGORIES, theme, make_hash())
    assert [s.positions for s in shapes] == [
        SIDES.positions,
        CORNERS.positions,
        CENTER.positions,
    ]
    assert all(
        s.positions is c.positions for s, c in zip(shapes, DEFAULT_CATEGORIES)
    )


def test_build_shapes_uses_shape_digit_modulo_table_size() -> None:
    theme = make_gray_theme()
    for digit in range(16):
        sides, corners, center = build_shapes(
            DEFAULT_CATEGORIES, theme, make_hash({1: digit, 2: digit, 4: digit})
        )
        assert sides.definition is OUTER_SHAPES[digit % len(OUTER_SHAPES)]
        assert corners.definition is OUTER_SHAPES[digit % len(OUTER_SHAPES)]
        assert center.definition is CENTER_SHAPES[digit % len(CENTER_SHAPES)]


def test_short_hash_raises_index_error() -> None:
    with pytest.raises(IndexError):
        build_shapes(DEFAULT_CATEGORIES, make_gray_theme(), "0123456789")
