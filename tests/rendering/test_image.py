# tests/rendering/test_image.py

import hashlib

import pytest
from PIL import Image

from grid_identicon.color import Color
from grid_identicon.rendering.geometry import Point, Transform
from grid_identicon.rendering.image import (
    IdenticonRenderer,
    ImageRenderer,
    render,
    signed_area,
)
from grid_identicon.style import STYLE_REGISTRY

HASH = hashlib.sha1(b"grid-identicon").hexdigest()
WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)


def test_signed_area_sign_follows_winding() -> None:
    clockwise = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
    assert signed_area(clockwise) == 4
    assert signed_area(list(reversed(clockwise))) == -4


def test_image_renderer_fills_and_cuts() -> None:
    renderer = ImageRenderer(10, 10)
    renderer.set_background_color(Color(*WHITE))
    renderer.begin_shape(Color(*RED))
    renderer.set_transform(Transform(0, 0, 10, 0))
    renderer.add_rectangle(0, 0, 10, 10)
    renderer.add_rectangle(3, 3, 4, 4, invert=True)
    renderer.end_shape()
    assert renderer.image.getpixel((1, 1)) == RED
    assert renderer.image.getpixel((5, 5)) == WHITE


def test_image_renderer_blends_translucent_shapes() -> None:
    renderer = ImageRenderer(4, 4)
    renderer.set_background_color(Color(0, 0, 0, 0))
    renderer.begin_shape(Color(255, 0, 0, 0))
    renderer.add_rectangle(0, 0, 4, 4)
    renderer.end_shape()
    assert renderer.image.getpixel((2, 2))[3] == 0


def test_primitives_outside_shape_raise() -> None:
    renderer = ImageRenderer(4, 4)
    with pytest.raises(RuntimeError):
        renderer.add_rectangle(0, 0, 1, 1)
    with pytest.raises(RuntimeError):
        renderer.end_shape()


def test_render_size_and_background() -> None:
    image = render(HASH, size=64)
    assert isinstance(image, Image.Image)
    assert image.size == (64, 64)
    assert image.mode == "RGBA"
    # padding area keeps the background
    assert image.getpixel((0, 0)) == WHITE
    assert len(image.getcolors()) > 1


def test_render_transparent_background() -> None:
    image = render(HASH, size=48, style=STYLE_REGISTRY["transparent"])
    assert image.getpixel((0, 0))[3] == 0


def test_render_is_deterministic() -> None:
    assert render(HASH, size=40).tobytes() == render(HASH, size=40).tobytes()


def test_render_differs_between_hashes() -> None:
    other = hashlib.sha1(b"another value").hexdigest()
    assert render(HASH, size=40).tobytes() != render(other, size=40).tobytes()


def test_render_too_small_for_grid_only_has_background() -> None:
    image = render(HASH, size=2)
    assert image.getcolors() == [(4, WHITE)]


def test_render_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        render(HASH, size=0)


def test_identicon_renderer() -> None:
    renderer = IdenticonRenderer(size=32)
    image = renderer.render(HASH)
    assert image.size == (32, 32)
    assert image.tobytes() == render(HASH, size=32).tobytes()
