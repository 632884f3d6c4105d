"""Pillow rendering backend.

Shapes are rasterized one at a time into an 8-bit coverage mask. Paths are
painted in call order: paths with the natural (clockwise on screen) winding
add coverage, reversed paths remove it. This reproduces nonzero filling for
the built-in shapes, whose cut-outs always follow the outline they cut. On
``end_shape`` the mask is composited onto the image in the shape color.
"""

from typing import List, Optional

from PIL import Image, ImageDraw

from grid_identicon.color import Color
from grid_identicon.generator import IconGenerator, get_default_generator
from grid_identicon.rendering.geometry import Point, Rectangle
from grid_identicon.rendering.renderer import Renderer
from grid_identicon.style import DEFAULT_STYLE, IdenticonStyle
from grid_identicon.types import Hash

DEFAULT_SIZE = 100

FILLED = 255
CUT = 0


def signed_area(points: List[Point]) -> float:
    """Shoelace area; positive for clockwise polygons in y-down coordinates."""
    total = 0.0
    for a, b in zip(points, points[1:] + points[:1]):
        total += a.x * b.y - b.x * a.y
    return total / 2


class ImageRenderer(Renderer):
    """Draws into ``self.image``, an RGBA :class:`PIL.Image.Image`."""

    image: Image.Image

    def __init__(self, width: int, height: int):
        super().__init__()
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self._color: Optional[Color] = None
        self._mask: Optional[Image.Image] = None
        self._draw: Optional[ImageDraw.ImageDraw] = None

    def set_background_color(self, color: Color) -> None:
        self.image.paste(color.to_rgba(), (0, 0, *self.image.size))

    def begin_shape(self, color: Color) -> None:
        self._color = color
        self._mask = Image.new("L", self.image.size, 0)
        self._draw = ImageDraw.Draw(self._mask)

    def end_shape(self) -> None:
        if self._color is None or self._mask is None:
            raise RuntimeError("end_shape called without a matching begin_shape")
        color = self._color
        mask = self._mask
        if color.a != 255:
            mask = mask.point(lambda v: v * color.a // 255)
        layer = Image.new("RGBA", self.image.size, color.to_rgba())
        layer.putalpha(mask)
        self.image.alpha_composite(layer)
        self._color = self._mask = self._draw = None

    def _canvas(self) -> ImageDraw.ImageDraw:
        if self._draw is None:
            raise RuntimeError("Primitives must be drawn between begin_shape and end_shape")
        return self._draw

    def _add_polygon_no_transform(self, points: List[Point]) -> None:
        fill = CUT if signed_area(points) < 0 else FILLED
        self._canvas().polygon([(p.x, p.y) for p in points], fill=fill)

    def _add_circle_no_transform(
        self, location: Point, diameter: float, counter_clockwise: bool
    ) -> None:
        self._canvas().ellipse(
            [location.x, location.y, location.x + diameter, location.y + diameter],
            fill=CUT if counter_clockwise else FILLED,
        )


def render(
    hash: Hash,
    size: int = DEFAULT_SIZE,
    style: Optional[IdenticonStyle] = None,
    generator: Optional[IconGenerator] = None,
) -> Image.Image:
    """
    Renders the icon for ``hash`` as a ``size`` x ``size`` PIL Image, with the style padding applied.
    """
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    if style is None:
        style = DEFAULT_STYLE
    if generator is None:
        generator = get_default_generator()

    padding = int(0.5 + size * style.padding)
    renderer = ImageRenderer(size, size)
    rect = Rectangle(padding, padding, size - 2 * padding, size - 2 * padding)
    generator.generate(renderer, rect, style, hash)
    return renderer.image


class IdenticonRenderer:
    size: int
    style: IdenticonStyle
    generator: IconGenerator

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        style: Optional[IdenticonStyle] = None,
        generator: Optional[IconGenerator] = None,
    ):
        self.size = size
        self.style = style or DEFAULT_STYLE
        self.generator = generator or get_default_generator()

    def render(self, hash: Hash) -> Image.Image:
        return render(hash, size=self.size, style=self.style, generator=self.generator)
