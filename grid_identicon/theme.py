"""Per-icon color theme.

The theme is the palette a single icon draws from. Index numbering is part of
the visual identity scheme: color selection forbids combining the two dark
entries (0 and 4) and the two light entries (2 and 3) in one icon and falls
back to the mid color (1).
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from grid_identicon.color import Color
from grid_identicon.style import IdenticonStyle


class ThemeColor(IntEnum):
    """Palette slots of a :class:`ColorTheme`."""

    DARK_GRAY = 0
    MID_COLOR = 1
    LIGHT_GRAY = 2
    LIGHT_COLOR = 3
    DARK_COLOR = 4


@dataclass(frozen=True)
class ColorTheme:
    """Five colors derived from one hue, ordered by :class:`ThemeColor`."""

    colors: Tuple[Color, ...]

    @property
    def count(self) -> int:
        return len(self.colors)

    def by_index(self, index: int) -> Color:
        return self.colors[index]


def restrict_hue(hue: float, style: IdenticonStyle) -> float:
    """Replace ``hue`` with one of ``style.hues`` (degrees) when configured."""
    if not style.hues:
        return hue
    degrees = style.hues[int(0.999 * hue * len(style.hues))]
    # Any number of turns is a valid hue, e.g. 746 or -30 degrees.
    return ((degrees / 360) % 1 + 1) % 1


def build_color_theme(hue: float, style: IdenticonStyle) -> ColorTheme:
    hue = restrict_hue(hue, style)
    gray_dark, gray_light = style.grayscale_lightness
    color_dark, color_light = style.color_lightness
    gray_saturation = style.grayscale_saturation
    color_saturation = style.color_saturation
    return ColorTheme(
        colors=(
            Color.from_hsl_compensated(hue, gray_saturation, gray_dark),
            Color.from_hsl_compensated(
                hue, color_saturation, (color_dark + color_light) / 2
            ),
            Color.from_hsl_compensated(hue, gray_saturation, gray_light),
            Color.from_hsl_compensated(hue, color_saturation, color_light),
            Color.from_hsl_compensated(hue, color_saturation, color_dark),
        )
    )
