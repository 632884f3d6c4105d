"""RGBA colors and HSL conversion.

HSL conversion follows the CSS3 color module algorithm with every channel
truncated to an integer and clamped to ``[0, 255]``. The truncation is part of
the visual identity: icons rendered by other implementations of the same
scheme must come out with identical channel values.
"""

from dataclasses import dataclass
from typing import Tuple

# Perceived middle lightness per hue sextant (red, yellow, green, cyan, blue,
# magenta, red again).
LIGHTNESS_CORRECTORS: Tuple[float, ...] = (0.55, 0.5, 0.5, 0.46, 0.6, 0.55, 0.55)


def _channel(value: float) -> int:
    value = int(value)
    if value < 0:
        return 0
    return min(value, 255)


def _hue_to_rgb(m1: float, m2: float, h: float) -> float:
    if h < 0:
        h += 6
    elif h > 6:
        h -= 6
    if h < 1:
        value = m1 + (m2 - m1) * h
    elif h < 3:
        value = m2
    elif h < 4:
        value = m1 + (m2 - m1) * (4 - h)
    else:
        value = m1
    return 255 * value


@dataclass(frozen=True)
class Color:
    """Opaque-by-default RGBA color with 0-255 integer channels."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``."""
        digits = value[1:] if value.startswith("#") else value
        if len(digits) in (3, 4):
            digits = "".join(c * 2 for c in digits)
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: {value!r}")
        try:
            channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"Invalid hex color: {value!r}") from None
        return cls(*channels)

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> "Color":
        """Convert HSL (each in ``[0, 1]``) to an opaque color."""
        if saturation == 0:
            gray = _channel(lightness * 255)
            return cls(gray, gray, gray)

        if lightness <= 0.5:
            m2 = lightness * (saturation + 1)
        else:
            m2 = lightness + saturation - lightness * saturation
        m1 = lightness * 2 - m2
        return cls(
            _channel(_hue_to_rgb(m1, m2, hue * 6 + 2)),
            _channel(_hue_to_rgb(m1, m2, hue * 6)),
            _channel(_hue_to_rgb(m1, m2, hue * 6 - 2)),
        )

    @classmethod
    def from_hsl_compensated(
        cls, hue: float, saturation: float, lightness: float
    ) -> "Color":
        """Like :meth:`from_hsl`, with lightness evened out across hues.

        Yellow and cyan look much brighter than blue at the same lightness;
        the corrector shifts the middle of the lightness range per hue.
        """
        corrector = LIGHTNESS_CORRECTORS[int(hue * 6 + 0.5)]
        if lightness < 0.5:
            lightness = lightness * corrector * 2
        else:
            lightness = corrector + (lightness - 0.5) * (1 - corrector) * 2
        return cls.from_hsl(hue, saturation, lightness)

    def to_rgba(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def to_hex(self) -> str:
        """``#rrggbb`` for opaque colors, ``#rrggbbaa`` otherwise."""
        if self.a == 255:
            return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"

    def __str__(self) -> str:
        return self.to_hex()
