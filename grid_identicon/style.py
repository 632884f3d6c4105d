"""Icon style configuration.

``IdenticonStyle`` is an immutable value object validated once at
construction. Defaults reproduce the reference look: white background, 8%
padding, half-saturated colors and neutral grays.

Styles can be built from plain mappings (e.g. parsed JSON / TOML)::

    style = IdenticonStyle.from_mapping({"background_color": "#0000", "hues": [207]})
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple

from grid_identicon.color import Color

LightnessRange = Tuple[float, float]

DEFAULT_BACKGROUND_COLOR = Color(255, 255, 255, 255)
DEFAULT_PADDING = 0.08
DEFAULT_COLOR_SATURATION = 0.5
DEFAULT_GRAYSCALE_SATURATION = 0.0
DEFAULT_COLOR_LIGHTNESS: LightnessRange = (0.4, 0.8)
DEFAULT_GRAYSCALE_LIGHTNESS: LightnessRange = (0.3, 0.9)


def _check_unit(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got {value}")


@dataclass(frozen=True)
class IdenticonStyle:
    """Visual parameters of generated icons.

    Attributes:
        background_color: Fill applied before any shape is drawn.
        padding: Fraction of the icon size left empty on each side, in ``[0, 0.5)``.
        color_saturation: Saturation of the colored theme entries.
        grayscale_saturation: Saturation of the gray theme entries.
        color_lightness: ``(dark, light)`` lightness of colored entries.
        grayscale_lightness: ``(dark, light)`` lightness of gray entries.
        hues: Optional allowed hues in degrees; the hash hue picks one of them.
    """

    background_color: Color = DEFAULT_BACKGROUND_COLOR
    padding: float = DEFAULT_PADDING
    color_saturation: float = DEFAULT_COLOR_SATURATION
    grayscale_saturation: float = DEFAULT_GRAYSCALE_SATURATION
    color_lightness: LightnessRange = DEFAULT_COLOR_LIGHTNESS
    grayscale_lightness: LightnessRange = DEFAULT_GRAYSCALE_LIGHTNESS
    hues: Optional[Tuple[float, ...]] = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.padding < 0.5:
            raise ValueError(f"padding must be within [0, 0.5), got {self.padding}")
        _check_unit("color_saturation", self.color_saturation)
        _check_unit("grayscale_saturation", self.grayscale_saturation)
        for name in ("color_lightness", "grayscale_lightness"):
            value = getattr(self, name)
            if len(value) != 2:
                raise ValueError(f"{name} must be a (dark, light) pair, got {value}")
            for bound in value:
                _check_unit(name, bound)
        if self.hues is not None and len(self.hues) == 0:
            raise ValueError("hues must not be empty; use None for any hue")

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "IdenticonStyle":
        """Build a style from a plain mapping, rejecting unknown keys.

        ``background_color`` may be a hex string; lightness ranges and hues may
        be any sequence.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ValueError(f"Unknown style option(s): {sorted(unknown)}")

        kwargs: Dict[str, Any] = dict(config)
        background = kwargs.get("background_color")
        if isinstance(background, str):
            kwargs["background_color"] = Color.from_hex(background)
        for name in ("color_lightness", "grayscale_lightness"):
            if name in kwargs:
                kwargs[name] = tuple(kwargs[name])
        if kwargs.get("hues") is not None:
            kwargs["hues"] = tuple(kwargs["hues"])
        return cls(**kwargs)


DEFAULT_STYLE = IdenticonStyle()

STYLE_REGISTRY: Dict[str, IdenticonStyle] = {
    "default": DEFAULT_STYLE,
    "transparent": IdenticonStyle(background_color=Color(0, 0, 0, 0)),
}
