"""Color value type for Accessible Colors."""

import math
from dataclasses import dataclass
from typing import Self

from PIL import ImageColor


@dataclass(frozen=True)
class RGBColor:
    """An immutable 8-bit sRGB color.

    Attributes:
        red: Red channel (0-255).
        green: Green channel (0-255).
        blue: Blue channel (0-255).
        alpha: Opacity (0-255). Carried for callers only; contrast and ramp
            calculations never read it, so transparent colors must be
            flattened onto their backdrop first.
    """

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer (got {value!r})")
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be between 0 and 255 (got {value})")

    @classmethod
    def clamped(cls, red: float, green: float, blue: float) -> Self:
        """Build a color from arbitrary channel values on the 0-255 scale.

        NaN becomes 0, everything else is clamped to [0, 255] and rounded.
        """
        return cls(_clamp_channel(red), _clamp_channel(green), _clamp_channel(blue))

    @classmethod
    def from_hex(cls, hex_color: str) -> Self:
        """Create a color from a hex string such as "#0078D7"."""
        return hex_to_rgb(hex_color)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        return rgb_to_hex(self)

    def __str__(self) -> str:
        return self.to_hex()


def _clamp_channel(value: float) -> int:
    if math.isnan(value):
        return 0
    value = min(255.0, max(0.0, float(value)))
    return int(round(value))


BLACK = RGBColor(0, 0, 0)
WHITE = RGBColor(255, 255, 255)

# Background assumed by dark-mode ramps
DARK_BACKGROUND = RGBColor(32, 32, 32)


def hex_to_rgb(hex_color: str) -> RGBColor:
    """Convert a hex color string to RGBColor.

    Args:
        hex_color: Color as hex string, with or without '#' prefix. Both the
            six-digit and the three-digit shorthand forms are accepted.

    Returns:
        RGBColor instance.

    Raises:
        ValueError: If hex_color is invalid (wrong length, non-hex characters, etc.).

    Examples:
        >>> hex_to_rgb("#FF0000")
        RGBColor(red=255, green=0, blue=0, alpha=255)
        >>> hex_to_rgb("0f0")
        RGBColor(red=0, green=255, blue=0, alpha=255)
    """
    if not hex_color:
        raise ValueError("Hex color cannot be empty")

    hex_color = hex_color.strip().lstrip("#")

    if len(hex_color) == 3:
        hex_color = "".join(c * 2 for c in hex_color)

    if len(hex_color) != 6:
        raise ValueError(
            f"Hex color must be 3 or 6 characters (got {len(hex_color)}). "
            f"Example: #FF0000 or F00"
        )

    try:
        r = int(hex_color[0:2], 16)
        g = int(hex_color[2:4], 16)
        b = int(hex_color[4:6], 16)
    except ValueError as e:
        raise ValueError(
            f"Invalid hex color '{hex_color}'. Must contain only hex digits (0-9, A-F). "
            f"Example: #FF0000"
        ) from e

    return RGBColor(r, g, b)


def rgb_to_hex(color: RGBColor) -> str:
    """Convert RGBColor to an upper-case hex string with '#' prefix."""
    return f"#{color.red:02X}{color.green:02X}{color.blue:02X}"


def parse_color(text: str) -> RGBColor:
    """Parse any color notation Pillow understands.

    Accepts hex ("#0078D7", "#fff"), functional ("rgb(0, 120, 215)",
    "hsl(206, 100%, 42%)") and CSS color names ("navy").

    Raises:
        ValueError: If the text is not a recognised color.
    """
    if not text or not text.strip():
        raise ValueError("Color cannot be empty")

    try:
        channels = ImageColor.getrgb(text.strip())
    except ValueError as e:
        raise ValueError(f"Unknown color '{text}'. Example: #0078D7, rgb(0, 120, 215) or navy") from e

    if len(channels) == 4:
        return RGBColor(*channels)
    return RGBColor(channels[0], channels[1], channels[2])
