"""sRGB, CIE XYZ, CIE L*a*b* and LCh conversions.

Provides:
    - sRGB (8-bit) → XYZ → Lab, using the shared sRGB → linear table
    - Lab → XYZ → sRGB (8-bit), gamma-encoded, rounded and clamped
    - Lab ↔ LCh (polar form: lightness, chroma, hue in degrees)

Used by:
    - Ramp generation: lightness, chroma and hue are adjusted in LCh so each
      change is a single perceptual knob.

Invariants:
    - D65 reference white: X=0.95047, Y=1.0, Z=1.08883
    - Lab L nominally [0, 100]; a, b unbounded and may leave the sRGB gamut
    - Every color returned is clamped to [0, 255] per channel; NaN becomes 0
"""

import math

from accessible_colors.core.luminance import SRGB_TO_LINEAR
from accessible_colors.models.color import RGBColor

XN = 0.95047
YN = 1.00000
ZN = 1.08883

# CIE constants as used by the classic (1976) Lab definition
EPSILON = 0.008856
KAPPA_SLOPE = 7.787
OFFSET = 16.0 / 116.0


def _f(t: float) -> float:
    return t ** (1.0 / 3.0) if t > EPSILON else KAPPA_SLOPE * t + OFFSET


def _f_inverse(t: float) -> float:
    t3 = t * t * t
    return t3 if t3 > EPSILON else (t - OFFSET) / KAPPA_SLOPE


def linear_to_srgb(value: float) -> float:
    """Gamma-encode a linear-light value, clamped to [0, 1]."""
    if value <= 0.0:
        return 0.0
    if value >= 1.0:
        return 1.0
    if value <= 0.0031308:
        return value * 12.92
    return 1.055 * value ** (1.0 / 2.4) - 0.055


def rgb_to_xyz(color: RGBColor) -> tuple[float, float, float]:
    """Convert an sRGB color to XYZ normalized by the D65 white point.

    Returns:
        (X/Xn, Y/Yn, Z/Zn). Y/Yn equals the color's relative luminance.
    """
    r = SRGB_TO_LINEAR[color.red]
    g = SRGB_TO_LINEAR[color.green]
    b = SRGB_TO_LINEAR[color.blue]

    x = (r * 0.4124 + g * 0.3576 + b * 0.1805) / XN
    y = (r * 0.2126 + g * 0.7152 + b * 0.0722) / YN
    z = (r * 0.0193 + g * 0.1192 + b * 0.9505) / ZN
    return (x, y, z)


def xyz_to_lab(x: float, y: float, z: float) -> tuple[float, float, float]:
    """Convert white-point-normalized XYZ to Lab."""
    fx = _f(x)
    fy = _f(y)
    fz = _f(z)

    lightness = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return (lightness, a, b)


def lab_to_xyz(lightness: float, a: float, b: float) -> tuple[float, float, float]:
    """Convert Lab to absolute XYZ (scaled by the D65 white point)."""
    fy = (lightness + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0

    return (XN * _f_inverse(fx), YN * _f_inverse(fy), ZN * _f_inverse(fz))


def xyz_to_rgb(x: float, y: float, z: float) -> RGBColor:
    """Convert absolute XYZ to an 8-bit sRGB color.

    Out-of-gamut results are clamped channel by channel.
    """
    r = x * 3.2406 + y * -1.5372 + z * -0.4986
    g = x * -0.9689 + y * 1.8758 + z * 0.0415
    b = x * 0.0557 + y * -0.2040 + z * 1.0570

    return RGBColor.clamped(
        linear_to_srgb(r) * 255.0,
        linear_to_srgb(g) * 255.0,
        linear_to_srgb(b) * 255.0,
    )


def lab_to_lch(lightness: float, a: float, b: float) -> tuple[float, float, float]:
    """Convert Lab to LCh with hue in degrees, normalized to [0, 360)."""
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a))
    if hue < 0.0:
        hue += 360.0
    return (lightness, chroma, hue)


def lch_to_lab(lightness: float, chroma: float, hue: float) -> tuple[float, float, float]:
    """Convert LCh (hue in degrees) to Lab."""
    h_rad = math.radians(hue)
    return (lightness, chroma * math.cos(h_rad), chroma * math.sin(h_rad))


def rgb_to_lab(color: RGBColor) -> tuple[float, float, float]:
    return xyz_to_lab(*rgb_to_xyz(color))


def lab_to_rgb(lightness: float, a: float, b: float) -> RGBColor:
    return xyz_to_rgb(*lab_to_xyz(lightness, a, b))


def rgb_to_lch(color: RGBColor) -> tuple[float, float, float]:
    return lab_to_lch(*rgb_to_lab(color))


def lch_to_rgb(lightness: float, chroma: float, hue: float) -> RGBColor:
    return lab_to_rgb(*lch_to_lab(lightness, chroma, hue))
