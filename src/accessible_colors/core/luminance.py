"""Luminance and contrast-ratio primitives.

Implements the WCAG 2.x definitions of relative luminance and contrast
ratio, plus the text-size rule that picks the required ratio.

Reference:
    https://www.w3.org/TR/WCAG22/#dfn-relative-luminance
    https://www.w3.org/TR/WCAG22/#dfn-contrast-ratio
"""

import logging
import math

from accessible_colors.models.color import RGBColor

logger = logging.getLogger(__name__)

REQUIRED_RATIO_NORMAL_TEXT = 4.5
REQUIRED_RATIO_LARGE_TEXT = 3.0
REQUIRED_RATIO_UI_ELEMENT = 3.0

# Large text thresholds in points (WCAG "large scale" text)
LARGE_TEXT_MIN_PT = 18.0
LARGE_BOLD_TEXT_MIN_PT = 14.0


def _srgb_component_to_linear(value: float) -> float:
    """Decode a normalized sRGB component (0.0 to 1.0) to linear light."""
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


# Built once at import time and never modified afterwards.
SRGB_TO_LINEAR: tuple[float, ...] = tuple(
    _srgb_component_to_linear(i / 255.0) for i in range(256)
)


def linearize_channel(value: int) -> float:
    """Convert an 8-bit sRGB channel value to linear light.

    Args:
        value: Channel value (0 to 255).

    Returns:
        Linear-light value (0.0 to 1.0).
    """
    return SRGB_TO_LINEAR[value]


def relative_luminance(color: RGBColor) -> float:
    """Calculate relative luminance per WCAG 2.x.

    Args:
        color: RGB color to analyze. Alpha is ignored.

    Returns:
        Relative luminance value (0.0 to 1.0).
    """
    r = SRGB_TO_LINEAR[color.red]
    g = SRGB_TO_LINEAR[color.green]
    b = SRGB_TO_LINEAR[color.blue]
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(luminance1: float, luminance2: float) -> float:
    """Calculate the WCAG contrast ratio between two luminance values.

    The ratio is symmetric in its arguments.

    Args:
        luminance1: Relative luminance of the first color.
        luminance2: Relative luminance of the second color.

    Returns:
        Contrast ratio (1.0 to 21.0).
        - 1.0 = no contrast (same luminance)
        - 3.0 = minimum for large text and UI elements
        - 4.5 = minimum for AA level (normal text)
        - 21.0 = maximum (black on white or vice versa)

    Raises:
        ValueError: If either luminance is NaN.
    """
    if math.isnan(luminance1) or math.isnan(luminance2):
        raise ValueError("Luminance must be a number (got NaN)")

    lighter = max(luminance1, luminance2)
    darker = min(luminance1, luminance2)
    return (lighter + 0.05) / (darker + 0.05)


def is_compliant(
    background: RGBColor,
    foreground: RGBColor,
    required_ratio: float = REQUIRED_RATIO_NORMAL_TEXT,
) -> bool:
    """Check whether a color pair meets a contrast ratio requirement.

    Args:
        background: Background color.
        foreground: Foreground (text or element) color.
        required_ratio: Minimum ratio to meet, 4.5 (normal text) by default.

    Returns:
        True if the pair's contrast ratio is at least required_ratio.

    Raises:
        ValueError: If required_ratio is NaN.
    """
    if math.isnan(required_ratio):
        raise ValueError("Required ratio must be a number (got NaN)")

    ratio = contrast_ratio(relative_luminance(background), relative_luminance(foreground))
    return ratio >= required_ratio


def required_ratio_for_text(text_size_pt: float, is_bold: bool) -> float:
    """Determine the required WCAG contrast ratio for text.

    - Normal text: at least 4.5:1
    - Large text (18pt and up, or 14pt and up when bold): at least 3:1

    Args:
        text_size_pt: Text size in points.
        is_bold: Whether the text is bold.

    Returns:
        The required ratio for the given size and weight.
    """
    is_large = text_size_pt >= LARGE_TEXT_MIN_PT or (is_bold and text_size_pt >= LARGE_BOLD_TEXT_MIN_PT)
    return REQUIRED_RATIO_LARGE_TEXT if is_large else REQUIRED_RATIO_NORMAL_TEXT
