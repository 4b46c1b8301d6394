"""Contrast reporting for Accessible Colors.

This module summarizes how a foreground/background pair fares against the
WCAG AA and AAA levels and produces human-readable warnings for poor pairs.
"""

import logging
from dataclasses import dataclass

from accessible_colors.core.contrast import get_contrast_ratio
from accessible_colors.core.luminance import (
    REQUIRED_RATIO_LARGE_TEXT,
    REQUIRED_RATIO_NORMAL_TEXT,
    REQUIRED_RATIO_UI_ELEMENT,
)
from accessible_colors.models.color import RGBColor

logger = logging.getLogger(__name__)

# AAA (enhanced) levels
ENHANCED_RATIO_NORMAL_TEXT = 7.0
ENHANCED_RATIO_LARGE_TEXT = 4.5

# Below this the colors are treated as nearly indistinguishable
VERY_SIMILAR_RATIO = 1.5


@dataclass(frozen=True)
class ContrastReport:
    """Pass/fail summary for a color pair.

    Attributes:
        ratio: Contrast ratio (1.0 to 21.0).
        normal_text_aa: Meets 4.5:1.
        normal_text_aaa: Meets 7:1.
        large_text_aa: Meets 3:1.
        large_text_aaa: Meets 4.5:1.
        ui_element: Meets the UI element ratio (3:1 unless overridden).
    """

    ratio: float
    normal_text_aa: bool
    normal_text_aaa: bool
    large_text_aa: bool
    large_text_aaa: bool
    ui_element: bool


def build_contrast_report(
    background: RGBColor,
    foreground: RGBColor,
    ui_element_ratio: float = REQUIRED_RATIO_UI_ELEMENT,
) -> ContrastReport:
    """Evaluate a color pair against every WCAG contrast level.

    Args:
        background: Background color.
        foreground: Foreground (text or element) color.
        ui_element_ratio: Ratio a non-text element must reach.

    Returns:
        ContrastReport for the pair.
    """
    ratio = get_contrast_ratio(background, foreground)
    return ContrastReport(
        ratio=ratio,
        normal_text_aa=ratio >= REQUIRED_RATIO_NORMAL_TEXT,
        normal_text_aaa=ratio >= ENHANCED_RATIO_NORMAL_TEXT,
        large_text_aa=ratio >= REQUIRED_RATIO_LARGE_TEXT,
        large_text_aaa=ratio >= ENHANCED_RATIO_LARGE_TEXT,
        ui_element=ratio >= ui_element_ratio,
    )


def validate_color_contrast(
    foreground: RGBColor,
    background: RGBColor,
    required_ratio: float = REQUIRED_RATIO_NORMAL_TEXT,
) -> list[str]:
    """Validate color contrast and return warnings if contrast is poor.

    Args:
        foreground: Foreground (text) color.
        background: Background color.
        required_ratio: AA ratio the text must reach (4.5 for normal text,
            3.0 for large text).

    Returns:
        List of warning messages. Empty if colors have acceptable contrast.
    """
    warnings = []
    contrast = get_contrast_ratio(background, foreground)
    text_kind = "normal text" if required_ratio >= REQUIRED_RATIO_NORMAL_TEXT else "large text"

    # Check if colors are too similar (likely unintentional)
    if contrast < VERY_SIMILAR_RATIO:
        warnings.append(
            f"Colors are very similar (contrast ratio: {contrast:.2f}). "
            "Text may be difficult to read. Consider using more contrasting colors."
        )
    # Check WCAG AA level for this text size
    elif contrast < required_ratio:
        warnings.append(
            f"Contrast ratio is {contrast:.2f}. WCAG AA recommends at least {required_ratio:g}:1 "
            f"for {text_kind}. Consider using colors with more contrast."
        )

    if warnings:
        logger.debug(f"{foreground} on {background}: {warnings[0]}")
    return warnings
