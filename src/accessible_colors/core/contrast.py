"""Black/white contrast color selection and compliance checks.

Given a background, these functions choose the foreground (black or white)
that reaches a WCAG contrast ratio, and answer whether an existing
foreground/background pair is compliant for text or UI elements.
"""

import logging

from accessible_colors.core.luminance import (
    REQUIRED_RATIO_NORMAL_TEXT,
    REQUIRED_RATIO_UI_ELEMENT,
    contrast_ratio,
    is_compliant,
    relative_luminance,
    required_ratio_for_text,
)
from accessible_colors.models.color import BLACK, WHITE, RGBColor

logger = logging.getLogger(__name__)

BLACK_LUMINANCE = 0.0
WHITE_LUMINANCE = 1.0


def select_contrast_color(background: RGBColor, required_ratio: float) -> RGBColor:
    """Return black or white, whichever satisfies required_ratio on background.

    If both pass, the one with the higher ratio wins. If only one passes it is
    returned. If neither passes, the one with the higher ratio is returned as
    a best effort and the caller should re-check compliance. Ties go to white.

    Args:
        background: Background color.
        required_ratio: Minimum contrast ratio to reach.

    Returns:
        BLACK or WHITE.
    """
    bg_lum = relative_luminance(background)
    ratio_black = contrast_ratio(bg_lum, BLACK_LUMINANCE)
    ratio_white = contrast_ratio(bg_lum, WHITE_LUMINANCE)

    black_passes = ratio_black >= required_ratio
    white_passes = ratio_white >= required_ratio

    if black_passes and white_passes:
        return BLACK if ratio_black > ratio_white else WHITE
    if black_passes:
        return BLACK
    if white_passes:
        return WHITE

    logger.debug(
        f"Neither black ({ratio_black:.2f}) nor white ({ratio_white:.2f}) reaches "
        f"{required_ratio} on {background}"
    )
    return BLACK if ratio_black > ratio_white else WHITE


def get_contrast_color(background: RGBColor) -> RGBColor:
    """Return the foreground (black or white) for normal text on background."""
    return select_contrast_color(background, REQUIRED_RATIO_NORMAL_TEXT)


def get_contrast_color_for_text(background: RGBColor, text_size_pt: float, is_bold: bool) -> RGBColor:
    """Return the foreground for text of the given size and weight.

    Large or bold-large text only needs 3:1, so the choice may differ from
    get_contrast_color for mid-luminance backgrounds.
    """
    return select_contrast_color(background, required_ratio_for_text(text_size_pt, is_bold))


def get_contrast_color_for_ui_element(
    background: RGBColor,
    required_ratio: float = REQUIRED_RATIO_UI_ELEMENT,
) -> RGBColor:
    """Return the color for non-text UI elements (icons, borders, focus rings)."""
    return select_contrast_color(background, required_ratio)


def get_contrast_ratio(background: RGBColor, foreground: RGBColor) -> float:
    """Calculate the contrast ratio between two colors.

    Ranges from 1.0 (identical luminance) to 21.0 (black on white).
    """
    return contrast_ratio(relative_luminance(background), relative_luminance(foreground))


def is_text_compliant(
    background: RGBColor,
    foreground: RGBColor,
    text_size_pt: float,
    is_bold: bool,
) -> bool:
    """Check a text color against the ratio its size and weight require."""
    return is_compliant(background, foreground, required_ratio_for_text(text_size_pt, is_bold))


def is_ui_element_compliant(
    background: RGBColor,
    element_color: RGBColor,
    required_ratio: float = REQUIRED_RATIO_UI_ELEMENT,
) -> bool:
    """Check a non-text UI element color, 3:1 by default."""
    return is_compliant(background, element_color, required_ratio)
