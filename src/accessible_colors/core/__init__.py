"""Contrast and color-space engine for Accessible Colors."""

from accessible_colors.core.contrast import (
    get_contrast_color,
    get_contrast_color_for_text,
    get_contrast_color_for_ui_element,
    get_contrast_ratio,
    is_text_compliant,
    is_ui_element_compliant,
    select_contrast_color,
)
from accessible_colors.core.luminance import (
    contrast_ratio,
    is_compliant,
    relative_luminance,
    required_ratio_for_text,
)
from accessible_colors.core.ramp import generate_accessible_ramp

__all__ = [
    "contrast_ratio",
    "generate_accessible_ramp",
    "get_contrast_color",
    "get_contrast_color_for_text",
    "get_contrast_color_for_ui_element",
    "get_contrast_ratio",
    "is_compliant",
    "is_text_compliant",
    "is_ui_element_compliant",
    "relative_luminance",
    "required_ratio_for_text",
    "select_contrast_color",
]
