"""Utility modules for Accessible Colors."""

from accessible_colors.utils.preview import (
    generate_color_preview,
    generate_ramp_preview,
)

__all__ = [
    "generate_color_preview",
    "generate_ramp_preview",
]
