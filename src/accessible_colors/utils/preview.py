"""Preview generation for Accessible Colors.

This module renders small PNG swatches so a color pair or a generated ramp
can be inspected visually.
"""

import io
import logging

from PIL import Image, ImageDraw, ImageFont

from accessible_colors.core.contrast import get_contrast_color, get_contrast_ratio
from accessible_colors.models.color import RGBColor

logger = logging.getLogger(__name__)

DEFAULT_SWATCH_WIDTH = 80
DEFAULT_SWATCH_HEIGHT = 60
SWATCH_PADDING = 8

DEFAULT_PAIR_WIDTH = 240
DEFAULT_PAIR_HEIGHT = 120
# Pixel sizes standing in for 12pt and 18pt text
NORMAL_TEXT_PX = 16
LARGE_TEXT_PX = 24
CAPTION_PX = 11


def _load_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    try:
        return ImageFont.truetype("DejaVuSans.ttf", size)
    except (OSError, IOError):
        return ImageFont.load_default()


def generate_color_preview(
    background: RGBColor,
    foreground: RGBColor,
    width: int = DEFAULT_PAIR_WIDTH,
    height: int = DEFAULT_PAIR_HEIGHT,
) -> bytes:
    """Render a foreground/background pair as it would read at both text sizes.

    The upper half shows normal-size text, the lower half large text, and
    the measured ratio is printed in the bottom-right corner.

    Args:
        background: Background color.
        foreground: Text color.
        width: Preview width in pixels.
        height: Preview height in pixels.

    Returns:
        PNG image as bytes.
    """
    img = Image.new("RGB", (width, height), background.rgb)
    draw = ImageDraw.Draw(img)

    samples = [
        ("Normal text", _load_font(NORMAL_TEXT_PX), 0),
        ("Large text", _load_font(LARGE_TEXT_PX), height // 2),
    ]
    for text, font, top in samples:
        draw.text((SWATCH_PADDING, top + SWATCH_PADDING), text, fill=foreground.rgb, font=font)

    caption = f"{get_contrast_ratio(background, foreground):.2f}:1"
    caption_font = _load_font(CAPTION_PX)
    bbox = draw.textbbox((0, 0), caption, font=caption_font)
    draw.text(
        (width - SWATCH_PADDING - (bbox[2] - bbox[0]), height - SWATCH_PADDING - (bbox[3] - bbox[1])),
        caption,
        fill=foreground.rgb,
        font=caption_font,
    )

    output = io.BytesIO()
    img.save(output, format="PNG")
    return output.getvalue()


def generate_ramp_preview(
    colors: list[RGBColor],
    background: RGBColor,
    swatch_width: int = DEFAULT_SWATCH_WIDTH,
    height: int = DEFAULT_SWATCH_HEIGHT,
) -> bytes:
    """Render a ramp as a row of swatches on its background.

    Each swatch is labeled with its contrast ratio against the background,
    drawn in whichever of black or white reads best on the swatch.

    Args:
        colors: Ramp colors in order.
        background: Background the ramp was generated against.
        swatch_width: Width of each swatch cell in pixels.
        height: Image height in pixels.

    Returns:
        PNG image as bytes.

    Raises:
        ValueError: If colors is empty.
    """
    if not colors:
        raise ValueError("Cannot render a preview of an empty ramp")

    width = swatch_width * len(colors)
    img = Image.new("RGB", (width, height), background.rgb)
    draw = ImageDraw.Draw(img)
    font = _load_font(12)

    for idx, color in enumerate(colors):
        left = idx * swatch_width + SWATCH_PADDING
        right = (idx + 1) * swatch_width - SWATCH_PADDING - 1
        top = SWATCH_PADDING
        bottom = height - SWATCH_PADDING - 1
        if right <= left or bottom <= top:
            logger.debug(f"Swatch {idx} too small to draw ({swatch_width}x{height})")
            continue

        draw.rectangle([(left, top), (right, bottom)], fill=color.rgb)

        label = f"{get_contrast_ratio(background, color):.1f}"
        bbox = draw.textbbox((0, 0), label, font=font)
        x = left + (right - left - (bbox[2] - bbox[0])) // 2
        y = top + (bottom - top - (bbox[3] - bbox[1])) // 2
        draw.text((x, y), label, fill=get_contrast_color(color).rgb, font=font)

    output = io.BytesIO()
    img.save(output, format="PNG")
    output.seek(0)
    return output.read()
