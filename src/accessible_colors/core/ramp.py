"""Accessible color ramp generation.

A ramp is an ordered list of colors derived from one base color (for
example normal/hover/pressed states). Each entry is nudged in LCh space until
it reaches 4.5:1 against the background implied by the light/dark mode:

1. Find an end lightness by scanning from the base lightness in steps of 5.
2. Interpolate a lightness guess per step between the base and the end.
3. For each guess, run a bounded compliance search: a two-step bisection on
   lightness, then small chroma changes, then small hue shifts. If nothing
   passes, the last candidate is returned as a best effort.

The search is a bounded heuristic, not an exhaustive solver; callers that
need a hard guarantee should re-check each color with is_compliant().
"""

import logging

from accessible_colors.core.colorspace import lch_to_rgb, rgb_to_lch
from accessible_colors.core.luminance import (
    REQUIRED_RATIO_NORMAL_TEXT,
    contrast_ratio,
    relative_luminance,
)
from accessible_colors.models.color import DARK_BACKGROUND, WHITE, RGBColor

logger = logging.getLogger(__name__)

LIGHTNESS_SCAN_STEP = 5.0
BISECTION_ITERATIONS = 2
CHROMA_DELTA = 5.0
MAX_CHROMA = 100.0
HUE_DELTA = 2.0


def ramp_background(dark_mode: bool) -> RGBColor:
    """Return the background a ramp is generated against."""
    return DARK_BACKGROUND if dark_mode else WHITE


def lch_contrast_ratio(lightness: float, chroma: float, hue: float, background_luminance: float) -> float:
    """Contrast ratio of an LCh color (after conversion to 8-bit sRGB)."""
    return contrast_ratio(background_luminance, relative_luminance(lch_to_rgb(lightness, chroma, hue)))


def check_compliance(
    lightness: float,
    chroma: float,
    hue: float,
    background_luminance: float,
    required_ratio: float = REQUIRED_RATIO_NORMAL_TEXT,
) -> bool:
    return lch_contrast_ratio(lightness, chroma, hue, background_luminance) >= required_ratio


def find_compliant_lightness(
    lightness: float,
    chroma: float,
    hue: float,
    background_luminance: float,
    dark_mode: bool,
) -> float:
    """Scan for the first compliant lightness, keeping chroma and hue.

    Scans upward toward 100 in dark mode and downward toward 0 in light mode,
    in steps of 5.

    Returns:
        The first compliant lightness, or 100.0 / 0.0 if the scan runs out.
    """
    test_l = lightness
    if dark_mode:
        while test_l <= 100.0:
            if check_compliance(test_l, chroma, hue, background_luminance):
                return test_l
            test_l += LIGHTNESS_SCAN_STEP
        return 100.0

    while test_l >= 0.0:
        if check_compliance(test_l, chroma, hue, background_luminance):
            return test_l
        test_l -= LIGHTNESS_SCAN_STEP
    return 0.0


def attempt_compliance(
    lightness: float,
    chroma: float,
    hue: float,
    background_luminance: float,
    dark_mode: bool,
) -> RGBColor:
    """Coerce one LCh candidate into a compliant color.

    Tries, in order: the candidate as given; a two-iteration bisection on
    lightness toward the compliant side; chroma -5 then +5; hue +2° then -2°.

    Returns:
        The first compliant color found, otherwise the conversion of the last
        lightness tried with the original chroma and hue.
    """
    if check_compliance(lightness, chroma, hue, background_luminance):
        return lch_to_rgb(lightness, chroma, hue)

    min_l, max_l = (lightness, 100.0) if dark_mode else (0.0, lightness)
    for _ in range(BISECTION_ITERATIONS):
        mid_l = (min_l + max_l) * 0.5
        ratio = lch_contrast_ratio(mid_l, chroma, hue, background_luminance)
        lightness = mid_l
        if ratio >= REQUIRED_RATIO_NORMAL_TEXT:
            return lch_to_rgb(lightness, chroma, hue)

        # Below target: move lighter on dark backgrounds, darker on light ones
        if dark_mode:
            min_l = mid_l
        else:
            max_l = mid_l

    less_chroma = max(chroma - CHROMA_DELTA, 0.0)
    if check_compliance(lightness, less_chroma, hue, background_luminance):
        return lch_to_rgb(lightness, less_chroma, hue)

    more_chroma = min(chroma + CHROMA_DELTA, MAX_CHROMA)
    if check_compliance(lightness, more_chroma, hue, background_luminance):
        return lch_to_rgb(lightness, more_chroma, hue)

    hue_up = (hue + HUE_DELTA) % 360.0
    if check_compliance(lightness, chroma, hue_up, background_luminance):
        return lch_to_rgb(lightness, chroma, hue_up)

    hue_down = (hue - HUE_DELTA) % 360.0
    if check_compliance(lightness, chroma, hue_down, background_luminance):
        return lch_to_rgb(lightness, chroma, hue_down)

    fallback = lch_to_rgb(lightness, chroma, hue)
    logger.debug(f"No compliant variant found near L={lightness:.1f} C={chroma:.1f} H={hue:.1f}, using {fallback}")
    return fallback


def generate_accessible_ramp(base_color: RGBColor, steps: int, dark_mode: bool) -> list[RGBColor]:
    """Generate a ramp of colors that each reach 4.5:1 against the mode background.

    Args:
        base_color: Color the ramp is derived from. Alpha is ignored.
        steps: Number of colors to produce.
        dark_mode: True to target RGB(32, 32, 32), False to target white.

    Returns:
        List of `steps` colors, ordered from least to most adjusted. Empty if
        steps is zero or negative.

    Raises:
        TypeError: If steps is not an integer.
    """
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise TypeError(f"steps must be an integer (got {type(steps).__name__})")
    if steps <= 0:
        return []

    background = ramp_background(dark_mode)
    bg_lum = relative_luminance(background)

    orig_l, orig_c, orig_h = rgb_to_lch(base_color)
    end_l = find_compliant_lightness(orig_l, orig_c, orig_h, bg_lum, dark_mode)

    ramp: list[RGBColor] = []
    for i in range(steps):
        t = i / (steps - 1) if steps > 1 else 0.0
        guess_l = orig_l + (end_l - orig_l) * t
        ramp.append(attempt_compliance(guess_l, orig_c, orig_h, bg_lum, dark_mode))

    logger.debug(
        f"Generated {steps}-step {'dark' if dark_mode else 'light'} ramp for {base_color}: "
        f"L {orig_l:.1f} -> {end_l:.1f}"
    )
    return ramp
