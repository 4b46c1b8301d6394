"""Tests for Lab/LCh conversions."""

import math

import pytest

from accessible_colors.core.colorspace import (
    lab_to_lch,
    lab_to_rgb,
    lch_to_lab,
    lch_to_rgb,
    linear_to_srgb,
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_xyz,
)
from accessible_colors.core.luminance import relative_luminance
from accessible_colors.models.color import RGBColor


class TestRgbToLab:
    """Tests for the forward conversion."""

    def test_white(self, white):
        """Test white maps to L=100 with near-zero a and b."""
        lightness, a, b = rgb_to_lab(white)
        assert lightness == pytest.approx(100.0, abs=1e-6)
        assert abs(a) < 0.1
        assert abs(b) < 0.1

    def test_black(self, black):
        """Test black maps to L=0."""
        lightness, a, b = rgb_to_lab(black)
        assert lightness == pytest.approx(0.0, abs=1e-9)
        assert a == pytest.approx(0.0, abs=1e-9)
        assert b == pytest.approx(0.0, abs=1e-9)

    def test_red_is_warm(self):
        """Test pure red has positive a and b."""
        lightness, a, b = rgb_to_lab(RGBColor(255, 0, 0))
        assert 50.0 < lightness < 56.0
        assert a > 60.0
        assert b > 50.0

    def test_blue_is_cool(self):
        """Test pure blue has strongly negative b."""
        _, _, b = rgb_to_lab(RGBColor(0, 0, 255))
        assert b < -100.0

    def test_y_is_relative_luminance(self, random_colors):
        """Test the normalized Y component equals WCAG relative luminance."""
        for color in random_colors[:100]:
            assert rgb_to_xyz(color)[1] == pytest.approx(relative_luminance(color))


class TestLabLch:
    """Tests for the polar conversion."""

    def test_chroma_and_hue(self):
        """Test a 3-4-5 triangle."""
        lightness, chroma, hue = lab_to_lch(50.0, 3.0, 4.0)
        assert lightness == 50.0
        assert chroma == pytest.approx(5.0)
        assert hue == pytest.approx(math.degrees(math.atan2(4.0, 3.0)))

    def test_negative_hue_normalized(self):
        """Test hues below zero wrap into [0, 360)."""
        _, _, hue = lab_to_lch(50.0, 0.0, -10.0)
        assert hue == pytest.approx(270.0)

    def test_hue_range(self, random_colors):
        """Test every converted color has hue in [0, 360) and non-negative chroma."""
        for color in random_colors:
            _, chroma, hue = rgb_to_lch(color)
            assert chroma >= 0.0
            assert 0.0 <= hue < 360.0

    def test_inverse(self):
        """Test LCh back to Lab recovers a and b."""
        lightness, a, b = lch_to_lab(*lab_to_lch(60.0, -20.0, 35.0))
        assert lightness == 60.0
        assert a == pytest.approx(-20.0)
        assert b == pytest.approx(35.0)


class TestRoundTrip:
    """Tests for RGB -> Lab -> LCh -> Lab -> RGB."""

    def test_random_colors(self, random_colors):
        """Test 1000 random colors survive the round trip within one step per channel."""
        for color in random_colors:
            result = lch_to_rgb(*rgb_to_lch(color))
            assert abs(result.red - color.red) <= 1, f"{color} -> {result}"
            assert abs(result.green - color.green) <= 1, f"{color} -> {result}"
            assert abs(result.blue - color.blue) <= 1, f"{color} -> {result}"

    @pytest.mark.parametrize(
        "rgb",
        [(0, 0, 0), (255, 255, 255), (255, 0, 0), (0, 255, 0), (0, 0, 255), (10, 10, 10), (11, 11, 11)],
    )
    def test_extremes(self, rgb):
        """Test primaries, black, white and the linear-segment boundary."""
        color = RGBColor(*rgb)
        result = lab_to_rgb(*rgb_to_lab(color))
        for got, want in zip(result.rgb, color.rgb):
            assert abs(got - want) <= 1


class TestClamping:
    """Tests for out-of-gamut and invalid inputs on the way back to RGB."""

    def test_lightness_above_range(self):
        """Test lightness over 100 clamps to white."""
        assert lch_to_rgb(150.0, 0.0, 0.0) == RGBColor(255, 255, 255)

    def test_lightness_below_range(self):
        """Test negative lightness clamps to black."""
        assert lch_to_rgb(-20.0, 0.0, 0.0) == RGBColor(0, 0, 0)

    def test_out_of_gamut_chroma(self):
        """Test extreme chroma still yields valid channels."""
        color = lch_to_rgb(50.0, 250.0, 140.0)
        assert all(0 <= channel <= 255 for channel in color.rgb)

    def test_nan_sanitized(self):
        """Test NaN lightness becomes black instead of propagating."""
        assert lch_to_rgb(math.nan, 0.0, 0.0) == RGBColor(0, 0, 0)

    @pytest.mark.parametrize(
        "value,expected",
        [(-0.5, 0.0), (0.0, 0.0), (1.0, 1.0), (2.0, 1.0), (0.002, 0.002 * 12.92)],
    )
    def test_linear_to_srgb(self, value, expected):
        """Test gamma encoding clamps and uses the linear segment near zero."""
        assert linear_to_srgb(value) == pytest.approx(expected)
