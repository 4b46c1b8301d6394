"""Tests for preview rendering."""

import io

import pytest
from PIL import Image

from accessible_colors.models.color import RGBColor
from accessible_colors.utils.preview import SWATCH_PADDING, generate_color_preview, generate_ramp_preview

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestGenerateColorPreview:
    """Tests for generate_color_preview."""

    def test_returns_png(self, white, black):
        """Test the preview is PNG data."""
        data = generate_color_preview(white, black)
        assert data.startswith(PNG_SIGNATURE)

    def test_dimensions(self, white, black):
        """Test the requested size is honored."""
        img = Image.open(io.BytesIO(generate_color_preview(white, black, width=120, height=40)))
        assert img.size == (120, 40)

    def test_background_fill(self, accent_blue, white):
        """Test the interior is filled with the background color."""
        img = Image.open(io.BytesIO(generate_color_preview(accent_blue, white)))
        assert img.convert("RGB").getpixel((5, 5)) == accent_blue.rgb

    def test_text_drawn(self, white, black):
        """Test the sample text and ratio caption leave ink on the background."""
        img = Image.open(io.BytesIO(generate_color_preview(white, black))).convert("RGB")
        assert len(set(img.getdata())) > 1


class TestGenerateRampPreview:
    """Tests for generate_ramp_preview."""

    def test_returns_png(self, white):
        """Test the preview is PNG data."""
        data = generate_ramp_preview([RGBColor(255, 0, 0)], white)
        assert data.startswith(PNG_SIGNATURE)

    def test_width_scales_with_colors(self, white):
        """Test one cell per color."""
        colors = [RGBColor(255, 0, 0), RGBColor(0, 255, 0), RGBColor(0, 0, 255)]
        img = Image.open(io.BytesIO(generate_ramp_preview(colors, white, swatch_width=50, height=30)))
        assert img.size == (150, 30)

    def test_swatch_colors(self, white):
        """Test each swatch is filled with its color inside the padding."""
        red = RGBColor(255, 0, 0)
        green = RGBColor(0, 255, 0)
        img = Image.open(io.BytesIO(generate_ramp_preview([red, green], white))).convert("RGB")

        inset = SWATCH_PADDING + 1
        assert img.getpixel((inset, inset)) == red.rgb
        assert img.getpixel((80 + inset, inset)) == green.rgb

    def test_padding_shows_background(self, dark_background):
        """Test the gap around swatches is the background color."""
        img = Image.open(io.BytesIO(generate_ramp_preview([RGBColor(255, 255, 255)], dark_background)))
        assert img.convert("RGB").getpixel((1, 1)) == dark_background.rgb

    def test_tiny_swatches_skipped(self, white):
        """Test cells too small for a swatch leave only the background."""
        img = Image.open(io.BytesIO(generate_ramp_preview([RGBColor(255, 0, 0)], white, swatch_width=10)))
        assert img.convert("RGB").getpixel((5, 5)) == white.rgb

    def test_empty_ramp(self, white):
        """Test an empty ramp raises ValueError."""
        with pytest.raises(ValueError, match="empty"):
            generate_ramp_preview([], white)
