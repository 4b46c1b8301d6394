"""Configuration models for Accessible Colors."""

from dataclasses import dataclass, field
from typing import Self

from accessible_colors.core.luminance import REQUIRED_RATIO_UI_ELEMENT, is_compliant, required_ratio_for_text
from accessible_colors.core.ramp import ramp_background
from accessible_colors.core.validation import validate_color_contrast
from accessible_colors.models.color import BLACK, WHITE, RGBColor, parse_color


@dataclass
class ContrastCheckConfig:
    """Settings for checking a foreground/background pair.

    Attributes:
        background: Background color (default: white).
        foreground: Foreground/text color (default: black).
        text_size_pt: Text size in points, used to pick the required ratio.
        is_bold: Whether the text is bold.
        ui_element_ratio: Required ratio for non-text UI elements.
    """

    background: RGBColor = field(default_factory=lambda: WHITE)
    foreground: RGBColor = field(default_factory=lambda: BLACK)
    text_size_pt: float = 12.0
    is_bold: bool = False
    ui_element_ratio: float = REQUIRED_RATIO_UI_ELEMENT

    @classmethod
    def from_hex(
        cls,
        bg_hex: str,
        fg_hex: str,
        text_size_pt: float = 12.0,
        is_bold: bool = False,
        ui_element_ratio: float = REQUIRED_RATIO_UI_ELEMENT,
    ) -> Self:
        """Create config from color strings (e.g., "#FFFFFF" or "navy").

        Raises:
            ValueError: If either color cannot be parsed.
        """
        return cls(
            background=parse_color(bg_hex),
            foreground=parse_color(fg_hex),
            text_size_pt=text_size_pt,
            is_bold=is_bold,
            ui_element_ratio=ui_element_ratio,
        )

    @property
    def required_ratio(self) -> float:
        """Ratio the foreground must reach for this text size and weight."""
        return required_ratio_for_text(self.text_size_pt, self.is_bold)

    def validate(self) -> list[str]:
        """Validate color contrast for readability.

        Returns:
            List of warning messages. Empty if contrast is acceptable.
        """
        warnings = validate_color_contrast(self.foreground, self.background, self.required_ratio)
        if self.text_size_pt <= 0:
            warnings.append(f"Text size must be positive (got {self.text_size_pt}pt)")
        return warnings


@dataclass
class RampConfig:
    """Settings for generating an accessible ramp.

    Attributes:
        base_color: Color the ramp is derived from.
        steps: Number of colors in the ramp.
        dark_mode: Generate against the dark background instead of white.
    """

    base_color: RGBColor
    steps: int = 5
    dark_mode: bool = False

    @classmethod
    def from_hex(cls, base_hex: str, steps: int = 5, dark_mode: bool = False) -> Self:
        """Create config from a color string.

        Raises:
            ValueError: If the color cannot be parsed.
        """
        return cls(base_color=parse_color(base_hex), steps=steps, dark_mode=dark_mode)

    @property
    def background(self) -> RGBColor:
        return ramp_background(self.dark_mode)

    def validate(self) -> list[str]:
        """Check the request before generating.

        Returns:
            List of warning messages. Empty if nothing is unusual.
        """
        warnings = []
        if self.steps <= 0:
            warnings.append(f"Ramp has no steps (steps={self.steps}); nothing will be generated")
        if not is_compliant(self.background, self.base_color):
            mode = "dark" if self.dark_mode else "light"
            warnings.append(
                f"Base color {self.base_color} does not reach 4.5:1 on the {mode} background "
                f"{self.background}; ramp colors will be adjusted away from it"
            )
        return warnings
