"""Command-line interface for Accessible Colors.

This module exposes contrast checks, black/white selection and ramp
generation from the shell.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from accessible_colors.core.contrast import (
    get_contrast_color_for_text,
    get_contrast_color_for_ui_element,
)
from accessible_colors.core.luminance import REQUIRED_RATIO_UI_ELEMENT, is_compliant
from accessible_colors.core.ramp import generate_accessible_ramp
from accessible_colors.core.validation import build_contrast_report
from accessible_colors.models.color import parse_color
from accessible_colors.models.config import ContrastCheckConfig, RampConfig
from accessible_colors.utils.preview import generate_color_preview, generate_ramp_preview

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "ACCESSIBLE_COLORS_LOG_LEVEL"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:]).

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="accessible-colors",
        description="Check WCAG contrast and generate accessible colors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  accessible-colors check '#FFFFFF' '#767676'
  accessible-colors check navy '#FFD700' --size 14 --bold
  accessible-colors check white red --ui-ratio 4.5 --preview pair.png
  accessible-colors pick '#0078D7' --ui
  accessible-colors ramp '#0078D7' --steps 5 --dark --preview ramp.png
        """,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Report the contrast of a color pair")
    check.add_argument("background", help="Background color (hex, rgb(...) or name)")
    check.add_argument("foreground", help="Foreground/text color")
    check.add_argument(
        "--size",
        type=float,
        default=12.0,
        help="Text size in points (default: 12)",
    )
    check.add_argument("--bold", action="store_true", help="Text is bold")
    check.add_argument(
        "--ui-ratio",
        type=float,
        default=REQUIRED_RATIO_UI_ELEMENT,
        help="Required ratio for the UI element line (default: 3.0)",
    )
    check.add_argument(
        "--preview",
        type=Path,
        help="Write a PNG preview of the pair to this path",
    )

    pick = subparsers.add_parser("pick", help="Pick black or white for a background")
    pick.add_argument("background", help="Background color (hex, rgb(...) or name)")
    pick.add_argument(
        "--text-size",
        type=float,
        default=12.0,
        help="Text size in points (default: 12)",
    )
    pick.add_argument("--bold", action="store_true", help="Text is bold")
    pick.add_argument(
        "--ui",
        action="store_true",
        help="Pick for a non-text UI element instead of text",
    )
    pick.add_argument(
        "--ratio",
        type=float,
        default=REQUIRED_RATIO_UI_ELEMENT,
        help="Required ratio for UI elements (default: 3.0)",
    )

    ramp = subparsers.add_parser("ramp", help="Generate an accessible color ramp")
    ramp.add_argument("base", help="Base color (hex, rgb(...) or name)")
    ramp.add_argument(
        "--steps",
        type=int,
        default=5,
        help="Number of colors to generate (default: 5)",
    )
    ramp.add_argument(
        "--dark",
        action="store_true",
        help="Target the dark background #202020 instead of white",
    )
    ramp.add_argument(
        "--preview",
        type=Path,
        help="Write a PNG preview of the ramp to this path",
    )

    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "DEBUG" if verbose else "INFO").upper()
    log_level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
        force=True,
    )


def _mark(passed: bool) -> str:
    return "pass" if passed else "fail"


def run_check(args: argparse.Namespace) -> int:
    config = ContrastCheckConfig.from_hex(
        bg_hex=args.background,
        fg_hex=args.foreground,
        text_size_pt=args.size,
        is_bold=args.bold,
        ui_element_ratio=args.ui_ratio,
    )

    for warning in config.validate():
        logger.warning(f"Color: {warning}")

    report = build_contrast_report(config.background, config.foreground, config.ui_element_ratio)
    print(f"Ratio: {report.ratio:.2f}:1")
    print(f"Normal text  AA {_mark(report.normal_text_aa)}  AAA {_mark(report.normal_text_aaa)}")
    print(f"Large text   AA {_mark(report.large_text_aa)}  AAA {_mark(report.large_text_aaa)}")
    print(f"UI element   {config.ui_element_ratio:g}:1 {_mark(report.ui_element)}")

    if args.preview:
        output_path = args.preview.expanduser()
        output_path.write_bytes(generate_color_preview(config.background, config.foreground))
        logger.info(f"Preview written to {output_path}")

    passed = is_compliant(config.background, config.foreground, config.required_ratio)
    logger.debug(f"Required ratio for {config.text_size_pt}pt (bold={config.is_bold}): {config.required_ratio}")
    return 0 if passed else 1


def run_pick(args: argparse.Namespace) -> int:
    background = parse_color(args.background)
    if args.ui:
        color = get_contrast_color_for_ui_element(background, args.ratio)
    else:
        color = get_contrast_color_for_text(background, args.text_size, args.bold)
    print(color.to_hex())
    return 0


def run_ramp(args: argparse.Namespace) -> int:
    config = RampConfig.from_hex(args.base, steps=args.steps, dark_mode=args.dark)

    for warning in config.validate():
        logger.info(warning)

    colors = generate_accessible_ramp(config.base_color, config.steps, config.dark_mode)
    for color in colors:
        flag = "" if is_compliant(config.background, color) else "  (below 4.5:1)"
        print(f"{color.to_hex()}{flag}")

    if args.preview and colors:
        output_path = args.preview.expanduser()
        output_path.write_bytes(generate_ramp_preview(colors, config.background))
        logger.info(f"Preview written to {output_path}")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for error or a failed check).
    """
    args = parse_args(argv)
    _configure_logging(args.verbose)

    handlers = {
        "check": run_check,
        "pick": run_pick,
        "ramp": run_ramp,
    }

    try:
        return handlers[args.command](args)
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 1
    except OSError as e:
        logger.error(f"Could not write preview: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Processing failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
