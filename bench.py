"""Quick benchmarks for Accessible Colors on a fixed sample of random colors.

Usage:
  uv run python bench.py --repeat 3
  uv run python bench.py --colors 5000 --steps 5 10 --repeat 5

Outputs per-call timings so you can compare optimizations.
"""

from __future__ import annotations

import argparse
import random
import statistics
import time
from typing import Callable

from accessible_colors.core.contrast import (
    get_contrast_color,
    get_contrast_color_for_text,
    get_contrast_color_for_ui_element,
)
from accessible_colors.core.ramp import generate_accessible_ramp
from accessible_colors.models.color import RGBColor


def sample_colors(count: int, seed: int = 0) -> list[RGBColor]:
    rnd = random.Random(seed)
    return [RGBColor(rnd.randrange(256), rnd.randrange(256), rnd.randrange(256)) for _ in range(count)]


def run_once(colors: list[RGBColor], fn: Callable[[RGBColor], object]) -> float:
    start = time.perf_counter()
    for color in colors:
        fn(color)
    return (time.perf_counter() - start) * 1_000_000 / len(colors)  # us per call


def report(name: str, timings: list[float]) -> None:
    mean_us = statistics.mean(timings)
    p95_us = statistics.quantiles(timings, n=20)[18] if len(timings) > 1 else mean_us
    print(f"{name:<32} mean {mean_us:9.2f} us/call (p95: {p95_us:.2f} us)")


def main() -> None:
    parser = argparse.ArgumentParser(description="Run contrast and ramp benchmarks")
    parser.add_argument("--colors", type=int, default=1000, help="Number of random colors per run")
    parser.add_argument(
        "--steps",
        type=int,
        nargs="+",
        default=[1, 5, 10],
        help="Ramp step counts to benchmark (default: 1 5 10)",
    )
    parser.add_argument("--repeat", type=int, default=3, help="Number of timing runs")
    args = parser.parse_args()

    if args.colors <= 0:
        raise SystemExit("--colors must be positive")

    colors = sample_colors(args.colors)

    cases: list[tuple[str, Callable[[RGBColor], object]]] = [
        ("get_contrast_color", get_contrast_color),
        ("get_contrast_color_for_text", lambda c: get_contrast_color_for_text(c, 14.0, True)),
        ("get_contrast_color_for_ui_element", get_contrast_color_for_ui_element),
    ]
    for steps in args.steps:
        for dark_mode in (False, True):
            mode = "dark" if dark_mode else "light"
            cases.append(
                (
                    f"ramp steps={steps} {mode}",
                    lambda c, s=steps, d=dark_mode: generate_accessible_ramp(c, s, d),
                )
            )

    print(f"Runs: {args.repeat}")
    print(f"Colors per run: {len(colors)}")
    for name, fn in cases:
        timings = [run_once(colors, fn) for _ in range(args.repeat)]
        report(name, timings)


if __name__ == "__main__":
    main()
