#!/usr/bin/env python3
"""
Benchmark american flag sort against sorted() and draw a log-log SVG of the
timings. No plotting dependencies required.

Output (default): docs/img/performance_comparison.svg
"""

from __future__ import annotations

import argparse
import math
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from american_flag_sort import benchmark_american_flag

Series = Dict[str, List[Tuple[int, float]]]

PALETTE = ("#d62728", "#1f77b4", "#2ca02c", "#9467bd")

# perf_counter can report 0.0 for tiny inputs
MIN_SECONDS = 1e-6

WIDTH, HEIGHT = 900, 560
MARGIN_LEFT, MARGIN_BOTTOM, MARGIN_TOP, MARGIN_RIGHT = 120, 80, 60, 40


def log10(x: float) -> float:
    if x <= 0:
        raise ValueError("Values must be positive for log10 axis")
    return math.log10(x)


def decades(lo: float, hi: float) -> List[float]:
    """Powers of ten covering [lo, hi] in log10 space."""
    return [10.0**k for k in range(math.floor(lo), math.ceil(hi) + 1) if lo <= k <= hi]


def render_svg(data: Series, title: str = "American Flag Sort Performance (log-log)") -> str:
    points = {name: [(n, max(t, MIN_SECONDS)) for n, t in series] for name, series in data.items()}
    all_n = [n for series in points.values() for n, _ in series]
    all_t = [t for series in points.values() for _, t in series]
    if not all_n:
        raise ValueError("No timings to plot")

    x_min, x_max = log10(min(all_n)), log10(max(all_n))
    if x_min == x_max:
        x_min, x_max = x_min - 0.5, x_max + 0.5
    y_min, y_max = log10(min(all_t)) - 0.2, log10(max(all_t)) + 0.2

    plot_w = WIDTH - MARGIN_LEFT - MARGIN_RIGHT
    plot_h = HEIGHT - MARGIN_BOTTOM - MARGIN_TOP

    def sx(n: float) -> float:
        return MARGIN_LEFT + (log10(n) - x_min) / (x_max - x_min) * plot_w

    def sy(t: float) -> float:
        return HEIGHT - MARGIN_BOTTOM - (log10(t) - y_min) / (y_max - y_min) * plot_h

    x0, y0 = MARGIN_LEFT, HEIGHT - MARGIN_BOTTOM
    x1 = WIDTH - MARGIN_RIGHT

    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{WIDTH}" height="{HEIGHT}" viewBox="0 0 {WIDTH} {HEIGHT}">',
        "<style>text { font-family: sans-serif; font-size: 13px; }</style>",
        f'<line x1="{x0}" y1="{y0}" x2="{x1}" y2="{y0}" stroke="black" stroke-width="1.5" />',
        f'<line x1="{x0}" y1="{MARGIN_TOP}" x2="{x0}" y2="{y0}" stroke="black" stroke-width="1.5" />',
    ]

    for n in sorted(set(all_n)):
        x = sx(n)
        parts.append(f'<line x1="{x:.2f}" y1="{y0}" x2="{x:.2f}" y2="{y0 + 6}" stroke="black" />')
        parts.append(f'<text x="{x:.2f}" y="{y0 + 24}" text-anchor="middle">{n:,}</text>')

    for t in decades(y_min, y_max):
        y = sy(t)
        parts.append(f'<line x1="{x0 - 6}" y1="{y:.2f}" x2="{x0}" y2="{y:.2f}" stroke="black" />')
        parts.append(f'<text x="{x0 - 10}" y="{y + 4:.2f}" text-anchor="end">{t:g}s</text>')

    mid_y = (MARGIN_TOP + y0) / 2
    parts.append(f'<text x="{WIDTH / 2}" y="{MARGIN_TOP - 20}" text-anchor="middle" font-size="18">{title}</text>')
    parts.append(f'<text x="{(x0 + x1) / 2}" y="{HEIGHT - 20}" text-anchor="middle">Input size (n)</text>')
    parts.append(f'<text x="25" y="{mid_y}" text-anchor="middle" transform="rotate(-90 25 {mid_y})">Time (seconds, log scale)</text>')

    colors = {name: PALETTE[i % len(PALETTE)] for i, name in enumerate(points)}
    for name, series in points.items():
        color = colors[name]
        coords = " ".join(f"{sx(n):.2f},{sy(t):.2f}" for n, t in series)
        parts.append(f'<polyline fill="none" stroke="{color}" stroke-width="2" points="{coords}" />')
        for n, t in series:
            parts.append(
                f'<circle cx="{sx(n):.2f}" cy="{sy(t):.2f}" r="4" fill="{color}" stroke="white" stroke-width="1.5">'
                f"<title>{name}: n={n:,}, t={t:.3f}s</title></circle>"
            )

    legend_x, legend_y, line_height = WIDTH - MARGIN_RIGHT - 200, MARGIN_TOP + 10, 22
    parts.append(
        f'<rect x="{legend_x - 10}" y="{legend_y - 14}" width="180" height="{len(points) * line_height + 10}" '
        'fill="#f8f8f8" stroke="#ccc" />'
    )
    for i, (name, color) in enumerate(colors.items()):
        y = legend_y + i * line_height
        parts.append(f'<line x1="{legend_x}" y1="{y}" x2="{legend_x + 24}" y2="{y}" stroke="{color}" stroke-width="3" />')
        parts.append(f'<text x="{legend_x + 36}" y="{y + 5}">{name}</text>')

    parts.append("</svg>")
    return "\n".join(parts)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot american flag sort timings as SVG")
    parser.add_argument("--sizes", type=int, nargs="+", default=[10_000, 100_000, 1_000_000], help="Input sizes to time.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument("--out", type=Path, default=Path("docs/img/performance_comparison.svg"), help="SVG output path.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    timings = benchmark_american_flag(sizes=args.sizes, seed=args.seed)

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(render_svg(timings))
    print(f"Wrote {args.out} from {len(args.sizes)} benchmark runs.")


if __name__ == "__main__":
    main()
