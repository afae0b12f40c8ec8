"""CLI entrypoint for the statistics calculator."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import structlog

from src.calculator.plot import save_histogram_plot
from src.calculator.reader import read_numbers
from src.calculator.report import render_stats
from src.common.console import fail
from src.common.constants import (
    DEFAULT_BINS,
    DEFAULT_IQR_MULTIPLIER,
    MAX_BINS,
    MIN_BINS,
    PROGRAM_NAME,
    PROGRAM_VERSION,
)
from src.common.logging import configure_structlog
from src.engine.compute import compute_stats
from src.engine.errors import ConfigError, StatsError
from src.engine.models import StatsConfig
from src.engine.transform import apply_log_transform


def _percentile_list(text: str) -> tuple[float, ...]:
    """Parse ``"10,90"`` into ``(10.0, 90.0)``."""
    ranks: list[float] = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            ranks.append(float(part))
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid percentile: {part!r}") from None
    return tuple(ranks)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Compute descriptive statistics from a list of numbers (one per line).",
        epilog="Provide a filename or use '-' to read from standard input.",
    )
    parser.add_argument("file", nargs="?", default=None, help="Input file, or '-' for stdin")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version {PROGRAM_VERSION}",
    )
    parser.add_argument(
        "-p",
        "--percentiles",
        metavar="LIST",
        type=_percentile_list,
        default=(),
        help="Comma-separated extra percentiles to report, each in [0, 100]",
    )
    parser.add_argument(
        "-k",
        "--iqr-multiplier",
        metavar="K",
        type=float,
        default=DEFAULT_IQR_MULTIPLIER,
        help=f"IQR fence multiplier for outliers (default {DEFAULT_IQR_MULTIPLIER})",
    )
    parser.add_argument(
        "-b",
        "--bins",
        metavar="N",
        type=int,
        default=DEFAULT_BINS,
        help=f"Histogram/trendline buckets, {MIN_BINS}-{MAX_BINS} (default {DEFAULT_BINS})",
    )
    parser.add_argument(
        "-z",
        "--zscore",
        metavar="T",
        type=float,
        default=0.0,
        help="Flag values with |z| above T (default 0 = off)",
    )
    parser.add_argument(
        "-t",
        "--trim",
        metavar="PCT",
        type=float,
        default=0.0,
        help="Report the mean with PCT%% trimmed from each end (default 0 = off)",
    )
    parser.add_argument(
        "-l",
        "--log",
        action="store_true",
        default=False,
        help="Apply a natural-log transform before computing",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        default=None,
        help="Path to write the statistics as JSON",
    )
    parser.add_argument(
        "--plot",
        metavar="FILE",
        default=None,
        help="Path to write a PNG histogram",
    )
    return parser


def _load(path: str | None) -> list[float]:
    if path is None or path == "-":
        return read_numbers(sys.stdin)
    try:
        with open(path, encoding="utf-8") as f:
            return read_numbers(f)
    except OSError as exc:
        fail(f"Error opening file: {exc}")


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = StatsConfig(
            custom_percentiles=args.percentiles,
            iqr_multiplier=args.iqr_multiplier,
            bins=args.bins,
            zscore_threshold=args.zscore,
            trim_percent=args.trim,
        )
    except ConfigError as exc:
        parser.error(str(exc))

    if args.file is None and sys.stdin.isatty():
        parser.print_usage(sys.stderr)
        fail("Provide a filename or use '-' to read from standard input.")

    configure_structlog()
    log = structlog.get_logger("cli")

    numbers = _load(args.file)
    log.debug("input read", source=args.file or "-", count=len(numbers))

    try:
        if args.log:
            numbers = apply_log_transform(numbers)
        stats = compute_stats(numbers, config)
    except StatsError as exc:
        fail(f"Error computing stats: {exc}")

    print(render_stats(stats, log_transformed=args.log))

    if args.output:
        Path(args.output).write_text(json.dumps(stats.to_dict(), indent=2, ensure_ascii=False))
        log.info("statistics written", path=args.output)
    if args.plot:
        written = save_histogram_plot(numbers, stats, args.plot, bins=config.bins)
        log.info("histogram written", path=str(written))
