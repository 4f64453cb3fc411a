"""Command-line interface for huecurve.

Subcommands:
- check: contrast ratio of a foreground/background pair
- suggest: accessible alternatives for a failing foreground
- curve: the accessibility curve for a background and hue
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from huecurve.core.accessibility import (
    AccessibilityEngine,
    is_valid_hex,
    normalize_hex,
)
from huecurve.core.config.loader import configure_logging_from_config, load_app_config
from huecurve.core.config.models import AppConfig, LoggingConfig
from huecurve.core.logging.models import LogLevel
from huecurve.core.utils.json import write_json
from huecurve.core.utils.logging import get_logger

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FAIL = 2


def _require_color(value: str, label: str) -> str:
    if not is_valid_hex(value):
        raise ValueError(f"{label} is not a hex color: {value!r}")
    return normalize_hex(value)


def _load_config(args: argparse.Namespace) -> AppConfig:
    config = load_app_config(Path(args.config) if args.config else None)
    if args.log_level:
        logging_config = LoggingConfig.model_validate(
            {**config.logging.model_dump(), "level": args.log_level.upper()}
        )
        config = config.model_copy(update={"logging": logging_config})
    return config


def cmd_check(engine: AccessibilityEngine, args: argparse.Namespace) -> int:
    """Print the contrast ratio and whether it meets the threshold."""
    fg = _require_color(args.foreground, "Foreground")
    bg = _require_color(args.background, "Background")
    threshold = args.threshold if args.threshold is not None else engine.config.default_threshold

    ratio = engine.contrast_ratio(fg, bg)
    passed = ratio >= threshold
    verdict = "[green]PASS[/green]" if passed else "[red]FAIL[/red]"
    console.print(f"{fg} on {bg}: {ratio:.2f}:1 (threshold {threshold:g}) {verdict}")
    return EXIT_OK if passed else EXIT_FAIL


def cmd_suggest(engine: AccessibilityEngine, args: argparse.Namespace) -> int:
    """Print accessible suggestions for a foreground."""
    fg = _require_color(args.foreground, "Foreground")
    bg = _require_color(args.background, "Background")
    threshold = args.threshold if args.threshold is not None else engine.config.default_threshold
    if args.count < 1:
        raise ValueError(f"--count must be at least 1, got {args.count}")
    if args.spread < 0:
        raise ValueError(f"--spread must not be negative, got {args.spread}")

    if engine.meets_threshold(fg, bg, threshold):
        console.print(f"[green]{fg} already meets {threshold:g}:1 on {bg}[/green]")
        return EXIT_OK

    suggestions = engine.nearest_accessible_colors(fg, bg, args.count, threshold, args.spread)

    table = Table(title=f"Suggestions for {fg} on {bg}", expand=True)
    table.add_column("#", justify="right")
    table.add_column("Color")
    table.add_column("Contrast", justify="right")
    for i, color in enumerate(suggestions, start=1):
        table.add_row(str(i), color, f"{engine.contrast_ratio(color, bg):.2f}:1")
    console.print(table)
    return EXIT_OK


def cmd_curve(engine: AccessibilityEngine, args: argparse.Namespace) -> int:
    """Print (and optionally save) the accessibility curve."""
    bg = _require_color(args.background, "Background")
    threshold = args.threshold if args.threshold is not None else engine.config.default_threshold

    curve = engine.build_curve(bg, args.hue, threshold)
    if not curve:
        console.print(f"[yellow]No accessible color at hue {args.hue:g} on {bg}[/yellow]")
    else:
        console.print(f"Curve for hue {args.hue:g} on {bg} ({len(curve)} saturations):")
        console.print(" ".join(str(v) for v in curve))

    if args.output:
        write_json(
            args.output,
            {"background": bg, "hue": args.hue, "threshold": threshold, "curve": curve},
        )
        console.print(f"[green]Saved:[/green] {args.output}")
    return EXIT_OK


_COMMANDS = {
    "check": cmd_check,
    "suggest": cmd_suggest,
    "curve": cmd_curve,
}


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="huecurve",
        description="huecurve - WCAG contrast checks and accessible color suggestions",
    )
    p.add_argument("--config", default=None, help="Path to config (.yaml/.yml/.json)")
    p.add_argument(
        "--log-level",
        default=None,
        choices=[level.value.lower() for level in LogLevel],
        help="Override the configured log level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    check = sub.add_parser("check", help="Check contrast of a color pair")
    check.add_argument("foreground", help="Foreground hex color")
    check.add_argument("background", help="Background hex color")
    check.add_argument("--threshold", type=float, default=None, help="Contrast threshold")

    suggest = sub.add_parser("suggest", help="Suggest accessible colors")
    suggest.add_argument("foreground", help="Foreground hex color")
    suggest.add_argument("background", help="Background hex color")
    suggest.add_argument("--count", type=int, default=5, help="Number of suggestions")
    suggest.add_argument(
        "--spread",
        type=int,
        default=0,
        help="Saturation step between suggestions (0 = closest colors)",
    )
    suggest.add_argument("--threshold", type=float, default=None, help="Contrast threshold")

    curve = sub.add_parser("curve", help="Print the accessibility curve for a hue")
    curve.add_argument("background", help="Background hex color")
    curve.add_argument("hue", type=float, help="Hue in degrees")
    curve.add_argument("--threshold", type=float, default=None, help="Contrast threshold")
    curve.add_argument("--output", default=None, help="Write the curve as JSON to this path")

    return p


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, run the command and return its exit code."""
    args = build_arg_parser().parse_args(argv)

    try:
        config = _load_config(args)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        err_console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return EXIT_ERROR

    configure_logging_from_config(config)
    engine = AccessibilityEngine.from_app_config(config)

    try:
        return _COMMANDS[args.cmd](engine, args)
    except ValueError as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        err_console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return EXIT_ERROR


def main() -> None:
    """Main entry point for CLI."""
    sys.exit(run())


if __name__ == "__main__":
    main()
