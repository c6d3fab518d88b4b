"""Command-line interface for pdspring.

Samples perceptual springs and prints their curves and physical parameters.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pdspring.core.config.loader import load_app_config
from pdspring.core.config.models import AppConfig
from pdspring.core.spring.defaults import get_preset, list_presets
from pdspring.core.spring.errors import InvalidArgumentError, PresetNotFoundError
from pdspring.core.spring.factory import describe_spring, make_spring
from pdspring.core.spring.sampling import estimate_settling_time, is_overshooting, sample_spring
from pdspring.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)


def _load_config(args: argparse.Namespace) -> AppConfig:
    config_path = Path(args.config).resolve() if args.config else None
    config = load_app_config(config_path)
    configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
        # Keep stdout clean for --json payloads.
        stream=sys.stderr if args.json else None,
    )
    return config


def _resolve_spring(args: argparse.Namespace, config: AppConfig) -> tuple[float, float]:
    """Pick duration/bounce: explicit flags, then preset, then config defaults."""
    if args.preset:
        base = get_preset(args.preset, config.presets)
    else:
        base = config.spring.to_params()

    duration = args.duration if args.duration is not None else base.duration
    bounce = args.bounce if args.bounce is not None else base.bounce
    return duration, bounce


def run_curve(args: argparse.Namespace, config: AppConfig) -> int:
    """Sample a spring curve and print it."""
    duration, bounce = _resolve_spring(args, config)
    n_samples = args.samples if args.samples is not None else config.sampling.n_samples
    span = args.span if args.span is not None else duration

    ease = make_spring(duration, bounce)
    points = sample_spring(ease, n_samples, duration=span)
    logger.debug("Sampled %d points over %.3fs", len(points), span)

    if args.json:
        payload = {
            "duration": duration,
            "bounce": bounce,
            "points": [p.model_dump() for p in points],
        }
        sys.stdout.write(json.dumps(payload, indent=2) + "\n")
        return 0

    table = Table(title=f"Spring duration={duration} bounce={bounce}")
    table.add_column("t", justify="right")
    table.add_column("value", justify="right")
    for p in points:
        table.add_row(f"{p.t:.4f}", f"{p.v:.6f}")
    console.print(table)

    if is_overshooting(p.v for p in points):
        console.print("[yellow]Curve overshoots the target[/yellow]")
    return 0


def run_params(args: argparse.Namespace, config: AppConfig) -> int:
    """Print the physical parameters behind a perceptual spring."""
    duration, bounce = _resolve_spring(args, config)
    description = describe_spring(duration, bounce)
    settle = estimate_settling_time(
        make_spring(duration, bounce),
        epsilon=config.sampling.settle_epsilon,
        max_time=config.sampling.max_settle_time,
        fps=config.sampling.fps,
    )

    if args.json:
        payload = description.model_dump(mode="json")
        payload["settling_time"] = settle
        sys.stdout.write(json.dumps(payload, indent=2) + "\n")
        return 0

    physical = description.physical
    table = Table(title="Spring parameters", show_header=False)
    table.add_column("name")
    table.add_column("value", justify="right")
    table.add_row("duration", f"{duration}")
    table.add_row("bounce", f"{bounce}")
    table.add_row("stiffness", f"{physical.stiffness:.4f}")
    table.add_row("damping", f"{physical.damping:.4f}")
    table.add_row("mass", f"{physical.mass:.4f}")
    table.add_row("damping ratio", f"{description.damping_ratio:.4f}")
    table.add_row("regime", description.regime.value)
    table.add_row("settling time", "not settled" if settle is None else f"{settle:.3f}s")
    console.print(table)
    return 0


def run_presets(args: argparse.Namespace, config: AppConfig) -> int:
    """List built-in and configured presets."""
    presets = list_presets(config.presets)

    if args.json:
        payload = {name: params.model_dump() for name, params in sorted(presets.items())}
        sys.stdout.write(json.dumps(payload, indent=2) + "\n")
        return 0

    table = Table(title="Spring presets")
    table.add_column("name")
    table.add_column("duration", justify="right")
    table.add_column("bounce", justify="right")
    for name, params in sorted(presets.items()):
        table.add_row(name, f"{params.duration}", f"{params.bounce}")
    console.print(table)
    return 0


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="Path to config (.json/.yaml)")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")


def _add_spring_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--duration", type=float, default=None, help="Perceived duration (s)")
    parser.add_argument("--bounce", type=float, default=None, help="Bounce in [-1, 1]")
    parser.add_argument("--preset", default=None, help="Named preset (see `presets`)")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="pdspring",
        description="pdspring - perceptual-duration spring easing curves",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    curve = sub.add_parser("curve", help="Sample a spring curve")
    _add_spring_args(curve)
    _add_common_args(curve)
    curve.add_argument("--samples", type=int, default=None, help="Number of samples (>= 2)")
    curve.add_argument(
        "--span",
        type=float,
        default=None,
        help="Time span to sample in seconds (default: the duration)",
    )

    params = sub.add_parser("params", help="Show physical spring parameters")
    _add_spring_args(params)
    _add_common_args(params)

    presets = sub.add_parser("presets", help="List spring presets")
    _add_common_args(presets)

    return p


_COMMANDS = {
    "curve": run_curve,
    "params": run_params,
    "presets": run_presets,
}


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        config = _load_config(args)
        exit_code = _COMMANDS[args.cmd](args, config)
    except (InvalidArgumentError, ValidationError, ValueError, FileNotFoundError) as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        exit_code = 1
    except PresetNotFoundError as e:
        console.print(f"[red]ERROR: {escape(e.args[0])}[/red]")
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
