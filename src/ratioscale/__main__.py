#!/usr/bin/env python3
"""
Ratioscale CLI Entry Point

Converts values between scales from the command line.
Run with: python -m ratioscale <command> [args]

Scales are given in compact form (linear:0:100, rastered:0:200:5,
log:-1000:-1, noop, with optional :inverted / :clamped suffixes) or by
name when --scales points at a YAML file.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional

from . import __version__
from .core.errors import ScaleConfigError, ScaleError
from .core.logging import set_log_level
from .scales import Scale, linear_scale, load_scales, logarithmic_scale, parse_scale_spec

DEMO_LINEAR_VALUES = (0.0, 25.0, 50.0, 75.0, 100.0)
DEMO_LOG_VALUES = (-1000.0, -100.0, -10.0, -1.0)


def output_json(data: dict, indent: int = 2) -> None:
    """Print JSON output to stdout (non-finite floats as NaN/Infinity)."""
    print(json.dumps(data, indent=indent))


def output_error(error: ScaleError, exit_code: int = 1) -> int:
    """Print error JSON and return the exit code."""
    output_json(error.to_dict())
    return exit_code


# =============================================================================
# Scale Resolution
# =============================================================================


def resolve_scale(text: str, named: dict[str, Scale]) -> Scale:
    """
    Resolve a scale argument.

    Names from the --scales file take precedence over spec strings.
    """
    if text in named:
        return named[text]
    return parse_scale_spec(text)


def _load_named(args: argparse.Namespace) -> dict[str, Scale]:
    if getattr(args, "scales", None):
        return load_scales(args.scales)
    return {}


# =============================================================================
# Commands
# =============================================================================


def cmd_convert(args: argparse.Namespace) -> dict:
    """Convert absolute values of one scale into another."""
    named = _load_named(args)
    source = resolve_scale(args.source, named)
    target = resolve_scale(args.target, named)

    return {
        "from": args.source,
        "to": args.target,
        "results": [
            {"input": value, "output": source.convert_to(target, value)}
            for value in args.values
        ],
    }


def cmd_delta(args: argparse.Namespace) -> dict:
    """Apply a delta in one scale's units to a position in another scale."""
    named = _load_named(args)
    source = resolve_scale(args.source, named)
    target = resolve_scale(args.target, named)

    return {
        "from": args.source,
        "to": args.target,
        "delta": args.delta,
        "current": args.current,
        "result": source.apply_delta_to(target, args.delta, args.current),
    }


def cmd_ratio(args: argparse.Namespace) -> dict:
    """Map absolute values to ratios."""
    scale = resolve_scale(args.scale, _load_named(args))
    return {
        "scale": args.scale,
        "results": [{"input": v, "ratio": scale.to_ratio(v)} for v in args.values],
    }


def cmd_absolute(args: argparse.Namespace) -> dict:
    """Map ratios to absolute values."""
    scale = resolve_scale(args.scale, _load_named(args))
    return {
        "scale": args.scale,
        "results": [{"ratio": r, "absolute": scale.to_absolute(r)} for r in args.ratios],
    }


def cmd_demo(args: argparse.Namespace) -> dict:
    """Linear 0..100 against logarithmic -1000..-1, both directions."""
    linear = linear_scale(0, 100)
    logarithmic = logarithmic_scale(-1000, -1)

    return {
        "linear": "linear:0:100",
        "logarithmic": "log:-1000:-1",
        "linear_to_log": [
            {"input": v, "output": linear.convert_to(logarithmic, v)} for v in DEMO_LINEAR_VALUES
        ],
        "log_to_linear": [
            {"input": v, "output": logarithmic.convert_to(linear, v)} for v in DEMO_LOG_VALUES
        ],
    }


# =============================================================================
# Parser
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="ratioscale",
        description="Convert values between linear, rastered and logarithmic scales",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    scales_parent = argparse.ArgumentParser(add_help=False)
    scales_parent.add_argument(
        "--scales",
        metavar="FILE",
        help="YAML file of named scale definitions",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    convert = subparsers.add_parser(
        "convert", parents=[scales_parent], help="Convert values from one scale to another"
    )
    convert.add_argument("source", metavar="FROM", help="Source scale")
    convert.add_argument("target", metavar="TO", help="Target scale")
    convert.add_argument("values", metavar="VALUE", type=float, nargs="+")
    convert.set_defaults(func=cmd_convert)

    delta = subparsers.add_parser(
        "delta", parents=[scales_parent], help="Apply a delta across scales"
    )
    delta.add_argument("source", metavar="FROM", help="Scale the delta is measured in")
    delta.add_argument("target", metavar="TO", help="Scale the position is tracked in")
    delta.add_argument("delta", type=float)
    delta.add_argument("current", type=float)
    delta.set_defaults(func=cmd_delta)

    ratio = subparsers.add_parser(
        "ratio", parents=[scales_parent], help="Map absolute values to ratios"
    )
    ratio.add_argument("scale", metavar="SCALE")
    ratio.add_argument("values", metavar="VALUE", type=float, nargs="+")
    ratio.set_defaults(func=cmd_ratio)

    absolute = subparsers.add_parser(
        "absolute", parents=[scales_parent], help="Map ratios to absolute values"
    )
    absolute.add_argument("scale", metavar="SCALE")
    absolute.add_argument("ratios", metavar="RATIO", type=float, nargs="+")
    absolute.set_defaults(func=cmd_absolute)

    demo = subparsers.add_parser("demo", help="Show linear vs logarithmic example")
    demo.set_defaults(func=cmd_demo)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        set_log_level(logging.DEBUG)

    if not getattr(args, "func", None):
        parser.print_help()
        return 0

    try:
        result: dict[str, Any] = args.func(args)
    except ScaleConfigError as e:
        return output_error(e)

    output_json(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
