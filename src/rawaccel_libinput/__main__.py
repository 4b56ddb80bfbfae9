"""Command-line entry point for converting a RawAccel curve to libinput."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .config import PARAMETER_RANGES, RESAMPLE_METHODS, AccelParams, EngineConfig, InvalidParameterError, default_params
from .export import render_all


def print_header(text: str, width: int = 70) -> None:
    """Print a formatted section header."""
    print("\n" + "=" * width)
    print(f"  {text}")
    print("=" * width)


def _range_help(name: str, text: str) -> str:
    low, high = PARAMETER_RANGES[name]
    return f"{text} (UI range {low:g}-{high:g}, default: %(default)s)."


def build_parser() -> argparse.ArgumentParser:
    defaults = default_params()
    config = EngineConfig()
    parser = argparse.ArgumentParser(
        prog="rawaccel-libinput",
        description="Convert a RawAccel synchronous acceleration curve into a libinput custom acceleration function.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                 # Default settings, all artifacts
  %(prog)s --sync-speed 6 --motivity 1.8   # Custom curve
  %(prog)s --points 30 --format command    # Only the libinput command
  %(prog)s --output-dir artifacts/         # Also write configs, CSV and plots
        """,
    )
    parser.add_argument("--sync-speed", type=float, default=defaults.sync_speed,
                        help=_range_help("sync_speed", "Speed at which the multiplier is 1"))
    parser.add_argument("--motivity", type=float, default=defaults.motivity,
                        help=_range_help("motivity", "Multiplier range bound, 1/motivity to motivity"))
    parser.add_argument("--gamma", type=float, default=defaults.gamma,
                        help=_range_help("gamma", "Steepness of the transition"))
    parser.add_argument("--smooth", type=float, default=defaults.smooth,
                        help=_range_help("smooth", "Activation smoothness, 0 for a hard clamp"))
    parser.add_argument("--scale", type=float, default=defaults.scale,
                        help=_range_help("scale", "Sensitivity scale, carried through unused"))
    parser.add_argument("--output-dpi", type=float, default=defaults.output_dpi,
                        help=_range_help("output_dpi", "Output DPI, carried through unused"))
    parser.add_argument(
        "--clamp",
        action="store_true",
        help="Clamp every parameter into its UI range before evaluating.",
    )
    parser.add_argument(
        "-n", "--points",
        type=int,
        default=config.default_target_points,
        help=(
            f"Number of libinput points, {config.min_target_points}-{config.max_target_points} "
            "(default: %(default)s)."
        ),
    )
    parser.add_argument(
        "--method",
        choices=RESAMPLE_METHODS,
        default=config.resample_method,
        help="Resampling reconstruction (default: %(default)s).",
    )
    parser.add_argument(
        "--format",
        choices=["values", "command", "xorg", "hyprland", "all"],
        default="all",
        help="Artifact to print (default: %(default)s).",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory where configs, the curve CSV and plots are written.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print the point table and curve metrics as well.",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Print only the requested artifact.",
    )
    return parser


def params_from_args(args: argparse.Namespace) -> AccelParams:
    params = AccelParams(
        sync_speed=args.sync_speed,
        motivity=args.motivity,
        gamma=args.gamma,
        smooth=args.smooth,
        scale=args.scale,
        output_dpi=args.output_dpi,
    )
    return params.clamped() if args.clamp else params


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.quiet:
        os.environ["RAWACCEL_VERBOSITY"] = "0"
    elif args.verbose:
        os.environ["RAWACCEL_VERBOSITY"] = "2"
    else:
        os.environ["RAWACCEL_VERBOSITY"] = "1"

    config = EngineConfig()
    try:
        params = params_from_args(args).validate()

        if args.output_dir is not None:
            from .analysis import CurveAnalysis

            artifacts = CurveAnalysis(config).run(
                params=params,
                target_point_count=args.points,
                output_dir=args.output_dir,
                method=args.method,
            )
            texts = artifacts.texts
            report = artifacts.report
        else:
            from .engine import CurveEngine
            from .reporting import compute_curve_metrics, summarize_curve_metrics, summarize_libinput_table

            engine = CurveEngine(params, config)
            table = engine.get_libinput_table(args.points, args.method)
            texts = render_all(table, config.decimals)
            report = (
                summarize_libinput_table(table, config.decimals)
                + "\n\n"
                + summarize_curve_metrics(compute_curve_metrics(engine.get_curve_series()))
            )
    except InvalidParameterError as e:
        print(f"Error: invalid parameter: {e}", file=sys.stderr)
        return 1
    except ImportError as e:
        print(
            f"Error: missing required dependency: {e}\n"
            f"Please install required packages: pip install numpy pandas matplotlib tabulate tqdm",
            file=sys.stderr,
        )
        return 1
    except OSError as e:
        print(f"Error: could not write artifacts: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: invalid input: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(
            f"Error: {e}\n"
            f"For help, run: rawaccel-libinput --help",
            file=sys.stderr,
        )
        return 1

    selected = list(texts) if args.format == "all" else [args.format]

    if args.quiet:
        for name in selected:
            print(texts[name])
        return 0

    print_header("RawAccel to libinput")
    print(f"\nParameters: {params}")
    if args.verbose:
        print("\n" + report)
    for name in selected:
        print_header(name)
        print(texts[name])
    if args.output_dir is not None:
        print(f"\nArtifacts written to: {args.output_dir.resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
