"""
Command-line interface for edgecurve.

Provides commands for fitting curves to an image and writing a default
configuration file.
"""

import argparse
import json
import sys

from edgecurve.config import apply_mode, load_config, save_default_config
from edgecurve.models import ScanMode
from edgecurve.tracer import configure_tracer, get_tracer


def build_parser():
    parser = argparse.ArgumentParser(
        description="edgecurve: approximate image edges with polynomial formulas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run command
    run_parser = subparsers.add_parser("run", help="Fit curves to an image")
    run_parser.add_argument(
        "--input", "-i",
        required=True,
        help="Input image file",
    )
    run_parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to YAML configuration file",
    )
    run_parser.add_argument(
        "--mode",
        choices=[m.value for m in ScanMode],
        default=None,
        help="Scan mode preset (overrides max gap and epsilon)",
    )
    run_parser.add_argument(
        "--degree", "-d",
        type=int,
        default=None,
        help="Polynomial degree (0-12)",
    )
    run_parser.add_argument(
        "--threshold", "-t",
        type=float,
        default=None,
        help="Edge gradient threshold",
    )
    run_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    run_parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable runtime tracing",
    )
    run_parser.add_argument(
        "--trace-level",
        default=None,
        choices=["ERROR", "WARN", "INFO", "DEBUG"],
        help="Trace log level",
    )
    run_parser.add_argument(
        "--trace-file",
        default=None,
        help="Path to write trace logs",
    )
    run_parser.add_argument(
        "--trace-json",
        action="store_true",
        help="Enable JSON trace output",
    )

    # Init config command
    init_parser = subparsers.add_parser("init-config", help="Create default config file")
    init_parser.add_argument(
        "--out", "-o",
        default="edgecurve_config.yaml",
        help="Output path for config file",
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "run":
        return handle_run(args)
    elif args.command == "init-config":
        return handle_init_config(args)

    return 0


def handle_run(args):
    """Handle the run command."""
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"\nError: {str(e)}", file=sys.stderr)
        return 1

    # CLI flags win over the config file's tracing section
    tracing = config.tracing
    configure_tracer(
        enabled=args.trace or tracing.enabled,
        level=args.trace_level or tracing.level,
        file_path=args.trace_file or tracing.file_path,
        json_output=args.trace_json or tracing.json_output,
    )

    tracer = get_tracer()

    try:
        from edgecurve.pipeline import analyze_image

        if args.mode:
            apply_mode(config, args.mode)
        if args.degree is not None:
            config.fit.degree = args.degree
        if args.threshold is not None:
            config.edges.threshold = args.threshold

        with tracer.span("cli_run", module="cli"):
            results = analyze_image(args.input, config=config)

    except Exception as e:
        tracer.event(f"Run failed: {str(e)}", level="ERROR")
        print(f"\nError: {str(e)}", file=sys.stderr)
        return 1
    finally:
        configure_tracer(enabled=False)

    if args.json:
        print(json.dumps([r.model_dump(mode="json") for r in results], indent=2))
        return 0

    if not results:
        print("No structure found.")
        return 0

    for idx, result in enumerate(results):
        print(f"[{idx}] {result.formula}  (path={result.source_length} pts, status={result.status.value})")

    return 0


def handle_init_config(args):
    """Handle the init-config command."""
    save_default_config(args.out)
    print(f"Default configuration saved to: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
