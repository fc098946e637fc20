"""CLI entry point for opstats.

Usage:
    opstats [options] analyze FILE ANALYSIS
    python -m opstats [options] analyze FILE ANALYSIS

Analyses:
    fastest             Fastest execution and its trace ID
    slowest             Slowest execution and its trace ID
    percentile P [...]  Whole-number percentiles (1-100)
    all                 Fastest, slowest and the default percentiles

Options:
    --config PATH       Path to opstats.yaml config file
    --format LIST       Comma-separated output formats: text,markdown
    --output DIR        Override output directory for report files
    --verify-header     Require the CSV header to match the configured names
    --verbose / -v      Print progress to stderr
    --quiet / -q        Suppress progress output (default)
    --help / -h         Show this help
"""

from __future__ import annotations

import argparse
import os
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="opstats",
        description="Latency statistics for a CSV log of operation executions",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to opstats.yaml configuration file",
    )
    parser.add_argument(
        "--format",
        type=str,
        default=None,
        help="Comma-separated output formats (text,markdown)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output directory for report files",
    )
    parser.add_argument(
        "--verify-header",
        action="store_true",
        default=False,
        help="Check CSV column names, not just their count",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Print progress to stderr",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=False,
        help="Suppress progress output",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    analyze = commands.add_parser(
        "analyze",
        aliases=["csv"],
        help="Analyze a CSV file of operation executions",
    )
    analyze.add_argument("file", metavar="FILE", help="CSV file to process")

    analyses = analyze.add_subparsers(dest="analysis", required=True)
    analyses.add_parser("fastest", help="Fastest execution")
    analyses.add_parser("slowest", help="Slowest execution")
    analyses.add_parser("all", help="Fastest, slowest and default percentiles")
    percentile = analyses.add_parser("percentile", help="Calculate percentiles")
    percentile.add_argument(
        "percentiles",
        metavar="P",
        type=int,
        nargs="+",
        help="Whole-number percentile, e.g. 50 or 99",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config and not os.path.isfile(args.config):
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        return 1

    # Load config
    from .config import load_config
    config = load_config(config_path=args.config)

    # Apply CLI overrides
    if args.format:
        config.output.formats = [f.strip() for f in args.format.split(",") if f.strip()]
    if args.output:
        config.output.directory = args.output
    if args.verify_header:
        config.schema.verify_header = True

    verbose = args.verbose and not args.quiet

    from .errors import AnalysisError
    from .loader import load_dataset
    from .report import build_report, write_output

    if verbose:
        print(f"[opstats] Analysis: {args.analysis}", file=sys.stderr)
        print(f"[opstats] Formats: {', '.join(config.output.formats)}", file=sys.stderr)

    try:
        dataset = load_dataset(args.file, config.schema, verbose=verbose)
        report = build_report(
            dataset,
            args.analysis,
            percents=getattr(args, "percentiles", None),
            config=config,
        )
        write_output(report, args.analysis, config, verbose=verbose)
    except AnalysisError as e:
        print(f"Error: Failed to analyze CSV: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
