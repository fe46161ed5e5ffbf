"""
Command line entry point.

    cienv run [--config FILE] [--researcher-tools] [--vision-level LEVEL] ...
    cienv matrix [--format yaml|json]

`run` exits 0 once the pipeline completes, whatever the install and
verify outcomes. Only bad configuration yields a non-zero status.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from cienv import __version__
from cienv.annotations import default_annotator
from cienv.config import ConfigError, build_config
from cienv.model import RunReport
from cienv.pipeline import run_pipeline
from cienv.serialization import matrix_to_json, matrix_to_yaml, report_to_json


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _status(value: Optional[bool]) -> str:
    if value is None:
        return "skipped"
    return "✓ verified" if value else "✗ not verified"


def print_summary(report: RunReport) -> None:
    print("=" * 80)
    print("CI ENVIRONMENT SUMMARY")
    print("=" * 80)
    print(f"   Researcher tools: {_status(report.researcher_verified)}")
    print(f"   Vision control:   {_status(report.vision_verified)}")
    if report.exported:
        print(f"\n   Exported variables ({len(report.exported)}):")
        for key, value in report.exported.items():
            print(f"      {key}={value}")
    if report.warnings:
        print(f"\n   Warnings ({len(report.warnings)}):")
        for warning in report.warnings:
            print(f"      - {warning}")
    print("=" * 80)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cienv",
        description="Install and verify data-science and vision packages for CI pipelines.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING"],
        help="Logging verbosity (default: INFO).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Install, configure and verify packages.")
    run.add_argument("--config", type=str, help="YAML configuration file.")
    run.add_argument(
        "--researcher-tools",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Install the researcher package list.",
    )
    run.add_argument(
        "--vision-level",
        dest="vision_control_level",
        type=str,
        default=None,
        help="Vision control level: basic, advanced or full.",
    )
    run.add_argument("--python", type=str, default=None, help="Interpreter to install into.")
    run.add_argument("--timeout", type=float, default=None, help="Per-command timeout in seconds.")
    run.add_argument(
        "--no-verify",
        dest="verify",
        action="store_const",
        const=False,
        default=None,
        help="Skip the import checks.",
    )
    run.add_argument("--report", type=str, help="Write a JSON run report to this path.")

    matrix = sub.add_parser("matrix", help="Print the package matrix.")
    matrix.add_argument("--format", choices=["yaml", "json"], default="yaml")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    if args.command == "matrix":
        print(matrix_to_yaml() if args.format == "yaml" else matrix_to_json(), end="")
        return 0

    try:
        config = build_config(
            path=args.config,
            environ=os.environ,
            overrides={
                "researcher_tools": args.researcher_tools,
                "vision_control_level": args.vision_control_level,
                "python": args.python,
                "timeout": args.timeout,
                "verify": args.verify,
            },
        )
    except ConfigError as e:
        parser.error(str(e))

    report = run_pipeline(config)
    print_summary(report)

    if args.report:
        try:
            with open(args.report, "w", encoding="utf-8") as fh:
                fh.write(report_to_json(report))
        except OSError as e:
            default_annotator().warning(f"Could not write run report to {args.report}: {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
