from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys
from pathlib import Path

from schedulelab.analyze import analyze_records
from schedulelab.config import ENV_LOG_LEVEL, EXECUTORS, AnalysisConfig
from schedulelab.io import read_schedule, write_summary_json
from schedulelab.parser import ScheduleParseError
from schedulelab.paths import PATH_ORDERS
from schedulelab.report import render_report, summary_dict
from schedulelab.validate import ScheduleValidationError

PROG = "schedulelab"

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG, description="Critical path analysis for task schedules"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    an = sub.add_parser("analyze", help="Analyze a schedule file")
    an.add_argument("file", type=Path)
    an.add_argument("--out-summary", required=False, type=Path)
    an.add_argument("--path-order", required=False, choices=PATH_ORDERS)
    an.add_argument("--executor", required=False, choices=EXECUTORS)
    an.add_argument(
        "--max-workers",
        required=False,
        type=int,
        help="Thread pool size for the 'threads' executor",
    )
    return p


def _configure_logging() -> None:
    level = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _config_from_args(args: argparse.Namespace) -> AnalysisConfig:
    config = AnalysisConfig.from_env()
    overrides = {
        k: v
        for k, v in (
            ("path_order", args.path_order),
            ("executor", args.executor),
            ("max_workers", args.max_workers),
        )
        if v is not None
    }
    return dataclasses.replace(config, **overrides)


def _fail(message: str) -> int:
    sys.stderr.write(message + "\n")
    logger.error(message)
    return 1


def _io_error_message(path: Path, err: Exception) -> str:
    if isinstance(err, FileNotFoundError):
        return f"{PROG}: {path}: No such file"
    if isinstance(err, PermissionError):
        return f"{PROG}: {path}: Access to file is denied"
    return f"{PROG}: {path}: Encountered an error while opening the file: {err}"


def main(argv: list[str] | None = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)
    _configure_logging()

    if args.cmd == "analyze":
        try:
            config = _config_from_args(args)
        except ValueError as e:
            return _fail(f"Error: {e}")

        logger.debug("reading schedule from %s", args.file)
        try:
            records = read_schedule(args.file)
        except (OSError, UnicodeDecodeError) as e:
            return _fail(_io_error_message(args.file, e))
        except ScheduleParseError as e:
            return _fail(f"Error: {e}")

        try:
            result = analyze_records(records, config)
        except ScheduleValidationError as e:
            return _fail(f"Error: {e}")

        sys.stdout.write(render_report(result))
        if args.out_summary:
            write_summary_json(args.out_summary, summary_dict(result))
        return 0

    raise AssertionError(f"Unhandled command: {args.cmd}")
