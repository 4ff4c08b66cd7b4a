from __future__ import annotations

"""Repo-root convenience shim for analyzing a schedule file.

This keeps the most common local workflow short:

    python runner.py schedule.tasks

It delegates to the canonical CLI entry point:

    python -m schedulelab analyze schedule.tasks
"""

import sys


def main() -> int:
    """Analyze the schedule file named on the command line.

    Arguments are forwarded to the `analyze` subcommand unchanged.
    """

    from schedulelab.cli import main as cli_main

    return cli_main(["analyze", *sys.argv[1:]])


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
