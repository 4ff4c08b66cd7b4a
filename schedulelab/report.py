from __future__ import annotations

from itertools import chain
from typing import Any, Sequence

from schedulelab.parallelism import execution_intervals, max_parallelism
from schedulelab.paths import order_paths
from schedulelab.types import AnalysisResult, ComponentAnalysis, CriticalPath, Schedule

MAX_LABEL_LEN = 70
PATH_DELIMITER = "->"


def bottleneck_ids(schedules: Sequence[Schedule]) -> list[int]:
    """Indices of the components whose completion time bounds the schedule."""

    overall = max((s.completion_time for s in schedules), default=0)
    return [i for i, s in enumerate(schedules) if s.completion_time == overall]


def assemble_result(
    analyses: Sequence[ComponentAnalysis], *, path_order: str = "ranked"
) -> AnalysisResult:
    schedules = [a.schedule for a in analyses]
    overall = max((s.completion_time for s in schedules), default=0)
    bottlenecks = set(bottleneck_ids(schedules))

    paths = tuple(
        chain.from_iterable(
            order_paths(a.critical_paths, path_order)
            for i, a in enumerate(analyses)
            if i in bottlenecks
        )
    )
    return AnalysisResult(
        task_count=sum(len(a.task_names) for a in analyses),
        max_parallelism=max_parallelism(execution_intervals(schedules)),
        minimum_completion_time=overall,
        critical_path_count=len(paths),
        critical_paths=paths,
    )


def summary_dict(result: AnalysisResult) -> dict[str, Any]:
    return {
        "task_count": result.task_count,
        "max_parallelism": result.max_parallelism,
        "minimum_completion_time": result.minimum_completion_time,
        "critical_path_count": result.critical_path_count,
        "critical_paths": [list(p) for p in result.critical_paths],
    }


def wrap_path(
    path: CriticalPath,
    *,
    delimiter: str = PATH_DELIMITER,
    max_label_len: int = MAX_LABEL_LEN,
) -> list[str]:
    """Join a path with arrows, breaking lines after a delimiter.

    Every label is budgeted with a trailing delimiter, so a line never
    exceeds `max_label_len + len(delimiter)` characters unless a single label
    is longer than that on its own.
    """

    max_line = max_label_len + len(delimiter)
    lines: list[str] = []
    line = ""
    used = 0
    for i, label in enumerate(path):
        needed = len(label) + len(delimiter)
        if line and used + needed > max_line:
            lines.append(line)
            line = ""
            used = 0
        line += label
        if i != len(path) - 1:
            line += delimiter
        used += needed
    lines.append(line)
    return lines


def render_report(result: AnalysisResult) -> str:
    many = result.critical_path_count > 1
    out = [
        f"task_count: {result.task_count}",
        f"max_parallelism: {result.max_parallelism}",
        f"minimum_completion_time: {result.minimum_completion_time}",
        f"critical_path_count: {result.critical_path_count}",
        f"critical_path{'s' if many else ''}:",
    ]
    for i, path in enumerate(result.critical_paths):
        if many:
            out.append(f"{i + 1})")
        out.extend(wrap_path(path))
        if i != len(result.critical_paths) - 1:
            out.append("")
    return "\n".join(out) + "\n"
