from __future__ import annotations

from typing import Iterable

from schedulelab.model import Component
from schedulelab.types import CriticalPath, Schedule

PATH_ORDERS = ("ranked", "traversal")


def _critical_successors(
    component: Component, schedule: Schedule, name: str
) -> list[str]:
    finish = schedule[name].earliest_finish
    return [
        d
        for d in component.dependents(name)
        if schedule[d].is_critical and schedule[d].earliest_start == finish
    ]


def enumerate_critical_paths(
    component: Component, schedule: Schedule
) -> tuple[CriticalPath, ...]:
    """All zero-slack source-to-sink paths of one component.

    Sources are tried in input order and dependents are explored in input
    order. An edge is only followed when the dependent is critical and starts
    the moment its dependency finishes, so every emitted path sums to the
    component's completion time.
    """

    paths: list[CriticalPath] = []
    for source in component.names:
        if not component.is_source(source) or not schedule[source].is_critical:
            continue
        if component.is_sink(source):
            paths.append((source,))
            continue

        path = [source]
        stack = [iter(_critical_successors(component, schedule, source))]
        while stack:
            nxt = next(stack[-1], None)
            if nxt is None:
                stack.pop()
                path.pop()
                continue
            path.append(nxt)
            if component.is_sink(nxt):
                paths.append(tuple(path))
                path.pop()
                continue
            stack.append(iter(_critical_successors(component, schedule, nxt)))

    return tuple(paths)


def order_paths(
    paths: Iterable[CriticalPath], path_order: str = "ranked"
) -> tuple[CriticalPath, ...]:
    if path_order == "traversal":
        return tuple(paths)
    if path_order == "ranked":
        # Longer paths first; ties fall back to the task names.
        return tuple(sorted(paths, key=lambda p: (-len(p), p)))
    raise ValueError(f"Unsupported path order: {path_order!r}")
