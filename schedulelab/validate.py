from __future__ import annotations

import logging

import networkx as nx

from schedulelab.model import Graph, TaskRecord

logger = logging.getLogger(__name__)


class ScheduleValidationError(ValueError):
    pass


class DuplicateTaskError(ScheduleValidationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"task '{name}' is defined more than once")
        self.name = name


class UnknownDependencyError(ScheduleValidationError):
    def __init__(self, task: str, missing_name: str) -> None:
        super().__init__(
            f"task '{task}' depends on unknown task '{missing_name}'"
        )
        self.task = task
        self.missing_name = missing_name


class CycleDetectedError(ScheduleValidationError):
    def __init__(self, task: str, via_dependency: str) -> None:
        super().__init__(
            (
                f"There's a cycle in the schedule: task '{task}' "
                f"depends on '{via_dependency}'"
            )
        )
        self.task = task
        self.via_dependency = via_dependency


class NegativeDurationError(ScheduleValidationError):
    def __init__(self, task: str, duration: int) -> None:
        super().__init__(f"task '{task}' duration must be >= 0 (got {duration})")
        self.task = task
        self.duration = duration


def validate_records(records: list[TaskRecord]) -> None:
    """Reject duplicate names, negative durations and dangling references.

    Names and durations are checked first, then references, each pass in
    input order.
    """

    seen: set[str] = set()
    for rec in records:
        if rec.name in seen:
            raise DuplicateTaskError(rec.name)
        if rec.duration < 0:
            raise NegativeDurationError(rec.name, rec.duration)
        seen.add(rec.name)

    for rec in records:
        for dep in rec.dependencies:
            if dep not in seen:
                raise UnknownDependencyError(rec.name, dep)


def check_acyclic(graph: Graph) -> list[str]:
    """Depth-first cycle check followed by an input-ordered topological sort.

    The walk starts from each unvisited task in input order and follows
    dependencies in the order they were listed. The first dependency that
    leads back onto the current path is reported.
    """

    visited: set[str] = set()
    for root in graph.tasks:
        if root in visited:
            continue
        visited.add(root)
        on_path = {root}
        stack = [(root, iter(graph.tasks[root].dependencies))]
        while stack:
            name, deps = stack[-1]
            dep = next(deps, None)
            if dep is None:
                stack.pop()
                on_path.discard(name)
                continue
            if dep in on_path:
                logger.debug("cycle closed by %s -> %s", name, dep)
                raise CycleDetectedError(name, dep)
            if dep not in visited:
                visited.add(dep)
                on_path.add(dep)
                stack.append((dep, iter(graph.tasks[dep].dependencies)))

    # Kahn's algorithm; among ready tasks the earliest in the input goes first.
    return list(
        nx.lexicographical_topological_sort(graph.dag, key=graph.index.__getitem__)
    )
