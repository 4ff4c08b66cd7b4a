from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskTiming:
    task_name: str
    duration: int
    earliest_start: int
    earliest_finish: int
    latest_start: int
    latest_finish: int

    @property
    def slack(self) -> int:
        return self.latest_start - self.earliest_start

    @property
    def is_critical(self) -> bool:
        return self.slack == 0


@dataclass(frozen=True)
class Schedule:
    # Keyed by task name, in component topological order.
    timings: dict[str, TaskTiming]
    completion_time: int

    def __getitem__(self, name: str) -> TaskTiming:
        return self.timings[name]

    def slack(self, name: str) -> int:
        return self.timings[name].slack


CriticalPath = tuple[str, ...]


@dataclass(frozen=True)
class ComponentAnalysis:
    component_id: int
    task_names: tuple[str, ...]
    schedule: Schedule
    # Depth-first traversal order; empty for non-bottleneck components.
    critical_paths: tuple[CriticalPath, ...]


@dataclass(frozen=True)
class AnalysisResult:
    task_count: int
    max_parallelism: int
    minimum_completion_time: int
    critical_path_count: int
    critical_paths: tuple[CriticalPath, ...]
