from __future__ import annotations

# Critical path method: forward pass for earliest times, backward pass for
# latest times, slack as the difference of the two start times.

from schedulelab.model import Component
from schedulelab.types import Schedule, TaskTiming


def compute_schedule(component: Component) -> Schedule:
    earliest_finish: dict[str, int] = {}
    earliest_start: dict[str, int] = {}
    for name in component.order:
        task = component.task(name)
        es = max((earliest_finish[d] for d in task.dependencies), default=0)
        earliest_start[name] = es
        earliest_finish[name] = es + task.duration

    completion = max(earliest_finish.values(), default=0)

    latest_start: dict[str, int] = {}
    latest_finish: dict[str, int] = {}
    for name in reversed(component.order):
        task = component.task(name)
        lf = min(
            (latest_start[s] for s in component.dag.successors(name)),
            default=completion,
        )
        latest_finish[name] = lf
        latest_start[name] = lf - task.duration

    timings: dict[str, TaskTiming] = {}
    for name in component.order:
        timing = TaskTiming(
            task_name=name,
            duration=component.task(name).duration,
            earliest_start=earliest_start[name],
            earliest_finish=earliest_finish[name],
            latest_start=latest_start[name],
            latest_finish=latest_finish[name],
        )
        if timing.slack < 0:
            raise AssertionError(f"negative slack for task '{name}'")
        timings[name] = timing

    return Schedule(timings=timings, completion_time=completion)
