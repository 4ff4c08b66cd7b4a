from __future__ import annotations

# Public analysis entrypoint.
#
# The pipeline is records -> graph -> components -> per-component schedules ->
# bottleneck critical paths -> merged result. Per-component work goes through
# a ComponentExecutor; the merge is always sequential.

import logging
from typing import Sequence

from schedulelab.config import AnalysisConfig
from schedulelab.cpm import compute_schedule
from schedulelab.executors import executor_for_config
from schedulelab.graph import build_graph, partition_components
from schedulelab.model import Component, TaskRecord
from schedulelab.parser import parse_schedule
from schedulelab.paths import enumerate_critical_paths
from schedulelab.report import assemble_result, bottleneck_ids
from schedulelab.types import AnalysisResult, ComponentAnalysis, CriticalPath, Schedule
from schedulelab.validate import check_acyclic

logger = logging.getLogger(__name__)


def analyze_components(
    records: Sequence[TaskRecord], config: AnalysisConfig | None = None
) -> list[ComponentAnalysis]:
    config = config or AnalysisConfig()
    executor = executor_for_config(config)

    graph = build_graph(list(records))
    order = check_acyclic(graph)
    components = partition_components(graph, order)

    schedules: list[Schedule] = executor.map(compute_schedule, components)
    bottlenecks = bottleneck_ids(schedules)
    logger.debug("bottleneck components: %s", bottlenecks)

    def _paths(i: int) -> tuple[CriticalPath, ...]:
        return enumerate_critical_paths(components[i], schedules[i])

    found = dict(zip(bottlenecks, executor.map(_paths, bottlenecks)))
    return [
        _component_analysis(i, comp, schedules[i], found.get(i, ()))
        for i, comp in enumerate(components)
    ]


def _component_analysis(
    i: int,
    component: Component,
    schedule: Schedule,
    paths: tuple[CriticalPath, ...],
) -> ComponentAnalysis:
    return ComponentAnalysis(
        component_id=i,
        task_names=component.names,
        schedule=schedule,
        critical_paths=paths,
    )


def analyze_records(
    records: Sequence[TaskRecord], config: AnalysisConfig | None = None
) -> AnalysisResult:
    config = config or AnalysisConfig()
    analyses = analyze_components(records, config)
    result = assemble_result(analyses, path_order=config.path_order)
    logger.debug(
        "analysis done: %d tasks, completion %d, %d critical paths",
        result.task_count,
        result.minimum_completion_time,
        result.critical_path_count,
    )
    return result


def analyze_text(text: str, config: AnalysisConfig | None = None) -> AnalysisResult:
    return analyze_records(parse_schedule(text), config)
