from __future__ import annotations

import logging

import networkx as nx

from schedulelab.model import Component, Graph, Task, TaskRecord
from schedulelab.validate import validate_records

logger = logging.getLogger(__name__)


def build_graph(records: list[TaskRecord]) -> Graph:
    validate_records(records)

    tasks: dict[str, Task] = {}
    index: dict[str, int] = {}
    dag = nx.DiGraph()
    for i, rec in enumerate(records):
        task = Task(
            name=rec.name,
            duration=int(rec.duration),
            dependencies=tuple(dict.fromkeys(rec.dependencies)),
        )
        tasks[task.name] = task
        index[task.name] = i
        dag.add_node(task.name, task=task)

    for task in tasks.values():
        for dep in task.dependencies:
            dag.add_edge(dep, task.name)

    logger.debug(
        "built graph: %d tasks, %d edges", dag.number_of_nodes(), dag.number_of_edges()
    )
    return Graph(tasks=tasks, dag=dag, index=index)


def partition_components(graph: Graph, order: list[str]) -> list[Component]:
    """Split the graph into weakly-connected components.

    Components are returned in the input order of their first task. Each one
    carries its own induced subgraph and the matching slice of `order`.
    """

    groups = sorted(
        (
            sorted(nodes, key=graph.index.__getitem__)
            for nodes in nx.weakly_connected_components(graph.dag)
        ),
        key=lambda names: graph.index[names[0]],
    )

    position = {name: i for i, name in enumerate(order)}
    components: list[Component] = []
    for names in groups:
        components.append(
            Component(
                tasks=tuple(graph.tasks[n] for n in names),
                dag=graph.dag.subgraph(names).copy(),
                order=tuple(sorted(names, key=position.__getitem__)),
                index={n: graph.index[n] for n in names},
            )
        )

    logger.debug("partitioned into %d components", len(components))
    return components
