from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import networkx as nx


@dataclass(frozen=True)
class TaskRecord:
    """One parsed line of a schedule: `name(duration) after [deps...]`."""

    name: str
    duration: int
    dependencies: tuple[str, ...] = ()


@dataclass(frozen=True)
class Task:
    name: str
    duration: int
    # Distinct names, first-listed order.
    dependencies: tuple[str, ...] = ()


@dataclass(frozen=True)
class Graph:
    tasks: dict[str, Task]
    # dependency -> dependent edges; node insertion order == input order
    dag: nx.DiGraph
    # task name -> position in the input record list
    index: dict[str, int]


@dataclass(frozen=True)
class Component:
    tasks: tuple[Task, ...]
    dag: nx.DiGraph
    # Restriction of the global topological order.
    order: tuple[str, ...]
    index: dict[str, int]

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(t.name for t in self.tasks)

    def task(self, name: str) -> Task:
        return self.dag.nodes[name]["task"]

    def dependents(self, name: str) -> list[str]:
        return sorted(self.dag.successors(name), key=self.index.__getitem__)

    def is_source(self, name: str) -> bool:
        return self.dag.in_degree(name) == 0

    def is_sink(self, name: str) -> bool:
        return self.dag.out_degree(name) == 0


def records_from_tuples(
    rows: Iterable[tuple[str, int, Iterable[str]]],
) -> list[TaskRecord]:
    return [
        TaskRecord(name=str(name), duration=int(duration), dependencies=tuple(deps))
        for name, duration, deps in rows
    ]
