from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Protocol, Sequence, TypeVar

from schedulelab.config import AnalysisConfig

T = TypeVar("T")
R = TypeVar("R")


class ComponentExecutor(Protocol):
    def map(self, fn: Callable[[T], R], items: Sequence[T]) -> list[R]:
        raise NotImplementedError


@dataclass(frozen=True)
class SerialExecutor:
    def map(self, fn: Callable[[T], R], items: Sequence[T]) -> list[R]:
        return [fn(item) for item in items]


@dataclass(frozen=True)
class ThreadedExecutor:
    """Runs independent components on a thread pool.

    Results come back in submission order, so the merge step sees the same
    sequence as with `SerialExecutor`.
    """

    max_workers: int | None = None

    def map(self, fn: Callable[[T], R], items: Sequence[T]) -> list[R]:
        if len(items) <= 1:
            return [fn(item) for item in items]
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            return list(pool.map(fn, items))


def executor_for_config(config: AnalysisConfig) -> ComponentExecutor:
    if config.executor == "serial":
        return SerialExecutor()
    if config.executor == "threads":
        return ThreadedExecutor(max_workers=config.max_workers)
    raise ValueError(f"Unsupported executor: {config.executor}")
