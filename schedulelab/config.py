from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from schedulelab.paths import PATH_ORDERS

EXECUTORS = ("serial", "threads")

ENV_PATH_ORDER = "SCHEDULELAB_PATH_ORDER"
ENV_EXECUTOR = "SCHEDULELAB_EXECUTOR"
ENV_MAX_WORKERS = "SCHEDULELAB_MAX_WORKERS"
ENV_LOG_LEVEL = "SCHEDULELAB_LOG"


@dataclass(frozen=True)
class AnalysisConfig:
    path_order: str = "ranked"
    executor: str = "serial"
    max_workers: int | None = None

    def __post_init__(self) -> None:
        if self.path_order not in PATH_ORDERS:
            raise ValueError(
                f"path_order must be one of {PATH_ORDERS} (got {self.path_order!r})"
            )
        if self.executor not in EXECUTORS:
            raise ValueError(
                f"executor must be one of {EXECUTORS} (got {self.executor!r})"
            )
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1 (got {self.max_workers})")

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "AnalysisConfig":
        env = os.environ if environ is None else environ
        workers = env.get(ENV_MAX_WORKERS)
        return AnalysisConfig(
            path_order=env.get(ENV_PATH_ORDER, "ranked"),
            executor=env.get(ENV_EXECUTOR, "serial"),
            max_workers=int(workers) if workers else None,
        )
