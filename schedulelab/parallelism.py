from __future__ import annotations

# Peak concurrency over pooled [earliest_start, earliest_finish) intervals.

from typing import Iterable

import numpy as np

from schedulelab.types import Schedule


def execution_intervals(schedules: Iterable[Schedule]) -> list[tuple[int, int]]:
    return [
        (t.earliest_start, t.earliest_finish)
        for s in schedules
        for t in s.timings.values()
    ]


def max_parallelism(intervals: Iterable[tuple[int, int]]) -> int:
    """Sweep start/end events and return the highest running total.

    Intervals are half-open, so a task ending at X does not overlap one
    starting at X: at equal instants the -1 event sorts before the +1 event.
    Zero-width intervals are dropped.
    """

    arr = np.asarray([iv for iv in intervals if iv[1] > iv[0]], dtype=np.int64)
    if arr.size == 0:
        return 0

    times = np.concatenate([arr[:, 0], arr[:, 1]])
    deltas = np.concatenate(
        [np.ones(len(arr), dtype=np.int64), -np.ones(len(arr), dtype=np.int64)]
    )
    # Last key is primary: time, then delta (-1 before +1).
    order = np.lexsort((deltas, times))
    running = np.cumsum(deltas[order])
    return int(running.max())
