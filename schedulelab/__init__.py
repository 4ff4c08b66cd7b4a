"""Headless critical path analysis for static task schedules.

Typical use:

    from schedulelab import analyze_text

    result = analyze_text("A(2) B(3) after [A]")
    result.minimum_completion_time  # 5

Run from source:

    python -m schedulelab analyze path/to/schedule.tasks
"""

from __future__ import annotations

from schedulelab.analyze import analyze_records, analyze_text
from schedulelab.config import AnalysisConfig
from schedulelab.model import TaskRecord
from schedulelab.types import AnalysisResult

__all__ = [
    "AnalysisConfig",
    "AnalysisResult",
    "TaskRecord",
    "__version__",
    "analyze_records",
    "analyze_text",
]

__version__ = "0.1.0"
