from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from schedulelab.model import TaskRecord
from schedulelab.parser import parse_schedule


def read_schedule(path: Path) -> list[TaskRecord]:
    return parse_schedule(path.read_text(encoding="utf-8"))


def write_summary_json(path: Path, summary: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(summary, indent=2, sort_keys=True, ensure_ascii=False),
        encoding="utf-8",
    )
