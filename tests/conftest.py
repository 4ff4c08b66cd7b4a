from __future__ import annotations

import sys
from pathlib import Path

import pytest

from schedulelab.model import TaskRecord

CANONICAL = [
    ("Q", 1, ()),
    ("T", 1, ("Q",)),
    ("J", 1, ("Q",)),
    ("K", 1, ("T",)),
    ("N", 1, ("T", "J")),
    ("P", 1, ("J",)),
    ("H", 1, ("K", "N")),
    ("I", 1, ("N", "P")),
]


@pytest.fixture(scope="session", autouse=True)
def _add_repo_root_to_syspath() -> None:
    """Make local packages importable when running tests from `tests/`.

    Some PyTest invocations end up with `tests/` as the import root. Ensure the
    repo root is on `sys.path` so `import runner` works.
    """

    root = Path(__file__).resolve().parents[1]
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


@pytest.fixture()
def canonical_records() -> list[TaskRecord]:
    return [TaskRecord(name=n, duration=d, dependencies=deps) for n, d, deps in CANONICAL]


@pytest.fixture()
def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]
