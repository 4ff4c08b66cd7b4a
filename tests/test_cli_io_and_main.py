from __future__ import annotations

import json
import runpy
import subprocess
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

SCHEDULE = """\
A(5)
C(9) after [A]
B(1)
D(7) after [B]
"""


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_analyze_prints_report_and_writes_summary(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    from schedulelab.cli import main

    schedule = _write(tmp_path / "s.tasks", SCHEDULE)
    out_summary = tmp_path / "out" / "summary.json"

    rc = main(["analyze", str(schedule), "--out-summary", str(out_summary)])
    assert rc == 0

    out = capsys.readouterr().out
    assert "task_count: 4" in out
    assert "minimum_completion_time: 14" in out
    assert out.rstrip().endswith("critical_path:\nA->C")

    summary = json.loads(out_summary.read_text(encoding="utf-8"))
    assert summary["critical_paths"] == [["A", "C"]]
    assert summary["max_parallelism"] == 2


def test_cli_path_order_flag_overrides_env(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    from schedulelab.cli import main

    monkeypatch.setenv("SCHEDULELAB_PATH_ORDER", "ranked")
    monkeypatch.setenv("SCHEDULELAB_EXECUTOR", "threads")
    schedule = _write(
        tmp_path / "s.tasks", "Q(1) T(1) after [Q] J(1) after [Q] K(1) after [T, J]"
    )

    rc = main(["analyze", str(schedule), "--path-order", "traversal"])
    assert rc == 0
    out = capsys.readouterr().out
    assert out.index("Q->T->K") < out.index("Q->J->K")


def test_cli_missing_file_is_reported(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    from schedulelab.cli import main

    missing = tmp_path / "nope.tasks"
    assert main(["analyze", str(missing)]) == 1
    assert f"schedulelab: {missing}: No such file" in capsys.readouterr().err


def test_cli_directory_is_an_open_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    from schedulelab.cli import main

    assert main(["analyze", str(tmp_path)]) == 1
    err = capsys.readouterr().err
    assert f"schedulelab: {tmp_path}:" in err


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("A(1) after [B]\nB(1) after [A]\n", "cycle"),
        ("A(1) after [Z]\n", "unknown task 'Z'"),
        ("A(1)\nA(2)\n", "more than once"),
        ("A(1)\nB[1]\n", "line 2, column 2"),
    ],
)
def test_cli_processing_errors_exit_1(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], text: str, message: str
) -> None:
    from schedulelab.cli import main

    schedule = _write(tmp_path / "bad.tasks", text)
    assert main(["analyze", str(schedule)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: ")
    assert message in err


def test_cli_bad_env_config_exits_1(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    from schedulelab.cli import main

    monkeypatch.setenv("SCHEDULELAB_PATH_ORDER", "random")
    schedule = _write(tmp_path / "s.tasks", SCHEDULE)
    assert main(["analyze", str(schedule)]) == 1
    assert "path_order" in capsys.readouterr().err


def test_cli_unhandled_command_raises_assertion(monkeypatch: pytest.MonkeyPatch) -> None:
    import schedulelab.cli

    class _DummyParser:
        def parse_args(self, _argv: list[str] | None) -> object:
            return SimpleNamespace(cmd="nope")

    monkeypatch.setattr(schedulelab.cli, "_build_parser", lambda: _DummyParser())
    with pytest.raises(AssertionError, match="Unhandled command"):
        schedulelab.cli.main(["anything"])


def test_python_m_schedulelab_executes_main(repo_root: Path) -> None:
    proc = subprocess.run(
        [
            sys.executable,
            "-m",
            "schedulelab",
            "analyze",
            str(repo_root / "examples" / "example2.tasks"),
        ],
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=False,
    )
    assert proc.returncode == 0, proc.stderr
    assert "max_parallelism: 4" in proc.stdout
    assert "minimum_completion_time: 61" in proc.stdout
    assert "方言->锈" in proc.stdout


def test___main___module_runs_inprocess_and_exits_zero(repo_root: Path) -> None:
    old_argv = sys.argv[:]
    try:
        sys.argv = [
            "python -m schedulelab",
            "analyze",
            str(repo_root / "examples" / "example.tasks"),
        ]
        with pytest.raises(SystemExit) as exc:
            runpy.run_module("schedulelab.__main__", run_name="__main__")
        assert exc.value.code == 0
    finally:
        sys.argv = old_argv


def test_io_read_and_write(tmp_path: Path) -> None:
    from schedulelab.io import read_schedule, write_summary_json

    records = read_schedule(_write(tmp_path / "s.tasks", SCHEDULE))
    assert [r.name for r in records] == ["A", "C", "B", "D"]

    out = tmp_path / "deep" / "summary.json"
    write_summary_json(out, {"path": ["方言", "锈"]})
    assert json.loads(out.read_text(encoding="utf-8")) == {"path": ["方言", "锈"]}
