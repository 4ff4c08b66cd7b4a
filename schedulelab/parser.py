"""Text front end for schedule files.

A schedule is a sequence of records separated by any whitespace:

    Q(1)
    T(1) after [Q]
    N(1) after [T, J]

Task names use letters, digits, `.`, `-` and `_`. Durations are unsigned
integers.
"""

from __future__ import annotations

import logging
import re

from schedulelab.model import TaskRecord

logger = logging.getLogger(__name__)

MAX_NAME_LEN = 70
MAX_DURATION = 65535
AFTER_KEYWORD = "after"

_NAME = re.compile(r"[\w.\-]+")
_DIGITS = re.compile(r"[0-9]+")
_SPACE = re.compile(r"\s*")


class ScheduleParseError(ValueError):
    def __init__(self, line: int, column: int, reason: str) -> None:
        super().__init__(f"line {line}, column {column}: {reason}")
        self.line = line
        self.column = column
        self.reason = reason


class _Scanner:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def error(self, reason: str, pos: int | None = None) -> ScheduleParseError:
        at = self.pos if pos is None else pos
        line = self.text.count("\n", 0, at) + 1
        column = at - (self.text.rfind("\n", 0, at) + 1) + 1
        return ScheduleParseError(line, column, reason)

    def skip_space(self) -> None:
        self.pos = _SPACE.match(self.text, self.pos).end()

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def expect(self, ch: str) -> None:
        self.skip_space()
        if not self.text.startswith(ch, self.pos):
            raise self.error(f"expected '{ch}'")
        self.pos += len(ch)

    def name(self) -> str:
        self.skip_space()
        m = _NAME.match(self.text, self.pos)
        if m is None:
            raise self.error("expected a task name")
        if len(m.group()) > MAX_NAME_LEN:
            raise self.error(
                f"task names cannot have more than {MAX_NAME_LEN} characters"
            )
        self.pos = m.end()
        return m.group()

    def duration(self) -> int:
        self.skip_space()
        m = _DIGITS.match(self.text, self.pos)
        if m is None:
            raise self.error("expected a non-negative integer duration")
        value = int(m.group())
        if value > MAX_DURATION:
            raise self.error(f"duration cannot exceed {MAX_DURATION}")
        self.pos = m.end()
        return value

    def at_after_clause(self) -> bool:
        # `after` is only a keyword when an opening bracket follows it, so a
        # task may itself be called "after".
        probe = _SPACE.match(self.text, self.pos).end()
        m = _NAME.match(self.text, probe)
        if m is None or m.group() != AFTER_KEYWORD:
            return False
        rest = _SPACE.match(self.text, m.end()).end()
        if not self.text.startswith("[", rest):
            return False
        self.pos = m.end()
        return True

    def dependency_list(self) -> tuple[str, ...]:
        self.expect("[")
        names = [self.name()]
        while True:
            self.skip_space()
            if self.text.startswith(",", self.pos):
                self.pos += 1
                names.append(self.name())
                continue
            self.expect("]")
            return tuple(names)


def parse_schedule(text: str) -> list[TaskRecord]:
    scanner = _Scanner(text)
    records: list[TaskRecord] = []
    while True:
        scanner.skip_space()
        if scanner.at_end():
            break
        name = scanner.name()
        scanner.expect("(")
        duration = scanner.duration()
        scanner.expect(")")
        deps: tuple[str, ...] = ()
        if scanner.at_after_clause():
            deps = scanner.dependency_list()
        records.append(TaskRecord(name=name, duration=duration, dependencies=deps))

    logger.debug("parsed %d records", len(records))
    return records
