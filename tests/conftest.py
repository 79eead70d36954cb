# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest

from tasklist.manager import TaskManager
from tasklist.schema import Task


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "tasklist.json"


@pytest.fixture()
def feed(monkeypatch) -> Callable[[Iterable[str]], None]:
    """
    Script the console: each call to input() returns the next line.

    Running out of lines raises EOFError, like a closed stdin.
    """
    def _feed(lines: Iterable[str]) -> None:
        it = iter(list(lines))

        def fake_input(prompt: str = "") -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed


@pytest.fixture()
def manager(tasks_file: Path) -> TaskManager:
    """Manager with two tasks already in memory (nothing on disk)."""
    return TaskManager(
        tasks_file=tasks_file,
        tasks=[
            Task(priority="C", date="2024-05-01", time="09:00", subtasks=["Write report"]),
            Task(priority="L", date="2024-06-15", time="18:30", subtasks=["Buy milk", "Buy bread"]),
        ],
    )
