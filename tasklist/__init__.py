"""
TASKLIST - Console Task Manager
===============================

Interactive task list with priorities, due dates and multi-line descriptions.
Tasks live in memory while the program runs and are written to a JSON file
on exit.

Usage:
    from tasklist import TaskManager

    manager = TaskManager("tasklist.json")
    manager.load()
    manager.add()          # prompts on the console
    manager.show_tasks()
    manager.save()
"""

from .schema import (
    Task,
    Priority,
    DueTag,
    CellStyle,
)

from .manager import TaskManager, TaskFileError

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "TaskFileError",
    "Task",
    "Priority",
    "DueTag",
    "CellStyle",
]
