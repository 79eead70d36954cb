"""
TASKLIST - Task Manager
=======================
Owns the ordered task list: add, print, edit, delete.
The whole list is read from one JSON file at startup and written back on exit.
"""

import datetime as dt
import json
import logging
from functools import partial
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .builder import TaskBuilder
from .prompt import get_input_while
from .schema import Task
from .validators import (
    FIELD_DATE, FIELD_PRIORITY, FIELD_TASK, FIELD_TIME, FIELDS,
    validate_field, validate_task_number
)

logger = logging.getLogger("tasklist")

TEXT_SIZE = 44
BORDER_LINE = "+----+------------+-------+---+---+" + "-" * TEXT_SIZE + "+"
CAPTION_LINE = "| N  |    Date    | Time  | P | D |" + "Task".center(TEXT_SIZE - 2).ljust(TEXT_SIZE) + "|"
FIRST_LINE = "| {index:<2d} | {date} | {time} | {priority} | {due} |{text:<" + str(TEXT_SIZE) + "}|"
TEXT_LINE = "|    |            |       |   |   |{text:<" + str(TEXT_SIZE) + "}|"


class TaskFileError(Exception):
    """The task file exists but cannot be read as a task list"""


def chunk_text(text: str, size: int = TEXT_SIZE) -> List[str]:
    """Split text into fixed-size pieces (not word aware)"""
    return [text[i:i + size] for i in range(0, len(text), size)]


class TaskManager:
    """
    Interactive task list

    Storage: a JSON array of tasks at `tasks_file`, written only by save().
    """

    def __init__(self, tasks_file: Path, tasks: Optional[List[Task]] = None):
        self.tasks_file = Path(tasks_file)
        self.tasks: List[Task] = tasks if tasks is not None else []
        self.builder = TaskBuilder()

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def load(self) -> List[Task]:
        """Replace the in-memory list with the file contents (empty if no file)"""
        if not self.tasks_file.exists():
            logger.info(f"No task file at {self.tasks_file}, starting empty")
            self.tasks = []
            return self.tasks

        try:
            with open(self.tasks_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise TaskFileError(f"{self.tasks_file}: expected a JSON array of tasks")
            self.tasks = [Task.model_validate(item) for item in data]
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            raise TaskFileError(f"{self.tasks_file}: {e}") from e

        logger.info(f"📂 Loaded {len(self.tasks)} task(s) from {self.tasks_file}")
        return self.tasks

    def save(self) -> None:
        """Overwrite the task file with the whole list"""
        self.tasks_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.tasks_file, "w", encoding="utf-8") as f:
            json.dump([t.model_dump(mode="json") for t in self.tasks], f, indent=2)

        logger.info(f"✅ Saved {len(self.tasks)} task(s) to {self.tasks_file}")

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add(self) -> None:
        task = self.builder.build()
        if not task.subtasks:
            print("The task is blank")
            return
        self.tasks.append(task)
        logger.debug(f"Added task #{len(self.tasks)}")

    def edit(self) -> None:
        if not self.show_tasks():
            return
        number = self._input_task_number()
        task = self.tasks[number - 1]
        field = get_input_while(
            f"Input a field to edit ({', '.join(FIELDS)}):", "Invalid field", validate_field
        )

        if field == FIELD_PRIORITY:
            task.priority = self.builder.input_priority()
        elif field == FIELD_DATE:
            task.date = self.builder.input_date()
        elif field == FIELD_TIME:
            task.time = self.builder.input_time()
        elif field == FIELD_TASK:
            subtasks = self.builder.input_subtasks()
            if not subtasks:
                print("The task is blank")
                return
            task.subtasks = subtasks

        print("The task is changed")
        logger.debug(f"Changed {field} of task #{number}")

    def delete(self) -> None:
        if not self.show_tasks():
            return
        number = self._input_task_number()
        del self.tasks[number - 1]
        print("The task is deleted")
        logger.debug(f"Deleted task #{number}")

    # ========================================
    # HELPER METHODS
    # ========================================

    def _input_task_number(self) -> int:
        return get_input_while(
            f"Input the task number (1-{len(self.tasks)}):",
            "Invalid task number",
            partial(validate_task_number, size=len(self.tasks))
        )

    # ========================================
    # REPORTING
    # ========================================

    def show_tasks(self, today: Optional[dt.date] = None) -> bool:
        """Print the task table. Returns False when there is nothing to show."""
        if not self.tasks:
            print("No tasks have been input")
            return False
        print("\n".join(self.render_table(today)))
        return True

    def render_table(self, today: Optional[dt.date] = None) -> List[str]:
        lines = [BORDER_LINE, CAPTION_LINE, BORDER_LINE]

        for index, task in enumerate(self.tasks, start=1):
            priority = task.priority_style.value
            due = task.due_style(today).value
            first = True
            for subtask in task.subtasks:
                for part in chunk_text(subtask):
                    if first:
                        lines.append(FIRST_LINE.format(
                            index=index, date=task.date, time=task.time,
                            priority=priority, due=due, text=part
                        ))
                        first = False
                    else:
                        lines.append(TEXT_LINE.format(text=part))
            lines.append(BORDER_LINE)

        return lines
