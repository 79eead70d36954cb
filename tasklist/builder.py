"""
TASKLIST - Task Builder
=======================
Collects task fields from the console, one validated field at a time.
"""

from typing import List

from .prompt import get_input_while
from .schema import Task
from .validators import PRIORITIES, validate_date, validate_priority, validate_time


class TaskBuilder:
    """Interactive construction of a Task, or of any one of its fields"""

    def build(self) -> Task:
        """Prompt for every field in order. The subtask list may come back empty."""
        priority = self.input_priority()
        date = self.input_date()
        time = self.input_time()
        subtasks = self.input_subtasks()
        return Task(priority=priority, date=date, time=time, subtasks=subtasks)

    def input_priority(self) -> str:
        return get_input_while(
            f"Input the task priority ({', '.join(PRIORITIES)}):", "", validate_priority
        )

    def input_date(self) -> str:
        return get_input_while(
            "Input the date (yyyy-mm-dd):", "The input date is invalid", validate_date
        )

    def input_time(self) -> str:
        return get_input_while(
            "Input the time (hh:mm):", "The input time is invalid", validate_time
        )

    def input_subtasks(self) -> List[str]:
        """Read lines until a blank one"""
        subtasks = []
        print("Input a new task (enter a blank line to end):")
        while True:
            line = input().strip()
            if not line:
                break
            subtasks.append(line)
        return subtasks
