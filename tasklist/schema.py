"""
TASKLIST - Task Schema Definition
=================================
Task entity, its enumerations, and the due-date classifier.
"""

import datetime as dt
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .validators import validate_date, validate_priority, validate_time


class Priority(str, Enum):
    """Task priority levels"""
    CRITICAL = "C"
    HIGH = "H"
    NORMAL = "N"
    LOW = "L"


class DueTag(str, Enum):
    """Where a task's date falls relative to today"""
    IN_TIME = "I"    # Still in the future
    TODAY = "T"      # Due today
    OVERDUE = "O"    # Date has passed


class CellStyle(str, Enum):
    """One-character colored table cells (ANSI background)"""
    RED = "\u001B[101m \u001B[0m"
    YELLOW = "\u001B[103m \u001B[0m"
    GREEN = "\u001B[102m \u001B[0m"
    BLUE = "\u001B[104m \u001B[0m"
    BLANK = " "


PRIORITY_STYLES: Dict[Priority, CellStyle] = {
    Priority.CRITICAL: CellStyle.RED,
    Priority.HIGH: CellStyle.YELLOW,
    Priority.NORMAL: CellStyle.GREEN,
    Priority.LOW: CellStyle.BLUE,
}

DUE_STYLES: Dict[DueTag, CellStyle] = {
    DueTag.IN_TIME: CellStyle.GREEN,
    DueTag.TODAY: CellStyle.YELLOW,
    DueTag.OVERDUE: CellStyle.RED,
}


def utc_today() -> dt.date:
    return dt.datetime.now(dt.timezone.utc).date()


class Task(BaseModel):
    """Individual task definition"""
    model_config = ConfigDict(validate_assignment=True)

    priority: Priority
    date: str                       # YYYY-MM-DD
    time: str                       # HH:MM
    subtasks: List[str] = Field(default_factory=list)  # One entry per text line

    @field_validator("priority", mode="before")
    @classmethod
    def _check_priority(cls, v):
        if isinstance(v, str):
            result = validate_priority(v.strip())
            if not result.ok:
                raise ValueError(f"invalid priority: {v!r}")
            return result.value
        return v

    @field_validator("date")
    @classmethod
    def _check_date(cls, v: str) -> str:
        result = validate_date(v.strip())
        if not result.ok:
            raise ValueError(f"invalid date: {v!r}")
        return result.value

    @field_validator("time")
    @classmethod
    def _check_time(cls, v: str) -> str:
        result = validate_time(v.strip())
        if not result.ok:
            raise ValueError(f"invalid time: {v!r}")
        return result.value

    def due_tag(self, today: Optional[dt.date] = None) -> DueTag:
        """Classify the task date against today (UTC unless given)"""
        if today is None:
            today = utc_today()
        days = (dt.date.fromisoformat(self.date) - today).days
        if days == 0:
            return DueTag.TODAY
        if days > 0:
            return DueTag.IN_TIME
        return DueTag.OVERDUE

    @property
    def priority_style(self) -> CellStyle:
        return PRIORITY_STYLES.get(self.priority, CellStyle.BLANK)

    def due_style(self, today: Optional[dt.date] = None) -> CellStyle:
        return DUE_STYLES.get(self.due_tag(today), CellStyle.BLANK)
