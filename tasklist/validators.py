"""
TASKLIST - Input Validators
===========================
Turn raw console text into canonical field values.

Every validator returns a Validation: either accepted with the canonical
value, or rejected. The prompt loop keeps asking until one is accepted.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

PRIORITIES = ["C", "H", "N", "L"]  # critical, high, normal, low

FIELD_PRIORITY = "priority"
FIELD_DATE = "date"
FIELD_TIME = "time"
FIELD_TASK = "task"

FIELDS = [FIELD_PRIORITY, FIELD_DATE, FIELD_TIME, FIELD_TASK]

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]+-[0-9]+")
_TIME_RE = re.compile(r"[0-9]+:[0-9]+")
_NUMBER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Validation:
    """Outcome of a validator"""
    ok: bool
    value: Optional[Any] = None

    @classmethod
    def accept(cls, value: Any) -> "Validation":
        return cls(ok=True, value=value)

    @classmethod
    def reject(cls) -> "Validation":
        return cls(ok=False)


def validate_priority(text: str) -> Validation:
    code = text.upper()
    if code not in PRIORITIES:
        return Validation.reject()
    return Validation.accept(code)


def validate_date(text: str) -> Validation:
    """Accept y-m-d with a 4 digit year, return it as YYYY-MM-DD"""
    if not _DATE_RE.fullmatch(text):
        return Validation.reject()
    try:
        y, m, d = (int(part) for part in text.split("-"))
        canonical = date(y, m, d).isoformat()
    except (ValueError, OverflowError):
        return Validation.reject()
    return Validation.accept(canonical)


def validate_time(text: str) -> Validation:
    """Accept h:m on a 24 hour clock, return it as HH:MM"""
    if not _TIME_RE.fullmatch(text):
        return Validation.reject()
    try:
        h, m = (int(part) for part in text.split(":"))
    except ValueError:  # too many digits to convert
        return Validation.reject()
    if not 0 <= h <= 23 or not 0 <= m <= 59:
        return Validation.reject()
    return Validation.accept(f"{h:02d}:{m:02d}")


def validate_task_number(text: str, size: int) -> Validation:
    """Accept a 1-based index into a list of `size` tasks"""
    if not _NUMBER_RE.fullmatch(text):
        return Validation.reject()
    try:
        number = int(text)
    except ValueError:  # too many digits to convert
        return Validation.reject()
    if not 1 <= number <= size:
        return Validation.reject()
    return Validation.accept(number)


def validate_field(text: str) -> Validation:
    name = text.lower()
    if name not in FIELDS:
        return Validation.reject()
    return Validation.accept(name)
