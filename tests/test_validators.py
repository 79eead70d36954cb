import pytest

from tasklist.validators import (
    validate_date,
    validate_field,
    validate_priority,
    validate_task_number,
    validate_time,
)


@pytest.mark.parametrize("text,expected", [
    ("c", "C"), ("C", "C"), ("h", "H"), ("N", "N"), ("l", "L"),
])
def test_priority_accepts_codes_any_case(text, expected):
    result = validate_priority(text)
    assert result.ok is True
    assert result.value == expected


@pytest.mark.parametrize("text", ["", "X", "CH", "critical", "1", " "])
def test_priority_rejects_everything_else(text):
    assert validate_priority(text).ok is False


@pytest.mark.parametrize("text,expected", [
    ("2024-01-05", "2024-01-05"),
    ("2024-1-5", "2024-01-05"),
    ("2024-2-29", "2024-02-29"),
    ("1999-12-31", "1999-12-31"),
])
def test_date_canonical_form(text, expected):
    result = validate_date(text)
    assert result.ok is True
    assert result.value == expected


@pytest.mark.parametrize("text", [
    "2023-02-29",   # not a leap year
    "2024-02-30",
    "2024-13-01",
    "2024-00-10",
    "2024-04-31",
    "24-01-05",     # year needs 4 digits
    "2024/01/05",
    "2024-01",
    "abcd-01-05",
    "2024-01-05x",
    "",
])
def test_date_rejects_malformed_or_impossible(text):
    assert validate_date(text).ok is False


@pytest.mark.parametrize("text,expected", [
    ("0:0", "00:00"),
    ("9:5", "09:05"),
    ("23:59", "23:59"),
    ("12:30", "12:30"),
])
def test_time_canonical_form(text, expected):
    result = validate_time(text)
    assert result.ok is True
    assert result.value == expected


@pytest.mark.parametrize("text", ["24:00", "12:60", "-1:10", "ab:cd", "1230", "12:30:00", ""])
def test_time_rejects_out_of_range_or_malformed(text):
    assert validate_time(text).ok is False


def test_time_covers_every_valid_minute_of_the_day():
    for h in range(24):
        for m in range(60):
            assert validate_time(f"{h}:{m}").value == f"{h:02d}:{m:02d}"


def test_task_number_within_bounds():
    assert validate_task_number("1", size=3).value == 1
    assert validate_task_number("3", size=3).value == 3


@pytest.mark.parametrize("text", ["0", "4", "-1", "one", "", "1.5", "1_0"])
def test_task_number_rejected(text):
    assert validate_task_number(text, size=3).ok is False


def test_task_number_rejected_for_empty_list():
    assert validate_task_number("1", size=0).ok is False


@pytest.mark.parametrize("text,expected", [
    ("priority", "priority"), ("DATE", "date"), ("Time", "time"), ("task", "task"),
])
def test_field_names(text, expected):
    assert validate_field(text).value == expected


@pytest.mark.parametrize("text", ["subtasks", "prio", ""])
def test_field_rejects_unknown(text):
    assert validate_field(text).ok is False


@pytest.mark.parametrize("text", [
    "2024-99999999999999999999-01",
    "2024-01-99999999999999999999",
    "2024-" + "1" * 5000 + "-01",
])
def test_date_rejects_oversized_parts(text):
    assert validate_date(text).ok is False


def test_time_rejects_oversized_digit_runs():
    assert validate_time("1" * 5000 + ":00").ok is False
    assert validate_time("00:" + "1" * 5000).ok is False


def test_task_number_rejects_oversized_digit_run():
    assert validate_task_number("1" * 5000, size=3).ok is False
