"""
TASKLIST - Console Prompt Loop
==============================
Ask for a line of input until a validator accepts it.
"""

from typing import Any, Callable

from .validators import Validation


def get_input_while(
    request: str,
    error_message: str,
    validator: Callable[[str], Validation]
) -> Any:
    """
    Print `request` and read lines until `validator` accepts one.

    Rejected input prints `error_message`, or nothing when it is empty.
    There is no retry limit; EOFError / KeyboardInterrupt propagate.
    """
    while True:
        print(request)
        result = validator(input().strip())
        if result.ok:
            return result.value
        if error_message:
            print(error_message)
