import os
from pathlib import Path

DEFAULT_TASKS_FILE = "tasklist.json"


def default_tasks_path() -> Path:
    """
    Default task file:
      ./tasklist.json

    Override with TASKLIST_FILE env var or --file CLI option.
    """
    env = os.getenv("TASKLIST_FILE")
    if env:
        return Path(env).expanduser().resolve()

    return Path(DEFAULT_TASKS_FILE).resolve()
