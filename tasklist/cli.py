"""
TASKLIST - CLI Interface
========================
Interactive console loop over a single task file.

Usage:
    tasklist
    tasklist --file ~/notes/tasks.json
    tasklist --log-level INFO
    python -m tasklist.cli --file work.json

Actions at the prompt: add, print, edit, delete, end
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import default_tasks_path
from .manager import TaskFileError, TaskManager

logger = logging.getLogger("tasklist")

ADD = "add"
PRINT = "print"
EDIT = "edit"
DELETE = "delete"
END = "end"

ACTIONS = [ADD, PRINT, EDIT, DELETE, END]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasklist",
        description="Tasklist - interactive console task manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tasklist                              Use ./tasklist.json (or $TASKLIST_FILE)
  tasklist --file work.json             Use a specific task file
  tasklist --log-level DEBUG            Log task changes to stderr
        """
    )
    parser.add_argument(
        "--file",
        help="Path to the task file (default: ./tasklist.json or TASKLIST_FILE env var)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )
    return parser


def run(manager: TaskManager) -> int:
    """Command loop. Returns the exit status once the user ends the session."""
    while True:
        print(f"Input an action ({', '.join(ACTIONS)}):")
        action = input().strip().lower()

        if action == ADD:
            manager.add()
        elif action == PRINT:
            manager.show_tasks()
        elif action == EDIT:
            manager.edit()
        elif action == DELETE:
            manager.delete()
        elif action == END:
            manager.save()
            print("Tasklist exiting!")
            return 0
        else:
            print("The input action is invalid")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    tasks_file = Path(args.file).expanduser().resolve() if args.file else default_tasks_path()
    manager = TaskManager(tasks_file=tasks_file)

    try:
        manager.load()
    except TaskFileError as e:
        print(f"❌ Cannot load task file: {e}")
        return 1

    try:
        return run(manager)
    except (EOFError, KeyboardInterrupt):
        logger.warning(f"Input closed, {len(manager.tasks)} task(s) not saved")
        return 1


if __name__ == "__main__":
    sys.exit(main())
