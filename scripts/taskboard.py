#!/usr/bin/env python3
"""
Task Board

Terminal task board with tasks persisted to a local storage slot.

Usage:
    taskboard.py                  Launch interactive TUI board
    taskboard.py list [--json]    Print tasks and exit
    taskboard.py add <title>      Add a task and exit
    taskboard.py delete <id>      Delete a task and exit

Environment:
    TASKBOARD_STORAGE_DIR, TASKBOARD_STORAGE_KEY, TASKBOARD_LOG_LEVEL

Requirements:
    pip install textual jsonschema
"""

import argparse
import json
import logging
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from board_config import Settings  # noqa: E402
from logging_setup import setup_logging  # noqa: E402
from task_store import TaskStore  # noqa: E402
from tui.storage_provider import FileStorage, StorageError  # noqa: E402

logger = logging.getLogger(__name__)


def open_store(settings: Settings) -> TaskStore:
    """Build and hydrate a store for the configured slot."""
    store = TaskStore(FileStorage(settings.storage_dir), key=settings.storage_key)
    store.initialize()
    return store


def print_tasks(store: TaskStore) -> int:
    """Print tasks one per line."""
    if not store.tasks:
        print("No tasks.")
        return 0

    for task in store.tasks:
        print(f"#{task.id} {task.title}")
    return 0


def print_tasks_json(store: TaskStore) -> int:
    """Print tasks as JSON."""
    output = {
        "tasks": [t.to_dict() for t in store.tasks],
        "next_id": store.next_id,
    }
    print(json.dumps(output, indent=2))
    return 0


def cmd_add(store: TaskStore, title: str) -> int:
    task = store.add_task(title)
    if task is None:
        print("Task title must not be empty.")
        return 1
    print(f"Added #{task.id} {task.title}")
    return 0


def cmd_delete(store: TaskStore, task_id: int) -> int:
    if store.delete_task(task_id):
        print(f"Deleted #{task_id}")
    else:
        print(f"No task #{task_id}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Task Board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--storage-dir",
        type=Path,
        help="Directory holding the task slot (default: $TASKBOARD_STORAGE_DIR or ~/.taskboard)",
    )
    parser.add_argument(
        "--key",
        help="Storage key of the task slot (default: $TASKBOARD_STORAGE_KEY or 'tasks')",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("tui", help="Launch interactive TUI board (default)")

    list_parser = sub.add_parser("list", help="Print tasks and exit")
    list_parser.add_argument("--json", action="store_true", help="Print as JSON")

    add_parser = sub.add_parser("add", help="Add a task")
    add_parser.add_argument("title", help="Task title")

    delete_parser = sub.add_parser("delete", help="Delete a task by id")
    delete_parser.add_argument("id", type=int, help="Task id")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = Settings.from_env().with_overrides(
        storage_dir=args.storage_dir,
        storage_key=args.key,
        log_level="DEBUG" if args.verbose else None,
    )

    command = args.command or "tui"
    try:
        setup_logging(
            log_file=settings.log_file,
            console=command != "tui",
            console_level=settings.log_level,
        )
    except OSError as e:
        print(f"Error: cannot open log file {settings.log_file}: {e}")
        return 1
    logger.debug("Using slot %r in %s", settings.storage_key, settings.storage_dir)

    if command == "tui":
        from tui.app import run

        run(settings.storage_dir, settings.storage_key)
        return 0

    store = open_store(settings)

    if command == "list":
        return print_tasks_json(store) if args.json else print_tasks(store)

    try:
        if command == "add":
            return cmd_add(store, args.title)
        return cmd_delete(store, args.id)
    except StorageError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
