"""
Task Store for the Task Board

Single source of truth for the task collection. All mutations go through here.
Every mutation is mirrored in full to a key-value storage slot, and subscribers
are notified afterwards so views can re-render.

Persisted layout (one key, default "tasks"):
    [{"id": 1, "title": "Buy milk", "description": ""}, ...]
"""

from __future__ import annotations

import json
import logging
from typing import Callable

from jsonschema import ValidationError, validate

from tui.providers import KeyValueStorage, Task, TaskListener

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "tasks"

TASKS_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "array",
    "items": {
        "type": "object",
        "required": ["id", "title"],
        "properties": {
            "id": {"type": "integer"},
            "title": {"type": "string"},
            "description": {"type": "string"},
        },
    },
}


def validate_collection(data: object) -> tuple[bool, str]:
    """Validate a decoded collection against TASKS_SCHEMA. Returns (valid, error_message)."""
    try:
        validate(instance=data, schema=TASKS_SCHEMA)
    except ValidationError as e:
        path = " -> ".join(str(p) for p in e.absolute_path) if e.absolute_path else "root"
        return False, f"Validation error at '{path}': {e.message}"

    ids = [item["id"] for item in data]
    if len(ids) != len(set(ids)):
        return False, "Duplicate task ids"
    return True, ""


def deserialize_tasks(raw: str | None) -> list[Task]:
    """Decode a persisted collection. Absent or malformed data yields []."""
    if raw is None:
        return []

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Ignoring unreadable task data: %s", e)
        return []

    valid, msg = validate_collection(data)
    if not valid:
        logger.warning("Ignoring invalid task data: %s", msg)
        return []

    return [
        Task(id=int(item["id"]), title=item["title"], description=item.get("description", ""))
        for item in data
    ]


def serialize_tasks(tasks: list[Task] | tuple[Task, ...]) -> str:
    """Encode the full collection in the persisted layout."""
    return json.dumps([t.to_dict() for t in tasks])


def next_id_for(tasks: list[Task] | tuple[Task, ...]) -> int:
    """Counter seed: one past the largest id, never below 1."""
    return max([0, *(t.id for t in tasks)]) + 1


class TaskStore:
    """Ordered task collection mirrored to a storage slot."""

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY):
        self._storage = storage
        self._key = key
        self._tasks: list[Task] = []
        self._next_id = 1
        self._draft = ""
        self._initialized = False
        self._listeners: list[TaskListener] = []

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def draft(self) -> str:
        """Pending input text, cleared by a successful add."""
        return self._draft

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """Hydrate from storage. Only the first call has any effect."""
        if self._initialized:
            return

        self._tasks = deserialize_tasks(self._storage.get_item(self._key))
        self._next_id = next_id_for(self._tasks)
        self._initialized = True
        logger.info("Loaded %d task(s), next id %d", len(self._tasks), self._next_id)
        self._notify()

    def set_draft(self, text: str) -> None:
        self._draft = text

    def add_task(self, title: str) -> Task | None:
        """Append a new task and persist. Empty or blank titles are rejected."""
        if not title.strip():
            logger.debug("Rejected empty title")
            return None

        logger.debug("Before: %s", self._tasks)
        logger.debug("NewTask: %r", title)

        task = Task(id=self._next_id, title=title, description="")
        self._tasks.append(task)
        self._next_id += 1
        self._draft = ""

        logger.debug("After: %s", self._tasks)
        self._commit()
        return task

    def delete_task(self, task_id: int) -> bool:
        """Remove the task with task_id and persist. Returns whether one was removed."""
        remaining = [t for t in self._tasks if t.id != task_id]
        removed = len(remaining) != len(self._tasks)
        if not removed:
            logger.debug("No task with id %d", task_id)

        self._tasks = remaining
        self._commit()
        return removed

    def subscribe(self, listener: TaskListener) -> Callable[[], None]:
        """Call listener after every mutation. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self) -> None:
        # Listeners run even when the write fails.
        try:
            self._storage.set_item(self._key, serialize_tasks(self._tasks))
        finally:
            self._notify()

    def _notify(self) -> None:
        snapshot = self.tasks
        for listener in list(self._listeners):
            listener(snapshot)
