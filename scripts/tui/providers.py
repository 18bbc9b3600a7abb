"""
Data providers for the task board.

Protocols define the interface; implementations can be swapped
for testing or alternative storage backends.
"""

from dataclasses import dataclass
from typing import Callable, Protocol


@dataclass(frozen=True)
class Task:
    """Immutable task record."""

    id: int
    title: str
    description: str = ""

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "description": self.description}


TaskListener = Callable[[tuple[Task, ...]], None]


class KeyValueStorage(Protocol):
    """Protocol for a local key-value storage slot."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove key if present."""
        ...


class TaskSource(Protocol):
    """Protocol the board view uses to read and mutate tasks."""

    @property
    def tasks(self) -> tuple[Task, ...]:
        ...

    @property
    def draft(self) -> str:
        ...

    def set_draft(self, text: str) -> None:
        ...

    def add_task(self, title: str) -> Task | None:
        ...

    def delete_task(self, task_id: int) -> bool:
        ...

    def subscribe(self, listener: TaskListener) -> Callable[[], None]:
        ...
