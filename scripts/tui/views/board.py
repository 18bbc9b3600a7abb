"""Main board screen: input row plus task list."""

import logging

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Label

from tui.providers import Task, TaskSource
from tui.storage_provider import StorageError
from tui.views.widgets import TaskListPanel, TaskRow

logger = logging.getLogger(__name__)


class BoardScreen(Screen):
    """Task board screen bound to a TaskSource."""

    DEFAULT_CSS = """
    BoardScreen {
        layout: vertical;
    }

    #board {
        padding: 1;
    }

    #board .title {
        text-style: bold;
        margin-bottom: 1;
    }

    #input-row {
        height: auto;
        margin-bottom: 1;
    }

    #task-input {
        width: 1fr;
    }
    """

    def __init__(self, store: TaskSource, **kwargs) -> None:
        super().__init__(**kwargs)
        self._store = store
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        yield Header()

        with Vertical(id="board"):
            yield Label("Task Board", classes="title")
            with Horizontal(id="input-row"):
                yield Input(
                    value=self._store.draft,
                    placeholder="Enter a task",
                    id="task-input",
                )
                yield Button("Add", variant="primary", id="add-task")
            yield TaskListPanel(self._store.tasks, id="task-list")

        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribe = self._store.subscribe(self._on_tasks_changed)
        self.query_one("#task-input", Input).focus()

    def on_unmount(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_tasks_changed(self, tasks: tuple[Task, ...]) -> None:
        """Re-render after every store mutation."""
        self.query_one("#task-list", TaskListPanel).tasks = tasks
        self.query_one("#task-input", Input).value = self._store.draft

    def _submit(self) -> None:
        try:
            self._store.add_task(self._store.draft)
        except StorageError as e:
            logger.error("Add failed: %s", e)
            self.notify(str(e), title="Could not save", severity="error")

    def on_input_changed(self, event: Input.Changed) -> None:
        self._store.set_draft(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._store.set_draft(event.value)
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-task":
            self._submit()

    def on_task_row_delete_requested(self, message: TaskRow.DeleteRequested) -> None:
        try:
            self._store.delete_task(message.task_id)
        except StorageError as e:
            logger.error("Delete failed: %s", e)
            self.notify(str(e), title="Could not save", severity="error")
