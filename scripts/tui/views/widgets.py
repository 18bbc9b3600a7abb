"""Reusable widgets for the task board."""

from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Button, Label, Static

from tui.providers import Task


class TaskRow(Static):
    """Single row in the task list."""

    DEFAULT_CSS = """
    TaskRow {
        height: 3;
        width: 100%;
    }

    TaskRow Horizontal {
        height: 3;
    }

    TaskRow .task-title {
        width: 1fr;
        padding: 1 1 0 1;
    }

    TaskRow Button.delete {
        min-width: 10;
    }
    """

    class DeleteRequested(Message):
        """Posted when the row's delete control is pressed."""

        def __init__(self, task_id: int) -> None:
            super().__init__()
            self.task_id = task_id

    def __init__(self, task: Task, **kwargs) -> None:
        super().__init__(**kwargs)
        self._record = task

    @property
    def task_id(self) -> int:
        return self._record.id

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Label(
                f"#{self._record.id} {self._record.title}",
                markup=False,
                classes="task-title",
            )
            yield Button("Delete", variant="error", classes="delete")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.DeleteRequested(self._record.id))


class TaskListPanel(Static):
    """Scrollable list of tasks in collection order."""

    DEFAULT_CSS = """
    TaskListPanel {
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
    }

    TaskListPanel .empty {
        color: $text-muted;
        margin: 1;
    }
    """

    tasks: reactive[tuple[Task, ...]] = reactive((), recompose=True)

    def __init__(self, tasks: tuple[Task, ...] = (), **kwargs) -> None:
        super().__init__(**kwargs)
        self.set_reactive(TaskListPanel.tasks, tuple(tasks))

    def compose(self) -> ComposeResult:
        if not self.tasks:
            yield Label("No tasks yet", classes="empty")
            return

        with VerticalScroll():
            for task in self.tasks:
                yield TaskRow(task)
