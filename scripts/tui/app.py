"""
Task Board TUI Application.

Main entry point for the terminal user interface.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure scripts directory is in path
SCRIPT_DIR = Path(__file__).resolve().parent.parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from textual.app import App  # noqa: E402
from textual.binding import Binding  # noqa: E402

from task_store import TaskStore  # noqa: E402
from tui.storage_provider import FileStorage  # noqa: E402
from tui.views.board import BoardScreen  # noqa: E402


class TaskBoardApp(App):
    """Main task board application."""

    TITLE = "Task Board"
    SUB_TITLE = "Local tasks"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("ctrl+d", "toggle_dark", "Dark/Light", show=True),
    ]

    def __init__(self, store: TaskStore, **kwargs) -> None:
        super().__init__(**kwargs)
        self._store = store

    @property
    def store(self) -> TaskStore:
        return self._store

    def on_mount(self) -> None:
        """Hydrate the store before the board is first rendered."""
        self._store.initialize()
        self.push_screen(BoardScreen(self._store))

    def action_toggle_dark(self) -> None:
        """Toggle dark mode."""
        self.theme = "textual-light" if self.theme == "textual-dark" else "textual-dark"


def run(storage_dir: Path, key: str = "tasks") -> None:
    """Run the TUI application."""
    store = TaskStore(FileStorage(storage_dir), key=key)
    app = TaskBoardApp(store)
    app.run()


if __name__ == "__main__":
    from board_config import Settings
    from logging_setup import setup_logging

    settings = Settings.from_env()
    setup_logging(log_file=settings.log_file, console=False)
    run(settings.storage_dir, settings.storage_key)
