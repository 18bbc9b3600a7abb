"""Logging configuration for the task board."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ConsoleNoiseFilter(logging.Filter):
    """Only our own loggers reach the console; third-party records need ERROR+."""

    OWN_PREFIXES = ("board_config", "logging_setup", "task_store", "taskboard", "tui")

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(self.OWN_PREFIXES):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_file: str | Path,
    console: bool = True,
    console_level: int | str = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure the root logger with:
    - File handler: full logs for debugging
    - Console handler (stderr): filtered, skipped when a TUI owns the terminal

    Call this once, before the first log record. Raises OSError if the log
    file cannot be opened; the root logger is left untouched in that case.
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(fh)

    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(console_level)
        ch.setFormatter(fmt)
        ch.addFilter(_ConsoleNoiseFilter())
        root.addHandler(ch)

    logging.captureWarnings(True)
