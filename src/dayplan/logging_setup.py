# src/dayplan/logging_setup.py

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

APP_LOGGER = "dayplan"

# Subscriber output already reaches the console through ConsoleSubscriber.
NOTIFICATIONS_LOGGER = "dayplan.schedule.subscribers"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console-side filter.

    dayplan records pass, except the quiet loggers (notification echoes), which need
    WARNING+. Everything else (third-party, captured py.warnings) needs ERROR+.
    """

    def __init__(self, quiet: Iterable[str] = (NOTIFICATIONS_LOGGER,)) -> None:
        super().__init__()
        self._quiet = tuple(quiet)

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name != APP_LOGGER and not name.startswith(APP_LOGGER + "."):
            return record.levelno >= logging.ERROR
        if any(name == q or name.startswith(q + ".") for q in self._quiet):
            return record.levelno >= logging.WARNING
        return True


def setup_logging(
    *,
    log_dir: str | Path = ".local/dayplan",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    log_notifications_on_console: bool = False,
) -> Path:
    """
    Attach a filtered stderr handler and a full DEBUG file handler to the root logger.

    Replaces any handlers already installed, so calling it twice does not duplicate
    output. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{APP_LOGGER}.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    quiet = () if log_notifications_on_console else (NOTIFICATIONS_LOGGER,)
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter(quiet))
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
