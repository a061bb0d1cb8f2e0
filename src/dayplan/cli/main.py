# src/dayplan/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then:
- replays the sample day (optional, DAYPLAN_RUN_DEMO),
- runs the console REPL in the main thread (optional, DAYPLAN_CONSOLE_ENABLED).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from .bootstrap import create_initial_state
from .demo import run_demo

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/dayplan")
    log_file = setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (log file: %s)...", getattr(settings, "app_name", "dayplan"), log_file)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    try:
        if settings.run_demo:
            run_demo(state.manager)

        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled; nothing else to run.")
    finally:
        logger.info("Bye. %d task(s) scheduled this session.", len(state.manager))


if __name__ == "__main__":
    main()
