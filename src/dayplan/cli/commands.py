# src/dayplan/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..schedule.task_models import InvalidTaskError, Task, parse_minute
from .bootstrap import subscribe, unsubscribe
from .demo import run_demo

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()

ADD_USAGE = "Usage: /add HH:MM HH:MM name (e.g. /add 07:00 08:00 Morning Exercise)."


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add 09:00 10:00 Team Meeting
    Subscribers see the admission or conflict message; the reply is just the verdict.
    """
    if len(args) < 3:
        return ADD_USAGE

    try:
        task = Task(" ".join(args[2:]), parse_minute(args[0]), parse_minute(args[1]))
    except InvalidTaskError as e:
        logger.debug("Invalid /add input %r: %s", args, e)
        return f"Invalid task: {e}. {ADD_USAGE}"

    return "Added." if state.manager.add_task(task) else "Rejected."


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = state.manager.list_tasks()
    if not tasks:
        return "No tasks scheduled."
    lines = ["Current tasks:"]
    lines.extend(f"  {t}" for t in tasks)
    return "\n".join(lines)


def cmd_subscribe(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /subscribe ID"
    subscribe(state, args[0])
    return f"Subscribed {args[0]}."


def cmd_unsubscribe(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /unsubscribe ID"
    if not unsubscribe(state, args[0]):
        return f"No subscriber named {args[0]}."
    return f"Unsubscribed {args[0]}."


def cmd_status(state: AppState, args: list[str]) -> str:
    observers = state.manager.observers()
    names = ", ".join(repr(o) for o in observers) or "(none)"
    return (
        "Status:\n"
        f"  Tasks: {len(state.manager)}\n"
        f"  Registrations ({len(observers)}): {names}"
    )


def cmd_demo(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    lines: list[str] = []
    results = run_demo(state.manager, emit=emit or lines.append)
    lines.append(f"Demo finished: {sum(results)} admitted, {len(results) - sum(results)} rejected.")
    return "\n".join(lines)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Schedule a task: /add HH:MM HH:MM name.")
registry.register("list", cmd_list, help_text="Show tasks ordered by start time.", aliases=["ls"])
registry.register("subscribe", cmd_subscribe, help_text="Register a console subscriber: /subscribe ID.")
registry.register(
    "unsubscribe", cmd_unsubscribe, help_text="Remove one registration of a subscriber: /unsubscribe ID."
)
registry.register("status", cmd_status, help_text="Show task count and subscriber registrations.")
registry.register("demo", cmd_demo, help_text="Replay the sample day (one conflict included).")
