# src/dayplan/schedule/subscribers.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)


class ConsoleSubscriber:
    """Prints every notification as "[<id>] <message>"."""

    def __init__(self, subscriber_id: str, stream: TextIO | None = None) -> None:
        self.subscriber_id = subscriber_id
        self._stream = stream

    def update(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(f"[{self.subscriber_id}] {message}", file=stream, flush=True)

    def __repr__(self) -> str:
        return f"ConsoleSubscriber({self.subscriber_id!r})"


class LoggingSubscriber:
    """Forwards notifications into logging (INFO)."""

    def __init__(self, name: str = "notifications") -> None:
        self.name = name

    def update(self, message: str) -> None:
        logger.info("[%s] %s", self.name, message)

    def __repr__(self) -> str:
        return f"LoggingSubscriber({self.name!r})"
