"""Event loggers: a capturing spy and a stream writer."""

from __future__ import annotations

import threading
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, TextIO

from fxlife.events import Event, Logger


class Events(list):
    """A list of captured events."""

    def select_by_type_name(self, name: str) -> Events:
        """Return only the events whose type is named ``name``."""
        return Events(event for event in self if type(event).__name__ == name)


class Spy(Logger):
    """A logger that captures every event it receives. Safe across threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._events = Events()

    def log_event(self, event: Event) -> None:
        with self._lock:
            self._events.append(event)

    def events(self) -> Events:
        """Return a copy of all captured events."""
        with self._lock:
            return Events(self._events)

    def event_types(self) -> list[str]:
        """Return the type names of all captured events, in order."""
        with self._lock:
            return [type(event).__name__ for event in self._events]

    def reset(self) -> None:
        """Forget all captured events."""
        with self._lock:
            self._events.clear()


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == []


def _describe(event: Event) -> str:
    parts = [f"[Fx] {type(event).__name__}"]
    if is_dataclass(event):
        for item in fields(event):
            value = getattr(event, item.name)
            if not _is_empty(value):
                parts.append(f"{item.name}={value}")
    return " ".join(parts)


@dataclass
class StreamLogger(Logger):
    """A logger that writes one line per event to a text stream."""

    stream: TextIO

    def log_event(self, event: Event) -> None:
        self.stream.write(_describe(event) + "\n")


def default_logger(stream: TextIO) -> Logger:
    """Return the default logger, writing to ``stream``."""
    return StreamLogger(stream)