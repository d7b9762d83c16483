"""Events emitted while running application lifecycle hooks, and the logger interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional


class Event:
    """Base class of all lifecycle events."""

    def type_name(self) -> str:
        """Return the name of the event's type."""
        return type(self).__name__


class Logger(ABC):
    """Receives lifecycle events."""

    @abstractmethod
    def log_event(self, event: Event) -> None:
        """Record or display ``event``."""


@dataclass
class OnStartExecuting(Event):
    """An OnStart hook is about to run."""

    function_name: str = ""
    caller_name: str = ""


@dataclass
class OnStartExecuted(Event):
    """An OnStart hook has run; ``runtime`` is in seconds."""

    function_name: str = ""
    caller_name: str = ""
    runtime: float = 0.0
    err: Optional[BaseException] = None


@dataclass
class OnStopExecuting(Event):
    """An OnStop hook is about to run."""

    function_name: str = ""
    caller_name: str = ""


@dataclass
class OnStopExecuted(Event):
    """An OnStop hook has run; ``runtime`` is in seconds."""

    function_name: str = ""
    caller_name: str = ""
    runtime: float = 0.0
    err: Optional[BaseException] = None


@dataclass
class Started(Event):
    """The application has started, or failed to."""

    err: Optional[BaseException] = None


@dataclass
class Stopped(Event):
    """The application has stopped, or failed to."""

    err: Optional[BaseException] = None


@dataclass
class Provided(Event):
    """A constructor was registered."""

    constructor_name: str = ""
    stack_trace: list[str] = field(default_factory=list)
    module_trace: list[str] = field(default_factory=list)
    module_name: str = ""
    output_type_names: list[str] = field(default_factory=list)
    err: Optional[BaseException] = None
    private: bool = False