"""Time access and cancellable contexts with deadlines."""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from concurrent.futures import CancelledError
from typing import Optional


class Context:
    """A cancellation signal with an optional deadline.

    Deadlines are expressed in seconds on the ``time.monotonic`` clock.
    A context is cancelled when it or any of its ancestors is cancelled
    or when its deadline passes.
    """

    def __init__(
        self,
        parent: Optional[Context] = None,
        deadline: Optional[float] = None,
        *,
        cancellable: bool = True,
    ) -> None:
        self._parent = parent
        parent_deadline = parent.deadline() if parent is not None else None
        if parent_deadline is not None and (deadline is None or parent_deadline < deadline):
            deadline = parent_deadline
        self._deadline = deadline
        self._cancellable = cancellable
        self._error: Optional[BaseException] = None
        self._lock = threading.Lock()

    def err(self) -> Optional[BaseException]:
        """Return why the context is done, or None while it is still live."""
        with self._lock:
            if self._error is not None:
                return self._error
        if self._parent is not None:
            parent_error = self._parent.err()
            if parent_error is not None:
                return parent_error
        if self._deadline is not None and time.monotonic() >= self._deadline:
            with self._lock:
                if self._error is None:
                    self._error = TimeoutError("context deadline exceeded")
                return self._error
        return None

    def deadline(self) -> Optional[float]:
        """Return the monotonic deadline, or None if there is none."""
        return self._deadline

    def cancel(self) -> None:
        """Cancel this context and every context derived from it."""
        if not self._cancellable:
            return
        with self._lock:
            if self._error is None:
                self._error = CancelledError("context canceled")

    def __enter__(self) -> Context:
        return self

    def __exit__(self, *exc_info) -> None:
        self.cancel()


_BACKGROUND = Context(cancellable=False)


def background() -> Context:
    """Return the root context: never cancelled and without a deadline."""
    return _BACKGROUND


def with_cancel(parent: Context) -> Context:
    """Return a cancellable child of ``parent``."""
    return Context(parent)


class Clock(ABC):
    """How time is read, measured and waited on. Durations are in seconds."""

    @abstractmethod
    def now(self) -> float:
        """Return the current time."""

    @abstractmethod
    def since(self, t: float) -> float:
        """Return the time elapsed since ``t``."""

    @abstractmethod
    def sleep(self, d: float) -> None:
        """Block for ``d`` seconds."""

    @abstractmethod
    def with_timeout(self, ctx: Context, timeout: float) -> Context:
        """Return a child of ``ctx`` that expires after ``timeout`` seconds."""


class SystemClock(Clock):
    """A :class:`Clock` backed by the real monotonic clock."""

    def now(self) -> float:
        return time.monotonic()

    def since(self, t: float) -> float:
        return time.monotonic() - t

    def sleep(self, d: float) -> None:
        time.sleep(d)

    def with_timeout(self, ctx: Context, timeout: float) -> Context:
        return Context(ctx, time.monotonic() + timeout)


SYSTEM: Clock = SystemClock()