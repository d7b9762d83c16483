"""A writable stream that forwards to a test's log."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union


class _TestingT(Protocol):
    def logf(self, fmt: str, *args) -> None: ...


@dataclass(frozen=True)
class WriteSyncer:
    """A stream whose writes go to ``t.logf``."""

    t: _TestingT

    def write(self, data: Union[str, bytes]) -> int:
        """Log ``data`` and return its length."""
        text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
        self.t.logf("%s", text)
        return len(data)

    def flush(self) -> None:
        """Flush the test log if it supports flushing; writes are never buffered here."""
        flush = getattr(self.t, "flush", None)
        if callable(flush):
            flush()