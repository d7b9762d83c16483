"""Lifecycle event types, event loggers, cancellable contexts and call-stack helpers."""

__version__ = "0.1.0"
__all__ = ["clock", "events", "fxlog", "reflection", "testutil"]