"""Function naming and call-stack inspection helpers."""

from __future__ import annotations

import inspect
import re
from dataclasses import dataclass
from types import FrameType
from typing import Any
from urllib.parse import unquote_plus

_DEFAULT_CALLERS_DEPTH = 8
_PACKAGE_NAME = "fxlife"

# Match from the beginning of the string up to the first "/vendor/" (non-greedy).
_VENDOR_RE = re.compile(r"^.*?/vendor/")
# A percent sign that does not start a valid two-digit hex escape.
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def sanitize(function: str) -> str:
    """Make a function name suitable for display.

    Percent-encoded elements are decoded and vendored paths are shortened.
    A name with a malformed escape is left undecoded.
    """
    if not _BAD_ESCAPE_RE.search(function):
        function = unquote_plus(function)
    return _VENDOR_RE.sub("vendor/", function, count=1)


def _qualified_name(fn: Any) -> str:
    module = getattr(fn, "__module__", None)
    qualname = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", repr(fn))
    return f"{module}.{qualname}" if module else qualname


def func_name(fn: Any) -> str:
    """Return the display name of a function, or ``str(fn)`` for anything else."""
    if not inspect.isroutine(fn):
        return str(fn)
    return f"{sanitize(_qualified_name(fn))}()"


@dataclass(frozen=True)
class Frame:
    """A single frame of a call stack."""

    function: str = ""
    file: str = ""
    line: int = 0

    def __str__(self) -> str:
        text = self.function
        if self.file:
            location = self.file
            if self.line > 0:
                location = f"{location}:{self.line}"
            text = f"{text} ({location})" if text else f"({location})"
        return text or "unknown"


def _is_test_file(path: str) -> bool:
    base = re.split(r"[\\/]", path)[-1]
    return base.startswith("test_") or base.endswith("_test.py")


def _should_ignore_frame(frame: Frame) -> bool:
    # Frames from test files are treated as leaves.
    if _is_test_file(frame.file):
        return False
    if not frame.function.startswith(_PACKAGE_NAME):
        return False
    rest = frame.function[len(_PACKAGE_NAME):]
    return rest.startswith(".")


class Stack(list):
    """A list of :class:`Frame` objects, innermost first."""

    def __str__(self) -> str:
        return "; ".join(self.strings())

    def strings(self) -> list[str]:
        """Return one string per frame."""
        return [str(frame) for frame in self]

    def format_multiline(self) -> str:
        """Render each frame as a function line followed by an indented location."""
        return "".join(f"{frame.function}\n\t{frame.file}:{frame.line}\n" for frame in self)

    def caller_name(self) -> str:
        """Return the first function in the stack that is not part of this package."""
        for frame in self:
            if not _should_ignore_frame(frame):
                return frame.function
        return "n/a"


def _frame_function(frame: FrameType) -> str:
    code = frame.f_code
    name = getattr(code, "co_qualname", code.co_name)
    module = inspect.getmodule(frame)
    module_name = module.__name__ if module is not None else ""
    return f"{module_name}.{name}" if module_name else name


def caller_stack(skip: int = 0, depth: int = 0) -> Stack:
    """Return up to ``depth`` frames of the caller's stack, skipping ``skip`` frames.

    With ``skip`` 0 the first frame is the function calling this one.
    A ``depth`` of zero or less means 8.
    """
    if depth <= 0:
        depth = _DEFAULT_CALLERS_DEPTH

    frame = inspect.currentframe()
    for _ in range(skip + 1):
        if frame is None:
            break
        frame = frame.f_back

    frames = Stack()
    while frame is not None and len(frames) < depth:
        frames.append(
            Frame(
                function=sanitize(_frame_function(frame)),
                file=frame.f_code.co_filename,
                line=frame.f_lineno,
            )
        )
        frame = frame.f_back
    return frames


def caller() -> str:
    """Return the name of the calling function."""
    return caller_stack(1, 0).caller_name()