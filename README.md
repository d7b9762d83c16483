# fxlife

Building blocks for an application framework's start/stop machinery. The
package includes lifecycle event types, loggers that receive those events,
cancellable contexts with deadlines, and helpers that name functions and
describe call stacks.

## Modules

### `fxlife.events`

- `Event` is the base class of every event. `Event.type_name()` returns the
  name of the event's class.
- `Logger` is the abstract receiver of events. Subclasses implement
  `log_event(event)`.
- The event dataclasses are:
  - `OnStartExecuting` and `OnStopExecuting`, with `function_name` and
    `caller_name`.
  - `OnStartExecuted` and `OnStopExecuted`, which add `runtime` in seconds
    and `err`.
  - `Started` and `Stopped`, with `err`.
  - `Provided`, with `constructor_name`, `stack_trace`, `module_trace`,
    `module_name`, `output_type_names`, `err` and `private`.

### `fxlife.fxlog`

- `Spy` is a thread-safe logger that captures every event it receives.
  - `events()` returns a copy of the captured events as an `Events` list.
  - `event_types()` returns the captured events' type names in order.
  - `reset()` forgets everything captured so far.
- `Events.select_by_type_name(name)` keeps only the events whose class is
  named `name`.
- `StreamLogger(stream)` writes one line per event. A line starts with
  `[Fx]` and the type name, followed by `field=value` for every field that
  is not `None`, empty or an empty list.
- `default_logger(stream)` returns a `StreamLogger` for `stream`.

### `fxlife.clock`

- `Context` is a cancellation signal with an optional deadline on the
  `time.monotonic` clock.
  - `err()` returns `None` while the context is live. Once the context is
    done it returns the reason: a `CancelledError("context canceled")` or a
    `TimeoutError("context deadline exceeded")`.
  - A context is done when it or any ancestor is cancelled, or when its
    deadline has passed.
  - `cancel()` cancels the context.
  - A context can be used in a `with` block, and it is cancelled on exit.
- `background()` returns the root context. It is never cancelled and has no
  deadline.
- `with_cancel(parent)` returns a cancellable child of `parent`.
- `Clock` is the abstract time source, with `now()`, `since(t)`,
  `sleep(d)` and `with_timeout(ctx, timeout)`. All durations are in seconds.
- `SystemClock` implements `Clock` with the real monotonic clock.
  `fxlife.clock.SYSTEM` is a ready-made instance.

### `fxlife.reflection`

- `func_name(fn)` returns `"module.qualname()"` for functions and methods,
  and `str(fn)` for anything else.
- `sanitize(name)` decodes percent-escapes and shortens everything up to
  the first `/vendor/` to `vendor/`. A name with a malformed escape is not
  decoded.
- `Frame(function, file, line)` renders as `function (file:line)`. Parts
  that are missing are left out. An empty frame renders as `unknown`.
- `Stack` is a list of frames.
  - `str(stack)` joins the frames with `"; "`.
  - `strings()` returns one string per frame.
  - `format_multiline()` renders each frame as its function on one line,
    then a tab-indented `file:line` line.
  - `caller_name()` returns the first function not belonging to `fxlife`.
    Frames from test files always count. If no frame qualifies it returns
    `"n/a"`.
- `caller_stack(skip=0, depth=0)` captures the caller's stack. A `depth` of
  zero or less means 8 frames.
- `caller()` returns the name of the calling function.

### `fxlife.testutil`

- `WriteSyncer(t)` is a writable stream that passes every write to
  `t.logf("%s", text)`. Bytes are decoded as UTF-8.
  - `write(data)` returns the length of `data`.
  - `flush()` calls `t.flush()` if `t` has one.

## Example

```python
import io

from fxlife.clock import SystemClock, background, with_cancel
from fxlife.events import OnStartExecuting, Started
from fxlife.fxlog import Spy, default_logger
from fxlife.reflection import Frame, func_name

spy = Spy()
spy.log_event(OnStartExecuting(function_name="open_pool()"))
spy.log_event(Started())
print(spy.event_types())          # ['OnStartExecuting', 'Started']

out = io.StringIO()
default_logger(out).log_event(Started())
print(out.getvalue())             # [Fx] Started

ctx = with_cancel(background())
print(ctx.err())                  # None
ctx.cancel()
print(ctx.err())                  # context canceled

timed = SystemClock().with_timeout(background(), 1.0)
print(timed.deadline() is not None)  # True

print(Frame("pkg.run", "app.py", 42))  # pkg.run (app.py:42)
print(func_name(func_name))            # fxlife.reflection.func_name()
```

## What the package does not do

The package defines the events for running start and stop hooks, and the
loggers, contexts and clock such a runner needs. It does not include the
runner itself. Nothing in it registers hooks or runs them in order. It has
no hook-wrapping helpers and no test-oriented lifecycle with
`require_start`/`require_stop`. Those parts have to be supplied by the
application that uses these building blocks.

## Installing

```
pip install .
pip install ".[test]"
pytest
```