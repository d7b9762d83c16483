import pytest

from fxlife.events import (
    Event,
    Logger,
    OnStartExecuted,
    OnStartExecuting,
    OnStopExecuted,
    OnStopExecuting,
    Provided,
    Started,
    Stopped,
)


def test_type_name_matches_class():
    assert OnStartExecuting().type_name() == "OnStartExecuting"
    assert OnStartExecuted().type_name() == "OnStartExecuted"
    assert OnStopExecuting().type_name() == "OnStopExecuting"
    assert OnStopExecuted().type_name() == "OnStopExecuted"
    assert Stopped().type_name() == "Stopped"
    assert isinstance(Stopped(), Event)


def test_started_type_name():
    assert Started().type_name() == "Started"
    assert Provided().type_name() == "Provided"


def test_logger_is_abstract():
    with pytest.raises(TypeError):
        Logger()


def test_logger_subclass_receives_events():
    class Collector(Logger):
        def __init__(self):
            self.seen = []

        def log_event(self, event):
            self.seen.append(event)

    collector = Collector()
    event = Stopped()
    collector.log_event(event)
    assert collector.seen == [event]


def test_provided_defaults_are_independent():
    first = Provided()
    second = Provided()
    first.output_type_names.append("x")
    assert second.output_type_names == []
    assert second.err is None
    assert second.private is False


def test_executed_carries_error():
    err = ValueError("boom")
    event = OnStopExecuted(function_name="f", caller_name="c", err=err)
    assert event.err is err
    assert event.runtime == 0.0


def test_event_equality():
    a = OnStartExecuting(function_name="f", caller_name="c")
    b = OnStartExecuting(function_name="f", caller_name="c")
    c = OnStartExecuting(function_name="g", caller_name="c")
    assert a == b
    assert (a == c) is False