import io
import threading

from fxlife.events import Provided, Started
from fxlife.fxlog import Events, Spy, StreamLogger, default_logger
from fxlife.testutil import WriteSyncer


def test_empty_spy():
    spy = Spy()
    assert spy.events() == []
    assert len(spy.events()) == 0
    assert spy.event_types() == []


def test_spy_sequence():
    spy = Spy()
    spy.log_event(Started())
    assert spy.event_types()[0] == "Started"

    spy.log_event(Provided(err=RuntimeError("some error")))
    assert len(spy.events().select_by_type_name("Provided")) == 1
    assert spy.event_types()[1] == "Provided"

    spy.reset()
    assert spy.events() == []
    assert spy.event_types() == []

    spy.log_event(Started())
    assert spy.event_types()[0] == "Started"


def test_spy_events_returns_copy():
    spy = Spy()
    event = Started()
    spy.log_event(event)
    copied = spy.events()
    copied.clear()
    assert spy.events() == Events([event])


def test_select_by_type_name_returns_events():
    started = Started()
    events = Events([started, Provided(), Started()])
    selected = events.select_by_type_name("Started")
    assert isinstance(selected, Events)
    assert len(selected) == 2
    assert selected[0] is started


def test_spy_concurrent_logging():
    spy = Spy()

    def worker():
        for _ in range(100):
            spy.log_event(Started())

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(spy.events()) == 400


def test_default_logger_writes_to_stream():
    stream = io.StringIO()
    logger = default_logger(stream)
    logger.log_event(Started())
    output = stream.getvalue()
    assert isinstance(logger, StreamLogger)
    assert output.startswith("[Fx]")
    assert "Started" in output
    assert output.endswith("\n")


def test_default_logger_includes_error():
    stream = io.StringIO()
    default_logger(stream).log_event(Started(err=ValueError("bad things")))
    assert "bad things" in stream.getvalue()


def test_default_logger_over_write_syncer():
    class _Recorder:
        def __init__(self):
            self.logs = []

        def logf(self, msg, *args):
            self.logs.append(msg % args)

    recorder = _Recorder()
    default_logger(WriteSyncer(recorder)).log_event(Started())
    assert len(recorder.logs) == 1
    assert recorder.logs[0].startswith("[Fx]")