import time
import logging

import psutil

from chanx.stage import Stage
from chanx.transport import Transport
from chanx.operators import from_sequence, fibonaccis, map, zip, take, skip, count


class doubler(Stage):
    stage_name = "Doubler"

    def transform(self, source):
        for value in source:
            yield value * 2


def test_custom_stage():
    output = doubler.launch(from_sequence([1, 2, 3]))
    assert isinstance(output, Transport)
    assert isinstance(output.stage, doubler)
    assert list(output) == [2, 4, 6]
    output.stage.join(1)
    assert not output.stage.is_alive()
    assert output.stage.raised_exception is None


def test_stage_name():
    output = doubler.launch(from_sequence([]), name="twice")
    assert output.stage.name == "twice"
    assert output.name == "twice.out"
    assert list(output) == []

    unnamed = doubler(from_sequence([]))
    assert unnamed.name.startswith("Doubler[")
    unnamed.start()
    assert list(unnamed.output) == []


def test_error_truncates_stream():
    errors = []

    def div(x):
        return 10 // x

    output = map(from_sequence([5, 2, 0, 1]), div, error_logger=errors.append)
    assert list(output) == [2, 5]
    output.stage.join(1)
    assert isinstance(output.stage.raised_exception, ZeroDivisionError)
    assert len(errors) == 1
    assert "ZeroDivisionError" in errors[0]


def test_external_close_stops_producer():
    fibs = fibonaccis()
    assert fibs.receive() == (1, True)
    fibs.close()
    fibs.stage.join(1)
    assert not fibs.stage.is_alive()
    assert fibs.stage.raised_exception is None


def test_close_producers_after_take(wait_stages):
    fibs = fibonaccis()
    assert list(take(fibs, 3)) == [1, 1, 2]
    assert wait_stages() == []
    fibs.close()
    assert fibs.closed


def test_close_producers_after_zip(wait_stages):
    fibs = fibonaccis()
    fibs2 = skip(fibonaccis(), 1)
    ratios = take(skip(zip(fibs, fibs2, lambda a, b: b / a), 5), 5)
    assert len(list(ratios)) == 5
    assert wait_stages() == []
    fibs.close()
    fibs2.close()
    assert fibs.closed and fibs2.closed


def test_cancel_propagates_upstream(wait_stages):
    source = fibonaccis()
    squares = map(source, lambda x: x * x)
    assert squares.receive() == (1, True)
    squares.cancel()

    assert wait_stages() == []
    assert source.cancelled
    assert squares.closed and source.closed


def test_no_thread_leak_on_infinite_chain(wait_stages):
    assert wait_stages() == []
    time.sleep(0.1)
    num_before = psutil.Process().num_threads()

    for _ in range(5):
        assert count(take(map(fibonaccis(), lambda x: x + 1), 10)) == 10

    assert wait_stages() == []
    time.sleep(0.1)
    assert psutil.Process().num_threads() == num_before


def test_lifecycle_logging(caplog, wait_stages):
    with caplog.at_level(logging.DEBUG):
        assert list(from_sequence([1], name="one")) == [1]
        assert wait_stages() == []
    messages = [r.getMessage() for r in caplog.records if r.name == "one"]
    assert messages == ["Stage started", "Input exhausted", "Stage finished"]
