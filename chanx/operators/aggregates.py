import logging

from ..transport import Transport

from threading import Thread
from queue import Queue, Empty
from typing import Any, Optional


DEFAULT_TIMEOUT = 1.0 # seconds
TIMEOUT_SENTINEL = -1


def first(source: Optional[Transport], default: Any = None) -> Any:
    """
    Returns the first value received, or ``default`` if ``source`` closes
    empty. The rest of the stream is cancelled.

    Blocks forever on an open source that never sends.
    """
    if source is None:
        return default
    value, ok = source.receive()
    source.cancel()
    return value if ok else default


def last(source: Optional[Transport], default: Any = None) -> Any:
    result = default
    if source is None:
        return result
    for value in source:
        result = value
    return result


def max(source: Optional[Transport], default: Any = None) -> Any:
    if source is None:
        return default
    result = default
    seeded = False
    for value in source:
        if not seeded or value > result:
            result = value
        seeded = True
    return result


def count(source: Optional[Transport]) -> int:
    n = 0
    if source is None:
        return n
    for _ in source:
        n += 1
    return n


def sum(source: Optional[Transport], start: Any = 0) -> Any:
    result = start
    if source is None:
        return result
    for value in source:
        result = result + value
    return result


class CountThread(Thread):
    def __init__(self, source: Transport, result_q: Queue):
        super().__init__(name="Count[{}]".format(source.name), daemon=True)
        self.source = source
        self.result_q = result_q

    def run(self):
        self.result_q.put(count(self.source))


def count_with_timeout(source: Optional[Transport],
                       timeout: float = DEFAULT_TIMEOUT,
                       sentinel: int = TIMEOUT_SENTINEL) -> int:
    """
    Counts ``source`` on a background thread and waits at most ``timeout``
    seconds for the result.

    Returns ``sentinel`` if the deadline passes first. In that case the source
    is cancelled, so the background count and every stage feeding it stop
    instead of running on unobserved.
    """
    if source is None:
        return 0
    logger = logging.getLogger("CountWithTimeout")
    result_q = Queue(1) # type: Queue
    counter = CountThread(source, result_q)
    counter.start()
    try:
        return result_q.get(timeout=timeout)
    except Empty:
        logger.debug("Timed out after {}s counting {!r}".format(timeout, source))
        source.cancel()
        return sentinel


__all__ = (
    'first', 'last', 'max', 'count', 'sum', 'count_with_timeout',
    'DEFAULT_TIMEOUT', 'TIMEOUT_SENTINEL',
)
