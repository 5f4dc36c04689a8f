import logging

from threading import Condition
from typing import Any, Callable, Iterator, List, Optional, Tuple

from .errors import TransportClosed, TransportCancelled


EMPTY = object()


#
# Single-slot rendezvous between exactly one sender and one receiver.
#
#   sender                       receiver
#   send(v) ---- slot = v ---->  receive()
#           <--- received += 1 -
#
# A send returns only after its value has been taken.
# close() is for the sending side, cancel() for the receiving side.
#
class Transport:
    def __init__(self, name: Optional[str] = None):
        self.name = name or "Transport@{:x}".format(id(self))
        self.stage = None # set by the stage that feeds this transport

        self._cond = Condition()
        self._slot = EMPTY
        self._sent = 0
        self._received = 0
        self._closed = False
        self._closed_by_owner = False # an explicit close(), not a stage shutdown
        self._cancelled = False
        self._cancel_callbacks = [] # type: List[Callable[[], Any]]

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def send(self, value: Any):
        with self._cond:
            if self._closed:
                raise TransportClosed("send on closed {!r}".format(self))
            # Single producer, but keep the slot exclusive anyway
            while self._slot is not EMPTY and not self._cancelled and not self._closed:
                self._cond.wait()
            self._raise_if_finished()

            self._slot = value
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()

            while self._received < ticket and not self._cancelled and not self._closed:
                self._cond.wait()
            if self._received < ticket:
                # Nobody took it. Withdraw the value
                self._slot = EMPTY
                self._cond.notify_all()
                self._raise_if_finished()

    def _raise_if_finished(self):
        if self._cancelled:
            raise TransportCancelled("{!r} was cancelled by its receiver".format(self))
        if self._closed:
            raise TransportClosed("{!r} was closed during send".format(self))

    def receive(self) -> Tuple[Any, bool]:
        with self._cond:
            while self._slot is EMPTY and not self._closed and not self._cancelled:
                self._cond.wait()
            if self._cancelled or self._slot is EMPTY:
                return None, False
            value = self._slot
            self._slot = EMPTY
            self._received += 1
            self._cond.notify_all()
            return value, True

    def __iter__(self) -> Iterator[Any]:
        while True:
            value, ok = self.receive()
            if not ok:
                return
            yield value

    def close(self):
        with self._cond:
            if self._closed_by_owner:
                raise TransportClosed("{!r} closed twice".format(self))
            self._closed_by_owner = True
            self._closed = True
            self._cond.notify_all()

    def close_quietly(self):
        with self._cond:
            if self._closed:
                return
            self._closed = True
            self._cond.notify_all()

    def on_cancel(self, callback: Callable[[], Any]):
        with self._cond:
            if not self._cancelled:
                self._cancel_callbacks.append(callback)
                return
        callback()

    def cancel(self):
        with self._cond:
            if self._cancelled:
                return
            self._cancelled = True
            callbacks, self._cancel_callbacks = self._cancel_callbacks, []
            self._cond.notify_all()
        logging.getLogger(self.name).debug("Cancelled by receiver")
        # Outside the lock: callbacks cancel upstream transports
        for callback in callbacks:
            callback()

    def __repr__(self):
        if self._cancelled:
            state = "cancelled"
        elif self._closed:
            state = "closed"
        else:
            state = "open"
        return "<{} {} {}>".format(self.__class__.__name__, self.name, state)


__all__ = (
    'Transport',
)
