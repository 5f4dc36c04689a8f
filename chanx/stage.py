import logging

from threading import Thread
from typing import Any, Iterator, Optional

from .errors import TransportClosed, TransportCancelled
from .transport import Transport


class Stage(Thread):
    """
    An independent thread of control that owns exactly one output transport.

    Subclasses implement ``transform`` as a generator over the input
    transports; every value it yields is sent on the output. Inputs are only
    ever read, never closed. When the stage ends, for whatever reason, its
    inputs are cancelled and its output is closed.
    """
    stage_name = "Stage"

    def __init__(self, *inputs: Transport, name: Optional[str] = None, error_logger=logging.error):
        name = name or "{}[{:x}]".format(self.stage_name, id(self))
        super().__init__(name=name, daemon=True)
        self.inputs = inputs
        self.output = Transport(name + ".out")
        self.output.stage = self
        self.error_logger = error_logger
        self.raised_exception = None # type: Optional[BaseException]

        # Whoever reads our output lost interest => so do we
        self.output.on_cancel(self.ask_quit)

    def transform(self, *inputs: Transport) -> Iterator[Any]:
        raise NotImplementedError

    def ask_quit(self):
        for transport in self.inputs:
            transport.cancel()

    def run(self):
        logger = logging.getLogger(self.name)
        logger.debug("Stage started")
        output = self.output
        try:
            for value in self.transform(*self.inputs):
                output.send(value)
            logger.debug("Input exhausted")
        except TransportCancelled:
            logger.debug("Downstream cancelled. Quitting")
        except TransportClosed:
            logger.debug("Output closed from outside. Quitting")
        except Exception as exc:
            self.raised_exception = exc
            self.error_logger("Error raised in {}: {!r}".format(self.name, exc))
        finally:
            self.ask_quit()
            output.close_quietly()
            logger.debug("Stage finished")

    @classmethod
    def launch(cls, *args, **kwargs) -> Transport:
        stage = cls(*args, **kwargs)
        stage.start()
        return stage.output


__all__ = (
    'Stage',
)
