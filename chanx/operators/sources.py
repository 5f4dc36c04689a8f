from ..stage import Stage
from ..transport import Transport

from typing import Iterable


class SequenceStage(Stage):
    stage_name = "FromSequence"

    def __init__(self, sequence: Iterable, **kwargs):
        super().__init__(**kwargs)
        self.sequence = sequence

    def transform(self):
        yield from self.sequence


class FibonacciStage(Stage):
    stage_name = "Fibonaccis"

    def transform(self):
        a, b = 1, 1
        yield a
        yield b
        while True:
            a, b = b, a + b
            yield b


def from_sequence(sequence: Iterable, **kwargs) -> Transport:
    """
    Sends every element of ``sequence`` in order, then closes.
    An empty sequence gives an output that is closed right away.
    """
    return SequenceStage.launch(sequence, **kwargs)


def fibonaccis(**kwargs) -> Transport:
    """
    Sends 1, 1, 2, 3, 5, 8, ... forever.

    The output is never closed by the producer itself. Cancel it (or take
    a finite prefix with ``take``, which cancels for you) to stop the stage;
    a transport left unread keeps the stage blocked until the process ends.
    """
    return FibonacciStage.launch(**kwargs)


__all__ = (
    'from_sequence', 'fibonaccis',
)
