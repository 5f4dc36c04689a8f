from ..stage import Stage
from ..transport import Transport

from typing import Any, Callable, Optional
from itertools import islice


class MapStage(Stage):
    stage_name = "Map"

    def __init__(self, source: Transport, fn: Callable[[Any], Any], **kwargs):
        super().__init__(source, **kwargs)
        self.fn = fn

    def transform(self, source):
        fn = self.fn
        for value in source:
            yield fn(value)


class FilterStage(Stage):
    stage_name = "Filter"

    def __init__(self, source: Transport, predicate: Callable[[Any], bool], **kwargs):
        super().__init__(source, **kwargs)
        self.predicate = predicate

    def transform(self, source):
        predicate = self.predicate
        for value in source:
            if predicate(value):
                yield value


class ZipStage(Stage):
    stage_name = "Zip"

    def __init__(self, xs: Transport, ys: Transport, combiner: Callable[[Any, Any], Any], **kwargs):
        super().__init__(xs, ys, **kwargs)
        self.combiner = combiner

    def transform(self, xs, ys):
        combiner = self.combiner
        while True:
            x, has_x = xs.receive()
            if not has_x:
                break
            y, has_y = ys.receive()
            if not has_y:
                break
            yield combiner(x, y)
        # Leftovers of the longer input are dropped; both inputs get
        # cancelled once the stage exits


class TakeStage(Stage):
    stage_name = "Take"

    def __init__(self, source: Transport, n: int, **kwargs):
        super().__init__(source, **kwargs)
        self.n = max(n, 0)

    def transform(self, source):
        # islice never pulls the (n+1)-th value
        return islice(source, self.n)


class SkipStage(Stage):
    stage_name = "Skip"

    def __init__(self, source: Transport, n: int, **kwargs):
        super().__init__(source, **kwargs)
        self.n = max(n, 0)

    def transform(self, source):
        n = self.n
        for i, value in enumerate(source):
            if i < n:
                continue
            yield value


def map(source: Optional[Transport], fn: Callable[[Any], Any], **kwargs) -> Optional[Transport]:
    if source is None:
        return None
    return MapStage.launch(source, fn, **kwargs)


def filter(source: Optional[Transport], predicate: Callable[[Any], bool], **kwargs) -> Optional[Transport]:
    if source is None:
        return None
    return FilterStage.launch(source, predicate, **kwargs)


def zip(xs: Optional[Transport], ys: Optional[Transport],
        combiner: Callable[[Any, Any], Any], **kwargs) -> Optional[Transport]:
    """
    Combines values pairwise until either input closes.
    Values beyond the shorter input's length are discarded.
    """
    if xs is None or ys is None:
        return None
    return ZipStage.launch(xs, ys, combiner, **kwargs)


def take(source: Optional[Transport], n: int, **kwargs) -> Optional[Transport]:
    """
    Forwards at most the first ``n`` values, then closes and cancels
    ``source``. A negative ``n`` is treated as 0.
    """
    if source is None:
        return None
    return TakeStage.launch(source, n, **kwargs)


def skip(source: Optional[Transport], n: int, **kwargs) -> Optional[Transport]:
    if source is None:
        return None
    return SkipStage.launch(source, n, **kwargs)


__all__ = (
    'map', 'filter', 'zip', 'take', 'skip',
)
