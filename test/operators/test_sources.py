import time

import numpy as np

from chanx.operators import from_sequence, fibonaccis, take


def test_from_sequence_order():
    assert list(from_sequence([3, 1, 2])) == [3, 1, 2]
    assert list(from_sequence("abc")) == ['a', 'b', 'c']


def test_from_sequence_empty(wait_stages):
    output = from_sequence([])
    assert output.receive() == (None, False)
    assert wait_stages() == []
    assert output.closed


def test_from_sequence_numpy():
    values = list(from_sequence(np.arange(4, dtype=np.int64)))
    assert values == [0, 1, 2, 3]
    assert all(isinstance(v, np.int64) for v in values)


def test_fibonaccis_prefix(wait_stages):
    assert list(take(fibonaccis(), 10)) == [1, 1, 2, 3, 5, 8, 13, 21, 34, 55]
    assert wait_stages() == []


def test_fibonaccis_beyond_64_bits():
    fibs = list(take(fibonaccis(), 100))
    assert fibs[-1] == 354224848179261915075
    assert fibs[-1] > 2 ** 64


def test_fibonaccis_never_closes_on_its_own():
    fibs = fibonaccis()
    for _ in range(3):
        fibs.receive()
    time.sleep(0.05)
    assert not fibs.closed
    assert fibs.stage.is_alive()

    fibs.cancel()
    fibs.stage.join(1)
    assert fibs.closed
    assert not fibs.stage.is_alive()
