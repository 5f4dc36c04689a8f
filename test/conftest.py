import time
import threading

import pytest

from chanx.stage import Stage
from chanx.operators.aggregates import CountThread


def running_stages():
    return [
        thread for thread in threading.enumerate()
        if isinstance(thread, (Stage, CountThread)) and thread.is_alive()
    ]


@pytest.fixture
def wait_stages():
    def wait(timeout=2.0):
        deadline = time.time() + timeout
        while time.time() < deadline:
            alive = running_stages()
            if not alive:
                return []
            time.sleep(0.01)
        return running_stages()
    return wait
