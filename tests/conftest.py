"""Shared fixtures for lull tests."""

import threading
import time

import pytest

from lull._sync import _EventLoopThread
from lull.config import DebounceConfig


class Recorder:
    """Operation stand-in that remembers every call, its thread and time."""

    def __init__(self) -> None:
        self.calls: list[tuple[tuple, dict]] = []
        self.threads: list[threading.Thread] = []
        self.times: list[float] = []
        self.fired = threading.Event()

    def __call__(self, *args, **kwargs) -> None:
        self.calls.append((args, kwargs))
        self.threads.append(threading.current_thread())
        self.times.append(time.monotonic())
        self.fired.set()

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def default_config():
    return DebounceConfig()


@pytest.fixture
def runner():
    elt = _EventLoopThread()
    elt.start()
    yield elt
    elt.shutdown()
