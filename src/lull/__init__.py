"""lull: trailing-edge debouncing for Python.

Collapses bursts of calls into a single trailing invocation once a quiet
period has passed, with a delay that can be changed at runtime.

Basic usage:

    from lull import create

    saver = create(save_answer, 1.0)

    saver.attempt()          # schedules save_answer() for t+1.0s
    saver.attempt()          # reschedules; still one call
    saver.reconfigure(0.5)   # later bursts wait 0.5s

Decorator usage:

    from lull import debounce

    @debounce(delay=0.5)
    def save(answer: str) -> None:
        backend.store(answer)
"""

from lull.categories import DEFAULT_QUESTION_TYPE, DEFAULT_QUESTION_TYPES, DelayTable
from lull.config import DebounceConfig, ReconfigurePolicy, Strategy
from lull.core import Debouncer, create
from lull.counter import ClickCounter
from lull.decorator import debounce
from lull.errors import InvalidConfiguration, OperationFailure, UnknownCategory
from lull.strategies.base import BaseStrategy
from lull.strategies.threaded import ThreadedDebouncer
from lull.strategies.trailing import TrailingDebouncer

__all__ = [
    "DEFAULT_QUESTION_TYPE",
    "DEFAULT_QUESTION_TYPES",
    "BaseStrategy",
    "ClickCounter",
    "DebounceConfig",
    "Debouncer",
    "DelayTable",
    "InvalidConfiguration",
    "OperationFailure",
    "ReconfigurePolicy",
    "Strategy",
    "ThreadedDebouncer",
    "TrailingDebouncer",
    "UnknownCategory",
    "create",
    "debounce",
]

__version__ = "0.1.0"
