"""Click counter whose debounce delay follows the selected question type."""

import threading
from typing import Any

from lull.categories import DEFAULT_QUESTION_TYPE, DEFAULT_QUESTION_TYPES, DelayTable
from lull.config import ReconfigurePolicy, Strategy
from lull.core import Debouncer, create


class ClickCounter:
    """State behind a debounced click counter, without any rendering.

    One long-lived :class:`Debouncer` increments :attr:`count`. Selecting a
    question type looks its delay up in *table* and reconfigures that
    debouncer; it is never rebuilt.

    Example::

        counter = ClickCounter()            # "page load": 1 ms
        for _ in range(20):
            counter.click()                 # one increment after the burst
        counter.select_question_type("essay")   # later bursts wait 1 s
    """

    __slots__ = ("_count", "_debouncer", "_lock", "_question_type", "_table")

    def __init__(
        self,
        table: DelayTable | None = None,
        question_type: str = DEFAULT_QUESTION_TYPE,
        *,
        strategy: Strategy = Strategy.TRAILING,
        policy: ReconfigurePolicy = ReconfigurePolicy.NEXT_BURST,
    ) -> None:
        self._table = table if table is not None else DEFAULT_QUESTION_TYPES
        delay = self._table.resolve(question_type)
        self._question_type = question_type
        self._count = 0
        self._lock = threading.Lock()
        self._debouncer = create(self._increment, delay, strategy=strategy, policy=policy)

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    @property
    def delay(self) -> float:
        return self._debouncer.delay

    @property
    def question_type(self) -> str:
        return self._question_type

    @property
    def table(self) -> DelayTable:
        return self._table

    @property
    def debouncer(self) -> Debouncer:
        return self._debouncer

    def click(self) -> None:
        """Debounced click."""
        self._debouncer.attempt()

    def click_now(self) -> None:
        """Non-debounced click: counts immediately."""
        self._debouncer.invoke_now()

    def select_question_type(self, question_type: str) -> None:
        """Switch to *question_type* and use its delay from now on."""
        delay = self._table.resolve(question_type)
        self._debouncer.reconfigure(delay)
        self._question_type = question_type

    def set_delay(self, delay: float) -> None:
        """Override the delay by hand, keeping the selected question type."""
        self._debouncer.reconfigure(delay)

    def close(self) -> None:
        self._debouncer.close()

    def __enter__(self) -> "ClickCounter":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()

    def _increment(self) -> None:
        with self._lock:
            self._count += 1

    def __repr__(self) -> str:
        return f"ClickCounter(count={self.count}, question_type={self._question_type!r}, delay={self.delay})"
