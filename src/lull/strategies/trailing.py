"""Trailing-edge debounce driven by the caller's running asyncio loop."""

import asyncio
import logging
from asyncio import AbstractEventLoop, TimerHandle, get_running_loop
from collections.abc import Awaitable
from typing import Any

from lull.config import ReconfigurePolicy, validate_delay
from lull.strategies.base import BaseStrategy, ErrorHandler, Operation

logger = logging.getLogger(__name__)


class TrailingDebouncer(BaseStrategy):
    """Trailing-edge debounce on a single-threaded cooperative loop.

    How it works:
        - Each attempt cancels the pending timer handle and schedules a new
          one ``delay`` seconds out with ``loop.call_later``.
        - When a handle fires uncancelled, the operation runs with the last
          attempt's arguments and the debouncer becomes idle.
        - ``delay=0`` still goes through the loop: the operation runs on the
          next iteration, never inside ``attempt``.

    Example::

        delay=0.1s

        t=0.00s attempt()   -> schedule for t=0.10
        t=0.03s attempt()   -> cancel, schedule for t=0.13
        t=0.09s attempt()   -> cancel, schedule for t=0.19
        t=0.19s timer fires -> operation() runs once

    Everything happens on the loop's thread, so the operation runs on the
    same thread that called :meth:`attempt`. Attempts must be made from
    inside a running loop.

    Complexity:
        Time:   O(1) per attempt
        Memory: O(1)
    """

    __slots__ = ("_loop", "_timer_handle")

    def __init__(
        self,
        operation: Operation,
        delay: float,
        *,
        policy: ReconfigurePolicy = ReconfigurePolicy.NEXT_BURST,
        on_error: ErrorHandler | None = None,
    ) -> None:
        super().__init__(operation, delay, policy=policy, on_error=on_error)
        self._timer_handle: TimerHandle | None = None
        self._loop: AbstractEventLoop | None = None

    @property
    def pending(self) -> bool:
        return self._timer_handle is not None

    def attempt(self, *args: Any, **kwargs: Any) -> None:
        """Cancel the pending timer (if any) and start a new one."""
        loop = get_running_loop()

        if self._timer_handle is not None:
            self._timer_handle.cancel()

        self._loop = loop
        self._remember(args, kwargs, loop.time())
        self._timer_handle = loop.call_later(self.delay, self._on_timer)

    def cancel(self) -> bool:
        """Cancel the pending timer. Returns False when idle."""
        if self._timer_handle is None:
            return False

        self._timer_handle.cancel()
        self._timer_handle = None
        self._take_args()
        return True

    def flush(self) -> bool:
        """Run the pending invocation immediately. Returns False when idle."""
        if self._timer_handle is None:
            return False

        self._timer_handle.cancel()
        self._timer_handle = None
        args, kwargs = self._take_args()
        self._fire_now(args, kwargs)
        return True

    def reconfigure(self, delay: float) -> None:
        """Set the delay for future attempts, re-arming under ``REARM``."""
        self._delay = validate_delay(delay)

        if self.policy is not ReconfigurePolicy.REARM or self._timer_handle is None:
            return

        assert self._loop is not None and self._scheduled_at is not None
        self._timer_handle.cancel()
        # call_at with a deadline in the past fires on the next iteration
        self._timer_handle = self._loop.call_at(self._scheduled_at + self._delay, self._on_timer)
        logger.debug("re-armed %r for %.3fs after last attempt", self, self._delay)

    def _on_timer(self) -> None:
        self._timer_handle = None
        args, kwargs = self._take_args()
        self._fire(args, kwargs)

    def _spawn(self, awaitable: Awaitable[Any]) -> None:
        task = asyncio.ensure_future(awaitable, loop=self._loop)
        self._tasks.add(task)
        task.add_done_callback(self._task_done)
