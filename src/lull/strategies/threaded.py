"""Thread-safe trailing-edge debounce driven by a background loop thread."""

import logging
import threading
from asyncio import TimerHandle
from collections.abc import Awaitable
from typing import Any

from lull._sync import _EventLoopThread, get_shared_loop
from lull.config import ReconfigurePolicy, validate_delay
from lull.strategies.base import BaseStrategy, ErrorHandler, Operation

logger = logging.getLogger(__name__)


class ThreadedDebouncer(BaseStrategy):
    """Trailing-edge debounce that may be driven from any thread.

    Timers run on a background event-loop thread (shared by default). Each
    attempt bumps a generation counter under a lock and posts the re-arm to
    the loop; a timer only fires if its generation is still current when it
    elapses. That makes cancel-and-reschedule atomic: however many threads
    call :meth:`attempt` concurrently, at most one timer can ever run the
    operation.

    The operation runs on the background thread, not on the thread that
    called :meth:`attempt`. :meth:`flush` is the exception: it runs the
    operation on the calling thread.

    :meth:`attempt` never runs the operation itself and never waits for it,
    but nothing orders the two threads: with a short delay (``0`` in
    particular) the operation may start, or even finish, before
    :meth:`attempt` has returned to its caller. Only the TRAILING strategy
    guarantees "after ``attempt`` returns".

    Args:
        runner: Background loop to schedule on. Defaults to the shared one.
    """

    __slots__ = ("_active", "_generation", "_handle", "_lock", "_runner")

    def __init__(
        self,
        operation: Operation,
        delay: float,
        *,
        policy: ReconfigurePolicy = ReconfigurePolicy.NEXT_BURST,
        on_error: ErrorHandler | None = None,
        runner: _EventLoopThread | None = None,
    ) -> None:
        super().__init__(operation, delay, policy=policy, on_error=on_error)
        self._runner = runner or get_shared_loop()
        self._lock = threading.Lock()
        self._generation = 0
        self._active = False
        # only touched on the runner's thread
        self._handle: TimerHandle | None = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._active

    def attempt(self, *args: Any, **kwargs: Any) -> None:
        """Supersede any pending timer and post a new one to the runner."""
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._active = True
            now = self._runner.time()
            self._remember(args, kwargs, now)
            deadline = now + self._delay

        self._runner.call_soon(self._arm, generation, deadline)

    def cancel(self) -> bool:
        """Drop the pending invocation. Returns False when idle."""
        with self._lock:
            if not self._active:
                return False
            self._generation += 1
            self._active = False
            self._take_args()

        self._runner.call_soon(self._disarm)
        return True

    def flush(self) -> bool:
        """Run the pending invocation on the calling thread. Returns False when idle."""
        with self._lock:
            if not self._active:
                return False
            self._generation += 1
            self._active = False
            args, kwargs = self._take_args()

        self._runner.call_soon(self._disarm)
        self._fire_now(args, kwargs)
        return True

    def reconfigure(self, delay: float) -> None:
        """Set the delay for future attempts, re-arming under ``REARM``."""
        delay = validate_delay(delay)
        with self._lock:
            self._delay = delay
            if self.policy is not ReconfigurePolicy.REARM or not self._active:
                return
            assert self._scheduled_at is not None
            self._generation += 1
            generation = self._generation
            deadline = self._scheduled_at + delay

        self._runner.call_soon(self._arm, generation, deadline)
        logger.debug("re-armed %r for %.3fs after last attempt", self, delay)

    def _arm(self, generation: int, deadline: float) -> None:
        with self._lock:
            if generation != self._generation:
                return
            if self._handle is not None:
                self._handle.cancel()
            self._handle = self._runner.loop.call_at(deadline, self._on_timer, generation)

    def _disarm(self) -> None:
        with self._lock:
            if self._handle is not None and not self._active:
                self._handle.cancel()
                self._handle = None

    def _on_timer(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or not self._active:
                return
            self._active = False
            self._handle = None
            args, kwargs = self._take_args()

        self._fire(args, kwargs)

    def _count_fire(self) -> None:
        # flush() and the timer path count from different threads
        with self._lock:
            self._fire_count += 1

    def _spawn(self, awaitable: Awaitable[Any]) -> None:
        if self._runner.in_loop_thread():
            super()._spawn(awaitable)
        else:
            self._runner.call_soon(super()._spawn, awaitable)
