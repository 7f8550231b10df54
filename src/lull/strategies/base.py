"""Abstract base class that all debounce strategies must implement."""

import asyncio
import inspect
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

from lull.config import ReconfigurePolicy, validate_delay
from lull.errors import OperationFailure

logger = logging.getLogger(__name__)

Operation = Callable[..., Any]
ErrorHandler = Callable[[OperationFailure], None]


class BaseStrategy(ABC):
    """Base class for all debounce strategies.

    A strategy owns at most one pending invocation of *operation*. Every
    :meth:`attempt` cancels the pending one (if any) and schedules a new one
    ``delay`` seconds later; only the last attempt of a burst fires.

    Subclasses implement the timer bookkeeping (:meth:`attempt`,
    :meth:`cancel`, :meth:`flush`, :meth:`reconfigure` and :attr:`pending`).
    This class handles delay validation, the arguments of the latest attempt,
    and running the operation with failure reporting.

    Args:
        operation: Callable invoked when the quiet period elapses. It receives
            the arguments of the last attempt. Coroutine functions are
            supported; their coroutine is run as a task on the firing loop.
        delay: Quiet-period delay in seconds. Must be non-negative and finite.
        policy: How :meth:`reconfigure` treats a pending invocation.
        on_error: Receives an :class:`OperationFailure` when a timer-fired
            operation raises. When omitted the failure is logged.
    """

    __slots__ = (
        "_args",
        "_delay",
        "_fire_count",
        "_kwargs",
        "_on_error",
        "_operation",
        "_scheduled_at",
        "_tasks",
        "policy",
    )

    def __init__(
        self,
        operation: Operation,
        delay: float,
        *,
        policy: ReconfigurePolicy = ReconfigurePolicy.NEXT_BURST,
        on_error: ErrorHandler | None = None,
    ) -> None:
        if not callable(operation):
            raise TypeError(f"operation must be callable, got {operation!r}")

        self._operation = operation
        self._delay = validate_delay(delay)
        self.policy = policy
        self._on_error = on_error
        self._args: tuple[Any, ...] = ()
        self._kwargs: dict[str, Any] = {}
        self._scheduled_at: float | None = None
        self._fire_count = 0
        self._tasks: set[asyncio.Future[Any]] = set()

    @property
    def operation(self) -> Operation:
        return self._operation

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def scheduled_at(self) -> float | None:
        """Scheduler-clock timestamp of the most recent attempt."""
        return self._scheduled_at

    @property
    def fire_count(self) -> int:
        """Number of debounced invocations that have run (timer or flush)."""
        return self._fire_count

    @property
    @abstractmethod
    def pending(self) -> bool:
        """Whether an invocation is currently scheduled."""

    @abstractmethod
    def attempt(self, *args: Any, **kwargs: Any) -> None:
        """Schedule the operation, replacing any pending invocation."""

    @abstractmethod
    def cancel(self) -> bool:
        """Drop the pending invocation without running it."""

    @abstractmethod
    def flush(self) -> bool:
        """Run the pending invocation now, in the caller's context."""

    @abstractmethod
    def reconfigure(self, delay: float) -> None:
        """Change the delay used for future attempts."""

    def shutdown(self) -> None:
        """Cancel whatever is pending. Subclasses may release more."""
        self.cancel()

    def _remember(self, args: tuple[Any, ...], kwargs: dict[str, Any], now: float) -> None:
        self._args = args
        self._kwargs = kwargs
        self._scheduled_at = now

    def _take_args(self) -> tuple[tuple[Any, ...], dict[str, Any]]:
        args, kwargs = self._args, self._kwargs
        self._args, self._kwargs = (), {}
        return args, kwargs

    def _fire(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        """Run the operation from a timer. Failures are reported, never raised."""
        self._count_fire()
        try:
            result = self._operation(*args, **kwargs)
        except Exception as exc:
            self._report(exc)
            return

        if inspect.isawaitable(result):
            self._spawn(result)

    def _fire_now(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        """Run the operation in the caller's context. Failures propagate."""
        self._count_fire()
        result = self._operation(*args, **kwargs)
        if inspect.isawaitable(result):
            self._spawn(result)

    def _count_fire(self) -> None:
        self._fire_count += 1

    def _spawn(self, awaitable: Awaitable[Any]) -> None:
        task = asyncio.ensure_future(awaitable)
        self._tasks.add(task)
        task.add_done_callback(self._task_done)

    def _task_done(self, task: "asyncio.Future[Any]") -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._report(exc)

    def _report(self, exc: BaseException) -> None:
        failure = OperationFailure(self._operation, exc)
        if self._on_error is None:
            logger.error("%s", failure, exc_info=exc)
            return
        try:
            self._on_error(failure)
        except Exception:
            logger.exception("on_error handler raised while reporting %s", failure)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(delay={self._delay}, "
            f"policy={self.policy.value}, pending={self.pending})"
        )
