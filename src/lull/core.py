"""Core Debouncer class, the main entry point for the library."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from lull.config import DebounceConfig, ReconfigurePolicy, Strategy, validate_delay
from lull.strategies.registry import build_strategy

if TYPE_CHECKING:
    from lull.strategies.base import BaseStrategy, ErrorHandler, Operation

logger = logging.getLogger(__name__)


class Debouncer:
    """Collapses bursts of attempts into one trailing call of *operation*.

    Keep one long-lived instance per independently debounced action and
    change its timing with :meth:`reconfigure` rather than building a new
    wrapper.

    Args:
        operation: Callable run once the quiet period after the last
            attempt elapses. Receives that attempt's arguments.
        config: Delay, scheduler backend and reconfigure policy.
        on_error: Receives an :class:`~lull.errors.OperationFailure` when a
            timer-fired operation raises. Failures are logged otherwise.
    """

    __slots__ = ("_closed", "_config", "_strategy")

    def __init__(
        self,
        operation: Operation,
        *,
        config: DebounceConfig | None = None,
        on_error: ErrorHandler | None = None,
    ) -> None:
        self._config = config or DebounceConfig()
        self._strategy: BaseStrategy = build_strategy(self._config, operation, on_error)
        self._closed = False

    @property
    def config(self) -> DebounceConfig:
        return self._config

    @property
    def operation(self) -> Operation:
        return self._strategy.operation

    @property
    def delay(self) -> float:
        return self._strategy.delay

    @delay.setter
    def delay(self, value: float) -> None:
        self.reconfigure(value)

    @property
    def pending(self) -> bool:
        return self._strategy.pending

    @property
    def fire_count(self) -> int:
        return self._strategy.fire_count

    @property
    def closed(self) -> bool:
        return self._closed

    def attempt(self, *args: Any, **kwargs: Any) -> None:
        """Record one event. The operation runs ``delay`` seconds after the last one."""
        self._ensure_open()
        self._strategy.attempt(*args, **kwargs)

    def reconfigure(self, new_delay: float) -> None:
        """Change the delay used by future attempts.

        Under the default ``NEXT_BURST`` policy a pending invocation keeps its
        original schedule; under ``REARM`` it is moved to fire ``new_delay``
        seconds after the last attempt.
        """
        self._ensure_open()
        new_delay = validate_delay(new_delay)
        logger.debug("reconfiguring %r: delay %s -> %s", self, self._strategy.delay, new_delay)
        self._strategy.reconfigure(new_delay)

    def cancel(self) -> bool:
        """Drop any pending invocation without running it."""
        cancelled = self._strategy.cancel()
        if cancelled:
            logger.debug("cancelled pending invocation of %r", self)
        return cancelled

    def flush(self) -> bool:
        """Run a pending invocation right now, in the caller's context."""
        return self._strategy.flush()

    def invoke_now(self, *args: Any, **kwargs: Any) -> Any:
        """Call the operation directly, bypassing debounce entirely."""
        return self._strategy.operation(*args, **kwargs)

    def close(self) -> None:
        """Cancel anything pending and refuse further attempts."""
        if self._closed:
            return
        self._closed = True
        self._strategy.shutdown()

    def __enter__(self) -> Debouncer:
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()

    async def __aenter__(self) -> Debouncer:
        return self

    async def __aexit__(self, *_: Any) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("Debouncer is closed")

    def __repr__(self) -> str:
        return (
            f"Debouncer(delay={self._strategy.delay}, "
            f"strategy={self._config.strategy.value}, "
            f"policy={self._config.policy.value}, "
            f"pending={self._strategy.pending}, "
            f"closed={self._closed})"
        )


def create(
    operation: Operation,
    delay: float,
    *,
    strategy: Strategy = Strategy.TRAILING,
    policy: ReconfigurePolicy = ReconfigurePolicy.NEXT_BURST,
    on_error: ErrorHandler | None = None,
) -> Debouncer:
    """Build a :class:`Debouncer` for *operation* with the given *delay*.

    Raises:
        InvalidConfiguration: *delay* is negative, not finite or not a number.
    """
    config = DebounceConfig(delay=delay, strategy=strategy, policy=policy)
    return Debouncer(operation, config=config, on_error=on_error)
