"""Decorator API for applying debounce behavior to functions."""

from collections.abc import Callable
from functools import wraps
from typing import Any, Protocol, overload

from lull.config import DebounceConfig, ReconfigurePolicy, Strategy
from lull.core import Debouncer
from lull.strategies.base import ErrorHandler


class DebouncedFunction(Protocol):
    """What ``@debounce`` returns: a callable that schedules instead of running."""

    debouncer: Debouncer

    def __call__(self, *args: Any, **kwargs: Any) -> None: ...

    def cancel(self) -> bool: ...

    def flush(self) -> bool: ...

    def reconfigure(self, new_delay: float) -> None: ...

    def close(self) -> None: ...

    def invoke_now(self, *args: Any, **kwargs: Any) -> Any: ...


@overload
def debounce(
    func: Callable[..., Any],
    /,
) -> DebouncedFunction: ...


@overload
def debounce(
    *,
    delay: float = 0.0,
    strategy: Strategy = Strategy.TRAILING,
    policy: ReconfigurePolicy = ReconfigurePolicy.NEXT_BURST,
    on_error: ErrorHandler | None = None,
) -> Callable[[Callable[..., Any]], DebouncedFunction]: ...


def debounce(
    func: Callable[..., Any] | None = None,
    /,
    *,
    delay: float = 0.0,
    strategy: Strategy = Strategy.TRAILING,
    policy: ReconfigurePolicy = ReconfigurePolicy.NEXT_BURST,
    on_error: ErrorHandler | None = None,
) -> DebouncedFunction | Callable[[Callable[..., Any]], DebouncedFunction]:
    """Decorator that debounces calls to a function.

    Calling the decorated function no longer runs it: each call is an
    ``attempt`` on a private :class:`Debouncer` and returns ``None``. The
    original function runs once per burst, with the arguments of the burst's
    last call. Both plain and ``async`` functions are accepted; an async
    function's coroutine runs as a task on the firing loop.

    All callers share one debouncer, including every instance when the
    decorated function is a method.

    Args:
        func: The function to decorate (when used without parentheses).
        delay: Quiet-period delay in seconds.
        strategy: The scheduler backend to use.
        policy: How ``reconfigure`` treats a pending invocation.
        on_error: Handler for failures of timer-fired calls.

    Examples:
    ```python
        # With parentheses
        @debounce(delay=1.0)
        def save(answer: str) -> None:
            backend.store(answer)

        # Without parentheses (uses defaults)
        @debounce
        async def refresh() -> None:
            await view.redraw()
    ```
    """
    config = DebounceConfig(delay=delay, strategy=strategy, policy=policy)

    def decorator(fn: Callable[..., Any]) -> DebouncedFunction:
        debouncer = Debouncer(fn, config=config, on_error=on_error)

        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> None:
            debouncer.attempt(*args, **kwargs)

        wrapper.debouncer = debouncer  # type: ignore[attr-defined]
        wrapper.cancel = debouncer.cancel  # type: ignore[attr-defined]
        wrapper.flush = debouncer.flush  # type: ignore[attr-defined]
        wrapper.reconfigure = debouncer.reconfigure  # type: ignore[attr-defined]
        wrapper.close = debouncer.close  # type: ignore[attr-defined]
        wrapper.invoke_now = debouncer.invoke_now  # type: ignore[attr-defined]

        return wrapper  # type: ignore[return-value]

    if func is not None:
        return decorator(func)

    return decorator
