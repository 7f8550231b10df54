"""Maps each ``Strategy`` enum member to a callable that builds a ``BaseStrategy``.

When you add a new strategy:

1. Add a variant to the ``Strategy`` enum in ``config.py``.
2. Add an entry to ``REGISTRY`` pointing to a factory function or lambda
   that constructs the concrete strategy from a :class:`DebounceConfig`,
   the operation and the optional error handler.
"""

from __future__ import annotations

from collections.abc import Callable

from lull.config import DebounceConfig, Strategy
from lull.errors import InvalidConfiguration
from lull.strategies.base import BaseStrategy, ErrorHandler, Operation
from lull.strategies.threaded import ThreadedDebouncer
from lull.strategies.trailing import TrailingDebouncer

StrategyFactory = Callable[[DebounceConfig, Operation, ErrorHandler | None], BaseStrategy]

REGISTRY: dict[Strategy, StrategyFactory] = {
    Strategy.TRAILING: lambda cfg, operation, on_error: TrailingDebouncer(
        operation,
        cfg.delay,
        policy=cfg.policy,
        on_error=on_error,
    ),
    Strategy.THREADED: lambda cfg, operation, on_error: ThreadedDebouncer(
        operation,
        cfg.delay,
        policy=cfg.policy,
        on_error=on_error,
    ),
}


def build_strategy(
    config: DebounceConfig,
    operation: Operation,
    on_error: ErrorHandler | None = None,
) -> BaseStrategy:
    """Resolve *config.strategy* to a concrete ``BaseStrategy`` instance."""
    factory = REGISTRY.get(config.strategy)
    if not factory:
        raise InvalidConfiguration(
            f"Unknown strategy: {config.strategy!r}. Registered: {', '.join(s.value for s in REGISTRY)}"
        )
    return factory(config, operation, on_error)
