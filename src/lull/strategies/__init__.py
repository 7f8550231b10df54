from lull.strategies.base import BaseStrategy
from lull.strategies.registry import build_strategy
from lull.strategies.threaded import ThreadedDebouncer
from lull.strategies.trailing import TrailingDebouncer

__all__ = [
    "BaseStrategy",
    "ThreadedDebouncer",
    "TrailingDebouncer",
    "build_strategy",
]
