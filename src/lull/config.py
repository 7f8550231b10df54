"""Configuration types for the lull library."""

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import Any

from lull.errors import InvalidConfiguration


class Strategy(StrEnum):
    """Available scheduler backends.

    TRAILING: Timers live on the caller's running asyncio loop.
              The operation runs on the same thread that called ``attempt``.
    THREADED: Timers live on a shared background event-loop thread.
              ``attempt`` is safe from any thread; the operation runs on
              the background thread, concurrently with the caller. With a
              short delay it may run before ``attempt`` has returned;
              ``attempt`` itself never runs it or waits for it.
    """

    TRAILING = "trailing"
    THREADED = "threaded"


class ReconfigurePolicy(StrEnum):
    """What ``reconfigure`` does to an invocation that is already pending.

    NEXT_BURST: The pending invocation keeps its original schedule; the new
                delay applies from the next ``attempt`` on.
    REARM:      The pending invocation is moved to ``scheduled_at + new_delay``.
    """

    NEXT_BURST = "next_burst"
    REARM = "rearm"


def validate_delay(value: Any, name: str = "delay") -> float:
    """Return *value* as a float, or raise :class:`InvalidConfiguration`.

    Any real number is accepted (``Fraction``, ``Decimal``, numpy scalars),
    booleans are not.
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise InvalidConfiguration(f"{name} must be a number, got {value!r}")
    try:
        seconds = float(value)
    except (ValueError, OverflowError):
        raise InvalidConfiguration(f"{name} must be finite, got {value}") from None
    if not math.isfinite(seconds):
        raise InvalidConfiguration(f"{name} must be finite, got {value}")
    if seconds < 0:
        raise InvalidConfiguration(f"{name} must be non-negative, got {value}")
    return seconds


@dataclass(frozen=True, slots=True)
class DebounceConfig:
    """Configuration for a Debouncer instance.

    Attributes:
        delay: Quiet-period delay in seconds. The debouncer waits this long
               after the last attempt before firing. Zero means "on the next
               loop iteration".
        strategy: The scheduler backend to use.
        policy: How ``reconfigure`` treats an already pending invocation.
    """

    delay: float = 0.0
    strategy: Strategy = Strategy.TRAILING
    policy: ReconfigurePolicy = ReconfigurePolicy.NEXT_BURST

    def __post_init__(self) -> None:
        object.__setattr__(self, "delay", validate_delay(self.delay))

        try:
            object.__setattr__(self, "strategy", Strategy(self.strategy))
        except ValueError:
            raise InvalidConfiguration(f"Unknown strategy: {self.strategy!r}") from None

        try:
            object.__setattr__(self, "policy", ReconfigurePolicy(self.policy))
        except ValueError:
            raise InvalidConfiguration(f"Unknown reconfigure policy: {self.policy!r}") from None
