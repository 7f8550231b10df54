"""Exceptions raised by the lull library."""

from typing import Any


class InvalidConfiguration(ValueError):
    """Raised when a delay or strategy option is not acceptable.

    Raised synchronously by constructors and ``reconfigure``; the object being
    configured is left untouched.
    """


class OperationFailure(Exception):
    """Wraps an exception raised by a debounced operation fired by a timer.

    Attributes:
        operation: The callable that failed.
        error: The original exception (also available as ``__cause__``).
    """

    def __init__(self, operation: Any, error: BaseException) -> None:
        name = getattr(operation, "__qualname__", None) or repr(operation)
        super().__init__(f"debounced operation {name} failed: {error!r}")
        self.operation = operation
        self.error = error
        self.__cause__ = error


class UnknownCategory(KeyError):
    """Raised when a delay table has no entry for the requested category."""
