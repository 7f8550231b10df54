"""Tests for the @debounce decorator."""

import asyncio

from lull.config import ReconfigurePolicy, Strategy
from lull.core import Debouncer
from lull.decorator import debounce


class TestDebounceDecorator:
    async def test_without_parentheses(self):
        @debounce
        def handler() -> None:
            pass

        assert isinstance(handler.debouncer, Debouncer)
        assert handler.debouncer.delay == 0.0

    async def test_with_parentheses(self):
        @debounce(delay=0.5, policy=ReconfigurePolicy.REARM)
        def handler() -> None:
            pass

        assert handler.debouncer.delay == 0.5
        assert handler.debouncer.config.policy is ReconfigurePolicy.REARM

    async def test_call_schedules_instead_of_running(self):
        calls = []

        @debounce(delay=0.02)
        def handler(value):
            calls.append(value)

        assert handler("a") is None
        handler("b")
        assert calls == []
        await asyncio.sleep(0.06)
        assert calls == ["b"]

    async def test_async_function(self):
        calls = []

        @debounce(delay=0.01)
        async def handler(value):
            await asyncio.sleep(0)
            calls.append(value)

        handler(1)
        handler(2)
        await asyncio.sleep(0.05)
        assert calls == [2]

    async def test_wrapper_attributes(self):
        @debounce(delay=1.0)
        def handler() -> None:
            pass

        assert callable(handler.cancel)
        assert callable(handler.flush)
        assert callable(handler.reconfigure)
        assert callable(handler.close)
        assert callable(handler.invoke_now)

    async def test_cancel_and_flush(self):
        calls = []

        @debounce(delay=10.0)
        def handler(value):
            calls.append(value)

        handler("dropped")
        assert handler.cancel() is True
        handler("flushed")
        assert handler.flush() is True
        assert calls == ["flushed"]

    async def test_reconfigure(self):
        @debounce(delay=1.0)
        def handler() -> None:
            pass

        handler.reconfigure(0.25)
        assert handler.debouncer.delay == 0.25

    def test_invoke_now(self):
        @debounce(delay=10.0)
        def handler(x):
            return x + 1

        assert handler.invoke_now(1) == 2

    def test_strategy_param(self):
        @debounce(delay=1.0, strategy=Strategy.THREADED)
        def handler() -> None:
            pass

        assert handler.debouncer.config.strategy is Strategy.THREADED

    async def test_on_error_param(self):
        failures = []

        @debounce(on_error=failures.append)
        def handler():
            raise RuntimeError("boom")

        handler()
        await asyncio.sleep(0.01)
        assert len(failures) == 1

    def test_preserves_function_name(self):
        @debounce(delay=1.0)
        def my_handler() -> None:
            """Docs."""

        assert my_handler.__name__ == "my_handler"
        assert my_handler.__doc__ == "Docs."
