"""Tests for ClickCounter."""

import asyncio

import pytest

from lull.categories import DelayTable
from lull.config import ReconfigurePolicy, Strategy
from lull.errors import InvalidConfiguration, UnknownCategory
from lull.counter import ClickCounter


class TestClickCounterSetup:
    def test_defaults(self):
        counter = ClickCounter()
        assert counter.count == 0
        assert counter.question_type == "page load"
        assert counter.delay == pytest.approx(0.001)

    def test_custom_table(self):
        counter = ClickCounter(DelayTable({"quiz": 0.2}), "quiz")
        assert counter.delay == 0.2

    def test_unknown_initial_type(self):
        with pytest.raises(UnknownCategory):
            ClickCounter(question_type="poem")


class TestClickCounterClicks:
    async def test_page_load_burst_counts_once(self):
        counter = ClickCounter()
        for _ in range(20):
            counter.click()
        counter.select_question_type("essay")

        await asyncio.sleep(0.05)
        assert counter.count == 1
        assert counter.question_type == "essay"
        assert counter.delay == pytest.approx(1.0)

        counter.click()
        await asyncio.sleep(0.05)
        assert counter.count == 1
        counter.close()

    def test_click_now(self):
        counter = ClickCounter()
        counter.click_now()
        counter.click_now()
        assert counter.count == 2

    async def test_set_delay_keeps_question_type(self):
        counter = ClickCounter(question_type="essay")
        counter.set_delay(0.01)
        assert counter.question_type == "essay"
        counter.click()
        await asyncio.sleep(0.05)
        assert counter.count == 1

    def test_set_delay_invalid(self):
        counter = ClickCounter()
        with pytest.raises(InvalidConfiguration):
            counter.set_delay(-5)
        assert counter.delay == pytest.approx(0.001)

    def test_select_unknown_type_changes_nothing(self):
        counter = ClickCounter(question_type="math")
        with pytest.raises(UnknownCategory):
            counter.select_question_type("poem")
        assert counter.question_type == "math"
        assert counter.delay == pytest.approx(0.5)

    async def test_rearm_policy(self):
        counter = ClickCounter(question_type="essay", policy=ReconfigurePolicy.REARM)
        counter.click()
        counter.select_question_type("multiple choice")
        await asyncio.sleep(0.05)
        assert counter.count == 1

    def test_threaded_strategy(self):
        with ClickCounter(strategy=Strategy.THREADED) as counter:
            counter.set_delay(10.0)
            for _ in range(5):
                counter.click()
            counter.debouncer.flush()
            assert counter.count == 1

    def test_repr(self):
        counter = ClickCounter()
        assert repr(counter) == "ClickCounter(count=0, question_type='page load', delay=0.001)"
