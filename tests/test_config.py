"""Tests for DebounceConfig, Strategy, ReconfigurePolicy and validate_delay."""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from lull.config import DebounceConfig, ReconfigurePolicy, Strategy, validate_delay
from lull.errors import InvalidConfiguration


class TestStrategy:
    def test_trailing_value(self):
        assert Strategy.TRAILING == "trailing"

    def test_threaded_value(self):
        assert Strategy.THREADED == "threaded"

    def test_all_are_str(self):
        for s in Strategy:
            assert isinstance(s, str)


class TestReconfigurePolicy:
    def test_values(self):
        assert ReconfigurePolicy.NEXT_BURST == "next_burst"
        assert ReconfigurePolicy.REARM == "rearm"


class TestValidateDelay:
    def test_returns_float(self):
        assert validate_delay(1) == 1.0
        assert isinstance(validate_delay(1), float)

    def test_zero_allowed(self):
        assert validate_delay(0) == 0.0

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(Fraction(1, 2), 0.5), (Decimal("0.5"), 0.5), (Decimal("2"), 2.0)],
    )
    def test_other_real_numbers_accepted(self, value, expected):
        result = validate_delay(value)
        assert result == expected
        assert type(result) is float

    @pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity"), 10**400])
    def test_non_finite_real_numbers_raise(self, value):
        with pytest.raises(InvalidConfiguration, match="must be finite"):
            validate_delay(value)

    def test_negative_fraction_raises(self):
        with pytest.raises(InvalidConfiguration, match="must be non-negative"):
            validate_delay(Fraction(-1, 3))

    def test_negative_raises(self):
        with pytest.raises(InvalidConfiguration, match="delay must be non-negative"):
            validate_delay(-5)

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_raises(self, value):
        with pytest.raises(InvalidConfiguration, match="must be finite"):
            validate_delay(value)

    @pytest.mark.parametrize("value", ["1", None, True])
    def test_non_number_raises(self, value):
        with pytest.raises(InvalidConfiguration, match="must be a number"):
            validate_delay(value)

    def test_custom_name_in_message(self):
        with pytest.raises(InvalidConfiguration, match="timeout must be non-negative"):
            validate_delay(-1, "timeout")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate_delay(-1)


class TestDebounceConfig:
    def test_defaults(self, default_config):
        assert default_config.delay == 0.0
        assert default_config.strategy is Strategy.TRAILING
        assert default_config.policy is ReconfigurePolicy.NEXT_BURST

    def test_custom_values(self):
        cfg = DebounceConfig(delay=1.0, strategy=Strategy.THREADED, policy=ReconfigurePolicy.REARM)
        assert cfg.delay == 1.0
        assert cfg.strategy is Strategy.THREADED
        assert cfg.policy is ReconfigurePolicy.REARM

    def test_string_options_coerced(self):
        cfg = DebounceConfig(strategy="threaded", policy="rearm")  # type: ignore[arg-type]
        assert cfg.strategy is Strategy.THREADED
        assert cfg.policy is ReconfigurePolicy.REARM

    def test_delay_negative_raises(self):
        with pytest.raises(InvalidConfiguration, match="delay must be non-negative"):
            DebounceConfig(delay=-5)

    def test_delay_infinite_raises(self):
        with pytest.raises(InvalidConfiguration, match="delay must be finite"):
            DebounceConfig(delay=math.inf)

    def test_unknown_strategy_raises(self):
        with pytest.raises(InvalidConfiguration, match="Unknown strategy"):
            DebounceConfig(strategy="leading")  # type: ignore[arg-type]

    def test_unknown_policy_raises(self):
        with pytest.raises(InvalidConfiguration, match="Unknown reconfigure policy"):
            DebounceConfig(policy="sometimes")  # type: ignore[arg-type]

    def test_frozen(self, default_config):
        with pytest.raises(AttributeError):
            default_config.delay = 5.0  # type: ignore[misc]

    def test_delay_coerced_to_float(self):
        cfg = DebounceConfig(delay=Fraction(1, 4))
        assert cfg.delay == 0.25
        assert type(cfg.delay) is float
