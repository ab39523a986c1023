"""Tests for config validation."""

from __future__ import annotations

import pytest

from secretgen.config import CharClass, GenerationLimits, PasswordConfig
from secretgen.errors import ConfigError


class TestPasswordConfig:
    @pytest.mark.parametrize("length", [3, 129])
    def test_length_bounds(self, length):
        with pytest.raises(ConfigError):
            PasswordConfig(length=length)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            PasswordConfig(length=0)

    def test_bool_is_not_a_length(self):
        with pytest.raises(ConfigError):
            PasswordConfig(length=True)

    def test_classes_coerced(self):
        cfg = PasswordConfig(classes=["upper", CharClass.DIGIT])
        assert cfg.classes == frozenset({CharClass.UPPER, CharClass.DIGIT})
        assert cfg.has(CharClass.UPPER)
        assert not cfg.has(CharClass.SYMBOL)

    def test_unknown_class(self):
        with pytest.raises(ConfigError):
            PasswordConfig(classes=["emoji"])

    def test_negative_minimum(self):
        with pytest.raises(ConfigError):
            PasswordConfig(min_digits=-1)

    def test_immutable(self):
        cfg = PasswordConfig()
        with pytest.raises(AttributeError):
            cfg.length = 20

    def test_defaults(self):
        cfg = PasswordConfig()
        assert cfg.length == 16
        assert cfg.classes == frozenset(CharClass)
        assert cfg.require_each_class


def test_limits_must_allow_one_attempt():
    with pytest.raises(ConfigError):
        GenerationLimits(max_attempts=0)


@pytest.mark.parametrize("rate", [0, -1e12])
def test_guess_rate_must_be_positive(rate):
    with pytest.raises(ConfigError):
        GenerationLimits(guesses_per_second=rate)
