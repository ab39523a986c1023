"""Tests for PIN generation."""

from __future__ import annotations

import math

import pytest

from secretgen.config import PinConfig
from secretgen.errors import ConfigError
from secretgen.models import SecretKind
from secretgen.pin import generate_pin


@pytest.mark.parametrize("length", [4, 6, 12])
def test_digits_only(length):
    secret = generate_pin(PinConfig(length=length))
    assert len(secret.value) == length
    assert secret.value.isdigit()
    assert secret.kind is SecretKind.PIN
    assert secret.entropy_bits == pytest.approx(length * math.log2(10))


def test_default_length():
    assert len(generate_pin().value) == 4


def test_scripted(scripted):
    assert generate_pin(PinConfig(length=4), scripted([1, 2, 3, 9])).value == "1239"


@pytest.mark.parametrize("length", [3, 13])
def test_length_bounds(length):
    with pytest.raises(ConfigError):
        PinConfig(length=length)
