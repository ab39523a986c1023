"""
Numeric PINs.
"""

from __future__ import annotations

from .config import DEFAULT_PIN_CONFIG, DIGITS, PinConfig
from .models import GeneratedSecret, SecretKind
from .secure_random import DEFAULT_RANDOM, SecureRandom
from .strength import build_secret, calculate_entropy


def generate_pin(config: PinConfig | None = None, rng: SecureRandom | None = None) -> GeneratedSecret:
    cfg = config or DEFAULT_PIN_CONFIG
    rng = rng or DEFAULT_RANDOM
    pin = "".join(rng.choice(DIGITS) for _ in range(cfg.length))
    return build_secret(pin, SecretKind.PIN, calculate_entropy(pin, DIGITS))
