"""
Password generation with per-class minimums and class enforcement.

Both retry loops are bounded. When a soft constraint still fails after the
last attempt the last candidate is returned anyway; only an empty alphabet
is an error.
"""

from __future__ import annotations

import logging

from .charset import build_character_set, meets_class_requirements, meets_minimum_counts
from .config import DEFAULT_LIMITS, DEFAULT_PASSWORD_CONFIG, GenerationLimits, PasswordConfig
from .errors import ENFORCEMENT_EXHAUSTED, EmptyAlphabetError
from .models import GeneratedSecret, SecretKind
from .secure_random import DEFAULT_RANDOM, SecureRandom
from .strength import build_secret, calculate_entropy

logger = logging.getLogger(__name__)


def get_character_set(config: PasswordConfig | None = None) -> str:
    """Alphabet a config draws from, without generating anything."""
    return build_character_set(config or DEFAULT_PASSWORD_CONFIG)


class PasswordSynthesizer:
    def __init__(
        self,
        rng: SecureRandom | None = None,
        limits: GenerationLimits | None = None,
    ) -> None:
        self.rng = rng or DEFAULT_RANDOM
        self.limits = limits or DEFAULT_LIMITS

    def random_string(self, length: int, alphabet: str) -> str:
        return "".join(self.rng.choice(alphabet) for _ in range(length))

    def _draw_with_minimums(self, config: PasswordConfig, alphabet: str) -> str:
        """
        Draw until the minimum digit/symbol counts hold or attempts run out.
        The last draw is returned either way.
        """
        attempts = 0
        while True:
            candidate = self.random_string(config.length, alphabet)
            attempts += 1
            if meets_minimum_counts(candidate, config):
                return candidate
            if attempts >= self.limits.max_attempts:
                logger.debug("minimum counts not met after %d attempts", attempts)
                return candidate

    def generate(self, config: PasswordConfig | None = None) -> GeneratedSecret:
        cfg = config or DEFAULT_PASSWORD_CONFIG

        alphabet = build_character_set(cfg)
        if not alphabet:
            raise EmptyAlphabetError()

        warnings: tuple[str, ...] = ()

        if not cfg.require_each_class:
            password = self._draw_with_minimums(cfg, alphabet)
        else:
            for retry in range(1, self.limits.max_enforcement_retries + 1):
                password = self._draw_with_minimums(cfg, alphabet)
                if meets_class_requirements(password, cfg):
                    logger.debug("all character types present after %d tries", retry)
                    break
            else:
                logger.warning(ENFORCEMENT_EXHAUSTED)
                warnings = (ENFORCEMENT_EXHAUSTED,)

        entropy = calculate_entropy(password, alphabet)
        return build_secret(
            password,
            SecretKind.PASSWORD,
            entropy,
            warnings=warnings,
            guesses_per_second=self.limits.guesses_per_second,
        )


def generate_password(
    config: PasswordConfig | None = None,
    rng: SecureRandom | None = None,
    limits: GenerationLimits | None = None,
) -> GeneratedSecret:
    """
    High-level function:
    - Build the alphabet (EmptyAlphabetError if nothing is selected).
    - Draw, retrying for minimum counts and class coverage.
    - Grade the result.
    """
    return PasswordSynthesizer(rng, limits).generate(config)
