"""
Passphrase generation from a word list.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from .config import DEFAULT_PASSPHRASE_CONFIG, PassphraseConfig, WordCase
from .models import GeneratedSecret, SecretKind
from .secure_random import DEFAULT_RANDOM, SecureRandom
from .strength import build_secret
from .wordlist import WORDS

logger = logging.getLogger(__name__)

# Extra entropy credited per word when a case transform is applied.
CASE_FACTOR = 1.5


def word_source(config: PassphraseConfig) -> Sequence[str]:
    """Custom words when given, else the built-in dictionary."""
    return config.custom_words if config.custom_words else WORDS


def estimate_passphrase_entropy(config: PassphraseConfig, dictionary_size: int | None = None) -> float:
    """
    Heuristic entropy in bits for a passphrase config.

    word_count * log2(dictionary_size), plus a bonus for digits
    (log2(word_count * 10) when inserted randomly, log2(10 * word_count / 2)
    when appended) and word_count * log2(1.5) for any non-lowercase case.
    It approximates, and does not equal, the entropy of the actual process.
    """
    size = dictionary_size if dictionary_size is not None else len(word_source(config))
    if size <= 0:
        return 0.0
    n = config.word_count
    entropy = n * math.log2(size)

    if config.include_numbers:
        if config.insert_numbers_randomly:
            entropy += math.log2(n * 10)
        else:
            entropy += math.log2(10 * (n / 2))

    if config.word_case is not WordCase.LOWER:
        entropy += n * math.log2(CASE_FACTOR)

    return entropy


class PassphraseSynthesizer:
    def __init__(self, rng: SecureRandom | None = None) -> None:
        self.rng = rng or DEFAULT_RANDOM

    def apply_case(self, word: str, word_case: WordCase) -> str:
        if word_case is WordCase.UPPER:
            return word.upper()
        if word_case is WordCase.CAPITALIZE:
            return word[:1].upper() + word[1:].lower()
        if word_case is WordCase.MIXED:
            # Whole word upper or lower, never per character.
            return word.upper() if self.rng.next_below(2) else word.lower()
        return word.lower()

    def pick_words(self, config: PassphraseConfig, source: Sequence[str]) -> list[str]:
        return [
            self.apply_case(self.rng.choice(source), config.word_case)
            for _ in range(config.word_count)
        ]

    def insert_random_digits(self, words: list[str]) -> list[str]:
        """
        Add one or two digits to random words.

        Each digit is spliced in at a random offset (both ends included) on a
        coin flip, otherwise appended to the word. Empty words always get it
        appended.
        """
        result = list(words)
        digit_count = 1 + self.rng.next_below(2)
        for _ in range(digit_count):
            index = self.rng.next_below(len(result))
            digit = str(self.rng.next_below(10))
            word = result[index]
            if word and self.rng.next_below(2):
                offset = self.rng.next_below(len(word) + 1)
                result[index] = word[:offset] + digit + word[offset:]
            else:
                result[index] = word + digit
        return result

    def append_digits(self, passphrase: str) -> str:
        digit_count = 2 + self.rng.next_below(3)
        return passphrase + "".join(str(self.rng.next_below(10)) for _ in range(digit_count))

    def generate(self, config: PassphraseConfig | None = None) -> GeneratedSecret:
        cfg = config or DEFAULT_PASSPHRASE_CONFIG
        source = word_source(cfg)
        words = self.pick_words(cfg, source)
        joiner = cfg.separator.joiner

        if cfg.include_numbers and cfg.insert_numbers_randomly:
            passphrase = joiner.join(self.insert_random_digits(words))
        else:
            passphrase = joiner.join(words)
            if cfg.include_numbers:
                passphrase = self.append_digits(passphrase)

        entropy = estimate_passphrase_entropy(cfg, len(source))
        logger.debug("passphrase of %d words from %d-word source", cfg.word_count, len(source))
        return build_secret(passphrase, SecretKind.PASSPHRASE, entropy)


def generate_passphrase(
    config: PassphraseConfig | None = None,
    rng: SecureRandom | None = None,
) -> GeneratedSecret:
    return PassphraseSynthesizer(rng).generate(config)
