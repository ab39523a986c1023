"""
Strength estimation.

Three independent heuristics, all pure functions of their inputs:

- calculate_strength: a 0-9 score from length, character variety,
  uniqueness and a few pattern penalties.
- calculate_entropy: log2 of the search space for a uniformly drawn string.
- estimate_time_to_crack: a coarse label for an offline attacker doing a
  fixed number of guesses per second.

None of this is a rigorous security guarantee; it is meant for relative
comparison between secrets.
"""

from __future__ import annotations

import math
import re

from .config import GUESSES_PER_SECOND
from .models import GeneratedSecret, SecretKind, StrengthLabel, StrengthResult

LOWERCASE_RE = re.compile(r"[a-z]")
UPPERCASE_RE = re.compile(r"[A-Z]")
DIGIT_RE = re.compile(r"[0-9]")
SPECIAL_CHAR_RE = re.compile(r"[^a-zA-Z0-9]")
REPEATED_CHARS_RE = re.compile(r"(.)\1{2,}", re.DOTALL)
SEQUENTIAL_NUMBERS_RE = re.compile(r"012|123|234|345|456|567|678|789|890")
SEQUENTIAL_LETTERS_RE = re.compile(
    r"abc|bcd|cde|def|efg|fgh|ghi|hij|ijk|jkl|klm|lmn|mno|nop|opq|pqr|qrs|rst"
    r"|stu|tuv|uvw|vwx|wxy|xyz",
    re.IGNORECASE,
)

LENGTH_STEPS = (8, 12, 16, 20)
UNIQUE_RATIO = 0.7

# Entropy grading thresholds in bits (Weak below 60, ..., Excellent from 120).
ENTROPY_WEAK = 60
ENTROPY_FAIR = 80
ENTROPY_GOOD = 100
ENTROPY_STRONG = 120

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3_600
SECONDS_PER_DAY = 86_400
SECONDS_PER_YEAR = 31_536_000

# Largest exponent a float power of two can hold.
_MAX_FLOAT_EXP = 1023


def _character_variety(secret: str) -> int:
    score = 0
    for pattern in (LOWERCASE_RE, UPPERCASE_RE, DIGIT_RE, SPECIAL_CHAR_RE):
        if pattern.search(secret):
            score += 1
    return score


def _pattern_penalties(secret: str) -> int:
    penalties = 0
    for pattern in (REPEATED_CHARS_RE, SEQUENTIAL_NUMBERS_RE, SEQUENTIAL_LETTERS_RE):
        if pattern.search(secret):
            penalties += 1
    return penalties


def score_to_label(score: int) -> StrengthLabel:
    if score <= 2:
        return StrengthLabel.WEAK
    if score <= 4:
        return StrengthLabel.FAIR
    if score <= 6:
        return StrengthLabel.GOOD
    if score <= 8:
        return StrengthLabel.STRONG
    return StrengthLabel.EXCELLENT


def calculate_strength(secret: str) -> StrengthResult:
    length = len(secret)
    score = sum(1 for step in LENGTH_STEPS if length >= step)
    score += _character_variety(secret)

    # Bonus for high diversity
    if len(set(secret)) > length * UNIQUE_RATIO:
        score += 1

    score -= _pattern_penalties(secret)
    score = max(0, score)
    return StrengthResult(score=score, label=score_to_label(score))


def calculate_entropy(secret: str, alphabet: str) -> float:
    """
    log2(|alphabet| ** len(secret)); 0.0 when either is empty.

    The power is computed on Python integers, so the result is exact for
    power-of-two alphabets and never overflows.
    """
    if not (secret and alphabet):
        return 0.0
    return math.log2(len(alphabet) ** len(secret))


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def estimate_time_to_crack(
    entropy_bits: float,
    guesses_per_second: float = GUESSES_PER_SECOND,
) -> str:
    # On average half the space is searched before a hit.
    if entropy_bits - 1 > _MAX_FLOAT_EXP:
        return "Centuries"
    seconds = 2.0 ** (entropy_bits - 1) / guesses_per_second

    if seconds < SECONDS_PER_MINUTE:
        return "Instantly"
    if seconds < SECONDS_PER_HOUR:
        return f"{_round_half_up(seconds / SECONDS_PER_MINUTE)} minutes"
    if seconds < SECONDS_PER_DAY:
        return f"{_round_half_up(seconds / SECONDS_PER_HOUR)} hours"
    if seconds < SECONDS_PER_YEAR:
        return f"{_round_half_up(seconds / SECONDS_PER_DAY)} days"
    if seconds < SECONDS_PER_YEAR * 1000:
        return f"{_round_half_up(seconds / SECONDS_PER_YEAR)} years"
    return "Centuries"


def grade_entropy(entropy_bits: float) -> StrengthResult:
    """
    Coarse grade from entropy alone, for settings previews where no
    concrete secret exists yet. Scores run 2, 4, 6, 8, 10.
    """
    if entropy_bits < ENTROPY_WEAK:
        return StrengthResult(2, StrengthLabel.WEAK)
    if entropy_bits < ENTROPY_FAIR:
        return StrengthResult(4, StrengthLabel.FAIR)
    if entropy_bits < ENTROPY_GOOD:
        return StrengthResult(6, StrengthLabel.GOOD)
    if entropy_bits < ENTROPY_STRONG:
        return StrengthResult(8, StrengthLabel.STRONG)
    return StrengthResult(10, StrengthLabel.EXCELLENT)


_DESCRIPTIONS: dict[SecretKind, dict[StrengthLabel, str]] = {
    SecretKind.PASSWORD: {
        StrengthLabel.WEAK: "Easy to crack. Increase length or add more character types.",
        StrengthLabel.FAIR: "Moderately secure. More length or variety would help.",
        StrengthLabel.GOOD: "Solid password. Increasing length would make it even better.",
        StrengthLabel.STRONG: "Very difficult to crack. Great choice.",
        StrengthLabel.EXCELLENT: "Maximum protection. Outstanding strength.",
    },
    SecretKind.PASSPHRASE: {
        StrengthLabel.WEAK: "Easy to guess. Try more words or add numbers.",
        StrengthLabel.FAIR: "Moderately secure. More words would strengthen it.",
        StrengthLabel.GOOD: "Solid passphrase. More words would help even more.",
        StrengthLabel.STRONG: "Very difficult to crack. Great choice.",
        StrengthLabel.EXCELLENT: "Maximum protection. Outstanding strength.",
    },
    SecretKind.FORMAT: {
        StrengthLabel.WEAK: "Easy to crack. Increase format complexity.",
        StrengthLabel.FAIR: "Moderately secure. Adjust format for more variety.",
        StrengthLabel.GOOD: "Solid password. More character types would strengthen it.",
        StrengthLabel.STRONG: "Very difficult to crack. Great choice.",
        StrengthLabel.EXCELLENT: "Maximum protection. Outstanding strength.",
    },
}


def strength_description(label: StrengthLabel | str, kind: SecretKind | str = SecretKind.PASSWORD) -> str:
    """Advice text for a label; empty string for unknown labels or kinds."""
    try:
        return _DESCRIPTIONS[SecretKind(kind)][StrengthLabel(label)]
    except (KeyError, ValueError):
        return ""


def build_secret(
    value: str,
    kind: SecretKind,
    entropy_bits: float,
    warnings: tuple[str, ...] = (),
    guesses_per_second: float = GUESSES_PER_SECOND,
) -> GeneratedSecret:
    """Grade a finished secret and wrap it for the caller."""
    strength = calculate_strength(value)
    return GeneratedSecret(
        value=value,
        kind=kind,
        strength_score=strength.score,
        strength_label=strength.label,
        entropy_bits=entropy_bits,
        crack_time_label=estimate_time_to_crack(entropy_bits, guesses_per_second),
        warnings=warnings,
    )
