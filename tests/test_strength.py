"""Tests for strength scoring, entropy and crack-time estimates."""

from __future__ import annotations

import math

import pytest

from secretgen.models import SecretKind, StrengthLabel
from secretgen.strength import (
    build_secret,
    calculate_entropy,
    calculate_strength,
    estimate_time_to_crack,
    grade_entropy,
    score_to_label,
    strength_description,
)


def bits_for(seconds: float) -> float:
    """Entropy whose average crack time is `seconds` at 1e12 guesses/s."""
    return 1 + math.log2(seconds * 1e12)


class TestCalculateStrength:
    def test_empty(self):
        result = calculate_strength("")
        assert result.score == 0
        assert result.label is StrengthLabel.WEAK

    def test_strong(self):
        result = calculate_strength("Kx9!mP2@Qz7#Lw4$")
        assert result.score == 8
        assert result.label is StrengthLabel.STRONG

    def test_excellent(self):
        result = calculate_strength("Kx9!mP2@Qz7#Lw4$Vb8%")
        assert result.score == 9
        assert result.label is StrengthLabel.EXCELLENT

    def test_sequence_penalties(self):
        assert calculate_strength("abc123").score == 1

    def test_letter_sequence_case_insensitive(self):
        assert calculate_strength("XYZ").score == 1

    def test_repeat_penalty_clamped(self):
        assert calculate_strength("aaa").score == 0

    def test_fair_word(self):
        result = calculate_strength("password")
        assert result.score == 3
        assert result.label is StrengthLabel.FAIR

    @pytest.mark.parametrize(
        "score,label",
        [(0, "Weak"), (2, "Weak"), (3, "Fair"), (4, "Fair"), (5, "Good"), (6, "Good"),
         (7, "Strong"), (8, "Strong"), (9, "Excellent"), (12, "Excellent")],
    )
    def test_labels(self, score, label):
        assert score_to_label(score).value == label


class TestCalculateEntropy:
    def test_exact_power_of_two(self):
        assert calculate_entropy("aaaa", "ab") == 4.0

    def test_empty_inputs(self):
        assert calculate_entropy("", "ab") == 0.0
        assert calculate_entropy("abc", "") == 0.0

    def test_large_space_does_not_overflow(self):
        assert calculate_entropy("x" * 128, "y" * 94) == pytest.approx(128 * math.log2(94))


class TestTimeToCrack:
    def test_instantly(self):
        assert estimate_time_to_crack(0) == "Instantly"
        assert estimate_time_to_crack(bits_for(59)) == "Instantly"

    def test_minutes(self):
        assert estimate_time_to_crack(bits_for(180)) == "3 minutes"

    def test_hours(self):
        assert estimate_time_to_crack(bits_for(7_200)) == "2 hours"

    def test_days(self):
        assert estimate_time_to_crack(bits_for(3 * 86_400)) == "3 days"

    def test_years(self):
        assert estimate_time_to_crack(bits_for(5 * 31_536_000)) == "5 years"

    def test_centuries(self):
        assert estimate_time_to_crack(200) == "Centuries"
        assert estimate_time_to_crack(5000) == "Centuries"

    def test_guess_rate(self):
        assert estimate_time_to_crack(bits_for(180), guesses_per_second=1e15) == "Instantly"


class TestGrading:
    @pytest.mark.parametrize(
        "bits,score,label",
        [(0, 2, "Weak"), (59.9, 2, "Weak"), (60, 4, "Fair"), (80, 6, "Good"),
         (100, 8, "Strong"), (120, 10, "Excellent")],
    )
    def test_grade_entropy(self, bits, score, label):
        result = grade_entropy(bits)
        assert result.score == score
        assert result.label.value == label

    def test_descriptions(self):
        assert strength_description("Weak", "passphrase").startswith("Easy to guess")
        assert strength_description(StrengthLabel.GOOD, SecretKind.FORMAT).startswith("Solid password")
        assert strength_description("Bogus") == ""
        assert strength_description("Weak", SecretKind.PIN) == ""


def test_build_secret():
    secret = build_secret("aaaa", SecretKind.PIN, 4.0, warnings=("w",))
    assert secret.value == "aaaa"
    assert secret.crack_time_label == "Instantly"
    assert secret.warnings == ("w",)
    assert secret.to_dict()["kind"] == "pin"
