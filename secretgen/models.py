"""
Result types shared by all generators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class StrengthLabel(str, Enum):
    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"
    EXCELLENT = "Excellent"


class SecretKind(str, Enum):
    PASSWORD = "password"
    PASSPHRASE = "passphrase"
    FORMAT = "format"
    PIN = "pin"


@dataclass(frozen=True)
class StrengthResult:
    score: int
    label: StrengthLabel


@dataclass(frozen=True)
class GeneratedSecret:
    """
    One generated secret plus its grade.

    The engine keeps no reference to it; the caller owns it from here on.
    """

    value: str
    kind: SecretKind
    strength_score: int
    strength_label: StrengthLabel
    entropy_bits: float
    crack_time_label: str

    # Non-fatal problems hit during generation (e.g. class enforcement gave up).
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "kind": self.kind.value,
            "strength_score": self.strength_score,
            "strength_label": self.strength_label.value,
            "entropy_bits": self.entropy_bits,
            "crack_time_label": self.crack_time_label,
            "warnings": list(self.warnings),
        }
