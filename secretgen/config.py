"""
Configuration for the secret generators.

Every generation mode takes one immutable config object. Module-level
constants hold the character sets and limits shared by all modes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import ConfigError

# Character sets
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
SIMILAR = "0O1lI"
AMBIGUOUS = "{}[]()\\/'\"~,;.<>"

# Bounds
MIN_PASSWORD_LENGTH = 4
MAX_PASSWORD_LENGTH = 128
MIN_WORDS = 2
MAX_WORDS = 8
MIN_PIN_LENGTH = 4
MAX_PIN_LENGTH = 12

# Retry caps and attacker model
MAX_ATTEMPTS = 100
MAX_ENFORCEMENT_RETRIES = 20
GUESSES_PER_SECOND = 1e12


class CharClass(str, Enum):
    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SYMBOL = "symbol"


# Fixed concatenation order used when building an alphabet.
CLASS_CHARSETS: dict[CharClass, str] = {
    CharClass.UPPER: UPPERCASE,
    CharClass.LOWER: LOWERCASE,
    CharClass.DIGIT: DIGITS,
    CharClass.SYMBOL: SYMBOLS,
}


class Separator(str, Enum):
    HYPHEN = "-"
    UNDERSCORE = "_"
    SPACE = " "
    PERIOD = "."
    NONE = "none"

    @property
    def joiner(self) -> str:
        return "" if self is Separator.NONE else self.value


class WordCase(str, Enum):
    LOWER = "lower"
    UPPER = "upper"
    CAPITALIZE = "capitalize"
    MIXED = "mixed"


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if not low <= value <= high:
        raise ConfigError(f"{name} must be between {low} and {high}, got {value}")


@dataclass(frozen=True)
class PasswordConfig:
    # Desired password length in characters.
    length: int = 16

    # Enabled character classes. Order does not matter here; the alphabet
    # is always assembled Upper, Lower, Digit, Symbol.
    classes: frozenset[CharClass] = frozenset(CharClass)

    # Extra characters appended after the class alphabets.
    custom_chars: str = ""

    exclude_similar: bool = False
    exclude_ambiguous: bool = False

    # None or 0 disables the minimum-count check for that class.
    min_digits: int | None = 1
    min_symbols: int | None = 1

    require_each_class: bool = True

    def __post_init__(self) -> None:
        _check_range("length", self.length, MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH)
        # Accept any iterable of classes (or their string values).
        try:
            classes = frozenset(CharClass(c) for c in self.classes)
        except ValueError as exc:
            raise ConfigError(f"unknown character class: {exc}") from exc
        object.__setattr__(self, "classes", classes)
        for name in ("min_digits", "min_symbols"):
            value = getattr(self, name)
            if value is not None:
                _check_range(name, value, 0, MAX_PASSWORD_LENGTH)

    def has(self, char_class: CharClass) -> bool:
        return char_class in self.classes


@dataclass(frozen=True)
class PassphraseConfig:
    word_count: int = 4
    separator: Separator = Separator.HYPHEN
    word_case: WordCase = WordCase.LOWER
    include_numbers: bool = False
    insert_numbers_randomly: bool = False

    # Empty means "use the built-in dictionary".
    custom_words: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _check_range("word_count", self.word_count, MIN_WORDS, MAX_WORDS)
        try:
            object.__setattr__(self, "separator", Separator(self.separator))
            object.__setattr__(self, "word_case", WordCase(self.word_case))
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        # A bare string would be split into single letters.
        if isinstance(self.custom_words, str):
            raise ConfigError("custom_words must be a sequence of words, not a string")
        object.__setattr__(self, "custom_words", tuple(self.custom_words))


@dataclass(frozen=True)
class FormatConfig:
    # The pattern string is the only input to format generation.
    pattern: str = "1u4l1{-}3d1{-}2l"


@dataclass(frozen=True)
class PinConfig:
    length: int = 4

    def __post_init__(self) -> None:
        _check_range("length", self.length, MIN_PIN_LENGTH, MAX_PIN_LENGTH)


@dataclass(frozen=True)
class GenerationLimits:
    """
    Bounds for the password retry loops and the crack-time model.

    Tests inject small values here to force exhaustion deterministically.
    """

    max_attempts: int = MAX_ATTEMPTS
    max_enforcement_retries: int = MAX_ENFORCEMENT_RETRIES
    guesses_per_second: float = GUESSES_PER_SECOND

    def __post_init__(self) -> None:
        if self.max_attempts < 1 or self.max_enforcement_retries < 1:
            raise ConfigError("retry limits must be at least 1")
        if self.guesses_per_second <= 0:
            raise ConfigError(
                f"guesses_per_second must be positive, got {self.guesses_per_second}"
            )


# Default instances you can import elsewhere
DEFAULT_PASSWORD_CONFIG = PasswordConfig()
DEFAULT_PASSPHRASE_CONFIG = PassphraseConfig()
DEFAULT_FORMAT_CONFIG = FormatConfig()
DEFAULT_PIN_CONFIG = PinConfig()
DEFAULT_LIMITS = GenerationLimits()
