"""
Credential generator package: passwords, passphrases, patterned secrets
and PINs from a cryptographically secure random source, each graded with
a heuristic strength and entropy estimate.
"""

from .config import (
    DEFAULT_FORMAT_CONFIG,
    DEFAULT_LIMITS,
    DEFAULT_PASSPHRASE_CONFIG,
    DEFAULT_PASSWORD_CONFIG,
    DEFAULT_PIN_CONFIG,
    CharClass,
    FormatConfig,
    GenerationLimits,
    PassphraseConfig,
    PasswordConfig,
    PinConfig,
    Separator,
    WordCase,
)
from .errors import (
    ConfigError,
    EmptyAlphabetError,
    PatternError,
    SecretGenError,
    UnknownTokenError,
)
from .models import GeneratedSecret, SecretKind, StrengthLabel, StrengthResult
from .passphrase import estimate_passphrase_entropy, generate_passphrase
from .password import generate_password, get_character_set
from .pattern import generate_from_pattern, preset_pattern, resolved_alphabet
from .pin import generate_pin
from .profiles import (
    FormatProfile,
    PassphraseProfile,
    PasswordProfile,
    PinProfile,
    Profile,
    generate_from_profile,
)
from .secure_random import SecureRandom
from .strength import (
    calculate_entropy,
    calculate_strength,
    estimate_time_to_crack,
    grade_entropy,
)

__all__ = [
    "CharClass",
    "ConfigError",
    "DEFAULT_FORMAT_CONFIG",
    "DEFAULT_LIMITS",
    "DEFAULT_PASSPHRASE_CONFIG",
    "DEFAULT_PASSWORD_CONFIG",
    "DEFAULT_PIN_CONFIG",
    "EmptyAlphabetError",
    "FormatConfig",
    "FormatProfile",
    "GeneratedSecret",
    "GenerationLimits",
    "PassphraseConfig",
    "PassphraseProfile",
    "PasswordConfig",
    "PasswordProfile",
    "PatternError",
    "PinConfig",
    "PinProfile",
    "Profile",
    "SecretGenError",
    "SecretKind",
    "SecureRandom",
    "Separator",
    "StrengthLabel",
    "StrengthResult",
    "UnknownTokenError",
    "WordCase",
    "calculate_entropy",
    "calculate_strength",
    "estimate_passphrase_entropy",
    "estimate_time_to_crack",
    "generate_from_pattern",
    "generate_from_profile",
    "generate_passphrase",
    "generate_password",
    "generate_pin",
    "get_character_set",
    "grade_entropy",
    "preset_pattern",
    "resolved_alphabet",
]
