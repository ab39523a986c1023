"""
Alphabet construction for password generation, plus the class checks the
password generator uses to verify its output.
"""

from __future__ import annotations

import re

from .config import (
    AMBIGUOUS,
    CLASS_CHARSETS,
    SIMILAR,
    SYMBOLS,
    CharClass,
    PasswordConfig,
)

UPPERCASE_RE = re.compile(r"[A-Z]")
LOWERCASE_RE = re.compile(r"[a-z]")
DIGIT_RE = re.compile(r"[0-9]")


def dedupe(chars: str) -> str:
    """Drop repeated characters, keeping first-occurrence order."""
    return "".join(dict.fromkeys(chars))


def build_character_set(config: PasswordConfig) -> str:
    """
    Assemble the alphabet for a password config.

    Enabled classes go in fixed order (Upper, Lower, Digit, Symbol), then the
    custom characters; exclusion filters run last. The result may be empty.
    """
    charset = "".join(
        chars for char_class, chars in CLASS_CHARSETS.items() if config.has(char_class)
    )
    charset += config.custom_chars

    if config.exclude_similar:
        charset = "".join(c for c in charset if c not in SIMILAR)
    if config.exclude_ambiguous:
        charset = "".join(c for c in charset if c not in AMBIGUOUS)

    return dedupe(charset)


def symbol_charset(config: PasswordConfig) -> str:
    """
    Characters that count as symbols for minimum and presence checks:
    the symbol class (when enabled) followed by the custom characters.

    Exclusion filters are not applied.
    """
    return (SYMBOLS if config.has(CharClass.SYMBOL) else "") + config.custom_chars


def symbol_matcher(config: PasswordConfig) -> re.Pattern[str] | None:
    """
    Regex character set matching any symbol, or None if there are none.

    Every character is escaped, so metacharacters in the symbol class or in
    custom characters match literally.
    """
    chars = symbol_charset(config)
    if not chars:
        return None
    return re.compile("[" + "".join(re.escape(c) for c in dedupe(chars)) + "]")


def count_digits(secret: str) -> int:
    return len(DIGIT_RE.findall(secret))


def count_symbols(secret: str, config: PasswordConfig) -> int:
    matcher = symbol_matcher(config)
    if matcher is None:
        return 0
    return len(matcher.findall(secret))


def meets_minimum_counts(secret: str, config: PasswordConfig) -> bool:
    if config.min_digits and count_digits(secret) < config.min_digits:
        return False
    # With no symbol characters at all, the minimum cannot apply.
    if config.min_symbols and symbol_charset(config):
        if count_symbols(secret, config) < config.min_symbols:
            return False
    return True


def meets_class_requirements(secret: str, config: PasswordConfig) -> bool:
    """True if every enabled class appears at least once in the secret."""
    if config.has(CharClass.UPPER) and not UPPERCASE_RE.search(secret):
        return False
    if config.has(CharClass.LOWER) and not LOWERCASE_RE.search(secret):
        return False
    if config.has(CharClass.DIGIT) and not DIGIT_RE.search(secret):
        return False
    if config.has(CharClass.SYMBOL):
        matcher = symbol_matcher(config)
        if matcher is not None and not matcher.search(secret):
            return False
    return True
