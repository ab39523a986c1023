"""
Format patterns: a compact description of a fixed-structure secret.

    pattern := segment*
    segment := digits ( 'u' | 'l' | 'd' | '{' chars '}' )

`3u2l4d` means three uppercase letters, two lowercase letters, four digits.
`2{#$%}` means two characters drawn from `#$%`. There is no escaping inside
braces; a missing `}` takes the rest of the string.

Parsing is lenient in two places, kept for compatibility with saved
patterns: characters between segments that do not start with a digit are
skipped, and a digit run at the very end with no type is dropped.
An unknown type letter aborts the whole pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .config import DIGITS, LOWERCASE, UPPERCASE
from .charset import dedupe
from .errors import UnknownTokenError
from .models import GeneratedSecret, SecretKind
from .secure_random import DEFAULT_RANDOM, SecureRandom
from .strength import build_secret, calculate_entropy

TOKEN_CHARSETS: dict[str, str] = {
    "u": UPPERCASE,
    "l": LOWERCASE,
    "d": DIGITS,
}

OPEN_BRACE = "{"
CLOSE_BRACE = "}"


@dataclass(frozen=True)
class Segment:
    count: int
    alphabet: str
    # "u", "l", "d", or "{" for a custom set
    token: str
    position: int


def _is_digit(ch: str) -> bool:
    # Only ASCII digits start a segment; str.isdigit() accepts more.
    return "0" <= ch <= "9"


def parse_pattern(pattern: str) -> Iterator[Segment]:
    """
    Yield the segments of a pattern left to right.

    Raises UnknownTokenError on an unknown type letter. Because this is a
    generator, callers that need all-or-nothing behavior must consume it
    fully before producing output.
    """
    i = 0
    n = len(pattern)
    while i < n:
        if not _is_digit(pattern[i]):
            i += 1
            continue

        start = i
        while i < n and _is_digit(pattern[i]):
            i += 1
        count = int(pattern[start:i])

        if i >= n:
            # Trailing count with no type
            return

        token = pattern[i]
        if token == OPEN_BRACE:
            close = pattern.find(CLOSE_BRACE, i + 1)
            end = n if close == -1 else close
            alphabet = pattern[i + 1 : end]
            i = end + 1
        elif token in TOKEN_CHARSETS:
            alphabet = TOKEN_CHARSETS[token]
            i += 1
        else:
            raise UnknownTokenError(token, i)

        yield Segment(count=count, alphabet=alphabet, token=token, position=start)


def resolved_alphabet(pattern: str) -> str:
    """
    Deduplicated union of every alphabet the pattern references.

    Pure: no randomness is consumed.
    """
    return dedupe("".join(segment.alphabet for segment in parse_pattern(pattern)))


def render_pattern(pattern: str, rng: SecureRandom | None = None) -> str:
    """Draw the characters for a pattern. Nothing is drawn if parsing fails."""
    rng = rng or DEFAULT_RANDOM
    segments = list(parse_pattern(pattern))

    chars: list[str] = []
    for segment in segments:
        if not segment.alphabet:
            continue
        for _ in range(segment.count):
            chars.append(rng.choice(segment.alphabet))
    return "".join(chars)


def generate_from_pattern(pattern: str, rng: SecureRandom | None = None) -> GeneratedSecret:
    value = render_pattern(pattern, rng)
    entropy = calculate_entropy(value, resolved_alphabet(pattern))
    return build_secret(value, SecretKind.FORMAT, entropy)


# ---------- presets ----------


@dataclass(frozen=True)
class PatternPreset:
    name: str
    pattern: str
    description: str = ""


READABLE_PRESETS: dict[str, PatternPreset] = {
    "easy": PatternPreset("Easy", "6l2d", "Simple and memorable, 8 chars"),
    "moderate": PatternPreset("Moderate", "1u4l1{-}3d1{-}2l", "Balanced readability, 12 chars"),
    "strong": PatternPreset("Strong", "1u3l2d1{!@#}1{-}1u3l2d", "Secure yet typeable, 14 chars"),
    "ultra": PatternPreset(
        "Ultra", "1u3l1{!@#$}2d1{-}1u3l1{!@#$}2d1u1l", "Maximum with structure, 17 chars"
    ),
}

TEMPLATES: tuple[PatternPreset, ...] = (
    PatternPreset("Strong Mixed", "2u4l2d2{#$%}"),
    PatternPreset("Alphanumeric", "3u3l4d"),
    PatternPreset("Complex", "1u6l1{@#$}3d1{!%&}"),
    PatternPreset("Simple", "4l4d"),
    PatternPreset("Memorable", "1u4l1{#$%}4d"),
)


def preset_pattern(name: str) -> str:
    """
    Pattern for a readable preset key ("easy", ...) or a template name
    ("Strong Mixed", ...). Raises KeyError for anything else.
    """
    key = name.lower()
    if key in READABLE_PRESETS:
        return READABLE_PRESETS[key].pattern
    for template in TEMPLATES:
        if template.name.lower() == key:
            return template.pattern
    raise KeyError(f"unknown pattern preset: {name!r}")
