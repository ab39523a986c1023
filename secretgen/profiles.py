"""
Saved generator settings.

A profile is one of four variants, each carrying the config type of its
mode, so the mode is known from the type alone.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import ClassVar, Union

from .config import FormatConfig, PassphraseConfig, PasswordConfig, PinConfig
from .models import GeneratedSecret, SecretKind
from .passphrase import generate_passphrase
from .password import generate_password
from .pattern import generate_from_pattern
from .pin import generate_pin
from .secure_random import SecureRandom


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class PasswordProfile:
    kind: ClassVar[SecretKind] = SecretKind.PASSWORD
    name: str
    settings: PasswordConfig = field(default_factory=PasswordConfig)
    favorite: bool = False
    id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class PassphraseProfile:
    kind: ClassVar[SecretKind] = SecretKind.PASSPHRASE
    name: str
    settings: PassphraseConfig = field(default_factory=PassphraseConfig)
    favorite: bool = False
    id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class FormatProfile:
    kind: ClassVar[SecretKind] = SecretKind.FORMAT
    name: str
    settings: FormatConfig = field(default_factory=FormatConfig)
    favorite: bool = False
    id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class PinProfile:
    kind: ClassVar[SecretKind] = SecretKind.PIN
    name: str
    settings: PinConfig = field(default_factory=PinConfig)
    favorite: bool = False
    id: str = field(default_factory=_new_id)


Profile = Union[PasswordProfile, PassphraseProfile, FormatProfile, PinProfile]


def generate_from_profile(profile: Profile, rng: SecureRandom | None = None) -> GeneratedSecret:
    """Run the generator matching the profile's variant."""
    if isinstance(profile, PasswordProfile):
        return generate_password(profile.settings, rng)
    if isinstance(profile, PassphraseProfile):
        return generate_passphrase(profile.settings, rng)
    if isinstance(profile, FormatProfile):
        return generate_from_pattern(profile.settings.pattern, rng)
    if isinstance(profile, PinProfile):
        return generate_pin(profile.settings, rng)
    raise TypeError(f"not a profile: {profile!r}")
