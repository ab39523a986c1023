"""
Error types raised by the generators.

Only conditions that leave the caller without a usable secret are
exceptions. Soft constraints that could not be met are reported as
warnings on the returned GeneratedSecret instead.
"""


class SecretGenError(Exception):
    """Generic generation error."""


class ConfigError(SecretGenError, ValueError):
    """A config value is out of range or of the wrong kind."""


class EmptyAlphabetError(SecretGenError):
    """No characters are left to draw from. The caller must select at least one class."""

    def __init__(self, message: str = "Please select at least one character type") -> None:
        super().__init__(message)


class PatternError(SecretGenError):
    """A format pattern could not be interpreted."""


class UnknownTokenError(PatternError):
    def __init__(self, token: str, position: int) -> None:
        self.token = token
        self.position = position
        super().__init__(
            f"Unknown format type {token!r} at position {position}. "
            "Use: Nu (uppercase), Nl (lowercase), Nd (digits), N{chars} (custom)"
        )


# Warning text attached to a password whose classes could not all be placed.
ENFORCEMENT_EXHAUSTED = (
    "Could not enforce all character types. "
    "Try increasing length or reducing restrictions."
)
