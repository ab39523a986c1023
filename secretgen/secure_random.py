"""
Uniform integers from a cryptographically secure byte source.
"""

from __future__ import annotations

import os
from typing import Callable, Sequence, TypeVar

ByteSource = Callable[[int], bytes]

T = TypeVar("T")

_RANGE = 1 << 32


class SecureRandom:
    """
    Draw uniform integers in [0, max) from a byte source.

    The default source is os.urandom. Any callable returning n bytes can be
    plugged in, e.g. a source that mixes extra entropy into os.urandom.
    """

    def __init__(self, byte_source: ByteSource | None = None) -> None:
        self._read = byte_source or os.urandom

    def draw32(self) -> int:
        """One uniform 32-bit unsigned integer."""
        data = self._read(4)
        if len(data) != 4:
            raise RuntimeError(f"byte source returned {len(data)} bytes, expected 4")
        return int.from_bytes(data, "big")

    def next_below(self, maximum: int) -> int:
        """
        Uniform integer in [0, maximum).

        Rejection sampling: draws that fall into the incomplete last block of
        2^32 are discarded, so there is no modulo bias. Fewer than two draws
        are needed on average for any maximum.
        """
        if maximum <= 0:
            raise ValueError(f"maximum must be positive, got {maximum}")
        if maximum > _RANGE:
            raise ValueError(f"maximum must be at most 2^32, got {maximum}")

        limit = _RANGE - (_RANGE % maximum)
        while True:
            value = self.draw32()
            if value < limit:
                return value % maximum

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.next_below(len(seq))]


# Stateless apart from the byte source, so one instance can be shared
# between threads.
DEFAULT_RANDOM = SecureRandom()
