"""
Entropy mixing:
Combine raw bit streams with XOR, amplify them with a cryptographic hash,
and fold the result into os.urandom output.
"""

from __future__ import annotations

import hashlib
import logging
import os
import threading
from typing import Callable, List

logger = logging.getLogger(__name__)

BitSource = Callable[[], List[int]]


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes (8 bits per byte, MSB first).
    If bits length is not a multiple of 8, pad with zeros at the end.
    """
    if not bits:
        return b""

    pad_len = (8 - (len(bits) % 8)) % 8
    bits_padded = bits + [0] * pad_len

    byte_values = []
    for i in range(0, len(bits_padded), 8):
        byte = 0
        for bit in bits_padded[i : i + 8]:
            byte = (byte << 1) | bit
        byte_values.append(byte)

    return bytes(byte_values)


def xor_bits(streams: List[List[int]]) -> List[int]:
    """XOR equally long bit streams position by position."""
    if not streams:
        return []
    combined = streams[0][:]
    for bits in streams[1:]:
        if len(bits) != len(combined):
            raise ValueError("bit streams have different lengths")
        combined = [b ^ c for b, c in zip(bits, combined)]
    return combined


def xor_bytes(a: bytes, b: bytes) -> bytes:
    if len(a) != len(b):
        raise ValueError("byte strings have different lengths")
    return bytes(x ^ y for x, y in zip(a, b))


def amplify_entropy(bits: List[int], rounds: int = 1) -> bytes:
    """
    Hash the packed bits with SHA-256 `rounds` times and return the digest.

    With rounds <= 0 the packed bits are returned unchanged.
    """
    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()
    return data


class EntropyPool:
    """
    Buffer of amplified bytes refilled from an external bit source.

    Each refill samples `streams` independent bit strings, XOR-combines them
    and amplifies the result. Reads are serialized by a lock so one pool can
    back a SecureRandom shared between threads.
    """

    def __init__(self, bit_source: BitSource, streams: int = 2, rounds: int = 2) -> None:
        if rounds < 1:
            raise ValueError("rounds must be at least 1 so every refill is hashed")
        self._bit_source = bit_source
        self.streams = max(1, streams)
        self.rounds = rounds
        self._buffer = bytearray()
        self._lock = threading.Lock()
        self.refills = 0

    def _refill(self) -> None:
        samples = [self._bit_source() for _ in range(self.streams)]
        self._buffer.extend(amplify_entropy(xor_bits(samples), self.rounds))
        self.refills += 1
        logger.debug("entropy pool refilled (%d refills so far)", self.refills)

    def read(self, n: int) -> bytes:
        with self._lock:
            while len(self._buffer) < n:
                self._refill()
            out = bytes(self._buffer[:n])
            del self._buffer[:n]
        return out


def mixed_byte_source(pool: EntropyPool) -> Callable[[int], bytes]:
    """
    Byte source yielding os.urandom(n) XOR pool.read(n).

    os.urandom stays in the mix, so the result is never weaker than the
    operating system generator alone.
    """

    def read(n: int) -> bytes:
        return xor_bytes(os.urandom(n), pool.read(n))

    return read
