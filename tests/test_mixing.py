"""Tests for bit packing, stream mixing and the entropy pool."""

from __future__ import annotations

import hashlib
import threading

import pytest

from secretgen.mixing import (
    EntropyPool,
    amplify_entropy,
    bits_to_bytes,
    mixed_byte_source,
    xor_bits,
    xor_bytes,
)
from secretgen.secure_random import SecureRandom


class TestPacking:
    def test_msb_first(self):
        assert bits_to_bytes([1, 0, 0, 0, 0, 0, 0, 1]) == b"\x81"

    def test_pads_with_zeros(self):
        assert bits_to_bytes([1]) == b"\x80"

    def test_empty(self):
        assert bits_to_bytes([]) == b""


class TestXor:
    def test_combines_streams(self):
        assert xor_bits([[1, 1, 0, 0], [1, 0, 1, 0]]) == [0, 1, 1, 0]

    def test_single_stream_copied(self):
        stream = [1, 0, 1]
        combined = xor_bits([stream])
        assert combined == stream
        assert combined is not stream

    def test_mismatched_streams_raise(self):
        with pytest.raises(ValueError):
            xor_bits([[1, 0], [1]])

    def test_bytes(self):
        assert xor_bytes(b"\x0f\xf0", b"\xff\xff") == b"\xf0\x0f"
        with pytest.raises(ValueError):
            xor_bytes(b"\x00", b"")


def test_amplify_is_repeated_sha256():
    bits = [1, 0, 1, 1, 0, 0, 1, 0]
    once = hashlib.sha256(b"\xb2").digest()
    assert amplify_entropy(bits, rounds=1) == once
    assert amplify_entropy(bits, rounds=2) == hashlib.sha256(once).digest()


class TestEntropyPool:
    def make_pool(self, **kwargs):
        calls = []

        def source():
            calls.append(1)
            return [1, 0] * 16

        return EntropyPool(source, **kwargs), calls

    def test_refills_in_digest_sized_blocks(self):
        pool, calls = self.make_pool(streams=2)
        assert len(pool.read(40)) == 40
        # 32 bytes per refill, two streams sampled per refill
        assert pool.refills == 2
        assert len(calls) == 4

    def test_leftover_bytes_are_served_first(self):
        pool, _ = self.make_pool(streams=1)
        first = pool.read(10)
        rest = pool.read(22)
        assert pool.refills == 1
        assert first + rest == amplify_entropy([1, 0] * 16, rounds=2)

    def test_rounds_must_hash(self):
        with pytest.raises(ValueError):
            EntropyPool(lambda: [0], rounds=0)

    def test_concurrent_reads(self):
        pool, _ = self.make_pool()
        out = []

        def worker():
            out.append(pool.read(16))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert sorted(map(len, out)) == [16] * 8
        assert pool.refills == 4


def test_mixed_source_drives_secure_random():
    pool = EntropyPool(lambda: [0] * 64, streams=1)
    source = mixed_byte_source(pool)
    assert len(source(7)) == 7
    rng = SecureRandom(source)
    assert all(0 <= rng.next_below(10) < 10 for _ in range(20))
