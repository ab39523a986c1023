"""Tests for SecureRandom."""

from __future__ import annotations

import pytest

from secretgen.secure_random import DEFAULT_RANDOM, SecureRandom


def scripted_bytes(*words: int):
    """Byte source returning the given 32-bit words in order."""
    chunks = [w.to_bytes(4, "big") for w in words]
    consumed = []

    def read(n: int) -> bytes:
        assert n == 4
        chunk = chunks.pop(0)
        consumed.append(chunk)
        return chunk

    read.consumed = consumed
    return read


class TestNextBelow:
    def test_values_in_range(self):
        for maximum in (1, 2, 7, 10, 88, 7776):
            for _ in range(50):
                assert 0 <= DEFAULT_RANDOM.next_below(maximum) < maximum

    def test_one_always_zero(self):
        assert SecureRandom().next_below(1) == 0

    @pytest.mark.parametrize("bad", [0, -1, -100])
    def test_non_positive_maximum_raises(self, bad):
        with pytest.raises(ValueError, match="positive"):
            SecureRandom().next_below(bad)

    def test_maximum_above_32_bits_raises(self):
        with pytest.raises(ValueError):
            SecureRandom().next_below((1 << 32) + 1)

    def test_rejects_draw_in_biased_tail(self):
        # 2^32 % 3 == 1, so 0xFFFFFFFF is the single rejected value.
        source = scripted_bytes(0xFFFFFFFF, 5)
        rng = SecureRandom(source)
        assert rng.next_below(3) == 2
        assert len(source.consumed) == 2

    def test_accepts_first_draw_below_limit(self):
        source = scripted_bytes(11)
        assert SecureRandom(source).next_below(10) == 1
        assert len(source.consumed) == 1

    def test_all_values_reachable(self):
        seen = {DEFAULT_RANDOM.next_below(4) for _ in range(400)}
        assert seen == {0, 1, 2, 3}


class TestDraw32:
    def test_big_endian(self):
        assert SecureRandom(lambda n: b"\x00\x00\x01\x02").draw32() == 258

    def test_short_read_raises(self):
        with pytest.raises(RuntimeError):
            SecureRandom(lambda n: b"\x00").draw32()


def test_choice_uses_index():
    rng = SecureRandom(scripted_bytes(2))
    assert rng.choice("abcd") == "c"
