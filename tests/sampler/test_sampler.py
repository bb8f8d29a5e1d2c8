"""Tests for random parity sampling."""

import random

import pytest

from paritybits.bitops import popcount
from paritybits.sampler import (
    EVEN_FALLBACK,
    ODD_FALLBACK,
    random_even,
    random_odd,
    random_with_parity,
)
from paritybits.types import Parity


@pytest.mark.parametrize("byte", range(256))
def test_random_odd_five_bits_any_byte(byte, scripted_source):
    value = random_odd(5, scripted_source([byte]))
    assert 16 <= value <= 31
    assert popcount(value) % 2 == 1


@pytest.mark.parametrize("byte", range(256))
def test_random_even_five_bits_any_byte(byte, scripted_source):
    value = random_even(5, scripted_source([byte]))
    assert 16 <= value <= 31
    assert popcount(value) % 2 == 0


def test_draws_ceil_bytes(scripted_source):
    for bit_length, expected in [(1, 1), (8, 1), (9, 2), (16, 2), (17, 3), (64, 8)]:
        source = scripted_source(bytes(expected))
        random_odd(bit_length, source)
        assert source.requests == [expected]


@pytest.mark.parametrize("bit_length", [1, 2, 7, 8, 9, 15, 16, 33, 100, 257])
def test_exact_bit_length_and_parity(bit_length):
    rng = random.Random(bit_length)
    for _ in range(200):
        odd = random_odd(bit_length, rng)
        assert odd.bit_length() == bit_length
        assert popcount(odd) % 2 == 1

        even = random_even(bit_length, rng)
        assert popcount(even) % 2 == 0
        # A lone leading one corrects to zero and falls back to 3
        assert even.bit_length() == bit_length or even == EVEN_FALLBACK


def test_little_endian_top_byte_forced(scripted_source):
    # Low byte kept as drawn, top byte 0x00 becomes the leading one
    # 0b100000011 has odd popcount, so the even draw drops bit 0
    assert random_even(9, scripted_source([0b00000011, 0x00])) == 0b100000010
    raw = random_odd(9, scripted_source([0b00000011, 0x00]))
    assert raw == 0b100000011


def test_parity_correction_clears_lowest_set_bit(scripted_source):
    # 0xFF >> 3 with the top bit forced is 0b11111 (odd); even clears bit 0
    assert random_even(5, scripted_source([0xFF])) == 0b11110
    # 0b11000 is even; odd clears bit 3
    assert random_odd(5, scripted_source([0b11000000])) == 0b10000


def test_zero_length_even():
    assert random_even(0, None) == 0
    assert random_even(0, None, allow_zero=True) == 3


def test_zero_length_draws_no_bytes(scripted_source):
    source = scripted_source(b"")
    random_even(0, source)
    random_even(0, source, allow_zero=True)
    assert source.requests == []


def test_zero_length_odd_is_unsatisfiable(scripted_source):
    with pytest.raises(ValueError):
        random_odd(0, scripted_source(b"\x00"))


def test_one_bit_even_fallback(scripted_source):
    # A one-bit draw is always 1, which is odd; correction leaves zero
    assert random_even(1, scripted_source([0x00])) == EVEN_FALLBACK
    assert random_even(1, scripted_source([0x00]), allow_zero=True) == 0


def test_one_bit_odd_is_one(scripted_source):
    assert random_odd(1, scripted_source([0xAB])) == 1
    assert ODD_FALLBACK == 1


def test_negative_bit_length_rejected(scripted_source):
    with pytest.raises(ValueError):
        random_odd(-1, scripted_source(b"\x00"))
    with pytest.raises(ValueError):
        random_even(-2, scripted_source(b"\x00"))


def test_source_errors_propagate(failing_source):
    with pytest.raises(OSError, match="entropy"):
        random_odd(12, failing_source(OSError("entropy gone")))
    with pytest.raises(RuntimeError):
        random_even(3, failing_source(RuntimeError("boom")))


def test_short_read_rejected(scripted_source):
    with pytest.raises(ValueError, match="expected 2"):
        random_odd(16, scripted_source(b"\x01"))


def test_deterministic_for_identical_streams(scripted_source):
    data = bytes(range(1, 33))
    first = [random_odd(37, scripted_source(data[i : i + 5])) for i in range(0, 25, 5)]
    second = [random_odd(37, scripted_source(data[i : i + 5])) for i in range(0, 25, 5)]
    assert first == second

    a = [random_even(70, random.Random(9)) for _ in range(3)]
    b = [random_even(70, random.Random(9)) for _ in range(3)]
    assert a == b


def test_random_with_parity_dispatch(scripted_source):
    assert random_with_parity(5, Parity.ODD, scripted_source([0b11000000])) == 0b10000
    assert random_with_parity(5, Parity.EVEN, scripted_source([0xFF])) == 0b11110
    assert random_with_parity(0, Parity.EVEN, None, allow_zero=True) == 3
    with pytest.raises(ValueError):
        random_with_parity(0, Parity.ODD, None)


def test_system_random_is_a_byte_source():
    value = random_odd(48, random.SystemRandom())
    assert value.bit_length() == 48
    assert popcount(value) % 2 == 1


@pytest.mark.parametrize("parity", [Parity.EVEN, Parity.ODD])
def test_random_with_parity_matches_parity_of(parity):
    rng = random.Random(int(parity) + 3)
    for bit_length in (2, 9, 64):
        assert Parity.of(random_with_parity(bit_length, parity, rng)) is parity
