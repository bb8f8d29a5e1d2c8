"""Random patterns of an exact bit length with a required popcount parity.

Bytes come from a caller-supplied source; the samplers never create their own
entropy and never retry. The same byte stream always produces the same value.
"""

from __future__ import annotations

from typing import Protocol

from paritybits.bitops import clear_lowest_set_bit
from paritybits.logging import get_logger
from paritybits.types import BitPattern, Parity

_logger = get_logger(__name__)

#: Smallest non-zero patterns of each parity, used when parity correction
#: would otherwise leave zero.
ODD_FALLBACK: BitPattern = 1
EVEN_FALLBACK: BitPattern = 3


class ByteSource(Protocol):
    """Anything that hands out uniformly distributed bytes.

    ``random.Random`` and ``random.SystemRandom`` both qualify.
    """

    def randbytes(self, n: int) -> bytes:
        """Return ``n`` random bytes."""
        ...


def _check_bit_length(bit_length: int) -> None:
    if isinstance(bit_length, bool) or not isinstance(bit_length, int):
        raise ValueError(
            f"bit_length must be an integer, got {type(bit_length).__name__}"
        )
    if bit_length < 0:
        raise ValueError(f"bit_length must be non-negative, got {bit_length}")


def _draw_exact_length(bit_length: int, source: ByteSource) -> BitPattern:
    """Draw a value whose highest set bit is at ``bit_length - 1``."""
    n_bytes = (bit_length + 7) // 8
    data = bytearray(source.randbytes(n_bytes))
    if len(data) != n_bytes:
        raise ValueError(
            f"Byte source returned {len(data)} bytes, expected {n_bytes}"
        )
    # Little-endian: the last byte is the top one. Force its high bit, then
    # shift it down so the leading one lands at bit_length - 1.
    data[-1] = (0x80 | data[-1]) >> (7 - (bit_length - 1) % 8)
    return int.from_bytes(data, "little")


def _correct_parity(
    value: BitPattern, parity: Parity, allow_zero: bool
) -> BitPattern:
    if Parity.of(value) is parity:
        return value
    # Dropping one set bit flips the parity
    value = clear_lowest_set_bit(value)
    if value == 0 and not allow_zero:
        value = ODD_FALLBACK if parity is Parity.ODD else EVEN_FALLBACK
        _logger.debug(f"Parity correction reached zero, using fallback {value}")
    return value


def random_odd(bit_length: int, source: ByteSource) -> BitPattern:
    """Return a random pattern of ``bit_length`` significant bits with odd popcount.

    Args:
        bit_length: Exact number of significant bits; the bit at
            ``bit_length - 1`` is always set.
        source: Byte source consulted for ``ceil(bit_length / 8)`` bytes.

    Returns:
        A value in ``[2**(bit_length-1), 2**bit_length)`` with odd popcount.

    Raises:
        ValueError: If ``bit_length`` is negative, or zero (no zero-length
            pattern has an odd popcount).
    """
    _check_bit_length(bit_length)
    if bit_length == 0:
        raise ValueError("No pattern of bit length 0 has an odd popcount")

    value = _draw_exact_length(bit_length, source)
    return _correct_parity(value, Parity.ODD, allow_zero=False)


def random_even(
    bit_length: int, source: ByteSource, allow_zero: bool = False
) -> BitPattern:
    """Return a random pattern of ``bit_length`` significant bits with even popcount.

    When correcting the parity of a one-bit draw leaves zero, zero is returned
    only if ``allow_zero`` is set; otherwise the value becomes 3, which has
    two significant bits.

    At ``bit_length == 0`` no bytes are drawn: the result is 0, or 3 when
    ``allow_zero`` is set.

    Raises:
        ValueError: If ``bit_length`` is negative.
    """
    _check_bit_length(bit_length)
    if bit_length == 0:
        return EVEN_FALLBACK if allow_zero else 0

    value = _draw_exact_length(bit_length, source)
    return _correct_parity(value, Parity.EVEN, allow_zero=allow_zero)


def random_with_parity(
    bit_length: int,
    parity: Parity,
    source: ByteSource,
    allow_zero: bool = False,
) -> BitPattern:
    """Dispatch to :func:`random_even` or :func:`random_odd` by ``parity``.

    ``allow_zero`` only affects the even sampler.
    """
    if Parity(parity) is Parity.EVEN:
        return random_even(bit_length, source, allow_zero=allow_zero)
    return random_odd(bit_length, source)
