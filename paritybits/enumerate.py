"""Exhaustive enumeration of fixed-width patterns by popcount parity.

The sequences are built by the doubling construction: every width-``w``
pattern is a width-``w-1`` pattern with a 0 or a 1 prepended as the high bit.
A leading 0 keeps the parity of the remainder and a leading 1 flips it, so

    even(w) = even(w-1) + [2**(w-1) + p for p in odd(w-1)]
    odd(w)  = odd(w-1)  + [2**(w-1) + p for p in even(w-1)]

bottoming out in small fixed tables. Output is exponential in ``width``; the
iterators are lazy, so a consumer can stop after any prefix. The construction
is driven from an explicit stack, so width is bounded only by memory.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from paritybits.config import PARITY_CONFIG
from paritybits.logging import get_logger
from paritybits.types import BitPattern, Parity

_logger = get_logger(__name__)

#: Even-popcount patterns for widths 0, 1 and 2.
EVEN_TABLE: Tuple[Tuple[BitPattern, ...], ...] = ((0,), (0,), (0, 3))

#: Odd-popcount patterns for widths 0, 1 and 2. Width 0 has none.
ODD_TABLE: Tuple[Tuple[BitPattern, ...], ...] = ((), (1,), (1, 2))

TABLE_SIZE = len(EVEN_TABLE)


def _check_width(width: int) -> None:
    if isinstance(width, bool) or not isinstance(width, int):
        raise ValueError(f"width must be an integer, got {type(width).__name__}")
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")
    if PARITY_CONFIG.is_large_width(width):
        _logger.warning(
            f"Enumerating width {width} yields 2**{width - 1} patterns per parity"
        )


def _iter_parity(width: int, parity: Parity) -> Iterator[BitPattern]:
    """Walk the doubling construction with an explicit stack of frames.

    A frame ``(width, parity, offset)`` stands for ``offset + p`` over every
    ``p`` of that width and parity. Expanding a frame pushes the flipped half
    (leading one added to the offset) below the same-parity half, so frames
    pop in construction order. The stack holds at most ``width + 1`` frames
    and nothing past the pulled prefix is expanded.
    """
    stack: List[Tuple[int, Parity, int]] = [(width, parity, 0)]
    while stack:
        level, level_parity, offset = stack.pop()
        if level < TABLE_SIZE:
            table = EVEN_TABLE if level_parity is Parity.EVEN else ODD_TABLE
            for pattern in table[level]:
                yield offset + pattern
            continue

        leading_one = 1 << (level - 1)
        stack.append((level - 1, level_parity.flipped(), offset + leading_one))
        stack.append((level - 1, level_parity, offset))


def all_even(width: int) -> Iterator[BitPattern]:
    """Iterate over every ``width``-bit pattern with an even number of set bits.

    Args:
        width: Number of bit positions. Must be non-negative.

    Returns:
        A lazy iterator over the patterns in construction order.

    Raises:
        ValueError: If ``width`` is negative. Raised at call time, before
            iteration starts.
    """
    _check_width(width)
    _logger.debug(f"Enumerating even-popcount patterns of width {width}")
    return _iter_parity(width, Parity.EVEN)


def all_odd(width: int) -> Iterator[BitPattern]:
    """Iterate over every ``width``-bit pattern with an odd number of set bits.

    Width 0 yields nothing. See :func:`all_even` for arguments and errors.
    """
    _check_width(width)
    _logger.debug(f"Enumerating odd-popcount patterns of width {width}")
    return _iter_parity(width, Parity.ODD)


def all_with_parity(width: int, parity: Parity) -> Iterator[BitPattern]:
    """Dispatch to :func:`all_even` or :func:`all_odd` by ``parity``."""
    if Parity(parity) is Parity.EVEN:
        return all_even(width)
    return all_odd(width)


def count_with_parity(width: int, parity: Parity) -> int:
    """Return how many patterns ``all_with_parity(width, parity)`` yields.

    Half of the ``2**width`` patterns have each parity, except at width 0
    where the single empty pattern is even.
    """
    if isinstance(width, bool) or not isinstance(width, int) or width < 0:
        raise ValueError(f"width must be a non-negative integer, got {width!r}")
    if width == 0:
        return 1 if Parity(parity) is Parity.EVEN else 0
    return 1 << (width - 1)
