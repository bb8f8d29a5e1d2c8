"""Bit-level helpers for patterns stored as arbitrary-precision integers.

Positions count from the least significant bit (position 0). Text renderings
are LSB-first, i.e. position 0 is the leftmost character.
"""

from __future__ import annotations

from typing import Iterable, List


def _check_value(value: int) -> None:
    if value < 0:
        raise ValueError(f"Bit patterns must be non-negative, got {value}")


def _check_position(name: str, pos: int) -> None:
    if pos < 0:
        raise ValueError(f"{name} must be non-negative, got {pos}")


def popcount(value: int) -> int:
    """Return the number of set bits in ``value``."""
    _check_value(value)
    return value.bit_count()


def parity(value: int) -> int:
    """Return ``popcount(value) % 2`` (0 for even, 1 for odd)."""
    return popcount(value) & 1


def clear_lowest_set_bit(value: int) -> int:
    """Return ``value`` with its least significant set bit cleared.

    Zero has no set bit and is returned unchanged.
    """
    _check_value(value)
    return value & (value - 1)


def clear_highest_set_bit(value: int) -> int:
    """Return ``value`` with its most significant set bit cleared."""
    _check_value(value)
    if value == 0:
        return 0
    return clear_bit(value, value.bit_length() - 1)


def set_bit(value: int, pos: int) -> int:
    """Return ``value`` with the bit at ``pos`` set to 1."""
    _check_value(value)
    _check_position("pos", pos)
    return value | (1 << pos)


def clear_bit(value: int, pos: int) -> int:
    """Return ``value`` with the bit at ``pos`` set to 0."""
    _check_value(value)
    _check_position("pos", pos)
    return value & ~(1 << pos)


def is_bit_set(value: int, pos: int, width: int) -> bool:
    """Return True if ``pos`` lies inside ``width`` and that bit is set."""
    _check_value(value)
    _check_position("pos", pos)
    _check_position("width", width)
    return pos < width and (value >> pos) & 1 == 1


def bit_range_mask(start: int, end: int) -> int:
    """Return a mask with ones in positions ``[start, end)``.

    Raises:
        ValueError: If ``start`` is negative or ``end`` is below ``start``.
    """
    _check_position("start", start)
    if end < start:
        raise ValueError(f"end ({end}) must not be below start ({start})")
    return ((1 << (end - start)) - 1) << start


def set_bit_positions(value: int, width: int) -> List[int]:
    """Return the ascending positions of set bits within the low ``width`` bits."""
    _check_value(value)
    _check_position("width", width)
    return [pos for pos in range(width) if (value >> pos) & 1]


def concatenate_patterns(patterns: Iterable[int], width: int) -> int:
    """Pack patterns into one integer, ``width`` bits per pattern.

    The first pattern ends up in the most significant chunk.

    Raises:
        ValueError: If ``patterns`` is empty, a pattern is negative, or a
            pattern does not fit in ``width`` bits.
    """
    _check_position("width", width)
    merged = None
    for pattern in patterns:
        _check_value(pattern)
        if pattern >> width:
            raise ValueError(f"Pattern {pattern} does not fit in {width} bits")
        merged = pattern if merged is None else (merged << width) | pattern
    if merged is None:
        raise ValueError("At least one pattern is required")
    return merged


def format_bits(value: int, width: int) -> str:
    """Render the low ``width`` bits of ``value`` as '0'/'1', LSB first."""
    _check_value(value)
    _check_position("width", width)
    return "".join("1" if (value >> pos) & 1 else "0" for pos in range(width))


def render_vertical(value: int, width: int) -> str:
    """Render a row of cells separated by '+' posts.

    A set bit is an open cell (blanks), an unset bit a closed one (dots).
    """
    _check_value(value)
    _check_position("width", width)
    cells = ("   " if (value >> pos) & 1 else "..." for pos in range(width))
    return "+" + "+".join(cells) + "+\n" if width else "+\n"


def render_horizontal(value: int, width: int) -> str:
    """Render a row of walls: a set bit is an opening, an unset bit a '|'."""
    _check_value(value)
    _check_position("width", width)
    parts = ["|"]
    for pos in range(width):
        parts.append("   ")
        parts.append(" " if (value >> pos) & 1 else "|")
    return "".join(parts) + "\n"
