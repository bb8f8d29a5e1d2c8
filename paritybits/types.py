"""Base types shared by the enumerator and the samplers."""

from __future__ import annotations

from enum import IntEnum

from paritybits.bitops import parity as _parity_bit

#: A non-negative integer read as a vector of bits. Width travels separately.
BitPattern = int


class Parity(IntEnum):
    """Parity of a pattern's popcount."""

    EVEN = 0
    ODD = 1

    @classmethod
    def from_string(cls, value: str) -> "Parity":
        """Parse a string into a Parity enum value.

        Args:
            value: Case-insensitive name ("even", "ODD", ...).

        Returns:
            The corresponding Parity member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid parity '{value}'. Valid values are: {valid}"
            ) from None

    @classmethod
    def of(cls, value: BitPattern) -> "Parity":
        """Return the parity of ``value``'s popcount."""
        return cls(_parity_bit(value))

    def flipped(self) -> "Parity":
        """Return the opposite parity."""
        return Parity(1 - self.value)
