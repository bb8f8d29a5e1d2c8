"""Configuration classes for paritybits components."""

from dataclasses import dataclass


@dataclass
class ParityConfig:
    """Tunables for enumeration and sampling front-ends."""

    # Width at which the enumerator starts logging a size warning
    large_width_warning: int = 24

    # Number of enumerated patterns the CLI prints unless told otherwise
    preview_limit: int = 64

    # Upper bound on the number of samples a single request may draw
    max_sample_count: int = 1_000_000

    def is_large_width(self, width: int) -> bool:
        """Return True when a width is expected to produce a very large sequence."""
        return width >= self.large_width_warning

    def check_sample_count(self, count: int) -> int:
        """Validate a requested sample count and return it unchanged."""
        if count < 1:
            raise ValueError(f"Sample count must be at least 1, got {count}")
        if count > self.max_sample_count:
            raise ValueError(
                f"Sample count {count} exceeds max_sample_count={self.max_sample_count}"
            )
        return count


# Global configuration instance
PARITY_CONFIG = ParityConfig()
